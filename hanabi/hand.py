from __future__ import annotations

from typing import List

from .deck import matches_hint
from .types import Hand, HeldTile, Hint, HintMarker


def apply_hint_to_hand(hand: Hand, hint: Hint) -> Hand:
    """Record ``hint`` on every matching held tile and log it at the end of the hand.

    Matching tiles get the hint appended to their own hint list, so repeats
    accumulate. A ``HintMarker`` is appended whether or not anything matched.
    Returns a new list; the held tiles inside it are updated in place.
    """
    applied: Hand = []
    for item in hand:
        if isinstance(item, HeldTile) and matches_hint(item.tile, hint):
            item.hints.append(hint)
        applied.append(item)
    applied.append(HintMarker(hint))
    return applied


def remove_card_from_hand(hand: Hand, idx: int) -> Hand:
    """Drop the item at ``idx``, then any markers left at the front of the hand."""
    minus_card = hand[:idx] + hand[idx + 1:]
    # Leading markers no longer describe any tile
    while minus_card and isinstance(minus_card[0], HintMarker):
        minus_card.pop(0)
    return minus_card


def held_tiles(hand: Hand) -> List[HeldTile]:
    return [item for item in hand if isinstance(item, HeldTile)]

from __future__ import annotations

from typing import Dict, List, Optional
import random

from .types import (
    COLORS,
    HAND_SIZES,
    RANK_COUNTS,
    RANKS,
    HeldTile,
    Hint,
    Tile,
    UnsupportedPlayerCount,
)


def full_deck() -> List[Tile]:
    tiles: List[Tile] = []
    for c in COLORS:
        for r in RANKS:
            for _ in range(RANK_COUNTS[r]):
                tiles.append(Tile(c, r))
    return tiles


def generate_deck(rng: Optional[random.Random] = None) -> List[Tile]:
    """Return the full tile multiset in uniformly random order.

    The front of the list is the top of the draw pile.
    """
    tiles = full_deck()
    (rng or random.Random()).shuffle(tiles)
    return tiles


def hand_size(num_players: int) -> int:
    size = HAND_SIZES.get(num_players)
    if size is None:
        raise UnsupportedPlayerCount(num_players)
    return size


def draw_tiles(deck: List[Tile], num_tiles: int) -> List[HeldTile]:
    # Takes from the top; the deck shrinks in place
    drawn: List[HeldTile] = []
    for _ in range(num_tiles):
        drawn.append(HeldTile(tile=deck.pop(0), hints=[]))
    return drawn


def matches_hint(tile: Tile, hint: Hint) -> bool:
    return hint == tile.c or hint == str(tile.r)


def discards_by_color(discard_pile: List[Tile]) -> Dict[str, List[Tile]]:
    grouped: Dict[str, List[Tile]] = {}
    for c in COLORS:
        grouped[c] = sorted((t for t in discard_pile if matches_hint(t, c)), key=lambda t: t.r)
    return grouped

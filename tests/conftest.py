from typing import Callable, Dict, List, Optional, Sequence, Union

import pytest

from hanabi import Game, HeldTile, HintMarker, MAX_HINTS, Tile
from hanabi.deck import full_deck


def _item(token: str) -> Union[HeldTile, HintMarker]:
    # "R1" is a held tile, "<R>" a hint marker
    if token.startswith("<"):
        return HintMarker(token[1:-1])
    return HeldTile(Tile.parse(token), [])


def build_game(
    hands: Dict[str, List[str]],
    play: Sequence[str] = (),
    discard: Sequence[str] = (),
    hints: int = MAX_HINTS,
    errors: int = 0,
    names: Optional[Dict[str, str]] = None,
    draw: Optional[Sequence[str]] = None,
) -> Game:
    """Game with fixed hands and piles; the draw pile is whatever is left of the deck."""
    participants = list(hands)
    held = {p: [_item(t) for t in tokens] for p, tokens in hands.items()}
    used = [t for tokens in hands.values() for t in tokens if not t.startswith("<")]
    used += list(play) + list(discard)
    if draw is None:
        deck = full_deck()
        for token in used:
            deck.remove(Tile.parse(token))
    else:
        deck = [Tile.parse(t) for t in draw]
    return Game(
        participants=participants,
        names=dict(names or {}),
        turn=participants[0],
        draw_pile=deck,
        play_pile=[Tile.parse(t) for t in play],
        discard_pile=[Tile.parse(t) for t in discard],
        hints=hints,
        errors=errors,
        hands=held,
    )


@pytest.fixture
def make_game() -> Callable[..., Game]:
    return build_game

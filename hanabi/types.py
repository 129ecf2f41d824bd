from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple, TypeAlias, Union

# Color legend, in table order
COLOR_MAP: Dict[str, str] = {
    "R": "Red",
    "G": "Green",
    "B": "Blue",
    "Y": "Yellow",
    "W": "White",
    "P": "Purple",
}
COLORS: Tuple[str, ...] = tuple(COLOR_MAP.keys())
RANKS: Tuple[int, ...] = (1, 2, 3, 4, 5)

# Copies of each rank per color
RANK_COUNTS: Dict[int, int] = {1: 3, 2: 2, 3: 2, 4: 2, 5: 1}
DECK_SIZE: int = len(COLORS) * sum(RANK_COUNTS.values())

# Player count -> tiles per hand
HAND_SIZES: Dict[int, int] = {2: 6, 3: 5, 4: 4, 5: 4}

MAX_HINTS: int = 8

# Hint tokens: a color letter or a rank digit
HINT_TOKENS: Tuple[str, ...] = COLORS + tuple(str(r) for r in RANKS)

PlayerId: TypeAlias = str
Hint: TypeAlias = str


class Rejected(Exception):
    """An action whose preconditions do not hold; the room is left as it was."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class UnsupportedPlayerCount(ValueError):
    def __init__(self, count: int) -> None:
        super().__init__(f"unsupported player count: {count}")
        self.count = count


@dataclass(frozen=True)
class Tile:
    c: str  # color letter
    r: int  # rank 1..5

    def __str__(self) -> str:
        return f"{self.c}{self.r}"

    @staticmethod
    def parse(token: str) -> "Tile":
        assert isinstance(token, str) and len(token) == 2, f"Invalid tile token: {token!r}"
        c, r = token[0], token[1]
        assert c in COLOR_MAP, f"Unknown color code: {c}"
        assert r.isdigit() and int(r) in RANKS, f"Invalid rank: {r}"
        return Tile(c, int(r))


# Shown in place of tiles a viewer is not allowed to see
UNKNOWN: str = "UU"


@dataclass
class HeldTile:
    tile: Tile
    hints: List[Hint] = field(default_factory=list)  # in the order received


# A log entry in the hand recording that a hint was given at this point
@dataclass(frozen=True)
class HintMarker:
    hint: Hint


HandItem: TypeAlias = Union[HeldTile, HintMarker]
Hand: TypeAlias = List[HandItem]

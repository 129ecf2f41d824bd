from __future__ import annotations

from typing import Dict, List

from .types import COLORS, Tile


def summarize_play_pile(play_pile: List[Tile]) -> Dict[str, int]:
    # Highest rank played per color, 0 for colors not started
    highest_by_color: Dict[str, int] = {c: 0 for c in COLORS}
    for tile in play_pile:
        highest_by_color[tile.c] = max(highest_by_color.get(tile.c, 0), tile.r)
    return highest_by_color


def is_legal_play(play_pile: List[Tile], tile: Tile) -> bool:
    summary = summarize_play_pile(play_pile)
    return tile.r == summary.get(tile.c, 0) + 1

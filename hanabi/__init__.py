from .types import (
    COLOR_MAP,
    COLORS,
    RANKS,
    MAX_HINTS,
    UNKNOWN,
    Tile,
    HeldTile,
    HintMarker,
    Hand,
    Rejected,
    UnsupportedPlayerCount,
)
from .deck import generate_deck, hand_size, draw_tiles, matches_hint, discards_by_color
from .hand import apply_hint_to_hand, remove_card_from_hand
from .pile import summarize_play_pile, is_legal_play
from .commands import Command, CommandError, parse_command
from .core import (
    WaitingRoom,
    Game,
    Room,
    Outcome,
    new_room,
    join,
    start_game,
    discard,
    play,
    give_hint,
    rename,
    apply_command,
    help_text,
    display_name,
    render_log_line,
    count_tiles,
    redact_hand,
    to_json,
    from_json,
)

__all__ = [
    "COLOR_MAP",
    "COLORS",
    "RANKS",
    "MAX_HINTS",
    "UNKNOWN",
    "Tile",
    "HeldTile",
    "HintMarker",
    "Hand",
    "Rejected",
    "UnsupportedPlayerCount",
    "generate_deck",
    "hand_size",
    "draw_tiles",
    "matches_hint",
    "discards_by_color",
    "apply_hint_to_hand",
    "remove_card_from_hand",
    "summarize_play_pile",
    "is_legal_play",
    "Command",
    "CommandError",
    "parse_command",
    "WaitingRoom",
    "Game",
    "Room",
    "Outcome",
    "new_room",
    "join",
    "start_game",
    "discard",
    "play",
    "give_hint",
    "rename",
    "apply_command",
    "help_text",
    "display_name",
    "render_log_line",
    "count_tiles",
    "redact_hand",
    "to_json",
    "from_json",
]

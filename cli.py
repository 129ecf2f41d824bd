from __future__ import annotations

from typing import List, Optional

from hanabi import (
    COLOR_MAP,
    COLORS,
    CommandError,
    Game,
    Hand,
    HeldTile,
    Rejected,
    Room,
    apply_command,
    discards_by_color,
    display_name,
    help_text,
    new_room,
    parse_command,
    render_log_line,
    summarize_play_pile,
)
from hanabi.commands import Help


def print_legend() -> None:
    items = ", ".join(f"{k}={v}" for k, v in COLOR_MAP.items())
    print(f"Legend: {items}")


def format_hand(hand: Hand, hidden: bool) -> str:
    parts: List[str] = []
    for idx, item in enumerate(hand):
        if isinstance(item, HeldTile):
            tile = "??" if hidden else str(item.tile)
            hints = "".join(item.hints)
            parts.append(f"{idx}:{tile}" + (f"[{hints}]" if hints else ""))
        else:
            parts.append(f"{idx}:<{item.hint}>")
    return " ".join(parts)


def rotate_to_last(players: List[str], viewer: Optional[str]) -> List[str]:
    # Players after the viewer first, the viewer at the bottom
    if viewer not in players:
        return list(players)
    idx = players.index(viewer)
    return players[idx + 1:] + players[:idx + 1]


def print_room(room: Room, viewer: Optional[str]) -> None:
    if not isinstance(room, Game):
        names = ", ".join(display_name(room, p) for p in room.participants) or "(nobody)"
        print(f"Waiting room: {names}")
        return
    summary = summarize_play_pile(room.play_pile)
    print(f"Draws: {len(room.draw_pile)}  Hints: {room.hints}  Errors: {room.errors}")
    print("Plays: " + " ".join(f"{c}{summary[c]}" for c in COLORS))
    grouped = discards_by_color(room.discard_pile)
    print("Discards: " + " ".join(" ".join(str(t) for t in grouped[c]) for c in COLORS if grouped[c]))
    for p in rotate_to_last(room.participants, viewer):
        marker = "*" if p == room.turn else " "
        print(f"{marker} {display_name(room, p)}: {format_hand(room.hands[p], hidden=(p == viewer))}")


def handle_line(room: Room, line: str) -> Room:
    """Run one ``<participant>: <command>`` line and return the resulting room."""
    actor, sep, text = line.partition(":")
    actor = actor.strip()
    if not sep or not actor:
        print("Expected '<player>: <command>'")
        return room
    try:
        command = parse_command(text)
    except CommandError as e:
        print(e)
        return room
    if isinstance(command, Help):
        print(help_text(room))
        return room
    try:
        outcome = apply_command(room, actor, command)
    except Rejected as e:
        print(e.reason)
        return room
    print(render_log_line(outcome.log, outcome.room.names))
    print_room(outcome.room, viewer=actor)
    return outcome.room


def main() -> None:
    print("HANABI hot-seat console")
    print_legend()
    print("Enter '<player>: <command>', e.g. 'alice: join', 'alice: start', 'bob: hint al R'.")
    room: Room = new_room()
    while True:
        try:
            line = input("> ").strip()
        except EOFError:
            break
        if not line:
            continue
        if line in ("quit", "exit"):
            break
        room = handle_line(room, line)


if __name__ == "__main__":
    main()

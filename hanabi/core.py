from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union, cast
import logging
import random
import re

from .commands import Command, Discard, Hint, Join, Play, Rename, Start
from .deck import discards_by_color, draw_tiles, generate_deck, hand_size
from .hand import apply_hint_to_hand, held_tiles, remove_card_from_hand
from .pile import is_legal_play, summarize_play_pile
from .types import (
    DECK_SIZE,
    HINT_TOKENS,
    MAX_HINTS,
    UNKNOWN,
    Hand,
    HeldTile,
    HintMarker,
    PlayerId,
    Rejected,
    Tile,
    UnsupportedPlayerCount,
)

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


def _clone_hand(hand: Hand) -> Hand:
    # Markers and tiles are immutable; only hint lists need copying
    return [HeldTile(item.tile, list(item.hints)) if isinstance(item, HeldTile) else item for item in hand]


@dataclass
class WaitingRoom:
    participants: List[PlayerId] = field(default_factory=list)
    names: Dict[PlayerId, str] = field(default_factory=dict)

    def clone(self) -> "WaitingRoom":
        return WaitingRoom(participants=list(self.participants), names=dict(self.names))


@dataclass
class Game:
    participants: List[PlayerId]
    names: Dict[PlayerId, str]
    turn: PlayerId
    draw_pile: List[Tile]  # front is the top
    play_pile: List[Tile]
    discard_pile: List[Tile]
    hints: int
    errors: int
    hands: Dict[PlayerId, Hand]

    def clone(self) -> "Game":
        return Game(
            participants=list(self.participants),
            names=dict(self.names),
            turn=self.turn,
            draw_pile=list(self.draw_pile),
            play_pile=list(self.play_pile),
            discard_pile=list(self.discard_pile),
            hints=self.hints,
            errors=self.errors,
            hands={p: _clone_hand(h) for p, h in self.hands.items()},
        )


Room = Union[WaitingRoom, Game]


@dataclass(frozen=True)
class Outcome:
    room: Room
    log: str


def _applied(room: Room, line: str) -> Outcome:
    logger.debug("applied: %s", line)
    return Outcome(room=room, log=line)


def _reject(reason: str) -> Rejected:
    logger.debug("rejected: %s", reason)
    return Rejected(reason)


def new_room() -> WaitingRoom:
    return WaitingRoom()


def display_name(room: Room, participant: PlayerId) -> str:
    return room.names.get(participant) or participant


_RENAME_LINE = re.compile(r"^\S+ set name to ")


def render_log_line(text: str, names: Dict[PlayerId, str]) -> str:
    """Show participant ids in ``text`` by their display names.

    All ids are replaced in one pass, so an inserted name is never rewritten
    again. Rename lines are kept as written: they record the id and the name
    it took at the time.
    """
    if not names or _RENAME_LINE.match(text):
        return text
    ids = sorted(names, key=len, reverse=True)
    pattern = re.compile(r"\b(?:" + "|".join(re.escape(pid) for pid in ids) + r")\b")
    return pattern.sub(lambda m: names[m.group(0)], text)


def help_text(room: Room) -> str:
    if isinstance(room, WaitingRoom):
        return "this game hasn't started yet, try 'start'"
    return "you can 'discard <tile_idx>', 'play <tile_idx>', or 'hint <player> <hint>'"


def count_tiles(game: Game) -> int:
    in_hands = sum(len(held_tiles(h)) for h in game.hands.values())
    return len(game.draw_pile) + len(game.play_pile) + len(game.discard_pile) + in_hands


def _player_after(participants: List[PlayerId], p: PlayerId) -> PlayerId:
    idx = participants.index(p)
    return participants[(idx + 1) % len(participants)]


def _require_turn(room: Room, actor: PlayerId) -> Game:
    if not isinstance(room, Game):
        raise _reject("this game hasn't started yet")
    if room.turn != actor:
        raise _reject("not your turn")
    return room


def _held_at(game: Game, actor: PlayerId, index: int, verb: str) -> HeldTile:
    hand = game.hands[actor]
    if not 0 <= index < len(hand) or not isinstance(hand[index], HeldTile):
        raise _reject(f"can't {verb} that, try again")
    return cast(HeldTile, hand[index])


def _remove_and_refill(game: Game, actor: PlayerId, index: int) -> None:
    next_hand = remove_card_from_hand(game.hands[actor], index)
    if game.draw_pile:
        next_hand.extend(draw_tiles(game.draw_pile, 1))
    game.hands[actor] = next_hand


# --- Room lifecycle ---

def join(room: Room, participant: PlayerId) -> Outcome:
    if isinstance(room, Game):
        raise _reject("game has already started")
    if participant in room.participants:
        raise _reject("already joined")
    nxt = room.clone()
    nxt.participants.append(participant)
    return _applied(nxt, f"{participant} joined")


def start_game(room: Room, rng: Optional[random.Random] = None) -> Outcome:
    if isinstance(room, Game):
        raise _reject("game has already started")
    players = list(room.participants)
    try:
        size = hand_size(len(players))
    except UnsupportedPlayerCount:
        raise _reject(f"wrong number of players, we can support 2--5, you have {len(players)}") from None
    deck = generate_deck(rng)
    hands: Dict[PlayerId, Hand] = {}
    for p in players:
        hands[p] = list(draw_tiles(deck, size))
    game = Game(
        participants=players,
        names=dict(room.names),
        turn=players[0],
        draw_pile=deck,
        play_pile=[],
        discard_pile=[],
        hints=MAX_HINTS,
        errors=0,
        hands=hands,
    )
    return _applied(game, "game has begun!")


def rename(room: Room, actor: PlayerId, name: str) -> Outcome:
    if not re.search(r"\w", name):
        raise _reject(f"invalid name: {name}")
    nxt = room.clone()
    nxt.names[actor] = name
    return _applied(nxt, f"{actor} set name to {name}")


# --- Turn actions ---

def discard(room: Room, actor: PlayerId, index: int) -> Outcome:
    game = _require_turn(room, actor)
    item = _held_at(game, actor, index, "discard")
    nxt = game.clone()
    nxt.discard_pile.append(item.tile)
    nxt.hints = min(nxt.hints + 1, MAX_HINTS)
    _remove_and_refill(nxt, actor, index)
    nxt.turn = _player_after(nxt.participants, actor)
    return _applied(nxt, f"{actor} discarded {item.tile}")


def play(room: Room, actor: PlayerId, index: int) -> Outcome:
    """Play the tile at ``index``.

    A tile that does not continue its color's run is not refused: it goes to
    the discard pile and costs an error instead.
    """
    game = _require_turn(room, actor)
    item = _held_at(game, actor, index, "play")
    nxt = game.clone()
    if is_legal_play(nxt.play_pile, item.tile):
        nxt.play_pile.append(item.tile)
        if item.tile.r == 5:
            nxt.hints = min(nxt.hints + 1, MAX_HINTS)
        line = f"{actor} played {item.tile}"
    else:
        nxt.discard_pile.append(item.tile)
        nxt.errors += 1
        line = f"{actor} tried to play {item.tile}"
    _remove_and_refill(nxt, actor, index)
    nxt.turn = _player_after(nxt.participants, actor)
    return _applied(nxt, line)


def give_hint(room: Room, actor: PlayerId, target_prefix: str, hint: str) -> Outcome:
    game = _require_turn(room, actor)
    if game.hints <= 0:
        raise _reject("no hints left")
    prefix = target_prefix.lower()
    matching = [
        p for p in game.participants
        if p != actor and display_name(game, p).lower().startswith(prefix)
    ]
    if not matching:
        raise _reject("prefix doesn't match any of the other players")
    if len(matching) > 1:
        raise _reject(f"ambiguous prefix, matches {len(matching)} players")
    target = matching[0]
    h = hint.upper()
    if h not in HINT_TOKENS:
        raise _reject(f"invalid hint: {hint}")
    nxt = game.clone()
    nxt.hints -= 1
    nxt.hands[target] = apply_hint_to_hand(nxt.hands[target], h)
    nxt.turn = _player_after(nxt.participants, actor)
    return _applied(nxt, f"{actor} told {target} about {h}")


def apply_command(room: Room, actor: PlayerId, command: Command, rng: Optional[random.Random] = None) -> Outcome:
    if isinstance(command, Join):
        return join(room, actor)
    if isinstance(command, Start):
        return start_game(room, rng)
    if isinstance(command, Discard):
        return discard(room, actor, command.index)
    if isinstance(command, Play):
        return play(room, actor, command.index)
    if isinstance(command, Hint):
        return give_hint(room, actor, command.target, command.hint)
    if isinstance(command, Rename):
        return rename(room, actor, command.name)
    raise TypeError(f"Not a state-changing command: {command!r}")


# --- JSON serialization (pure, no I/O) ---

def _item_to_obj(item: Union[HeldTile, HintMarker], hide_tile: bool) -> Dict[str, object]:
    if isinstance(item, HintMarker):
        return {"hint": item.hint}
    return {"tile": UNKNOWN if hide_tile else str(item.tile), "hints": list(item.hints)}


def redact_hand(hand: Hand) -> List[Dict[str, object]]:
    # Owner's view: hints stay visible, tile identities do not
    return [_item_to_obj(item, hide_tile=True) for item in hand]


def _obj_to_item(obj: object) -> Union[HeldTile, HintMarker]:
    assert isinstance(obj, dict), "Invalid hand item"
    if "hint" in obj:
        h = obj["hint"]
        assert h in HINT_TOKENS, f"Invalid hint: {h}"
        return HintMarker(cast(str, h))
    token = obj.get("tile")
    assert token != UNKNOWN, "Cannot restore a redacted tile"
    hints = obj.get("hints", [])
    assert isinstance(hints, list) and all(h in HINT_TOKENS for h in hints), "Invalid hint list"
    return HeldTile(Tile.parse(cast(str, token)), [str(h) for h in hints])


def to_json(room: Room, viewer: Optional[PlayerId] = None) -> Dict[str, object]:
    """JSON-ready dict of ``room``.

    Without a viewer this is the full document for storage. With one, the
    viewer's own tiles are hidden and the draw pile order is left out.
    """
    data: Dict[str, object] = {
        "schemaVersion": SCHEMA_VERSION,
        "participants": list(room.participants),
        "names": dict(room.names),
    }
    if isinstance(room, WaitingRoom):
        data["kind"] = "waiting_room"
        return data
    if not isinstance(room, Game):
        raise TypeError(f"Unknown room type: {type(room).__name__}")

    hands_obj: Dict[str, object] = {}
    for p, hand in room.hands.items():
        if p == viewer:
            hands_obj[p] = redact_hand(hand)
        else:
            hands_obj[p] = [_item_to_obj(item, hide_tile=False) for item in hand]

    data.update({
        "kind": "game",
        "turn": room.turn,
        "drawCount": len(room.draw_pile),
        "playPile": [str(t) for t in room.play_pile],
        "discardPile": [str(t) for t in room.discard_pile],
        "hints": int(room.hints),
        "errors": int(room.errors),
        "hands": hands_obj,
        # Derived, for display only
        "playSummary": summarize_play_pile(room.play_pile),
        "discardsByColor": {c: [str(t) for t in ts] for c, ts in discards_by_color(room.discard_pile).items()},
    })
    if viewer is None:
        data["drawPile"] = [str(t) for t in room.draw_pile]
    return data


def from_json(data: Dict[str, object]) -> Room:
    assert isinstance(data, dict), "Data must be a dict"
    assert data.get("schemaVersion") == SCHEMA_VERSION, "Unsupported schemaVersion"

    participants = data.get("participants")
    names = data.get("names", {})
    assert isinstance(participants, list) and all(isinstance(p, str) for p in participants), "participants list required"
    assert len(set(participants)) == len(participants), "Duplicate participant"
    assert isinstance(names, dict), "names must be a dict"
    names_d = {str(k): str(v) for k, v in names.items()}

    kind = data.get("kind")
    if kind == "waiting_room":
        return WaitingRoom(participants=list(participants), names=names_d)
    assert kind == "game", f"Unknown room kind: {kind}"

    turn = data.get("turn")
    assert turn in participants, "turn must be a participant"
    draw_obj = data.get("drawPile")
    assert isinstance(draw_obj, list), "drawPile required (redacted views cannot be restored)"
    hints = data.get("hints")
    errors = data.get("errors")
    assert isinstance(hints, int) and 0 <= hints <= MAX_HINTS, "hints must be 0..8"
    assert isinstance(errors, int) and errors >= 0, "errors must be >= 0"

    hands_obj = data.get("hands")
    assert isinstance(hands_obj, dict) and set(hands_obj) == set(participants), "one hand per participant"
    hands: Dict[PlayerId, Hand] = {}
    for p in participants:
        items = hands_obj[p]
        assert isinstance(items, list), "hand must be a list"
        hands[p] = [_obj_to_item(obj) for obj in items]

    game = Game(
        participants=list(participants),
        names=names_d,
        turn=cast(str, turn),
        draw_pile=[Tile.parse(t) for t in draw_obj],
        play_pile=[Tile.parse(t) for t in cast(list, data.get("playPile", []))],
        discard_pile=[Tile.parse(t) for t in cast(list, data.get("discardPile", []))],
        hints=hints,
        errors=errors,
        hands=hands,
    )
    assert count_tiles(game) == DECK_SIZE, f"Expected {DECK_SIZE} tiles, found {count_tiles(game)}"
    return game

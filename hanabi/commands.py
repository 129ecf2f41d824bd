"""Parsed player commands and the free-text parser that produces them."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, TypeAlias, Union
import re


class CommandError(ValueError):
    pass


@dataclass(frozen=True)
class Join:
    pass


@dataclass(frozen=True)
class Start:
    pass


@dataclass(frozen=True)
class Discard:
    index: int


@dataclass(frozen=True)
class Play:
    index: int


@dataclass(frozen=True)
class Hint:
    target: str  # display-name prefix
    hint: str


@dataclass(frozen=True)
class Rename:
    name: str


@dataclass(frozen=True)
class Help:
    pass


Command: TypeAlias = Union[Join, Start, Discard, Play, Hint, Rename, Help]

_INDEX_RE = re.compile(r"^[+-]?\d+$")


def _parse_index(verb: str, args: List[str]) -> int:
    if len(args) != 1 or not _INDEX_RE.match(args[0]):
        raise CommandError(f"usage: {verb} <tile_idx>")
    return int(args[0])


def _help(args: List[str]) -> Command:
    return Help()


def _name(args: List[str]) -> Command:
    if not args:
        raise CommandError("usage: name <name>")
    return Rename(" ".join(args))


def _join(args: List[str]) -> Command:
    return Join()


def _start(args: List[str]) -> Command:
    return Start()


def _hint(args: List[str]) -> Command:
    if len(args) != 2:
        raise CommandError("usage: hint <player> <hint>")
    return Hint(target=args[0], hint=args[1])


def _discard(args: List[str]) -> Command:
    return Discard(_parse_index("discard", args))


def _play(args: List[str]) -> Command:
    return Play(_parse_index("play", args))


# Matched by prefix, in this order
_VERBS: Dict[str, Callable[[List[str]], Command]] = {
    "help": _help,
    "?": _help,
    "name": _name,
    "join": _join,
    "start": _start,
    "hint": _hint,
    "discard": _discard,
    "play": _play,
}


def parse_command(text: str) -> Command:
    line = text.strip()
    for verb, build in _VERBS.items():
        if line.startswith(verb):
            rest = line[len(verb):].strip()
            args = rest.split() if rest else []
            return build(args)
    raise CommandError(f"{line} does not match any of {', '.join(_VERBS)}")

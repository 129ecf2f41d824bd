import pytest

from hanabi import CommandError, parse_command
from hanabi.commands import Discard, Help, Hint, Join, Play, Rename, Start


def test_parse_each_verb():
    assert parse_command("start") == Start()
    assert parse_command("join") == Join()
    assert parse_command("  discard 3 ") == Discard(3)
    assert parse_command("play 0") == Play(0)
    assert parse_command("hint bo r") == Hint(target="bo", hint="r")
    assert parse_command("name Ada Lovelace") == Rename("Ada Lovelace")
    assert parse_command("help") == Help()
    assert parse_command("?") == Help()


@pytest.mark.parametrize("text", ["dance", "play x", "discard", "hint bob", "name", ""])
def test_parse_rejects_malformed(text):
    with pytest.raises(CommandError):
        parse_command(text)

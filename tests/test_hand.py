from hanabi import HeldTile, HintMarker, Tile, apply_hint_to_hand, remove_card_from_hand


def _held(token, hints=None):
    return HeldTile(Tile.parse(token), list(hints or []))


def test_hint_marks_matching_tiles_and_appends_marker():
    hand = [_held("R1"), _held("G1"), _held("R4")]
    out = apply_hint_to_hand(hand, "R")
    assert [i.hints for i in out[:3]] == [["R"], [], ["R"]]
    assert out[-1] == HintMarker("R")
    assert len(out) == 4


def test_hints_accumulate_in_order_with_repeats():
    hand = [_held("R1")]
    hand = apply_hint_to_hand(hand, "1")
    hand = apply_hint_to_hand(hand, "R")
    hand = apply_hint_to_hand(hand, "1")
    assert hand[0].hints == ["1", "R", "1"]
    assert hand[1:] == [HintMarker("1"), HintMarker("R"), HintMarker("1")]


def test_hint_matching_nothing_still_logs_marker():
    hand = [_held("B2"), HintMarker("R")]
    out = apply_hint_to_hand(hand, "5")
    assert out[0].hints == []
    assert out == [hand[0], HintMarker("R"), HintMarker("5")]


def test_remove_drops_exactly_the_item():
    hand = [_held("R1"), _held("G2"), _held("B3")]
    assert remove_card_from_hand(hand, 1) == [hand[0], hand[2]]
    assert len(hand) == 3


def test_remove_strips_leading_markers_only():
    hand = [_held("R1"), HintMarker("R"), HintMarker("2"), _held("G2"), HintMarker("G"), _held("B3"), HintMarker("B")]
    out = remove_card_from_hand(hand, 0)
    # interior and trailing markers stay
    assert out == [hand[3], HintMarker("G"), hand[5], HintMarker("B")]


def test_remove_can_empty_a_hand_of_markers():
    hand = [_held("R1"), HintMarker("R"), HintMarker("1")]
    assert remove_card_from_hand(hand, 0) == []


def test_remove_from_middle_keeps_front_tile():
    hand = [_held("R1"), HintMarker("R"), _held("G2")]
    assert remove_card_from_hand(hand, 2) == [hand[0], HintMarker("R")]

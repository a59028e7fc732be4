from legend.output import RollResult


def test_single_value_renders_padded_total():
    assert str(RollResult((7,))) == "  7"
    assert str(RollResult((20,))) == " 20"


def test_multiple_values_render_breakdown():
    assert str(RollResult((6, 3))) == "  9 = (6 + 3)"
    assert str(RollResult((10, 10, 8, 1))) == " 29 = (10 + 10 + 8 + 1)"


def test_empty_result():
    assert str(RollResult(())) == "  0 = ()"


def test_total_and_dict():
    result = RollResult((4, 2, 1))
    assert result.total() == 7
    assert len(result) == 3
    assert list(result) == [4, 2, 1]
    assert result.to_dict() == {"values": [4, 2, 1], "total": 7}

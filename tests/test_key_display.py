import pytest

from plotscript.key import (
    Horizontal,
    Inside,
    Justification,
    Order,
    Outside,
    Position,
    Stacked,
    Vertical,
    display,
    display_placement,
)


@pytest.mark.parametrize("enum_type", [Vertical, Horizontal, Justification, Order, Stacked])
def test_every_member_has_a_token(enum_type):
    tokens = [display(member) for member in enum_type]
    assert all(tokens)
    assert len(set(tokens)) == len(tokens)


def test_known_tokens():
    assert display(Vertical.TOP) == "top"
    assert display(Horizontal.CENTER) == "center"
    assert display(Justification.LEFT) == "Left"
    assert display(Order.SAMPLE_THEN_TEXT) == "reverse"
    assert display(Order.TEXT_THEN_SAMPLE) == "noreverse"
    assert display(Stacked.HORIZONTALLY) == "horizontally"


def test_placement_tokens():
    assert display_placement(Inside(Vertical.TOP, Horizontal.LEFT)) == "inside"
    assert display_placement(Outside(Vertical.TOP, Horizontal.LEFT)) == "outside"


def test_inside_and_outside_are_distinct():
    assert Inside(Vertical.TOP, Horizontal.LEFT) != Outside(Vertical.TOP, Horizontal.LEFT)
    assert Inside(Vertical.TOP, Horizontal.LEFT) == Inside(Vertical.TOP, Horizontal.LEFT)


def test_bare_position_cannot_be_constructed():
    with pytest.raises(TypeError):
        Position(Vertical.TOP, Horizontal.LEFT)

import pytest
from pydantic import ValidationError

from selectorkit.models.domain import Fragment, Rectangle
from selectorkit.types import FragmentKind


@pytest.mark.unit
class TestFragment:
    def test_attribute_value_wrapped(self) -> None:
        fragment = Fragment.build(FragmentKind.ATTRIBUTE, "disabled")
        assert fragment.value == "[disabled]"
        assert fragment.prefix_glyph == ""
        assert fragment.render() == "[disabled]"

    def test_id_fragment(self) -> None:
        fragment = Fragment.build(FragmentKind.ID, "main")
        assert fragment.prefix_glyph == "#"
        assert fragment.order_rank == 1
        assert fragment.is_one_of_a_kind is True
        assert fragment.is_element_kind is False
        assert fragment.render() == "#main"

    def test_element_fragment(self) -> None:
        fragment = Fragment.build(FragmentKind.ELEMENT, "div")
        assert fragment.is_element_kind is True
        assert fragment.order_rank == 0
        assert fragment.render() == "div"

    def test_pseudo_element_fragment(self) -> None:
        fragment = Fragment.build(FragmentKind.PSEUDO_ELEMENT, "after")
        assert fragment.prefix_glyph == "::"
        assert fragment.order_rank == 5
        assert fragment.is_one_of_a_kind is True

    def test_class_is_repeatable(self) -> None:
        fragment = Fragment.build(FragmentKind.CLASS, "btn")
        assert fragment.is_one_of_a_kind is False
        assert fragment.render() == ".btn"

    def test_fragment_is_frozen(self) -> None:
        fragment = Fragment.build(FragmentKind.CLASS, "btn")
        with pytest.raises(ValidationError):
            fragment.value = "other"  # type: ignore[misc]


@pytest.mark.unit
class TestRectangle:
    def test_fields_and_area(self) -> None:
        rect = Rectangle(width=10, height=20)
        assert rect.width == 10
        assert rect.height == 20
        assert rect.get_area() == 200

    def test_int_sides_stay_int(self) -> None:
        rect = Rectangle(width=3, height=4)
        assert isinstance(rect.width, int)
        assert isinstance(rect.get_area(), int)

    def test_float_sides(self) -> None:
        assert Rectangle(width=2.5, height=4).get_area() == pytest.approx(10.0)

    def test_rectangle_is_frozen(self) -> None:
        rect = Rectangle(width=1, height=1)
        with pytest.raises(ValidationError):
            rect.width = 5  # type: ignore[misc]
        assert rect.get_area() == 1

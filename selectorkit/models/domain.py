"""Value objects shared across selectorkit components."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from selectorkit.constants import FRAGMENT_RANKS, ONE_OF_A_KIND, PREFIX_GLYPHS
from selectorkit.types import FragmentKind


class Fragment(BaseModel):
    """One simple-selector token such as ``#main`` or ``::before``."""

    model_config = ConfigDict(frozen=True)

    kind: FragmentKind
    value: str

    @classmethod
    def build(cls, kind: FragmentKind, value: str) -> Fragment:
        """Create a fragment, wrapping attribute expressions in brackets."""
        if kind == FragmentKind.ATTRIBUTE:
            value = f"[{value}]"
        return cls(kind=kind, value=value)

    @property
    def prefix_glyph(self) -> str:
        return PREFIX_GLYPHS[self.kind]

    @property
    def is_element_kind(self) -> bool:
        return self.kind == FragmentKind.ELEMENT

    @property
    def order_rank(self) -> int:
        return FRAGMENT_RANKS[self.kind]

    @property
    def is_one_of_a_kind(self) -> bool:
        return self.kind in ONE_OF_A_KIND

    def render(self) -> str:
        return self.prefix_glyph + self.value


class Rectangle(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: int | float
    height: int | float

    def get_area(self) -> int | float:
        return self.width * self.height

"""Chainable CSS selector builder.

Each compound selector can consist of element, id, class, attribute,
pseudo-class and pseudo-element parts, in that order::

    element#id.class[attr]:pseudo-class::pseudo-element

Class, attribute and pseudo-class parts may repeat. Compound selectors are
joined with the combinators ``' '``, ``'>'``, ``'+'`` and ``'~'`` via
:meth:`SelectorChain.combine`.

Usage::

    builder = css_selector_builder
    builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    # => 'a[href$=".png"]:focus'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import structlog

from selectorkit.constants import DUPLICATE_PART_MESSAGE, OUT_OF_ORDER_MESSAGE
from selectorkit.exceptions import DuplicateSelectorPartError, OutOfOrderError
from selectorkit.models.domain import Fragment
from selectorkit.types import FragmentKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

logger = structlog.get_logger(__name__)


class Stringifiable(Protocol):
    def stringify(self) -> str: ...


def check_one_of_a_kind(existing: Sequence[Fragment], fragment: Fragment) -> None:
    """Reject a second element, id or pseudo-element in one compound selector."""
    if not fragment.is_one_of_a_kind:
        return
    if any(part.kind == fragment.kind for part in existing):
        logger.debug("selector_part_rejected", kind=fragment.kind, reason="duplicate")
        raise DuplicateSelectorPartError(DUPLICATE_PART_MESSAGE)


def check_order(existing: Sequence[Fragment], fragment: Fragment) -> None:
    """Reject a fragment whose rank is lower than one already appended."""
    ranks = [part.order_rank for part in existing]
    ranks.append(fragment.order_rank)
    if ranks != sorted(ranks):
        logger.debug("selector_part_rejected", kind=fragment.kind, reason="out_of_order")
        raise OutOfOrderError(OUT_OF_ORDER_MESSAGE)


class CombinedSelector:
    """Result of :meth:`SelectorChain.combine`; renders the same text every time."""

    def __init__(self, pieces: Iterable[str]) -> None:
        self._pieces = tuple(pieces)

    def stringify(self) -> str:
        return "".join(self._pieces)

    def __repr__(self) -> str:
        return f"CombinedSelector({self.stringify()!r})"


class SelectorChain:
    """An in-progress compound selector.

    Every fragment method returns a new chain; the receiver keeps its own
    fragments, so chains branching from the same point never share state.
    """

    def __init__(self, fragments: Iterable[Fragment] = ()) -> None:
        self._fragments: list[Fragment] = list(fragments)

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        """Snapshot of the pending fragments (does not consume the chain)."""
        return tuple(self._fragments)

    def element(self, name: str) -> SelectorChain:
        return self._append(Fragment.build(FragmentKind.ELEMENT, name))

    def id(self, name: str) -> SelectorChain:
        return self._append(Fragment.build(FragmentKind.ID, name))

    def class_(self, name: str) -> SelectorChain:
        return self._append(Fragment.build(FragmentKind.CLASS, name))

    def attr(self, expression: str) -> SelectorChain:
        return self._append(Fragment.build(FragmentKind.ATTRIBUTE, expression))

    def pseudo_class(self, name: str) -> SelectorChain:
        return self._append(Fragment.build(FragmentKind.PSEUDO_CLASS, name))

    def pseudo_element(self, name: str) -> SelectorChain:
        return self._append(Fragment.build(FragmentKind.PSEUDO_ELEMENT, name))

    def stringify(self) -> str:
        """Render the pending fragments and empty the chain."""
        rendered = "".join(part.render() for part in self._fragments)
        self._fragments.clear()
        return rendered

    def combine(self, *parts: Stringifiable | str) -> CombinedSelector:
        """Join selectors and combinator tokens into one selector.

        Selectors (anything with ``stringify()``) are rendered immediately;
        token strings are padded with one space on each side. The receiver's
        own fragments are not used.
        """
        pieces: list[str] = []
        for part in parts:
            if isinstance(part, str):
                pieces.append(f" {part} ")
            elif callable(getattr(part, "stringify", None)):
                pieces.append(part.stringify())
            else:
                pieces.append(str(part))
        combined = CombinedSelector(pieces)
        logger.debug("selectors_combined", parts=len(parts))
        return combined

    def _append(self, fragment: Fragment) -> SelectorChain:
        if self._fragments:
            check_one_of_a_kind(self._fragments, fragment)
            check_order(self._fragments, fragment)
        return SelectorChain([*self._fragments, fragment])

    def __repr__(self) -> str:
        pending = "".join(part.render() for part in self._fragments)
        return f"SelectorChain({pending!r})"


class SelectorBuilder(SelectorChain):
    """Entry point for building selectors. Holds no fragments of its own."""

    def __init__(self) -> None:
        super().__init__()


css_selector_builder = SelectorBuilder()

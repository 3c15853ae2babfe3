"""Fixed selector vocabulary: ranks, prefixes and error messages."""

from selectorkit.types import FragmentKind

# Legal order inside one compound selector, lowest first
FRAGMENT_RANKS: dict[FragmentKind, int] = {
    FragmentKind.ELEMENT: 0,
    FragmentKind.ID: 1,
    FragmentKind.CLASS: 2,
    FragmentKind.ATTRIBUTE: 3,
    FragmentKind.PSEUDO_CLASS: 4,
    FragmentKind.PSEUDO_ELEMENT: 5,
}

PREFIX_GLYPHS: dict[FragmentKind, str] = {
    FragmentKind.ELEMENT: "",
    FragmentKind.ID: "#",
    FragmentKind.CLASS: ".",
    FragmentKind.ATTRIBUTE: "",
    FragmentKind.PSEUDO_CLASS: ":",
    FragmentKind.PSEUDO_ELEMENT: "::",
}

ONE_OF_A_KIND: frozenset[FragmentKind] = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

DUPLICATE_PART_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time inside the selector"
)
OUT_OF_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)

"""Rectangle factory."""

from selectorkit.models.domain import Rectangle


def make_rectangle(width: float, height: float) -> Rectangle:
    """Return a rectangle with the given sides and a ``get_area()`` method."""
    return Rectangle(width=width, height=height)

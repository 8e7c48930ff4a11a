"""Rectangle containment used to attribute group membership."""

from .types import Rect


def encloses(outer: Rect, inner: Rect) -> bool:
    """True when ``outer`` fully contains ``inner`` (bounds inclusive)."""
    return (
        outer.left <= inner.left
        and outer.right >= inner.right
        and outer.top <= inner.top
        and outer.bottom >= inner.bottom
    )

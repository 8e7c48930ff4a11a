"""
Collaborators supplied by the host application.

The engine only reads graph structure through these and only writes the
display/opacity properties of the presentation surface.
"""

from typing import Callable, List, Optional, Protocol, Sequence

from .core.types import GraphSnapshot
from .presentation import PresentationSurface


class CanvasHost(Protocol):
    """Graph snapshot provider plus the live canvas it describes."""

    @property
    def presentation(self) -> PresentationSurface: ...

    def is_canvas_active(self) -> bool:
        """True when the active view is a canvas."""
        ...

    def snapshot(self) -> Optional[GraphSnapshot]:
        """Nodes, edges and selection as of now, or None if no canvas is loaded."""
        ...

    def deselect_all(self) -> None: ...


class MetadataSource(Protocol):
    def tags_for(self, file: str) -> Optional[List[str]]:
        """Tags of a file reference, or None when the file is unknown."""
        ...

    def all_tags(self) -> List[str]:
        """The global tag universe."""
        ...


class TagPicker(Protocol):
    def open(self, candidates: Sequence[str], on_choose: Callable[[str], None]) -> None:
        """
        Present ``candidates`` and call ``on_choose`` with each pick.

        The picker may call ``on_choose`` any number of times, including
        never.
        """
        ...


class Notifier(Protocol):
    def notify(self, message: str) -> None: ...

"""
Filter session state.

Holds the accumulated shown-set and the active display mode for the
lifetime of a host process. Non-additive commands replace the shown-set;
additive commands union into it. The display mode survives both.
"""

import logging
from typing import FrozenSet, Iterable, Set

from .types import DisplayMode

logger = logging.getLogger(__name__)


class FilterSession:
    """Process-wide filter memory owned by the command dispatcher."""

    def __init__(self, mode: DisplayMode = DisplayMode.HIDE):
        self.mode = DisplayMode(mode)
        self._shown: Set[str] = set()

    @property
    def shown(self) -> FrozenSet[str]:
        return frozenset(self._shown)

    def toggle_mode(self) -> DisplayMode:
        self.mode = self.mode.toggled()
        logger.info("Display mode switched to %s", self.mode)
        return self.mode

    def reset(self) -> None:
        """Forget the accumulated shown-set."""
        self._shown = set()

    def replace(self, node_ids: Iterable[str]) -> None:
        """Start a fresh shown-set (non-additive commands)."""
        self._shown = set(node_ids)
        logger.debug("Shown-set replaced (%d nodes)", len(self._shown))

    def accumulate(self, node_ids: Iterable[str]) -> FrozenSet[str]:
        """Union ``node_ids`` into the shown-set and return the whole set."""
        before = len(self._shown)
        self._shown.update(node_ids)
        logger.debug("Shown-set grew from %d to %d nodes", before, len(self._shown))
        return self.shown

"""
Two-phase tag picking.

Phase one captures everything a pick needs (snapshot, candidate tags,
match mode, additivity) in a ``PendingTagChoice``. Phase two consumes the
pending choice plus the user's tag. Nothing is mutated until phase two.
"""

import uuid
from dataclasses import dataclass, field
from typing import Iterable, Tuple

from ..analysis.tags import TagMatchMode, tag_candidates
from ..core.types import GraphSnapshot


@dataclass(frozen=True)
class PendingTagChoice:
    snapshot: GraphSnapshot
    candidates: Tuple[str, ...]
    mode: TagMatchMode
    additive: bool
    token: str = field(default_factory=lambda: uuid.uuid4().hex)


def request_tag_choice(
    snapshot: GraphSnapshot,
    global_tags: Iterable[str],
    mode: TagMatchMode,
    additive: bool,
) -> PendingTagChoice:
    """Capture the snapshot and candidate tags for a tag pick."""
    candidates = tag_candidates(global_tags, snapshot.nodes)
    return PendingTagChoice(
        snapshot=snapshot,
        candidates=tuple(candidates),
        mode=TagMatchMode(mode),
        additive=additive,
    )

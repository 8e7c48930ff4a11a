"""
Tag matching.

Tags come from two places: the metadata source (file-backed nodes and the
global tag universe) and ``#token`` substrings typed into text cards.
"""

import logging
import re
from enum import StrEnum
from typing import Iterable, List, Optional, Protocol, Sequence, assert_never

from ..config import TAG_PATTERN
from ..core.types import CanvasNode, FileNode, GroupNode, LinkNode, TextNode

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(TAG_PATTERN)


class TagMatchMode(StrEnum):
    """Whether a chosen tag selects the nodes that carry it or those that do not."""
    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"


class TagLookup(Protocol):
    """The slice of a metadata source that matching needs."""

    def tags_for(self, file: str) -> Optional[List[str]]: ...


def extract_text_tags(text: str) -> List[str]:
    """Every ``#token`` substring in ``text``, in order of appearance."""
    return _TAG_RE.findall(text)


def tag_candidates(global_tags: Iterable[str], nodes: Sequence[CanvasNode]) -> List[str]:
    """
    Build the list a tag picker offers.

    Global tags come first, then tags found in text cards. Duplicates are
    dropped, first occurrence wins.
    """
    seen = set()
    candidates: List[str] = []

    def _add(tag: str) -> None:
        if tag not in seen:
            seen.add(tag)
            candidates.append(tag)

    for tag in global_tags:
        _add(tag)
    for node in nodes:
        if isinstance(node, TextNode):
            for tag in extract_text_tags(node.text):
                _add(tag)
    return candidates


def node_matches_tag(
    node: CanvasNode,
    tag: str,
    mode: TagMatchMode,
    metadata: TagLookup,
) -> bool:
    """
    Decide whether ``node`` is selected by ``tag`` under ``mode``.

    File nodes compare against their metadata tags; a file the metadata
    source does not know never matches. Text nodes test for the tag
    literal in their content. Groups and links never match.
    """
    match node:
        case FileNode():
            tags = metadata.tags_for(node.file)
            if tags is None:
                logger.debug("No metadata for %s, skipping node %s", node.file, node.id)
                return False
            present = tag in tags
        case TextNode():
            present = tag in node.text
        case GroupNode() | LinkNode():
            return False
        case _:
            assert_never(node)

    if mode == TagMatchMode.INCLUSIVE:
        return present
    return not present


def nodes_matching_tag(
    nodes: Sequence[CanvasNode],
    tag: str,
    mode: TagMatchMode,
    metadata: TagLookup,
) -> List[CanvasNode]:
    return [node for node in nodes if node_matches_tag(node, tag, mode, metadata)]

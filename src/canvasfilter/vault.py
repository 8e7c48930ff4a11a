"""
Metadata sources.

``VaultMetadataSource`` reads tags from a folder of Markdown notes: YAML
frontmatter ``tags``/``tag`` keys plus inline ``#tag`` tokens in the body.
Tags are always reported with a leading ``#``.
"""

import logging
import os
import re
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Set

import yaml

logger = logging.getLogger(__name__)

_FRONTMATTER_RE = re.compile(r"\A---\s*\n(.*?)\n---\s*(?:\n|\Z)", re.DOTALL)
_INLINE_TAG_RE = re.compile(r"(?<!\S)#[^\s#]+")
_MARKDOWN_SUFFIXES = {".md", ".markdown"}

SKIP_DIRS: Set[str] = {
    ".git", ".obsidian", ".trash", ".canvasfilter", "__pycache__", "node_modules",
    ".venv", "venv", "env", ".env", "dist", "build", ".idea", ".vscode",
}


def _normalize_tag(tag: str) -> str:
    tag = tag.strip()
    return tag if tag.startswith("#") else f"#{tag}"


def _frontmatter_tags(raw: object) -> List[str]:
    if raw is None:
        return []
    if isinstance(raw, str):
        parts = re.split(r"[,\s]+", raw)
    elif isinstance(raw, (list, tuple)):
        parts = [str(p) for p in raw if p is not None]
    else:
        parts = [str(raw)]
    return [_normalize_tag(p) for p in parts if p.strip()]


def parse_note_tags(text: str) -> List[str]:
    """Frontmatter tags first, then inline tags, without duplicates."""
    tags: List[str] = []
    body = text

    match = _FRONTMATTER_RE.match(text)
    if match:
        body = text[match.end():]
        try:
            meta = yaml.safe_load(match.group(1)) or {}
        except yaml.YAMLError as e:
            logger.warning("Ignoring malformed frontmatter: %s", e)
            meta = {}
        if isinstance(meta, dict):
            tags.extend(_frontmatter_tags(meta.get("tags")))
            tags.extend(_frontmatter_tags(meta.get("tag")))

    tags.extend(_INLINE_TAG_RE.findall(body))
    return list(dict.fromkeys(tags))


class VaultMetadataSource:
    """Tag lookups over Markdown files under ``root``."""

    def __init__(self, root: Path):
        self.root = Path(root)
        self._cache: Dict[Path, Optional[List[str]]] = {}

    def _read(self, path: Path) -> Optional[List[str]]:
        if path in self._cache:
            return self._cache[path]

        tags: Optional[List[str]] = None
        if path.suffix.lower() in _MARKDOWN_SUFFIXES and path.is_file():
            try:
                tags = parse_note_tags(path.read_text(encoding="utf-8"))
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Could not read %s: %s", path, e)
        self._cache[path] = tags
        return tags

    def tags_for(self, file: str) -> Optional[List[str]]:
        return self._read(self.root / file)

    def _notes(self) -> Iterator[Path]:
        """Markdown files under the root, outside ``SKIP_DIRS``."""
        for root, dirs, files in os.walk(self.root):
            dirs[:] = [d for d in dirs if d not in SKIP_DIRS]
            for name in files:
                path = Path(root) / name
                if path.suffix.lower() in _MARKDOWN_SUFFIXES:
                    yield path

    def all_tags(self) -> List[str]:
        tags = set()
        for path in self._notes():
            tags.update(self._read(path) or [])
        return sorted(tags)


class StaticMetadataSource:
    """In-memory metadata source: file reference -> tags."""

    def __init__(self, tags_by_file: Mapping[str, Iterable[str]], global_tags: Iterable[str] = ()):
        self._tags = {f: [_normalize_tag(t) for t in tags] for f, tags in tags_by_file.items()}
        self._global = list(global_tags)

    def tags_for(self, file: str) -> Optional[List[str]]:
        tags = self._tags.get(file)
        return list(tags) if tags is not None else None

    def all_tags(self) -> List[str]:
        known = {t for tags in self._tags.values() for t in tags}
        known.update(self._global)
        return sorted(known)

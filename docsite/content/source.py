"""Content lookup: page id -> ContentUnit."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from pydantic import ValidationError

from .models import ContentUnit

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"
EXAMPLE_SUFFIX = ".json"


class NotFoundError(LookupError):
    """Raised when no content is registered under an id."""

    def __init__(self, content_id: str):
        super().__init__(f"No content registered under {content_id!r}")
        self.content_id = content_id


class MalformedContentError(ValueError):
    """Raised when a content body cannot be parsed into a content unit."""

    def __init__(self, content_id: str, reason: str):
        super().__init__(f"Malformed content {content_id!r}: {reason}")
        self.content_id = content_id
        self.reason = reason


@dataclass(frozen=True)
class ContentEntry:
    """Raw stored content. Example bodies may still be undecoded JSON text."""

    format: Literal["markdown", "example"]
    body: str | Mapping[str, Any]


class ContentSource:
    """Read-only registry of content entries.

    `load` parses on every call and never caches, so two loads of the same id
    yield equal but independent units.
    """

    def __init__(self, entries: Mapping[str, ContentEntry]):
        self._entries = dict(entries)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str | Mapping[str, Any]]) -> ContentSource:
        """Strings are markdown pages; mappings are example documents."""
        entries: dict[str, ContentEntry] = {}
        for content_id, body in mapping.items():
            fmt = "markdown" if isinstance(body, str) else "example"
            entries[content_id] = ContentEntry(format=fmt, body=body)
        return cls(entries)

    @classmethod
    def from_directory(cls, root: Path, exclude: Iterable[str] = ()) -> ContentSource:
        """Register every *.md and *.json file below `root`.

        Ids are POSIX paths relative to `root` without suffix. `exclude` lists
        relative file paths to skip (e.g. the site config).
        """
        root = Path(root)
        if not root.is_dir():
            raise NotADirectoryError(f"Content directory not found: {root}")

        skipped = set(exclude)
        entries: dict[str, ContentEntry] = {}
        for path in sorted(root.rglob("*")):
            if not path.is_file() or path.relative_to(root).as_posix() in skipped:
                continue
            if path.suffix == MARKDOWN_SUFFIX:
                fmt = "markdown"
            elif path.suffix == EXAMPLE_SUFFIX:
                fmt = "example"
            else:
                continue
            content_id = path.relative_to(root).with_suffix("").as_posix()
            if content_id in entries:
                logger.warning("Duplicate content id %s, keeping %s", content_id, path)
            entries[content_id] = ContentEntry(format=fmt, body=path.read_text(encoding="utf-8"))

        logger.debug("Registered %d content entries from %s", len(entries), root)
        return cls(entries)

    def __contains__(self, content_id: object) -> bool:
        return content_id in self._entries

    def ids(self) -> list[str]:
        return sorted(self._entries)

    def load(self, content_id: str) -> ContentUnit:
        """Load and parse the content registered under `content_id`.

        Raises:
            NotFoundError: nothing is registered under `content_id`
            MalformedContentError: the body cannot be parsed
        """
        entry = self._entries.get(content_id)
        if entry is None:
            raise NotFoundError(content_id)

        if entry.format == "markdown":
            if not isinstance(entry.body, str):
                raise MalformedContentError(content_id, "markdown body must be text")
            return ContentUnit(id=content_id, title=markdown_title(entry.body), markdown=entry.body)

        return _parse_example(content_id, entry.body)


def markdown_title(md: str) -> str | None:
    """Return the text of the first level-one heading, if any."""
    for line in md.splitlines():
        stripped = line.strip()
        if stripped.startswith("# "):
            return stripped[2:].strip() or None
    return None


def _parse_example(content_id: str, body: str | Mapping[str, Any]) -> ContentUnit:
    if isinstance(body, str):
        try:
            doc = json.loads(body)
        except json.JSONDecodeError as e:
            raise MalformedContentError(content_id, f"invalid JSON ({e.msg} at line {e.lineno})") from e
    else:
        doc = body

    if not isinstance(doc, Mapping):
        raise MalformedContentError(content_id, "example document must be a JSON object")

    unknown = set(doc) - {"title", "elements"}
    if unknown:
        raise MalformedContentError(content_id, f"unexpected keys: {', '.join(sorted(unknown))}")

    try:
        return ContentUnit.model_validate(
            {
                "id": content_id,
                "title": doc.get("title"),
                "elements": doc.get("elements") or [],
            }
        )
    except ValidationError as e:
        raise MalformedContentError(content_id, _first_error(e)) from e


def _first_error(error: ValidationError) -> str:
    errors = error.errors()
    if not errors:
        return str(error)
    first = errors[0]
    loc = ".".join(str(p) for p in first.get("loc", ()))
    msg = first.get("msg", "invalid value")
    return f"{loc}: {msg}" if loc else msg

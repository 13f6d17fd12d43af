"""Text projections of a work-item context document.

Projections never fail: malformed or sparse input degrades to a sentinel so
that prompt assembly for a data-poor work item still succeeds.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Mapping

logger = logging.getLogger(__name__)

NO_ATTACHMENTS = "No attachments available."
NO_COMMENTS = "No previous comments."
ATTACHMENTS_HEADER = "The following files are available. Use the Read tool to view them:"
COMMENT_SEPARATOR = "\n\n---\n\n"

NEWEST_FIRST = "newest_first"
OLDEST_FIRST = "oldest_first"
COMMENT_ORDERS = (NEWEST_FIRST, OLDEST_FIRST)

_TAG_RE = re.compile(r"<[^>]*>")


@dataclass(frozen=True)
class WorkItemContext:
    """A work-item document as fetched: raw text plus its parsed form."""

    raw: str
    data: Mapping[str, Any] | None = None

    @classmethod
    def parse(cls, text: str) -> WorkItemContext:
        try:
            data = json.loads(text)
        except ValueError as e:
            logger.warning("Work item context is not valid JSON: %s", e)
            return cls(raw=text)
        if not isinstance(data, dict):
            logger.warning("Work item context is %s, expected an object", type(data).__name__)
            return cls(raw=text)
        return cls(raw=text, data=data)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WorkItemContext:
        return cls(raw=json.dumps(data, indent=2, ensure_ascii=False), data=data)


def _entries(data: Mapping[str, Any] | None, key: str) -> list[Any]:
    if not data:
        return []
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        logger.warning("Ignoring '%s': expected a list, got %s", key, type(value).__name__)
        return []
    return value


def _field(entry: Any, name: str) -> str:
    if not isinstance(entry, Mapping):
        return ""
    value = entry.get(name)
    return "" if value is None else str(value)


def attachments_manifest(data: Mapping[str, Any] | None) -> str:
    attachments = _entries(data, "attachments")
    if not attachments:
        return NO_ATTACHMENTS
    lines = [ATTACHMENTS_HEADER]
    lines.extend(f"- {_field(a, 'path')} ({_field(a, 'type')})" for a in attachments)
    return "\n".join(lines)


def strip_tags(text: str) -> str:
    return _TAG_RE.sub("", text)


def format_comment(comment: Any, max_chars: int = 500) -> str:
    date = _field(comment, "date").split("T", 1)[0]
    body = strip_tags(_field(comment, "text"))[:max_chars]
    return f"**{_field(comment, 'author')}** ({date}):\n{body}"


def comment_transcript(
    data: Mapping[str, Any] | None,
    limit: int = 20,
    max_chars: int = 500,
    order: str = NEWEST_FIRST,
) -> str:
    """Render the most recent comments, keeping the order they were supplied in.

    ``order`` states how the fetcher sorted them; it only decides which end of
    the list holds the most recent entries. Nothing is re-sorted.
    """
    if limit < 1 or max_chars < 1:
        raise ValueError(f"limit and max_chars must be at least 1, got {limit}, {max_chars}")
    comments = _entries(data, "comments")
    if not comments:
        return NO_COMMENTS
    if len(comments) > limit:
        comments = comments[:limit] if order == NEWEST_FIRST else comments[-limit:]
    return COMMENT_SEPARATOR.join(format_comment(c, max_chars) for c in comments)

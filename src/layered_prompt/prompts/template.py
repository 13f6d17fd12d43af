"""Single-pass ${NAME} placeholder substitution."""

from __future__ import annotations

import re
from typing import Mapping

SYSTEM_CONTEXT = "SYSTEM_CONTEXT"
CONTEXT = "CONTEXT"
COMMAND = "COMMAND"
ATTACHMENTS = "ATTACHMENTS"
COMMENTS = "COMMENTS"

PLACEHOLDERS = frozenset({SYSTEM_CONTEXT, CONTEXT, COMMAND, ATTACHMENTS, COMMENTS})

_PLACEHOLDER_RE = re.compile(
    r"\$\{(" + "|".join(sorted(PLACEHOLDERS, key=len, reverse=True)) + r")\}"
)


def substitute(template: str, bindings: Mapping[str, str]) -> str:
    """Replace recognised placeholders with their bound values.

    Values are inserted literally and never rescanned, so a comment containing
    ``${COMMAND}`` or a backslash comes out exactly as written. Unrecognised
    ``${...}`` tokens are left in place; unbound placeholders become "".
    """
    return _PLACEHOLDER_RE.sub(lambda m: bindings.get(m.group(1)) or "", template)


def find_placeholders(template: str) -> list[str]:
    return [m.group(1) for m in _PLACEHOLDER_RE.finditer(template)]

"""Default + system overlay merging for context and prompt artifacts."""

from __future__ import annotations

import logging

from .errors import MissingArtifactError
from .mode import Mode
from .roots import DEFAULT_SYSTEM, ConfigRoots, PathKind, read_text

logger = logging.getLogger(__name__)

SEPARATOR = "\n\n---\n\n"
NO_CONTEXT = "No system context available."

CONTEXT_FILE = "context.md"


def merge(default_text: str, system_text: str | None = None) -> str:
    """Append the system overlay to the default layer.

    The overlay supplements the default, it never replaces it. An empty default
    yields the overlay alone so no dangling separator is produced.
    """
    if system_text is None:
        return default_text
    if not default_text:
        return system_text
    return default_text.rstrip("\n") + SEPARATOR + system_text


def _overlay(roots: ConfigRoots, system: str, subpath: str) -> str | None:
    if system == DEFAULT_SYSTEM:
        return None
    path = roots.find(f"{system}/{subpath}", PathKind.FILE)
    if path is None:
        return None
    logger.debug("Using %s overlay from %s", system, path)
    return read_text(path)


def load_context(roots: ConfigRoots, system: str, require: bool = False) -> str:
    """Build the combined system context text."""
    subpath = f"{DEFAULT_SYSTEM}/{CONTEXT_FILE}"
    path = roots.find(subpath, PathKind.FILE)
    if path is None:
        if require:
            raise MissingArtifactError("context", subpath, roots.paths)
        logger.warning("No default context in any systems directory")
        default_text = ""
    else:
        default_text = read_text(path)

    merged = merge(default_text, _overlay(roots, system, CONTEXT_FILE))
    if not merged.strip():
        return NO_CONTEXT
    return merged


def load_prompt(roots: ConfigRoots, system: str, mode: Mode) -> str:
    """Build the combined prompt template for a mode."""
    subpath = f"{DEFAULT_SYSTEM}/{mode.prompt_path}"
    path = roots.find(subpath, PathKind.FILE)
    if path is None:
        raise MissingArtifactError("prompt", subpath, roots.paths, mode=mode.value)
    return merge(read_text(path), _overlay(roots, system, mode.prompt_path))

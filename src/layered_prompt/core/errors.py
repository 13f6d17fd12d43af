"""Errors raised while resolving configuration layers."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class ConfigurationError(Exception):
    """Prompt assembly cannot proceed with the given configuration."""


class InvalidRequestError(ConfigurationError):
    """The build request itself is invalid (unknown mode, missing command text)."""


class MissingArtifactError(ConfigurationError):
    """A mandatory default-layer artifact is absent from every root."""

    def __init__(self, artifact: str, subpath: str, roots: Sequence[Path], mode: str | None = None):
        self.artifact = artifact
        self.subpath = subpath
        self.roots = list(roots)
        self.mode = mode
        what = f"Default {artifact}"
        if mode:
            what += f" for mode '{mode}'"
        searched = ", ".join(str(r) for r in self.roots) or "<no roots>"
        super().__init__(f"{what} not found: {subpath} (searched: {searched})")


class UnreadableArtifactError(ConfigurationError):
    """A configuration file exists but is not valid UTF-8 text."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Cannot read {path}: {reason}")

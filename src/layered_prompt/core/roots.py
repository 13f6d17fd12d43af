"""Ordered configuration roots and first-match path resolution."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from .errors import UnreadableArtifactError

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM = "_default"


class PathKind(str, enum.Enum):
    FILE = "file"
    DIR = "dir"


def _matches(path: Path, kind: PathKind) -> bool:
    if kind is PathKind.FILE:
        return path.is_file()
    return path.is_dir()


@dataclass(frozen=True)
class ConfigRoots:
    """Systems directories in precedence order: the first match wins.

    A typical layout puts an organization's ``systems`` directory ahead of a
    shared template's ``template/systems`` so local files override the template.
    """

    paths: tuple[Path, ...] = ()

    @classmethod
    def of(cls, paths: Iterable[str | Path]) -> ConfigRoots:
        return cls(tuple(Path(p) for p in paths))

    def __iter__(self) -> Iterator[Path]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)

    def find(self, subpath: str, kind: PathKind = PathKind.FILE) -> Path | None:
        """Return the first ``root/subpath`` of the given kind, or None.

        Directories only need to exist here; callers that care about empty
        directories check that themselves.
        """
        for root in self.paths:
            candidate = root / subpath
            if _matches(candidate, kind):
                logger.debug("Resolved %s -> %s", subpath, candidate)
                return candidate
        logger.debug("%s not found in any of %d roots", subpath, len(self.paths))
        return None

    def find_all(self, subpath: str, kind: PathKind = PathKind.FILE) -> list[Path]:
        """Return every ``root/subpath`` of the given kind, in precedence order."""
        return [root / subpath for root in self.paths if _matches(root / subpath, kind)]


def read_text(path: Path) -> str:
    try:
        return path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as e:
        raise UnreadableArtifactError(path, f"not valid UTF-8 ({e.reason} at byte {e.start})") from e

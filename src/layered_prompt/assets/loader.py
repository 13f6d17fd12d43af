"""Skill and agent file loader — parses markdown with YAML frontmatter."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import frontmatter

# Entry files looked up when an asset is a directory
ENTRY_FILES = ("SKILL.md", "AGENT.md")


@dataclass
class Asset:
    name: str
    description: str = ""
    content: str = ""
    file_path: str = ""

    @property
    def summary(self) -> dict[str, str]:
        return {"name": self.name, "description": self.description}


def _entry_file(path: Path) -> Path | None:
    if path.is_file():
        return path
    for candidate in ENTRY_FILES:
        if (path / candidate).is_file():
            return path / candidate
    return None


def load_asset(path: Path) -> Asset:
    """Load a skill or agent from a markdown file, or a directory holding one."""
    default_name = path.stem if path.is_file() else path.name
    entry = _entry_file(path)
    if entry is None or entry.suffix != ".md":
        return Asset(name=default_name, file_path=str(path))

    post = frontmatter.load(str(entry))
    return Asset(
        name=str(post.metadata.get("name", default_name)),
        description=str(post.metadata.get("description", "")),
        content=post.content,
        file_path=str(path),
    )

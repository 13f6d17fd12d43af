"""Configuration management with TOML loading."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..core.errors import InvalidRequestError
from ..core.mode import Mode
from ..core.roots import DEFAULT_SYSTEM, ConfigRoots
from ..workitem.projections import COMMENT_ORDERS, NEWEST_FIRST

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = ".layered-prompt"
DEFAULT_CONFIG_FILE = "config.toml"
DEFAULT_SYSTEMS_DIR = "systems"


@dataclass
class Settings:
    systems_dirs: list[str] = field(default_factory=lambda: [DEFAULT_SYSTEMS_DIR])
    working_directory: str = field(default_factory=lambda: os.getcwd())
    default_system: str = DEFAULT_SYSTEM
    comment_limit: int = 20
    comment_max_chars: int = 500
    comments_order: str = NEWEST_FIRST  # how the fetcher sorts comments
    require_context: bool = False
    preview_lines: int = 100

    def __post_init__(self):
        for name in ("comment_limit", "comment_max_chars"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1, got {getattr(self, name)!r}")
        if self.comments_order not in COMMENT_ORDERS:
            raise ValueError(
                f"comments_order must be one of {COMMENT_ORDERS}, got {self.comments_order!r}"
            )

    def roots(self) -> ConfigRoots:
        """Systems directories in priority order, relative ones anchored at the workspace."""
        base = Path(self.working_directory)
        return ConfigRoots.of(base / d for d in self.systems_dirs)

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> Settings:
        """Load settings from TOML config file."""
        if config_path is None:
            config_path = Path(os.getcwd()) / DEFAULT_CONFIG_DIR / DEFAULT_CONFIG_FILE

        config_path = Path(config_path)
        raw: dict[str, Any] = {}

        if config_path.exists():
            logger.debug("Loading settings from %s", config_path)
            with open(config_path, "rb") as f:
                raw = tomllib.load(f)

        return cls._from_dict(raw)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> Settings:
        comments = data.get("comments", {})
        systems_dirs = data.get("systems_dirs", [DEFAULT_SYSTEMS_DIR])
        if isinstance(systems_dirs, str):
            systems_dirs = [systems_dirs]

        return cls(
            systems_dirs=list(systems_dirs),
            working_directory=data.get("working_directory", os.getcwd()),
            default_system=data.get("default_system", DEFAULT_SYSTEM),
            comment_limit=comments.get("limit", 20),
            comment_max_chars=comments.get("max_chars", 500),
            comments_order=comments.get("order", NEWEST_FIRST),
            require_context=data.get("require_context", False),
            preview_lines=data.get("preview_lines", 100),
        )


@dataclass(frozen=True)
class BuildRequest:
    """Everything one prompt resolution depends on.

    Validated on construction, before anything is read from disk: the mode
    must be known, command mode needs command text, and other modes drop it.
    """

    mode: Mode
    system: str
    roots: ConfigRoots
    context_text: str
    command: str = ""

    def __post_init__(self):
        mode = Mode.parse(self.mode)
        object.__setattr__(self, "mode", mode)
        if not self.system:
            raise InvalidRequestError("A system name is required")
        if mode.requires_command:
            if not self.command or not self.command.strip():
                raise InvalidRequestError(f"Command text is required for {mode.value} mode")
        elif self.command:
            object.__setattr__(self, "command", "")

    @classmethod
    def create(
        cls,
        mode: str | Mode,
        system: str,
        roots: ConfigRoots,
        context_text: str,
        command: str | None = None,
    ) -> BuildRequest:
        return cls(mode=mode, system=system, roots=roots, context_text=context_text, command=command or "")

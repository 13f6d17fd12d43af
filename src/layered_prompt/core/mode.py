"""Prompt modes."""

from __future__ import annotations

import enum

from .errors import InvalidRequestError


class Mode(str, enum.Enum):
    ANALYZE = "analyze"
    IMPLEMENT = "implement"
    COMMAND = "command"

    @property
    def prompt_path(self) -> str:
        """Location of this mode's prompt, relative to a system directory."""
        return f"prompts/{self.value}.md"

    @property
    def requires_command(self) -> bool:
        return self is Mode.COMMAND

    @classmethod
    def parse(cls, value: str | Mode) -> Mode:
        if isinstance(value, Mode):
            return value
        try:
            return cls(value)
        except ValueError:
            allowed = "|".join(m.value for m in cls)
            raise InvalidRequestError(
                f"Invalid mode '{value}'. Must be one of: {allowed}"
            ) from None

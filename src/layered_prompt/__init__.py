"""Layered Prompt: resolves system configuration layers into a work-item prompt.

Usage:
    from layered_prompt import BuildRequest, PromptBuilder, Settings

    settings = Settings.load()
    request = BuildRequest.create("analyze", "_default", settings.roots(), context_text)
    prompt = PromptBuilder(settings).build(request)
"""

__version__ = "1.0.0"

from .config.settings import BuildRequest, Settings
from .core.errors import (
    ConfigurationError,
    InvalidRequestError,
    MissingArtifactError,
    UnreadableArtifactError,
)
from .core.mode import Mode
from .core.roots import ConfigRoots
from .prompts.builder import PromptBuilder

__all__ = [
    "BuildRequest",
    "ConfigRoots",
    "ConfigurationError",
    "InvalidRequestError",
    "MissingArtifactError",
    "Mode",
    "PromptBuilder",
    "Settings",
    "UnreadableArtifactError",
]

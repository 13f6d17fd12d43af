"""Prompt composer: resolve layers, project the work item, substitute."""

from __future__ import annotations

import logging

from ..config.settings import BuildRequest, Settings
from ..core.layers import load_context, load_prompt
from ..workitem.projections import WorkItemContext, attachments_manifest, comment_transcript
from . import template

logger = logging.getLogger(__name__)


class PromptBuilder:
    """Assembles the final prompt for one work item.

    Pipeline: resolve → merge → project → substitute. Each ``build`` call is
    independent; nothing is cached between calls.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()

    def template(self, request: BuildRequest) -> str:
        """Merged (default + system) prompt text for the request's mode."""
        return load_prompt(request.roots, request.system, request.mode)

    def bindings(self, request: BuildRequest) -> dict[str, str]:
        settings = self.settings
        work_item = WorkItemContext.parse(request.context_text)
        return {
            template.SYSTEM_CONTEXT: load_context(
                request.roots, request.system, require=settings.require_context
            ),
            template.CONTEXT: work_item.raw,
            template.COMMAND: request.command,
            template.ATTACHMENTS: attachments_manifest(work_item.data),
            template.COMMENTS: comment_transcript(
                work_item.data,
                limit=settings.comment_limit,
                max_chars=settings.comment_max_chars,
                order=settings.comments_order,
            ),
        }

    def build(self, request: BuildRequest) -> str:
        """Build the complete prompt."""
        prompt_template = self.template(request)
        prompt = template.substitute(prompt_template, self.bindings(request))
        logger.debug(
            "Built %s prompt for system %s (%d chars)",
            request.mode.value, request.system, len(prompt),
        )
        return prompt

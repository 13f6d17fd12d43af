from .projections import (
    NO_ATTACHMENTS,
    NO_COMMENTS,
    WorkItemContext,
    attachments_manifest,
    comment_transcript,
)

__all__ = [
    "NO_ATTACHMENTS",
    "NO_COMMENTS",
    "WorkItemContext",
    "attachments_manifest",
    "comment_transcript",
]

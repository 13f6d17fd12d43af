"""Shared test fixtures for the layered-prompt test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from layered_prompt.core.roots import ConfigRoots


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def make_comment(i: int, text: str | None = None) -> dict:
    return {
        "author": f"User {i}",
        "date": f"2024-03-{(i % 28) + 1:02d}T10:15:00Z",
        "text": text if text is not None else f"Comment {i}",
    }


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def org_root(tmp_path) -> Path:
    """Organization systems directory (highest precedence)."""
    root = tmp_path / "systems"
    root.mkdir()
    return root


@pytest.fixture
def template_root(tmp_path) -> Path:
    """Shared template systems directory (lower precedence)."""
    root = tmp_path / "template" / "systems"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def roots(org_root, template_root) -> ConfigRoots:
    return ConfigRoots.of([org_root, template_root])


@pytest.fixture
def work_item() -> dict:
    return {
        "id": 1373926,
        "title": "Login fails on Safari",
        "attachments": [
            {"path": "attachments/screenshot.png", "type": "image/png"},
            {"path": "attachments/log.txt", "type": "text/plain"},
        ],
        "comments": [
            {"author": "Ada", "date": "2024-05-02T08:00:00Z", "text": "<p>Still <b>broken</b></p>"},
            {"author": "Bob", "date": "2024-05-01T17:30:00Z", "text": "Reproduced."},
        ],
    }


@pytest.fixture
def work_item_text(work_item) -> str:
    return json.dumps(work_item, indent=2)

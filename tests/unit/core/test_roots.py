"""Tests for layered_prompt.core.roots: first-match resolution across roots."""

from __future__ import annotations

import pytest

from conftest import write

from layered_prompt.core.errors import ConfigurationError, UnreadableArtifactError
from layered_prompt.core.roots import ConfigRoots, PathKind, read_text


class TestFind:
    def test_first_root_wins(self, roots, org_root, template_root):
        write(org_root / "_default/context.md", "org")
        write(template_root / "_default/context.md", "template")
        assert roots.find("_default/context.md") == org_root / "_default/context.md"

    def test_falls_through_to_later_root(self, roots, template_root):
        write(template_root / "_default/prompts/analyze.md", "analyze")
        found = roots.find("_default/prompts/analyze.md")
        assert found == template_root / "_default/prompts/analyze.md"

    def test_not_found_returns_none(self, roots):
        assert roots.find("_default/context.md") is None

    def test_empty_roots(self):
        assert ConfigRoots().find("_default/context.md") is None

    def test_file_kind_ignores_directories(self, roots, org_root, template_root):
        (org_root / "_default/context.md").mkdir(parents=True)
        write(template_root / "_default/context.md", "file")
        assert roots.find("_default/context.md", PathKind.FILE) == template_root / "_default/context.md"

    def test_dir_kind_accepts_empty_directory(self, roots, org_root):
        (org_root / "web" / "skills").mkdir(parents=True)
        assert roots.find("web/skills", PathKind.DIR) == org_root / "web" / "skills"

    def test_dir_kind_ignores_files(self, roots, org_root):
        write(org_root / "web", "not a dir")
        assert roots.find("web", PathKind.DIR) is None

    def test_missing_root_directory_is_skipped(self, tmp_path, template_root):
        write(template_root / "_default/context.md", "ctx")
        roots = ConfigRoots.of([tmp_path / "does-not-exist", template_root])
        assert roots.find("_default/context.md") == template_root / "_default/context.md"


class TestFindAll:
    def test_returns_matches_in_precedence_order(self, roots, org_root, template_root):
        (org_root / "_default/skills").mkdir(parents=True)
        (template_root / "_default/skills").mkdir(parents=True)
        assert roots.find_all("_default/skills", PathKind.DIR) == [
            org_root / "_default/skills",
            template_root / "_default/skills",
        ]

    def test_no_matches(self, roots):
        assert roots.find_all("_default/agents", PathKind.DIR) == []


class TestConfigRoots:
    def test_of_converts_strings(self, tmp_path):
        roots = ConfigRoots.of([str(tmp_path / "a"), tmp_path / "b"])
        assert list(roots) == [tmp_path / "a", tmp_path / "b"]
        assert len(roots) == 2

    def test_is_hashable(self, tmp_path):
        assert hash(ConfigRoots.of([tmp_path])) == hash(ConfigRoots.of([tmp_path]))


class TestReadText:
    def test_reads_verbatim(self, tmp_path):
        path = write(tmp_path / "context.md", "Café\r\n\n")
        assert read_text(path) == "Café\r\n\n"

    def test_invalid_utf8_is_configuration_error(self, tmp_path):
        path = tmp_path / "context.md"
        path.write_bytes(b"caf\xe9")
        with pytest.raises(UnreadableArtifactError) as exc:
            read_text(path)
        assert isinstance(exc.value, ConfigurationError)
        assert exc.value.path == path
        assert str(path) in str(exc.value)

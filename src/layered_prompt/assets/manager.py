"""Layered skills/agents collection and runtime config lookup."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from ..core.roots import DEFAULT_SYSTEM, ConfigRoots, PathKind
from .loader import Asset, load_asset

logger = logging.getLogger(__name__)

ASSET_KINDS = ("skills", "agents")
RUNTIME_CONFIG = "opencode.json"


def _layer_dirs(roots: ConfigRoots, system: str, kind: str) -> list[Path]:
    """Asset directories from lowest to highest precedence.

    Defaults come first (lowest-priority root first), then the system's own
    directories in the same order, skipping empty ones.
    """
    dirs = list(reversed(roots.find_all(f"{DEFAULT_SYSTEM}/{kind}", PathKind.DIR)))
    if system != DEFAULT_SYSTEM:
        for path in reversed(roots.find_all(f"{system}/{kind}", PathKind.DIR)):
            if any(path.iterdir()):
                dirs.append(path)
    return dirs


def collect_assets(roots: ConfigRoots, system: str, kind: str) -> dict[str, Path]:
    """Map entry name to the path that wins after overlaying every layer."""
    if kind not in ASSET_KINDS:
        raise ValueError(f"Unknown asset kind: {kind}. Available: {list(ASSET_KINDS)}")
    collected: dict[str, Path] = {}
    for layer in _layer_dirs(roots, system, kind):
        for entry in layer.iterdir():
            if entry.name.startswith("."):
                continue
            if entry.name in collected:
                logger.debug("%s overrides %s", entry, collected[entry.name])
            collected[entry.name] = entry
    return dict(sorted(collected.items()))


def materialize(assets: dict[str, Path], dest: Path) -> list[Path]:
    """Replace the contents of ``dest`` with exactly the collected assets."""
    if dest.is_dir():
        shutil.rmtree(dest)
    elif dest.exists():
        dest.unlink()
    dest.mkdir(parents=True)
    written = []
    for name, source in assets.items():
        target = dest / name
        if source.is_dir():
            shutil.copytree(source, target)
        else:
            shutil.copy2(source, target)
        written.append(target)
    return written


def find_runtime_config(roots: ConfigRoots) -> Path | None:
    """The first ``_default/opencode.json`` across the roots."""
    return roots.find(f"{DEFAULT_SYSTEM}/{RUNTIME_CONFIG}", PathKind.FILE)


def copy_runtime_config(roots: ConfigRoots, dest: Path) -> Path | None:
    """Copy the resolved runtime config into ``dest`` unchanged.

    An empty ``{}`` config is written when no root provides one. Returns the
    source file, or None for the empty fallback.
    """
    source = find_runtime_config(roots)
    target = dest / RUNTIME_CONFIG
    dest.mkdir(parents=True, exist_ok=True)
    if source is None:
        logger.warning("No %s found", RUNTIME_CONFIG)
        target.write_text("{}\n", encoding="utf-8")
        return None
    shutil.copy2(source, target)
    return source


class AssetsManager:
    """Discovers skills and agents for one system across layered roots."""

    def __init__(self, roots: ConfigRoots, system: str):
        self._roots = roots
        self._system = system
        self._assets: dict[str, dict[str, Asset]] = {}

    def discover(self) -> None:
        self._assets.clear()
        for kind in ASSET_KINDS:
            loaded: dict[str, Asset] = {}
            for name, path in collect_assets(self._roots, self._system, kind).items():
                try:
                    loaded[name] = load_asset(path)
                except Exception as e:
                    logger.warning("Skipping malformed %s entry %s: %s", kind, path, e)
            self._assets[kind] = loaded

    def get(self, kind: str, name: str) -> Asset | None:
        return self._assets.get(kind, {}).get(name)

    def all(self, kind: str) -> list[Asset]:
        return list(self._assets.get(kind, {}).values())

    def names(self, kind: str) -> list[str]:
        """Entry names with the ``.md`` suffix dropped, as shown to users."""
        return [n[:-3] if n.endswith(".md") else n for n in self._assets.get(kind, {})]

from .loader import Asset, load_asset
from .manager import (
    AssetsManager,
    collect_assets,
    copy_runtime_config,
    find_runtime_config,
    materialize,
)

__all__ = [
    "Asset",
    "AssetsManager",
    "collect_assets",
    "load_asset",
    "materialize",
    "copy_runtime_config",
    "find_runtime_config",
]

from bymr_launcher.common.config import AppPaths, RuntimeConfig
from bymr_launcher.common.state import load_local_versions, save_local_versions
from bymr_launcher.common.types import Builds, FlashRuntimes, LocalVersionManifest, VersionManifest

__all__ = [
    "AppPaths",
    "RuntimeConfig",
    "Builds",
    "FlashRuntimes",
    "LocalVersionManifest",
    "VersionManifest",
    "load_local_versions",
    "save_local_versions",
]

from __future__ import annotations

import sys

from bymr_launcher.common.errors import UnsupportedPlatform
from bymr_launcher.common.types import VersionManifest


def current_platform() -> str:
    if sys.platform in ("win32", "cygwin"):
        return "windows"
    if sys.platform == "darwin":
        return "darwin"
    if sys.platform.startswith("linux"):
        return "linux"
    return sys.platform


def select_runtime(platform: str, manifest: VersionManifest) -> str:
    runtimes = manifest.flash_runtimes
    if platform == "windows":
        return runtimes.windows
    if platform == "darwin":
        return runtimes.darwin
    if platform == "linux":
        return runtimes.linux
    raise UnsupportedPlatform(platform)

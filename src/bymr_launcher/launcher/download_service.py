from __future__ import annotations

import logging
from typing import Callable

from bymr_launcher.common.config import AppPaths
from bymr_launcher.common.errors import DownloadFailed
from bymr_launcher.common.events import EventSink, emit_event
from bymr_launcher.common.types import Builds
from bymr_launcher.launcher.file_manager import file_exists


log = logging.getLogger(__name__)

# (target_path, remote_reference, use_https)
DownloadFn = Callable[[str, str, bool], None]


def all_builds_exist(builds: Builds, version: str, paths: AppPaths) -> bool:
    for variant, _ in builds.variants():
        if not file_exists(paths.build_path(variant, version)):
            return False
    return True


def runtime_exists(runtime_file_name: str, paths: AppPaths) -> bool:
    return file_exists(paths.runtime_path(runtime_file_name))


class DownloadOrchestrator:
    def __init__(self, paths: AppPaths, download_file: DownloadFn, sink: EventSink | None = None):
        self.paths = paths
        self.download_file = download_file
        self.sink = sink

    def _fetch(self, label: str, target: str, reference: str, use_https: bool) -> None:
        emit_event(self.sink, f"Downloading {label}")
        try:
            self.download_file(target, reference, use_https)
        except DownloadFailed:
            raise
        except Exception as exc:
            raise DownloadFailed(target, f"{label}: {exc}") from exc
        emit_event(self.sink, f"Downloaded {label}")

    def download_builds(self, builds: Builds, version: str, use_https: bool) -> None:
        # Sequential and fail-fast: a failed variant stops the remaining ones.
        for variant, reference in builds.variants():
            target = str(self.paths.build_path(variant, version))
            self._fetch(f"{variant} build {version}", target, reference, use_https)

    def download_runtime(self, runtime_file_name: str, use_https: bool) -> None:
        # The runtime is fetched by its own file name.
        target = str(self.paths.runtime_path(runtime_file_name))
        self._fetch(f"flash runtime {runtime_file_name}", target, runtime_file_name, use_https)

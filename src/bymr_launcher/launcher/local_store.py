from __future__ import annotations

import logging

from bymr_launcher.common.config import AppPaths
from bymr_launcher.common.errors import StateWriteFailed
from bymr_launcher.common.state import save_local_versions
from bymr_launcher.common.types import LocalVersionManifest, VersionManifest
from bymr_launcher.launcher.file_manager import ensure_folder_exists, get_local_versions


log = logging.getLogger(__name__)


class LocalManifestStore:
    """Owns the download folders and the on-disk record of what they hold."""

    def __init__(self, paths: AppPaths):
        self.paths = paths

    def ensure_layout(self) -> None:
        for folder in (self.paths.downloads_dir, self.paths.builds_dir, self.paths.runtimes_dir):
            try:
                ensure_folder_exists(folder)
            except OSError as exc:
                log.warning("Could not create %s: %s", folder, exc)

    def load_local_status(self) -> tuple[bool, LocalVersionManifest, str]:
        self.ensure_layout()
        present, manifest, diagnostic = get_local_versions(self.paths.versions_file)
        log.info("Local status: present=%s %s", present, diagnostic)
        return present, manifest, diagnostic

    def save(self, manifest: LocalVersionManifest) -> None:
        try:
            save_local_versions(self.paths.versions_file, manifest)
        except OSError as exc:
            raise StateWriteFailed(str(self.paths.versions_file), exc) from exc
        log.info(
            "Recorded local versions: game=%s launcher=%s",
            manifest.current_game_version,
            manifest.current_launcher_version,
        )

    def record_download(self, manifest: VersionManifest) -> LocalVersionManifest:
        local = LocalVersionManifest.from_remote(manifest)
        self.save(local)
        return local

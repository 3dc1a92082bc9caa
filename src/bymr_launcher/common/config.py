from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


DEFAULT_MANIFEST_ENDPOINT = "api.bymrefitted.com/launcher.json"
DEFAULT_DOWNLOAD_BASE = "api.bymrefitted.com/launcher/downloads/"
DOWNLOADS_FOLDER = "bymr-downloads"
VERSIONS_FILE_NAME = "versions.json"


@dataclass(frozen=True)
class AppPaths:
    install_root: Path
    downloads_dir: Path
    builds_dir: Path
    runtimes_dir: Path
    logs_dir: Path
    versions_file: Path

    @classmethod
    def under(cls, install_root: Path) -> "AppPaths":
        downloads = install_root / DOWNLOADS_FOLDER
        return cls(
            install_root=install_root,
            downloads_dir=downloads,
            builds_dir=downloads / "swfs",
            runtimes_dir=downloads / "runtimes",
            logs_dir=downloads / "logs",
            versions_file=downloads / VERSIONS_FILE_NAME,
        )

    @classmethod
    def default(cls) -> "AppPaths":
        override_root = os.environ.get("BYMR_INSTALL_ROOT", "").strip()
        install_root = Path(override_root) if override_root else Path.cwd()
        return cls.under(install_root)

    def build_path(self, variant: str, version: str) -> Path:
        return self.builds_dir / f"bymr-{variant}-{version}.swf"

    def runtime_path(self, runtime_file_name: str) -> Path:
        return self.runtimes_dir / runtime_file_name


@dataclass(frozen=True)
class RuntimeConfig:
    # Host + path without a scheme; the transport picks https or http.
    manifest_endpoint: str = DEFAULT_MANIFEST_ENDPOINT
    download_base: str = DEFAULT_DOWNLOAD_BASE
    download_chunk_size: int = 1024 * 1024
    connect_timeout_seconds: int = 10
    read_timeout_seconds: int = 60
    max_retries: int = 3

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        return cls(
            manifest_endpoint=os.environ.get("BYMR_MANIFEST_ENDPOINT", DEFAULT_MANIFEST_ENDPOINT),
            download_base=os.environ.get("BYMR_DOWNLOAD_BASE", DEFAULT_DOWNLOAD_BASE),
            download_chunk_size=int(os.environ.get("BYMR_DOWNLOAD_CHUNK", str(1024 * 1024))),
            connect_timeout_seconds=int(os.environ.get("BYMR_CONNECT_TIMEOUT", "10")),
            read_timeout_seconds=int(os.environ.get("BYMR_READ_TIMEOUT", "60")),
            max_retries=int(os.environ.get("BYMR_MAX_RETRIES", "3")),
        )

    @property
    def timeout(self) -> tuple[int, int]:
        return (self.connect_timeout_seconds, self.read_timeout_seconds)

from __future__ import annotations

import argparse
import logging

from bymr_launcher import __version__ as LAUNCHER_VERSION
from bymr_launcher.common.config import AppPaths, RuntimeConfig
from bymr_launcher.common.errors import LauncherError
from bymr_launcher.common.events import emit_event
from bymr_launcher.common.logging_utils import configure_logging
from bymr_launcher.launcher.download_service import DownloadOrchestrator, all_builds_exist, runtime_exists
from bymr_launcher.launcher.file_manager import FileDownloader
from bymr_launcher.launcher.local_store import LocalManifestStore
from bymr_launcher.launcher.platform_runtime import current_platform, select_runtime
from bymr_launcher.launcher.update_service import (
    ManifestResolver,
    game_update_available,
    launcher_update_available,
)


log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="BYMR launcher updater")
    parser.add_argument("--check-only", action="store_true", help="Report missing files and exit.")
    parser.add_argument("--log-level", default="INFO", help="Log level.")
    parser.add_argument("--platform", default=None, help="Override the detected platform (windows, darwin, linux).")
    return parser


def _print_event(message: str) -> None:
    print(message, flush=True)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    paths = AppPaths.default()
    configure_logging(paths.logs_dir, level=args.log_level)

    runtime_cfg = RuntimeConfig.from_env()
    store = LocalManifestStore(paths)
    present, local, diagnostic = store.load_local_status()
    log.info("Launcher %s starting: %s", LAUNCHER_VERSION, diagnostic)

    try:
        manifest = ManifestResolver(runtime_cfg, sink=_print_event).resolve()
        platform = args.platform or current_platform()
        runtime_name = select_runtime(platform, manifest)
        version = manifest.current_game_version

        builds_missing = game_update_available(local, manifest) or not all_builds_exist(
            manifest.builds, version, paths
        )
        runtime_missing = not runtime_exists(runtime_name, paths)

        if launcher_update_available(manifest):
            emit_event(
                _print_event,
                f"A new launcher version is available: {manifest.current_launcher_version} "
                f"(installed {LAUNCHER_VERSION})",
            )

        if args.check_only:
            log.info(
                "Check-only: game=%s builds_missing=%s runtime=%s runtime_missing=%s",
                version,
                builds_missing,
                runtime_name,
                runtime_missing,
            )
            return 2 if (builds_missing or runtime_missing) else 0

        downloader = FileDownloader(runtime_cfg)
        orchestrator = DownloadOrchestrator(paths, downloader.download_file, sink=_print_event)
        if builds_missing:
            orchestrator.download_builds(manifest.builds, version, manifest.https_worked)
        if runtime_missing:
            orchestrator.download_runtime(runtime_name, manifest.https_worked)
        if builds_missing or runtime_missing or not present:
            store.record_download(manifest)
        emit_event(_print_event, f"Game version {version} is ready")
    except LauncherError as exc:
        log.exception("Update check failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from bymr_launcher.common.config import AppPaths
from bymr_launcher.common.errors import ConnectionFailed
from bymr_launcher.common.types import Builds, FlashRuntimes, VersionManifest
from bymr_launcher.launcher import cli


MANIFEST = VersionManifest(
    current_game_version="1.2.3",
    current_launcher_version="0.0.1",
    builds=Builds(stable="u1", http="u2", local="u3"),
    flash_runtimes=FlashRuntimes(windows="w.exe", darwin="d.dmg", linux="l.tar.gz"),
    https_worked=False,
)


class FakeDownloader:
    calls: list[tuple[str, str, bool]] = []

    def __init__(self, runtime, session=None):
        self.runtime = runtime

    def download_file(self, target_path, remote_reference, use_https):
        FakeDownloader.calls.append((str(target_path), remote_reference, use_https))
        Path(target_path).write_bytes(b"data")


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.root = Path(self._td.name)
        self.paths = AppPaths.under(self.root)
        FakeDownloader.calls = []
        patches = [
            patch.dict(os.environ, {"BYMR_INSTALL_ROOT": str(self.root)}),
            patch.object(cli, "configure_logging"),
            patch.object(cli, "FileDownloader", FakeDownloader),
            patch.object(cli.ManifestResolver, "resolve", return_value=MANIFEST),
        ]
        for p in patches:
            p.start()
            self.addCleanup(p.stop)
        self.addCleanup(self._td.cleanup)

    def test_fresh_install_downloads_everything(self) -> None:
        self.assertEqual(cli.main(["--platform", "linux"]), 0)
        self.assertEqual(
            [c[1] for c in FakeDownloader.calls],
            ["u1", "u2", "u3", "l.tar.gz"],
        )
        self.assertTrue(all(c[2] is False for c in FakeDownloader.calls))
        self.assertTrue(self.paths.versions_file.exists())
        self.assertTrue((self.paths.runtimes_dir / "l.tar.gz").exists())

    def test_up_to_date_install_downloads_nothing(self) -> None:
        self.assertEqual(cli.main(["--platform", "linux"]), 0)
        FakeDownloader.calls = []
        self.assertEqual(cli.main(["--platform", "linux"]), 0)
        self.assertEqual(FakeDownloader.calls, [])

    def test_missing_runtime_only(self) -> None:
        self.assertEqual(cli.main(["--platform", "linux"]), 0)
        FakeDownloader.calls = []
        self.assertEqual(cli.main(["--platform", "windows"]), 0)
        self.assertEqual([c[1] for c in FakeDownloader.calls], ["w.exe"])

    def test_check_only_reports_pending(self) -> None:
        self.assertEqual(cli.main(["--check-only", "--platform", "darwin"]), 2)
        self.assertEqual(FakeDownloader.calls, [])
        self.assertFalse(self.paths.versions_file.exists())

    def test_unsupported_platform(self) -> None:
        self.assertEqual(cli.main(["--platform", "amiga"]), 1)
        self.assertEqual(FakeDownloader.calls, [])

    def test_unwritable_record_returns_error_code(self) -> None:
        self.paths.versions_file.mkdir(parents=True)
        self.assertEqual(cli.main(["--platform", "linux"]), 1)
        self.assertEqual(len(FakeDownloader.calls), 4)
        self.assertFalse(self.paths.versions_file.with_suffix(".tmp").exists())

    def test_resolution_failure(self) -> None:
        with patch.object(cli.ManifestResolver, "resolve", side_effect=ConnectionFailed("http", "down")):
            self.assertEqual(cli.main(["--platform", "linux"]), 1)
        self.assertEqual(FakeDownloader.calls, [])


if __name__ == "__main__":
    unittest.main()

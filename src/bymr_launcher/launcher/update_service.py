from __future__ import annotations

import json
import logging
from typing import Any, Tuple

import requests

from bymr_launcher import __version__ as LAUNCHER_VERSION
from bymr_launcher.common.config import RuntimeConfig
from bymr_launcher.common.errors import ConnectionFailed, HttpError, ParseError
from bymr_launcher.common.events import EventSink, emit_event
from bymr_launcher.common.types import Builds, FlashRuntimes, LocalVersionManifest, VersionManifest
from bymr_launcher.launcher.file_manager import build_session, transport_url


log = logging.getLogger(__name__)


class ManifestResolver:
    """Fetches the authoritative version manifest.

    https is tried first. Only a connection-level failure falls back to
    http; a server that answers with an error status ends the attempt.
    """

    def __init__(
        self,
        runtime: RuntimeConfig,
        sink: EventSink | None = None,
        session: requests.Session | None = None,
    ):
        self.runtime = runtime
        self.sink = sink
        self.session = session if session is not None else build_session(runtime)

    def _get(self, use_https: bool) -> requests.Response:
        url = transport_url(self.runtime.manifest_endpoint, use_https)
        log.info("Fetching manifest from %s", url)
        return self.session.get(url, timeout=self.runtime.timeout)

    def resolve(self) -> VersionManifest:
        try:
            resp = self._get(use_https=True)
            emit_event(self.sink, "Launcher successfully connected over https")
            https_worked = True
        except requests.RequestException as https_exc:
            emit_event(self.sink, f"Could not access over https, attempting http: {https_exc}")
            try:
                resp = self._get(use_https=False)
            except requests.RequestException as http_exc:
                emit_event(
                    self.sink,
                    "Could not access over http, please check the server status on our discord: "
                    f"{http_exc}",
                )
                status = http_exc.response.status_code if http_exc.response is not None else None
                raise ConnectionFailed("http", http_exc, status=status) from http_exc
            https_worked = False

        if not 200 <= resp.status_code < 300:
            raise HttpError(resp.status_code, url=str(resp.url))

        try:
            data = json.loads(resp.text)
        except ValueError as exc:
            log.error("Error parsing JSON: %s", exc)
            raise ParseError(exc) from exc
        return self.parse_manifest(data, https_worked)

    @staticmethod
    def parse_manifest(data: Any, https_worked: bool) -> VersionManifest:
        if not isinstance(data, dict):
            raise ParseError(f"expected a JSON object, got {type(data).__name__}")
        required = ["currentGameVersion", "currentLauncherVersion"]
        missing = [k for k in required if k not in data]
        if missing:
            raise ParseError(f"missing fields: {missing}")
        for key in required:
            if not isinstance(data[key], str):
                raise ParseError(f"{key} must be a string")
        try:
            builds = Builds.from_dict(data.get("builds"))
            flash_runtimes = FlashRuntimes.from_dict(data.get("flashRuntimes"))
        except ValueError as exc:
            raise ParseError(exc) from exc
        return VersionManifest(
            current_game_version=data["currentGameVersion"],
            current_launcher_version=data["currentLauncherVersion"],
            builds=builds,
            flash_runtimes=flash_runtimes,
            https_worked=https_worked,
        )


def parse_version(version: str) -> Tuple[int, int, int]:
    parts = [p for p in str(version).strip().split(".") if p]
    nums: list[int] = []
    for part in parts[:3]:
        digits = "".join(ch for ch in part if ch.isdigit())
        nums.append(int(digits) if digits else 0)
    while len(nums) < 3:
        nums.append(0)
    return (nums[0], nums[1], nums[2])


def launcher_update_available(manifest: VersionManifest, current: str = LAUNCHER_VERSION) -> bool:
    if not manifest.current_launcher_version:
        return False
    return parse_version(manifest.current_launcher_version) > parse_version(current)


def game_update_available(local: LocalVersionManifest, manifest: VersionManifest) -> bool:
    if not local.current_game_version:
        return True
    return local.current_game_version != manifest.current_game_version

from __future__ import annotations

import logging
import os
from pathlib import Path

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from bymr_launcher.common.config import RuntimeConfig
from bymr_launcher.common.errors import DownloadFailed
from bymr_launcher.common.state import load_local_versions
from bymr_launcher.common.types import LocalVersionManifest


log = logging.getLogger(__name__)


def build_session(runtime: RuntimeConfig) -> requests.Session:
    session = requests.Session()
    retry = Retry(
        total=runtime.max_retries,
        connect=runtime.max_retries,
        read=runtime.max_retries,
        status=runtime.max_retries,
        backoff_factor=0.5,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=frozenset({"GET", "HEAD"}),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


def transport_url(host_path: str, use_https: bool) -> str:
    scheme = "https" if use_https else "http"
    return f"{scheme}://{host_path}"


def ensure_folder_exists(path: str | os.PathLike[str]) -> None:
    try:
        os.makedirs(path)
    except FileExistsError:
        pass


def file_exists(path: str | os.PathLike[str]) -> bool:
    return Path(path).is_file()


def get_local_versions(path: Path) -> tuple[bool, LocalVersionManifest, str]:
    return load_local_versions(path)


class FileDownloader:
    """Fetches one remote file to one local path over the chosen transport."""

    def __init__(self, runtime: RuntimeConfig, session: requests.Session | None = None):
        self.runtime = runtime
        self.session = session if session is not None else build_session(runtime)

    def resolve_url(self, remote_reference: str, use_https: bool) -> str:
        ref = str(remote_reference or "").strip()
        if ref.lower().startswith(("http://", "https://")):
            return ref
        return transport_url(f"{self.runtime.download_base}{ref}", use_https)

    def download_file(self, target_path: str | os.PathLike[str], remote_reference: str, use_https: bool) -> None:
        target = Path(target_path)
        url = self.resolve_url(remote_reference, use_https)
        partial = target.with_name(target.name + ".part")
        log.info("Downloading %s -> %s", url, target)
        bytes_done = 0
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with self.session.get(url, stream=True, timeout=self.runtime.timeout) as resp:
                if not 200 <= resp.status_code < 300:
                    raise DownloadFailed(str(target), f"{url} returned HTTP {resp.status_code}")
                with partial.open("wb") as fh:
                    for chunk in resp.iter_content(chunk_size=self.runtime.download_chunk_size):
                        if chunk:
                            fh.write(chunk)
                            bytes_done += len(chunk)
            partial.replace(target)
        except DownloadFailed:
            partial.unlink(missing_ok=True)
            raise
        except (requests.RequestException, OSError) as exc:
            partial.unlink(missing_ok=True)
            raise DownloadFailed(str(target), f"{url}: {exc}") from exc
        log.info("Downloaded %s (%d bytes)", target, bytes_done)

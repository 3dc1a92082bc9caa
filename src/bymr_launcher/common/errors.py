from __future__ import annotations


class LauncherError(RuntimeError):
    """Base class for every failure raised by the update layer."""


class ConnectionFailed(LauncherError):
    """Neither transport could reach the manifest endpoint."""

    def __init__(self, transport: str, cause: object, status: int | None = None):
        self.transport = transport
        self.cause = cause
        self.status = status
        super().__init__(f"Error code: {status}, cause: {cause}")


class HttpError(LauncherError):
    def __init__(self, status: int, url: str | None = None):
        self.status = status
        self.url = url
        super().__init__(f"Error code: {status}")


class ParseError(LauncherError):
    def __init__(self, cause: object):
        self.cause = cause
        super().__init__(f"Invalid version manifest: {cause}")


class DownloadFailed(LauncherError):
    def __init__(self, target: str, cause: object):
        self.target = target
        self.cause = cause
        super().__init__(f"Failed to download {target}: {cause}")


class UnsupportedPlatform(LauncherError):
    def __init__(self, platform: str):
        self.platform = platform
        super().__init__(f"unsupported platform: {platform}")


class StateWriteFailed(LauncherError):
    def __init__(self, path: str, cause: object):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not write local version file {path}: {cause}")

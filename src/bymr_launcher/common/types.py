from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Iterator, Mapping


def _string_fields(cls, data: Mapping[str, Any] | None, label: str) -> dict[str, str]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{label} must be an object, got {type(data).__name__}.")
    values: dict[str, str] = {}
    for f in fields(cls):
        raw = data.get(f.name, "")
        if raw is None:
            raw = ""
        if not isinstance(raw, str):
            raise ValueError(f"{label}.{f.name} must be a string, got {type(raw).__name__}.")
        values[f.name] = raw
    return values


@dataclass(frozen=True)
class Builds:
    stable: str = ""
    http: str = ""
    local: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Builds":
        return cls(**_string_fields(cls, data, "builds"))

    def variants(self) -> Iterator[tuple[str, str]]:
        yield "stable", self.stable
        yield "http", self.http
        yield "local", self.local


@dataclass(frozen=True)
class FlashRuntimes:
    windows: str = ""
    darwin: str = ""
    linux: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "FlashRuntimes":
        return cls(**_string_fields(cls, data, "flashRuntimes"))


@dataclass(frozen=True)
class VersionManifest:
    current_game_version: str
    current_launcher_version: str
    builds: Builds = field(default_factory=Builds)
    flash_runtimes: FlashRuntimes = field(default_factory=FlashRuntimes)
    https_worked: bool = False


@dataclass
class LocalVersionManifest:
    current_game_version: str = ""
    current_launcher_version: str = ""
    builds: Builds = field(default_factory=Builds)
    flash_runtimes: FlashRuntimes = field(default_factory=FlashRuntimes)

    @classmethod
    def from_remote(cls, manifest: VersionManifest) -> "LocalVersionManifest":
        return cls(
            current_game_version=manifest.current_game_version,
            current_launcher_version=manifest.current_launcher_version,
            builds=manifest.builds,
            flash_runtimes=manifest.flash_runtimes,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LocalVersionManifest":
        return cls(
            current_game_version=str(data.get("current_game_version") or ""),
            current_launcher_version=str(data.get("current_launcher_version") or ""),
            builds=Builds.from_dict(data.get("builds")),
            flash_runtimes=FlashRuntimes.from_dict(data.get("flash_runtimes")),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

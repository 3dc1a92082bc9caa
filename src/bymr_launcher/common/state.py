from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from bymr_launcher.common.types import LocalVersionManifest


def load_local_versions(path: Path) -> tuple[bool, LocalVersionManifest, str]:
    """Read the local version record.

    Never raises for a missing or damaged record: the presence flag is False,
    the manifest is empty and the diagnostic says what was found instead.
    """
    if not path.exists():
        return False, LocalVersionManifest(), f"No local version file found at {path}"

    try:
        # Accept optional UTF-8 BOM left behind by Windows editors.
        with path.open("r", encoding="utf-8-sig") as fh:
            raw: Any = json.load(fh)
    except (OSError, ValueError) as exc:
        return False, LocalVersionManifest(), f"Could not read local version file {path}: {exc}"

    if not isinstance(raw, dict):
        return False, LocalVersionManifest(), f"Local version file {path} does not contain an object"

    try:
        manifest = LocalVersionManifest.from_dict(raw)
    except ValueError as exc:
        return False, LocalVersionManifest(), f"Local version file {path} is malformed: {exc}"

    return (
        True,
        manifest,
        f"Found local versions: game={manifest.current_game_version or 'none'}, "
        f"launcher={manifest.current_launcher_version or 'none'}",
    )


def save_local_versions(path: Path, manifest: LocalVersionManifest) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(".tmp")
    try:
        with tmp.open("w", encoding="utf-8") as fh:
            json.dump(manifest.to_dict(), fh, indent=2, sort_keys=True)
        tmp.replace(path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise

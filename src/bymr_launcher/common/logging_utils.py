from __future__ import annotations

import logging
from pathlib import Path

from bymr_launcher import __version__ as LAUNCHER_VERSION


LOG_FILE_NAME = "bymr_launcher.log"


def configure_logging(log_dir: Path, level: str = "INFO") -> None:
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILE_NAME
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        handlers=[
            logging.FileHandler(log_path, encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )
    # Retry warnings from the transport repeat for every attempt; the
    # resolver already reports the outcome.
    logging.getLogger("urllib3").setLevel(logging.ERROR)
    logging.getLogger(__name__).info("BYMR launcher %s, logging to %s", LAUNCHER_VERSION, log_path)

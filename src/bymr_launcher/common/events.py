from __future__ import annotations

import logging
from typing import Callable, Optional


log = logging.getLogger(__name__)

# Receives human-readable status text for the launcher UI.
EventSink = Callable[[str], None]


def emit_event(sink: Optional[EventSink], message: str) -> None:
    log.info("%s", message)
    if sink is None:
        return
    try:
        sink(message)
    except Exception:
        log.exception("Event sink failed for message: %s", message)

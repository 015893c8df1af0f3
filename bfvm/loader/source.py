"""Program source loading."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def load_source(path: str | Path) -> bytes:
    """
    Return the raw bytes of the program at *path*.

    OSError (missing file, permission denied, ...) propagates unchanged.
    """
    data = Path(path).read_bytes()
    logger.info("Loaded %d bytes of source from %s", len(data), path)
    return data

"""Write the prepared motto file."""

import logging
from pathlib import Path

from .prepare_motto import prepare_motto

logger = logging.getLogger(__name__)


def write_motto_file(motto: str, path: Path) -> Path:
    """Write ``prepare_motto(motto)`` to ``path`` byte for byte, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data = prepare_motto(motto).encode("utf-8")
    path.write_bytes(data)
    logger.info("Wrote motto file %s (%d bytes)", path, len(data))
    return path

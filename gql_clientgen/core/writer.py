"""Persistence of generated modules."""

import logging
from pathlib import Path

from .errors import ArtifactWriteError

logger = logging.getLogger(__name__)


def write_artifact(path: str | Path, content: str) -> Path:
    """Write ``content`` to ``path``, creating missing parent directories.

    Raises:
        ArtifactWriteError: If the directories or the file cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ArtifactWriteError(path, e) from e
    logger.info("Wrote %s", path)
    return path

"""File utility functions."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Final, TextIO

logger: Final = logging.getLogger(__name__)


def ensure_directory_exists(directory: Path) -> None:
    """Create directory if it doesn't exist.

    Args:
        directory: Path to create
    """
    if not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)
        logger.debug("Created directory: %s", directory)


@contextmanager
def atomic_write(target: Path, encoding: str = "utf-8") -> Iterator[TextIO]:
    """Open a temporary sibling of ``target`` for writing and move it into place.

    The target is only replaced once the block completes without an
    exception; otherwise the temporary file is removed and the target is
    left untouched.

    Args:
        target: File to (re)write
        encoding: Text encoding of the written file

    Yields:
        Text stream to write the new content to
    """
    ensure_directory_exists(target.parent)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding=encoding) as f:
            yield f
        os.replace(tmp, target)
    except Exception:
        tmp.unlink(missing_ok=True)
        raise

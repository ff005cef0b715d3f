"""File utility functions."""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from pathlib import Path
from typing import Final

from gamepresence.constants import TEMP_SUFFIX

logger: Final = logging.getLogger(__name__)


def ensure_directory_exists(directory: Path) -> None:
    """Create directory (and parents) if it doesn't exist.

    Args:
        directory: Path to create

    Raises:
        OSError: If the directory cannot be created
    """
    if not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)
        logger.debug("Created directory: %s", directory)


def fsync_directory(directory: Path) -> None:
    """Flush a directory entry so a rename inside it survives a crash.

    Windows cannot open directories for syncing, so this is a no-op there.

    Args:
        directory: Directory whose entries should be flushed
    """
    if os.name != "posix":
        return
    fd = os.open(directory, os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)


def write_atomic(path: Path, data: bytes) -> None:
    """Durably replace the contents of a file.

    The bytes go to a uniquely named sibling temporary file which is
    fsynced and then renamed over ``path``. Concurrent writers never share
    a temporary file. Readers see either the old or the new content,
    never a mix. On failure the temporary file is removed and ``path`` is
    left untouched.

    Args:
        path: File to replace
        data: New file contents

    Raises:
        OSError: If any step of the write fails
    """
    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent, prefix=path.name + ".", suffix=TEMP_SUFFIX
    )
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp, path)
    except BaseException:
        with contextlib.suppress(OSError):
            tmp.unlink()
        raise
    fsync_directory(path.parent)
    logger.debug("Wrote %d bytes to %s", len(data), path)

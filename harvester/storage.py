"""Filesystem helpers: existence checks, directory creation, cache text I/O.

Every helper logs and swallows ``OSError`` so that a filesystem problem never
stops a harvest run; callers receive a falsy value instead.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def file_exists(path: str | Path) -> bool:
    """Return ``True`` only if *path* exists and is a regular file."""
    return Path(path).is_file()


def directory_exists(path: str | Path) -> bool:
    """Return ``True`` only if *path* exists and is a directory."""
    return Path(path).is_dir()


def ensure_directory(path: str | Path, mode: int = 0o755) -> bool:
    """Create *path* (and missing parents) with *mode* if it is not a directory.

    Returns ``False`` when creation fails.  The failure is logged and the
    caller is expected to carry on; later writes into the folder will fail and
    be logged individually.
    """
    folder = Path(path)
    if directory_exists(folder):
        return True
    try:
        folder.mkdir(mode=mode, parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Error creating directory %s: %s", folder, exc)
        return False
    logger.info("Created directory %s", folder)
    return True


def append_text(path: str | Path, content: str) -> bool:
    """Append *content* plus a trailing newline to *path*, creating it if needed."""
    try:
        with open(path, "a", encoding="utf-8") as fh:
            fh.write(content + "\n")
    except OSError as exc:
        logger.error("Error writing to file %s: %s", path, exc)
        return False
    return True


def read_text(path: str | Path) -> str:
    """Return the whole of *path* as text, or ``""`` if it cannot be read."""
    try:
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.error("Error reading file %s: %s", path, exc)
        return ""


def remove_file(path: str | Path) -> bool:
    """Delete *path* if present.  Returns ``False`` only if removal failed."""
    try:
        Path(path).unlink(missing_ok=True)
    except OSError as exc:
        logger.error("Error removing file %s: %s", path, exc)
        return False
    return True

"""Read and write saved arena text files without raising on I/O failures."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from robotarena.utils.real_time_logger import get_logger

LOGGER = get_logger("persistence")

PathLike = Union[str, Path]


def write_text_file(path: PathLike, content: str) -> bool:
    """Write `content` to `path`, returning False when the write fails."""

    target = Path(path)
    try:
        target.write_text(content, encoding="utf-8")
    except (OSError, ValueError) as exc:
        LOGGER.error("Error saving file %s: %s", target, exc)
        return False
    LOGGER.info("Arena saved to %s", target)
    return True


def read_text_file(path: PathLike) -> Optional[str]:
    """Return the file's text, or None when it cannot be read."""

    source = Path(path)
    try:
        return source.read_text(encoding="utf-8")
    except (OSError, ValueError) as exc:
        LOGGER.error("Error reading file %s: %s", source, exc)
        return None

"""Line-oriented file helpers shared by the entity, settings and sequence files."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Iterable, Iterator

KEY_VALUE_SEPARATOR = "="


def read_lines(path: Path) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` pairs without trailing newlines.

    The file is opened and closed inside the generator; a missing file
    yields nothing. Bytes that are not valid UTF-8 do not stop the read:
    they come through as lone surrogates, which :func:`is_valid_text`
    reports so callers can skip the line.
    """
    if not path.exists():
        return
    with open(path, "r", encoding="utf-8", errors="surrogateescape") as f:
        for line_number, line in enumerate(f, start=1):
            yield line_number, line.rstrip("\r\n")


def is_valid_text(line: str) -> bool:
    """``False`` if *line* holds undecodable bytes from :func:`read_lines`."""
    try:
        line.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def write_lines(path: Path, lines: Iterable[str], atomic: bool = True) -> None:
    """Rewrite *path* with one line per item.

    With ``atomic`` the content goes to a temporary file in the same
    directory which then replaces *path* via ``os.replace``, so a crash
    leaves either the old or the new file. Without it the file is
    truncated and rewritten in place.

    Raises
    ------
    OSError
        If the file cannot be written.
    """
    if not atomic:
        with open(path, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
        return

    fd, tmp_path = tempfile.mkstemp(
        dir=str(path.parent),
        prefix=f".{path.name}.",
        suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp_handle:
            for line in lines:
                tmp_handle.write(line + "\n")
            tmp_handle.flush()
            os.fsync(tmp_handle.fileno())
        os.replace(tmp_path, str(path))
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


def parse_key_value(line: str) -> tuple[str, str] | None:
    """Split ``key=value`` on the first separator; ``None`` if there is none."""
    key, sep, value = line.partition(KEY_VALUE_SEPARATOR)
    if not sep or not key:
        return None
    return key, value


def format_key_value(key: str, value: object) -> str:
    """Format a ``key=value`` line."""
    return f"{key}{KEY_VALUE_SEPARATOR}{value}"

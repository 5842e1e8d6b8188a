"""Rewrapping of prose to fit a terminal width."""

from __future__ import annotations

import shutil
import subprocess
import sys
import threading

DEFAULT_COLUMNS = 120
"""Value returned by columns() when the terminal width can't be found."""

_columns_lock = threading.Lock()
_tty_columns: int | None = None


def _width(s: str) -> int:
    return len(s.encode("utf-8", "surrogateescape"))


def rewrap_at(s: str, max_width: int) -> str:
    """Rewrap s at max_width columns.

    Leading and trailing tabs of each line are dropped, single newlines act
    as spaces, and two or more newlines separate paragraphs.
    """
    output: list[str] = []
    pending = ""

    for paragraph in s.split("\n\n"):
        paragraph = paragraph.strip()
        if not paragraph:
            continue
        for line in paragraph.split("\n"):
            line = line.strip("\t")
            if not line:
                continue
            for field in line.split():
                if _width(pending) + 1 + _width(field) > max_width:
                    output.append(pending + "\n")
                    pending = field
                elif pending:
                    pending += " " + field
                else:
                    pending = field
        output.append(pending + "\n\n")
        pending = ""

    return "".join(output).removesuffix("\n\n")


def _stty_size_cols() -> int:
    stty = shutil.which("stty")
    if stty is None:
        raise FileNotFoundError("stty not found")
    proc = subprocess.run(
        [stty, "size"],
        stdin=sys.stdin,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        check=False,
    )
    if proc.returncode != 0:
        raise OSError(f"stty exited with status {proc.returncode}")
    fields = proc.stdout.split()
    if len(fields) != 2:
        raise ValueError(f"unexpected output ({proc.stdout!r})")
    return int(fields[1])


def columns() -> int:
    """Columns of the current terminal, or DEFAULT_COLUMNS if unknown."""
    global _tty_columns
    with _columns_lock:
        if _tty_columns is None:
            try:
                _tty_columns = _stty_size_cols()
            except (OSError, ValueError, subprocess.SubprocessError):
                _tty_columns = DEFAULT_COLUMNS
        return _tty_columns


def rewrap(s: str) -> str:
    """Rewrap s to the terminal width, kept between 40 and a damped maximum."""
    cols = columns()
    if cols < 40:
        cols = 40
    elif cols > 180:
        cols = 180 + int(0.5 * (cols - 180))
    return rewrap_at(s, cols)
"""Filesystem operations for extracted course packages.

Reads and writes member files without touching their line endings, and
discovers the text members worth scanning. Bytes that do not decode under
the configured encoding round-trip through ``surrogateescape`` so a rewrite
never corrupts the parts of a file it did not change.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from collections.abc import Iterable
from pathlib import Path

# Markup/text members scanned for directives. Everything else is left alone.
DEFAULT_EXTENSIONS: tuple[str, ...] = (".html", ".htm", ".xml", ".txt")

_ERRORS = "surrogateescape"


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def read_text_file(path: Path, *, encoding: str = "utf-8") -> str:
    """Read a whole member file, preserving ``\\r\\n`` line endings."""
    with path.open(encoding=encoding, errors=_ERRORS, newline="") as fh:
        return fh.read()


def write_text_file(path: Path, text: str, *, encoding: str = "utf-8") -> None:
    """Replace *path* with *text* atomically.

    The text goes to a temporary file in the same directory, which is then
    renamed over *path*. A failed write leaves the original file intact.
    """
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".canvasdates-", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding=encoding, errors=_ERRORS, newline="") as fh:
            fh.write(text)
        if path.exists():
            shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


def has_text_extension(path: Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> bool:
    """Whether *path* carries one of the allow-listed suffixes (case-insensitive)."""
    allowed = {ext.lower() for ext in extensions}
    return path.suffix.lower() in allowed


def find_text_files(
    root: Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> list[Path]:
    """Discover every allow-listed regular file under *root*.

    The walk is exhaustive (hidden directories included) and the result is
    sorted so runs are reproducible.
    """
    allowed = {ext.lower() for ext in extensions}
    results: list[Path] = []
    for path in root.rglob("*"):
        if not path.is_file():
            continue
        if path.suffix.lower() in allowed:
            results.append(path)
    return sorted(results)

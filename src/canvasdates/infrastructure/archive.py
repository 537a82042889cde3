"""Thin wrappers around the external ``unzip`` and ``zip`` tools.

Archive format handling is delegated entirely to those binaries. Each call
raises :class:`ArchiveToolError` when the tool is missing or exits non-zero;
callers decide whether that is fatal.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_SUFFIX = "_updated"


class ArchiveToolError(RuntimeError):
    """An external archive tool could not be run or reported failure."""

    def __init__(self, tool: str, message: str, *, returncode: int | None = None) -> None:
        super().__init__(message)
        self.tool = tool
        self.returncode = returncode


def _run_tool(args: list[str], *, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    """Run an archive tool, converting every failure into ArchiveToolError."""
    tool = args[0]
    logger.debug("running %s", " ".join(args))
    try:
        return subprocess.run(
            args,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
        )
    except OSError as exc:
        msg = (
            f"Could not run '{tool}': {exc}. "
            f"Make sure the '{tool}' command is installed and on your PATH."
        )
        raise ArchiveToolError(tool, msg) from exc
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or exc.stdout or "").strip()
        msg = f"'{tool}' exited with status {exc.returncode}"
        if detail:
            msg = f"{msg}: {detail}"
        raise ArchiveToolError(tool, msg, returncode=exc.returncode) from exc


def unpack_archive(archive: Path, dest: Path, *, command: str = "unzip") -> None:
    """Extract *archive* into *dest*, overwriting existing files without prompting."""
    dest.mkdir(parents=True, exist_ok=True)
    _run_tool([command, "-o", str(archive), "-d", str(dest)])


def pack_directory(source: Path, archive: Path, *, command: str = "zip") -> Path:
    """Zip the contents of *source* (not the directory itself) into *archive*.

    The tool runs from inside *source* so member paths stay relative to the
    package root. An existing archive is removed first; ``zip`` would
    otherwise merge into it. Returns the absolute archive path.
    """
    target = archive.resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.unlink(missing_ok=True)
    _run_tool([command, "-r", "-X", str(target), "."], cwd=source)
    return target


def default_output_path(archive: Path, suffix: str = DEFAULT_OUTPUT_SUFFIX) -> Path:
    """``course.imscc`` -> ``course_updated.imscc`` beside the input."""
    return archive.with_name(f"{archive.stem}{suffix}{archive.suffix}")

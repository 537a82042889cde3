"""ArchiveService: unpack, rewrite, repack an IMS Common Cartridge.

Stages:
  1. VALIDATE  the input archive must exist and a kept work directory
               must be safe to clear
  2. UNPACK    external ``unzip`` into a work directory
  3. REWRITE   RewriteService over the extracted tree
  4. REPACK    external ``zip`` into the output archive

An unpack failure stops before any file is touched. A repack failure is
reported but does not roll back edits already made in the work directory.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from canvasdates.domain.calendar import CalendarDate
from canvasdates.infrastructure.archive import (
    ArchiveToolError,
    default_output_path,
    pack_directory,
    unpack_archive,
)
from canvasdates.services.base import BaseService
from canvasdates.services.result import ServiceResult
from canvasdates.services.rewrite import RewriteService

logger = logging.getLogger(__name__)


class ArchiveService(BaseService):
    """Archive-level date rewriting."""

    @contextmanager
    def _work_dir(self) -> Iterator[Path]:
        """Yield an empty extraction directory.

        With ``archive.keep_work_dir`` the configured directory is reused
        (cleared first so stale members never end up in the new archive)
        and left behind for inspection. Otherwise a temporary directory is
        removed on exit.
        """
        cfg = self._settings.archive
        if cfg.keep_work_dir:
            work = Path(cfg.work_dir)
            if work.exists():
                shutil.rmtree(work)
            work.mkdir(parents=True)
            yield work
            return
        with tempfile.TemporaryDirectory(prefix="canvasdates-") as tmp:
            yield Path(tmp)

    def _unsafe_work_dir(self, archive: Path, output: Path) -> str | None:
        """Why the kept work directory must not be cleared, or None."""
        work = Path(self._settings.archive.work_dir).resolve()
        guarded = {
            "the input archive": archive,
            "the output archive": output,
            "the current directory": Path.cwd(),
        }
        for label, path in guarded.items():
            if path.resolve().is_relative_to(work):
                return f"Refusing to clear work directory '{work}': it contains {label}"
        return None

    def update_archive(
        self,
        archive: Path,
        start_date: CalendarDate,
        start_index: int | None = None,
        *,
        output: Path | None = None,
        dry_run: bool = False,
    ) -> ServiceResult:
        """Rewrite every directive inside *archive* into a new archive.

        *output* defaults to ``<stem>_updated<ext>`` beside the input. With
        *dry_run* the archive is unpacked and scanned but nothing is
        written and no output archive is produced.
        """
        op = "update_archive"
        cfg = self._settings.archive

        # --- VALIDATE ---
        if not archive.is_file():
            return ServiceResult.failure(
                op, "ARCHIVE_NOT_FOUND", f"Archive file not found at '{archive}'"
            )
        if output is None:
            output = default_output_path(archive, cfg.output_suffix)
        if cfg.keep_work_dir:
            reason = self._unsafe_work_dir(archive, output)
            if reason is not None:
                return ServiceResult.failure(
                    op, "WORK_DIR_UNSAFE", reason, work_dir=cfg.work_dir
                )

        with self._work_dir() as work:
            # --- UNPACK ---
            try:
                unpack_archive(archive, work, command=cfg.unzip_command)
            except ArchiveToolError as exc:
                return ServiceResult.failure(
                    op, "UNPACK_FAILED", f"Failed to unzip the archive: {exc}", archive=str(archive)
                )
            logger.debug("unpacked %s into %s", archive, work)

            # --- REWRITE ---
            try:
                tree = RewriteService(self._settings).rewrite_tree(
                    work, start_date, start_index, dry_run=dry_run
                )
            except Exception as exc:
                logger.debug("rewrite of %s failed", work, exc_info=True)
                return ServiceResult.failure(
                    op,
                    "PROCESSING_FAILED",
                    f"An error occurred during file processing: {exc}",
                    archive=str(archive),
                )
            if not tree.ok:
                return tree.model_copy(update={"op": op})

            # The extraction root is meaningless once the work dir is gone.
            data = {key: value for key, value in tree.data.items() if key != "root"}
            data["archive"] = str(archive)
            data["output"] = None
            if cfg.keep_work_dir:
                data["work_dir"] = str(work)

            if dry_run:
                return ServiceResult(ok=True, op=op, data=data, warnings=tree.warnings)

            # --- REPACK ---
            try:
                target = pack_directory(work, output, command=cfg.zip_command)
            except ArchiveToolError as exc:
                return ServiceResult.failure(
                    op,
                    "REPACK_FAILED",
                    f"Failed to re-zip the directory: {exc}",
                    warnings=tree.warnings,
                    output=str(output),
                )
            logger.debug("packed %s into %s", work, target)

        data["output"] = str(target)
        return ServiceResult(ok=True, op=op, data=data, warnings=tree.warnings)

"""RewriteService: apply DateReplace directives to files and trees.

Pipeline per file: read -> scan/replace -> write back only when a marker
was seen. Files are processed one at a time and share no state, so a
failure in one member file is reported and the walk carries on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from canvasdates.domain.calendar import CalendarDate
from canvasdates.domain.directives import (
    DirectiveError,
    ScanResult,
    apply_directives,
    find_directives,
    parse_directive,
)
from canvasdates.infrastructure.filesystem import (
    find_text_files,
    has_text_extension,
    read_text_file,
    write_text_file,
)
from canvasdates.services.base import BaseService
from canvasdates.services.result import ServiceResult

logger = logging.getLogger(__name__)


@dataclass
class FileOutcome:
    """What happened to one member file."""

    path: Path
    applied: int = 0
    skipped: int = 0
    written: bool = False
    warnings: list[str] = field(default_factory=list)

    def to_dict(self, root: Path | None = None) -> dict[str, Any]:
        shown = self.path.relative_to(root) if root is not None else self.path
        return {
            "path": shown.as_posix(),
            "applied": self.applied,
            "skipped": self.skipped,
            "written": self.written,
        }


class RewriteService(BaseService):
    """Date rewriting over text buffers, single files, and directory trees."""

    # ------------------------------------------------------------------
    # Buffers
    # ------------------------------------------------------------------

    def rewrite_text(
        self,
        content: str,
        start_date: CalendarDate,
        start_index: int | None = None,
    ) -> ScanResult:
        """Apply every directive in *content* using the configured marker."""
        return apply_directives(
            content,
            start_date,
            self._start_index(start_index),
            marker=self._settings.dates.marker,
        )

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    def _process_file(
        self,
        path: Path,
        start_date: CalendarDate,
        start_index: int,
        *,
        dry_run: bool,
    ) -> FileOutcome:
        """Rewrite one file. I/O and decoding errors propagate to the caller."""
        encoding = self._settings.dates.encoding
        content = read_text_file(path, encoding=encoding)
        scan = self.rewrite_text(content, start_date, start_index)

        outcome = FileOutcome(path=path, applied=scan.applied, skipped=scan.skipped)
        outcome.warnings.extend(f"{path}: {warning}" for warning in scan.warnings)
        if scan.modified and not dry_run:
            write_text_file(path, scan.content, encoding=encoding)
            outcome.written = True
        logger.debug(
            "processed %s: applied=%d skipped=%d written=%s",
            path,
            scan.applied,
            scan.skipped,
            outcome.written,
        )
        return outcome

    def rewrite_file(
        self,
        path: Path,
        start_date: CalendarDate,
        start_index: int | None = None,
        *,
        dry_run: bool = False,
    ) -> ServiceResult:
        """Rewrite a single file in place."""
        op = "rewrite_file"
        if not path.is_file():
            return ServiceResult.failure(op, "NOT_FOUND", f"File not found: {path}")

        try:
            outcome = self._process_file(
                path, start_date, self._start_index(start_index), dry_run=dry_run
            )
        except (OSError, UnicodeError) as exc:
            return ServiceResult.failure(op, "FILE_ERROR", f"Could not process {path}: {exc}")

        return ServiceResult(
            ok=True,
            op=op,
            data={**outcome.to_dict(), "dry_run": dry_run},
            warnings=outcome.warnings,
        )

    # ------------------------------------------------------------------
    # Trees
    # ------------------------------------------------------------------

    def rewrite_tree(
        self,
        root: Path,
        start_date: CalendarDate,
        start_index: int | None = None,
        *,
        dry_run: bool = False,
    ) -> ServiceResult:
        """Rewrite every allow-listed file under *root* in place.

        Unreadable or unwritable files become warnings; the rest of the
        tree is still processed.
        """
        op = "rewrite_tree"
        if not root.is_dir():
            return ServiceResult.failure(op, "NOT_FOUND", f"Directory not found: {root}")

        index = self._start_index(start_index)
        files = find_text_files(root, self._settings.dates.extensions)
        warnings: list[str] = []
        touched: list[FileOutcome] = []
        failed = 0

        for path in files:
            try:
                outcome = self._process_file(path, start_date, index, dry_run=dry_run)
            except (OSError, UnicodeError) as exc:
                logger.debug("skipping %s", path, exc_info=True)
                warnings.append(f"Could not process {path}: {exc}. Skipping.")
                failed += 1
                continue
            warnings.extend(outcome.warnings)
            if outcome.applied or outcome.skipped:
                touched.append(outcome)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "root": str(root),
                "start_date": start_date.isoformat(),
                "start_index": index,
                "dry_run": dry_run,
                "files_scanned": len(files),
                "files_modified": sum(1 for o in touched if o.written or dry_run),
                "files_failed": failed,
                "directives_applied": sum(o.applied for o in touched),
                "directives_skipped": sum(o.skipped for o in touched),
                "files": [o.to_dict(root) for o in touched],
            },
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Read-only helpers
    # ------------------------------------------------------------------

    def scan(self, path: Path, start_index: int | None = None) -> ServiceResult:
        """List directives in a file or tree without modifying anything."""
        op = "scan"
        index = self._start_index(start_index)
        dates = self._settings.dates

        if path.is_dir():
            root: Path | None = path
            files = find_text_files(path, dates.extensions)
        elif path.is_file():
            root = None
            files = [path] if has_text_extension(path, dates.extensions) else []
        else:
            return ServiceResult.failure(op, "NOT_FOUND", f"Path not found: {path}")

        warnings: list[str] = []
        items: list[dict[str, Any]] = []
        for file_path in files:
            try:
                content = read_text_file(file_path, encoding=dates.encoding)
            except (OSError, UnicodeError) as exc:
                warnings.append(f"Could not read {file_path}: {exc}. Skipping.")
                continue
            shown = file_path.relative_to(root) if root is not None else file_path
            for found in find_directives(content, index, marker=dates.marker):
                items.append(
                    {
                        "path": shown.as_posix(),
                        "line": found.line,
                        "args": found.args,
                        "target": found.target,
                        "template": found.directive.template if found.directive else None,
                        "day_number": found.directive.day_number if found.directive else None,
                        "problem": found.problem,
                    }
                )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(path),
                "files_scanned": len(files),
                "count": len(items),
                "problems": sum(1 for item in items if item["problem"]),
                "items": items,
            },
            warnings=warnings,
        )

    def render(
        self,
        args: str,
        start_date: CalendarDate,
        start_index: int | None = None,
    ) -> ServiceResult:
        """Resolve one directive's argument text, e.g. ``"MM DD, YYYY, 5"``."""
        op = "render_date"
        index = self._start_index(start_index)
        try:
            directive = parse_directive(args, index, marker=self._settings.dates.marker)
        except DirectiveError as exc:
            return ServiceResult.failure(op, "INVALID_DIRECTIVE", str(exc))

        target = start_date.add_days(directive.offset(index))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "template": directive.template,
                "day_number": directive.day_number,
                "start_index": index,
                "offset": directive.offset(index),
                "date": target.isoformat(),
                "weekday": target.weekday_name,
                "text": directive.render(start_date, index),
            },
        )

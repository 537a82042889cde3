"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from canvasdates.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from canvasdates.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "render_date":
        return str(result.data.get("text", ""))
    if result.op == "scan":
        return "\n".join(f"{item['path']}:{item['line']}" for item in result.data.get("items", []))
    if result.op == "update_archive" and result.data.get("output"):
        return str(result.data["output"])

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="cd.ok")
    op = Text(f"  {result.op}", style="cd.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="cd.key")
    v = Text(str(value), style=style)
    console.print(k, v, end="")
    console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="cd.error")
    op = Text(f"  {result.op}", style="cd.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        for key, value in err.detail.items():
            _field(console, key, value)


# ── Op renderers ──────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_rewrite(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """update_archive, rewrite_tree, and rewrite_file share one layout."""
    data = result.data
    _status_line(console, result)

    for key in ("archive", "root", "path"):
        if data.get(key):
            _field(console, key, data[key], style="cd.path")
    if data.get("output"):
        _field(console, "output", data["output"], style="cd.path")
    if data.get("work_dir"):
        _field(console, "work dir", data["work_dir"], style="cd.path")
    if "start_date" in data:
        _field(
            console,
            "start date",
            f"{data['start_date']} (index {data.get('start_index', 0)})",
            style="cd.date",
        )

    if "files_scanned" in data:
        _field(
            console,
            "files",
            f"{data['files_scanned']} scanned, {data['files_modified']} modified, "
            f"{data['files_failed']} failed",
        )
        _field(
            console,
            "directives",
            f"{data['directives_applied']} applied, {data['directives_skipped']} skipped",
        )
    else:
        _field(
            console,
            "directives",
            f"{data.get('applied', 0)} applied, {data.get('skipped', 0)} skipped",
        )

    if data.get("dry_run"):
        console.print(Text("  dry run, nothing was written", style="cd.warning"))

    files = data.get("files") or []
    if verbose and files:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("File", style="cd.path")
        table.add_column("Applied", justify="right")
        table.add_column("Skipped", justify="right")
        table.add_column("Written")
        for item in files:
            table.add_row(
                str(item["path"]),
                str(item["applied"]),
                str(item["skipped"]),
                "yes" if item["written"] else "no",
            )
        console.print(table)


def _render_scan(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "path", data.get("path", ""), style="cd.path")
    _field(
        console,
        "directives",
        f"{data.get('count', 0)} found in {data.get('files_scanned', 0)} files, "
        f"{data.get('problems', 0)} with problems",
    )

    items = data.get("items") or []
    if not items:
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("File", style="cd.path")
    table.add_column("Line", justify="right")
    table.add_column("Template")
    table.add_column("Day", justify="right")
    table.add_column("Target" if not verbose else "Target / Problem")
    for item in items:
        if item.get("problem"):
            last = Text(str(item["problem"]), style="cd.warning")
        else:
            last = Text(repr(item.get("target") or ""))
        table.add_row(
            str(item["path"]),
            str(item["line"]),
            str(item.get("template") or ""),
            "" if item.get("day_number") is None else str(item["day_number"]),
            last,
        )
    console.print(table)


def _render_date(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "text", data.get("text", ""), style="cd.date")
    _field(console, "date", f"{data.get('date', '')} ({data.get('weekday', '')})")
    day, index = data.get("day_number"), data.get("start_index")
    _field(console, "offset", f"{data.get('offset', 0)} days (day {day} - index {index})")
    if verbose:
        _field(console, "template", repr(data.get("template", "")))


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "update_archive": _render_rewrite,
    "rewrite_tree": _render_rewrite,
    "rewrite_file": _render_rewrite,
    "scan": _render_scan,
    "render_date": _render_date,
}

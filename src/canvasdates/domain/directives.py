"""DateReplace directive scanning and text splicing.

A directive looks like ``DateReplace(<template>, <day number>)``. It is
never rewritten itself; instead the text node that follows it (everything
between the next ``>`` after its closing parenthesis and the next ``<``) is
replaced with the rendered date. This is a positional heuristic, not an
HTML parser, so irregular markup around a directive changes which span is
hit.

Pure functions, no I/O. Problems are reported through :class:`ScanResult`
so callers decide how to log them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from canvasdates.domain.calendar import CalendarDate
from canvasdates.domain.template import format_date

MARKER = "DateReplace("

# Characters trimmed from both ends of a directive's template.
_TEMPLATE_STRIP = " \t\n\r\"'_()"

# Leading integer with optional whitespace and sign; trailing text is ignored.
_DAY_NUMBER = re.compile(r"\s*([+-]?\d+)")


class DirectiveError(ValueError):
    """Raised when a directive's day number cannot be parsed."""


@dataclass(frozen=True)
class Directive:
    """Arguments of one ``DateReplace(...)`` occurrence."""

    template: str
    day_number: int

    def offset(self, start_index: int) -> int:
        """Days from the base date once *start_index* is accounted for."""
        return self.day_number - start_index

    def render(self, base_date: CalendarDate, start_index: int) -> str:
        return format_date(base_date.add_days(self.offset(start_index)), self.template)


@dataclass(frozen=True)
class ScanResult:
    """Outcome of scanning one text buffer.

    ``modified`` is true once any marker was seen, even one that could not
    be applied; callers use it to decide whether to persist the buffer.
    """

    content: str
    modified: bool = False
    applied: int = 0
    skipped: int = 0
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class FoundDirective:
    """A directive located by :func:`find_directives`."""

    line: int
    args: str
    target: str | None = None
    directive: Directive | None = None
    problem: str | None = None


@dataclass(frozen=True)
class _Site:
    """Offsets of one directive occurrence inside a buffer."""

    marker_start: int
    close_paren: int
    target_start: int
    target_end: int
    args: str


def parse_directive(args: str, start_index: int, *, marker: str = MARKER) -> Directive:
    """Parse the text between a directive's parentheses.

    The argument text is split on its *last* comma, so templates may contain
    commas (``MM DD, YYYY, 5``). Without a comma the whole text is the
    template and the day number defaults to *start_index*, which resolves
    to the base date itself.

    Raises:
        DirectiveError: The text after the last comma is not an integer.
    """
    comma = args.rfind(",")
    if comma == -1:
        template, day_number = args, start_index
    else:
        template = args[:comma]
        day_text = args[comma + 1 :]
        match = _DAY_NUMBER.match(day_text)
        if match is None:
            msg = f"Invalid day number {day_text.strip()!r} in {marker}{args})"
            raise DirectiveError(msg)
        day_number = int(match.group(1))
    return Directive(template=template.strip(_TEMPLATE_STRIP), day_number=day_number)


def _locate(content: str, marker_start: int, marker: str) -> _Site | None:
    """Find the closing parenthesis and target span for a marker.

    Returns None when any delimiter is missing.
    """
    args_start = marker_start + len(marker)
    close_paren = content.find(")", args_start)
    if close_paren == -1:
        return None
    gt = content.find(">", close_paren)
    if gt == -1:
        return None
    target_start = gt + 1
    target_end = content.find("<", target_start)
    if target_end == -1:
        return None
    return _Site(
        marker_start=marker_start,
        close_paren=close_paren,
        target_start=target_start,
        target_end=target_end,
        args=content[args_start:close_paren],
    )


def apply_directives(
    content: str,
    base_date: CalendarDate,
    start_index: int,
    *,
    marker: str = MARKER,
) -> ScanResult:
    """Rewrite the target span of every directive in *content*.

    The cursor only moves forward: past the inserted date after a
    replacement, past the closing parenthesis after a bad day number, and
    past the marker itself when a delimiter is missing. The scan therefore
    terminates on any input.
    """
    modified = False
    applied = 0
    skipped = 0
    warnings: list[str] = []
    cursor = 0

    while (start := content.find(marker, cursor)) != -1:
        modified = True
        site = _locate(content, start, marker)
        if site is None:
            skipped += 1
            cursor = start + len(marker)
            continue

        try:
            directive = parse_directive(site.args, start_index, marker=marker)
        except DirectiveError as exc:
            warnings.append(str(exc))
            skipped += 1
            cursor = site.close_paren + 1
            continue

        rendered = directive.render(base_date, start_index)
        content = content[: site.target_start] + rendered + content[site.target_end :]
        applied += 1
        cursor = site.target_start + len(rendered)

    return ScanResult(
        content=content,
        modified=modified,
        applied=applied,
        skipped=skipped,
        warnings=warnings,
    )


def find_directives(
    content: str,
    start_index: int = 0,
    *,
    marker: str = MARKER,
) -> list[FoundDirective]:
    """List the directives in *content* without changing it.

    Walks the buffer with the same rules as :func:`apply_directives`, so
    the reported targets are exactly the spans a rewrite would replace.
    """
    found: list[FoundDirective] = []
    cursor = 0

    while (start := content.find(marker, cursor)) != -1:
        line = content.count("\n", 0, start) + 1
        site = _locate(content, start, marker)
        if site is None:
            found.append(
                FoundDirective(line=line, args="", problem="missing ')', '>' or '<' delimiter")
            )
            cursor = start + len(marker)
            continue

        try:
            directive = parse_directive(site.args, start_index, marker=marker)
        except DirectiveError as exc:
            found.append(FoundDirective(line=line, args=site.args, problem=str(exc)))
            cursor = site.close_paren + 1
            continue

        found.append(
            FoundDirective(
                line=line,
                args=site.args,
                target=content[site.target_start : site.target_end],
                directive=directive,
            )
        )
        cursor = site.target_end

    return found

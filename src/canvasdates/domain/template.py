"""Date template rendering: the ``YYYY``/``MM``/``NN``/``DD`` token language.

Tokens are applied one class at a time, longest first, so ``YYYY`` is
consumed before the ``Y`` pass can split it. Text inserted by an earlier
pass is frozen: the ``M`` pass never rewrites the "M" in "March".
"""

from __future__ import annotations

from collections.abc import Callable

from canvasdates.domain.calendar import CalendarDate

# Precedence order. Each entry renders one token against a date.
TOKENS: tuple[tuple[str, Callable[[CalendarDate], str]], ...] = (
    ("YYYY", lambda d: str(d.year)),
    ("MM", lambda d: d.month_name),
    ("NN", lambda d: d.weekday_name),
    ("DD", lambda d: f"{d.day:02d}"),
    ("Y", lambda d: str(d.year)),
    ("M", lambda d: d.month_name[:3]),
    ("N", lambda d: d.weekday_name[:3]),
    ("D", lambda d: str(d.day)),
)


def format_date(date: CalendarDate, template: str) -> str:
    """Render *date* through *template*.

    The template is held as a list of ``(text, is_literal)`` segments. Each
    token pass only splits literal segments, replacing every non-overlapping
    occurrence left to right. Unrecognized characters pass through.
    """
    segments: list[tuple[str, bool]] = [(template, True)]
    for token, render in TOKENS:
        value = render(date)
        next_segments: list[tuple[str, bool]] = []
        for text, literal in segments:
            if not literal or token not in text:
                next_segments.append((text, literal))
                continue
            pieces = text.split(token)
            for i, piece in enumerate(pieces):
                if i:
                    next_segments.append((value, False))
                if piece:
                    next_segments.append((piece, True))
        segments = next_segments
    return "".join(text for text, _ in segments)

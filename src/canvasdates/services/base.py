"""BaseService: shared foundation for canvasdates services."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from canvasdates.config.settings import CanvasDatesSettings


class BaseService:
    """Base for service-layer classes.

    Every service receives the invocation's settings at construction time
    and reads its section (``dates``, ``archive``) from there. Services keep
    no state between calls; each operation takes its base date and start
    index explicitly.
    """

    def __init__(self, settings: CanvasDatesSettings) -> None:
        self._settings = settings

    def _start_index(self, start_index: int | None) -> int:
        """Explicit start index, or the configured default."""
        if start_index is None:
            return self._settings.dates.start_index
        return start_index

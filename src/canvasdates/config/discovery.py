"""Config file discovery.

Walk-up finder locates canvasdates.toml (or a hidden .canvasdates.toml) from
the working directory, so a course folder can carry its own start index and
extension list. CANVASDATES_CONFIG and --config override the walk.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAMES: tuple[str, ...] = ("canvasdates.toml", ".canvasdates.toml")
CONFIG_ENV_VAR = "CANVASDATES_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest config file at or above *start* (default: cwd).

    An env var pointing at a missing file disables discovery rather than
    falling back to the walk.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        for name in CONFIG_FILENAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
    return None

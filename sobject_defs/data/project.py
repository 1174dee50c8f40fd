"""
project.py — Locate the Salesforce DX project that receives generated stubs.
"""
from __future__ import annotations

from pathlib import Path

from sobject_defs.core.errors import PreconditionError

PROJECT_FILE = "sfdx-project.json"


def find_project_root(start: str | Path | None = None) -> Path:
    """Walk up from *start* (default: cwd) to the directory holding ``sfdx-project.json``.

    Raises:
        PreconditionError: If no enclosing directory is a DX project.
    """
    start = Path(start or Path.cwd()).resolve()
    for candidate in (start, *start.parents):
        if (candidate / PROJECT_FILE).is_file():
            return candidate
    raise PreconditionError(
        f"No project path found: {start} is not inside a Salesforce DX project "
        f"(no {PROJECT_FILE})"
    )

"""
stub_writer.py — Persist rendered stubs under the project's tools directory.

Layout::

    <root>/tools/sobjects/standardObjects/<Name>.cls
    <root>/tools/sobjects/customObjects/<Name>.cls

Files are overwritten on every run.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from sobject_defs.core.renderer import STUB_EXTENSION


@dataclass(frozen=True)
class OutputDirs:
    standard: Path
    custom: Path

    def for_object(self, custom: bool) -> Path:
        return self.custom if custom else self.standard


def output_dirs(root: str | Path) -> OutputDirs:
    """Derive the two category directories under *root* (no I/O)."""
    base = Path(root) / "tools" / "sobjects"
    return OutputDirs(standard=base / "standardObjects", custom=base / "customObjects")


def ensure_output_dirs(root: str | Path) -> OutputDirs:
    """Create both category directories.  Safe to call repeatedly or concurrently."""
    dirs = output_dirs(root)
    dirs.standard.mkdir(parents=True, exist_ok=True)
    dirs.custom.mkdir(parents=True, exist_ok=True)
    return dirs


def write_stub(dirs: OutputDirs, object_name: str, custom: bool, content: str) -> Path:
    """Write one stub file and return its path.

    Raises:
        OSError: If the file cannot be written.
    """
    target_dir = dirs.for_object(custom)
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / f"{object_name}{STUB_EXTENSION}"
    path.write_text(content, encoding="utf-8")
    return path

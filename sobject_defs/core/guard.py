"""
guard.py — Prevent two refreshes from writing the same stub directories.

The caller owns the guard instance and wraps ``generate_sobjects`` in it::

    with guard:
        generate_sobjects(...)
"""
from __future__ import annotations

import threading

from sobject_defs.core.errors import RefreshAlreadyActiveError


class RefreshGuard:
    """Non-blocking lock used as a context manager."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    @property
    def active(self) -> bool:
        return self._lock.locked()

    def __enter__(self) -> RefreshGuard:
        if not self._lock.acquire(blocking=False):
            raise RefreshAlreadyActiveError("A SObject definitions refresh is already active")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._lock.release()

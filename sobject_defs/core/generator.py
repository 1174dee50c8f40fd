"""
generator.py — Generate faux Apex classes for SObjects to enable code completion.

Pipeline: global describe -> category filter -> per-object describe, render and
write on a bounded thread pool -> tally.  Only the global describe and the
preconditions can fail the run; every per-object failure becomes a ``Failure``
outcome and a warning event.
"""
from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterable

from sobject_defs.config import DEFAULT_MAX_WORKERS
from sobject_defs.core.errors import PreconditionError, RemoteServiceError
from sobject_defs.core.models import (
    Category,
    Failure,
    GenerationOutcome,
    GenerationResult,
    ObjectSummary,
    ProgressEvent,
    Success,
)
from sobject_defs.core.renderer import render_stub
from sobject_defs.data import sf_api, stub_writer

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[ProgressEvent], None]


def filter_sobjects(sobjects: Iterable[ObjectSummary], category: Category) -> list[ObjectSummary]:
    """Keep the SObjects that belong to *category*, preserving order."""
    if category is Category.CUSTOM:
        return [s for s in sobjects if s.custom]
    if category is Category.STANDARD:
        return [s for s in sobjects if not s.custom]
    return list(sobjects)


class SObjectGenerator:
    """One refresh run against one org and one output root.

    Args:
        connection: Authenticated ``sf_api.Connection`` (anything the
            ``sf_api`` describe functions accept).
        category: Which SObjects to generate.
        output_dir: Project root; stubs go under ``tools/sobjects``.
        on_progress: Receives a ``ProgressEvent`` at each stage.  Called from
            worker threads as well as the calling thread.
        max_workers: Upper bound on concurrent describe calls.
        cancel_event: Set by the caller to stop dispatching further describes.
        timeout: Seconds after which ``cancel_event`` is set automatically.
    """

    def __init__(
        self,
        connection: sf_api.Connection,
        output_dir: str | Path,
        category: Category | str = Category.ALL,
        on_progress: ProgressCallback | None = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
        cancel_event: threading.Event | None = None,
        timeout: float | None = None,
    ):
        self.connection = connection
        self.output_dir = output_dir
        self.category = Category.parse(category)
        self.on_progress = on_progress
        self.max_workers = max_workers
        self.cancel_event = cancel_event or threading.Event()
        self.timeout = timeout
        self._dirs: stub_writer.OutputDirs | None = None

    def _check_preconditions(self) -> None:
        if self.connection is None:
            raise PreconditionError("No target org connection. Use --target-org or set a default org.")
        if not self.output_dir:
            raise PreconditionError("No output directory given")
        if not Path(self.output_dir).is_dir():
            raise PreconditionError(f"Output directory does not exist: {self.output_dir}")
        if self.max_workers < 1:
            raise PreconditionError(f"max_workers must be at least 1, got {self.max_workers}")

    def generate(self) -> GenerationResult:
        """Run the refresh.

        Raises:
            PreconditionError: Before any remote call, on invalid inputs.
            RemoteServiceError: If the SObject list cannot be fetched.
        """
        self._check_preconditions()
        self._emit("start")

        sobjects = filter_sobjects(sf_api.list_sobjects(self.connection), self.category)
        self._emit("found", count=len(sobjects), category=self.category.value)

        self._dirs = stub_writer.ensure_output_dirs(self.output_dir)

        timer = None
        if self.timeout is not None:
            timer = threading.Timer(self.timeout, self.cancel_event.set)
            timer.daemon = True
            timer.start()
        try:
            with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="sobject") as pool:
                futures = [pool.submit(self._process, s) for s in sobjects]
                outcomes = [f.result() for f in futures]
        finally:
            if timer is not None:
                timer.cancel()

        skipped = any(isinstance(o, Failure) and o.cancelled for o in outcomes)
        result = GenerationResult.from_outcomes(outcomes, cancelled=skipped)
        self._emit(
            "done",
            total=result.total_objects,
            standard=result.standard_objects,
            custom=result.custom_objects,
            failed=len(result.failed_objects),
            cancelled=result.cancelled,
        )
        return result

    def _process(self, sobject: ObjectSummary) -> GenerationOutcome:
        if self.cancel_event.is_set():
            logger.debug("Skipping %s: refresh cancelled", sobject.name)
            return Failure(sobject.name, "cancelled", cancelled=True)

        self._emit("processing", name=sobject.name)
        try:
            description = sf_api.describe_object(self.connection, sobject.name)
            content = render_stub(description)
            stub_writer.write_stub(self._dirs, sobject.name, sobject.custom, content)
        except (RemoteServiceError, OSError) as e:
            logger.debug("Failed to process SObject %s: %s", sobject.name, e)
            self._emit("warning", name=sobject.name, reason=str(e))
            return Failure(sobject.name, str(e))
        return Success(sobject.name, sobject.custom)

    def _emit(self, kind: str, **payload) -> None:
        event = ProgressEvent(kind, payload)
        logger.debug(event.message)
        if self.on_progress:
            self.on_progress(event)


def generate_sobjects(
    connection: sf_api.Connection,
    output_dir: str | Path,
    category: Category | str = Category.ALL,
    on_progress: ProgressCallback | None = None,
    **kwargs,
) -> GenerationResult:
    """Generate SObject definitions.  See ``SObjectGenerator`` for arguments."""
    generator = SObjectGenerator(connection, output_dir, category, on_progress, **kwargs)
    return generator.generate()

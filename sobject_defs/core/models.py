"""
models.py — Typed records passed between the refresh pipeline stages.

Summaries come from the global describe, descriptions from the per-object
describe.  Outcomes and the aggregate result are produced by the orchestrator.
No I/O here.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class Category(Enum):
    """Which SObjects a refresh covers."""

    ALL = "all"
    CUSTOM = "custom"
    STANDARD = "standard"

    @classmethod
    def parse(cls, value: str | Category) -> Category:
        """Accept ``all`` / ``custom`` / ``standard`` in any case."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(c.value for c in cls)
            raise ValueError(f"Unknown SObject category '{value}'. Expected one of: {choices}")


@dataclass(frozen=True)
class ObjectSummary:
    """One entry of the global describe."""

    name: str
    custom: bool


@dataclass(frozen=True)
class FieldDescriptor:
    """A single field as returned by describe."""

    name: str
    type: str
    label: str | None = None
    reference_to: tuple[str, ...] = ()


@dataclass(frozen=True)
class ObjectDescription:
    """Describe result for one SObject, fields in describe order."""

    name: str
    label: str
    fields: tuple[FieldDescriptor, ...] = ()


@dataclass(frozen=True)
class Success:
    name: str
    custom: bool


@dataclass(frozen=True)
class Failure:
    name: str
    reason: str
    cancelled: bool = False


GenerationOutcome = Union[Success, Failure]


@dataclass
class GenerationResult:
    """Tally of a refresh run.

    ``total_objects`` is derived, so it always equals the sum of the two
    category counts.
    """

    standard_objects: int = 0
    custom_objects: int = 0
    cancelled: bool = False
    failed_objects: list[str] = field(default_factory=list)

    @property
    def total_objects(self) -> int:
        return self.standard_objects + self.custom_objects

    @classmethod
    def from_outcomes(cls, outcomes: list[GenerationOutcome], cancelled: bool = False) -> GenerationResult:
        result = cls(cancelled=cancelled)
        for outcome in outcomes:
            if isinstance(outcome, Success):
                if outcome.custom:
                    result.custom_objects += 1
                else:
                    result.standard_objects += 1
            elif not outcome.cancelled:
                result.failed_objects.append(outcome.name)
        return result

    def as_dict(self) -> dict[str, Any]:
        """Serialise to the JSON shape reported by the refresh command."""
        return {
            "standardObjects": self.standard_objects,
            "customObjects": self.custom_objects,
            "totalObjects": self.total_objects,
            "cancelled": self.cancelled,
        }


@dataclass(frozen=True)
class ProgressEvent:
    """Structured progress notification emitted by the orchestrator.

    kind is one of ``start``, ``found``, ``processing``, ``warning``, ``done``.
    """

    kind: str
    payload: dict[str, Any] = field(default_factory=dict)

    @property
    def message(self) -> str:
        p = self.payload
        if self.kind == "start":
            return "Fetching SObject list from org..."
        if self.kind == "found":
            return f"Found {p['count']} SObjects to process"
        if self.kind == "processing":
            return f"Processing {p['name']}..."
        if self.kind == "warning":
            return f"Warning: Failed to process SObject {p['name']}: {p['reason']}"
        if self.kind == "done":
            return (
                f"Generated {p['total']} SObject definitions "
                f"({p['standard']} standard, {p['custom']} custom)."
            )
        return f"{self.kind}: {p}"

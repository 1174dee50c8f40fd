"""
errors.py — Exception hierarchy for the SObject definitions refresh.

Only listing and precondition failures escape ``generate``; describe and
write failures are absorbed per object by the orchestrator.
"""
from __future__ import annotations


class SObjectDefinitionsError(Exception):
    """Base class for every error raised by this package."""


class RemoteServiceError(SObjectDefinitionsError):
    """The org could not be reached or rejected a request."""


class DescribeError(RemoteServiceError):
    """Describe failed for a single SObject."""

    def __init__(self, object_name: str, reason: str):
        super().__init__(f"Failed to describe {object_name}: {reason}")
        self.object_name = object_name
        self.reason = reason


class PreconditionError(SObjectDefinitionsError):
    """Inputs required before the pipeline starts are missing or invalid."""


class RefreshAlreadyActiveError(SObjectDefinitionsError):
    """Another refresh is already writing to the same destination."""

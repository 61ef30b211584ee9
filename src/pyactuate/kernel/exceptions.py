"""Exception hierarchy for pyactuate.

All library exceptions inherit from PyActuateException so callers can catch
one base type at startup.

Categories:
- InfrastructureException: resource loading and wiring failures
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class PyActuateException(Exception):
    """Base exception for all pyactuate errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "RESOURCE_READ").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(PyActuateException):
    """Infrastructure failures: resources, wiring, storage."""


class ResourceReadError(InfrastructureException):
    """A properties resource exists but could not be read or parsed.

    Fatal at startup: the application must not serve a partial info report.
    """

    def __init__(self, resource: str, reason: str) -> None:
        self.resource = resource
        self.reason = reason
        super().__init__(
            message=f"Failed to read properties from {resource}: {reason}",
            code="RESOURCE_READ",
            context={"resource": resource},
        )

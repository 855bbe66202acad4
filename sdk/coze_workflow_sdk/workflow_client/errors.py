"""Exceptions raised by the workflow client SDK."""

from __future__ import annotations


class WorkflowClientError(Exception):
    """Base class for all errors raised by the workflow client."""


class WorkflowValidationError(WorkflowClientError, ValueError):
    """Raised when a call is rejected before any request is sent."""


class WorkflowApiError(WorkflowClientError):
    """Raised when the workflow API answers with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Workflow API returned HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class WorkflowDecodeError(WorkflowClientError, ValueError):
    """Raised when a stream frame or response envelope cannot be decoded."""

    def __init__(self, message: str, raw: str) -> None:
        super().__init__(message)
        self.raw = raw

"""Workflow API client exports."""

from .async_client import AsyncWorkflowApiClient
from .client import WorkflowApiClient
from .errors import (
    WorkflowApiError,
    WorkflowClientError,
    WorkflowDecodeError,
    WorkflowValidationError,
)
from .events import (
    ErrorEventData,
    InterruptData,
    InterruptEventData,
    MessageEventData,
    WorkflowEvent,
    WorkflowEventType,
    parse_event,
)
from .framing import FrameAssembler, aiter_frames, iter_frames
from .mock import AsyncMockWorkflowApiClient, MockWorkflowApiClient
from .protocol import AsyncWorkflowClientProtocol, WorkflowClientProtocol
from .schemas import RunWorkflowResponse, WorkflowRequest, WorkflowResumeRequest

__all__ = [
    "WorkflowApiClient",
    "AsyncWorkflowApiClient",
    "MockWorkflowApiClient",
    "AsyncMockWorkflowApiClient",
    "WorkflowClientProtocol",
    "AsyncWorkflowClientProtocol",
    "WorkflowRequest",
    "WorkflowResumeRequest",
    "RunWorkflowResponse",
    "WorkflowEvent",
    "WorkflowEventType",
    "MessageEventData",
    "InterruptData",
    "InterruptEventData",
    "ErrorEventData",
    "parse_event",
    "FrameAssembler",
    "iter_frames",
    "aiter_frames",
    "WorkflowClientError",
    "WorkflowValidationError",
    "WorkflowApiError",
    "WorkflowDecodeError",
]

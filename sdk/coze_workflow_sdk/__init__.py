"""Python SDK for running remote workflows and consuming their event streams."""

from .config import CozeSettings
from .dependencies import (
    get_async_workflow_client,
    get_coze_settings,
    get_workflow_client,
)
from .workflow_client import (
    AsyncMockWorkflowApiClient,
    AsyncWorkflowApiClient,
    ErrorEventData,
    InterruptData,
    InterruptEventData,
    MessageEventData,
    MockWorkflowApiClient,
    RunWorkflowResponse,
    WorkflowApiClient,
    WorkflowApiError,
    WorkflowClientError,
    WorkflowClientProtocol,
    WorkflowDecodeError,
    WorkflowEvent,
    WorkflowEventType,
    WorkflowRequest,
    WorkflowResumeRequest,
    WorkflowValidationError,
)

__all__ = [
    "WorkflowApiClient",
    "AsyncWorkflowApiClient",
    "MockWorkflowApiClient",
    "AsyncMockWorkflowApiClient",
    "WorkflowClientProtocol",
    "WorkflowRequest",
    "WorkflowResumeRequest",
    "RunWorkflowResponse",
    "WorkflowEvent",
    "WorkflowEventType",
    "MessageEventData",
    "InterruptData",
    "InterruptEventData",
    "ErrorEventData",
    "WorkflowClientError",
    "WorkflowValidationError",
    "WorkflowApiError",
    "WorkflowDecodeError",
    "CozeSettings",
    "get_coze_settings",
    "get_workflow_client",
    "get_async_workflow_client",
]

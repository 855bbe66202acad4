"""Factories that build workflow clients from environment settings."""

from functools import lru_cache
from typing import Optional, Union

from .config import CozeSettings
from .workflow_client import (
    AsyncMockWorkflowApiClient,
    AsyncWorkflowApiClient,
    MockWorkflowApiClient,
    WorkflowApiClient,
)


@lru_cache()
def get_coze_settings() -> CozeSettings:
    """Get the workflow API settings singleton."""
    return CozeSettings()


def get_workflow_client(
    settings: Optional[CozeSettings] = None,
) -> Union[WorkflowApiClient, MockWorkflowApiClient]:
    """
    Get a synchronous workflow client based on settings.

    Args:
        settings: Explicit settings; the cached environment settings otherwise.

    Returns:
        A mock client when the mock toggle is enabled, a real client otherwise.
    """
    settings = settings or get_coze_settings()
    if settings.use_mock_client:
        return MockWorkflowApiClient(
            workflow_id=settings.workflow_id or "mock-workflow",
            app_id=settings.app_id or "mock-app",
        )
    return WorkflowApiClient(
        base_url=settings.base_url,
        auth_token=settings.auth_token,
        workflow_id=settings.workflow_id,
        app_id=settings.app_id,
        timeout=settings.timeout_seconds,
        read_timeout=settings.read_timeout_seconds,
    )


def get_async_workflow_client(
    settings: Optional[CozeSettings] = None,
) -> Union[AsyncWorkflowApiClient, AsyncMockWorkflowApiClient]:
    """Get an asynchronous workflow client based on settings."""
    settings = settings or get_coze_settings()
    if settings.use_mock_client:
        return AsyncMockWorkflowApiClient(
            workflow_id=settings.workflow_id or "mock-workflow",
            app_id=settings.app_id or "mock-app",
        )
    return AsyncWorkflowApiClient(
        base_url=settings.base_url,
        auth_token=settings.auth_token,
        workflow_id=settings.workflow_id,
        app_id=settings.app_id,
        timeout=settings.timeout_seconds,
        read_timeout=settings.read_timeout_seconds,
    )

"""Request construction shared by the sync and async workflow clients."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from .errors import WorkflowApiError, WorkflowValidationError
from .schemas import WorkflowRequest, WorkflowResumeRequest

logger = logging.getLogger(__name__)

RUN_PATH = "/v1/workflow/run"
STREAM_RUN_PATH = "/v1/workflow/stream_run"
STREAM_RESUME_PATH = "/v1/workflow/stream_resume"

DEFAULT_TIMEOUT_SECONDS = 60.0
DEFAULT_READ_TIMEOUT_SECONDS = 300.0


def build_timeout(
    timeout: float, read_timeout: Optional[float] = None
) -> httpx.Timeout:
    """Build an httpx timeout whose read limit bounds the gap between reads."""

    return httpx.Timeout(timeout, read=read_timeout)


class WorkflowClientBase:
    """Holds the workflow identity and turns calls into request bodies."""

    def __init__(
        self, auth_token: Optional[str], workflow_id: str, app_id: str
    ) -> None:
        self.workflow_id = workflow_id
        self.app_id = app_id
        self._auth_token = auth_token

    def _headers(self) -> Dict[str, str]:
        # Always present; a missing token yields a bare "Bearer " value.
        return {"Authorization": f"Bearer {self._auth_token or ''}"}

    def _run_payload(self, parameters: Any) -> Dict[str, Any]:
        if parameters is None:
            raise WorkflowValidationError("Workflow parameters must not be None.")
        request = WorkflowRequest(
            workflow_id=self.workflow_id,
            app_id=self.app_id,
            parameters=parameters,
        )
        return request.to_payload()

    def _resume_payload(
        self, event_id: str, resume_data: str, interrupt_type: int
    ) -> Dict[str, Any]:
        try:
            request = WorkflowResumeRequest(
                event_id=event_id,
                workflow_id=self.workflow_id,
                resume_data=resume_data,
                interrupt_type=interrupt_type,
            )
        except ValidationError as exc:
            raise WorkflowValidationError(f"Invalid resume request: {exc}") from exc
        return request.to_payload()


def raise_for_api_error(response: httpx.Response) -> None:
    """Raise WorkflowApiError for non-2xx responses whose body has been read."""

    if response.is_success:
        return
    logger.error(
        "Workflow API request to %s failed with HTTP %s",
        response.request.url,
        response.status_code,
    )
    raise WorkflowApiError(response.status_code, response.text)

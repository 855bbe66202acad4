"""HTTP client for the remote workflow execution API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterator, Optional, Type

import httpx

from ._base import (
    DEFAULT_READ_TIMEOUT_SECONDS,
    DEFAULT_TIMEOUT_SECONDS,
    RUN_PATH,
    STREAM_RESUME_PATH,
    STREAM_RUN_PATH,
    WorkflowClientBase,
    build_timeout,
    raise_for_api_error,
)
from .events import WorkflowEvent, parse_event
from .framing import iter_frames
from .schemas import OutputT, RunWorkflowResponse

if TYPE_CHECKING:
    from .protocol import WorkflowClientProtocol

logger = logging.getLogger(__name__)


class WorkflowApiClient(WorkflowClientBase):
    """Synchronous client bound to a single workflow of an application."""

    def __init__(
        self,
        base_url: str,
        auth_token: Optional[str],
        workflow_id: str,
        app_id: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        read_timeout: Optional[float] = DEFAULT_READ_TIMEOUT_SECONDS,
        *,
        client: Optional[httpx.Client] = None,
    ) -> None:
        super().__init__(auth_token, workflow_id, app_id)
        self._client = client or httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=build_timeout(timeout, read_timeout),
        )
        self._owns_client = client is None

    def run(
        self,
        parameters: Any,
        output_type: Type[OutputT] = Any,  # type: ignore[assignment]
    ) -> RunWorkflowResponse[OutputT]:
        """
        Run the workflow and wait for its complete output.

        Args:
            parameters: Workflow input, a mapping or a pydantic model.
            output_type: Type used to decode the envelope's inner ``data``.

        Returns:
            The response envelope with ``parsed_data`` decoded.

        Raises:
            WorkflowValidationError: If ``parameters`` is None.
            WorkflowApiError: If the API answers with a non-success status.
            WorkflowDecodeError: If the envelope or its data is malformed.
            httpx.TransportError: If the request cannot be completed.
        """
        body = self._run_payload(parameters)
        logger.debug(f"Running workflow {self.workflow_id}")
        try:
            response = self._client.post(RUN_PATH, json=body, headers=self._headers())
        except httpx.TransportError as exc:
            logger.error(f"Workflow run request failed: {exc}")
            raise
        raise_for_api_error(response)
        return RunWorkflowResponse.from_json(response.text, output_type)

    def run_streaming(self, parameters: Any) -> Iterator[WorkflowEvent]:
        """
        Run the workflow and stream its events as they arrive.

        Parameters are validated immediately; the request itself is sent when
        iteration starts. Closing the returned iterator releases the
        connection.

        Raises:
            WorkflowValidationError: If ``parameters`` is None.
        """
        body = self._run_payload(parameters)
        return self._stream(STREAM_RUN_PATH, body)

    def resume(
        self, event_id: str, resume_data: str, interrupt_type: int
    ) -> Iterator[WorkflowEvent]:
        """Resume an interrupted run and stream the events that follow."""

        body = self._resume_payload(event_id, resume_data, interrupt_type)
        return self._stream(STREAM_RESUME_PATH, body)

    def _stream(self, path: str, body: Dict[str, Any]) -> Iterator[WorkflowEvent]:
        logger.debug(f"Opening workflow event stream {path}")
        try:
            with self._client.stream(
                "POST", path, json=body, headers=self._headers()
            ) as response:
                if not response.is_success:
                    response.read()
                    raise_for_api_error(response)
                for frame in iter_frames(response.iter_text()):
                    yield parse_event(frame)
        except httpx.TransportError as exc:
            logger.error(f"Workflow event stream {path} failed: {exc}")
            raise
        logger.debug(f"Workflow event stream {path} finished")

    def close(self) -> None:
        """Close the underlying HTTP client when this instance owns it."""

        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "WorkflowApiClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


if TYPE_CHECKING:
    # Static interface check to guarantee protocol compatibility during type checking
    _: WorkflowClientProtocol = WorkflowApiClient(
        base_url="http://localhost", auth_token=None, workflow_id="", app_id=""
    )

"""Asynchronous HTTP client for the remote workflow execution API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, AsyncIterator, Dict, Optional, Type

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
from .framing import aiter_frames
from .schemas import OutputT, RunWorkflowResponse

if TYPE_CHECKING:
    from .protocol import AsyncWorkflowClientProtocol

logger = logging.getLogger(__name__)


class AsyncWorkflowApiClient(WorkflowClientBase):
    """Asyncio counterpart of WorkflowApiClient backed by httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str,
        auth_token: Optional[str],
        workflow_id: str,
        app_id: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        read_timeout: Optional[float] = DEFAULT_READ_TIMEOUT_SECONDS,
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(auth_token, workflow_id, app_id)
        self._client = client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=build_timeout(timeout, read_timeout),
        )
        self._owns_client = client is None

    async def run(
        self,
        parameters: Any,
        output_type: Type[OutputT] = Any,  # type: ignore[assignment]
    ) -> RunWorkflowResponse[OutputT]:
        """Run the workflow and wait for its complete output."""

        body = self._run_payload(parameters)
        logger.debug(f"Running workflow {self.workflow_id}")
        try:
            response = await self._client.post(
                RUN_PATH, json=body, headers=self._headers()
            )
        except httpx.TransportError as exc:
            logger.error(f"Workflow run request failed: {exc}")
            raise
        raise_for_api_error(response)
        return RunWorkflowResponse.from_json(response.text, output_type)

    def run_streaming(self, parameters: Any) -> AsyncIterator[WorkflowEvent]:
        """
        Run the workflow and stream its events as they arrive.

        Validation happens at call time; the request is sent on the first
        ``__anext__``. Use ``aclose()`` on the returned iterator to release the
        connection when stopping early.
        """
        body = self._run_payload(parameters)
        return self._stream(STREAM_RUN_PATH, body)

    def resume(
        self, event_id: str, resume_data: str, interrupt_type: int
    ) -> AsyncIterator[WorkflowEvent]:
        """Resume an interrupted run and stream the events that follow."""

        body = self._resume_payload(event_id, resume_data, interrupt_type)
        return self._stream(STREAM_RESUME_PATH, body)

    async def _stream(
        self, path: str, body: Dict[str, Any]
    ) -> AsyncIterator[WorkflowEvent]:
        logger.debug(f"Opening workflow event stream {path}")
        try:
            async with self._client.stream(
                "POST", path, json=body, headers=self._headers()
            ) as response:
                if not response.is_success:
                    await response.aread()
                    raise_for_api_error(response)
                async for frame in aiter_frames(response.aiter_text()):
                    yield parse_event(frame)
        except httpx.TransportError as exc:
            logger.error(f"Workflow event stream {path} failed: {exc}")
            raise
        logger.debug(f"Workflow event stream {path} finished")

    async def aclose(self) -> None:
        """Close the underlying HTTP client when this instance owns it."""

        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncWorkflowApiClient":
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.aclose()


if TYPE_CHECKING:
    _: AsyncWorkflowClientProtocol = AsyncWorkflowApiClient(
        base_url="http://localhost", auth_token=None, workflow_id="", app_id=""
    )

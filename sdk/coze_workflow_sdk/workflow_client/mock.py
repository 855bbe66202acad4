"""Mock implementation of the workflow API client for local testing."""

from __future__ import annotations

import json
import logging
from typing import (
    TYPE_CHECKING,
    Any,
    AsyncIterator,
    Dict,
    Iterator,
    List,
    Optional,
    Sequence,
)

from ._base import WorkflowClientBase
from .events import (
    InterruptData,
    InterruptEventData,
    MessageEventData,
    WorkflowEvent,
    WorkflowEventType,
)
from .schemas import RunWorkflowResponse

if TYPE_CHECKING:
    from .protocol import AsyncWorkflowClientProtocol, WorkflowClientProtocol

logger = logging.getLogger(__name__)


def default_mock_events() -> List[WorkflowEvent]:
    """Single finished message, the shortest successful stream."""

    return [
        WorkflowEvent(
            id=1,
            event_type=WorkflowEventType.MESSAGE,
            data=MessageEventData(
                content="Mock workflow output.",
                node_title="End",
                node_seq_id="0",
                node_is_finish=True,
                cost="0",
            ),
        )
    ]


def interrupt_event(event_id: str, interrupt_type: int = 1) -> WorkflowEvent:
    """Build an interrupt event, handy for scripting resume flows."""

    return WorkflowEvent(
        id=1,
        event_type=WorkflowEventType.INTERRUPT,
        data=InterruptEventData(
            interrupt_data=InterruptData(event_id=event_id, type=interrupt_type),
            node_title="Question",
        ),
    )


class MockWorkflowApiClient(WorkflowClientBase):
    """In-memory client that simulates workflow execution responses."""

    def __init__(
        self,
        workflow_id: str = "mock-workflow",
        app_id: str = "mock-app",
        *,
        output: Optional[Dict[str, Any]] = None,
        events: Optional[Sequence[WorkflowEvent]] = None,
        resume_events: Optional[Sequence[WorkflowEvent]] = None,
    ) -> None:
        super().__init__(None, workflow_id, app_id)
        self.output = output if output is not None else {"output": "mock"}
        self.events = list(events) if events is not None else default_mock_events()
        self.resume_events = (
            list(resume_events) if resume_events is not None else default_mock_events()
        )
        self.call_history: List[Dict[str, Any]] = []

    def run(self, parameters: Any, output_type: Any = Any) -> RunWorkflowResponse:
        """Store the call and return a deterministic success envelope."""

        return self._record_run(parameters, output_type)

    def run_streaming(self, parameters: Any) -> Iterator[WorkflowEvent]:
        """Store the call and replay the scripted run events."""

        return iter(self._record_stream_run(parameters))

    def resume(
        self, event_id: str, resume_data: str, interrupt_type: int
    ) -> Iterator[WorkflowEvent]:
        """Store the call and replay the scripted resume events."""

        return iter(self._record_resume(event_id, resume_data, interrupt_type))

    def close(self) -> None:
        """Nothing to release."""

    def __enter__(self) -> "MockWorkflowApiClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def _record_run(self, parameters: Any, output_type: Any) -> RunWorkflowResponse:
        body = self._run_payload(parameters)
        self.call_history.append({"endpoint": "run", "payload": body})
        logger.info(f"Mock workflow API: running workflow '{self.workflow_id}'")
        raw = json.dumps(
            {
                "code": 0,
                "cost": "0",
                "data": json.dumps(self.output),
                "debug_url": "",
                "msg": "Success",
                "token": 0,
            }
        )
        return RunWorkflowResponse.from_json(raw, output_type)

    def _record_stream_run(self, parameters: Any) -> List[WorkflowEvent]:
        body = self._run_payload(parameters)
        self.call_history.append({"endpoint": "stream_run", "payload": body})
        logger.info(f"Mock workflow API: streaming workflow '{self.workflow_id}'")
        return list(self.events)

    def _record_resume(
        self, event_id: str, resume_data: str, interrupt_type: int
    ) -> List[WorkflowEvent]:
        body = self._resume_payload(event_id, resume_data, interrupt_type)
        self.call_history.append({"endpoint": "stream_resume", "payload": body})
        logger.info(f"Mock workflow API: resuming event '{event_id}'")
        return list(self.resume_events)


class AsyncMockWorkflowApiClient(MockWorkflowApiClient):
    """Asyncio flavour of the mock, sharing its scripted events and history."""

    async def run(  # type: ignore[override]
        self, parameters: Any, output_type: Any = Any
    ) -> RunWorkflowResponse:
        """Store the call and return a deterministic success envelope."""

        return self._record_run(parameters, output_type)

    def run_streaming(  # type: ignore[override]
        self, parameters: Any
    ) -> AsyncIterator[WorkflowEvent]:
        """Store the call and replay the scripted run events."""

        return _replay(self._record_stream_run(parameters))

    def resume(  # type: ignore[override]
        self, event_id: str, resume_data: str, interrupt_type: int
    ) -> AsyncIterator[WorkflowEvent]:
        """Store the call and replay the scripted resume events."""

        return _replay(self._record_resume(event_id, resume_data, interrupt_type))

    async def aclose(self) -> None:
        """Nothing to release."""

    async def __aenter__(self) -> "AsyncMockWorkflowApiClient":
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.aclose()


async def _replay(events: List[WorkflowEvent]) -> AsyncIterator[WorkflowEvent]:
    for event in events:
        yield event


if TYPE_CHECKING:
    # Interface check for static type analysis
    _: WorkflowClientProtocol = MockWorkflowApiClient()
    _async: AsyncWorkflowClientProtocol = AsyncMockWorkflowApiClient()

"""Protocol definitions for the workflow client SDK."""

from typing import Any, AsyncIterator, Iterator, Protocol

from .events import WorkflowEvent
from .schemas import RunWorkflowResponse


class WorkflowClientProtocol(Protocol):
    """Typed interface for synchronous workflow API clients."""

    def run(self, parameters: Any, output_type: Any = ...) -> RunWorkflowResponse:
        """Run the workflow and return the decoded response envelope."""
        ...

    def run_streaming(self, parameters: Any) -> Iterator[WorkflowEvent]:
        """Run the workflow and lazily yield its stream events."""
        ...

    def resume(
        self, event_id: str, resume_data: str, interrupt_type: int
    ) -> Iterator[WorkflowEvent]:
        """Resume an interrupted run and lazily yield its stream events."""
        ...


class AsyncWorkflowClientProtocol(Protocol):
    """Typed interface for asynchronous workflow API clients."""

    async def run(
        self, parameters: Any, output_type: Any = ...
    ) -> RunWorkflowResponse:
        """Run the workflow and return the decoded response envelope."""
        ...

    def run_streaming(self, parameters: Any) -> AsyncIterator[WorkflowEvent]:
        """Run the workflow and lazily yield its stream events."""
        ...

    def resume(
        self, event_id: str, resume_data: str, interrupt_type: int
    ) -> AsyncIterator[WorkflowEvent]:
        """Resume an interrupted run and lazily yield its stream events."""
        ...

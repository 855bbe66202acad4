"""Typed workflow stream events and the frame decoder that produces them."""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import WorkflowDecodeError

logger = logging.getLogger(__name__)


class WorkflowEventType(str, Enum):
    """Event names emitted on the ``event:`` line of a stream frame."""

    MESSAGE = "Message"
    INTERRUPT = "Interrupt"
    ERROR = "Error"
    UNKNOWN = "Unknown"


class MessageEventData(BaseModel):
    """Output produced by a workflow node."""

    content: str = ""
    node_title: str = ""
    node_seq_id: str = ""
    node_is_finish: bool = False
    ext: Optional[Dict[str, str]] = None
    cost: str = ""


class InterruptData(BaseModel):
    """Identifies the interruption a resume call must answer."""

    event_id: str = ""
    type: int = 0


class InterruptEventData(BaseModel):
    """Workflow paused and waiting for caller-supplied resume data."""

    interrupt_data: Optional[InterruptData] = None
    node_title: str = ""


class ErrorEventData(BaseModel):
    """Failure reported by the workflow while streaming."""

    error_code: int = 0
    error_message: str = ""


EventData = Union[MessageEventData, InterruptEventData, ErrorEventData, str]


class WorkflowEvent(BaseModel):
    """One decoded frame of a workflow event stream."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(0, description="Sequence number within the current stream.")
    event_type: WorkflowEventType = WorkflowEventType.UNKNOWN
    data: Optional[EventData] = Field(
        None,
        description=(
            "Payload whose shape follows event_type; the raw string for "
            "unknown events."
        ),
    )


_PAYLOAD_MODELS: Dict[WorkflowEventType, type[BaseModel]] = {
    WorkflowEventType.MESSAGE: MessageEventData,
    WorkflowEventType.INTERRUPT: InterruptEventData,
    WorkflowEventType.ERROR: ErrorEventData,
}

_KNOWN_TYPES = {
    member.value: member
    for member in WorkflowEventType
    if member is not WorkflowEventType.UNKNOWN
}

_LINE_SPLIT = re.compile(r"[\r\n]+")


def _decode_data(event_type: WorkflowEventType, payload: str) -> EventData:
    model = _PAYLOAD_MODELS.get(event_type)
    if model is None:
        return payload
    return model.model_validate_json(payload)


def _parse_id(value: str) -> Optional[int]:
    try:
        return int(value.strip())
    except ValueError:
        return None


def parse_event(frame: str) -> WorkflowEvent:
    """
    Decode a single stream frame into a WorkflowEvent.

    Fields are applied in the order they appear, so a ``data:`` line is
    decoded with the event type resolved by any preceding ``event:`` line.
    The server emits ``id``, ``event`` then ``data``; a ``data:`` line seen
    before ``event:`` is kept as an unknown raw string.

    Args:
        frame: Frame text, with or without its trailing blank line.

    Returns:
        The decoded event. Lines other than ``id:``, ``event:`` and
        ``data:`` are ignored.

    Raises:
        WorkflowDecodeError: If a data payload does not match the shape
            required by its event type.
    """
    event_id = 0
    event_type = WorkflowEventType.UNKNOWN
    data: Optional[EventData] = None

    for line in _LINE_SPLIT.split(frame):
        if not line:
            continue
        if line.startswith("id: "):
            parsed = _parse_id(line[4:])
            if parsed is not None:
                event_id = parsed
        elif line.startswith("event: "):
            event_type = _KNOWN_TYPES.get(
                line[7:].strip(), WorkflowEventType.UNKNOWN
            )
        elif line.startswith("data: "):
            payload = line[6:].strip()
            try:
                data = _decode_data(event_type, payload)
            except ValidationError as exc:
                logger.warning(
                    "Failed to decode %s event payload: %s", event_type.value, exc
                )
                raise WorkflowDecodeError(
                    f"Invalid {event_type.value} event payload: {exc}", frame
                ) from exc

    return WorkflowEvent(id=event_id, event_type=event_type, data=data)

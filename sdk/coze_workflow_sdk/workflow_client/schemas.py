"""Pydantic models used by the workflow SDK request and response bodies."""

from __future__ import annotations

import logging
from typing import Any, Dict, Generic, Optional, Type, TypeVar, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    TypeAdapter,
    ValidationError,
)

from .errors import WorkflowDecodeError

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT")


class WorkflowRequest(BaseModel):
    """Body posted to the run and stream_run endpoints."""

    model_config = ConfigDict(frozen=True)

    workflow_id: str = Field(..., description="Identifier of the workflow to run.")
    app_id: str = Field(..., description="Identifier of the owning application.")
    parameters: Any = Field(
        ...,
        description="Caller-defined workflow input; a mapping or a pydantic model.",
    )

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the JSON body, honouring aliases on parameter models."""

        return self.model_dump(mode="json", by_alias=True)


class WorkflowResumeRequest(BaseModel):
    """Body posted to the stream_resume endpoint after an interrupt."""

    model_config = ConfigDict(frozen=True)

    event_id: str = Field(..., description="Event id carried by the interrupt.")
    workflow_id: str = Field(..., description="Identifier of the paused workflow.")
    resume_data: str = Field(..., description="Answer supplied by the caller.")
    interrupt_type: int = Field(..., description="Interrupt type being answered.")

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the JSON body."""

        return self.model_dump(mode="json")


class RunWorkflowResponse(BaseModel, Generic[OutputT]):
    """Envelope returned by the non-streaming run endpoint.

    The ``data`` field is itself a JSON document encoded as a string. Use
    :meth:`from_json` to decode both layers; ``parsed_data`` is ``None`` only
    when ``data`` is absent.
    """

    code: int = 0
    cost: str = ""
    data: Optional[str] = Field(
        None, description="JSON-encoded workflow output as sent on the wire."
    )
    debug_url: str = ""
    msg: str = ""
    token: int = 0

    # Never read from the wire; only from_json sets it from ``data``.
    _parsed_data: Optional[OutputT] = PrivateAttr(default=None)

    @property
    def parsed_data(self) -> Optional[OutputT]:
        """Workflow output decoded from ``data``."""
        return self._parsed_data

    @classmethod
    def from_json(
        cls,
        raw: Union[str, bytes],
        output_type: Type[OutputT] = Any,  # type: ignore[assignment]
    ) -> "RunWorkflowResponse[OutputT]":
        """
        Decode the envelope and then its embedded ``data`` document.

        Args:
            raw: Response body of the run endpoint.
            output_type: Type the inner ``data`` document is validated against.

        Returns:
            The envelope with ``parsed_data`` populated.

        Raises:
            WorkflowDecodeError: If either the envelope or its inner document
                is malformed.
        """
        text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        try:
            envelope = cls.model_validate_json(text)
        except ValidationError as exc:
            logger.warning("Invalid workflow response envelope: %s", exc)
            raise WorkflowDecodeError(
                f"Invalid workflow response envelope: {exc}", text
            ) from exc

        if envelope.data is None:
            return envelope

        try:
            parsed = TypeAdapter(output_type).validate_json(envelope.data)
        except ValidationError as exc:
            logger.warning("Invalid workflow output payload: %s", exc)
            raise WorkflowDecodeError(
                f"Invalid workflow output payload: {exc}", envelope.data
            ) from exc
        envelope._parsed_data = parsed
        return envelope

"""Unit tests for request bodies and the run response envelope."""

import json
from typing import Dict, Optional

import pytest
from pydantic import BaseModel, Field

from coze_workflow_sdk.workflow_client import (
    RunWorkflowResponse,
    WorkflowDecodeError,
    WorkflowRequest,
    WorkflowResumeRequest,
)


class _WorkflowInput(BaseModel):
    user_id: str
    user_input: str = Field(..., alias="BOT_USER_INPUT")


class _WorkflowOutput(BaseModel):
    output: str
    score: Optional[int] = None


def _envelope(data: Optional[str], **overrides) -> str:
    payload = {
        "code": 0,
        "cost": "0.1",
        "data": data,
        "debug_url": "https://debug.example.com/run/1",
        "msg": "Success",
        "token": 42,
    }
    payload.update(overrides)
    return json.dumps(payload)


def test_envelope_decodes_inner_data_to_structured_value():
    raw = '{"code":200,"data":"{\\"result\\":\\"success\\"}","msg":"Success"}'

    response = RunWorkflowResponse.from_json(raw)

    assert response.code == 200
    assert response.msg == "Success"
    assert response.data == '{"result":"success"}'
    assert response.parsed_data == {"result": "success"}
    assert response.parsed_data["result"] == "success"


def test_envelope_decodes_into_requested_model():
    raw = _envelope(json.dumps({"output": "^a+$", "score": 3}))

    response = RunWorkflowResponse.from_json(raw, _WorkflowOutput)

    assert isinstance(response.parsed_data, _WorkflowOutput)
    assert response.parsed_data.output == "^a+$"
    assert response.cost == "0.1"
    assert response.debug_url == "https://debug.example.com/run/1"
    assert response.token == 42


def test_envelope_accepts_bytes():
    raw = _envelope(json.dumps({"a": "b"})).encode("utf-8")

    response = RunWorkflowResponse.from_json(raw, Dict[str, str])

    assert response.parsed_data == {"a": "b"}


def test_envelope_without_data_has_no_parsed_data():
    response = RunWorkflowResponse.from_json(_envelope(None))

    assert response.data is None
    assert response.parsed_data is None


def test_envelope_with_malformed_inner_data_raises():
    with pytest.raises(WorkflowDecodeError) as exc_info:
        RunWorkflowResponse.from_json(_envelope("{broken"))

    assert exc_info.value.raw == "{broken"


def test_envelope_with_wrong_inner_shape_raises():
    with pytest.raises(WorkflowDecodeError):
        RunWorkflowResponse.from_json(
            _envelope(json.dumps({"unexpected": 1})), _WorkflowOutput
        )


def test_malformed_envelope_raises():
    with pytest.raises(WorkflowDecodeError, match="envelope"):
        RunWorkflowResponse.from_json("not json at all")


def test_parsed_data_is_not_serialized():
    response = RunWorkflowResponse.from_json(_envelope('{"x": 1}'))

    assert "parsed_data" not in response.model_dump()


def test_workflow_request_serializes_parameter_models_by_alias():
    request = WorkflowRequest(
        workflow_id="wf",
        app_id="app",
        parameters=_WorkflowInput(user_id="12345", BOT_USER_INPUT="digits only"),
    )

    assert request.to_payload() == {
        "workflow_id": "wf",
        "app_id": "app",
        "parameters": {"user_id": "12345", "BOT_USER_INPUT": "digits only"},
    }


def test_workflow_request_is_immutable():
    request = WorkflowRequest(workflow_id="wf", app_id="app", parameters={})

    with pytest.raises(ValueError):
        request.workflow_id = "other"


def test_resume_request_payload():
    request = WorkflowResumeRequest(
        event_id="event123",
        workflow_id="wf",
        resume_data="yes",
        interrupt_type=1,
    )

    assert request.to_payload() == {
        "event_id": "event123",
        "workflow_id": "wf",
        "resume_data": "yes",
        "interrupt_type": 1,
    }


def test_parsed_data_key_on_the_wire_is_ignored():
    response = RunWorkflowResponse.from_json('{"code":0,"parsed_data":{"injected":1}}')

    assert response.data is None
    assert response.parsed_data is None


def test_parsed_data_comes_from_data_even_when_wire_sends_both():
    raw = _envelope(json.dumps({"real": True}), parsed_data={"injected": 1})

    response = RunWorkflowResponse.from_json(raw)

    assert response.parsed_data == {"real": True}

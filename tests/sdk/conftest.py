"""SDK test fixtures ensuring isolation from real network services."""

import pytest


@pytest.fixture(autouse=True)
def block_real_network(monkeypatch):
    """Force SDK tests to operate entirely with mock transports."""

    for name in (
        "COZE_API_BASE_URL",
        "COZE_AUTH_TOKEN",
        "COZE_WORKFLOW_ID",
        "COZE_APP_ID",
        "COZE_USE_MOCK_CLIENT",
    ):
        monkeypatch.delenv(name, raising=False)

    def _blocked(*args, **kwargs):  # pragma: no cover - raises immediately
        raise RuntimeError(
            "Real HTTP transports are blocked in SDK tests; inject a MockTransport."
        )

    try:
        monkeypatch.setattr(
            "coze_workflow_sdk.workflow_client.client.httpx.HTTPTransport.handle_request",
            _blocked,
        )
        monkeypatch.setattr(
            "coze_workflow_sdk.workflow_client.async_client.httpx.AsyncHTTPTransport.handle_async_request",
            _blocked,
        )
    except ModuleNotFoundError as exc:  # pragma: no cover - explicit failure path
        raise RuntimeError(
            "coze_workflow_sdk is not available. Install the package before running SDK tests."
        ) from exc

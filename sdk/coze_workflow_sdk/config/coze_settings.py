"""Connection settings for the remote workflow API."""

from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CozeSettings(BaseSettings):
    """The configurable fields for the workflow API client."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    base_url: str = Field(
        default="https://api.coze.com",
        title="API Base URL",
        description="Base URL of the workflow API.",
        alias="COZE_API_BASE_URL",
    )
    auth_token: Optional[str] = Field(
        default=None,
        title="Auth Token",
        description="Bearer token sent in the Authorization header.",
        alias="COZE_AUTH_TOKEN",
    )
    workflow_id: str = Field(
        default="",
        title="Workflow ID",
        description="Identifier of the workflow the client is bound to.",
        alias="COZE_WORKFLOW_ID",
    )
    app_id: str = Field(
        default="",
        title="App ID",
        description="Identifier of the application owning the workflow.",
        alias="COZE_APP_ID",
    )
    timeout_seconds: float = Field(
        default=60.0,
        title="Timeout",
        description="Connect, write and pool timeout in seconds.",
        alias="COZE_TIMEOUT_SECONDS",
    )
    read_timeout_seconds: Optional[float] = Field(
        default=300.0,
        title="Read Timeout",
        description=(
            "Maximum wait for the next chunk of a response; bounds the gap "
            "between stream events rather than the whole stream."
        ),
        alias="COZE_READ_TIMEOUT_SECONDS",
    )

    # --- Service Toggles ---
    use_mock_client: bool = Field(
        default=False,
        title="Use Mock Client",
        description="Return an in-memory mock client instead of calling the API.",
        alias="COZE_USE_MOCK_CLIENT",
    )

    @field_validator("use_mock_client", mode="before")
    @classmethod
    def parse_use_mock_client(cls, value: Any) -> bool:
        """Ensure the mock toggle is parsed as a boolean from string."""
        if isinstance(value, str):
            return value.lower() in {"true", "1", "yes", "on"}
        return bool(value)

"""Configuration module for the workflow SDK."""

from .coze_settings import CozeSettings

__all__ = [
    "CozeSettings",
]

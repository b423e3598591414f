"""Configuration models with Pydantic validation."""

from git_ignore.domain.config.app import AppConfig
from git_ignore.domain.config.editor import EditorConfig
from git_ignore.domain.config.log import LoggingConfig

__all__ = [
    "AppConfig",
    "EditorConfig",
    "LoggingConfig",
]

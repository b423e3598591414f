"""Main application configuration model."""

from pydantic import BaseModel, ConfigDict, Field

from git_ignore.domain.config.editor import EditorConfig
from git_ignore.domain.config.log import LoggingConfig


class AppConfig(BaseModel):
    """Main application configuration.

    Root model aggregating all configuration sections. Validation runs at load
    time so a bad settings file or environment value fails fast.

    Attributes:
        editor: Ignore file editor configuration
        logging: Log output configuration
    """

    editor: EditorConfig = Field(default_factory=EditorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(
        extra="forbid",  # Reject unknown sections
        json_schema_extra={
            "example": {
                "editor": {
                    "global": False,
                    "unique": True,
                },
                "logging": {
                    "verbose": False,
                },
            }
        },
    )

"""Logging configuration model."""

from pydantic import BaseModel


class LoggingConfig(BaseModel):
    """Configuration for log output.

    Attributes:
        verbose: Log at DEBUG instead of INFO
    """

    verbose: bool = False

"""Core module exports."""

from codeshift.core.errors import (
    CodeshiftError,
    ConfigError,
    DuplicateMethodError,
    ErrorCode,
    InvalidInputError,
    ParseError,
    SerializationError,
)
from codeshift.core.logging import configure_logging, get_logger

__all__ = [
    # Errors
    "CodeshiftError",
    "ConfigError",
    "DuplicateMethodError",
    "ErrorCode",
    "InvalidInputError",
    "ParseError",
    "SerializationError",
    # Logging
    "configure_logging",
    "get_logger",
]

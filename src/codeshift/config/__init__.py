"""Config module exports."""

from codeshift.config.loader import load_config
from codeshift.config.models import (
    CodeshiftConfig,
    LoggingConfig,
    LogOutputConfig,
    ParserConfig,
    PrinterConfig,
)

__all__ = [
    "load_config",
    "CodeshiftConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "ParserConfig",
    "PrinterConfig",
]

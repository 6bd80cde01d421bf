"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (CODESHIFT__SECTION__KEY)
3. Project YAML (.codeshift/config.yaml)
4. Global YAML (~/.config/codeshift/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    CODESHIFT__<SECTION>__<KEY>=<VALUE>

Examples:
    CODESHIFT__LOGGING__LEVEL=DEBUG
    CODESHIFT__PARSER__LANGUAGE=python
    CODESHIFT__PARSER__TOLERANT=true
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from codeshift.parsing.languages import LANGUAGES

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        CODESHIFT__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG shows normalization and plugin events.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ParserConfig(BaseModel):
    """Source parser configuration.

    Env vars:
        CODESHIFT__PARSER__LANGUAGE: Grammar used for source text input
        CODESHIFT__PARSER__TOLERANT: Accept trees containing syntax errors
    """

    language: str = Field(
        default="javascript",
        description="Grammar used when the entry point receives source text.",
    )
    tolerant: bool = Field(
        default=False,
        description="Keep ERROR/MISSING nodes instead of raising ParseError. "
        "RISK: Rewrites around broken regions may produce invalid output.",
    )

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        key = v.lower()
        if key not in LANGUAGES:
            supported = ", ".join(sorted(LANGUAGES))
            raise ValueError(f"Unsupported language '{v}'. Supported: {supported}")
        return key


class PrinterConfig(BaseModel):
    """Printer configuration.

    Env vars:
        CODESHIFT__PRINTER__SEPARATOR: Token separator for freshly built nodes
    """

    separator: str = Field(
        default=" ",
        description="Text placed between tokens of nodes that have no original formatting.",
    )


class CodeshiftConfig(BaseModel):
    """Root configuration for codeshift.

    All settings can be configured via:
    1. Environment variables: CODESHIFT__SECTION__KEY
    2. YAML config files (project or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)
    printer: PrinterConfig = Field(default_factory=PrinterConfig)

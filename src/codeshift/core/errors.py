"""Codeshift error types with typed error codes.

Error code ranges:
- 1xxx: Input
- 2xxx: Config
- 3xxx: Parse
- 4xxx: Plugin / capability surface
- 5xxx: Print
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Input (1xxx)
    INPUT_UNSUPPORTED = 1001
    INPUT_KIND_MISMATCH = 1002

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Parse (3xxx)
    PARSE_SYNTAX_ERROR = 3001
    PARSE_UNSUPPORTED_LANGUAGE = 3002

    # Plugin (4xxx)
    METHOD_DUPLICATE = 4001

    # Print (5xxx)
    PRINT_EMPTY_COLLECTION = 5001
    PRINT_MULTIPLE_ROOTS = 5002


@dataclass(frozen=True, slots=True)
class CodeshiftError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'INPUT_UNSUPPORTED')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


def _describe(value: Any) -> str:
    return type(value).__qualname__


class InvalidInputError(CodeshiftError, TypeError):
    """Value passed to the entry point is not a recognized input shape."""

    @classmethod
    def unsupported(cls, value: Any) -> "InvalidInputError":
        kind = _describe(value)
        return cls(
            code=ErrorCode.INPUT_UNSUPPORTED,
            message=(
                f"Unsupported input kind: {kind}. Expected source text, a node, "
                "a path, or a list of nodes or paths"
            ),
            details={"kind": kind},
        )

    @classmethod
    def kind_mismatch(cls, expected: str, actual: str) -> "InvalidInputError":
        return cls(
            code=ErrorCode.INPUT_KIND_MISMATCH,
            message=f"Collection of kind '{expected}' cannot hold a '{actual}' node",
            details={"expected": expected, "actual": actual},
        )


class ConfigError(CodeshiftError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class ParseError(CodeshiftError, ValueError):
    """Raised by the parser when source text cannot be turned into a tree."""

    @classmethod
    def syntax_error(cls, language: str, line: int, column: int, node_type: str) -> "ParseError":
        return cls(
            code=ErrorCode.PARSE_SYNTAX_ERROR,
            message=f"Syntax error in {language} source at line {line}, column {column}",
            details={"language": language, "line": line, "column": column, "node_type": node_type},
        )

    @classmethod
    def unsupported_language(cls, language: str, package: str | None = None) -> "ParseError":
        message = f"Language not available: {language}"
        details: dict[str, Any] = {"language": language}
        if package:
            message += f" (install {package})"
            details["package"] = package
        return cls(
            code=ErrorCode.PARSE_UNSUPPORTED_LANGUAGE,
            message=message,
            details=details,
        )


class DuplicateMethodError(CodeshiftError, ValueError):
    """A capability name is already installed on the collection surface."""

    @classmethod
    def for_name(cls, name: str, node_type: str | None) -> "DuplicateMethodError":
        scope = f"type '{node_type}'" if node_type else "all collections"
        return cls(
            code=ErrorCode.METHOD_DUPLICATE,
            message=f"There is already a method named '{name}' for {scope}",
            details={"name": name, "node_type": node_type},
        )


class SerializationError(CodeshiftError):
    """Collection cannot be printed back to a single source text."""

    @classmethod
    def empty(cls) -> "SerializationError":
        return cls(
            code=ErrorCode.PRINT_EMPTY_COLLECTION,
            message="Cannot print an empty collection that has no parent collection",
        )

    @classmethod
    def multiple_roots(cls, count: int) -> "SerializationError":
        return cls(
            code=ErrorCode.PRINT_MULTIPLE_ROOTS,
            message=f"Collection elements belong to {count} different trees; expected one",
            details={"roots": count},
        )

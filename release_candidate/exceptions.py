"""
Custom exception hierarchy for release-candidate.

This module defines structured exception types used across
release-candidate. All exceptions inherit from
:class:`ReleaseCandidateError` and support optional structured metadata via
the ``details`` attribute to improve diagnostics and logging.

Version parsing never raises; only template rendering, configuration,
project descriptor reading and output delivery can fail.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


class ReleaseCandidateError(Exception):
    """Base exception for all release-candidate errors.

    All release-candidate-specific exceptions should inherit from this
    class. It supports structured metadata via ``details`` for richer error
    reporting and debugging.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        # Internally normalize to a mutable dict
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


def _truncate(text: str, max_length: int = 200) -> str:
    """Truncate long text for safe logging or error reporting."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


# ---------------------------------------------------------------------------
# Template rendering
# ---------------------------------------------------------------------------


class TemplateError(ReleaseCandidateError):
    """Base class for failures while rendering a template.

    Args:
        message: Error description.
        position: Zero-based offset in the template as written.
    """

    __slots__ = ("position",)

    def __init__(
        self,
        message: str,
        *,
        position: Optional[int] = None,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        merged: MutableMapping[str, Any] = dict(details) if details else {}
        _add_if(merged, "position", position)

        super().__init__(message, merged)

        self.position = position


class UnknownTokenError(TemplateError):
    """Raised when a template references a token that is not recognized.

    Args:
        token: Name of the offending token.
        position: Offset of the token's opening delimiter.
    """

    __slots__ = ("token",)

    def __init__(self, token: str, *, position: Optional[int] = None) -> None:
        super().__init__(
            f"Unknown token '{token}'",
            position=position,
            details={"token": token},
        )

        self.token = token


class TemplateSyntaxError(TemplateError):
    """Raised when token delimiters or arguments are malformed.

    Args:
        message: Error description.
        position: Offset where the problem was detected.
        template: Template text, truncated for reporting.
    """

    __slots__ = ("template",)

    def __init__(
        self,
        message: str,
        *,
        position: Optional[int] = None,
        template: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        if template is not None:
            details["template"] = _truncate(template)

        super().__init__(message, position=position, details=details)

        self.template = template


class InvalidTimestampPatternError(TemplateError):
    """Raised when the ``timestamp`` token argument is not a date pattern.

    Args:
        pattern: The rejected pattern text.
        reason: Optional explanation from the formatter.
    """

    __slots__ = ("pattern", "reason")

    def __init__(self, pattern: str, *, reason: Optional[str] = None) -> None:
        details: MutableMapping[str, Any] = {"pattern": pattern}
        _add_if(details, "reason", reason)

        super().__init__("Invalid timestamp pattern", details=details)

        self.pattern = pattern
        self.reason = reason


# ---------------------------------------------------------------------------
# Configuration and project metadata
# ---------------------------------------------------------------------------


class ConfigError(ReleaseCandidateError):
    """Raised when configuration cannot be loaded or is invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file, if any.
        option: Name of the offending option.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "config", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option


class ProjectError(ReleaseCandidateError):
    """Raised when the current project version cannot be determined.

    Args:
        message: Error description.
        file_path: Path to the project descriptor involved.
    """

    __slots__ = ("file_path",)

    def __init__(self, message: str, *, file_path: Optional[str] = None) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "file", file_path)

        super().__init__(message, details)

        self.file_path = file_path


class FileOperationError(ReleaseCandidateError):
    """Raised when file system operations fail.

    Args:
        message: Error description.
        file_path: Path to the file involved.
        operation: Operation being performed (read/write).
        original_error: Original exception that triggered this error.
    """

    __slots__ = ("file_path", "operation", "original_error")

    def __init__(
        self,
        message: str,
        *,
        file_path: Optional[str] = None,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", file_path)
        _add_if(details, "operation", operation)
        _add_if(
            details,
            "original_error",
            str(original_error) if original_error else None,
        )

        super().__init__(message, details)

        self.file_path = file_path
        self.operation = operation
        self.original_error = original_error

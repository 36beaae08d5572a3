"""Actionable error hierarchy for performance-rating.

Errors are classified by **recovery path**, not by origin.  The scoring
engine never raises: only the configuration loader and the DataFrame
adapter surface these, and each carries a suggestion plus ordered
troubleshooting steps for the operator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any


class ErrorType(StrEnum):
    """Recovery-path categories."""

    CONFIG = "config"
    PARSE = "parse"
    VALIDATION = "validation"


@dataclass(frozen=True)
class Troubleshooting:
    """Sequential, human-readable recovery steps for the operator."""

    steps: list[str]

    def to_dict(self) -> dict[str, Any]:
        return {"steps": self.steps}


@dataclass
class ActionableError(Exception):
    """Structured error with embedded recovery guidance.

    Use the factory classmethods rather than constructing directly.
    """

    error: str
    error_type: ErrorType
    service: str

    success: bool = field(default=False, init=False)
    suggestion: str | None = None
    troubleshooting: Troubleshooting | None = None
    context: dict[str, Any] | None = None
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def __post_init__(self) -> None:
        super().__init__(self.error)

    def to_dict(self) -> dict[str, Any]:
        """Compact JSON-ready dict; ``None`` values are excluded."""
        result: dict[str, Any] = {
            "success": self.success,
            "error": self.error,
            "error_type": self.error_type.value,
            "service": self.service,
            "timestamp": self.timestamp,
        }
        if self.suggestion is not None:
            result["suggestion"] = self.suggestion
        if self.troubleshooting is not None:
            result["troubleshooting"] = self.troubleshooting.to_dict()
        if self.context is not None:
            result["context"] = self.context
        return result

    @classmethod
    def config(
        cls,
        field_name: str,
        reason: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """Missing or unusable settings file or section."""
        return cls(
            error=f"Configuration error: {field_name}: {reason}",
            error_type=ErrorType.CONFIG,
            service="settings",
            suggestion=suggestion or f"Fix '{field_name}' in the settings file",
            troubleshooting=Troubleshooting(
                steps=[
                    "1. Open the settings TOML file",
                    f"2. Locate the '{field_name}' setting",
                    f"3. Fix the issue: {reason}",
                    "4. Save and re-run",
                ]
            ),
        )

    @classmethod
    def parse(
        cls,
        source: str,
        raw_error: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """Input that could not be read at all (malformed TOML)."""
        return cls(
            error=f"Could not parse {source}: {raw_error}",
            error_type=ErrorType.PARSE,
            service=source,
            suggestion=suggestion or f"Check the syntax of {source}",
            troubleshooting=Troubleshooting(
                steps=[
                    f"1. Open {source}",
                    "2. Fix the reported syntax error",
                    "3. Re-run",
                ]
            ),
        )

    @classmethod
    def validation(
        cls,
        field_name: str,
        reason: str,
        *,
        suggestion: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> ActionableError:
        """Well-formed input holding a value the engine cannot use."""
        return cls(
            error=f"Invalid {field_name}: {reason}",
            error_type=ErrorType.VALIDATION,
            service="performance-rating",
            suggestion=suggestion or f"Correct the value of '{field_name}'",
            troubleshooting=Troubleshooting(
                steps=[
                    f"1. Inspect '{field_name}' in the input",
                    f"2. Fix the issue: {reason}",
                    "3. Re-run",
                ]
            ),
            context=context,
        )

"""Response envelope for machine-readable JSON output."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class AgentResponse:
    """Standardized response envelope for CLI commands in --json mode.

    Gives scripts and agents one structure to parse: success status, data,
    errors and actionable suggestions.
    """

    success: bool
    command: str
    data: dict[str, Any] = field(default_factory=dict)
    errors: list[dict[str, Any]] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    human_summary: str = ""
    schema_version: str = "1.0"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "success": self.success,
            "command": self.command,
            "data": self.data,
            "errors": self.errors,
            "suggestions": self.suggestions,
            "human_summary": self.human_summary,
            "schema_version": self.schema_version,
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


def create_response(
    command: str,
    data: Optional[dict[str, Any]] = None,
    human_summary: str = "",
) -> AgentResponse:
    """Create a successful AgentResponse.

    Args:
        command: The command that was executed
        data: Command-specific result data
        human_summary: One-line description for humans

    Returns:
        AgentResponse with success=True
    """
    return AgentResponse(
        success=True,
        command=command,
        data=data or {},
        human_summary=human_summary,
    )


def error_response(
    command: str,
    errors: list[dict[str, Any]],
    suggestions: Optional[list[str]] = None,
) -> AgentResponse:
    """Create an error response.

    Args:
        command: The command that failed
        errors: Error dictionaries, one per failed field
        suggestions: Suggestions for fixing the errors

    Returns:
        AgentResponse with success=False
    """
    count = len(errors)
    return AgentResponse(
        success=False,
        command=command,
        errors=errors,
        suggestions=suggestions or [],
        human_summary=f"Error: {count} invalid field{'s' if count != 1 else ''}",
    )

"""JSON response envelope for scripted and agent use."""

from __future__ import annotations

from dailycal.agent.response import AgentResponse, create_response, error_response

__all__ = [
    "AgentResponse",
    "create_response",
    "error_response",
]

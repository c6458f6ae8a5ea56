# Area: Shared
"""
read_one_article.errors — Custom exception classes
===================================================

Defines the exception hierarchy for the round engine and the match
session. Each exception stores full context for structured logging.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import json


class ReadOneArticleError(Exception):
    """Base exception for all Read One Article package errors."""
    pass


class InvalidTransitionError(ReadOneArticleError):
    """Raised when an action is dispatched in a stage that does not permit it.

    The round state is left untouched; the caller must not retry blindly.
    """

    def __init__(self, stage: str, action: str, reason: Optional[str] = None):
        self.stage = stage
        self.action = action
        self.reason = reason
        message = f"Invalid transition: '{action}' from stage '{stage}'"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="INVALID_TRANSITION",
            details={"stage": self.stage, "action": self.action},
            payload=None,
            problems=[self.reason] if self.reason else None,
        )


class InvalidPayloadError(InvalidTransitionError):
    """Raised when an action references a candidate outside the round's set."""

    def __init__(self, stage: str, action: str, candidate: Any):
        self.candidate = candidate
        super().__init__(
            stage,
            action,
            reason=f"candidate {candidate!r} is not part of this round",
        )

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="INVALID_PAYLOAD",
            details={"stage": self.stage, "action": self.action},
            payload={"candidate": repr(self.candidate)},
            problems=[self.reason] if self.reason else None,
        )


class SetupFailureError(ReadOneArticleError):
    """Raised when a round cannot be set up from the document source.

    Covers fetch errors, responses of an unexpected shape, and fewer than
    two usable candidates. No partial round is ever created.
    """

    def __init__(
        self,
        reason: str,
        payload: Optional[Dict[str, Any]] = None,
        problems: Optional[List[str]] = None,
    ):
        self.reason = reason
        self.payload = payload
        self.problems = problems or []
        super().__init__(reason)

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="SETUP_FAILURE",
            details={"reason": self.reason},
            payload=self.payload,
            problems=self.problems,
        )


class RenderError(ReadOneArticleError):
    """Raised when an article body cannot be fetched for the reading view."""

    def __init__(self, pageid: int, reason: str):
        self.pageid = pageid
        self.reason = reason
        super().__init__(f"Could not render page {pageid}: {reason}")

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="RENDER_FAILURE",
            details={"pageid": self.pageid, "reason": self.reason},
            payload=None,
            problems=None,
        )


def _format_error_block(
    error_type: str,
    details: Dict[str, Any],
    payload: Optional[Dict[str, Any]],
    problems: Optional[List[str]],
) -> str:
    """Format a structured error block for terminal and log output."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " GAME ERROR",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
    ]
    for key, value in details.items():
        label = f"{key.replace('_', ' ').title()}:"
        lines.append(f" {label:<14}{value}")

    if payload is not None:
        lines.append("")
        lines.append(" ── PAYLOAD " + "─" * 52)
        lines.append(_indent_json(payload))

    if problems:
        lines.append("")
        lines.append(" ── PROBLEMS " + "─" * 51)
        for problem in problems:
            lines.append(f" • {problem}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"

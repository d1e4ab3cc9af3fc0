"""Exceptions for the normalization pipeline."""

from enum import Enum
from typing import Optional

SNIPPET_LIMIT = 200


class ParseFailure(str, Enum):
    """Why no JSON value could be recovered from the model output."""

    EMPTY_RESPONSE = "empty_response"
    NO_OBJECT = "no_object"
    INVALID_JSON = "invalid_json"


class StructuralParseError(Exception):
    """
    Raised when the model output contains no recoverable JSON object.

    This is the "fail loud" tier: individual fields are always defaulted, but a
    response with nothing to validate is surfaced to the feature handler.

    Attributes:
        message: Error description
        reason: ParseFailure describing what went wrong
        snippet: Start of the offending model output (truncated)
    """

    def __init__(
        self,
        message: str,
        reason: ParseFailure = ParseFailure.INVALID_JSON,
        snippet: Optional[str] = None,
    ):
        self.message = message
        self.reason = reason
        self.snippet = snippet

        parts = [message, f"Reason: {reason.value}"]

        if snippet:
            truncated = snippet[:SNIPPET_LIMIT] + "..." if len(snippet) > SNIPPET_LIMIT else snippet
            parts.append(f"\nModel output:\n{truncated}")

        super().__init__("\n".join(parts))


class UnknownShapeError(ValueError):
    """Raised when a record shape name is not registered."""

    pass

"""
API error types.

Each error carries the HTTP status it maps to and renders the response body
`{"error": message}` (plus `"details"` when validation issues are attached).
"""

from __future__ import annotations

from typing import Any, Iterable

from fastapi import status


def format_issues(errors: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """
    Flatten pydantic error dicts into `{"field", "message", "type"}` issues.
    """
    return [
        {
            "field": ".".join(str(loc) for loc in e.get("loc", ())),
            "message": str(e.get("msg", "")),
            "type": str(e.get("type", "")),
        }
        for e in errors
    ]


class ApiError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, *, details: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_response(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class InvalidRequestError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class ReferentialIntegrityError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class UnknownPersistenceError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

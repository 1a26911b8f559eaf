"""
Request validation for commentary routes.

Pure functions: each one parses a single request input, returns the validated
value, or raises `InvalidRequestError` carrying the field-level issues.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError

from core.errors import InvalidRequestError, format_issues
from matches.schemas import MatchIdParams

from . import schemas


def parse_match_id(path_params: Mapping[str, Any]) -> int:
    try:
        params = MatchIdParams.model_validate(dict(path_params))
    except ValidationError as exc:
        raise InvalidRequestError(
            "Invalid match ID parameter.",
            details=format_issues(exc.errors()),
        ) from exc
    return params.id


def parse_list_query(query_params: Mapping[str, Any]) -> schemas.ListCommentaryQuery:
    try:
        return schemas.ListCommentaryQuery.model_validate(dict(query_params))
    except ValidationError as exc:
        raise InvalidRequestError(
            "Invalid query.",
            details=format_issues(exc.errors()),
        ) from exc


def parse_create_body(body: Any) -> schemas.CommentaryCreate:
    try:
        return schemas.CommentaryCreate.model_validate(body)
    except ValidationError as exc:
        raise InvalidRequestError(
            "Invalid commentary data.",
            details=format_issues(exc.errors()),
        ) from exc


def is_json_content_type(content_type: str | None) -> bool:
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    return media_type == "application/json"


def unsupported_content_type_error() -> InvalidRequestError:
    return InvalidRequestError(
        "Invalid commentary data.",
        details=[
            {
                "field": "body",
                "message": "Request body must be sent as application/json.",
                "type": "content_type",
            }
        ],
    )


def malformed_body_error() -> InvalidRequestError:
    return InvalidRequestError(
        "Invalid commentary data.",
        details=[{"field": "body", "message": "Request body must be valid JSON.", "type": "json_invalid"}],
    )

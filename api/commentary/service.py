"""
Commentary business logic.

Scope:
- limit defaulting and clamping for the list operation
- merging the path match id into the validated create payload
- translating store failures into API errors
- converting store rows (snake_case) into wire records (camelCase)
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic.alias_generators import to_camel

from core import config, db
from core.errors import ReferentialIntegrityError, UnknownPersistenceError

from . import repository, schemas

logger = logging.getLogger(__name__)


def effective_limit(requested: int | None) -> int:
    limit = requested if requested is not None else config.commentary_default_limit()
    return min(limit, config.commentary_max_limit())


def _to_commentary(row: dict[str, Any]) -> dict[str, Any]:
    record = {to_camel(key): value for key, value in row.items()}
    metadata = record.get("metadata")
    if isinstance(metadata, str):
        record["metadata"] = json.loads(metadata)
    return record


async def list_commentary(match_id: int, *, limit: int | None = None) -> list[dict[str, Any]]:
    try:
        rows = await repository.list_commentary(match_id, limit=effective_limit(limit))
    except Exception as exc:
        logger.exception("commentary_list_failed match_id=%s", match_id)
        raise UnknownPersistenceError("Failed to list commentary.") from exc
    return [_to_commentary(row) for row in rows]


async def create_commentary(match_id: int, payload: schemas.CommentaryCreate) -> dict[str, Any]:
    values = payload.model_dump(exclude_none=True)
    try:
        row = await repository.insert_commentary(match_id, values)
    except db.ForeignKeyViolation as exc:
        logger.warning(
            "commentary_match_missing match_id=%s constraint=%s",
            match_id,
            exc.constraint,
        )
        raise ReferentialIntegrityError("Referenced match does not exist.") from exc
    except Exception as exc:
        logger.exception("commentary_create_failed match_id=%s", match_id)
        raise UnknownPersistenceError("Failed to create commentary.") from exc

    logger.info("commentary_created match_id=%s id=%s", match_id, row.get("id"))
    return _to_commentary(row)

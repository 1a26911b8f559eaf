"""
Commentary persistence (raw SQL).

Column names come from `schemas.CommentaryCreate` field names, never from
request data.
"""

from __future__ import annotations

import json
from typing import Any

from core import db

from . import schemas

# Columns stored as jsonb; asyncpg needs them passed as text and cast in SQL.
_JSON_COLUMNS = frozenset({"metadata"})


def content_columns() -> list[str]:
    return list(schemas.CommentaryCreate.model_fields)


def _select_columns() -> str:
    return ", ".join(["id", "match_id", *content_columns(), "created_at"])


def _json_arg(value: Any) -> str | None:
    if value is None:
        return None
    return json.dumps(value, ensure_ascii=True)


async def list_commentary(match_id: int, *, limit: int) -> list[dict[str, Any]]:
    """
    Newest-first commentary rows for one match.
    """
    return await db.fetch_all(
        f"""
        SELECT {_select_columns()}
        FROM commentary
        WHERE match_id = $1
        ORDER BY created_at DESC, id DESC
        LIMIT $2
        """,
        match_id,
        limit,
    )


async def insert_commentary(match_id: int, values: dict[str, Any]) -> dict[str, Any]:
    """
    Insert one commentary row and return it as persisted.

    `values` holds validated content fields; absent keys fall back to column
    defaults. Raises `db.ForeignKeyViolation` when the match does not exist.
    """
    allowed = set(content_columns())
    unknown = sorted(set(values) - allowed)
    if unknown:
        raise ValueError(f"Unknown commentary columns: {', '.join(unknown)}")

    columns = ["match_id"]
    placeholders = ["$1"]
    args: list[Any] = [match_id]
    for column in content_columns():
        if column not in values:
            continue
        args.append(_json_arg(values[column]) if column in _JSON_COLUMNS else values[column])
        cast = "::jsonb" if column in _JSON_COLUMNS else ""
        columns.append(column)
        placeholders.append(f"${len(args)}{cast}")

    row = await db.fetch_one(
        f"""
        INSERT INTO commentary ({", ".join(columns)})
        VALUES ({", ".join(placeholders)})
        RETURNING {_select_columns()}
        """,
        *args,
    )
    if row is None:
        raise RuntimeError("Failed to insert commentary.")
    return row

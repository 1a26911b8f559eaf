"""
Pydantic schemas for commentary endpoints.

`CommentaryCreate` is the single definition of the commentary content fields:
its field names are the `commentary` table's column names, and the repository
builds the INSERT column list from it.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PositiveInt
from pydantic.alias_generators import to_camel


class ListCommentaryQuery(BaseModel):
    limit: PositiveInt | None = None


class CommentaryCreate(BaseModel):
    # camelCase on the wire, snake_case accepted too; unknown keys are dropped.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    minute: int | None = Field(default=None, ge=0)
    sequence: int | None = Field(default=None, ge=0)
    period: str | None = Field(default=None, min_length=1, max_length=50)
    event_type: str | None = Field(default=None, min_length=1, max_length=50)
    actor: str | None = Field(default=None, max_length=200)
    team: str | None = Field(default=None, max_length=200)
    message: str = Field(..., min_length=1, max_length=2000)
    metadata: dict[str, Any] | None = None
    tags: list[str] | None = None

"""
Pydantic schemas for match-scoped routes.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# matches.id is a SERIAL (int4) column.
MAX_MATCH_ID = 2_147_483_647


class MatchIdParams(BaseModel):
    id: int = Field(..., gt=0, le=MAX_MATCH_ID)

"""
Commentary API endpoints, scoped to one match.

Inputs are validated by hand (see `validation.py`) so each input type
answers with its own 400 message before the store is touched.
"""

from __future__ import annotations

from fastapi import APIRouter, Request, status

from . import service, validation

router = APIRouter(prefix="/matches/{id}/commentary")


@router.get("")
async def list_commentary(request: Request) -> dict:
    match_id = validation.parse_match_id(request.path_params)
    query = validation.parse_list_query(request.query_params)

    data = await service.list_commentary(match_id, limit=query.limit)
    return {"data": data}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_commentary(request: Request) -> dict:
    match_id = validation.parse_match_id(request.path_params)
    if not validation.is_json_content_type(request.headers.get("content-type")):
        raise validation.unsupported_content_type_error()
    try:
        body = await request.json()
    except ValueError as exc:
        raise validation.malformed_body_error() from exc
    payload = validation.parse_create_body(body)

    data = await service.create_commentary(match_id, payload)
    return {"data": data}

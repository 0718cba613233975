"""
REST API routes — health check and chirps.

Route prefix: /api
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_current_user_id
from database.helpers import create_chirp, get_chirp, get_chirps
from utils.profanity import clean_chirp
from utils.schemas import ChirpRequest, ChirpResponse, CleanedChirpResponse, ErrorResponse
from utils.validators import validate_chirp_body

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chirps"])


def _chirp_to_dict(chirp) -> Dict[str, Any]:
    return {
        "id": chirp.id,
        "created_at": chirp.created_at,
        "updated_at": chirp.updated_at,
        "body": chirp.body,
        "user_id": chirp.user_id,
    }


@router.get("/healthz", response_class=PlainTextResponse)
async def healthz() -> str:
    return "OK"


@router.post(
    "/validate_chirp",
    response_model=CleanedChirpResponse,
    responses={400: {"model": ErrorResponse}},
)
async def validate_chirp(req: ChirpRequest):
    """Check a chirp's length and return it with profanity masked."""
    try:
        validate_chirp_body(req.body)
    except ValueError as exc:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})
    return {"body": clean_chirp(req.body)}


@router.post(
    "/chirps",
    response_model=ChirpResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def post_chirp(
    req: ChirpRequest,
    user_id: uuid.UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
):
    """Post a chirp as the authenticated user."""
    try:
        validate_chirp_body(req.body)
    except ValueError as exc:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})

    chirp = await create_chirp(session, clean_chirp(req.body), user_id)
    logger.info("User %s posted chirp %s", user_id, chirp.id)
    return _chirp_to_dict(chirp)


@router.get("/chirps", response_model=List[ChirpResponse])
async def list_chirps(
    session: AsyncSession = Depends(db_session),
) -> List[Dict[str, Any]]:
    """All chirps, oldest first."""
    chirps = await get_chirps(session)
    return [_chirp_to_dict(c) for c in chirps]


@router.get("/chirps/{chirp_id}", response_model=ChirpResponse)
async def read_chirp(
    chirp_id: uuid.UUID,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    chirp = await get_chirp(session, chirp_id)
    if chirp is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Chirp not found",
        )
    return _chirp_to_dict(chirp)

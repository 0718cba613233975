"""
Admin routes: visit metrics and the development reset.

Route prefix: /admin
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session
from config.settings import config
from database.helpers import delete_all_users

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin"])

_METRICS_TEMPLATE = """
<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>
"""


@router.get("/metrics", response_class=HTMLResponse)
async def metrics(request: Request) -> str:
    return _METRICS_TEMPLATE.format(hits=request.app.state.hits.value)


@router.post("/reset", response_class=PlainTextResponse)
async def reset(
    request: Request,
    session: AsyncSession = Depends(db_session),
) -> str:
    """Reset the hit counter and delete all users. Development only."""
    if config.platform != "dev":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Reset is only available in development environments",
        )

    request.app.state.hits.reset()
    deleted = await delete_all_users(session)
    logger.info("Admin reset: hit counter cleared, %d users deleted", deleted)
    return "Hits reset to 0 and all users deleted."

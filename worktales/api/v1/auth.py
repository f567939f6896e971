# worktales/api/v1/auth.py
import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Response

from worktales.core.config import get_settings
from worktales.core.security import TOKEN_COOKIE, create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/jwt")
async def issue_token(response: Response, user: Dict[str, Any] = Body(...)):
    """Sign the posted identity claims and hand them back as an HTTP-only cookie."""
    settings = get_settings()
    token = create_access_token(user)
    response.set_cookie(
        TOKEN_COOKIE,
        token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE,
    )
    logger.info("Issued token for %s", user.get("email"))
    return {"success": True}


@router.post("/logout")
async def logout(response: Response):
    # only the browser copy goes away; the token stays valid until it expires
    settings = get_settings()
    response.delete_cookie(
        TOKEN_COOKIE,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE,
    )
    return {"success": True}

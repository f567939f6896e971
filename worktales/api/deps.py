"""
Request dependencies for cookie authentication and owner checks.

``get_current_claims`` verifies the ``token`` cookie. ``OwnerPolicy`` is the single
authorization rule the API has: the identity named in the query string must be the
identity in the token.
"""
import logging
from typing import Any, Dict, Optional, Sequence

from fastapi import Depends, HTTPException, Request, status
from jose import JWTError

from worktales.core.security import TOKEN_COOKIE, decode_access_token

logger = logging.getLogger(__name__)


async def get_current_claims(request: Request) -> Dict[str, Any]:
    token = request.cookies.get(TOKEN_COOKIE)
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="unauthorized")
    try:
        claims = decode_access_token(token)
    except JWTError as exc:
        logger.info("Rejected token on %s: %s", request.url.path, exc)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="unauthorized")
    request.state.user = claims
    return claims


class OwnerPolicy:
    """
    Dependency that lets a request through only when the owner named in the query
    equals the ``email`` claim of the caller.

    ``fields`` are query parameter names checked in order; the first one present is
    the owner. A request that names no owner at all is forbidden too.
    """

    def __init__(self, *fields: str, claim: str = "email"):
        self.fields: Sequence[str] = fields
        self.claim = claim

    def owner(self, request: Request) -> Optional[str]:
        for name in self.fields:
            value = request.query_params.get(name)
            if value:
                return value
        return None

    async def __call__(
        self, request: Request, claims: Dict[str, Any] = Depends(get_current_claims)
    ) -> str:
        owner = self.owner(request)
        caller = claims.get(self.claim)
        if owner is None or owner != caller:
            logger.warning(
                "Forbidden %s: owner=%r caller=%r", request.url.path, owner, caller
            )
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="forbidden")
        return owner

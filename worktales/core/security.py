# worktales/core/security.py
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt

from worktales.core.config import get_settings

ALGORITHM = "HS256"
TOKEN_COOKIE = "token"

# The login body is signed as-is, so registered claim names in it (aud, sub, iat...)
# are client data. Only the signature and our own ``exp`` are checked.
_DECODE_OPTIONS = {
    "verify_aud": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
    "verify_iat": False,
    "verify_nbf": False,
}


def create_access_token(claims: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """Sign whatever the client sent at login, plus an expiry.

    The claims are not validated; downstream checks only look at ``email``.
    """
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode = dict(claims)
    to_encode["exp"] = expire
    return jwt.encode(to_encode, settings.ACCESS_TOKEN_SECRET, algorithm=ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    # raises jose.JWTError (ExpiredSignatureError included) on a bad token
    settings = get_settings()
    return jwt.decode(
        token,
        settings.ACCESS_TOKEN_SECRET,
        algorithms=[ALGORITHM],
        options=_DECODE_OPTIONS,
    )

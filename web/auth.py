"""Admin check for settings writes: shared bearer secret."""
from __future__ import annotations

import hmac
from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

import config

http_bearer = HTTPBearer(auto_error=False)


async def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(http_bearer),
    x_auth_token: Optional[str] = Header(None, alias="X-Auth-Token"),
) -> None:
    """Require ADMIN_API_SECRET. Accepts Authorization: Bearer or X-Auth-Token (fallback for proxies that strip Authorization)."""
    if not config.ADMIN_API_SECRET:
        raise HTTPException(status.HTTP_503_SERVICE_UNAVAILABLE, "Settings administration is not configured")
    token = None
    if credentials and credentials.credentials:
        token = credentials.credentials
    elif x_auth_token:
        token = x_auth_token
    if not token or not hmac.compare_digest(token, config.ADMIN_API_SECRET):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

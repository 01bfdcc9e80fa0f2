from __future__ import annotations
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Literal
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from pydantic import BaseModel, Field, ValidationError
from app.core.config import settings
from app.core.logging import auth_logger

# -----------------------------------------------------------------------------
# 1) Token claims
# -----------------------------------------------------------------------------

TokenType = Literal["access"]

class AccessClaims(BaseModel):
    sub: str
    type: TokenType = "access"
    exp: int
    roles: List[str] = Field(default_factory=list)
    stores: List[str] = Field(default_factory=list)

    def can_access_store(self, store_id: str) -> bool:
        return store_id in self.stores

# -----------------------------------------------------------------------------
# 2) Internal helpers to issue and decode JWTs
# -----------------------------------------------------------------------------

bearer_scheme = HTTPBearer(auto_error=True)

def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)

def _exp_in(minutes: int) -> int:
    return int((_utcnow() + timedelta(minutes=minutes)).timestamp())

def _encode(payload: Dict[str, Any], secret: str) -> str:
    return jwt.encode(payload, secret, algorithm=settings.JWT_ALGORITHM)

def _decode(token: str, secret: str) -> Dict[str, Any]:
    try:
        return jwt.decode(token, secret, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        auth_logger.warning("Rejected invalid or expired token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token."
        )

# -----------------------------------------------------------------------------
# 3) Issuing and decoding access tokens
# -----------------------------------------------------------------------------

def create_access_token(*, user_id: str, roles: List[str], stores: List[str],
                        minutes: int | None = None) -> str:
    claims = AccessClaims(
        sub=user_id,
        type="access",
        exp=_exp_in(settings.ACCESS_TOKEN_MINUTES if minutes is None else minutes),
        roles=roles,
        stores=stores,
    )
    return _encode(claims.model_dump(), settings.JWT_SECRET)

def decode_access_token(token: str) -> AccessClaims:
    data = _decode(token, settings.JWT_SECRET)
    try:
        return AccessClaims(**data)
    except ValidationError:
        raise HTTPException(status_code=401, detail="Invalid access token.")

# -----------------------------------------------------------------------------
# 4) FastAPI dependencies for authentication/authorization
# -----------------------------------------------------------------------------

def get_current_access(creds: HTTPAuthorizationCredentials = Depends(bearer_scheme)) -> AccessClaims:
    return decode_access_token(creds.credentials)

def require_roles(*allowed_roles: str):
    def _dep(claims: AccessClaims = Depends(get_current_access)) -> AccessClaims:
        roles = set(map(str.lower, claims.roles or []))
        allowed = set(map(str.lower, allowed_roles))
        if roles.isdisjoint(allowed):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Permission denied."
            )
        return claims
    return _dep

def ensure_store_access(claims: AccessClaims, store_id: str) -> None:
    if not claims.can_access_store(store_id):
        auth_logger.warning("Store access denied", user=claims.sub, store_id=store_id)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access to this store is denied."
        )

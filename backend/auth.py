"""
Authentication module for bearer JWT validation.
Provides FastAPI dependencies for securing endpoints.

Tokens are issued by the auth service (HS256, shared secret) and carry:
- userId (or sub): the member id
- role: USER, COACH or ADMIN (USER when absent)
"""
import logging
from dataclasses import dataclass
from typing import Optional

import jwt
from fastapi import Depends, Header, HTTPException

from backend.settings import Settings, get_settings
from domain.models import Role

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity attached to a request."""

    user_id: str
    role: Role = Role.USER

    @property
    def is_staff(self) -> bool:
        return self.role in (Role.COACH, Role.ADMIN)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


def validate_jwt(authorization: str, settings: Settings) -> AuthenticatedUser:
    """
    Validate a bearer token and return the authenticated user.

    Raises:
        HTTPException: 401 for a malformed, expired or invalid token
    """
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization header format")

    token = authorization.split(" ", 1)[1]

    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid JWT: {e}")
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}")

    user_id = payload.get("userId") or payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Token missing user ID")

    try:
        role = Role(str(payload.get("role") or Role.USER.value).upper())
    except ValueError:
        raise HTTPException(status_code=401, detail="Token carries an unknown role")

    logger.debug(f"JWT validated for user: {user_id} ({role.value})")
    return AuthenticatedUser(user_id=str(user_id), role=role)


async def get_current_user(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> AuthenticatedUser:
    """
    Authenticate via bearer JWT.

    Usage:
        @app.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.user_id}
    """
    if not authorization:
        raise HTTPException(
            status_code=401,
            detail="Missing authentication. Provide Authorization header.",
        )
    return validate_jwt(authorization, settings)


async def get_optional_user(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> Optional[AuthenticatedUser]:
    """
    Returns the user if authenticated, None otherwise.
    Use for endpoints that work differently when authenticated.
    """
    if not authorization:
        return None
    try:
        return validate_jwt(authorization, settings)
    except HTTPException:
        return None


def ensure_staff(user: AuthenticatedUser) -> AuthenticatedUser:
    """Allow coaches and admins only (403 otherwise)."""
    if not user.is_staff:
        logger.warning(f"User {user.user_id} ({user.role.value}) denied staff access")
        raise HTTPException(status_code=403, detail="Coach or admin role required")
    return user


def ensure_admin(user: AuthenticatedUser) -> AuthenticatedUser:
    """Allow admins only (403 otherwise)."""
    if not user.is_admin:
        logger.warning(f"User {user.user_id} ({user.role.value}) denied admin access")
        raise HTTPException(status_code=403, detail="Admin role required")
    return user

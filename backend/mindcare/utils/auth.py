"""
Authentication utilities - verification of access tokens issued by the
Supabase auth service.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from ..config import settings

# Bearer token security
security = HTTPBearer()


def create_access_token(
    user_id: str,
    expires_delta: Optional[timedelta] = None,
    secret: Optional[str] = None,
) -> str:
    """
    Mint an access token shaped like the ones Supabase issues.

    Used for local development and tests; production tokens come from
    the Supabase auth service.

    Args:
        user_id: Value for the ``sub`` claim
        expires_delta: Optional expiration time delta
        secret: Signing secret (defaults to the configured JWT secret)

    Returns:
        str: Encoded JWT token
    """
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    claims = {
        "sub": user_id,
        "aud": settings.jwt_audience,
        "role": "authenticated",
        "exp": expire,
    }
    return jwt.encode(claims, secret or settings.supabase_jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Optional[str]:
    """
    Decode and verify an access token.

    Args:
        token: JWT token string

    Returns:
        Optional[str]: The user id (``sub``) if the token is valid, None otherwise
    """
    try:
        payload = jwt.decode(
            token,
            settings.supabase_jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
        )
    except JWTError:
        return None
    return payload.get("sub")


async def get_access_token(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> str:
    """Dependency returning the raw bearer token of the caller."""
    return credentials.credentials


async def get_current_user_id(token: str = Depends(get_access_token)) -> str:
    """
    Dependency to get current user ID from the bearer token.

    Raises:
        HTTPException: If token is invalid
    """
    user_id = decode_access_token(token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id

# linkbuilder/api/deps.py
"""
API dependencies for authentication.
Sign-in happens at the identity provider; requests may carry its bearer
token, and anonymous requests are allowed.
"""
from typing import Optional, Dict, Any
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from linkbuilder.core.jwt_auth import JWTAuth

# Security scheme (optional so anonymous requests still work)
security = HTTPBearer(auto_error=False)


async def get_current_user_optional(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Optional[Dict[str, Any]]:
    """
    Decode the bearer token if one was sent.

    Returns None for anonymous requests; an invalid token is a 401.
    """
    if not credentials or not credentials.credentials:
        return None

    payload = JWTAuth.decode_token(credentials.credentials)
    return {
        "user_id": JWTAuth.get_user_id(payload),
        "email": JWTAuth.get_email(payload),
        "name": payload.get("name"),
        "is_admin": JWTAuth.is_admin(payload),
        "payload": payload,
    }


async def require_user(
    user: Optional[Dict[str, Any]] = Depends(get_current_user_optional)
) -> Dict[str, Any]:
    """Dependency for routes that need a signed-in user"""
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required. Provide a bearer token from the identity provider."
        )
    return user


async def get_user_id(
    user: Optional[Dict[str, Any]] = Depends(get_current_user_optional)
) -> Optional[str]:
    return user.get("user_id") if user else None

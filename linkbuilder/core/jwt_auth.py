# linkbuilder/core/jwt_auth.py
"""
JWT handling for bearer tokens issued by the external identity provider.
Sign-in itself happens outside this service; we only read the claims.
"""
import jwt
from typing import Optional, Dict, Any
from fastapi import HTTPException

from linkbuilder.core.config import JWT_SECRET_KEY, JWT_ALGORITHM, JWT_AUDIENCE


class JWTAuth:
    """JWT Authentication handler"""

    @staticmethod
    def decode_token(token: str) -> Dict[str, Any]:
        """
        Decode and validate JWT token.

        Args:
            token: JWT token string

        Returns:
            Decoded token payload

        Raises:
            HTTPException: If token is invalid or expired
        """
        if not JWT_SECRET_KEY:
            raise HTTPException(status_code=401, detail="Token validation is not configured")

        try:
            if JWT_AUDIENCE:
                return jwt.decode(token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM], audience=JWT_AUDIENCE)
            return jwt.decode(
                token,
                JWT_SECRET_KEY,
                algorithms=[JWT_ALGORITHM],
                options={"verify_aud": False},
            )
        except jwt.ExpiredSignatureError:
            raise HTTPException(status_code=401, detail="Token has expired")
        except jwt.InvalidTokenError:
            raise HTTPException(status_code=401, detail="Invalid token")

    @staticmethod
    def get_user_id(payload: Dict[str, Any]) -> Optional[str]:
        """Extract the user id (``oid``/``sub`` style claims) from a payload."""
        user_id = (
            payload.get('oid') or
            payload.get('user_id') or
            payload.get('sub')
        )
        return str(user_id) if user_id else None

    @staticmethod
    def get_email(payload: Dict[str, Any]) -> Optional[str]:
        return (
            payload.get('email') or
            payload.get('preferred_username') or
            payload.get('upn')
        )

    @staticmethod
    def is_admin(payload: Dict[str, Any]) -> bool:
        # The admin rule has not been decided yet; nobody is an admin.
        return False

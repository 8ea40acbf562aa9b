# linkbuilder/api/v1/auth.py
from fastapi import APIRouter, Depends
from typing import Any, Dict

from linkbuilder.api.deps import require_user

router = APIRouter()


@router.get("/me")
def current_user(user: Dict[str, Any] = Depends(require_user)):
    """Profile from the bearer token claims"""
    return {
        "user_id": user.get("user_id"),
        "email": user.get("email"),
        "name": user.get("name"),
        "is_admin": user.get("is_admin", False),
    }

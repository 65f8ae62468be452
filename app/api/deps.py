"""
API dependency injection module.

This module provides dependency injection functions for API endpoints,
including database sessions and authentication.
"""

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.session import get_db
from app.models.user import User
from app.services.auth import AuthService, oauth2_scheme

logger = logging.getLogger(__name__)

__all__ = ["get_db", "get_current_user", "require_admin"]


def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
    token: Optional[str] = Depends(oauth2_scheme),
) -> User:
    """
    Get the current authenticated user.

    The token is read from the Authorization header when present, otherwise
    from the session cookie set at login.

    Raises:
        HTTPException: 401 if the token is missing or invalid or the user no longer exists
    """
    if not token:
        token = request.cookies.get(settings.AUTH_COOKIE_NAME)
    return AuthService.get_user_from_token(db, token)


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    """
    Get the current user, who must be an administrator.

    Raises:
        HTTPException: 403 for non-admin callers
    """
    if not current_user.is_admin:
        logger.warning(f"Non-admin user {current_user.id} denied admin access")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: Admin access required",
        )
    return current_user

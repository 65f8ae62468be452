from typing import Any

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.auth import LoginResponse, UserLogin
from app.schemas.base import MessageResponse
from app.services.auth import AuthService
from app.utils.logger import auth_logger

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(login_data: UserLogin, response: Response, db: Session = Depends(get_db)) -> Any:
    """
    Log in with email and password.

    Sets the httpOnly session cookie and an informational role cookie; the
    same token may be sent as a Bearer header instead of the cookie.
    """
    user = AuthService.authenticate(db, login_data.email, login_data.password)
    token = AuthService.create_access_token(user.id)
    AuthService.set_session_cookies(response, user, token)

    return {"message": "Login successful", "user": user}


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response) -> Any:
    """Clear the session cookies. Always succeeds."""
    AuthService.clear_session_cookies(response)
    auth_logger.info("Session cleared", "LOGOUT")
    return {"message": "Logout successful"}

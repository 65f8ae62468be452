from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
from fastapi import HTTPException, Response, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.user import User
from app.schemas.auth import TokenPayload
from app.utils.logger import auth_logger

COOKIE_MAX_AGE = 60 * 60 * 24 * 7  # one week, in seconds

# The session cookie is the fallback, so a missing header is not an error here
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX}/auth/login", auto_error=False)


class AuthService:
    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """Verify a password against a hash."""
        try:
            return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False

    @staticmethod
    def get_password_hash(password: str) -> str:
        """Hash a password for storage."""
        salt = bcrypt.gensalt(rounds=settings.PASSWORD_HASH_ROUNDS)
        hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
        return hashed.decode('utf-8')

    @classmethod
    def create_access_token(cls, user_id: str, expires_delta: timedelta = None) -> str:
        """Create a new JWT access token."""
        if expires_delta is None:
            expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

        expire = datetime.now(timezone.utc) + expires_delta
        to_encode = {"sub": str(user_id), "exp": expire}

        return jwt.encode(
            to_encode,
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )

    @classmethod
    def decode_access_token(cls, token: str) -> Optional[str]:
        """Return the user id carried by a valid token, or None."""
        try:
            payload = jwt.decode(
                token,
                settings.SECRET_KEY,
                algorithms=[settings.JWT_ALGORITHM],
            )
            token_data = TokenPayload(**payload)
        except (jwt.PyJWTError, ValueError):
            return None
        return token_data.sub

    @classmethod
    def get_user_by_email(cls, db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email).first()

    @classmethod
    def authenticate(cls, db: Session, email: str, password: str) -> User:
        """Check credentials and return the matching user."""
        user = cls.get_user_by_email(db, email)
        if not user or not cls.verify_password(password, user.hashed_password):
            auth_logger.warning("Rejected login", "LOGIN", email=email)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid email or password",
            )

        auth_logger.success("User logged in", "LOGIN", user_id=user.id, role=user.role.value)
        return user

    @classmethod
    def get_user_from_token(cls, db: Session, token: Optional[str]) -> User:
        """Resolve the caller from a session token, reloading the row from the database."""
        unauthorized = HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
        if not token:
            raise unauthorized

        user_id = cls.decode_access_token(token)
        if user_id is None:
            raise unauthorized

        user = db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise unauthorized

        return user

    @staticmethod
    def set_session_cookies(response: Response, user: User, token: str) -> None:
        """Attach the session cookies issued at login."""
        response.set_cookie(
            key=settings.AUTH_COOKIE_NAME,
            value=token,
            max_age=COOKIE_MAX_AGE,
            httponly=True,
            secure=settings.cookie_secure,
            samesite="lax",
            path="/",
        )
        # Informational only; authorization always reads the role from the database
        response.set_cookie(
            key=settings.ROLE_COOKIE_NAME,
            value=user.role.value,
            max_age=COOKIE_MAX_AGE,
            secure=settings.cookie_secure,
            samesite="lax",
            path="/",
        )

    @staticmethod
    def clear_session_cookies(response: Response) -> None:
        response.delete_cookie(settings.AUTH_COOKIE_NAME, path="/")
        response.delete_cookie(settings.ROLE_COOKIE_NAME, path="/")

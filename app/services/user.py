"""User service.

This module contains the business logic for user accounts: administrator
management of any account and members editing their own profile and password.
"""

from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.models.user import User
from app.schemas.user import PasswordChange, ProfileUpdate, UserCreate, UserUpdate
from app.services.auth import AuthService
from app.services.error_handler import handle_db_errors, transaction_rollback
from app.utils.logger import user_logger


class UserService:
    """Service class for user account operations."""

    @staticmethod
    def get_user(db: Session, user_id: str) -> User:
        """Get a user by ID."""
        user = db.query(User).filter(User.id == user_id).first()
        if not user:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
            )
        return user

    @staticmethod
    def list_users(db: Session) -> List[User]:
        """Get all users ordered by name."""
        return db.query(User).order_by(User.name.asc()).all()

    @staticmethod
    def _ensure_email_available(db: Session, email: str, exclude_user_id: Optional[str] = None) -> None:
        query = db.query(User).filter(User.email == email)
        if exclude_user_id is not None:
            query = query.filter(User.id != exclude_user_id)
        if query.first():
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Email is already in use",
            )

    @staticmethod
    @handle_db_errors("create user")
    def create_user(db: Session, user_data: UserCreate) -> User:
        """Create a new account with a hashed password."""
        UserService._ensure_email_available(db, user_data.email)

        user = User(
            name=user_data.name,
            email=user_data.email,
            hashed_password=AuthService.get_password_hash(user_data.password),
            role=user_data.role,
        )
        with transaction_rollback(db):
            db.add(user)
        db.refresh(user)

        user_logger.success("User created", "CREATE", user_id=user.id, role=user.role.value)
        return user

    @staticmethod
    @handle_db_errors("update profile")
    def update_profile(db: Session, user: User, profile_data: ProfileUpdate) -> User:
        """Update the caller's own profile. The role cannot be changed here."""
        UserService._ensure_email_available(db, profile_data.email, exclude_user_id=user.id)

        with transaction_rollback(db):
            for field, value in profile_data.model_dump(exclude_unset=True).items():
                setattr(user, field, value)
        db.refresh(user)

        user_logger.info("Profile updated", "UPDATE", user_id=user.id)
        return user

    @staticmethod
    @handle_db_errors("update user")
    def update_user(db: Session, user_id: str, user_data: UserUpdate) -> User:
        """Update any account as an administrator."""
        user = UserService.get_user(db, user_id)
        UserService._ensure_email_available(db, user_data.email, exclude_user_id=user.id)

        update_data = user_data.model_dump(exclude_unset=True)
        if update_data.get("role") is None:
            update_data.pop("role", None)

        with transaction_rollback(db):
            for field, value in update_data.items():
                setattr(user, field, value)
        db.refresh(user)

        user_logger.info("User updated", "UPDATE", user_id=user.id)
        return user

    @staticmethod
    @handle_db_errors("change password")
    def change_password(db: Session, user: User, password_data: PasswordChange) -> None:
        """Change the caller's password after checking the current one."""
        if not AuthService.verify_password(password_data.current_password, user.hashed_password):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Current password is incorrect",
            )

        with transaction_rollback(db):
            user.hashed_password = AuthService.get_password_hash(password_data.new_password)

        user_logger.info("Password changed", "PASSWORD", user_id=user.id)

    @staticmethod
    @handle_db_errors("reset password")
    def reset_password(db: Session, user_id: str, new_password: str) -> None:
        """Set a new password for any account as an administrator."""
        user = UserService.get_user(db, user_id)
        with transaction_rollback(db):
            user.hashed_password = AuthService.get_password_hash(new_password)

        user_logger.info("Password reset by administrator", "PASSWORD", user_id=user.id)

    @staticmethod
    @handle_db_errors("delete user")
    def delete_user(db: Session, user_id: str, acting_user: User) -> None:
        """Delete an account together with its plans, payments, logs and metrics."""
        if user_id == acting_user.id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="You cannot delete your own account",
            )

        user = UserService.get_user(db, user_id)
        with transaction_rollback(db):
            db.delete(user)

        user_logger.warning("User deleted", "DELETE", user_id=user_id, by=acting_user.id)

"""User account endpoints.

``router`` is mounted at ``/users`` and serves both the caller's own account
(``/users/me...``) and administrator account management (``/users/{id}``).
``admin_router`` is mounted at ``/admin/users``.
"""

from typing import Any

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, require_admin
from app.db.session import get_db
from app.models.user import User
from app.schemas.base import MessageResponse
from app.schemas.metric import MetricCreate, MetricEnvelope, MetricListResponse
from app.schemas.user import (
    PasswordChange,
    PasswordReset,
    ProfileUpdate,
    UserCreate,
    UserListResponse,
    UserResponse,
    UserUpdate,
)
from app.services.metric import MetricService
from app.services.user import UserService

router = APIRouter()
admin_router = APIRouter()


# Self-service
@router.get("/me", response_model=UserResponse)
def get_my_account(current_user: User = Depends(get_current_user)) -> Any:
    """Get the caller's own account."""
    return current_user


@router.put("/me/profile", response_model=UserResponse)
def update_my_profile(
    profile_data: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """Update the caller's name, email and contact details."""
    return UserService.update_profile(db, current_user, profile_data)


@router.put("/me/password", response_model=MessageResponse)
def change_my_password(
    password_data: PasswordChange,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    UserService.change_password(db, current_user, password_data)
    return {"message": "Password updated successfully"}


# Administration
@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    return UserService.create_user(db, user_data)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: str,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    return UserService.get_user(db, user_id)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: str,
    user_data: UserUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    return UserService.update_user(db, user_id, user_data)


@router.put("/{user_id}/password", response_model=MessageResponse)
def reset_user_password(
    user_id: str,
    password_data: PasswordReset,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    UserService.reset_password(db, user_id, password_data.new_password)
    return {"message": "Password reset successfully"}


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: str,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    """Delete an account together with everything it owns."""
    UserService.delete_user(db, user_id, admin)
    return {"message": "User deleted successfully"}


@admin_router.get("", response_model=UserListResponse)
def list_users(
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    """List all accounts ordered by name."""
    return {"users": UserService.list_users(db)}


@admin_router.get("/{user_id}/metrics", response_model=MetricListResponse)
def list_user_metrics(
    user_id: str,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    """List one member's metrics, newest first."""
    UserService.get_user(db, user_id)
    return {"metrics": MetricService.list_for_user(db, user_id)}


@admin_router.post("/{user_id}/metrics", response_model=MetricEnvelope, status_code=status.HTTP_201_CREATED)
def create_user_metric(
    user_id: str,
    metric_data: MetricCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    """Record a metric on behalf of a member."""
    return {"metric": MetricService.create_metric(db, user_id, metric_data)}

"""Workout (daily plan) endpoints.

``router`` is the caller's own plans at ``/workouts``; every lookup is scoped
to the session user. ``admin_router`` at ``/admin/workouts`` reaches any
user's plans.
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, require_admin
from app.db.session import get_db
from app.models.user import User
from app.schemas.base import MessageResponse
from app.schemas.workout import (
    AdminWorkoutCreate,
    AdminWorkoutResponse,
    WorkoutCreate,
    WorkoutDay,
    WorkoutResponse,
    WorkoutUpdate,
)
from app.services.workout import WorkoutService

router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=List[WorkoutResponse])
def list_my_workouts(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """List the caller's workouts, newest date first."""
    return WorkoutService.list_for_user(db, current_user.id)


@router.get("/by-day", response_model=List[WorkoutDay])
def list_my_workouts_by_day(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """The caller's workouts grouped by calendar day, newest day first."""
    return WorkoutService.group_by_day(WorkoutService.list_for_user(db, current_user.id))


@router.post("", response_model=WorkoutResponse, status_code=status.HTTP_201_CREATED)
def create_my_workout(
    workout_data: WorkoutCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    return WorkoutService.create_plan(db, current_user.id, workout_data)


@router.get("/{workout_id}", response_model=WorkoutResponse)
def get_my_workout(
    workout_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    return WorkoutService.get_plan(db, workout_id, owner_id=current_user.id)


@router.put("/{workout_id}", response_model=WorkoutResponse)
def update_my_workout(
    workout_id: str,
    workout_data: WorkoutUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    return WorkoutService.update_plan(db, workout_id, workout_data, owner_id=current_user.id)


@router.delete("/{workout_id}", response_model=MessageResponse)
def delete_my_workout(
    workout_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    WorkoutService.delete_plan(db, workout_id, owner_id=current_user.id)
    return {"message": "Workout deleted successfully"}


@admin_router.get("", response_model=List[AdminWorkoutResponse])
def list_workouts(
    user_id: Optional[str] = Query(None, alias="userId"),
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    """List every user's workouts, or one user's with ``userId``."""
    return WorkoutService.list_all(db, user_id)


@admin_router.post("", response_model=AdminWorkoutResponse, status_code=status.HTTP_201_CREATED)
def create_workout(
    workout_data: AdminWorkoutCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    plan = WorkoutService.create_plan(db, workout_data.user_id, workout_data)
    return WorkoutService.to_admin_response(plan)


@admin_router.put("/{workout_id}", response_model=AdminWorkoutResponse)
def update_workout(
    workout_id: str,
    workout_data: WorkoutUpdate,
    user_id: Optional[str] = Query(None, alias="userId"),
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    """Update any workout. A supplied ``userId`` must be the plan's owner."""
    plan = WorkoutService.update_plan(db, workout_id, workout_data, owner_id=user_id)
    return WorkoutService.to_admin_response(plan)


@admin_router.delete("/{workout_id}", response_model=MessageResponse)
def delete_workout(
    workout_id: str,
    user_id: Optional[str] = Query(None, alias="userId"),
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    WorkoutService.delete_plan(db, workout_id, owner_id=user_id)
    return {"message": "Workout deleted successfully"}

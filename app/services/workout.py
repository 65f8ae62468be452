"""Workout service.

Daily plans belong to exactly one user. Self-service calls always pass the
caller's id as the owner; administrator calls may act on any plan and only
check ownership when a user id is claimed.
"""

from collections import OrderedDict
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session, joinedload

from app.models.daily_plan import DailyPlan
from app.models.user import User
from app.schemas.workout import (
    AdminWorkoutResponse,
    WorkoutCreate,
    WorkoutDay,
    WorkoutDetails,
    WorkoutResponse,
    WorkoutUpdate,
)
from app.services.error_handler import handle_db_errors, transaction_rollback
from app.utils.logger import workout_logger


class WorkoutService:
    """Service class for daily plan operations."""

    @staticmethod
    def _not_found() -> HTTPException:
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")

    @staticmethod
    def list_for_user(db: Session, user_id: str) -> List[DailyPlan]:
        """Get a user's plans, newest date first."""
        return (
            db.query(DailyPlan)
            .filter(DailyPlan.user_id == user_id)
            .order_by(DailyPlan.date.desc())
            .all()
        )

    @staticmethod
    def list_all(db: Session, user_id: Optional[str] = None) -> List[AdminWorkoutResponse]:
        """Get every plan, optionally for one user, with owner name and email."""
        query = db.query(DailyPlan).options(joinedload(DailyPlan.user))
        if user_id:
            query = query.filter(DailyPlan.user_id == user_id)
        plans = query.order_by(DailyPlan.date.desc()).all()
        return [WorkoutService.to_admin_response(plan) for plan in plans]

    @staticmethod
    def get_plan(db: Session, plan_id: str, owner_id: Optional[str] = None) -> DailyPlan:
        """Get a plan by ID.

        When ``owner_id`` is given the plan must belong to that user; a plan
        owned by someone else is reported as missing. An empty ``owner_id``
        means no owner check, as in ``list_all``.
        """
        query = db.query(DailyPlan).filter(DailyPlan.id == plan_id)
        if owner_id:
            query = query.filter(DailyPlan.user_id == owner_id)
        plan = query.first()
        if not plan:
            raise WorkoutService._not_found()
        return plan

    @staticmethod
    @handle_db_errors("create workout")
    def create_plan(db: Session, user_id: str, workout_data: WorkoutCreate) -> DailyPlan:
        """Create a plan owned by ``user_id``."""
        if not db.query(User.id).filter(User.id == user_id).first():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

        plan = DailyPlan(
            user_id=user_id,
            title=workout_data.title,
            date=workout_data.date,
            details=workout_data.details().to_json(),
        )
        with transaction_rollback(db):
            db.add(plan)
        db.refresh(plan)

        workout_logger.success(
            "Workout created", "CREATE",
            plan_id=plan.id, user_id=user_id, exercises=len(workout_data.exercises),
        )
        return plan

    @staticmethod
    @handle_db_errors("update workout")
    def update_plan(
        db: Session, plan_id: str, workout_data: WorkoutUpdate, owner_id: Optional[str] = None
    ) -> DailyPlan:
        """Update a plan. Detail fields are merged into the stored details."""
        plan = WorkoutService.get_plan(db, plan_id, owner_id)
        update_data = workout_data.model_dump(exclude_unset=True)

        details = WorkoutDetails.model_validate(plan.details or {})
        detail_fields = {"exercises", "notes", "type", "calories_burned"} & update_data.keys()
        if detail_fields:
            details = details.model_copy(
                update={field: getattr(workout_data, field) for field in detail_fields}
            )

        with transaction_rollback(db):
            if update_data.get("title") is not None:
                plan.title = workout_data.title
            if update_data.get("date") is not None:
                plan.date = workout_data.date
            if detail_fields:
                # Assign a new dict so the JSON column is flagged dirty
                plan.details = details.to_json()
        db.refresh(plan)

        workout_logger.info("Workout updated", "UPDATE", plan_id=plan.id)
        return plan

    @staticmethod
    @handle_db_errors("delete workout")
    def delete_plan(db: Session, plan_id: str, owner_id: Optional[str] = None) -> None:
        plan = WorkoutService.get_plan(db, plan_id, owner_id)
        with transaction_rollback(db):
            db.delete(plan)

        workout_logger.info("Workout deleted", "DELETE", plan_id=plan_id)

    @staticmethod
    def to_admin_response(plan: DailyPlan) -> AdminWorkoutResponse:
        return AdminWorkoutResponse(
            **WorkoutResponse.model_validate(plan).model_dump(),
            user_name=plan.user.name,
            user_email=plan.user.email,
        )

    @staticmethod
    def group_by_day(plans: List[DailyPlan]) -> List[WorkoutDay]:
        """Group plans by calendar day, newest day first."""
        ordered = sorted(plans, key=lambda plan: plan.date, reverse=True)
        days: "OrderedDict" = OrderedDict()
        for plan in ordered:
            days.setdefault(plan.date.date(), []).append(WorkoutResponse.model_validate(plan))
        return [WorkoutDay(day=day, workouts=workouts) for day, workouts in days.items()]

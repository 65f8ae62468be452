"""Dashboard statistics.

Read-only aggregates for the administrator overview and the member home page.
"""

from datetime import timedelta
from typing import List

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from app.db.base_class import utcnow
from app.models.daily_plan import DailyPlan
from app.models.metric import UserMetric
from app.models.payment import Payment
from app.models.program import Program
from app.models.user import User
from app.schemas.metric import MetricResponse
from app.schemas.payment import PaymentResponse
from app.schemas.stats import (
    AdminDashboard,
    PaymentTotals,
    ProgramTotals,
    RecentActivity,
    RecentPayment,
    RecentWorkout,
    UserStats,
    UserTotals,
    WorkoutTotals,
)
from app.schemas.workout import WorkoutDetails, WorkoutResponse

RECENT_LIMIT = 5
LATEST_METRICS_LIMIT = 10
STREAK_WINDOW = 5
UPCOMING_LIMIT = 3
RECENT_PAYMENTS_LIMIT = 3


class StatsService:
    """Service class for dashboard statistics."""

    @staticmethod
    def get_admin_dashboard(db: Session) -> AdminDashboard:
        """Totals across the whole gym plus the latest payments and workouts."""
        total_users = db.query(func.count(User.id)).scalar() or 0
        by_role = {
            role.value: count
            for role, count in db.query(User.role, func.count(User.id)).group_by(User.role).all()
        }

        total_workouts = db.query(func.count(DailyPlan.id)).scalar() or 0
        payment_count, payment_sum = db.query(func.count(Payment.id), func.sum(Payment.amount)).one()
        active_programs = db.query(func.count(Program.id)).filter(Program.active.is_(True)).scalar() or 0

        recent_payments = (
            db.query(Payment)
            .options(joinedload(Payment.user), joinedload(Payment.program))
            .order_by(Payment.paid_at.desc())
            .limit(RECENT_LIMIT)
            .all()
        )
        recent_workouts = (
            db.query(DailyPlan)
            .options(joinedload(DailyPlan.user))
            .order_by(DailyPlan.created_at.desc())
            .limit(RECENT_LIMIT)
            .all()
        )

        return AdminDashboard(
            users=UserTotals(total=total_users, by_role=by_role),
            workouts=WorkoutTotals(total=total_workouts),
            payments=PaymentTotals(total=payment_count or 0, total_amount=float(payment_sum or 0)),
            programs=ProgramTotals(active=active_programs),
            recent=RecentActivity(
                payments=[
                    RecentPayment(
                        id=payment.id,
                        amount=float(payment.amount),
                        method=payment.method,
                        date=payment.paid_at,
                        user_name=payment.user.name,
                        user_email=payment.user.email,
                        program_name=payment.program.name if payment.program else None,
                    )
                    for payment in recent_payments
                ],
                workouts=[
                    RecentWorkout(
                        id=plan.id,
                        title=plan.title,
                        date=plan.date,
                        created_at=plan.created_at,
                        user_name=plan.user.name,
                        user_email=plan.user.email,
                    )
                    for plan in recent_workouts
                ],
            ),
        )

    @staticmethod
    def _workout_summary(plans: List[DailyPlan]):
        """Streak and calories over plans typed as WORKOUT."""
        workouts = []
        for plan in plans:
            details = WorkoutDetails.model_validate(plan.details or {})
            if details.type == "WORKOUT":
                workouts.append((plan, details))

        streak = len({plan.date.date() for plan, _ in workouts})
        calories = sum(details.calories_burned or 0 for _, details in workouts)
        return streak, float(calories)

    @staticmethod
    def get_user_stats(db: Session, user: User) -> UserStats:
        """Summary for the member home page."""
        latest_metrics = (
            db.query(UserMetric)
            .filter(UserMetric.user_id == user.id)
            .order_by(UserMetric.recorded_at.desc())
            .limit(LATEST_METRICS_LIMIT)
            .all()
        )

        recent_plans = (
            db.query(DailyPlan)
            .filter(DailyPlan.user_id == user.id)
            .order_by(DailyPlan.date.desc())
            .limit(STREAK_WINDOW)
            .all()
        )
        workout_streak, calories_burned = StatsService._workout_summary(recent_plans)

        today = utcnow().replace(hour=0, minute=0, second=0, microsecond=0)
        tomorrow = today + timedelta(days=1)

        today_plan = (
            db.query(DailyPlan)
            .filter(DailyPlan.user_id == user.id, DailyPlan.date >= today, DailyPlan.date < tomorrow)
            .order_by(DailyPlan.date.asc())
            .first()
        )
        upcoming = (
            db.query(DailyPlan)
            .filter(DailyPlan.user_id == user.id, DailyPlan.date >= tomorrow)
            .order_by(DailyPlan.date.asc())
            .limit(UPCOMING_LIMIT)
            .all()
        )

        payments = (
            db.query(Payment)
            .options(joinedload(Payment.program))
            .filter(Payment.user_id == user.id)
            .order_by(Payment.created_at.desc())
            .limit(RECENT_PAYMENTS_LIMIT)
            .all()
        )

        return UserStats(
            today_plan=WorkoutResponse.model_validate(today_plan) if today_plan else None,
            calories_burned=calories_burned,
            workout_streak=workout_streak,
            latest_metrics=[MetricResponse.model_validate(metric) for metric in latest_metrics],
            upcoming_sessions=[WorkoutResponse.model_validate(plan) for plan in upcoming],
            recent_payments=[PaymentResponse.model_validate(payment) for payment in payments],
        )

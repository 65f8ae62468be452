from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field

from app.models.payment import PaymentMethod
from app.schemas.base import BaseSchema
from app.schemas.metric import MetricResponse
from app.schemas.payment import PaymentResponse
from app.schemas.workout import WorkoutResponse


# Admin dashboard
class UserTotals(BaseSchema):
    total: int
    by_role: Dict[str, int] = Field(..., description="Account count per role")


class WorkoutTotals(BaseSchema):
    total: int


class PaymentTotals(BaseSchema):
    total: int
    total_amount: float


class ProgramTotals(BaseSchema):
    active: int


class RecentPayment(BaseSchema):
    id: str
    amount: float
    method: PaymentMethod
    date: datetime
    user_name: str
    user_email: str
    program_name: Optional[str] = None


class RecentWorkout(BaseSchema):
    id: str
    title: str
    date: datetime
    created_at: datetime
    user_name: str
    user_email: str


class RecentActivity(BaseSchema):
    payments: List[RecentPayment]
    workouts: List[RecentWorkout]


class AdminDashboard(BaseSchema):
    users: UserTotals
    workouts: WorkoutTotals
    payments: PaymentTotals
    programs: ProgramTotals
    recent: RecentActivity


# Member dashboard
class UserStats(BaseSchema):
    today_plan: Optional[WorkoutResponse] = None
    calories_burned: float = Field(..., description="Calories burned across recent workouts")
    workout_streak: int = Field(..., description="Distinct days among recent workouts")
    latest_metrics: List[MetricResponse]
    upcoming_sessions: List[WorkoutResponse]
    recent_payments: List[PaymentResponse]

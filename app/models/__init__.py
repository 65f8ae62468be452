"""Database models."""

# Import all models here to ensure they're recognized by SQLAlchemy
from app.models.activity_log import UserActivityLog
from app.models.daily_plan import DailyPlan
from app.models.metric import MetricKey, UserMetric
from app.models.payment import Payment, PaymentMethod
from app.models.program import Program
from app.models.user import Role, User

__all__ = [
    "User",
    "Role",
    "DailyPlan",
    "Program",
    "Payment",
    "PaymentMethod",
    "UserActivityLog",
    "UserMetric",
    "MetricKey",
]

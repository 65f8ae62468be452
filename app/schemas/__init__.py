"""Pydantic schemas for request and response validation."""

# Shared
from .base import BaseSchema, MessageResponse

# User and auth schemas
from .user import (
    UserSummary,
    UserResponse,
    UserListResponse,
    UserCreate,
    UserUpdate,
    ProfileUpdate,
    PasswordChange,
    PasswordReset,
)
from .auth import UserLogin, LoginResponse, TokenPayload

# Workout schemas
from .workout import (
    Exercise,
    WorkoutDetails,
    WorkoutCreate,
    AdminWorkoutCreate,
    WorkoutUpdate,
    WorkoutResponse,
    AdminWorkoutResponse,
    WorkoutDay,
)

# Program and payment schemas
from .program import ProgramCreate, ProgramUpdate, ProgramResponse, ProgramSummary
from .payment import (
    AdminPaymentCreate,
    MemberPaymentCreate,
    PaymentUpdate,
    PaymentResponse,
    AdminPaymentResponse,
)

# Metric and activity schemas
from .metric import (
    MetricCreate,
    MetricUpdate,
    MetricResponse,
    AdminMetricResponse,
    MetricEnvelope,
    MetricListResponse,
    AdminMetricListResponse,
    MetricPoint,
    MetricSeries,
    MetricSeriesResponse,
)
from .activity_log import ActivityData, ActivityLogCreate, ActivityLogResponse, ActivityLogListResponse

# Dashboard schemas
from .stats import AdminDashboard, UserStats

__all__ = [
    "BaseSchema", "MessageResponse",
    "UserSummary", "UserResponse", "UserListResponse", "UserCreate", "UserUpdate",
    "ProfileUpdate", "PasswordChange", "PasswordReset",
    "UserLogin", "LoginResponse", "TokenPayload",
    "Exercise", "WorkoutDetails", "WorkoutCreate", "AdminWorkoutCreate", "WorkoutUpdate",
    "WorkoutResponse", "AdminWorkoutResponse", "WorkoutDay",
    "ProgramCreate", "ProgramUpdate", "ProgramResponse", "ProgramSummary",
    "AdminPaymentCreate", "MemberPaymentCreate", "PaymentUpdate", "PaymentResponse",
    "AdminPaymentResponse",
    "MetricCreate", "MetricUpdate", "MetricResponse", "AdminMetricResponse", "MetricEnvelope",
    "MetricListResponse", "AdminMetricListResponse", "MetricPoint", "MetricSeries",
    "MetricSeriesResponse",
    "ActivityData", "ActivityLogCreate", "ActivityLogResponse", "ActivityLogListResponse",
    "AdminDashboard", "UserStats",
]

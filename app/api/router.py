"""API router configuration.

This module configures the main API router and includes all endpoint routers
for different features of the application.
"""

from fastapi import APIRouter

from app.api.endpoints import (
    activity_logs,
    auth,
    dashboard,
    health,
    metrics,
    payments,
    programs,
    users,
    workouts,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Self-service; routes under /users/me/... are registered before /users/{id}
api_router.include_router(metrics.router, prefix="/users/me/metrics", tags=["metrics"])
api_router.include_router(payments.router, prefix="/users/me/payments", tags=["payments"])
api_router.include_router(activity_logs.router, prefix="/users/me/activity-logs", tags=["activity-logs"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
api_router.include_router(programs.router, prefix="/programs", tags=["programs"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])

# Administration
api_router.include_router(users.admin_router, prefix="/admin/users", tags=["admin"])
api_router.include_router(workouts.admin_router, prefix="/admin/workouts", tags=["admin"])
api_router.include_router(programs.admin_router, prefix="/admin/programs", tags=["admin"])
api_router.include_router(payments.admin_router, prefix="/admin/payments", tags=["admin"])
api_router.include_router(metrics.admin_router, prefix="/admin/metrics", tags=["admin"])
api_router.include_router(activity_logs.admin_router, prefix="/admin/activity-logs", tags=["admin"])
api_router.include_router(dashboard.admin_router, prefix="/admin/dashboard", tags=["admin"])

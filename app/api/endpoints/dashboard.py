from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, require_admin
from app.db.session import get_db
from app.models.user import User
from app.schemas.stats import AdminDashboard, UserStats
from app.services.stats import StatsService

router = APIRouter()
admin_router = APIRouter()


@router.get("/user-stats", response_model=UserStats)
def get_user_stats(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """Member home page: today's plan, upcoming sessions, streak and latest records."""
    return StatsService.get_user_stats(db, current_user)


@admin_router.get("", response_model=AdminDashboard)
def get_admin_dashboard(
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    """Gym-wide totals and recent activity."""
    return StatsService.get_admin_dashboard(db)

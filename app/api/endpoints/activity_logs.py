from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, require_admin
from app.db.session import get_db
from app.models.user import User
from app.schemas.activity_log import ActivityLogCreate, ActivityLogListResponse, ActivityLogResponse
from app.services.activity_log import ActivityLogService

router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=ActivityLogListResponse)
def list_my_activity_logs(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    return {"logs": ActivityLogService.list_logs(db, current_user.id)}


@router.post("", response_model=ActivityLogResponse, status_code=status.HTTP_201_CREATED)
def create_my_activity_log(
    log_data: ActivityLogCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    return ActivityLogService.create_log(db, current_user.id, log_data)


@admin_router.get("", response_model=ActivityLogListResponse)
def list_activity_logs(
    user_id: Optional[str] = Query(None, alias="userId"),
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    return {"logs": ActivityLogService.list_logs(db, user_id)}

"""Body metric endpoints.

``router`` is mounted at ``/users/me/metrics`` and only ever touches the
caller's records; ``admin_router`` at ``/admin/metrics`` spans all users.
"""

from datetime import datetime
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, require_admin
from app.db.session import get_db
from app.models.metric import MetricKey
from app.models.user import User
from app.schemas.base import MessageResponse
from app.schemas.metric import (
    AdminMetricListResponse,
    MetricCreate,
    MetricEnvelope,
    MetricListResponse,
    MetricSeriesResponse,
    MetricUpdate,
)
from app.services.metric import MetricService

router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=MetricListResponse)
def list_my_metrics(
    key: Optional[MetricKey] = Query(None, description="Only return this metric key"),
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """The caller's metrics, newest first."""
    metrics = MetricService.list_for_user(
        db, current_user.id, key=key, start_date=start_date, end_date=end_date
    )
    return {"metrics": metrics}


@router.get("/series", response_model=MetricSeriesResponse)
def get_my_metric_series(
    key: Optional[MetricKey] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """Chart data: one series per key, oldest point first."""
    return {"series": MetricService.get_series(db, current_user.id, key=key)}


@router.post("", response_model=MetricEnvelope, status_code=status.HTTP_201_CREATED)
def create_my_metric(
    metric_data: MetricCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    return {"metric": MetricService.create_metric(db, current_user.id, metric_data)}


@router.get("/{metric_id}", response_model=MetricEnvelope)
def get_my_metric(
    metric_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    return {"metric": MetricService.get_metric(db, metric_id, owner_id=current_user.id)}


@router.put("/{metric_id}", response_model=MetricEnvelope)
def update_my_metric(
    metric_id: str,
    metric_data: MetricUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    metric = MetricService.update_metric(db, metric_id, metric_data, owner_id=current_user.id)
    return {"metric": metric}


@router.delete("/{metric_id}", response_model=MessageResponse)
def delete_my_metric(
    metric_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    MetricService.delete_metric(db, metric_id, owner_id=current_user.id)
    return {"message": "Metric deleted successfully"}


@admin_router.get("", response_model=AdminMetricListResponse)
def list_metrics(
    user_id: Optional[str] = Query(None, alias="userId"),
    key: Optional[MetricKey] = Query(None),
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    """Metrics across users with owner details."""
    return {"metrics": MetricService.list_all(db, user_id=user_id, key=key)}


@admin_router.delete("/{metric_id}", response_model=MessageResponse)
def delete_metric(
    metric_id: str,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    MetricService.delete_metric(db, metric_id)
    return {"message": "Metric deleted successfully"}

"""Metric service.

Body measurements recorded by members for themselves and by administrators
for any member.
"""

from datetime import datetime
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session, joinedload

from app.db.base_class import utcnow
from app.models.metric import MetricKey, UserMetric
from app.models.user import User
from app.schemas.base import to_utc
from app.schemas.metric import MetricCreate, MetricSeries, MetricUpdate
from app.services.error_handler import handle_db_errors, transaction_rollback
from app.utils.logger import metric_logger
from app.utils.metric_series import build_series


class MetricService:
    """Service class for user metric operations."""

    @staticmethod
    def _not_found() -> HTTPException:
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Metric not found")

    @staticmethod
    def list_for_user(
        db: Session,
        user_id: str,
        key: Optional[MetricKey] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> List[UserMetric]:
        """Get a user's metrics, newest first, optionally filtered by key and date range."""
        query = db.query(UserMetric).filter(UserMetric.user_id == user_id)
        if key is not None:
            query = query.filter(UserMetric.key == key)
        if start_date is not None:
            query = query.filter(UserMetric.recorded_at >= to_utc(start_date))
        if end_date is not None:
            query = query.filter(UserMetric.recorded_at <= to_utc(end_date))
        return query.order_by(UserMetric.recorded_at.desc()).all()

    @staticmethod
    def list_all(db: Session, user_id: Optional[str] = None, key: Optional[MetricKey] = None) -> List[UserMetric]:
        """Get metrics across users with their owner loaded, newest first."""
        query = db.query(UserMetric).options(joinedload(UserMetric.user))
        if user_id:
            query = query.filter(UserMetric.user_id == user_id)
        if key is not None:
            query = query.filter(UserMetric.key == key)
        return query.order_by(UserMetric.recorded_at.desc()).all()

    @staticmethod
    def get_metric(db: Session, metric_id: str, owner_id: Optional[str] = None) -> UserMetric:
        """Get a metric by ID, restricted to ``owner_id`` when given."""
        query = db.query(UserMetric).filter(UserMetric.id == metric_id)
        if owner_id is not None:
            query = query.filter(UserMetric.user_id == owner_id)
        metric = query.first()
        if not metric:
            raise MetricService._not_found()
        return metric

    @staticmethod
    @handle_db_errors("create metric")
    def create_metric(db: Session, user_id: str, metric_data: MetricCreate) -> UserMetric:
        if not db.query(User.id).filter(User.id == user_id).first():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

        metric = UserMetric(
            user_id=user_id,
            key=metric_data.key,
            value=metric_data.value,
            unit=metric_data.unit,
            notes=metric_data.notes,
            recorded_at=metric_data.recorded_at or utcnow(),
        )
        with transaction_rollback(db):
            db.add(metric)
        db.refresh(metric)

        metric_logger.success(
            "Metric recorded", "CREATE",
            metric_id=metric.id, user_id=user_id, key=metric.key.value, value=metric.value,
        )
        return metric

    @staticmethod
    @handle_db_errors("update metric")
    def update_metric(db: Session, metric_id: str, metric_data: MetricUpdate, owner_id: Optional[str] = None) -> UserMetric:
        metric = MetricService.get_metric(db, metric_id, owner_id)
        update_data = metric_data.model_dump(exclude_unset=True)

        with transaction_rollback(db):
            for field, value in update_data.items():
                if value is None and field in ("value", "recorded_at"):
                    continue
                setattr(metric, field, value)
        db.refresh(metric)

        metric_logger.info("Metric updated", "UPDATE", metric_id=metric.id)
        return metric

    @staticmethod
    @handle_db_errors("delete metric")
    def delete_metric(db: Session, metric_id: str, owner_id: Optional[str] = None) -> None:
        """Delete a metric. A second delete of the same id is a 404."""
        metric = MetricService.get_metric(db, metric_id, owner_id)
        with transaction_rollback(db):
            db.delete(metric)

        metric_logger.info("Metric deleted", "DELETE", metric_id=metric_id)

    @staticmethod
    def get_series(db: Session, user_id: str, key: Optional[MetricKey] = None) -> List[MetricSeries]:
        """Chart series for a user, one per key, oldest point first."""
        return build_series(MetricService.list_for_user(db, user_id, key=key))

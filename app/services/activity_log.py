from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.activity_log import UserActivityLog
from app.schemas.activity_log import ActivityLogCreate
from app.services.error_handler import handle_db_errors, transaction_rollback
from app.utils.logger import activity_logger


class ActivityLogService:
    """Append-only activity trail. Entries are never updated or deleted."""

    @staticmethod
    def list_logs(db: Session, user_id: Optional[str] = None) -> List[UserActivityLog]:
        query = db.query(UserActivityLog)
        if user_id:
            query = query.filter(UserActivityLog.user_id == user_id)
        return query.order_by(UserActivityLog.created_at.desc()).all()

    @staticmethod
    @handle_db_errors("create activity log")
    def create_log(db: Session, user_id: str, log_data: ActivityLogCreate) -> UserActivityLog:
        log = UserActivityLog(
            user_id=user_id,
            data=log_data.data.model_dump(by_alias=True, exclude_none=True),
        )
        with transaction_rollback(db):
            db.add(log)
        db.refresh(log)

        activity_logger.info("Activity logged", "CREATE", log_id=log.id, user_id=user_id)
        return log

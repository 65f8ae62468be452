from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field

from app.schemas.base import BaseSchema


class ActivityData(BaseSchema):
    """Payload of an activity log entry.

    The well-known readings are typed; any additional keys are kept as sent.
    """
    model_config = ConfigDict(extra="allow")

    weight: Optional[float] = Field(default=None, ge=0)
    calories: Optional[float] = Field(default=None, ge=0)
    heart_rate: Optional[int] = Field(default=None, ge=0)


class ActivityLogCreate(BaseSchema):
    data: ActivityData


class ActivityLogResponse(BaseSchema):
    id: str
    user_id: str
    data: Dict[str, Any]
    created_at: datetime


class ActivityLogListResponse(BaseSchema):
    logs: List[ActivityLogResponse]

"""Body metric schemas.

Metrics are single measurements (weight, waist, body fat...) recorded by a
member or by an administrator on their behalf. Series schemas feed the
progress charts: points are ordered oldest first per key.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from app.models.metric import MetricKey
from app.schemas.base import BaseSchema, to_utc
from app.schemas.user import UserSummary


class MetricCreate(BaseSchema):
    key: MetricKey
    value: float = Field(..., description="Measured value")
    unit: Optional[str] = Field(default=None, max_length=20, description="Unit label, e.g. kg or cm")
    notes: Optional[str] = None
    recorded_at: Optional[datetime] = Field(default=None, description="Defaults to the current time")

    @field_validator("recorded_at")
    @classmethod
    def recorded_at_in_utc(cls, value):
        return to_utc(value)


class MetricUpdate(BaseSchema):
    value: Optional[float] = None
    unit: Optional[str] = Field(default=None, max_length=20)
    notes: Optional[str] = None
    recorded_at: Optional[datetime] = None

    @field_validator("recorded_at")
    @classmethod
    def recorded_at_in_utc(cls, value):
        return to_utc(value)


class MetricResponse(BaseSchema):
    id: str
    user_id: str
    key: MetricKey
    value: float
    unit: Optional[str] = None
    notes: Optional[str] = None
    recorded_at: datetime
    created_at: datetime
    updated_at: Optional[datetime] = None


class AdminMetricResponse(MetricResponse):
    user: UserSummary


class MetricEnvelope(BaseSchema):
    metric: MetricResponse


class MetricListResponse(BaseSchema):
    metrics: List[MetricResponse]


class AdminMetricListResponse(BaseSchema):
    metrics: List[AdminMetricResponse]


class MetricPoint(BaseSchema):
    recorded_at: datetime
    value: float
    unit: Optional[str] = None


class MetricSeries(BaseSchema):
    key: MetricKey
    points: List[MetricPoint]
    latest: Optional[MetricPoint] = None
    change: Optional[float] = Field(default=None, description="Latest value minus the first value")


class MetricSeriesResponse(BaseSchema):
    series: List[MetricSeries]

import enum

from sqlalchemy import Column, DateTime, Enum, Float, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from app.db.base_class import Base, generate_uuid, utcnow


class MetricKey(str, enum.Enum):
    WEIGHT = "WEIGHT"
    HEIGHT = "HEIGHT"
    BODY_FAT = "BODY_FAT"
    CHEST = "CHEST"
    WAIST = "WAIST"
    HIPS = "HIPS"
    BICEPS = "BICEPS"
    THIGHS = "THIGHS"
    CUSTOM = "CUSTOM"


class UserMetric(Base):
    __tablename__ = "user_metrics"

    id = Column(String(36), primary_key=True, index=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    key = Column(Enum(MetricKey, name="metric_key_type"), nullable=False, index=True)
    value = Column(Float, nullable=False)
    unit = Column(String(20), nullable=True)
    notes = Column(Text, nullable=True)
    recorded_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="metrics")

import enum

from sqlalchemy import Column, DateTime, Enum, String
from sqlalchemy.orm import relationship

from app.db.base_class import Base, generate_uuid, utcnow


class Role(str, enum.Enum):
    ADMIN = "ADMIN"
    MEMBER = "MEMBER"


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, index=True, default=generate_uuid)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    address = Column(String(255), nullable=True)
    image_url = Column(String(500), nullable=True)
    phone = Column(String(50), nullable=True)
    role = Column(Enum(Role, name="role_type"), nullable=False, default=Role.MEMBER)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    # Dependents are removed together with the user
    plans = relationship("DailyPlan", back_populates="user", cascade="all, delete-orphan")
    payments = relationship("Payment", back_populates="user", cascade="all, delete-orphan")
    activity_logs = relationship("UserActivityLog", back_populates="user", cascade="all, delete-orphan")
    metrics = relationship("UserMetric", back_populates="user", cascade="all, delete-orphan")

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

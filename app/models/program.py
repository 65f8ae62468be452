from sqlalchemy import DECIMAL, Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from app.db.base_class import Base, generate_uuid, utcnow


class Program(Base):
    __tablename__ = "programs"

    id = Column(String(36), primary_key=True, index=True, default=generate_uuid)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    duration = Column(Integer, nullable=False)  # days
    price = Column(DECIMAL(10, 2), nullable=False)
    image_url = Column(String(500), nullable=True)
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    # Payments keep their program; deleting a paid-for program is refused
    payments = relationship("Payment", back_populates="program", passive_deletes="all")

import enum

from sqlalchemy import DECIMAL, Column, DateTime, Enum, ForeignKey, String
from sqlalchemy.orm import relationship

from app.db.base_class import Base, generate_uuid, utcnow


class PaymentMethod(str, enum.Enum):
    CASH = "CASH"
    CARD = "CARD"
    PAYPAL = "PAYPAL"


class Payment(Base):
    __tablename__ = "payments"

    id = Column(String(36), primary_key=True, index=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    program_id = Column(String(36), ForeignKey("programs.id", ondelete="RESTRICT"), nullable=True, index=True)
    amount = Column(DECIMAL(10, 2), nullable=False)
    method = Column(Enum(PaymentMethod, name="payment_method_type"), nullable=False)
    transaction_ref = Column(String(100), unique=True, index=True, nullable=False)
    paid_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)

    user = relationship("User", back_populates="payments")
    program = relationship("Program", back_populates="payments")

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator, model_validator

from app.models.payment import PaymentMethod
from app.schemas.base import BaseSchema, to_utc
from app.schemas.program import ProgramResponse, ProgramSummary


class AdminPaymentCreate(BaseSchema):
    """Schema for an administrator recording a payment for any user."""
    user_id: str = Field(..., min_length=1)
    program_id: Optional[str] = None
    amount: Optional[float] = Field(default=None, ge=0, description="Defaults to the program price")
    method: PaymentMethod
    transaction_ref: str = Field(..., min_length=1, max_length=100)
    paid_at: Optional[datetime] = None

    @field_validator("program_id", mode="before")
    @classmethod
    def blank_program(cls, value):
        # Admin forms send "none" when no program is selected
        if value in ("", "none"):
            return None
        return value

    @field_validator("paid_at")
    @classmethod
    def paid_at_in_utc(cls, value):
        return to_utc(value)

    @model_validator(mode="after")
    def amount_or_program(self):
        if self.amount is None and self.program_id is None:
            raise ValueError("amount is required when no program is given")
        return self


class MemberPaymentCreate(BaseSchema):
    """Schema for a member paying for a program.

    The charged amount is always the program price; a client supplied
    amount is ignored.
    """
    program_id: str = Field(..., min_length=1)
    method: PaymentMethod
    transaction_ref: str = Field(..., min_length=1, max_length=100)
    amount: Optional[float] = None


class PaymentUpdate(BaseSchema):
    """Schema for updating a payment."""
    program_id: Optional[str] = None
    amount: Optional[float] = Field(default=None, ge=0)
    method: Optional[PaymentMethod] = None
    transaction_ref: Optional[str] = Field(default=None, min_length=1, max_length=100)
    paid_at: Optional[datetime] = None

    @field_validator("paid_at")
    @classmethod
    def paid_at_in_utc(cls, value):
        return to_utc(value)


class PaymentResponse(BaseSchema):
    id: str
    user_id: str
    program_id: Optional[str] = None
    amount: float
    method: PaymentMethod
    transaction_ref: str
    paid_at: datetime
    created_at: datetime
    program: Optional[ProgramResponse] = None


class AdminPaymentResponse(BaseSchema):
    id: str
    user_id: str
    user_name: str
    user_email: str
    program_id: Optional[str] = None
    program: Optional[ProgramSummary] = None
    amount: float
    method: PaymentMethod
    transaction_ref: str
    paid_at: datetime
    created_at: datetime

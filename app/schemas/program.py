from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.base import BaseSchema


class ProgramBase(BaseSchema):
    """Base schema for program operations."""
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)
    duration: int = Field(..., gt=0, description="Length of the program in days")
    price: float = Field(..., ge=0, description="Price of the program")
    image_url: Optional[str] = None


class ProgramCreate(ProgramBase):
    """Schema for creating a program. Numeric strings are accepted for duration and price."""
    active: bool = True


class ProgramUpdate(BaseSchema):
    """Schema for updating a program."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, min_length=1)
    duration: Optional[int] = Field(default=None, gt=0)
    price: Optional[float] = Field(default=None, ge=0)
    image_url: Optional[str] = None
    active: Optional[bool] = None


class ProgramResponse(ProgramBase):
    id: str
    active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None


class ProgramSummary(BaseSchema):
    """Program details embedded in payment listings."""
    id: str
    name: str
    price: float

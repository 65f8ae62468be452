from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema for all models.

    Attributes are snake_case in Python and camelCase on the wire; either
    spelling is accepted on input. ``Infinity`` and ``NaN`` are rejected for
    float fields.
    """
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )


class MessageResponse(BaseSchema):
    message: str


def to_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Shift an offset-aware datetime to UTC. Naive values are taken as UTC already."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc)

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from app.schemas.base import BaseSchema, to_utc


class Exercise(BaseSchema):
    """Single exercise inside a workout plan."""
    id: Optional[str] = Field(default=None, description="Client-side identifier of the exercise")
    name: str = Field(..., min_length=1, description="Exercise name")
    sets: int = Field(..., ge=0, description="Number of sets")
    reps: int = Field(..., ge=0, description="Repetitions per set")
    weight: Optional[float] = Field(default=None, ge=0, description="Weight used, in kg")
    duration: Optional[float] = Field(default=None, ge=0, description="Duration in minutes")
    notes: Optional[str] = None


class WorkoutDetails(BaseSchema):
    """Structured content of a workout plan."""
    exercises: List[Exercise] = Field(default_factory=list)
    notes: Optional[str] = None
    type: Optional[str] = Field(default=None, description="Plan type, e.g. WORKOUT")
    calories_burned: Optional[float] = Field(default=None, ge=0)

    def to_json(self) -> Dict[str, Any]:
        """Shape stored in the database, with camelCase keys and no empty fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class WorkoutCreate(BaseSchema):
    """Schema for creating a workout for the current user."""
    title: str = Field(..., min_length=1, max_length=200)
    date: datetime = Field(..., description="Day the workout is scheduled for")
    exercises: List[Exercise] = Field(..., description="Exercises in the plan, may be empty")
    notes: Optional[str] = None
    type: Optional[str] = None
    calories_burned: Optional[float] = Field(default=None, ge=0)

    @field_validator("date")
    @classmethod
    def date_in_utc(cls, value):
        return to_utc(value)

    def details(self) -> WorkoutDetails:
        return WorkoutDetails(
            exercises=self.exercises,
            notes=self.notes,
            type=self.type,
            calories_burned=self.calories_burned,
        )


class AdminWorkoutCreate(WorkoutCreate):
    """Schema for an administrator creating a workout for any user."""
    user_id: str = Field(..., min_length=1)


class WorkoutUpdate(BaseSchema):
    """Schema for updating a workout. Omitted fields keep their value."""
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    date: Optional[datetime] = None
    exercises: Optional[List[Exercise]] = None
    notes: Optional[str] = None
    type: Optional[str] = None
    calories_burned: Optional[float] = Field(default=None, ge=0)

    @field_validator("date")
    @classmethod
    def date_in_utc(cls, value):
        return to_utc(value)

    @field_validator("exercises")
    @classmethod
    def exercises_not_null(cls, value):
        # Leave the field out to keep the stored list; send [] to clear it
        if value is None:
            raise ValueError("exercises must be a list")
        return value


class WorkoutResponse(BaseSchema):
    id: str
    user_id: str
    title: str
    details: Dict[str, Any]
    date: datetime
    created_at: datetime


class AdminWorkoutResponse(WorkoutResponse):
    user_name: str
    user_email: str


class WorkoutDay(BaseSchema):
    """Workouts falling on the same calendar day."""
    day: date
    workouts: List[WorkoutResponse]

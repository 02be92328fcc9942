from typing import Optional

from pydantic import BaseModel, Field

from fitpulse.schemas.base import PatchModel


class WorkoutFields(BaseModel):
    name: str = Field(min_length=1)
    type: str = Field(min_length=1, description="strength, cardio, flexibility")
    duration: int = Field(ge=0, description="Длительность в минутах")
    calories: int = Field(ge=0)
    completed: bool = False
    progress: int = Field(default=0, ge=0, le=100)


class WorkoutCreate(WorkoutFields):
    user_id: int


class WorkoutUpdate(PatchModel):
    name: Optional[str] = Field(default=None, min_length=1)
    type: Optional[str] = Field(default=None, min_length=1)
    duration: Optional[int] = Field(default=None, ge=0)
    calories: Optional[int] = Field(default=None, ge=0)
    completed: Optional[bool] = None
    progress: Optional[int] = Field(default=None, ge=0, le=100)

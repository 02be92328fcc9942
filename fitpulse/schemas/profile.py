from typing import Optional

from pydantic import BaseModel, Field

from fitpulse.models.user import FitnessLevelEnum, GoalEnum
from fitpulse.schemas.base import PatchModel


class ProfileFields(BaseModel):
    age: int = Field(gt=0, lt=150)
    height: int = Field(gt=0, description="Рост в см")
    weight: float = Field(gt=0, lt=500, description="Вес в кг")
    fitness_level: FitnessLevelEnum
    goal: GoalEnum
    onboarding_complete: bool = False


class ProfileCreate(ProfileFields):
    user_id: int


class ProfileUpdate(PatchModel):
    age: Optional[int] = Field(default=None, gt=0, lt=150)
    height: Optional[int] = Field(default=None, gt=0)
    weight: Optional[float] = Field(default=None, gt=0, lt=500)
    fitness_level: Optional[FitnessLevelEnum] = None
    goal: Optional[GoalEnum] = None
    onboarding_complete: Optional[bool] = None

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from fitpulse.models.workout import Workout


class NutritionStats(BaseModel):
    carbs_percent: int = 0
    protein_percent: int = 0
    fats_percent: int = 0
    total_calories: int = 0


class BMIStatusEnum(str, Enum):
    underweight = "underweight"
    normal = "normal"
    overweight = "overweight"
    obese = "obese"


class WeightStats(BaseModel):
    current_weight: Optional[float] = None
    weight_change: float = 0.0
    goal_weight: Optional[float] = None
    bmi: Optional[float] = None
    bmi_status: Optional[BMIStatusEnum] = None


class DashboardResponse(BaseModel):
    user_id: int
    onboarding_complete: bool
    todays_workout: Optional[Workout] = None
    nutrition: NutritionStats
    weight: WeightStats

from fitpulse.models.base import Record, OwnedRecord
from fitpulse.models.user import User, UserProfile, FitnessLevelEnum, GoalEnum
from fitpulse.models.workout import Workout
from fitpulse.models.weight import WeightEntry
from fitpulse.models.nutrition import NutritionEntry

__all__ = [
    "Record", "OwnedRecord",
    "User", "UserProfile", "FitnessLevelEnum", "GoalEnum",
    "Workout",
    "WeightEntry",
    "NutritionEntry",
]

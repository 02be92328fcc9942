import enum

from fitpulse.models.base import Record, OwnedRecord


class FitnessLevelEnum(str, enum.Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"


class GoalEnum(str, enum.Enum):
    lose_weight = "lose-weight"
    gain_muscle = "gain-muscle"
    stay_fit = "stay-fit"


class User(Record):
    username: str
    email: str
    password: str  # хранится как есть, аутентификации нет


class UserProfile(OwnedRecord):
    age: int
    height: int  # см
    weight: float  # кг
    fitness_level: FitnessLevelEnum
    goal: GoalEnum
    onboarding_complete: bool = False

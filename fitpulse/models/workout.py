from fitpulse.models.base import OwnedRecord


class Workout(OwnedRecord):
    name: str
    type: str  # strength, cardio, flexibility
    duration: int  # минуты
    calories: int
    completed: bool = False
    progress: int = 0  # 0-100

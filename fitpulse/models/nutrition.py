from fitpulse.models.base import OwnedRecord


class NutritionEntry(OwnedRecord):
    calories: int
    protein: int  # граммы
    carbs: int
    fats: int

import math
from typing import Optional

from fitpulse.models.nutrition import NutritionEntry
from fitpulse.schemas.dashboard import NutritionStats


class NutritionCalculator:
    # ккал на грамм
    CALORIES_PER_GRAM = {
        "protein": 4,
        "carbs": 4,
        "fats": 9
    }

    @classmethod
    def macro_percent(cls, grams: int, macro: str, total_calories: int) -> int:
        if total_calories <= 0:
            return 0
        # .5 округляется вверх
        return math.floor(grams * cls.CALORIES_PER_GRAM[macro] / total_calories * 100 + 0.5)

    @classmethod
    def calculate_stats(cls, entry: Optional[NutritionEntry]) -> NutritionStats:
        if entry is None:
            return NutritionStats()

        return NutritionStats(
            carbs_percent=cls.macro_percent(entry.carbs, "carbs", entry.calories),
            protein_percent=cls.macro_percent(entry.protein, "protein", entry.calories),
            fats_percent=cls.macro_percent(entry.fats, "fats", entry.calories),
            total_calories=entry.calories
        )

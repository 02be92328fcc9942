import logging
from typing import List, Optional

from fitpulse.models.user import GoalEnum, UserProfile
from fitpulse.models.weight import WeightEntry
from fitpulse.repositories.record_store import RecordStore
from fitpulse.schemas.dashboard import BMIStatusEnum, DashboardResponse, WeightStats
from fitpulse.services.nutrition_calculator import NutritionCalculator

logger = logging.getLogger(__name__)

# Смещение целевого веса относительно текущего, кг
GOAL_WEIGHT_OFFSETS = {
    GoalEnum.lose_weight: -10.0,
    GoalEnum.gain_muscle: 5.0,
    GoalEnum.stay_fit: 0.0,
}


def calculate_bmi(weight: float, height_cm: int) -> float:
    height_m = height_cm / 100
    return round(weight / (height_m ** 2), 1)


# Верхние границы категорий ИМТ (не включительно)
BMI_THRESHOLDS = [
    (18.5, BMIStatusEnum.underweight),
    (25.0, BMIStatusEnum.normal),
    (30.0, BMIStatusEnum.overweight),
]


def bmi_status(bmi: Optional[float]) -> Optional[BMIStatusEnum]:
    if bmi is None:
        return None
    for upper, status in BMI_THRESHOLDS:
        if bmi < upper:
            return status
    return BMIStatusEnum.obese


def calculate_weight_stats(
    profile: Optional[UserProfile],
    entries: List[WeightEntry],
) -> WeightStats:
    """Статистика веса; entries отсортированы от новых к старым."""
    current_weight = entries[0].weight if entries else (profile.weight if profile else None)
    if current_weight is None:
        return WeightStats()

    weight_change = 0.0
    if len(entries) > 1:
        weight_change = round(entries[0].weight - entries[1].weight, 1)

    goal_weight = None
    bmi = None
    if profile is not None:
        goal_weight = round(current_weight + GOAL_WEIGHT_OFFSETS[profile.goal], 1)
        if profile.height > 0:
            bmi = calculate_bmi(current_weight, profile.height)

    return WeightStats(
        current_weight=current_weight,
        weight_change=weight_change,
        goal_weight=goal_weight,
        bmi=bmi,
        bmi_status=bmi_status(bmi),
    )


def build_dashboard(store: RecordStore, user_id: int) -> DashboardResponse:
    """Собрать данные дашборда за сегодня"""
    profile = store.get_profile_by_user(user_id)
    if profile is None:
        logger.info(f"Дашборд: у пользователя {user_id} нет профиля")

    return DashboardResponse(
        user_id=user_id,
        onboarding_complete=profile.onboarding_complete if profile else False,
        todays_workout=store.get_todays_workout(user_id),
        nutrition=NutritionCalculator.calculate_stats(store.get_todays_nutrition(user_id)),
        weight=calculate_weight_stats(profile, store.get_user_weight_entries(user_id)),
    )

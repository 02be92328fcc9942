"""
Интеграционные тесты эндпоинта /api/v1/dashboard/{user_id}.
"""

import pytest

from fitpulse.schemas.nutrition import NutritionEntryCreate
from fitpulse.schemas.weight import WeightEntryCreate

pytestmark = pytest.mark.integration


@pytest.mark.asyncio
async def test_dashboard_empty_user(client, user):
    response = await client.get(f"/api/v1/dashboard/{user.id}")

    assert response.status_code == 200
    data = response.json()
    assert data["onboarding_complete"] is False
    assert data["todays_workout"] is None
    assert data["nutrition"] == {
        "carbs_percent": 0,
        "protein_percent": 0,
        "fats_percent": 0,
        "total_calories": 0,
    }
    assert data["weight"]["current_weight"] is None


@pytest.mark.asyncio
async def test_dashboard_with_data(client, store, clock, user, profile_data, workout_data):
    store.create_profile(profile_data(user.id, goal="gain-muscle", onboarding_complete=True))
    store.create_workout(workout_data(user.id, progress=30))
    store.create_nutrition_entry(NutritionEntryCreate(user_id=user.id, calories=350, protein=25, carbs=40, fats=15))
    store.create_weight_entry(WeightEntryCreate(user_id=user.id, weight=70))
    clock.advance(minutes=5)
    store.create_weight_entry(WeightEntryCreate(user_id=user.id, weight=71))

    response = await client.get(f"/api/v1/dashboard/{user.id}")

    data = response.json()
    assert data["onboarding_complete"] is True
    assert data["todays_workout"]["progress"] == 30
    assert data["nutrition"]["carbs_percent"] == 46
    assert data["weight"]["current_weight"] == 71
    assert data["weight"]["weight_change"] == pytest.approx(1.0)
    assert data["weight"]["goal_weight"] == 76

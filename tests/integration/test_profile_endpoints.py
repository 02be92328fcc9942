"""
Интеграционные тесты эндпоинтов /api/v1/profile/*.

Покрываемые сценарии:
- POST /profile: создание профиля по итогам онбординга
- GET /profile/{user_id}: 200 / 404
- PATCH /profile/{user_id}: частичное обновление, 404 без профиля, 422 на явный null
"""

import pytest

pytestmark = pytest.mark.integration


def profile_payload(user_id: int, **overrides) -> dict:
    payload = {
        "user_id": user_id,
        "age": 25,
        "height": 175,
        "weight": 70,
        "fitness_level": "beginner",
        "goal": "lose-weight",
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_create_profile_returns_201(client, user):
    response = await client.post("/api/v1/profile", json=profile_payload(user.id))

    assert response.status_code == 201
    data = response.json()
    assert data["user_id"] == user.id
    assert data["goal"] == "lose-weight"
    assert data["fitness_level"] == "beginner"
    assert data["onboarding_complete"] is False


@pytest.mark.asyncio
async def test_create_profile_invalid_goal_returns_422(client, user):
    response = await client.post("/api/v1/profile", json=profile_payload(user.id, goal="get-rich"))
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_profile(client, store, user, profile_data):
    profile = store.create_profile(profile_data(user.id))

    response = await client.get(f"/api/v1/profile/{user.id}")

    assert response.status_code == 200
    assert response.json()["id"] == profile.id


@pytest.mark.asyncio
async def test_get_missing_profile_returns_404(client, user):
    response = await client.get(f"/api/v1/profile/{user.id}")

    assert response.status_code == 404
    assert response.json()["detail"] == "Профиль не найден"


@pytest.mark.asyncio
async def test_patch_profile_updates_only_given_fields(client, store, user, profile_data):
    store.create_profile(profile_data(user.id))

    response = await client.patch(f"/api/v1/profile/{user.id}", json={"weight": 68})

    assert response.status_code == 200
    data = response.json()
    assert data["weight"] == 68
    assert data["age"] == 25
    assert data["goal"] == "lose-weight"


@pytest.mark.asyncio
async def test_patch_profile_explicit_null_returns_422(client, store, user, profile_data):
    store.create_profile(profile_data(user.id))

    response = await client.patch(f"/api/v1/profile/{user.id}", json={"age": None})

    assert response.status_code == 422
    assert store.get_profile_by_user(user.id).age == 25


@pytest.mark.asyncio
async def test_patch_missing_profile_returns_404(client, user):
    response = await client.patch(f"/api/v1/profile/{user.id}", json={"weight": 68})
    assert response.status_code == 404

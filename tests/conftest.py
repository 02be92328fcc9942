"""
Общие фикстуры для всех тестов FitPulse backend.

Стратегия:
- Каждый тест получает свой RecordStore: состояние между тестами не разделяется.
- Часы хранилища подменяются на FakeClock, чтобы управлять created_at
  и окном "сегодня".
- Тестовое FastAPI-приложение создаётся через create_app(store), а
  зависимость get_store дополнительно переопределяется на тот же store.
"""

import pytest
from datetime import datetime, timedelta
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI

from fitpulse.main import create_app
from fitpulse.core.dependencies import get_store
from fitpulse.models.user import FitnessLevelEnum, GoalEnum
from fitpulse.repositories.record_store import RecordStore
from fitpulse.schemas.user import UserCreate
from fitpulse.schemas.profile import ProfileCreate
from fitpulse.schemas.workout import WorkoutCreate


NOW = datetime(2026, 10, 19, 12, 0, 0)


# ---------------------------------------------------------------------------
# Вспомогательные классы и функции
# ---------------------------------------------------------------------------

class FakeClock:
    """Управляемые часы: возвращают выставленное время."""

    def __init__(self, now: datetime = NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def set(self, moment: datetime) -> None:
        self.now = moment

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


def create_test_app(store: RecordStore) -> FastAPI:
    """Тестовое FastAPI-приложение с переданным хранилищем."""
    test_app = create_app(store)
    test_app.dependency_overrides[get_store] = lambda: store
    return test_app


def make_profile_data(user_id: int, **overrides) -> ProfileCreate:
    data = dict(
        user_id=user_id,
        age=25,
        height=175,
        weight=70,
        fitness_level=FitnessLevelEnum.beginner,
        goal=GoalEnum.lose_weight,
    )
    data.update(overrides)
    return ProfileCreate(**data)


def make_workout_data(user_id: int, **overrides) -> WorkoutCreate:
    data = dict(
        user_id=user_id,
        name="Upper Body Strength",
        type="strength",
        duration=45,
        calories=300,
        progress=0,
        completed=False,
    )
    data.update(overrides)
    return WorkoutCreate(**data)


# ---------------------------------------------------------------------------
# Фикстуры хранилища
# ---------------------------------------------------------------------------

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock) -> RecordStore:
    """Пустое хранилище с управляемыми часами."""
    return RecordStore(clock=clock)


@pytest.fixture
def user(store):
    """Пользователь, созданный в store."""
    return store.create_user(UserCreate(
        username="tester",
        email="test@example.com",
        password="password123",
    ))


# ---------------------------------------------------------------------------
# HTTP-клиенты
# ---------------------------------------------------------------------------

@pytest.fixture
async def client(store) -> AsyncGenerator[AsyncClient, None]:
    """Клиент тестового приложения поверх store."""
    app = create_test_app(store)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# ---------------------------------------------------------------------------
# Фабрики данных
# ---------------------------------------------------------------------------

@pytest.fixture
def profile_data():
    """Фабрика ProfileCreate с данными онбординга по умолчанию."""
    return make_profile_data


@pytest.fixture
def workout_data():
    """Фабрика WorkoutCreate с тренировкой по умолчанию."""
    return make_workout_data

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from fitpulse.core.dependencies import get_store
from fitpulse.models.workout import Workout
from fitpulse.repositories.record_store import RecordStore
from fitpulse.schemas.workout import WorkoutCreate, WorkoutUpdate

router = APIRouter(tags=["workouts"])


@router.get("/{user_id}", response_model=List[Workout])
async def get_user_workouts(user_id: int, store: RecordStore = Depends(get_store)):
    return store.get_user_workouts(user_id)


@router.get("/{user_id}/today", response_model=Optional[Workout])
async def get_todays_workout(user_id: int, store: RecordStore = Depends(get_store)):
    """Тренировка на сегодня или null"""
    return store.get_todays_workout(user_id)


@router.post("", response_model=Workout, status_code=status.HTTP_201_CREATED)
async def create_workout(data: WorkoutCreate, store: RecordStore = Depends(get_store)):
    return store.create_workout(data)


@router.patch("/{workout_id}", response_model=Workout)
async def update_workout(
    workout_id: int,
    patch: WorkoutUpdate,
    store: RecordStore = Depends(get_store)
):
    """Обновить прогресс/статус тренировки"""
    workout = store.update_workout(workout_id, patch)
    if not workout:
        raise HTTPException(status_code=404, detail="Тренировка не найдена")
    return workout

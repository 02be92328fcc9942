from typing import List, Optional

from fastapi import APIRouter, Depends, status

from fitpulse.core.dependencies import get_store
from fitpulse.models.nutrition import NutritionEntry
from fitpulse.repositories.record_store import RecordStore
from fitpulse.schemas.nutrition import NutritionEntryCreate

router = APIRouter(tags=["nutrition"])


@router.get("/{user_id}", response_model=List[NutritionEntry])
async def get_nutrition_entries(user_id: int, store: RecordStore = Depends(get_store)):
    return store.get_user_nutrition_entries(user_id)


@router.get("/{user_id}/today", response_model=Optional[NutritionEntry])
async def get_todays_nutrition(user_id: int, store: RecordStore = Depends(get_store)):
    """Питание за сегодня или null"""
    return store.get_todays_nutrition(user_id)


@router.post("", response_model=NutritionEntry, status_code=status.HTTP_201_CREATED)
async def create_nutrition_entry(data: NutritionEntryCreate, store: RecordStore = Depends(get_store)):
    return store.create_nutrition_entry(data)

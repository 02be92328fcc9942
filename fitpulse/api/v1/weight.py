from typing import List, Optional

from fastapi import APIRouter, Depends, status

from fitpulse.core.dependencies import get_store
from fitpulse.models.weight import WeightEntry
from fitpulse.repositories.record_store import RecordStore
from fitpulse.schemas.weight import WeightEntryCreate

router = APIRouter(tags=["weight"])


@router.get("/{user_id}", response_model=List[WeightEntry])
async def get_weight_entries(user_id: int, store: RecordStore = Depends(get_store)):
    """История веса, новые записи первыми"""
    return store.get_user_weight_entries(user_id)


@router.get("/{user_id}/latest", response_model=Optional[WeightEntry])
async def get_latest_weight(user_id: int, store: RecordStore = Depends(get_store)):
    return store.get_latest_weight(user_id)


@router.post("", response_model=WeightEntry, status_code=status.HTTP_201_CREATED)
async def create_weight_entry(data: WeightEntryCreate, store: RecordStore = Depends(get_store)):
    return store.create_weight_entry(data)

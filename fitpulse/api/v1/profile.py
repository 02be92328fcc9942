from fastapi import APIRouter, Depends, HTTPException, status

from fitpulse.core.dependencies import get_store
from fitpulse.models.user import UserProfile
from fitpulse.repositories.record_store import RecordStore
from fitpulse.schemas.profile import ProfileCreate, ProfileUpdate

router = APIRouter(tags=["profile"])


@router.get("/{user_id}", response_model=UserProfile)
async def get_profile(user_id: int, store: RecordStore = Depends(get_store)):
    """Получить профиль пользователя"""
    profile = store.get_profile_by_user(user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Профиль не найден")
    return profile


@router.post("", response_model=UserProfile, status_code=status.HTTP_201_CREATED)
async def create_profile(data: ProfileCreate, store: RecordStore = Depends(get_store)):
    """Создать профиль по итогам онбординга"""
    return store.create_profile(data)


@router.patch("/{user_id}", response_model=UserProfile)
async def update_profile(
    user_id: int,
    patch: ProfileUpdate,
    store: RecordStore = Depends(get_store)
):
    """Обновить только переданные поля профиля"""
    profile = store.update_profile_by_user(user_id, patch)
    if not profile:
        raise HTTPException(status_code=404, detail="Профиль не найден")
    return profile

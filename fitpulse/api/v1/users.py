from fastapi import APIRouter, Depends, HTTPException, status

from fitpulse.core.dependencies import get_store
from fitpulse.repositories.record_store import RecordStore
from fitpulse.schemas.user import UserCreate, UserRead

router = APIRouter(tags=["users"])


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(data: UserCreate, store: RecordStore = Depends(get_store)):
    """Регистрация пользователя (пароль хранится как есть)"""
    if store.get_user_by_username(data.username):
        raise HTTPException(status_code=400, detail="Пользователь с таким username уже существует")
    if store.get_user_by_email(data.email):
        raise HTTPException(status_code=400, detail="Пользователь с таким email уже существует")

    return store.create_user(data)


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: int, store: RecordStore = Depends(get_store)):
    user = store.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="Пользователь не найден")
    return user

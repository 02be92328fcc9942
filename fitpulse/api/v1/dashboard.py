from fastapi import APIRouter, Depends

from fitpulse.core.dependencies import get_store
from fitpulse.repositories.record_store import RecordStore
from fitpulse.schemas.dashboard import DashboardResponse
from fitpulse.services.dashboard_service import build_dashboard

router = APIRouter(tags=["dashboard"])


@router.get("/{user_id}", response_model=DashboardResponse)
async def get_dashboard(user_id: int, store: RecordStore = Depends(get_store)):
    """Главный экран: тренировка, питание и вес за сегодня"""
    return build_dashboard(store, user_id)

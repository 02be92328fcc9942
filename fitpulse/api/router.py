from fastapi import APIRouter
from fitpulse.api.v1.users import router as users_router
from fitpulse.api.v1.profile import router as profile_router
from fitpulse.api.v1.workouts import router as workouts_router
from fitpulse.api.v1.weight import router as weight_router
from fitpulse.api.v1.nutrition import router as nutrition_router
from fitpulse.api.v1.dashboard import router as dashboard_router

api_router = APIRouter()

api_router.include_router(users_router, prefix="/users", tags=["users"])
api_router.include_router(profile_router, prefix="/profile", tags=["profile"])
api_router.include_router(workouts_router, prefix="/workouts", tags=["workouts"])
api_router.include_router(weight_router, prefix="/weight", tags=["weight"])
api_router.include_router(nutrition_router, prefix="/nutrition", tags=["nutrition"])
api_router.include_router(dashboard_router, prefix="/dashboard", tags=["dashboard"])

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fitpulse.api.router import api_router
from fitpulse.core.config import settings
from fitpulse.core.test_data import TEST_USER_EMAIL, create_test_data
from fitpulse.repositories.record_store import RecordStore


def create_app(store: Optional[RecordStore] = None) -> FastAPI:
    """Приложение с собственным экземпляром хранилища в app.state.store."""
    logging.basicConfig(level=settings.LOG_LEVEL)

    app = FastAPI(title=f"{settings.APP_NAME} - fitness tracker API")
    app.state.store = store if store is not None else RecordStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.on_event("startup")
    async def startup_event():
        print("Приложение запущено!")

        if not settings.SEED_TEST_DATA:
            return

        existing_user = app.state.store.get_user_by_email(TEST_USER_EMAIL)
        if not existing_user:
            create_test_data(app.state.store)
            print("✅ Тестовый пользователь создан")
        else:
            print(f"✅ Тестовый пользователь уже существует: {existing_user.email} (ID: {existing_user.id})")

    @app.get("/")
    async def root():
        prefix = settings.API_PREFIX

        return {
            "app": settings.APP_NAME,
            "message": "FitPulse - track workouts, nutrition and weight",
            "links": {
                "📊 Dashboard": f"{prefix}/dashboard/{{user_id}}",
                "💪 Workouts": f"{prefix}/workouts/{{user_id}}",
                "⚖️ Weight": f"{prefix}/weight/{{user_id}}",
                "🥗 Nutrition": f"{prefix}/nutrition/{{user_id}}",
                "👤 Profile": f"{prefix}/profile/{{user_id}}",
                "📚 Docs": "/docs",
            }
        }

    return app


app = create_app()

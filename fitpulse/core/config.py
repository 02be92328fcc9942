from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "FitPulse"
    API_PREFIX: str = "/api/v1"
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5000",
    ]
    LOG_LEVEL: str = "INFO"
    # Создавать демо-пользователя при старте (данные живут только в памяти процесса)
    SEED_TEST_DATA: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"

settings = Settings()

from fastapi import Request

from fitpulse.repositories.record_store import RecordStore


def get_store(request: Request) -> RecordStore:
    """Хранилище приложения, инжектируется в эндпоинты через Depends."""
    return request.app.state.store

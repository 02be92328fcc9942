from datetime import datetime

from pydantic import BaseModel


class Record(BaseModel):
    """Базовая запись хранилища: id и время создания выставляет RecordStore."""

    id: int
    created_at: datetime


class OwnedRecord(Record):
    """Запись, принадлежащая пользователю."""

    user_id: int

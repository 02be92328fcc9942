from typing import Callable, Dict, Generic, List, Optional, Type, TypeVar

from fitpulse.models.base import Record

T = TypeVar("T", bound=Record)

# Поля, которые выставляет хранилище и которые нельзя менять обновлением
IMMUTABLE_FIELDS = frozenset({"id", "user_id", "created_at"})


class Collection(Generic[T]):
    """
    Коллекция записей одного типа, ключ: id.

    Наружу отдаются только копии; хранимая запись меняется только
    через update().
    """

    def __init__(self, model: Type[T]):
        self.model = model
        self._items: Dict[int, T] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, record_id: int) -> bool:
        return record_id in self._items

    def add(self, record: T) -> T:
        self._items[record.id] = record
        return record.model_copy(deep=True)

    def get(self, record_id: int) -> Optional[T]:
        record = self._items.get(record_id)
        if record is None:
            return None
        return record.model_copy(deep=True)

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        """Все подходящие записи в порядке вставки (по возрастанию id)."""
        return [
            record.model_copy(deep=True)
            for record in sorted(self._items.values(), key=lambda r: r.id)
            if predicate(record)
        ]

    def first(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Подходящая запись с наименьшим id."""
        match = min(
            (record for record in self._items.values() if predicate(record)),
            key=lambda r: r.id,
            default=None,
        )
        return match.model_copy(deep=True) if match is not None else None

    def update(self, record_id: int, changes: dict) -> Optional[T]:
        existing = self._items.get(record_id)
        if existing is None:
            return None

        allowed = {k: v for k, v in changes.items() if k not in IMMUTABLE_FIELDS}
        updated = existing.model_copy(update=allowed, deep=True)
        self._items[record_id] = updated
        return updated.model_copy(deep=True)

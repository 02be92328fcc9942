import itertools
import logging
import threading
from datetime import datetime, time, timedelta
from typing import Callable, List, Optional, Tuple

from fitpulse.models.user import User, UserProfile
from fitpulse.models.workout import Workout
from fitpulse.models.weight import WeightEntry
from fitpulse.models.nutrition import NutritionEntry
from fitpulse.repositories.collection import Collection, T
from fitpulse.schemas.user import UserCreate
from fitpulse.schemas.profile import ProfileCreate, ProfileUpdate
from fitpulse.schemas.workout import WorkoutCreate, WorkoutUpdate
from fitpulse.schemas.weight import WeightEntryCreate
from fitpulse.schemas.nutrition import NutritionEntryCreate

logger = logging.getLogger(__name__)


def day_window(moment: datetime) -> Tuple[datetime, datetime]:
    """Полуинтервал [полночь дня moment, полночь следующего дня)."""
    start = datetime.combine(moment.date(), time.min)
    return start, start + timedelta(days=1)


class RecordStore:
    """
    In-memory хранилище пользователей, профилей, тренировок, веса и питания.

    Счётчик id общий для всех типов записей и никогда не переиспользуется.
    Хранилище не валидирует данные и не бросает исключений: "не найдено"
    возвращается как None. Каждая операция выполняется под одной блокировкой.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._clock = clock
        self._lock = threading.RLock()
        self._ids = itertools.count(1)

        self.users: Collection[User] = Collection(User)
        self.profiles: Collection[UserProfile] = Collection(UserProfile)
        self.workouts: Collection[Workout] = Collection(Workout)
        self.weight_entries: Collection[WeightEntry] = Collection(WeightEntry)
        self.nutrition_entries: Collection[NutritionEntry] = Collection(NutritionEntry)

    # ==========================
    # ОБЩИЕ ОПЕРАЦИИ
    # ==========================

    def _create(self, collection: Collection[T], fields: dict) -> T:
        with self._lock:
            record = collection.model(id=next(self._ids), created_at=self._clock(), **fields)
            created = collection.add(record)
        logger.debug("Создана запись %s id=%s", collection.model.__name__, created.id)
        return created

    def _get(self, collection: Collection[T], record_id: int) -> Optional[T]:
        with self._lock:
            return collection.get(record_id)

    def _by_user(self, collection: Collection[T], user_id: int) -> List[T]:
        with self._lock:
            return collection.filter(lambda r: r.user_id == user_id)

    def _today(self, collection: Collection[T], user_id: int) -> Optional[T]:
        with self._lock:
            start, end = day_window(self._clock())
            return collection.first(
                lambda r: r.user_id == user_id and start <= r.created_at < end
            )

    def _update(self, collection: Collection[T], record_id: int, changes: dict) -> Optional[T]:
        with self._lock:
            updated = collection.update(record_id, changes)
        if updated is None:
            logger.info("Обновление: %s id=%s не найдена", collection.model.__name__, record_id)
        else:
            logger.debug("Обновлена запись %s id=%s поля=%s", collection.model.__name__, record_id, sorted(changes))
        return updated

    # ==========================
    # ПОЛЬЗОВАТЕЛИ
    # ==========================

    def create_user(self, data: UserCreate) -> User:
        return self._create(self.users, data.model_dump())

    def get_user(self, user_id: int) -> Optional[User]:
        return self._get(self.users, user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            return self.users.first(lambda u: u.email == email)

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            return self.users.first(lambda u: u.username == username)

    # ==========================
    # ПРОФИЛИ
    # ==========================

    def create_profile(self, data: ProfileCreate) -> UserProfile:
        return self._create(self.profiles, data.model_dump())

    def get_profile(self, profile_id: int) -> Optional[UserProfile]:
        return self._get(self.profiles, profile_id)

    def get_profile_by_user(self, user_id: int) -> Optional[UserProfile]:
        """Профиль пользователя; если их несколько, то с наименьшим id."""
        with self._lock:
            return self.profiles.first(lambda p: p.user_id == user_id)

    def update_profile(self, profile_id: int, patch: ProfileUpdate) -> Optional[UserProfile]:
        return self._update(self.profiles, profile_id, patch.changes())

    def update_profile_by_user(self, user_id: int, patch: ProfileUpdate) -> Optional[UserProfile]:
        with self._lock:
            profile = self.get_profile_by_user(user_id)
            if profile is None:
                logger.info("Профиль пользователя %s не найден", user_id)
                return None
            return self.update_profile(profile.id, patch)

    # ==========================
    # ТРЕНИРОВКИ
    # ==========================

    def create_workout(self, data: WorkoutCreate) -> Workout:
        return self._create(self.workouts, data.model_dump())

    def get_workout(self, workout_id: int) -> Optional[Workout]:
        return self._get(self.workouts, workout_id)

    def get_user_workouts(self, user_id: int) -> List[Workout]:
        return self._by_user(self.workouts, user_id)

    def get_todays_workout(self, user_id: int) -> Optional[Workout]:
        """Первая (по id) тренировка пользователя, созданная сегодня."""
        return self._today(self.workouts, user_id)

    def update_workout(self, workout_id: int, patch: WorkoutUpdate) -> Optional[Workout]:
        return self._update(self.workouts, workout_id, patch.changes())

    # ==========================
    # ВЕС
    # ==========================

    def create_weight_entry(self, data: WeightEntryCreate) -> WeightEntry:
        return self._create(self.weight_entries, data.model_dump())

    def get_weight_entry(self, entry_id: int) -> Optional[WeightEntry]:
        return self._get(self.weight_entries, entry_id)

    def get_user_weight_entries(self, user_id: int) -> List[WeightEntry]:
        """Записи веса, новые первыми; при равном времени больший id первым."""
        entries = self._by_user(self.weight_entries, user_id)
        return sorted(entries, key=lambda e: (e.created_at, e.id), reverse=True)

    def get_latest_weight(self, user_id: int) -> Optional[WeightEntry]:
        entries = self.get_user_weight_entries(user_id)
        return entries[0] if entries else None

    # ==========================
    # ПИТАНИЕ
    # ==========================

    def create_nutrition_entry(self, data: NutritionEntryCreate) -> NutritionEntry:
        return self._create(self.nutrition_entries, data.model_dump())

    def get_nutrition_entry(self, entry_id: int) -> Optional[NutritionEntry]:
        return self._get(self.nutrition_entries, entry_id)

    def get_user_nutrition_entries(self, user_id: int) -> List[NutritionEntry]:
        return self._by_user(self.nutrition_entries, user_id)

    def get_todays_nutrition(self, user_id: int) -> Optional[NutritionEntry]:
        return self._today(self.nutrition_entries, user_id)

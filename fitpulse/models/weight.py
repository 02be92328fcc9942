from fitpulse.models.base import OwnedRecord


class WeightEntry(OwnedRecord):
    weight: float  # кг

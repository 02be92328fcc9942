from fitpulse.core.config import settings
from fitpulse.core.dependencies import get_store

__all__ = ["settings", "get_store"]

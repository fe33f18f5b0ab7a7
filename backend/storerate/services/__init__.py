from .user_service import user_service
from .store_service import store_service
from .rating_service import rating_service
from .stats_service import stats_service

__all__ = ["user_service", "store_service", "rating_service", "stats_service"]

from .views import (LoggingViewCacheInvalidator, RedisViewCacheInvalidator,
                    ViewCacheInvalidator, enqueue_view_invalidation,
                    project_view_path)

__all__ = [
    "LoggingViewCacheInvalidator",
    "RedisViewCacheInvalidator",
    "ViewCacheInvalidator",
    "enqueue_view_invalidation",
    "project_view_path",
]

from .base import Settings

settings = Settings()

__all__ = ["Settings", "settings"]

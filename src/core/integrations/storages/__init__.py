from .base import AbstractStorageBackend, BaseS3Storage

__all__ = ["AbstractStorageBackend", "BaseS3Storage"]

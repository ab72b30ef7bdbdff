from .base import UserCurrentSchema

__all__ = ["UserCurrentSchema"]

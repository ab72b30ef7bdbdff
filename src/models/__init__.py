from .base import Base, BaseModel
from .v1 import *  # noqa: F401,F403
from .v1 import __all__ as v1_models

__all__ = ["Base", "BaseModel", *v1_models]

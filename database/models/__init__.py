from .base import Base
from .settings import AppSettings

__all__ = [
    'Base',
    'AppSettings',
]

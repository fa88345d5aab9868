from database.repositories.base import BaseRepository
from database.repositories.settings import SettingsRepository
from database.repositories.weights import WeightsRepository

__all__ = [
    'BaseRepository',
    'SettingsRepository',
    'WeightsRepository',
]

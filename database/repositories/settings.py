import json
import logging
from typing import Any, Optional

from sqlalchemy import select

from database.models import AppSettings
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class SettingsRepository(BaseRepository):
    def get_raw(self, key: str) -> Optional[str]:
        stmt = select(AppSettings.value).where(AppSettings.key == key)
        return self.db.execute(stmt).scalar_one_or_none()

    def get(self, key: str) -> Optional[Any]:
        """Decoded JSON value for key, or None when missing.

        Raises:
            json.JSONDecodeError: If the stored text is not valid JSON
        """
        raw = self.get_raw(key)
        if raw is None:
            return None
        return json.loads(raw)

    def set(self, key: str, value: Any) -> AppSettings:
        encoded = json.dumps(value)
        setting = self.db.execute(
            select(AppSettings).where(AppSettings.key == key)
        ).scalar_one_or_none()

        if setting:
            setting.value = encoded
        else:
            setting = AppSettings(key=key, value=encoded)
            self.db.add(setting)
        self.flush()
        return setting

from sqlalchemy import Column, Integer, String, Text, TIMESTAMP, func

from .base import Base


class AppSettings(Base):
    """Key-value settings row. Values are JSON-encoded text."""
    __tablename__ = 'app_settings'

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(255), unique=True, nullable=False, index=True)
    value = Column(Text)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

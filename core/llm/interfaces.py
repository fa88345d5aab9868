"""
Niche Source Interface - Abstract base for candidate data providers.

The ranking core only consumes what a source returns; network I/O,
authentication and retries are the source's responsibility.
"""
from abc import ABC, abstractmethod
from typing import Any, List

from core.niches.models import Niche
from core.niches.normalizer import normalize_niches


class NicheSource(ABC):
    """
    Abstract interface for niche generators (OpenAI, Ollama, fixture files, etc.).
    """

    @abstractmethod
    def fetch_raw_niches(self, count: int) -> List[Any]:
        """
        Return a batch of raw, untrusted candidate objects.

        Raises:
            NicheScanError: If the source failed or produced nothing usable
        """
        pass

    def fetch_niches(self, count: int) -> List[Niche]:
        """Fetch a batch and pass it through the normalizer."""
        return normalize_niches(self.fetch_raw_niches(count))

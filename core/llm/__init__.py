"""LLM Module - Niche data sources and interfaces."""
from core.llm.interfaces import NicheSource
from core.llm.openai_service import OpenAINicheService

__all__ = ['NicheSource', 'OpenAINicheService']

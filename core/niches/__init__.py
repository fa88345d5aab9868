"""
Niches Module - Candidate records and their normalization boundary.

Public API:
- Niche, Faq: Normalized candidate dataclasses
- normalize_niche / normalize_niches: Total parsing of raw LLM output
"""

from core.niches.models import Faq, Niche
from core.niches.normalizer import normalize_niche, normalize_niches

__all__ = ['Faq', 'Niche', 'normalize_niche', 'normalize_niches']

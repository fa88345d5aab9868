"""
Pytest configuration and fixtures.

This file provides pytest-specific fixtures. Builders live in
tests/fixtures, fakes in tests/mocks.
"""

from typing import List

import pytest

from tests.mocks.niche_sources import FakeNicheSource


@pytest.fixture
def raw_batch() -> List[dict]:
    """Three raw records as the AI data source would return them."""
    return [
        {
            "niche": "AI Voice Agent Setup",
            "description": "Configure voice bots for small clinics.",
            "averagePrice": 450,
            "demand": 8,
            "competition": 3,
            "trend": 0.8,
            "scalabilityIndex": 9,
            "aiRisk": 4,
            "gigTitles": ["I will build your AI receptionist", "I will set up voice agents"],
            "keywords": ["voice ai", "receptionist", "automation"],
            "faqs": [{"question": "Which CRM?", "answer": "Any with webhooks."}],
            "targetAudience": "Dental clinics",
        },
        {
            "niche": "Notion Template Design",
            "averagePrice": 60,
            "demand": 6,
            "competition": 9,
            "trend": -0.7,
            "scalabilityIndex": 4,
        },
        {
            "niche": "Shopify Speed Audits",
            "averagePrice": 220,
            "demand": 7,
            "competition": 5,
            "trend": 0.3,
            "scalabilityIndex": 6,
        },
    ]


@pytest.fixture
def fake_source(raw_batch) -> FakeNicheSource:
    return FakeNicheSource([raw_batch])

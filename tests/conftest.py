"""
Pytest configuration and fixtures for keyword analyzer tests.
"""

import os
import random
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from yt_keyword_analyzer.config import Settings
from yt_keyword_analyzer.seo.batch_analyzer import BatchAnalyzer
from yt_keyword_analyzer.seo.keyword_scorer import KeywordScorer


class FixedRandom(random.Random):
    """random.Random that always draws the same value."""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def fixed_random():
    """Factory for constant random sources."""
    return FixedRandom


@pytest.fixture
def scorer():
    """Scorer whose random trend draw always lands on 'stable'."""
    return KeywordScorer(rng=FixedRandom(0.5))


@pytest.fixture
def analyzer():
    """Batch analyzer with a deterministic trend draw ('stable')."""
    return BatchAnalyzer(rng_factory=lambda: FixedRandom(0.5))


@pytest.fixture
def sample_keywords():
    """Mixed string and object keyword entries."""
    return [
        "best camera tutorial",
        "hidden gem cameras",
        "ai camera tips 2025",
        {"keyword": "camera settings for night sky photos", "category": "long-tail", "relevance": 0.8},
        {"keyword": "Viral Shorts Secret", "category": "primary", "searchVolume": "high"},
    ]


@pytest.fixture
def settings():
    """Settings that do not depend on the test environment."""
    return Settings(port=3999)


@pytest.fixture
def mock_env_vars():
    """Set up mock environment variables for testing."""
    env_vars = {
        "HOST": "127.0.0.1",
        "PORT": "4100",
        "LOG_LEVEL": "debug",
        "APP_ENVIRONMENT": "production",
        "PUBLIC_WS_URL": "wss://keywords.example.com",
    }
    with patch.dict(os.environ, env_vars):
        yield env_vars

"""
Keyword pattern tables used for heuristic scoring.

No live search data is consulted: competition and volume estimates are
derived purely from which of these phrases a keyword contains.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class PatternTables:
    """Competition buckets and trending topics, matched as lowercase substrings."""
    high_competition: Tuple[str, ...]
    medium_competition: Tuple[str, ...]
    low_competition: Tuple[str, ...]
    trending_topics: Tuple[str, ...]
    stable_terms: Tuple[str, ...] = ("classic", "traditional")

    @staticmethod
    def first_match(keyword: str, terms: Tuple[str, ...]) -> Optional[str]:
        """Return the first term contained in keyword, or None."""
        for term in terms:
            if term in keyword:
                return term
        return None


DEFAULT_PATTERNS = PatternTables(
    high_competition=("tutorial", "how to", "best", "review", "top 10", "guide"),
    medium_competition=("tips", "tricks", "explained", "walkthrough", "demo"),
    low_competition=("mistakes", "underrated", "hidden", "secret", "advanced"),
    trending_topics=("ai", "chatgpt", "automation", "2025", "2024", "shorts", "viral"),
)

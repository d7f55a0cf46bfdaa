"""
Keyword Scorer

Turns a single keyword entry into a fully analyzed keyword: competition,
estimated volume, trend direction, opportunity score and a placement
recommendation.

Usage:
    import random
    from yt_keyword_analyzer.seo.keyword_scorer import KeywordScorer

    scorer = KeywordScorer(rng=random.Random(7))
    result = scorer.score({"keyword": "hidden camera tricks", "relevance": 0.8})
    print(result.opportunity_score, result.analysis.difficulty)
"""

import math
import random
import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from ..errors import InvalidInputError
from .patterns import DEFAULT_PATTERNS, PatternTables

# Score arithmetic
BASE_COMPETITION = 50
BASE_VOLUME = 50
HIGH_COMPETITION_PENALTY = 15
MEDIUM_COMPETITION_PENALTY = 5
LOW_COMPETITION_RELIEF = 20
LONG_TAIL_RELIEF = 15
LONG_TAIL_MIN_WORDS = 4
MIN_COMPETITION = 10
MAX_COMPETITION = 95
TRENDING_VOLUME_BOOST = 15
MAX_VOLUME = 100
DEFAULT_RELEVANCE = 0.5

VOLUME_HINTS = {"high": 85, "medium": 60, "low": 35}

YEAR_PATTERN = re.compile(r"202[4-9]")

# Tier thresholds shared by levels, difficulty and ratings
HIGH_THRESHOLD = 70
MEDIUM_THRESHOLD = 40
GOOD_OPPORTUNITY = 50

KeywordEntry = Union[str, Mapping[str, Any]]


def round_half_up(value: float) -> int:
    """Round .5 upwards, unlike the builtin round()."""
    return int(math.floor(value + 0.5))


def level_for(score: int) -> str:
    if score >= HIGH_THRESHOLD:
        return "high"
    if score >= MEDIUM_THRESHOLD:
        return "medium"
    return "low"


@dataclass(frozen=True)
class KeywordInput:
    """Normalized keyword entry as received from the caller."""
    keyword: str
    category: Optional[str] = None
    search_volume: Optional[str] = None
    competition: Optional[str] = None  # accepted, not used in scoring
    relevance: Optional[float] = None

    @classmethod
    def from_entry(cls, entry: KeywordEntry) -> "KeywordInput":
        """
        Normalize a bare string or a keyword object.

        Raises:
            InvalidInputError: entry has no usable keyword text
        """
        if isinstance(entry, str):
            if not entry:
                raise InvalidInputError("Keyword strings must be non-empty")
            return cls(keyword=entry)

        if not isinstance(entry, Mapping):
            raise InvalidInputError(
                f"Keyword entries must be strings or objects, got {type(entry).__name__}"
            )

        keyword = entry.get("keyword")
        if not isinstance(keyword, str) or not keyword:
            raise InvalidInputError("Each keyword object requires a non-empty 'keyword' string")

        relevance = entry.get("relevance")
        if relevance is not None:
            if isinstance(relevance, bool) or not isinstance(relevance, (int, float)):
                raise InvalidInputError(f"Relevance for '{keyword}' must be a number")

        return cls(
            keyword=keyword,
            category=entry.get("category"),
            search_volume=entry.get("searchVolume"),
            competition=entry.get("competition"),
            relevance=relevance,
        )


@dataclass(frozen=True)
class KeywordAnalysis:
    """Heuristic signals for one keyword."""
    competition_score: int  # 10-95, lower is better
    competition_level: str  # low, medium, high
    volume_score: int  # 0-100, higher is better
    volume_level: str  # low, medium, high
    trend_direction: str  # rising, stable, declining
    difficulty: str  # easy, medium, hard

    def to_dict(self) -> Dict[str, Any]:
        return {
            "competitionScore": self.competition_score,
            "competitionLevel": self.competition_level,
            "volumeScore": self.volume_score,
            "volumeLevel": self.volume_level,
            "trendDirection": self.trend_direction,
            "difficulty": self.difficulty,
        }


@dataclass(frozen=True)
class AnalyzedKeyword:
    """A scored keyword, ready for ranking."""
    keyword: str
    category: str
    analysis: KeywordAnalysis
    relevance: float
    opportunity_score: int
    opportunity_rating: str  # excellent, good, low
    recommendation: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keyword": self.keyword,
            "category": self.category,
            "analysis": self.analysis.to_dict(),
            "relevance": self.relevance,
            "opportunityScore": self.opportunity_score,
            "opportunityRating": self.opportunity_rating,
            "recommendation": self.recommendation,
        }


class KeywordScorer:
    """
    Heuristic keyword scorer.

    Competition, volume and opportunity are deterministic. Trend direction
    falls back to a uniform random draw for keywords with no trend signal,
    so pass a seeded ``random.Random`` for reproducible results.
    """

    def __init__(
        self,
        patterns: PatternTables = DEFAULT_PATTERNS,
        rng: Optional[random.Random] = None
    ):
        self.patterns = patterns
        self.rng = rng if rng is not None else random.Random()

    def score(self, entry: KeywordEntry) -> AnalyzedKeyword:
        """
        Analyze one keyword.

        Args:
            entry: Bare keyword string or keyword object

        Returns:
            AnalyzedKeyword
        """
        data = KeywordInput.from_entry(entry)
        text = data.keyword.lower()

        competition = self.competition_score(text)
        volume = self.volume_score(text, data.search_volume)
        trend = self.trend_direction(text)

        relevance = DEFAULT_RELEVANCE if data.relevance is None else data.relevance
        opportunity = round_half_up(
            volume * 0.4 + (100 - competition) * 0.4 + relevance * 20
        )
        category = data.category or "general"

        return AnalyzedKeyword(
            keyword=data.keyword,
            category=category,
            analysis=KeywordAnalysis(
                competition_score=competition,
                competition_level=level_for(competition),
                volume_score=volume,
                volume_level=level_for(volume),
                trend_direction=trend,
                difficulty=self.difficulty(competition),
            ),
            relevance=relevance,
            opportunity_score=opportunity,
            opportunity_rating=self.opportunity_rating(opportunity),
            recommendation=self.recommendation(opportunity, category),
        )

    def competition_score(self, text: str) -> int:
        """
        Competition estimate for a lowercased keyword.

        Long-tail relief counts tokens with str.split(): a run of spaces or a
        tab is a single separator, so "a  b c" is 3 tokens, not 4.
        """
        score = BASE_COMPETITION

        # Each bucket adjusts at most once, but all three are checked
        if self.patterns.first_match(text, self.patterns.high_competition):
            score += HIGH_COMPETITION_PENALTY
        if self.patterns.first_match(text, self.patterns.medium_competition):
            score += MEDIUM_COMPETITION_PENALTY
        if self.patterns.first_match(text, self.patterns.low_competition):
            score -= LOW_COMPETITION_RELIEF

        if len(text.split()) >= LONG_TAIL_MIN_WORDS:
            score -= LONG_TAIL_RELIEF

        return max(MIN_COMPETITION, min(MAX_COMPETITION, score))

    def volume_score(self, text: str, search_volume: Optional[str] = None) -> int:
        """Volume estimate from the caller's hint plus a trending boost."""
        score = BASE_VOLUME
        if isinstance(search_volume, str):
            score = VOLUME_HINTS.get(search_volume, BASE_VOLUME)

        if self.patterns.first_match(text, self.patterns.trending_topics):
            score = min(MAX_VOLUME, score + TRENDING_VOLUME_BOOST)

        return score

    def trend_direction(self, text: str) -> str:
        """Simulated momentum label."""
        if self.patterns.first_match(text, self.patterns.trending_topics) or YEAR_PATTERN.search(text):
            return "rising"
        if self.patterns.first_match(text, self.patterns.stable_terms):
            return "stable"

        draw = self.rng.random()
        if draw > 0.7:
            return "rising"
        if draw > 0.3:
            return "stable"
        return "declining"

    @staticmethod
    def difficulty(competition: int) -> str:
        if competition >= HIGH_THRESHOLD:
            return "hard"
        if competition >= MEDIUM_THRESHOLD:
            return "medium"
        return "easy"

    @staticmethod
    def opportunity_rating(opportunity: int) -> str:
        if opportunity >= HIGH_THRESHOLD:
            return "excellent"
        if opportunity >= GOOD_OPPORTUNITY:
            return "good"
        return "low"

    @staticmethod
    def recommendation(opportunity: int, category: str) -> str:
        """Where the keyword belongs in the video metadata."""
        if opportunity >= HIGH_THRESHOLD:
            if category == "primary":
                return "Highly recommended for title"
            return "Strong candidate for description/tags"
        if opportunity >= GOOD_OPPORTUNITY:
            return "Good supporting keyword for description"
        return "Consider for long-form content or tags only"

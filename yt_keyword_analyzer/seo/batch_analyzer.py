"""
Batch Keyword Analyzer

Scores a list of keyword entries, ranks them by opportunity, splits them
into tiers and assembles the full analysis report.

Usage:
    from yt_keyword_analyzer.seo.batch_analyzer import BatchAnalyzer

    analyzer = BatchAnalyzer()
    report = analyzer.analyze(
        ["best camera tutorial", "hidden gem cameras"],
        concept="Budget camera roundup",
        niche="tech",
    )
    print(report.summary.average_opportunity_score)
"""

import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence

from loguru import logger

from ..errors import InvalidInputError
from .insights import Insight, InsightGenerator
from .keyword_scorer import (
    GOOD_OPPORTUNITY,
    HIGH_THRESHOLD,
    AnalyzedKeyword,
    KeywordEntry,
    KeywordScorer,
    round_half_up,
)
from .patterns import DEFAULT_PATTERNS, PatternTables

PRIMARY_LIMIT = 3
SECONDARY_LIMIT = 5
LONG_TAIL_LIMIT = 10


def utc_timestamp() -> str:
    """ISO 8601 UTC timestamp with millisecond precision and Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class ReportSummary:
    top_opportunities: int
    good_opportunities: int
    low_priority: int
    average_opportunity_score: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "topOpportunities": self.top_opportunities,
            "goodOpportunities": self.good_opportunities,
            "lowPriority": self.low_priority,
            "averageOpportunityScore": self.average_opportunity_score,
        }


@dataclass(frozen=True)
class RecommendedKeywords:
    primary: List[AnalyzedKeyword] = field(default_factory=list)
    secondary: List[AnalyzedKeyword] = field(default_factory=list)
    long_tail: List[AnalyzedKeyword] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "primary": [k.to_dict() for k in self.primary],
            "secondary": [k.to_dict() for k in self.secondary],
            "longTail": [k.to_dict() for k in self.long_tail],
        }


@dataclass(frozen=True)
class AnalysisReport:
    """Complete result of one analyzeKeywords call."""
    concept: str
    target_audience: str
    niche: str
    analyzed_at: str
    total_analyzed: int
    summary: ReportSummary
    recommended: RecommendedKeywords
    all_keywords: List[AnalyzedKeyword]
    insights: List[Insight]
    next_steps: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "concept": self.concept,
            "targetAudience": self.target_audience,
            "niche": self.niche,
            "analyzedAt": self.analyzed_at,
            "totalAnalyzed": self.total_analyzed,
            "summary": self.summary.to_dict(),
            "recommended": self.recommended.to_dict(),
            "allKeywords": [k.to_dict() for k in self.all_keywords],
            "insights": [i.to_dict() for i in self.insights],
            "nextSteps": list(self.next_steps),
        }


class BatchAnalyzer:
    """
    Ranks a keyword batch and builds the report.

    A new scorer with its own random source is created for every call, so
    concurrent analyses never share generator state.
    """

    def __init__(
        self,
        patterns: PatternTables = DEFAULT_PATTERNS,
        rng_factory: Callable[[], random.Random] = random.Random,
        insight_generator: Optional[InsightGenerator] = None
    ):
        self.patterns = patterns
        self.rng_factory = rng_factory
        self.insight_generator = insight_generator or InsightGenerator()

    def analyze(
        self,
        keywords: Optional[Sequence[KeywordEntry]],
        concept: Optional[str] = None,
        target_audience: Optional[str] = None,
        niche: Optional[str] = None
    ) -> AnalysisReport:
        """
        Analyze a batch of keywords.

        Args:
            keywords: Keyword strings or keyword objects
            concept: Original video concept
            target_audience: Intended audience
            niche: Content niche (tech, gaming, lifestyle, ...)

        Returns:
            AnalysisReport

        Raises:
            InvalidInputError: keywords missing, not a list, or an entry is malformed
        """
        if keywords is None or not isinstance(keywords, (list, tuple)):
            raise InvalidInputError("Keywords array is required")

        logger.info(f"[BatchAnalyzer] Analyzing {len(keywords)} keywords...")

        scorer = KeywordScorer(self.patterns, rng=self.rng_factory())
        # sorted() is stable, ties keep input order
        ranked = sorted(
            (scorer.score(entry) for entry in keywords),
            key=lambda k: k.opportunity_score,
            reverse=True
        )

        top = [k for k in ranked if k.opportunity_score >= HIGH_THRESHOLD]
        good = [k for k in ranked if GOOD_OPPORTUNITY <= k.opportunity_score < HIGH_THRESHOLD]
        low = [k for k in ranked if k.opportunity_score < GOOD_OPPORTUNITY]

        recommended = RecommendedKeywords(
            primary=top[:PRIMARY_LIMIT],
            secondary=good[:SECONDARY_LIMIT],
            long_tail=[k for k in ranked if k.category == "long-tail"][:LONG_TAIL_LIMIT],
        )

        insights = self.insight_generator.generate(ranked, concept, niche)

        report = AnalysisReport(
            concept=concept or "Not specified",
            target_audience=target_audience or "general",
            niche=niche or "general",
            analyzed_at=utc_timestamp(),
            total_analyzed=len(ranked),
            summary=ReportSummary(
                top_opportunities=len(top),
                good_opportunities=len(good),
                low_priority=len(low),
                average_opportunity_score=self.average_score(ranked),
            ),
            recommended=recommended,
            all_keywords=ranked,
            insights=insights,
            next_steps=self.next_steps(recommended),
        )

        logger.debug(
            f"[BatchAnalyzer] top={len(top)} good={len(good)} low={len(low)} "
            f"avg={report.summary.average_opportunity_score}"
        )
        return report

    @staticmethod
    def average_score(ranked: Sequence[AnalyzedKeyword]) -> int:
        """Rounded mean opportunity score, 0 for an empty batch."""
        if not ranked:
            return 0
        return round_half_up(sum(k.opportunity_score for k in ranked) / len(ranked))

    @staticmethod
    def next_steps(recommended: RecommendedKeywords) -> List[str]:
        lead = recommended.primary[0].keyword if recommended.primary else "top keyword"
        return [
            f'Use "{lead}" as your main title keyword',
            "Incorporate secondary keywords naturally in your description",
            "Use long-tail keywords in your video script for voice search optimization",
            "Monitor trending topics for timely content opportunities",
        ]

"""Qualitative observations drawn from an analyzed keyword batch."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .keyword_scorer import AnalyzedKeyword

MAX_EXAMPLES = 3
QUICK_WIN_MIN_VOLUME = 40


@dataclass(frozen=True)
class Insight:
    """One observation about the batch."""
    type: str  # gap, opportunity, quick-win, niche
    message: str
    keywords: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type, "message": self.message}
        if self.type in ("opportunity", "quick-win"):
            data["keywords"] = list(self.keywords)
        return data


class InsightGenerator:
    """Rule-based insight generation. Rules run in a fixed order."""

    def generate(
        self,
        analyzed: Sequence[AnalyzedKeyword],
        concept: Optional[str] = None,
        niche: Optional[str] = None
    ) -> List[Insight]:
        """
        Derive insights from keywords already in ranked order.

        Args:
            analyzed: Scored keywords, sorted by opportunity
            concept: Video concept (currently unused by any rule)
            niche: Content niche, adds a niche note when given

        Returns:
            List of Insight objects
        """
        insights = []

        if not any(k.category == "long-tail" for k in analyzed):
            insights.append(Insight(
                type="gap",
                message="Consider adding more long-tail keywords for better voice search optimization"
            ))

        rising = [k for k in analyzed if k.analysis.trend_direction == "rising"]
        if rising:
            insights.append(Insight(
                type="opportunity",
                message=f"{len(rising)} keywords are trending up - prioritize these for timely content",
                keywords=[k.keyword for k in rising[:MAX_EXAMPLES]]
            ))

        easy_wins = [
            k for k in analyzed
            if k.analysis.difficulty == "easy" and k.analysis.volume_score >= QUICK_WIN_MIN_VOLUME
        ]
        if easy_wins:
            insights.append(Insight(
                type="quick-win",
                message=f"Found {len(easy_wins)} low-competition keywords with decent volume",
                keywords=[k.keyword for k in easy_wins[:MAX_EXAMPLES]]
            ))

        if niche:
            insights.append(Insight(
                type="niche",
                message=f"For {niche} content, focus on specific terminology and community language"
            ))

        return insights

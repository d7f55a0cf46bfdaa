"""
Keyword scoring and reporting.

Components:
- PatternTables: static competition and trending-topic phrases
- KeywordScorer: per-keyword heuristic analysis
- BatchAnalyzer: ranking, tiering and report assembly
- InsightGenerator: qualitative observations on a ranked batch
"""

from .patterns import PatternTables, DEFAULT_PATTERNS
from .keyword_scorer import (
    KeywordInput,
    KeywordAnalysis,
    AnalyzedKeyword,
    KeywordScorer,
)
from .insights import Insight, InsightGenerator
from .batch_analyzer import (
    AnalysisReport,
    ReportSummary,
    RecommendedKeywords,
    BatchAnalyzer,
)

__all__ = [
    "PatternTables",
    "DEFAULT_PATTERNS",
    "KeywordInput",
    "KeywordAnalysis",
    "AnalyzedKeyword",
    "KeywordScorer",
    "Insight",
    "InsightGenerator",
    "AnalysisReport",
    "ReportSummary",
    "RecommendedKeywords",
    "BatchAnalyzer",
]

"""AI-signal analysis: statistics, scoring and suggestions."""

from .statistics import StatisticalAnalyzer, linear_score, clamp
from .aggregator import ScoreAggregator, SUGGESTION_TEXTS
from .analyzer import TextAnalyzer
from .reference import REFERENCE_TABLES, top_words

__all__ = [
    "StatisticalAnalyzer",
    "ScoreAggregator",
    "TextAnalyzer",
    "SUGGESTION_TEXTS",
    "REFERENCE_TABLES",
    "top_words",
    "linear_score",
    "clamp",
]

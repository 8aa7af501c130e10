"""Text analyzer: pattern database + statistics + aggregation."""

from typing import Optional

from ..config import Config
from ..models import TextAnalysis
from ..patterns import PatternDatabase
from ..utils.logging import get_logger
from .aggregator import ScoreAggregator
from .statistics import StatisticalAnalyzer

logger = get_logger(__name__)


class TextAnalyzer:
    """Scores text for AI-generated signal.

    Holds no per-call state; one instance can serve concurrent callers.
    """

    def __init__(
        self,
        database: PatternDatabase,
        config: Optional[Config] = None,
        statistics: Optional[StatisticalAnalyzer] = None,
        aggregator: Optional[ScoreAggregator] = None,
    ):
        self.database = database
        self.config = config or Config()
        self.statistics = statistics or StatisticalAnalyzer(self.config)
        self.aggregator = aggregator or ScoreAggregator(self.config, database)

    def analyze(self, text: str, locale: Optional[str] = None) -> TextAnalysis:
        """Analyze text.

        Args:
            text: Text to score.
            locale: Declared locale; detected from the text when omitted.

        Returns:
            A fresh TextAnalysis.
        """
        stats = self.statistics.analyze_statistics(text, locale)
        matches = self.database.match_all(text, stats.locale)
        return self.aggregator.aggregate(matches, stats)

    def sentence_length_cv(self, text: str) -> float:
        """Coefficient of variation of sentence lengths, as the analyzer sees it."""
        return self.statistics.sentence_length_cv(text)

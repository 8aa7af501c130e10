"""Combine pattern hits and statistics into a TextAnalysis."""

from typing import Dict, List, Optional

from ..config import Config
from ..models import PatternMatch, TextAnalysis, TextDetails, TextStatistics
from ..patterns import PatternDatabase
from ..utils.logging import get_logger
from .statistics import clamp

logger = get_logger(__name__)


SUGGESTION_TEXTS: Dict[str, Dict[str, str]] = {
    "ru": {
        "no_text": "Нет текста для анализа: текст слишком короткий для надёжной оценки.",
        "burstiness": (
            "Варьируйте длину предложений: чередуйте короткие и длинные фразы "
            "(разнообразие сейчас {score:.0f}/100)."
        ),
        "pattern": "Замените шаблонную фразу «{text}», например: «{alternative}».",
        "pattern_plain": "Перефразируйте шаблонную фразу «{text}».",
        "lexical": "Используйте более разнообразную лексику и избегайте повторов одних и тех же слов.",
        "low_confidence": "Текст слишком короткий для надёжной оценки.",
    },
    "en": {
        "no_text": "No text to analyze: text too short for reliable scoring.",
        "burstiness": (
            "Vary sentence length: mix short and long sentences "
            "(variation is currently {score:.0f}/100)."
        ),
        "pattern": "Rewrite the stock phrase \"{text}\", for example: \"{alternative}\".",
        "pattern_plain": "Rephrase the stock phrase \"{text}\".",
        "lexical": "Introduce more varied vocabulary and avoid repeating the same words.",
        "low_confidence": "Text too short for reliable scoring.",
    },
}


class ScoreAggregator:
    """Turns raw signals into scores and remediation hints.

    Suggestion rules run in a fixed order and fire independently:
    burstiness, stock phrases, vocabulary, short text.
    """

    def __init__(self, config: Optional[Config] = None, database: Optional[PatternDatabase] = None):
        self.config = config or Config()
        # Used only to look up a rewrite example for listed phrases.
        self.database = database

    def pattern_penalty(self, matches: List[PatternMatch]) -> float:
        """Sum of weights of distinct matched signatures, capped at 100."""
        weights = {}
        for match in matches:
            weights[(match.locale, match.signature)] = match.weight
        return min(100.0, float(sum(weights.values())))

    def _texts(self, locale: str) -> Dict[str, str]:
        return SUGGESTION_TEXTS.get(locale, SUGGESTION_TEXTS["en"])

    def _listed_patterns(self, matches: List[PatternMatch]) -> List[PatternMatch]:
        seen = set()
        distinct = []
        for match in matches:
            key = (match.locale, match.signature)
            if key in seen:
                continue
            seen.add(key)
            distinct.append(match)
        distinct.sort(key=lambda m: (-m.weight, m.start))
        return distinct[:self.config.suggestions.max_listed_patterns]

    def _pattern_suggestion(self, match: PatternMatch, texts: Dict[str, str]) -> str:
        alternative = None
        if self.database is not None:
            entry = self.database.get(match.signature, match.locale)
            if entry is not None and entry.alternatives:
                alternative = entry.alternatives[0]
        phrase = " ".join(match.text.split())
        if alternative:
            return texts["pattern"].format(text=phrase, alternative=alternative)
        return texts["pattern_plain"].format(text=phrase)

    def suggest(
        self,
        matches: List[PatternMatch],
        stats: TextStatistics,
        penalty: float,
    ) -> List[str]:
        """Apply the suggestion rules in order."""
        thresholds = self.config.suggestions
        texts = self._texts(stats.locale)
        suggestions = []

        if stats.bursty_score < thresholds.burstiness:
            suggestions.append(texts["burstiness"].format(score=stats.bursty_score))

        if penalty > thresholds.pattern_penalty:
            for match in self._listed_patterns(matches):
                suggestions.append(self._pattern_suggestion(match, texts))

        if stats.lexical_diversity < thresholds.lexical_diversity:
            suggestions.append(texts["lexical"])

        if stats.low_confidence:
            suggestions.append(texts["low_confidence"])

        return suggestions

    def aggregate(self, matches: List[PatternMatch], stats: TextStatistics) -> TextAnalysis:
        """Combine pattern matches and statistics into a TextAnalysis.

        Args:
            matches: Position-ordered signature hits.
            stats: Output of ``StatisticalAnalyzer.analyze_statistics``.

        Returns:
            TextAnalysis with scores rounded to one decimal.
        """
        if stats.token_count == 0:
            return TextAnalysis(
                human_score=0.0,
                perplexity_score=0.0,
                bursty_score=0.0,
                ai_patterns=[],
                suggestions=[self._texts(stats.locale)["no_text"]],
                lexical_diversity=0.0,
                low_confidence=True,
                locale=stats.locale,
                details=TextDetails(paragraph_count=stats.paragraph_count),
            )

        weights = self.config.scoring
        penalty = self.pattern_penalty(matches)
        human = clamp(
            weights.perplexity * stats.perplexity_score
            + weights.burstiness * stats.bursty_score
            + weights.patterns * (100.0 - penalty)
        )

        logger.debug(
            f"Aggregated: human={human:.1f} penalty={penalty:.1f} "
            f"patterns={len(matches)} tokens={stats.token_count}"
        )

        return TextAnalysis(
            human_score=round(human, 1),
            perplexity_score=round(stats.perplexity_score, 1),
            bursty_score=round(stats.bursty_score, 1),
            ai_patterns=sorted(matches, key=lambda m: m.start),
            suggestions=self.suggest(matches, stats, penalty),
            lexical_diversity=round(stats.lexical_diversity, 1),
            low_confidence=stats.low_confidence,
            locale=stats.locale,
            details=TextDetails(
                token_count=stats.token_count,
                sentence_count=stats.sentence_count,
                paragraph_count=stats.paragraph_count,
                avg_sentence_length=round(stats.avg_sentence_length, 2),
                sentence_length_cv=round(stats.sentence_length_cv, 3),
                type_token_ratio=round(stats.type_token_ratio, 3),
                hapax_ratio=round(stats.hapax_ratio, 3),
                paragraph_variety=round(stats.paragraph_variety, 3),
                generic_word_share=round(stats.generic_word_share, 3),
                pattern_penalty=round(penalty, 1),
            ),
        )

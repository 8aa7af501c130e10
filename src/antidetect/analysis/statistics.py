"""Lexical and structural statistics of a text.

Three signals feed the human score:
- Burstiness: coefficient of variation of sentence lengths, mapped onto
  0-100 with a clamped linear scale. Uniform sentences read as robotic.
- Lexical diversity: average of type-token ratio and hapax ratio.
- Perplexity proxy: how heavily the text leans on the most common function
  words of its language, compared with ordinary prose. This is a heuristic
  over word frequencies, not a language-model perplexity.
"""

from typing import Dict, List, Optional, Tuple

from nltk import FreqDist

from ..config import Config
from ..models import TextStatistics
from ..utils.logging import get_logger
from ..utils.nlp import (
    coefficient_of_variation,
    resolve_locale,
    split_into_paragraphs,
    split_into_sentences,
    tokenize_words,
)
from .reference import top_words

logger = get_logger(__name__)


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def linear_score(value: float, floor: float, ceiling: float) -> float:
    """Map ``value`` to 0 at ``floor`` and 100 at ``ceiling``, clamped."""
    if ceiling == floor:
        return 100.0 if value >= ceiling else 0.0
    return clamp(100.0 * (value - floor) / (ceiling - floor))


class StatisticalAnalyzer:
    """Computes burstiness, lexical diversity and the perplexity proxy."""

    def __init__(
        self,
        config: Optional[Config] = None,
        reference: Optional[Dict[str, Dict[str, float]]] = None,
    ):
        """Initialize analyzer.

        Args:
            config: Engine configuration; defaults are used when omitted.
            reference: Per-locale function-word shares (0-1). Defaults to the
                built-in top-N tables.
        """
        self.config = config or Config()
        stats_config = self.config.statistics
        if reference is None:
            reference = {
                locale: top_words(locale, stats_config.reference_top_n)
                for locale in ("ru", "en")
            }
        self.reference = reference

    def sentence_lengths(self, text: str) -> List[int]:
        """Token counts of every sentence that has at least one token."""
        lengths = [len(tokenize_words(s)) for s in split_into_sentences(text)]
        return [n for n in lengths if n > 0]

    def sentence_length_cv(self, text: str) -> float:
        return coefficient_of_variation(self.sentence_lengths(text))

    def bursty_score(self, cv: float) -> float:
        calibration = self.config.burstiness
        return linear_score(cv, calibration.cv_floor, calibration.cv_ceiling)

    def lexical_diversity(self, tokens: List[str]) -> Tuple[float, float, float]:
        """Return (score, type-token ratio, hapax ratio)."""
        if not tokens:
            return 0.0, 0.0, 0.0
        freq = FreqDist(tokens)
        ttr = len(freq) / len(tokens)
        hapax_ratio = len(freq.hapaxes()) / len(freq)
        score = clamp(100.0 * (0.5 * ttr + 0.5 * hapax_ratio))
        return score, ttr, hapax_ratio

    def perplexity_score(self, tokens: List[str], locale: str) -> Tuple[float, float]:
        """Return (score, generic word share).

        The generic share is compared with how much of ordinary text the
        reference words cover. Leaning on them less scores high; leaning on
        them far more scores 0. A rank-frequency term penalizes texts whose
        top few words dominate.
        """
        if not tokens:
            return 0.0, 0.0
        stats_config = self.config.statistics
        table = self.reference.get(locale, {})
        folded = [token.replace("ё", "е") for token in tokens]

        generic_share = sum(1 for token in folded if token in table) / len(folded)
        mass = sum(table.values())
        if mass > 0:
            ratio = generic_share / mass
            generic = 100.0 - linear_score(
                ratio, stats_config.generic_ratio_floor, stats_config.generic_ratio_ceiling
            )
        else:
            generic = 50.0

        freq = FreqDist(folded)
        top_count = sum(count for _, count in freq.most_common(stats_config.spread_top_types))
        spread = 100.0 * (1.0 - top_count / len(folded))

        score = stats_config.generic_weight * generic + stats_config.spread_weight * spread
        return clamp(score), generic_share

    def paragraph_variety(self, text: str) -> float:
        """Distinct opening words across paragraphs longer than 50 characters."""
        openers = []
        for paragraph in split_into_paragraphs(text):
            if len(paragraph) <= 50:
                continue
            tokens = tokenize_words(paragraph)
            if tokens:
                openers.append(tokens[0])
        if not openers:
            return 1.0
        return len(set(openers)) / len(openers)

    def analyze_statistics(self, text: str, locale: Optional[str] = None) -> TextStatistics:
        """Compute all statistics for a text.

        Args:
            text: Text to measure.
            locale: Declared locale; detected from the text when omitted.

        Returns:
            TextStatistics. Texts below the reliable-token threshold still get
            numbers, flagged with ``low_confidence``.
        """
        text = text or ""
        locale = resolve_locale(locale, text, self.config.default_locale)
        tokens = tokenize_words(text)
        lengths = self.sentence_lengths(text)
        cv = coefficient_of_variation(lengths)

        lexical, ttr, hapax_ratio = self.lexical_diversity(tokens)
        perplexity, generic_share = self.perplexity_score(tokens, locale)
        low_confidence = len(tokens) < self.config.statistics.min_reliable_tokens

        if low_confidence:
            logger.debug(f"Low-confidence statistics: {len(tokens)} tokens")

        return TextStatistics(
            bursty_score=self.bursty_score(cv) if tokens else 0.0,
            perplexity_score=perplexity,
            lexical_diversity=lexical,
            low_confidence=low_confidence,
            locale=locale,
            token_count=len(tokens),
            sentence_count=len(lengths),
            paragraph_count=len(split_into_paragraphs(text)),
            avg_sentence_length=sum(lengths) / len(lengths) if lengths else 0.0,
            sentence_length_cv=cv,
            type_token_ratio=ttr,
            hapax_ratio=hapax_ratio,
            paragraph_variety=self.paragraph_variety(text),
            generic_word_share=generic_share,
        )

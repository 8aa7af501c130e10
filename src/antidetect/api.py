"""Public entry points.

The default pattern database is built once, when this module is imported,
and shared read-only by every call. All functions accept injected
collaborators so tests can pass a fixture database, a config or a seeded
random source.
"""

import random
from typing import Optional

from .analysis import TextAnalyzer
from .config import Config
from .exceptions import InvalidInputError
from .humanization import HumanizationPipeline, SourceInjector
from .models import HumanizationMode, HumanizationOptions, TextAnalysis
from .patterns import PatternDatabase, default_entries
from .utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_DATABASE = PatternDatabase(default_entries())

# Academic output still scoring below this gets an aggressive pass.
AUTO_AGGRESSIVE_THRESHOLD = 55.0


def _require_text(text) -> str:
    if not isinstance(text, str):
        raise InvalidInputError(f"Expected text as str, got {type(text).__name__}")
    return text


def _pipeline(database: Optional[PatternDatabase], config: Optional[Config]) -> HumanizationPipeline:
    return HumanizationPipeline(database or DEFAULT_DATABASE, config=config)


def analyze_text(
    text: str,
    locale: Optional[str] = None,
    database: Optional[PatternDatabase] = None,
    config: Optional[Config] = None,
) -> TextAnalysis:
    """Score text for AI-generated signal.

    Args:
        text: Text to analyze.
        locale: Declared locale; detected from the text when omitted.
        database: Signature table; the shared default when omitted.
        config: Engine configuration.

    Returns:
        A fresh TextAnalysis.

    Raises:
        InvalidInputError: If ``text`` is not a string.
    """
    text = _require_text(text)
    analyzer = TextAnalyzer(database or DEFAULT_DATABASE, config)
    return analyzer.analyze(text, locale)


def humanize_text_advanced(
    text: str,
    options: HumanizationOptions,
    rng: Optional[random.Random] = None,
    database: Optional[PatternDatabase] = None,
    config: Optional[Config] = None,
) -> str:
    """Humanize text with fully explicit options.

    Raises:
        InvalidInputError: If ``text`` is not a string or ``options`` is not
            a HumanizationOptions.
    """
    text = _require_text(text)
    if not isinstance(options, HumanizationOptions):
        raise InvalidInputError(
            f"Expected HumanizationOptions, got {type(options).__name__}"
        )
    return _pipeline(database, config).humanize(text, options, rng)


def quick_humanize(text: str, rng: Optional[random.Random] = None) -> str:
    """Strip stock phrases only, at low intensity."""
    return humanize_text_advanced(text, HumanizationOptions.for_mode(HumanizationMode.QUICK), rng)


def academic_humanize(text: str, rng: Optional[random.Random] = None) -> str:
    """Full formal-register rewrite, including cosmetic citation markers."""
    return humanize_text_advanced(text, HumanizationOptions.for_mode(HumanizationMode.ACADEMIC), rng)


def aggressive_humanize(text: str, rng: Optional[random.Random] = None) -> str:
    """High-intensity casual rewrite, with at most two passes."""
    return humanize_text_advanced(text, HumanizationOptions.for_mode(HumanizationMode.AGGRESSIVE), rng)


def auto_humanize(
    text: str,
    rng: Optional[random.Random] = None,
    database: Optional[PatternDatabase] = None,
    config: Optional[Config] = None,
) -> str:
    """Academic rewrite, escalated to aggressive when it still scores low."""
    text = _require_text(text)
    pipeline = _pipeline(database, config)
    result = pipeline.humanize(text, HumanizationOptions.for_mode(HumanizationMode.ACADEMIC), rng)
    if not result.strip():
        return result
    score = pipeline.analyzer.analyze(result).human_score
    if score < AUTO_AGGRESSIVE_THRESHOLD:
        logger.info(f"Academic result scored {score:.1f}, escalating to aggressive")
        result = pipeline.humanize(result, HumanizationOptions.for_mode(HumanizationMode.AGGRESSIVE), rng)
    return result


def inject_citations(
    text: str,
    discipline_hint: Optional[str] = None,
    rng: Optional[random.Random] = None,
    config: Optional[Config] = None,
) -> str:
    """Insert cosmetic, non-verified ``(Author, Year)`` markers.

    The markers come from a static pool and are never checked against the
    claim they follow or against any bibliography.
    """
    text = _require_text(text)
    if discipline_hint is not None and not isinstance(discipline_hint, str):
        raise InvalidInputError(
            f"Expected discipline hint as str, got {type(discipline_hint).__name__}"
        )
    return SourceInjector(config).inject_citations(text, discipline_hint, rng)

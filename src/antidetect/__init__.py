"""Offline engine that scores text for AI-generated signal and rewrites it.

Example:
    >>> from antidetect import analyze_text, quick_humanize
    >>> analysis = analyze_text("Следует отметить, что метод работает.")
    >>> analysis.human_score
"""

from .api import (
    DEFAULT_DATABASE,
    analyze_text,
    humanize_text_advanced,
    quick_humanize,
    academic_humanize,
    aggressive_humanize,
    auto_humanize,
    inject_citations,
)
from .config import Config, load_config, create_default_config
from .exceptions import AntiDetectError, InvalidInputError
from .models import (
    HumanizationMode,
    HumanizationOptions,
    PatternCategory,
    PatternMatch,
    ProtectedSpan,
    SpanKind,
    TextAnalysis,
    TextDetails,
)
from .patterns import PatternDatabase, PatternEntry
from .utils.logging import setup_logging
from .utils.nlp import detect_language

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_DATABASE",
    "analyze_text",
    "humanize_text_advanced",
    "quick_humanize",
    "academic_humanize",
    "aggressive_humanize",
    "auto_humanize",
    "inject_citations",
    "detect_language",
    "Config",
    "load_config",
    "create_default_config",
    "AntiDetectError",
    "InvalidInputError",
    "HumanizationMode",
    "HumanizationOptions",
    "PatternCategory",
    "PatternMatch",
    "ProtectedSpan",
    "SpanKind",
    "TextAnalysis",
    "TextDetails",
    "PatternDatabase",
    "PatternEntry",
    "setup_logging",
]

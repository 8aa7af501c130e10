"""Utility modules for the analysis and humanization engine."""

from .logging import (
    get_logger,
    setup_logging,
)
from .nlp import (
    SUPPORTED_LOCALES,
    tokenize_words,
    count_words,
    split_sentences,
    split_into_sentences,
    split_into_paragraphs,
    split_keeping_breaks,
    detect_language,
    normalize_locale,
    resolve_locale,
    coefficient_of_variation,
    is_heading,
    lower_first,
    upper_first,
    match_case,
)
from .nlp_manager import NLPManager

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # NLP
    "SUPPORTED_LOCALES",
    "tokenize_words",
    "count_words",
    "split_sentences",
    "split_into_sentences",
    "split_into_paragraphs",
    "split_keeping_breaks",
    "detect_language",
    "normalize_locale",
    "resolve_locale",
    "coefficient_of_variation",
    "is_heading",
    "lower_first",
    "upper_first",
    "match_case",
    "NLPManager",
]

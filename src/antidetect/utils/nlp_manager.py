"""NLP Manager: shared spaCy pipelines for sentence segmentation.

Each supported locale gets one blank spaCy pipeline with a rule-based
``sentencizer``; blank pipelines ship with spaCy itself, so nothing has to
be downloaded.
"""

from typing import Dict

import spacy

from .logging import get_logger

logger = get_logger(__name__)

# Token texts that close a sentence for the sentencizer.
SENTENCE_PUNCT = [".", "!", "?", "…", "...", "?!", "!?", "!!", "??", "?..", "!.."]


class NLPManager:
    """Lazily built, cached spaCy pipelines keyed by locale."""
    _instances: Dict[str, spacy.Language] = {}

    @classmethod
    def get_nlp(cls, locale: str) -> spacy.Language:
        """Return the segmentation pipeline for ``locale``.

        Args:
            locale: Language code understood by ``spacy.blank`` (``ru``, ``en``).

        Returns:
            Blank spaCy pipeline with a sentencizer.
        """
        nlp = cls._instances.get(locale)
        if nlp is None:
            logger.debug(f"Building spaCy pipeline for '{locale}'")
            nlp = spacy.blank(locale)
            nlp.add_pipe("sentencizer", config={"punct_chars": SENTENCE_PUNCT})
            cls._instances[locale] = nlp
        return nlp

    @classmethod
    def clear_cache(cls) -> None:
        """Drop every cached pipeline; they are rebuilt on next access."""
        cls._instances = {}

"""Tests for the text utilities."""

import io
import json
import logging

import pytest

from antidetect.utils.logging import get_logger, setup_logging
from antidetect.utils.nlp import (
    coefficient_of_variation,
    count_words,
    detect_language,
    is_heading,
    lower_first,
    match_case,
    normalize_locale,
    resolve_locale,
    split_into_paragraphs,
    split_into_sentences,
    split_keeping_breaks,
    split_sentences,
    tokenize_words,
    upper_first,
)
from antidetect.utils.nlp_manager import NLPManager


class TestTokenization:
    """Tests for word tokenization."""

    def test_tokens_are_lowercase_words(self):
        """Test that digits and punctuation are not tokens."""
        assert tokenize_words("Hello, world! 42 раза") == ["hello", "world", "раза"]

    def test_hyphenated_words_stay_whole(self):
        """Test that inner hyphens and apostrophes keep a word together."""
        assert tokenize_words("Какой-то don't") == ["какой-то", "don't"]

    def test_empty_text(self):
        assert tokenize_words("") == []
        assert count_words("") == 0


class TestSentenceSplitting:
    """Tests for sentence and paragraph splitting."""

    def test_split_sentences_reproduces_input(self):
        """Test that sentences and gaps join back to the paragraph."""
        text = "First one.  Second one! Third?"
        sentences, separators = split_sentences(text)
        assert sentences == ["First one.", "Second one!", "Third?"]
        joined = sentences[0] + "".join(s + t for s, t in zip(separators, sentences[1:]))
        assert joined == text

    def test_abbreviations_do_not_split(self):
        """Test that known abbreviations and initials are not boundaries."""
        assert split_into_sentences("Dr. Smith arrived. He sat down.") == [
            "Dr. Smith arrived.", "He sat down."
        ]
        assert len(split_into_sentences("Это сказал А. С. Пушкин. Все согласились.")) == 2

    def test_lowercase_continuation_does_not_split(self):
        assert split_into_sentences("Это т. е. пример.") == ["Это т. е. пример."]

    def test_line_breaks_end_sentences(self):
        assert split_into_sentences("Title line\nBody text here.") == ["Title line", "Body text here."]

    def test_closing_quote_stays_with_sentence(self):
        assert split_into_sentences("Он сказал: «Готово.» Потом ушёл.") == [
            "Он сказал: «Готово.»", "Потом ушёл."
        ]

    def test_dash_opens_next_sentence(self):
        sentences, separators = split_sentences("Все ушли. — Да, конечно.")
        assert sentences == ["Все ушли.", "— Да, конечно."]
        assert separators == [" "]

    def test_leading_and_trailing_whitespace_kept(self):
        sentences, separators = split_sentences("  Indented para.  Next one.  ")
        assert sentences == ["  Indented para.", "Next one.  "]
        assert separators == ["  "]

    def test_numbers_do_not_split(self):
        assert split_into_sentences("The value is 3.14 today. Then it rose.") == [
            "The value is 3.14 today.", "Then it rose."
        ]

    def test_paragraphs(self):
        text = "One.\n\n  \nTwo.\n\nThree."
        assert split_into_paragraphs(text) == ["One.", "Two.", "Three."]
        parts, breaks = split_keeping_breaks(text)
        rebuilt = parts[0] + "".join(b + p for b, p in zip(breaks, parts[1:]))
        assert rebuilt == text


class TestNLPManager:
    """Tests for the cached spaCy pipelines."""

    def test_pipelines_are_cached_per_locale(self):
        assert NLPManager.get_nlp("ru") is NLPManager.get_nlp("ru")
        assert NLPManager.get_nlp("ru") is not NLPManager.get_nlp("en")

    def test_pipeline_has_sentencizer(self):
        assert "sentencizer" in NLPManager.get_nlp("en").pipe_names

    def test_clear_cache_rebuilds(self):
        first = NLPManager.get_nlp("en")
        NLPManager.clear_cache()
        assert NLPManager.get_nlp("en") is not first


class TestLocales:
    """Tests for language detection and locale tags."""

    def test_detect_language(self):
        assert detect_language("Это русский текст.") == "ru"
        assert detect_language("This is English.") == "en"
        assert detect_language("", default="en") == "en"

    def test_normalize_locale(self):
        assert normalize_locale("ru-RU") == "ru"
        assert normalize_locale("en_US") == "en"
        assert normalize_locale("auto") is None
        assert normalize_locale("de") is None

    def test_resolve_locale_prefers_declared(self):
        assert resolve_locale("en", "Это русский текст.") == "en"
        assert resolve_locale(None, "Это русский текст.") == "ru"


class TestCoefficientOfVariation:
    """Tests for the sentence-length dispersion measure."""

    def test_uniform_values(self):
        assert coefficient_of_variation([12] * 10) == 0.0

    def test_alternating_values(self):
        assert coefficient_of_variation([4, 40] * 5) == pytest.approx(18 / 22)

    def test_too_few_values(self):
        assert coefficient_of_variation([7]) == 0.0
        assert coefficient_of_variation([]) == 0.0


class TestCasing:
    """Tests for capitalization helpers."""

    def test_lower_first_keeps_acronyms(self):
        assert lower_first("The cat") == "the cat"
        assert lower_first("NASA launched") == "NASA launched"
        assert lower_first("I think so") == "I think so"

    def test_upper_first_skips_leading_quotes(self):
        assert upper_first("«тест»") == "«Тест»"

    def test_match_case(self):
        assert match_case("в наши дни", "В современном мире") == "В наши дни"
        assert match_case("Заметим, что", "следует отметить, что") == "заметим, что"

    def test_is_heading(self):
        assert is_heading("# Title")
        assert is_heading("Introduction")
        assert not is_heading("This is a sentence.")


class TestLogging:
    """Tests for the logging helpers."""

    def test_loggers_share_namespace(self):
        assert get_logger("foo").name == "antidetect.foo"
        assert get_logger("antidetect.api").name == "antidetect.api"

    def test_json_output(self):
        """Test that JSON logging emits one parseable object per record."""
        stream = io.StringIO()
        logger = setup_logging("DEBUG", json_format=True, stream=stream)
        try:
            get_logger("tests").info("hello")
            record = json.loads(stream.getvalue().strip().splitlines()[-1])
            assert record["message"] == "hello"
            assert record["logger"] == "antidetect.tests"
        finally:
            logger.setLevel(logging.NOTSET)
            for handler in list(logger.handlers):
                if getattr(handler, "_antidetect_handler", False):
                    logger.removeHandler(handler)

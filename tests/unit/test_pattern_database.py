"""Tests for the signature database and matcher."""

import pytest

from antidetect.humanization.phrases import (
    ASIDES,
    DISCOURSE_MARKERS,
    MERGE_CONNECTORS,
    OPINION_PHRASES,
)
from antidetect.models import PatternCategory, PatternMatch
from antidetect.patterns import (
    PatternDatabase,
    PatternEntry,
    SignatureMatcher,
    default_entries,
    resolve_overlaps,
)

# Shortest text each hard regex signature can match.
SHORTEST_HARD_MATCHES = [
    ("ru", "Таким образом, можно заключить что"),
    ("ru", "играет особую роль"),
    ("ru", "играют особую роль"),
    ("ru", "Как языковая модель,"),
    ("ru", "Как ИИ,"),
    ("en", "In today's modern world"),
    ("en", "plays a key role"),
    ("en", "Let's dive into"),
    ("en", "That's a good question"),
    ("en", "I'd be glad to"),
    ("en", "As a language model,"),
    ("en", "As a AI,"),
]

FILLER_TEXT = "текст абзаца продолжается и содержит достаточно слов для проверки. "


def _match(start, end, weight=10.0, signature="x"):
    return PatternMatch(
        signature=signature, text="x" * (end - start), start=start, end=end,
        weight=weight, category=PatternCategory.FILLER,
    )


class TestShippedSignatures:
    """Tests for the curated signature table."""

    def test_minimum_size(self, database):
        """Test that at least sixty signatures ship."""
        assert len(database) >= 60

    def test_every_category_in_every_locale(self, database):
        for locale in ("ru", "en"):
            categories = {entry.category for entry in database.for_locale(locale)}
            assert categories == set(PatternCategory)

    def test_alternatives_never_match_signatures(self, database):
        """Test that a rewrite can never reintroduce a signature."""
        for entry in database.entries:
            for alternative in entry.all_alternatives():
                assert database.match_all(alternative, entry.locale) == [], (
                    entry.signature, alternative
                )

    def test_injected_phrases_never_match_signatures(self, database):
        """Test that markers, asides and stance phrases are clean."""
        for locale in ("ru", "en"):
            phrases = []
            for group in DISCOURSE_MARKERS[locale].values():
                phrases.extend(group)
            for group in ASIDES[locale].values():
                phrases.extend(group)
            phrases.extend(OPINION_PHRASES[locale])
            phrases.extend(MERGE_CONNECTORS[locale])
            for phrase in phrases:
                assert database.match_all(phrase, locale) == [], phrase

    def test_hard_literal_alternatives_keep_length(self, database):
        """Test that hard-strip rewrites stay within half to double length."""
        for entry in database.entries:
            if not entry.hard_strip or entry.is_regex:
                continue
            size = len(entry.signature)
            for alternative in entry.all_alternatives():
                assert 0.5 * size <= len(alternative) <= 2 * size, (
                    entry.signature, alternative
                )

    @pytest.mark.parametrize("locale,text", SHORTEST_HARD_MATCHES)
    def test_hard_regex_alternatives_keep_length(self, database, locale, text):
        """Test that rewrites of the shortest hard regex hit stay within half to double length."""
        matches = database.match_all(text, locale)
        assert len(matches) == 1
        assert matches[0].text == text
        entry = database.get(matches[0].signature, locale)
        assert entry.hard_strip
        for alternative in entry.all_alternatives():
            assert 0.5 * len(text) <= len(alternative) <= 2 * len(text), alternative

    def test_every_hard_regex_has_a_shortest_sample(self, database):
        covered = {
            database.match_all(text, locale)[0].signature
            for locale, text in SHORTEST_HARD_MATCHES
        }
        hard_regex = {e.signature for e in database.entries if e.hard_strip and e.is_regex}
        assert covered == hard_regex

    def test_hard_entries_have_alternatives(self, database):
        for entry in database.entries:
            if entry.hard_strip:
                assert entry.alternatives

    def test_default_entries_returns_fresh_list(self):
        entries = default_entries()
        entries.clear()
        assert len(default_entries()) >= 60


class TestMatching:
    """Tests for match_all."""

    def test_known_russian_example(self, database):
        text = "Следует отметить, что данный подход играет ключевую роль в современном мире."
        matches = database.match_all(text)
        assert len(matches) >= 3
        assert all(m.hard_strip for m in matches)
        assert [m.start for m in matches] == sorted(m.start for m in matches)

    @pytest.mark.parametrize("text,signature_start", [
        ("Данная тема является актуальной для многих.", "Данн"),
        ("Данный вопрос актуален сегодня.", "Данн"),
        ("В условиях быстро меняющегося мира всё иначе.", r"В\s+условиях"),
        ("Вопрос о воспитании детей всегда был острым.", "Вопрос"),
        ("Итак, давайте подумаем.", "Итак, давайте"),
        ("Это ключевой момент работы.", r"Это\s+"),
        ("Таким образом, мы можем двигаться дальше.", r"Таким\s+образом,(?="),
        ("Рассмотрим данный вопрос подробнее.", "Рассмотрим"),
        ("Безусловно, это так.", "Безусловно,(?="),
        ("Метод представляет большой интерес.", "представляет"),
    ])
    def test_russian_stock_constructions(self, database, text, signature_start):
        matches = database.match_all(text, "ru")
        assert len(matches) == 1
        assert matches[0].signature.startswith(signature_start)

    def test_topic_relevance_phrase(self, database):
        matches = database.match_all("This topic remains particularly relevant for schools.", "en")
        assert len(matches) == 1
        assert matches[0].category == PatternCategory.BOILERPLATE

    def test_enumeration_marks_only_the_opening(self, database):
        """Test that a first/second/third enumeration is flagged without hiding inner hits."""
        text = (
            "Во-первых, " + FILLER_TEXT
            + "Следует отметить, что " + FILLER_TEXT
            + "Во-вторых, " + FILLER_TEXT
            + "В-третьих, выводы ясны."
        )
        signatures = [m.signature for m in database.match_all(text, "ru")]
        assert len(signatures) == 2
        assert signatures[0].startswith("Во-первых")
        assert signatures[1] == "Следует отметить, что"

    def test_enumeration_needs_all_three_markers(self, database):
        text = "Во-первых, " + FILLER_TEXT + "Во-вторых, выводы ясны."
        assert database.match_all(text, "ru") == []

    def test_two_sided_comparison(self, database):
        text = "С одной стороны, " + FILLER_TEXT + "С другой стороны, есть риски."
        matches = database.match_all(text, "ru")
        assert len(matches) == 1
        assert matches[0].text == "С одной стороны"

    def test_case_insensitive(self, database):
        matches = database.match_all("СЛЕДУЕТ ОТМЕТИТЬ, ЧТО всё хорошо.", "ru")
        assert [m.signature for m in matches] == ["Следует отметить, что"]

    def test_yo_and_ye_are_equivalent(self, database):
        matches = database.match_all("Давайте разберемся в деталях.", "ru")
        assert [m.signature for m in matches] == ["Давайте разберёмся"]

    def test_flexible_whitespace(self, database):
        matches = database.match_all("It is  important to\nnote that it works.", "en")
        assert len(matches) == 1
        assert matches[0].text == "It is  important to\nnote that"

    def test_word_boundaries(self, database):
        """Test that signatures do not fire inside longer words."""
        assert database.match_all("Undelve intoxicated.", "en") == []

    def test_locale_filtering(self, database):
        """Test that only signatures of the requested locale apply."""
        text = "It is important to note that results vary."
        assert database.match_all(text, "ru") == []
        assert len(database.match_all(text, "en")) == 1
        # Detected from the text when no locale is declared
        assert len(database.match_all(text)) == 1

    def test_longest_match_wins(self, database):
        """Test that a long conclusion beats the shorter phrase inside it."""
        text = "Таким образом, можно сделать вывод, что метод работает."
        matches = database.match_all(text, "ru")
        assert len(matches) == 1
        assert matches[0].weight == 20
        assert matches[0].hard_strip

    def test_empty_text(self, database):
        assert database.match_all("") == []

    def test_match_all_is_pure(self, database):
        text = "Moreover, it is worth noting that this plays a key role."
        assert database.match_all(text) == database.match_all(text)

    def test_to_dict(self, database):
        match = database.match_all("Furthermore, it works.", "en")[0]
        data = match.to_dict()
        assert data["category"] == "transition"
        assert data["start"] == 0


class TestResolveOverlaps:
    """Tests for overlap resolution."""

    def test_longest_wins(self):
        result = resolve_overlaps([_match(0, 5), _match(2, 12), _match(14, 16)])
        assert [(m.start, m.end) for m in result] == [(2, 12), (14, 16)]

    def test_equal_length_prefers_earlier_start(self):
        result = resolve_overlaps([_match(3, 8), _match(0, 5)])
        assert [(m.start, m.end) for m in result] == [(0, 5)]

    def test_same_span_prefers_heavier(self):
        result = resolve_overlaps([_match(0, 5, 5.0, "a"), _match(0, 5, 15.0, "b")])
        assert [m.signature for m in result] == ["b"]

    def test_adjacent_spans_both_kept(self):
        result = resolve_overlaps([_match(0, 5), _match(5, 9)])
        assert len(result) == 2


class TestValidation:
    """Tests for database construction."""

    @pytest.mark.parametrize("entry", [
        PatternEntry("  ", "ru", 5, PatternCategory.FILLER),
        PatternEntry("слово", "ru", 0, PatternCategory.FILLER),
        PatternEntry("слово", "ru", 150, PatternCategory.FILLER),
        PatternEntry("word", "de", 5, PatternCategory.FILLER),
        PatternEntry("word", "en", 5, "filler"),
        PatternEntry("(unclosed", "en", 5, PatternCategory.FILLER, is_regex=True),
    ])
    def test_invalid_entries_rejected(self, entry):
        with pytest.raises(ValueError):
            PatternDatabase([entry])

    def test_fixture_database(self):
        """Test that a small injected table works on its own."""
        db = PatternDatabase([
            PatternEntry("blue sky", "en", 10, PatternCategory.FILLER, alternatives=("clear weather",)),
        ])
        assert len(db) == 1
        assert db.locales == ["en"]
        assert db.get("blue sky").alternatives == ("clear weather",)
        assert db.get("blue sky", "ru") is None
        assert len(db.match_all("A Blue Sky today.", "en")) == 1
        # No Russian signatures at all
        assert db.match_all("Синее небо.", "ru") == []

    def test_register_fallback(self):
        entry = PatternEntry(
            "x", "en", 5, PatternCategory.FILLER,
            alternatives=("neutral",), formal=("formal",),
        )
        assert entry.alternatives_for("formal") == ("formal",)
        assert entry.alternatives_for("casual") == ("neutral",)

    def test_matcher_skips_empty_matches(self):
        matcher = SignatureMatcher([
            PatternEntry("a*", "en", 5, PatternCategory.FILLER, is_regex=True),
        ])
        assert all(m.end > m.start for m in matcher.find("bbb aaa"))

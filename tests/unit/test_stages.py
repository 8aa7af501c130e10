"""Tests for the individual humanization stages."""

from antidetect.humanization import (
    Block,
    DiscourseInjection,
    Document,
    OpinionInjection,
    PatternStrip,
    SentenceRestructure,
)
from antidetect.humanization.document import decapitalize, lowercase_vocabulary
from antidetect.humanization.phrases import ASIDES, DISCOURSE_MARKERS, OPINION_PHRASES
from antidetect.models import HumanizationMode
from antidetect.utils.nlp import coefficient_of_variation, split_into_sentences

ANIMALS = ["cat", "dog", "bird", "fish", "cow", "fox", "owl", "bee", "ant", "elk"]


def _uniform_text(count=10):
    return " ".join(f"The {animal} rested quietly near the old barn." for animal in ANIMALS[:count])


class TestDocument:
    """Tests for the paragraph/sentence model."""

    def test_render_reproduces_input(self):
        text = (
            "# Title\n\nFirst sentence here.  Second one!\n\n"
            "- item one\n- item two\n\n  Indented para.  \n"
        )
        doc = Document.parse(text)
        assert doc.render() == text
        assert len(doc.prose_blocks()) == 2
        assert len(doc.sentence_refs()) == 3

    def test_set_sentence(self):
        doc = Document.parse("One here. Two here.")
        doc.set_sentence((0, 1), "Three here.")
        assert doc.render() == "One here. Three here."

    def test_list_items_are_not_prose(self):
        assert not Block.parse("- a single item.").prose
        assert Block.parse("A plain sentence.").prose

    def test_lowercase_vocabulary(self):
        vocab = lowercase_vocabulary("The cat and The dog", ["Это"])
        assert vocab == {"cat", "and", "dog", "это"}

    def test_decapitalize(self):
        assert decapitalize("The cat sat.", {"the"}) == "the cat sat."
        assert decapitalize("Moscow is big.", {"the"}) is None
        assert decapitalize("NASA is big.", set()) == "NASA is big."
        assert decapitalize("I think so.", set()) == "I think so."
        assert decapitalize("42 is big.", {"is"}) is None


class TestPatternStrip:
    """Tests for signature replacement."""

    def test_hard_signatures_removed(self, make_context, database):
        text = "Следует отметить, что данный подход играет ключевую роль в современном мире."
        context = make_context(text, mode=HumanizationMode.QUICK, locale="ru")
        result = PatternStrip().apply(text, context)
        assert database.match_all(result, "ru") == []
        assert result[0].isupper()
        assert "в современном мире" not in result

    def test_register_alternatives(self, make_context):
        text = "Furthermore, the results hold."
        context = make_context(text, mode=HumanizationMode.AGGRESSIVE)
        assert PatternStrip().apply(text, context) == "Plus, the results hold."

    def test_hard_only_leaves_soft_signatures(self, make_context):
        text = "Furthermore, it is important to note that the results hold."
        context = make_context(text, mode=HumanizationMode.QUICK)
        result = PatternStrip(hard_only=True).apply(text, context)
        assert result.startswith("Furthermore, ")
        assert "important to note" not in result

    def test_detection_only_signatures_are_kept(self, make_context, database):
        text = "Это ключевой момент работы."
        assert database.match_all(text, "ru")
        context = make_context(text, mode=HumanizationMode.AGGRESSIVE, locale="ru")
        assert PatternStrip().apply(text, context) == text

    def test_prefer_longest(self, make_context):
        text = "Следует отметить, что метод работает."
        context = make_context(text, mode=HumanizationMode.QUICK, locale="ru")
        result = PatternStrip(prefer_longest=True).apply(text, context)
        assert result == "Нужно сказать, что метод работает."


class TestSentenceRestructure:
    """Tests for merging and splitting sentences."""

    def test_merges_uniform_sentences(self, make_context):
        text = (
            "The cat sat on the mat. The dog ran to the park. The bird flew over the house. "
            "The fish swam in the pond. The cow slept in the barn. The fox hid under the log."
        )
        context = make_context(text)
        result = SentenceRestructure().apply(text, context)
        lengths = context.analyzer.statistics.sentence_lengths(result)
        assert len(lengths) < 6
        assert coefficient_of_variation(lengths) > 0
        for word in ["cat", "dog", "bird", "fish", "cow", "fox"]:
            assert word in result

    def test_skips_bursty_text(self, make_context):
        text = " ".join(["Short lines matter here.", "This " + "long " * 38 + "sentence."] * 2)
        context = make_context(text)
        assert SentenceRestructure().apply(text, context) == text

    def test_split_at_semicolon(self, make_context):
        sentence = (
            "The committee reviewed every single proposal submitted during the spring "
            "session; the members then voted on the final budget for the coming year."
        )
        stage = SentenceRestructure()
        offset = stage._split_offset(sentence, make_context(sentence))
        assert sentence[offset] == ";"

        block = Block.parse(sentence)
        SentenceRestructure._split(block, 0, offset)
        assert block.sentences == [
            "The committee reviewed every single proposal submitted during the spring session.",
            "The members then voted on the final budget for the coming year.",
        ]

    def test_split_at_conjunction(self, make_context):
        sentence = (
            "We collected samples from twelve different regions over three years, "
            "and the analysis revealed a clear seasonal pattern."
        )
        stage = SentenceRestructure()
        offset = stage._split_offset(sentence, make_context(sentence))
        block = Block.parse(sentence)
        SentenceRestructure._split(block, 0, offset)
        assert block.sentences[1] == "And the analysis revealed a clear seasonal pattern."

    def test_no_split_with_short_side(self, make_context):
        sentence = "Yes; the committee reviewed every single proposal submitted during the spring session."
        stage = SentenceRestructure()
        assert stage._split_offset(sentence, make_context(sentence)) is None


class TestDiscourseInjection:
    """Tests for discourse markers and asides."""

    def test_marker_budget(self, make_context):
        text = _uniform_text()
        result = DiscourseInjection().apply(text, make_context(text))
        sentences = split_into_sentences(result)
        markers = DISCOURSE_MARKERS["en"]["formal"]

        assert len(sentences) == 10
        assert sentences[0].startswith("The cat rested")
        assert sum(1 for s in sentences if s.startswith(tuple(markers))) == 3
        assert result.count("—") == 1

    def test_existing_markers_count(self, make_context):
        sentences = split_into_sentences(_uniform_text())
        for i in (1, 2, 3):
            sentences[i] = "Indeed, " + sentences[i][0].lower() + sentences[i][1:]
        text = " ".join(sentences)
        result = DiscourseInjection().apply(text, make_context(text))
        markers = tuple(DISCOURSE_MARKERS["en"]["formal"])
        assert sum(1 for s in split_into_sentences(result) if s.startswith(markers)) == 3

    def test_hedged_asides_when_meaning_may_drift(self, make_context):
        text = _uniform_text()
        context = make_context(text, preserve_meaning=False)
        result = DiscourseInjection().apply(text, context)
        assert any(aside in result for aside in ASIDES["en"]["hedged"])

    def test_growth_cap(self, make_context):
        text = _uniform_text()
        context = make_context(text, max_length=len(text))
        assert DiscourseInjection().apply(text, context) == text

    def test_single_sentence_untouched(self, make_context):
        text = "The cat rested quietly near the old barn."
        assert DiscourseInjection().apply(text, make_context(text)) == text


class TestOpinionInjection:
    """Tests for stance phrases."""

    def test_one_phrase_per_budget(self, make_context):
        text = _uniform_text(3) + "\n\n" + " ".join(
            f"The {animal} slept soundly in the warm barn." for animal in ANIMALS[3:6]
        )
        result = OpinionInjection().apply(text, make_context(text))
        phrases = OPINION_PHRASES["en"]
        assert sum(result.count(p) for p in phrases) == 1
        paragraphs = result.split("\n\n")
        assert any(p.startswith(tuple(phrases)) for p in paragraphs)

    def test_paragraphs_with_stance_skipped(self, make_context):
        text = (
            "In our view, the cat rested. The dog slept.\n\n"
            "In our view, the owl watched. The bee flew."
        )
        assert OpinionInjection().apply(text, make_context(text)) == text

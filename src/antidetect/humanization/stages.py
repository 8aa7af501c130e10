"""Rewrite stages shared by every humanization mode.

A stage takes the working text (protected spans already replaced by
placeholders) plus a StageContext and returns new working text. Modes only
differ in which stages run and with what parameters.
"""

import math
import random
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from ..analysis import TextAnalyzer
from ..config import Config
from ..models import HumanizationMode, HumanizationOptions, PatternCategory, PatternMatch, ProtectedSpan
from ..patterns import PatternDatabase, PatternEntry
from ..utils.logging import get_logger
from ..utils.nlp import coefficient_of_variation, match_case, tokenize_words, upper_first
from .document import Block, Document, decapitalize
from .phrases import MERGE_CONNECTORS, SPLIT_CONJUNCTIONS

logger = get_logger(__name__)


@dataclass(frozen=True)
class ModePreset:
    """Stage subset and register of one humanization mode."""
    mode: HumanizationMode
    register: str
    stages: Tuple[str, ...]
    max_passes: int = 1


PRESETS: Dict[HumanizationMode, ModePreset] = {
    HumanizationMode.QUICK: ModePreset(
        HumanizationMode.QUICK, "neutral", ("strip",), 1,
    ),
    HumanizationMode.ACADEMIC: ModePreset(
        HumanizationMode.ACADEMIC, "formal",
        ("strip", "restructure", "discourse", "opinion", "citations"), 1,
    ),
    HumanizationMode.AGGRESSIVE: ModePreset(
        HumanizationMode.AGGRESSIVE, "casual",
        ("strip", "restructure", "discourse", "opinion"), 2,
    ),
}


@dataclass
class StageContext:
    """Everything a stage may consult during one pass."""
    options: HumanizationOptions
    preset: ModePreset
    rng: random.Random
    locale: str
    database: PatternDatabase
    analyzer: TextAnalyzer
    config: Config
    spans: List[ProtectedSpan] = field(default_factory=list)
    max_length: int = 0  # insertions stop past this working-text length
    vocabulary: Set[str] = field(default_factory=set)

    @property
    def register(self) -> str:
        return self.preset.register


class PatternStrip:
    """Replace signature hits with curated alternatives.

    Replacements run right to left so earlier offsets stay valid, and repeat
    for a few rounds in case a rewrite exposed another hit.
    """

    name = "strip"

    def __init__(self, hard_only: bool = False, prefer_longest: bool = False):
        """Initialize strip stage.

        Args:
            hard_only: Only touch hard-strip signatures.
            prefer_longest: Pick the longest alternative instead of a random one.
        """
        self.hard_only = hard_only
        self.prefer_longest = prefer_longest

    def _choose(self, entry: PatternEntry, context: StageContext) -> Optional[str]:
        options = entry.alternatives_for(context.register)
        if not options:
            return None
        if self.prefer_longest:
            return max(options, key=len)
        return context.rng.choice(options)

    def _replace(self, text: str, matches: List[PatternMatch], context: StageContext) -> Tuple[str, int]:
        replaced = 0
        for match in sorted(matches, key=lambda m: m.start, reverse=True):
            entry = context.database.get(match.signature, match.locale)
            if entry is None:
                continue
            alternative = self._choose(entry, context)
            if alternative is None:
                # Only soft fillers may simply disappear.
                if entry.hard_strip or entry.category is not PatternCategory.FILLER:
                    continue
                head = text[:match.start]
                tail = text[match.end:].lstrip(" ")
                if not head.strip() or head.rstrip()[-1] in ".!?…":
                    tail = upper_first(tail)
                text = head + tail
            else:
                text = text[:match.start] + match_case(alternative, match.text) + text[match.end:]
            replaced += 1
        return text, replaced

    def apply(self, text: str, context: StageContext) -> str:
        rounds = context.config.pipeline.strip_rounds
        for round_number in range(rounds):
            matches = context.database.match_all(text, context.locale)
            if self.hard_only:
                matches = [m for m in matches if m.hard_strip]
            if not matches:
                break
            text, replaced = self._replace(text, matches, context)
            logger.debug(f"Strip round {round_number + 1}: replaced {replaced}/{len(matches)}")
            if not replaced:
                break
        return text


Operation = Tuple[str, int, int, int]  # kind, block index, sentence index, cut offset


class SentenceRestructure:
    """Merge short neighbours and split long sentences to raise burstiness.

    Each step scores every candidate operation by the sentence-length CV it
    would produce, then applies a random one among the best three that
    improve on the current CV.
    """

    name = "restructure"

    def __init__(self):
        self._split_points: Dict[str, re.Pattern] = {
            locale: re.compile(
                r";\s+|,\s+(?=(?:" + "|".join(conjunctions) + r")\s)",
                re.IGNORECASE,
            )
            for locale, conjunctions in SPLIT_CONJUNCTIONS.items()
        }

    @staticmethod
    def _lengths(doc: Document) -> Dict[Tuple[int, int], int]:
        return {ref: len(tokenize_words(doc.sentence(ref))) for ref in doc.sentence_refs()}

    @staticmethod
    def _fixed_lengths(doc: Document, context: StageContext) -> List[int]:
        lengths = []
        for block in doc.blocks:
            if not block.prose:
                lengths.extend(context.analyzer.statistics.sentence_lengths(block.raw))
        return lengths

    @staticmethod
    def _mergeable(first: str) -> bool:
        body = first.rstrip()
        return body.endswith(".") and not body.endswith("..")

    def _split_offset(self, sentence: str, context: StageContext) -> Optional[int]:
        pattern = self._split_points.get(context.locale)
        if pattern is None:
            return None
        pipeline = context.config.pipeline
        best = None
        middle = len(sentence) / 2
        for m in pattern.finditer(sentence):
            left = len(tokenize_words(sentence[:m.start()]))
            right = len(tokenize_words(sentence[m.end():]))
            if left < pipeline.min_split_side_words or right < pipeline.min_split_side_words:
                continue
            if best is None or abs(m.start() - middle) < abs(best - middle):
                best = m.start()
        return best

    def _candidates(
        self,
        doc: Document,
        lengths: Dict[Tuple[int, int], int],
        fixed: List[int],
        context: StageContext,
    ) -> List[Tuple[float, Operation]]:
        pipeline = context.config.pipeline
        refs = list(lengths)
        base = [lengths[ref] for ref in refs]
        scored = []

        for k, ref in enumerate(refs):
            block_index, j = ref
            block = doc.blocks[block_index]
            sentence = block.sentences[j]

            # Merge with the next sentence of the same paragraph.
            if j + 1 < len(block.sentences):
                a, b = base[k], base[k + 1]
                if (
                    a and b
                    and a + b <= pipeline.max_merge_words
                    and self._mergeable(sentence)
                    and decapitalize(block.sentences[j + 1], context.vocabulary) is not None
                ):
                    values = [n for n in base[:k] + [a + b] + base[k + 2:] if n] + fixed
                    scored.append((coefficient_of_variation(values), ("merge", block_index, j, 0)))

            # Split at a semicolon or comma + conjunction.
            if base[k] >= pipeline.min_split_words:
                offset = self._split_offset(sentence, context)
                if offset is not None:
                    left = len(tokenize_words(sentence[:offset]))
                    right = base[k] - left
                    values = [n for n in base[:k] + [left, right] + base[k + 1:] if n] + fixed
                    scored.append((coefficient_of_variation(values), ("split", block_index, j, offset)))
        return scored

    def _merge(self, block: Block, j: int, context: StageContext):
        first = block.sentences[j].rstrip()
        second = decapitalize(block.sentences[j + 1], context.vocabulary)
        connector = context.rng.choice(MERGE_CONNECTORS.get(context.locale, ["; "]))
        conjunctions = SPLIT_CONJUNCTIONS.get(context.locale, [])
        opener = tokenize_words(second)[:1]
        if connector.startswith(",") and opener and opener[0] in conjunctions:
            connector = "; "
        block.sentences[j:j + 2] = [first[:-1] + connector + second]
        del block.separators[j]

    @staticmethod
    def _split(block: Block, j: int, offset: int):
        sentence = block.sentences[j]
        left = sentence[:offset].rstrip(" ,;") + "."
        right = upper_first(sentence[offset + 1:].lstrip())
        block.sentences[j:j + 1] = [left, right]
        block.separators.insert(j, " ")

    def apply(self, text: str, context: StageContext) -> str:
        pipeline = context.config.pipeline
        cv = context.analyzer.sentence_length_cv(text)
        if cv >= pipeline.target_cv:
            logger.debug(f"Restructure skipped: CV {cv:.3f} already at target")
            return text

        doc = Document.parse(text)
        refs = doc.sentence_refs()
        if len(refs) < 2:
            return text

        max_ops = math.ceil(len(refs) * context.options.intensity * pipeline.restructure_fraction)
        fixed = self._fixed_lengths(doc, context)
        applied = 0
        for _ in range(max_ops):
            lengths = self._lengths(doc)
            current = coefficient_of_variation([n for n in lengths.values() if n] + fixed)
            if current >= pipeline.target_cv:
                break
            improving = [c for c in self._candidates(doc, lengths, fixed, context) if c[0] > current]
            if not improving:
                break
            improving.sort(key=lambda c: -c[0])
            _, (kind, block_index, j, offset) = context.rng.choice(improving[:3])
            block = doc.blocks[block_index]
            if kind == "merge":
                self._merge(block, j, context)
            else:
                self._split(block, j, offset)
            applied += 1
            if len(doc.render()) > context.max_length:
                break

        logger.debug(f"Restructure applied {applied} operations (max {max_ops})")
        return doc.render()


class CitationInjection:
    """Academic-mode stage delegating to a SourceInjector."""

    name = "citations"

    def __init__(self, injector):
        self.injector = injector

    def apply(self, text: str, context: StageContext) -> str:
        return self.injector.insert_markers(
            text,
            spans=context.spans,
            discipline_hint=context.options.discipline_hint,
            rng=context.rng,
            locale=context.locale,
            max_length=context.max_length,
        )

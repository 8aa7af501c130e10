"""Pattern injector for humanizing machine-sounding text.

Injects human writing patterns into the working text:
- Discourse markers at the start of a bounded share of sentences
- Em-dash asides before the closing period of a few sentences
- First-person plural stance phrases, at most one per paragraph
"""

import math
import re
from typing import List, Optional, Tuple

from ..utils.logging import get_logger
from .document import Document, decapitalize
from .phrases import ASIDES, DISCOURSE_MARKERS, OPINION_PHRASES, all_asides, all_markers
from .stages import StageContext

logger = get_logger(__name__)

Ref = Tuple[int, int]


def _prefix_pattern(phrases: List[str]) -> re.Pattern:
    heads = sorted({p.rstrip(",").rstrip() for p in phrases}, key=len, reverse=True)
    return re.compile(r"^\s*(?:" + "|".join(re.escape(h) for h in heads) + r")(?!\w)", re.IGNORECASE)


class DiscourseInjection:
    """Prepend discourse markers and add em-dash asides.

    The marker budget is ``floor(n_sentences * intensity * fraction)`` minus
    the sentences that already open with a marker. The first sentence of the
    document is never marked. Contrastive markers are only used when the
    caller allows meaning to drift.
    """

    name = "discourse"

    def _markers(self, context: StageContext) -> List[str]:
        groups = DISCOURSE_MARKERS.get(context.locale, {})
        register = "casual" if context.register == "casual" else "formal"
        markers = list(groups.get(register, []))
        if not context.options.preserve_meaning:
            markers.extend(groups.get("contrastive", []))
        return markers

    def _asides(self, context: StageContext) -> List[str]:
        groups = ASIDES.get(context.locale, {})
        return groups.get("neutral" if context.options.preserve_meaning else "hedged", [])

    def _inject_markers(self, doc: Document, refs: List[Ref], context: StageContext, length: int) -> int:
        pipeline = context.config.pipeline
        known = _prefix_pattern(all_markers(context.locale))
        existing = [ref for ref in refs if known.match(doc.sentence(ref))]
        budget = math.floor(len(refs) * context.options.intensity * pipeline.discourse_fraction)
        budget -= len(existing)
        markers = self._markers(context)
        if budget <= 0 or not markers:
            return length

        eligible = [
            ref for ref in refs[1:]
            if ref not in existing and decapitalize(doc.sentence(ref), context.vocabulary) is not None
        ]
        chosen = context.rng.sample(eligible, min(budget, len(eligible)))
        inserted = 0
        for ref in sorted(chosen):
            marker = context.rng.choice(markers)
            sentence = doc.sentence(ref)
            rewritten = f"{marker} {decapitalize(sentence, context.vocabulary)}"
            delta = len(rewritten) - len(sentence)
            if length + delta > context.max_length:
                logger.debug("Discourse markers stopped at growth cap")
                break
            doc.set_sentence(ref, rewritten)
            length += delta
            inserted += 1

        logger.debug(f"Inserted {inserted} discourse markers (budget {budget})")
        return length

    def _inject_asides(self, doc: Document, refs: List[Ref], context: StageContext, length: int) -> int:
        pipeline = context.config.pipeline
        known = all_asides(context.locale)
        existing = [ref for ref in refs if any(a in doc.sentence(ref) for a in known)]
        budget = min(
            pipeline.max_parentheticals,
            math.floor(len(refs) * context.options.intensity * pipeline.parenthetical_fraction),
        ) - len(existing)
        asides = self._asides(context)
        if budget <= 0 or not asides:
            return length

        eligible = []
        for ref in refs:
            body = doc.sentence(ref).rstrip()
            if body.endswith(".") and not body.endswith("..") and "—" not in body and ref not in existing:
                eligible.append(ref)

        chosen = context.rng.sample(eligible, min(budget, len(eligible)))
        for ref in sorted(chosen):
            sentence = doc.sentence(ref)
            body = sentence.rstrip()
            aside = context.rng.choice(asides)
            rewritten = f"{body[:-1]} {aside}.{sentence[len(body):]}"
            delta = len(rewritten) - len(sentence)
            if length + delta > context.max_length:
                break
            doc.set_sentence(ref, rewritten)
            length += delta
        return length

    def apply(self, text: str, context: StageContext) -> str:
        doc = Document.parse(text)
        refs = doc.sentence_refs()
        if len(refs) < 2:
            return text
        length = self._inject_markers(doc, refs, context, len(text))
        self._inject_asides(doc, refs, context, length)
        return doc.render()


class OpinionInjection:
    """Add hedged stance phrases at paragraph boundaries."""

    name = "opinion"

    def _target(self, sentences: List[str], context: StageContext, markers: re.Pattern) -> Optional[int]:
        # First sentence preferred, the last one otherwise.
        for j in dict.fromkeys([0, len(sentences) - 1]):
            sentence = sentences[j]
            if markers.match(sentence):
                continue
            if decapitalize(sentence, context.vocabulary) is not None:
                return j
        return None

    def apply(self, text: str, context: StageContext) -> str:
        phrases = OPINION_PHRASES.get(context.locale, [])
        if not phrases:
            return text
        doc = Document.parse(text)
        prose = doc.prose_blocks()
        if not prose:
            return text

        opinion_anywhere = re.compile(
            "|".join(re.escape(p.rstrip(",")) for p in phrases), re.IGNORECASE
        )
        markers = _prefix_pattern(all_markers(context.locale))

        eligible = []
        for index, block in prose:
            if any(opinion_anywhere.search(s) for s in block.sentences):
                continue
            target = self._target(block.sentences, context, markers)
            if target is not None:
                eligible.append((index, target))

        budget = math.ceil(len(prose) * context.options.intensity * context.config.pipeline.opinion_fraction)
        chosen = context.rng.sample(eligible, min(budget, len(eligible)))
        length = len(text)
        inserted = 0
        for index, j in sorted(chosen):
            block = doc.blocks[index]
            sentence = block.sentences[j]
            phrase = context.rng.choice(phrases)
            rewritten = f"{phrase} {decapitalize(sentence, context.vocabulary)}"
            delta = len(rewritten) - len(sentence)
            if length + delta > context.max_length:
                logger.debug("Stance phrases stopped at growth cap")
                break
            block.sentences[j] = rewritten
            length += delta
            inserted += 1

        logger.debug(f"Inserted {inserted} stance phrases (budget {budget})")
        return doc.render()

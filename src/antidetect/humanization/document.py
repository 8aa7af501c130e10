"""Paragraph/sentence model of the working text.

Stages edit sentences in place and render the document back. Rendering an
unmodified document reproduces the input exactly, because paragraph breaks,
sentence gaps and surrounding whitespace are all kept.
"""

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set, Tuple

from ..utils.nlp import (
    is_heading,
    lower_first,
    split_keeping_breaks,
    split_sentences,
    tokenize_words,
)

_LETTER = re.compile(r"[^\W\d_]")
_LIST_ITEM = re.compile(r"^\s*(?:[-*+•>|]|\ue000[\ue010-\ue019]+\ue001[.)]\s)")
_LOWERCASE_WORD = re.compile(r"(?<!\w)[^\W\d_]+")


@dataclass
class Block:
    """One paragraph of the working text."""
    lead: str
    trail: str
    sentences: List[str] = field(default_factory=list)
    separators: List[str] = field(default_factory=list)
    prose: bool = False
    raw: str = ""

    @classmethod
    def parse(cls, text: str) -> "Block":
        core = text.strip()
        lead = text[:len(text) - len(text.lstrip())]
        trail = text[len(text.rstrip()):]
        prose = bool(
            core
            and "\n" not in core
            and not is_heading(core)
            and not _LIST_ITEM.match(core)
            and _LETTER.search(core)
        )
        if not prose:
            return cls(lead="", trail="", prose=False, raw=text)
        sentences, separators = split_sentences(core)
        return cls(lead=lead, trail=trail, sentences=sentences,
                   separators=separators, prose=True, raw=text)

    def render(self) -> str:
        if not self.prose:
            return self.raw
        parts = [self.sentences[0]]
        for separator, sentence in zip(self.separators, self.sentences[1:]):
            parts.append(separator)
            parts.append(sentence)
        return self.lead + "".join(parts) + self.trail

    def word_count(self) -> int:
        return sum(len(tokenize_words(s)) for s in self.sentences)


class Document:
    """Working text split into blocks, keeping the exact paragraph breaks."""

    def __init__(self, blocks: List[Block], breaks: List[str]):
        self.blocks = blocks
        self.breaks = breaks

    @classmethod
    def parse(cls, text: str) -> "Document":
        parts, breaks = split_keeping_breaks(text)
        return cls([Block.parse(part) for part in parts], breaks)

    def render(self) -> str:
        out = [self.blocks[0].render()] if self.blocks else []
        for brk, block in zip(self.breaks, self.blocks[1:]):
            out.append(brk)
            out.append(block.render())
        return "".join(out)

    def prose_blocks(self) -> List[Tuple[int, Block]]:
        return [(i, block) for i, block in enumerate(self.blocks) if block.prose]

    def sentence_refs(self) -> List[Tuple[int, int]]:
        """(block index, sentence index) of every prose sentence in order."""
        refs = []
        for i, block in self.prose_blocks():
            refs.extend((i, j) for j in range(len(block.sentences)))
        return refs

    def sentence(self, ref: Tuple[int, int]) -> str:
        return self.blocks[ref[0]].sentences[ref[1]]

    def set_sentence(self, ref: Tuple[int, int], value: str):
        self.blocks[ref[0]].sentences[ref[1]] = value


def lowercase_vocabulary(text: str, extra: Iterable[str] = ()) -> Set[str]:
    """Words that appear in lowercase somewhere in ``text``.

    A capitalized sentence opener found in this set is an ordinary word and
    can be lowercased safely; anything else may be a proper noun.
    """
    vocab = {m.group(0) for m in _LOWERCASE_WORD.finditer(text) if m.group(0)[0].islower()}
    vocab.update(word.lower() for word in extra)
    return vocab


def first_word(sentence: str) -> Optional[str]:
    tokens = tokenize_words(sentence)
    if not tokens:
        return None
    stripped = sentence.lstrip(" \"«“'(")
    if not stripped or not _LETTER.match(stripped[0]):
        return None
    return tokens[0]


def decapitalize(sentence: str, vocabulary: Set[str]) -> Optional[str]:
    """Lowercase the sentence opener when that is safe, else None.

    Acronyms and ``I`` are kept as they are.
    """
    stripped = sentence.lstrip()
    if not stripped or not _LETTER.match(stripped[0]):
        return None
    word = first_word(stripped)
    if word is None:
        return None
    raw = stripped[:len(word)]
    if raw == "I" or (len(raw) > 1 and raw.isupper()):
        return stripped
    if word in vocabulary or word.replace("ё", "е") in vocabulary:
        return lower_first(stripped)
    return None

"""Lightweight text utilities: tokens, sentences, paragraphs, locales.

Sentence boundaries come from a blank spaCy pipeline; tokens and
paragraphs are split with nltk and regexes.
"""

import re
from typing import Iterable, List, Optional, Tuple

import numpy as np
from nltk.tokenize import RegexpTokenizer

from .logging import get_logger
from .nlp_manager import NLPManager

logger = get_logger(__name__)

SUPPORTED_LOCALES = ("ru", "en")

# Letter runs with inner hyphens/apostrophes; digits are never tokens.
_WORD_TOKENIZER = RegexpTokenizer(r"[^\W\d_]+(?:[-'’][^\W\d_]+)*")

_SENTENCE_END = re.compile(r"([.!?…]+)([\"»”’')\]]*)$")
_PARAGRAPH_BREAK = re.compile(r"(\n[ \t]*\n\s*)")
_WHITESPACE = re.compile(r"\s+")
_CYRILLIC = re.compile(r"[а-яё]", re.IGNORECASE)
_LATIN = re.compile(r"[a-z]", re.IGNORECASE)
_FIRST_WORD = re.compile(r"[^\W\d_]+(?:['’][^\W\d_]+)?")
_TRAILING_WORD = re.compile(r"(\w+)$")

ABBREVIATIONS = {
    # Russian
    "др", "пр", "гг", "см", "ср", "стр", "им", "рис", "табл", "тыс", "млн",
    "млрд", "руб", "напр", "проф", "акад", "доц", "ок", "прим",
    # English
    "dr", "mr", "mrs", "ms", "prof", "vs", "fig", "no", "vol", "al", "etc",
    "inc", "ltd", "jr", "sr", "st", "cf", "pp", "approx",
}

SENTENCE_TERMINALS = ".!?…"
CLOSING_MARKS = "\"»”’')]"
OPENING_MARKS = "\"«“'([—–"


def tokenize_words(text: str) -> List[str]:
    """Split text into lowercase word tokens."""
    if not text:
        return []
    return [token.lower() for token in _WORD_TOKENIZER.tokenize(text)]


def count_words(text: str) -> int:
    """Count word tokens in text."""
    return len(tokenize_words(text))


def _is_abbreviation(prefix: str) -> bool:
    match = _TRAILING_WORD.search(prefix)
    if not match:
        return False
    word = match.group(1)
    # Initials ("А. С. Пушкин") and "т. е." style contractions.
    if len(word) == 1 and word.isalpha():
        return True
    return word.lower() in ABBREVIATIONS


def _candidate_starts(text: str) -> List[int]:
    """Sentence start offsets proposed by spaCy's sentencizer."""
    doc = NLPManager.get_nlp(detect_language(text))(text)
    return [sent.start_char for sent in doc.sents][1:]


def split_sentences(text: str) -> Tuple[List[str], List[str]]:
    """Split a single paragraph into sentences, keeping the gaps.

    spaCy proposes the boundaries; a boundary is kept only when a terminal
    mark and whitespace precede it, the next sentence does not continue in
    lowercase, and the period does not close an abbreviation or initial.
    ``"".join`` of the interleaved sentences and separators reproduces the
    input exactly.

    Args:
        text: Paragraph text.

    Returns:
        Tuple of (sentences, separators) with ``len(separators) ==
        len(sentences) - 1``.
    """
    if not text:
        return [], []

    sentences: List[str] = []
    separators: List[str] = []
    start = 0
    for boundary in _candidate_starts(text):
        # spaCy may start a sentence on a whitespace token or after opening marks;
        # the kept boundary is the end of the first gap after the previous sentence.
        cursor = boundary
        while cursor > start and (text[cursor - 1].isspace() or text[cursor - 1] in OPENING_MARKS):
            cursor -= 1
        gap = _WHITESPACE.search(text, cursor)
        if not gap or gap.start() > boundary:
            continue
        gap_start, boundary = gap.start(), gap.end()
        if gap_start <= start or boundary >= len(text):
            continue
        end = _SENTENCE_END.search(text, start, gap_start)
        if not end:
            continue
        if text[boundary].islower():
            continue
        if end.group(1) == "." and _is_abbreviation(text[start:end.start()]):
            continue
        sentences.append(text[start:gap_start])
        separators.append(text[gap_start:boundary])
        start = boundary
    sentences.append(text[start:])
    return sentences, separators


def split_into_sentences(text: str) -> List[str]:
    """Split arbitrary text into sentences; every line break ends one."""
    result = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        sentences, _ = split_sentences(line)
        result.extend(s.strip() for s in sentences if s.strip())
    return result


def split_into_paragraphs(text: str) -> List[str]:
    """Split text on blank lines, dropping empty paragraphs."""
    return [p.strip() for p in _PARAGRAPH_BREAK.split(text)[::2] if p.strip()]


def split_keeping_breaks(text: str) -> Tuple[List[str], List[str]]:
    """Split text on blank lines, keeping the exact break strings."""
    parts = _PARAGRAPH_BREAK.split(text)
    return parts[::2], parts[1::2]


def detect_language(text: str, default: str = "ru") -> str:
    """Guess ``ru`` or ``en`` from Cyrillic vs Latin letter counts."""
    cyrillic = len(_CYRILLIC.findall(text or ""))
    latin = len(_LATIN.findall(text or ""))
    if cyrillic == latin:
        return default
    return "ru" if cyrillic > latin else "en"


def normalize_locale(tag: Optional[str]) -> Optional[str]:
    """Reduce a locale tag such as ``ru-RU`` to a supported code.

    Returns:
        Supported locale code, or None for ``auto``/unknown tags.
    """
    if not tag or tag.lower() == "auto":
        return None
    code = tag.lower().replace("_", "-").split("-")[0]
    if code in SUPPORTED_LOCALES:
        return code
    logger.warning(f"Unsupported locale '{tag}', falling back to detection")
    return None


def resolve_locale(tag: Optional[str], text: str, default: str = "ru") -> str:
    """Use the declared locale when supported, otherwise detect it."""
    return normalize_locale(tag) or detect_language(text, default)


def coefficient_of_variation(values: Iterable[float]) -> float:
    """Population stdev / mean; 0.0 for fewer than two values."""
    arr = np.asarray(list(values), dtype=float)
    if arr.size < 2:
        return 0.0
    mean = arr.mean()
    if mean <= 0:
        return 0.0
    return float(arr.std() / mean)


def is_heading(block: str) -> bool:
    """Heuristic for heading lines: markdown ``#`` or short unpunctuated lines."""
    stripped = block.strip()
    if not stripped:
        return False
    if stripped.startswith("#"):
        return True
    if "\n" in stripped:
        return False
    return len(stripped.split()) <= 12 and stripped[-1] not in SENTENCE_TERMINALS + CLOSING_MARKS + ":;,"


def _first_letter_index(text: str) -> int:
    for i, char in enumerate(text):
        if char.isalpha():
            return i
        if not char.isspace() and char not in "\"«“'(—-–":
            return -1
    return -1


def lower_first(text: str) -> str:
    """Lowercase the first letter unless it starts an acronym or ``I``."""
    i = _first_letter_index(text)
    if i < 0:
        return text
    word = _FIRST_WORD.match(text, i)
    if word:
        token = word.group(0)
        letters = token.split("'")[0].split("’")[0]
        if len(letters) > 1 and letters.isupper():
            return text
        if letters == "I":
            return text
    return text[:i] + text[i].lower() + text[i + 1:]


def upper_first(text: str) -> str:
    """Uppercase the first letter."""
    i = _first_letter_index(text)
    if i < 0:
        return text
    return text[:i] + text[i].upper() + text[i + 1:]


def match_case(replacement: str, matched: str) -> str:
    """Give ``replacement`` the capitalization of ``matched``'s first letter."""
    if not replacement or not matched:
        return replacement
    first = next((c for c in matched if c.isalpha()), "")
    if first.isupper():
        return upper_first(replacement)
    if first.islower():
        return lower_first(replacement)
    return replacement

"""Reference frequencies of the most common function words.

Values are approximate shares of running text (percent of all tokens) in
general-language corpora. They back the perplexity proxy: a text leaning on
these words much more than ordinary prose does reads as generic.
"""

from typing import Dict

# ё is folded to е before lookup.
RUSSIAN_FUNCTION_WORDS: Dict[str, float] = {
    "и": 3.50, "в": 3.00, "не": 1.60, "на": 1.50, "я": 1.20,
    "что": 1.10, "с": 0.90, "он": 0.80, "а": 0.70, "как": 0.60,
    "это": 0.60, "по": 0.60, "к": 0.50, "но": 0.50, "она": 0.35,
    "они": 0.40, "мы": 0.40, "из": 0.40, "у": 0.40, "за": 0.35,
    "то": 0.35, "так": 0.30, "же": 0.30, "от": 0.30, "все": 0.30,
    "для": 0.30, "о": 0.30, "вы": 0.30, "его": 0.30, "бы": 0.30,
    "ты": 0.30, "только": 0.20, "уже": 0.20, "до": 0.20, "был": 0.20,
    "было": 0.20, "или": 0.15, "если": 0.15, "когда": 0.15, "их": 0.15,
    "еще": 0.15, "при": 0.12, "ли": 0.12, "даже": 0.12, "чтобы": 0.12,
    "который": 0.10, "этот": 0.10, "ее": 0.10, "может": 0.10, "также": 0.08,
}

ENGLISH_FUNCTION_WORDS: Dict[str, float] = {
    "the": 6.00, "of": 3.00, "and": 2.80, "to": 2.50, "a": 2.20,
    "in": 1.90, "is": 1.00, "that": 1.00, "it": 0.90, "for": 0.90,
    "was": 0.80, "on": 0.70, "with": 0.70, "as": 0.70, "he": 0.60,
    "be": 0.60, "i": 0.50, "you": 0.50, "by": 0.50, "this": 0.50,
    "are": 0.50, "at": 0.50, "from": 0.40, "or": 0.40, "have": 0.40,
    "not": 0.40, "but": 0.40, "his": 0.40, "an": 0.35, "they": 0.35,
    "had": 0.35, "which": 0.30, "we": 0.30, "were": 0.30, "has": 0.25,
    "their": 0.25, "all": 0.25, "been": 0.20, "there": 0.20, "will": 0.20,
    "would": 0.20, "can": 0.20, "if": 0.20, "one": 0.20, "so": 0.20,
    "more": 0.15, "its": 0.15, "also": 0.12, "these": 0.10, "such": 0.08,
}

REFERENCE_TABLES: Dict[str, Dict[str, float]] = {
    "ru": RUSSIAN_FUNCTION_WORDS,
    "en": ENGLISH_FUNCTION_WORDS,
}


def top_words(locale: str, top_n: int = 50) -> Dict[str, float]:
    """The ``top_n`` most frequent reference words as shares (0-1) of text."""
    table = REFERENCE_TABLES.get(locale, {})
    ranked = sorted(table.items(), key=lambda item: -item[1])[:top_n]
    return {word: share / 100.0 for word, share in ranked}

"""Phrase tables used by the injection and restructuring stages.

None of these phrases matches a signature in the pattern database; the
test suite checks this.
"""

from typing import Dict, List

# Discourse markers, prepended to a sentence. Markers ending in a comma
# are followed by a space; bare ones ("И", "And") are too.
DISCOURSE_MARKERS: Dict[str, Dict[str, List[str]]] = {
    "ru": {
        "formal": ["Впрочем,", "При этом", "Причём", "Собственно,"],
        "casual": ["И", "Да и", "Кстати,", "Впрочем,", "Ну и"],
        "contrastive": ["Но", "Однако"],
    },
    "en": {
        "formal": ["Indeed,", "Admittedly,", "In fact,"],
        "casual": ["And", "Still,", "Granted,", "Plus,"],
        "contrastive": ["But", "Yet"],
    },
}

# Em-dash asides appended before the closing period of a sentence.
ASIDES: Dict[str, Dict[str, List[str]]] = {
    "ru": {
        "neutral": ["— и это стоит учитывать", "— это легко упустить из виду"],
        "hedged": ["— хотя это дискуссионно", "— впрочем, не всегда"],
    },
    "en": {
        "neutral": ["— a point easily overlooked", "— something to keep in mind"],
        "hedged": ["— though this is debatable", "— at least in most cases"],
    },
}

# First-person plural stance phrases, one per paragraph at most.
OPINION_PHRASES: Dict[str, List[str]] = {
    "ru": ["На наш взгляд,", "Как нам представляется,", "По нашему мнению,", "Мы полагаем, что"],
    "en": ["In our view,", "We would argue that", "As we see it,"],
}

# Connectors for merging two adjacent sentences.
MERGE_CONNECTORS: Dict[str, List[str]] = {
    "ru": ["; ", " — ", ", и "],
    "en": ["; ", " — ", ", and "],
}

# Conjunctions a long sentence may be split at (preceded by a comma).
SPLIT_CONJUNCTIONS: Dict[str, List[str]] = {
    "ru": ["и", "а", "но", "однако", "поэтому"],
    "en": ["and", "but", "yet", "so"],
}

# Sentence openers that are always safe to lowercase.
COMMON_OPENERS: Dict[str, List[str]] = {
    "ru": [
        "это", "этот", "эта", "эти", "такой", "такие", "он", "она", "оно", "они",
        "мы", "вы", "здесь", "тогда", "затем", "поэтому", "однако", "также",
        "многие", "некоторые", "большинство", "все", "каждый", "данный", "данная",
        "данные", "при", "в", "на", "с", "для", "по", "из", "к", "у", "о",
    ],
    "en": [
        "this", "these", "that", "those", "it", "they", "we", "he", "she",
        "there", "here", "then", "however", "thus", "many", "some", "most",
        "each", "every", "such", "the", "a", "an", "in", "on", "for", "with",
        "by", "at", "from", "as", "one",
    ],
}


def all_markers(locale: str) -> List[str]:
    """Every discourse marker of a locale, longest first."""
    groups = DISCOURSE_MARKERS.get(locale, {})
    markers = {marker for group in groups.values() for marker in group}
    return sorted(markers, key=len, reverse=True)


def all_asides(locale: str) -> List[str]:
    groups = ASIDES.get(locale, {})
    return [aside for group in groups.values() for aside in group]

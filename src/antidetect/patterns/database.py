"""Immutable database of AI-tell phrase signatures.

Every signature is compiled exactly once, when the database is built. A
single ``SignatureMatcher`` per locale collects candidate spans from all
signatures and resolves overlaps in one place (longest match wins), so the
dedup rules can be tested independently of the signature table.
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Pattern, Tuple

from ..models import PatternCategory, PatternMatch
from ..utils.logging import get_logger
from ..utils.nlp import SUPPORTED_LOCALES, detect_language, normalize_locale

logger = get_logger(__name__)

REGISTERS = ("neutral", "formal", "casual")


@dataclass(frozen=True)
class PatternEntry:
    """One curated signature and its rewrite alternatives.

    Attributes:
        signature: Literal phrase, or a regex when ``is_regex`` is set.
        locale: Locale the signature applies to.
        weight: Contribution to the pattern penalty, in (0, 100].
        category: Signature family.
        alternatives: Neutral-register rewrites.
        formal: Formal-register rewrites (fall back to neutral).
        casual: Casual-register rewrites (fall back to neutral).
        is_regex: Treat ``signature`` as a regular expression.
        hard_strip: Must never survive humanization.
    """
    signature: str
    locale: str
    weight: float
    category: PatternCategory
    alternatives: Tuple[str, ...] = ()
    formal: Tuple[str, ...] = ()
    casual: Tuple[str, ...] = ()
    is_regex: bool = False
    hard_strip: bool = False

    def alternatives_for(self, register: str = "neutral") -> Tuple[str, ...]:
        """Rewrites for a register, falling back to the neutral ones."""
        if register == "formal" and self.formal:
            return self.formal
        if register == "casual" and self.casual:
            return self.casual
        return self.alternatives

    def all_alternatives(self) -> Tuple[str, ...]:
        return self.alternatives + self.formal + self.casual


def compile_signature(entry: PatternEntry) -> Pattern:
    """Compile a signature into a case-insensitive, word-bounded regex.

    Literal signatures treat ``е``/``ё`` as the same letter and accept any
    whitespace run where the signature has a space.
    """
    if entry.is_regex:
        body = entry.signature
    else:
        words = [re.escape(word) for word in entry.signature.split()]
        body = r"\s+".join(words)
        body = re.sub("[её]", "[её]", body)
    return re.compile(rf"(?<!\w)(?:{body})(?!\w)", re.IGNORECASE)


class SignatureMatcher:
    """All compiled signatures of one locale."""

    def __init__(self, entries: Iterable[PatternEntry]):
        self._compiled: List[Tuple[PatternEntry, Pattern]] = [
            (entry, compile_signature(entry)) for entry in entries
        ]

    def __len__(self) -> int:
        return len(self._compiled)

    def candidates(self, text: str) -> List[PatternMatch]:
        """Every raw hit of every signature, overlaps included."""
        found = []
        for entry, pattern in self._compiled:
            for m in pattern.finditer(text):
                if m.end() == m.start():
                    continue
                found.append(PatternMatch(
                    signature=entry.signature,
                    text=m.group(0),
                    start=m.start(),
                    end=m.end(),
                    weight=entry.weight,
                    category=entry.category,
                    hard_strip=entry.hard_strip,
                    locale=entry.locale,
                ))
        return found

    def find(self, text: str) -> List[PatternMatch]:
        """Non-overlapping hits ordered by position."""
        return resolve_overlaps(self.candidates(text))


def resolve_overlaps(candidates: List[PatternMatch]) -> List[PatternMatch]:
    """Longest match wins; ties go to the earlier start, then the higher weight."""
    ranked = sorted(
        candidates,
        key=lambda m: (-(m.end - m.start), m.start, -m.weight),
    )
    accepted: List[PatternMatch] = []
    for match in ranked:
        if any(match.start < kept.end and kept.start < match.end for kept in accepted):
            continue
        accepted.append(match)
    return sorted(accepted, key=lambda m: m.start)


class PatternDatabase:
    """Read-only signature table shared by the analyzer and the pipeline.

    Build it once at startup and pass it to the components that need it;
    nothing mutates it afterwards, so it is safe to share between threads.
    """

    def __init__(self, entries: Iterable[PatternEntry], default_locale: str = "ru"):
        self._entries: Tuple[PatternEntry, ...] = tuple(entries)
        for entry in self._entries:
            self._validate(entry)

        self.default_locale = default_locale
        self._by_signature: Dict[Tuple[str, str], PatternEntry] = {
            (entry.locale, entry.signature): entry for entry in self._entries
        }
        self._matchers: Dict[str, SignatureMatcher] = {}
        for locale in sorted({entry.locale for entry in self._entries}):
            self._matchers[locale] = SignatureMatcher(self.for_locale(locale))

        logger.debug(
            f"Built pattern database: {len(self._entries)} signatures, "
            f"locales={self.locales}"
        )

    @staticmethod
    def _validate(entry: PatternEntry):
        if not entry.signature or not entry.signature.strip():
            raise ValueError("Pattern signature must be a non-empty string")
        if not 0 < entry.weight <= 100:
            raise ValueError(
                f"Weight for '{entry.signature}' must be in (0, 100], got {entry.weight}"
            )
        if not isinstance(entry.category, PatternCategory):
            raise ValueError(f"Unknown category for '{entry.signature}': {entry.category}")
        if entry.locale not in SUPPORTED_LOCALES:
            raise ValueError(f"Unsupported locale for '{entry.signature}': {entry.locale}")
        if entry.is_regex:
            try:
                re.compile(entry.signature)
            except re.error as e:
                raise ValueError(f"Invalid regex signature '{entry.signature}': {e}")

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> Tuple[PatternEntry, ...]:
        return self._entries

    @property
    def locales(self) -> List[str]:
        return list(self._matchers)

    def for_locale(self, locale: str) -> List[PatternEntry]:
        return [entry for entry in self._entries if entry.locale == locale]

    def get(self, signature: str, locale: Optional[str] = None) -> Optional[PatternEntry]:
        """Look up an entry by its signature string."""
        if locale is not None:
            return self._by_signature.get((locale, signature))
        for entry in self._entries:
            if entry.signature == signature:
                return entry
        return None

    def resolve_locale(self, text: str, locale: Optional[str] = None) -> str:
        return normalize_locale(locale) or detect_language(text, self.default_locale)

    def match_all(self, text: str, locale: Optional[str] = None) -> List[PatternMatch]:
        """Find every signature hit for the text's locale.

        Args:
            text: Text to scan.
            locale: Declared locale; detected from the text when omitted.

        Returns:
            Non-overlapping matches ordered by start offset.
        """
        if not text:
            return []
        matcher = self._matchers.get(self.resolve_locale(text, locale))
        if matcher is None:
            return []
        return matcher.find(text)

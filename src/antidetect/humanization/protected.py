"""Protected spans: content that every rewrite must leave byte-identical.

Math, code, quotations, citation markers and numbers are swapped for opaque
placeholders before any stage runs and put back verbatim at the end.
Placeholders are built only from Unicode private-use characters, so they are
never word tokens, never sentence boundaries and never signature matches.
"""

import re
from typing import List, Pattern, Tuple

from ..exceptions import SpanIntegrityError
from ..models import ProtectedSpan, SpanKind
from ..utils.logging import get_logger

logger = get_logger(__name__)

PLACEHOLDER_OPEN = "\ue000"
PLACEHOLDER_CLOSE = "\ue001"
_DIGIT_BASE = 0xE010

# Precedence order: earlier kinds win when spans compete.
SPAN_PATTERNS: List[Tuple[SpanKind, Pattern]] = [
    (SpanKind.CODE_FENCE, re.compile(r"```.*?```|~~~.*?~~~", re.DOTALL)),
    (SpanKind.BLOCK_MATH, re.compile(r"\$\$.+?\$\$", re.DOTALL)),
    (SpanKind.INLINE_MATH, re.compile(r"(?<!\$)\$(?!\$)[^$\n]+?\$(?!\$)")),
    (SpanKind.INLINE_CODE, re.compile(r"`[^`\n]+`")),
    (SpanKind.QUOTE, re.compile(r"\"[^\"\n]{1,400}\"|«[^«»\n]{1,400}»|“[^“”\n]{1,400}”")),
    (SpanKind.CITATION, re.compile(
        r"\[\^?\d+(?:\s*[,;–-]\s*\d+)*\]"
        r"|\[[A-ZА-ЯЁ][^\[\]\n]{0,80}?,\s*\d{4}[a-zа-я]?(?:,\s*[^\[\]\n]{1,20})?\]"
        r"|\([A-ZА-ЯЁ][^()\n]{0,80}?,\s*\d{4}[a-zа-я]?(?:,\s*[^()\n]{1,20})?\)"
    )),
    (SpanKind.NUMBER, re.compile(r"\d+(?:[.,:/]\d+)*%?")),
]


def make_placeholder(index: int) -> str:
    """Opaque placeholder for the span at ``index``."""
    digits = "".join(chr(_DIGIT_BASE + int(d)) for d in str(index))
    return f"{PLACEHOLDER_OPEN}{digits}{PLACEHOLDER_CLOSE}"


def contains_sentinels(text: str) -> bool:
    return PLACEHOLDER_OPEN in text or PLACEHOLDER_CLOSE in text


PLACEHOLDER_RE = re.compile(
    f"{PLACEHOLDER_OPEN}[{chr(_DIGIT_BASE)}-{chr(_DIGIT_BASE + 9)}]+{PLACEHOLDER_CLOSE}"
)


class SpanProtector:
    """Finds protected spans and swaps them for placeholders."""

    def find_spans(self, text: str) -> List[ProtectedSpan]:
        """Locate protected spans in ``text`` by original offsets.

        A span that partially overlaps an already accepted one is dropped.
        A span that fully encloses accepted ones replaces them, so a quote
        containing a formula is protected as one unit.

        Returns:
            Disjoint spans ordered by start offset, placeholders unset.
        """
        accepted: List[ProtectedSpan] = []
        for kind, pattern in SPAN_PATTERNS:
            for m in pattern.finditer(text):
                start, end = m.start(), m.end()
                inside = [s for s in accepted if start <= s.start and s.end <= end]
                overlapping = [
                    s for s in accepted
                    if s.start < end and start < s.end and s not in inside
                ]
                if overlapping:
                    continue
                for span in inside:
                    accepted.remove(span)
                accepted.append(ProtectedSpan(start=start, end=end, kind=kind, text=m.group(0)))
        return sorted(accepted, key=lambda s: s.start)

    def extract(self, text: str) -> Tuple[str, List[ProtectedSpan]]:
        """Replace every protected span with a placeholder.

        Returns:
            Tuple of (working text, spans with placeholders assigned).
        """
        spans = []
        parts = []
        cursor = 0
        for index, span in enumerate(self.find_spans(text)):
            placeholder = make_placeholder(index)
            spans.append(ProtectedSpan(
                start=span.start, end=span.end, kind=span.kind,
                text=span.text, placeholder=placeholder,
            ))
            parts.append(text[cursor:span.start])
            parts.append(placeholder)
            cursor = span.end
        parts.append(text[cursor:])

        if spans:
            logger.debug(f"Protected {len(spans)} spans")
        return "".join(parts), spans

    def restore(self, text: str, spans: List[ProtectedSpan]) -> str:
        """Put the original span contents back.

        Raises:
            SpanIntegrityError: If a placeholder is missing, duplicated, or
                an unknown placeholder is present.
        """
        for span in spans:
            count = text.count(span.placeholder)
            if count != 1:
                raise SpanIntegrityError(
                    f"Placeholder for {span.kind.value} span found {count} times"
                )
        known = {span.placeholder for span in spans}
        stray = [p for p in PLACEHOLDER_RE.findall(text) if p not in known]
        if stray:
            raise SpanIntegrityError(f"{len(stray)} unknown placeholders in text")

        lookup = {span.placeholder: span.text for span in spans}
        return PLACEHOLDER_RE.sub(lambda m: lookup[m.group(0)], text)

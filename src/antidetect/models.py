"""Data models shared by the analyzer and the humanization pipeline."""

from dataclasses import dataclass, field, asdict, replace
from enum import Enum
from typing import Any, Dict, List, Optional


class PatternCategory(str, Enum):
    """Families of AI-tell signatures."""
    FILLER = "filler"  # filler, hedge and amplifier phrases
    TRANSITION = "transition"  # generic transition and conclusion cliches
    SELF_REFERENCE = "self_reference"  # assistant self-reference and disclaimers
    BOILERPLATE = "boilerplate"  # overused academic boilerplate


class HumanizationMode(str, Enum):
    QUICK = "quick"
    ACADEMIC = "academic"
    AGGRESSIVE = "aggressive"


class SpanKind(str, Enum):
    CODE_FENCE = "code_fence"
    BLOCK_MATH = "block_math"
    INLINE_MATH = "inline_math"
    INLINE_CODE = "inline_code"
    QUOTE = "quote"
    CITATION = "citation"
    NUMBER = "number"


@dataclass(frozen=True)
class PatternMatch:
    """A single signature hit inside analyzed text."""
    signature: str
    text: str
    start: int
    end: int
    weight: float
    category: PatternCategory
    hard_strip: bool = False
    locale: str = "ru"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["category"] = self.category.value
        return data


@dataclass(frozen=True)
class ProtectedSpan:
    """A substring that must come out of every transformation unchanged."""
    start: int
    end: int
    kind: SpanKind
    text: str
    placeholder: str = ""


@dataclass
class TextStatistics:
    """Output of the statistical analyzer."""
    bursty_score: float = 0.0
    perplexity_score: float = 0.0
    lexical_diversity: float = 0.0
    low_confidence: bool = True
    locale: str = "ru"
    token_count: int = 0
    sentence_count: int = 0
    paragraph_count: int = 0
    avg_sentence_length: float = 0.0
    sentence_length_cv: float = 0.0
    type_token_ratio: float = 0.0
    hapax_ratio: float = 0.0
    paragraph_variety: float = 1.0
    generic_word_share: float = 0.0


@dataclass
class TextDetails:
    """Raw measurements behind the scores of a TextAnalysis."""
    token_count: int = 0
    sentence_count: int = 0
    paragraph_count: int = 0
    avg_sentence_length: float = 0.0
    sentence_length_cv: float = 0.0
    type_token_ratio: float = 0.0
    hapax_ratio: float = 0.0
    paragraph_variety: float = 1.0
    generic_word_share: float = 0.0
    pattern_penalty: float = 0.0


@dataclass
class TextAnalysis:
    """AI-signal analysis of one text. Produced fresh per call."""
    human_score: float
    perplexity_score: float
    bursty_score: float
    ai_patterns: List[PatternMatch] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
    lexical_diversity: float = 0.0
    low_confidence: bool = False
    locale: str = "ru"
    details: TextDetails = field(default_factory=TextDetails)

    @property
    def verdict(self) -> str:
        """Coarse band of ``human_score`` for display."""
        if self.human_score >= 80:
            return "human"
        if self.human_score >= 60:
            return "mixed"
        if self.human_score >= 40:
            return "likely_ai"
        return "ai"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "human_score": self.human_score,
            "perplexity_score": self.perplexity_score,
            "bursty_score": self.bursty_score,
            "lexical_diversity": self.lexical_diversity,
            "low_confidence": self.low_confidence,
            "locale": self.locale,
            "verdict": self.verdict,
            "ai_patterns": [m.to_dict() for m in self.ai_patterns],
            "suggestions": list(self.suggestions),
            "details": asdict(self.details),
        }


@dataclass(frozen=True)
class HumanizationOptions:
    """Fully enumerated humanization settings.

    Use ``for_mode`` to get the documented defaults of a mode; every field
    is explicit so nothing is decided by hidden fallbacks further down.

    Attributes:
        mode: Which stage set to run.
        intensity: 0..1, scales how many sentences/paragraphs are touched.
        preserve_meaning: Disallow contrastive markers and hedging asides.
        language: ``auto`` or a locale tag (``ru``, ``en``, ``ru-RU``...).
        discipline_hint: Citation pool key (academic mode only).
        seed: Seed for the stage randomness; None means unseeded.
    """
    mode: HumanizationMode
    intensity: float
    preserve_meaning: bool = True
    language: str = "auto"
    discipline_hint: Optional[str] = None
    seed: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "mode", HumanizationMode(self.mode))
        object.__setattr__(self, "intensity", min(1.0, max(0.0, float(self.intensity))))

    @classmethod
    def for_mode(cls, mode, **overrides) -> "HumanizationOptions":
        """Per-mode defaults: quick 0.3, academic 0.5, aggressive 0.85."""
        mode = HumanizationMode(mode)
        base = cls(mode=mode, intensity=DEFAULT_INTENSITY[mode])
        return replace(base, **overrides) if overrides else base


DEFAULT_INTENSITY = {
    HumanizationMode.QUICK: 0.3,
    HumanizationMode.ACADEMIC: 0.5,
    HumanizationMode.AGGRESSIVE: 0.85,
}

"""Humanization pipeline and its stages."""

from .pipeline import HumanizationPipeline
from .stages import (
    PRESETS,
    ModePreset,
    StageContext,
    PatternStrip,
    SentenceRestructure,
    CitationInjection,
)
from .pattern_injector import DiscourseInjection, OpinionInjection
from .citations import SourceInjector, SOURCE_POOLS, DISCIPLINE_ALIASES
from .protected import SpanProtector, make_placeholder, contains_sentinels
from .document import Document, Block

__all__ = [
    "HumanizationPipeline",
    "PRESETS",
    "ModePreset",
    "StageContext",
    "PatternStrip",
    "SentenceRestructure",
    "CitationInjection",
    "DiscourseInjection",
    "OpinionInjection",
    "SourceInjector",
    "SOURCE_POOLS",
    "DISCIPLINE_ALIASES",
    "SpanProtector",
    "make_placeholder",
    "contains_sentinels",
    "Document",
    "Block",
]

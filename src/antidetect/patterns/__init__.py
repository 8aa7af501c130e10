"""AI-tell signature table and matcher."""

from .database import (
    PatternEntry,
    PatternDatabase,
    SignatureMatcher,
    REGISTERS,
    compile_signature,
    resolve_overlaps,
)
from .signatures import default_entries

__all__ = [
    "PatternEntry",
    "PatternDatabase",
    "SignatureMatcher",
    "REGISTERS",
    "compile_signature",
    "resolve_overlaps",
    "default_entries",
]

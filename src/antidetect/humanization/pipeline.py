"""Humanization pipeline.

Runs a fixed stage order over a single working string:

    extract -> strip -> restructure -> discourse -> opinion -> citations -> restore

Which middle stages run is decided by the mode preset; extract and restore
always run. The pipeline is total: a failing stage is skipped, a broken
placeholder or an out-of-bounds result falls back to a safer rendition.
"""

import random
from typing import Dict, List, Optional

from ..analysis import TextAnalyzer
from ..config import Config
from ..exceptions import SpanIntegrityError
from ..models import HumanizationOptions, ProtectedSpan
from ..patterns import PatternDatabase
from ..utils.logging import get_logger
from ..utils.nlp import resolve_locale
from .citations import SourceInjector
from .document import lowercase_vocabulary
from .pattern_injector import DiscourseInjection, OpinionInjection
from .phrases import COMMON_OPENERS
from .protected import SpanProtector, contains_sentinels
from .stages import (
    PRESETS,
    CitationInjection,
    ModePreset,
    PatternStrip,
    SentenceRestructure,
    StageContext,
)

logger = get_logger(__name__)


class HumanizationPipeline:
    """Rewrites text to reduce AI-detection signal, preserving protected spans."""

    def __init__(
        self,
        database: PatternDatabase,
        analyzer: Optional[TextAnalyzer] = None,
        config: Optional[Config] = None,
        protector: Optional[SpanProtector] = None,
        source_injector: Optional[SourceInjector] = None,
    ):
        """Initialize pipeline.

        Args:
            database: Signature table used for stripping.
            analyzer: Analyzer used to measure burstiness and score passes.
            config: Engine configuration.
            protector: Protected-span extractor.
            source_injector: Citation stage backend.
        """
        self.database = database
        self.config = config or Config()
        self.analyzer = analyzer or TextAnalyzer(database, self.config)
        self.protector = protector or SpanProtector()
        self.source_injector = source_injector or SourceInjector(self.config, self.protector)

        self.strip = PatternStrip()
        self.hard_strip = PatternStrip(hard_only=True)
        self.fallback_strip = PatternStrip(hard_only=True, prefer_longest=True)
        self.stages: Dict[str, object] = {
            "strip": self.strip,
            "restructure": SentenceRestructure(),
            "discourse": DiscourseInjection(),
            "opinion": OpinionInjection(),
            "citations": CitationInjection(self.source_injector),
        }

    def within_bounds(self, result: str, original: str) -> bool:
        """Output length must stay within the configured ratio of the input."""
        pipeline = self.config.pipeline
        size = len(original)
        return pipeline.min_length_ratio * size <= len(result) <= pipeline.max_length_ratio * size

    def _run_stage(self, stage, text: str, context: StageContext) -> str:
        try:
            result = stage.apply(text, context)
        except Exception as e:
            logger.warning(f"Stage '{stage.name}' failed and was skipped: {e}")
            return text
        logger.debug(f"Stage '{stage.name}': {len(text)} -> {len(result)} chars")
        return result

    def _restore_first(self, candidates: List[str], spans: List[ProtectedSpan], original: str) -> Optional[str]:
        for label, working in zip(("full", "strip-only", "hard-only"), candidates):
            try:
                restored = self.protector.restore(working, spans)
            except SpanIntegrityError as e:
                logger.warning(f"Restore failed for {label} result: {e}")
                continue
            if self.within_bounds(restored, original):
                if label != "full":
                    logger.warning(f"Fell back to {label} result")
                return restored
            logger.warning(f"{label} result outside length bounds")
        return None

    def run_pass(
        self,
        text: str,
        original: str,
        options: HumanizationOptions,
        preset: ModePreset,
        rng: random.Random,
        locale: str,
    ) -> str:
        """Run one extract/stages/restore pass.

        Args:
            text: Pass input.
            original: Caller's input, the reference for the length bounds.
            options: Humanization options.
            preset: Mode preset.
            rng: Random source shared by every stage.
            locale: Resolved locale.

        Returns:
            Rewritten text, or the pass input when no rendition is acceptable.
        """
        working, spans = self.protector.extract(text)
        common = COMMON_OPENERS.get(locale, [])
        # The growth cap covers all passes of one call together.
        allowed_growth = max(0, int(len(original) * self.config.pipeline.max_growth) - len(text))
        context = StageContext(
            options=options,
            preset=preset,
            rng=rng,
            locale=locale,
            database=self.database,
            analyzer=self.analyzer,
            config=self.config,
            spans=spans,
            max_length=len(working) + allowed_growth,
            vocabulary=lowercase_vocabulary(working, common),
        )

        stripped = self._run_stage(self.strip, working, context)
        current = stripped
        for name in preset.stages:
            if name == "strip":
                continue
            current = self._run_stage(self.stages[name], current, context)
        if current != stripped:
            # Merges and insertions must not leave a hard signature behind.
            current = self._run_stage(self.hard_strip, current, context)

        fallback = self._run_stage(self.fallback_strip, working, context)
        result = self._restore_first([current, stripped, fallback], spans, original)
        return text if result is None else result

    def humanize(
        self,
        text: str,
        options: HumanizationOptions,
        rng: Optional[random.Random] = None,
    ) -> str:
        """Humanize text according to ``options``.

        Args:
            text: Input text.
            options: Mode, intensity and the other explicit settings.
            rng: Random source; built from ``options.seed`` when omitted.

        Returns:
            Rewritten text. Empty or whitespace-only input comes back unchanged.
        """
        if not text.strip():
            return text
        if contains_sentinels(text):
            logger.warning("Input contains reserved placeholder characters, left unchanged")
            return text

        rng = rng or random.Random(options.seed)
        preset = PRESETS[options.mode]
        locale = resolve_locale(options.language, text, self.config.default_locale)
        pipeline = self.config.pipeline

        result = self.run_pass(text, text, options, preset, rng, locale)
        passes = 1
        while passes < min(preset.max_passes, pipeline.max_passes):
            score = self.analyzer.analyze(result, locale).human_score
            if score >= pipeline.second_pass_threshold:
                break
            candidate = self.run_pass(result, text, options, preset, rng, locale)
            passes += 1
            if not self.within_bounds(candidate, text):
                logger.warning("Extra pass left length bounds, keeping previous result")
                break
            result = candidate

        logger.debug(f"Humanized in {passes} pass(es), mode={options.mode.value}, locale={locale}")
        return result

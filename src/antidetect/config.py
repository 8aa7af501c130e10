"""Configuration management for the analysis and humanization engine.

All numeric constants below are tunable defaults, not ground truth; they
should be re-validated against a real corpus before being changed.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

from .utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ScoringWeights:
    """Weights combining the component scores into ``human_score``."""
    perplexity: float = 0.4
    burstiness: float = 0.3
    patterns: float = 0.3


@dataclass
class BurstinessCalibration:
    """Linear mapping from sentence-length CV to a 0-100 score."""
    cv_floor: float = 0.05  # CV at or below this scores 0
    cv_ceiling: float = 0.6  # CV at or above this scores 100


@dataclass
class StatisticsConfig:
    """Configuration for the statistical analyzer."""
    min_reliable_tokens: int = 10  # Fewer tokens => low-confidence result
    reference_top_n: int = 50  # Function words per locale reference table
    generic_ratio_floor: float = 0.5  # Generic-word ratio scoring 100
    generic_ratio_ceiling: float = 1.5  # Generic-word ratio scoring 0
    generic_weight: float = 0.75
    spread_weight: float = 0.25
    spread_top_types: int = 3


@dataclass
class SuggestionThresholds:
    """Thresholds for the fixed suggestion rules."""
    burstiness: float = 50.0
    pattern_penalty: float = 30.0
    lexical_diversity: float = 40.0
    max_listed_patterns: int = 5


@dataclass
class PipelineConfig:
    """Configuration for the humanization pipeline."""
    target_cv: float = 0.35  # Restructuring stops once the document CV reaches this
    restructure_fraction: float = 0.5  # Max restructure ops = n_sentences * intensity * this
    max_merge_words: int = 45
    min_split_words: int = 14
    min_split_side_words: int = 4
    discourse_fraction: float = 0.3  # Marked sentences <= n_sentences * intensity * this
    parenthetical_fraction: float = 0.1
    max_parentheticals: int = 3
    opinion_fraction: float = 0.5  # Paragraphs receiving a stance phrase
    max_growth: float = 1.4  # Injection stops past this length ratio per call
    min_length_ratio: float = 0.5
    max_length_ratio: float = 2.0
    max_passes: int = 2
    second_pass_threshold: float = 65.0
    strip_rounds: int = 3


@dataclass
class CitationConfig:
    """Configuration for cosmetic citation markers."""
    words_per_citation: int = 150
    min_paragraph_words: int = 20


@dataclass
class Config:
    """Main configuration container."""
    scoring: ScoringWeights = field(default_factory=ScoringWeights)
    burstiness: BurstinessCalibration = field(default_factory=BurstinessCalibration)
    statistics: StatisticsConfig = field(default_factory=StatisticsConfig)
    suggestions: SuggestionThresholds = field(default_factory=SuggestionThresholds)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    citations: CitationConfig = field(default_factory=CitationConfig)
    default_locale: str = "ru"
    log_level: str = "INFO"
    log_json: bool = False


def _merge_section(section_cls, data: Dict):
    """Build a section dataclass, ignoring and logging unknown keys."""
    defaults = section_cls()
    known = set(defaults.__dataclass_fields__)
    unknown = set(data) - known
    if unknown:
        logger.warning(
            f"Ignoring unknown keys in {section_cls.__name__}: {sorted(unknown)}"
        )
    values = {k: data.get(k, getattr(defaults, k)) for k in known}
    return section_cls(**values)


_SECTIONS = {
    "scoring": ScoringWeights,
    "burstiness": BurstinessCalibration,
    "statistics": StatisticsConfig,
    "suggestions": SuggestionThresholds,
    "pipeline": PipelineConfig,
    "citations": CitationConfig,
}


def config_from_dict(data: Dict) -> Config:
    """Build a Config from a (possibly partial) dictionary."""
    config = Config()
    for name, section_cls in _SECTIONS.items():
        if name in data:
            setattr(config, name, _merge_section(section_cls, data[name] or {}))

    config.default_locale = data.get("default_locale", config.default_locale)
    config.log_level = data.get("log_level", config.log_level)
    config.log_json = data.get("log_json", config.log_json)

    weights = config.scoring
    total = weights.perplexity + weights.burstiness + weights.patterns
    if abs(total - 1.0) > 1e-6:
        logger.warning(f"Scoring weights sum to {total:.3f}, expected 1.0")
    return config


def load_config(config_path: str = "config.json") -> Config:
    """Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file.

    Returns:
        Parsed configuration object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config file is invalid.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            "Copy config.json.sample to config.json to tune the defaults."
        )

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file: {e}")

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a JSON object")

    config = config_from_dict(data)
    logger.info(f"Loaded configuration from {config_path}")
    return config


def create_default_config() -> Dict:
    """Create a default configuration dictionary."""
    config = Config()
    data = {name: dict(vars(getattr(config, name))) for name in _SECTIONS}
    data["default_locale"] = config.default_locale
    data["log_level"] = config.log_level
    data["log_json"] = config.log_json
    return data

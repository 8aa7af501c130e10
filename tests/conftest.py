"""Shared fixtures for the test suite."""

import random
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from antidetect.analysis import TextAnalyzer  # noqa: E402
from antidetect.api import DEFAULT_DATABASE  # noqa: E402
from antidetect.config import Config  # noqa: E402
from antidetect.humanization.document import lowercase_vocabulary  # noqa: E402
from antidetect.humanization.phrases import COMMON_OPENERS  # noqa: E402
from antidetect.humanization.stages import PRESETS, StageContext  # noqa: E402
from antidetect.models import HumanizationMode, HumanizationOptions  # noqa: E402


RU_CORPUS = [
    "Следует отметить, что данный подход играет ключевую роль в современном мире. "
    "Кроме того, он является неотъемлемой частью многих систем. "
    "Таким образом, можно сделать вывод, что метод полезен.",

    "В наше время цифровые технологии оказывают значительное влияние на образование. "
    "Важно отметить, что студенты всё чаще учатся онлайн. "
    "Более того, преподаватели используют широкий спектр инструментов. "
    "Подводя итог, можно сказать, что обучение меняется.",

    "Давайте рассмотрим основные причины проблемы. "
    "Безусловно, экономика играет важную роль в развитии общества. "
    "Необходимо отметить, что рынок реагирует на кризисы быстро. "
    "В заключение хотелось бы отметить, что ситуация остаётся сложной.",
]

EN_CORPUS = [
    "In today's rapidly evolving world, technology plays a crucial role in education. "
    "It is important to note that students learn differently. "
    "Moreover, teachers use a wide range of tools. "
    "In conclusion, learning is changing fast.",

    "Great question! Let's dive into the details of the problem. "
    "It is worth noting that the market reacts quickly to crises. "
    "Furthermore, regulation has a significant impact on prices. "
    "I hope this helps you understand the situation.",
]


@pytest.fixture
def rng():
    """Seeded random source for reproducible stage output."""
    return random.Random(42)


@pytest.fixture
def database():
    """The shipped signature table."""
    return DEFAULT_DATABASE


@pytest.fixture
def ru_corpus():
    return list(RU_CORPUS)


@pytest.fixture
def en_corpus():
    return list(EN_CORPUS)


@pytest.fixture
def make_context(database):
    """Build a StageContext for running a single stage on working text."""

    def build(
        text,
        mode=HumanizationMode.ACADEMIC,
        intensity=1.0,
        locale="en",
        seed=42,
        max_length=None,
        preserve_meaning=True,
        config=None,
    ):
        config = config or Config()
        options = HumanizationOptions(
            mode=mode,
            intensity=intensity,
            preserve_meaning=preserve_meaning,
            language=locale,
        )
        return StageContext(
            options=options,
            preset=PRESETS[options.mode],
            rng=random.Random(seed),
            locale=locale,
            database=database,
            analyzer=TextAnalyzer(database, config),
            config=config,
            spans=[],
            max_length=len(text) * 2 if max_length is None else max_length,
            vocabulary=lowercase_vocabulary(text, COMMON_OPENERS.get(locale, [])),
        )

    return build

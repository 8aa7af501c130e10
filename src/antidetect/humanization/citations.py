"""Cosmetic citation markers for academic-mode humanization.

IMPORTANT: this is a non-verifying heuristic. It inserts ``(Author, Year)``
markers drawn from a static pool of well-known works per discipline. It never
checks that the cited work exists in the caller's bibliography or that it
supports the adjacent claim. Treat the output as a styling aid, never as a
citation-accuracy feature.
"""

import math
import random
from typing import Dict, List, Optional, Tuple

from ..config import Config
from ..exceptions import SpanIntegrityError
from ..models import ProtectedSpan, SpanKind
from ..utils.logging import get_logger
from ..utils.nlp import count_words, resolve_locale
from .document import Document
from .protected import SpanProtector, contains_sentinels

logger = get_logger(__name__)

DEFAULT_DISCIPLINE = "methodology"

Source = Tuple[str, int]

SOURCE_POOLS: Dict[str, Dict[str, List[Source]]] = {
    "methodology": {
        "ru": [("Кун", 1977), ("Поппер", 2004), ("Лакатос", 1995), ("Фейерабенд", 2007),
               ("Щедровицкий", 1995)],
        "en": [("Kuhn", 1962), ("Popper", 1959), ("Lakatos", 1978), ("Feyerabend", 1975),
               ("Creswell", 2014)],
    },
    "psychology": {
        "ru": [("Выготский", 1934), ("Леонтьев", 1975), ("Рубинштейн", 2000), ("Зимняя", 2010),
               ("Петровский", 1982)],
        "en": [("Vygotsky", 1978), ("Bandura", 1977), ("Piaget", 1952), ("Kahneman", 2011),
               ("Maslow", 1954)],
    },
    "education": {
        "ru": [("Вербицкий", 1991), ("Сластёнин", 2002), ("Давыдов", 1996), ("Загвязинский", 2001),
               ("Хуторской", 2001)],
        "en": [("Dewey", 1938), ("Bloom", 1956), ("Freire", 1970), ("Biggs", 2011),
               ("Hattie", 2009)],
    },
    "economics": {
        "ru": [("Кейнс", 1978), ("Хайек", 2005), ("Норт", 1997), ("Аузан", 2014),
               ("Стиглиц", 2015)],
        "en": [("Keynes", 1936), ("Hayek", 1944), ("North", 1990), ("Stiglitz", 2012),
               ("Acemoglu & Robinson", 2012)],
    },
    "sociology": {
        "ru": [("Бурдьё", 2007), ("Гидденс", 2005), ("Парсонс", 2000), ("Бауман", 2008),
               ("Бек", 2000)],
        "en": [("Bourdieu", 1984), ("Giddens", 1984), ("Parsons", 1937), ("Bauman", 2000),
               ("Beck", 1992)],
    },
    "philosophy": {
        "ru": [("Хайдеггер", 1997), ("Гуссерль", 1999), ("Витгенштейн", 1994),
               ("Мамардашвили", 1992), ("Лосев", 2001)],
        "en": [("Heidegger", 1927), ("Husserl", 1913), ("Wittgenstein", 1953), ("Rawls", 1971),
               ("Searle", 1983)],
    },
    "linguistics": {
        "ru": [("Соссюр", 1977), ("Хомский", 1962), ("Бахтин", 1979), ("Виноградов", 1980),
               ("Лотман", 1970)],
        "en": [("Saussure", 1916), ("Chomsky", 1957), ("Bakhtin", 1986), ("Halliday", 1985),
               ("Lakoff & Johnson", 1980)],
    },
    "it": {
        "ru": [("Кнут", 2000), ("Гамма и др.", 2001), ("Брукс", 2010), ("Мартин", 2010),
               ("Таненбаум", 2003)],
        "en": [("Knuth", 1997), ("Gamma et al.", 1994), ("Brooks", 1975), ("Martin", 2008),
               ("Tanenbaum", 2011)],
    },
    "medicine": {
        "ru": [("Покровский", 2007), ("Пальцев", 2011), ("Струков", 2015), ("Мурашко", 2014),
               ("Гребнев", 2001)],
        "en": [("Sackett et al.", 1996), ("Kumar et al.", 2015), ("Guyton & Hall", 2016),
               ("Topol", 2019), ("Fauci", 2008)],
    },
    "law": {
        "ru": [("Алексеев", 2008), ("Марченко", 2004), ("Нерсесянц", 2005), ("Козлова", 2010),
               ("Бахрах", 2010)],
        "en": [("Hart", 1961), ("Dworkin", 1977), ("Kelsen", 1967), ("Fuller", 1964),
               ("Raz", 1979)],
    },
    "history": {
        "ru": [("Ключевский", 1937), ("Платонов", 2006), ("Бродель", 1986), ("Тойнби", 1991),
               ("Карамзин", 1988)],
        "en": [("Braudel", 1979), ("Toynbee", 1934), ("Hobsbawm", 1962), ("Bloch", 1949),
               ("McNeill", 1963)],
    },
}

# Lowercase stems; a discipline needs at least two distinct stems present.
TOPIC_KEYWORDS: Dict[str, List[str]] = {
    "methodology": ["метод", "методолог", "научн", "исследован", "гипотез", "парадигм",
                    "эксперимент", "выборк", "methodolog", "hypothes", "paradigm",
                    "experiment", "sampl", "empiric"],
    "psychology": ["психолог", "сознани", "мышлен", "личност", "поведен", "когнитив",
                   "мотивац", "эмоци", "psycholog", "cognit", "behavio", "motivat",
                   "emotion", "personalit"],
    "education": ["образован", "обучен", "педагог", "студент", "учебн", "дидактик",
                  "воспитан", "компетенц", "educat", "teach", "pedagog", "student",
                  "curricul", "learner"],
    "economics": ["экономик", "рынок", "финанс", "инвестиц", "капитал", "бюджет",
                  "инфляци", "econom", "market", "financ", "invest", "inflation", "fiscal"],
    "sociology": ["социол", "обществ", "социальн", "стратифик", "массов", "sociolog",
                  "societ", "social", "stratif", "communit"],
    "philosophy": ["философ", "онтолог", "эпистемолог", "бытие", "сущност", "диалектик",
                   "этик", "philosoph", "ontolog", "epistemolog", "metaphys", "ethic"],
    "linguistics": ["язык", "лингвист", "семантик", "синтаксис", "грамматик", "дискурс",
                    "linguist", "semantic", "syntax", "grammar", "discourse", "lexic"],
    "it": ["программ", "алгоритм", "нейросет", "информац", "компьютер", "software",
           "algorithm", "program", "comput", "database", "neural network"],
    "medicine": ["медицин", "здоров", "заболеван", "лечени", "пациент", "клинич", "диагноз",
                 "терапи", "medic", "health", "disease", "patient", "clinic", "diagnos",
                 "therap"],
    "law": ["право", "закон", "юридич", "суд", "норматив", "конституци", "legal", "statut",
            "court", "constitution", "jurisprud", "legislat"],
    "history": ["истори", "эпох", "столети", "цивилизац", "династ", "histor", "centur",
                "civiliz", "dynast", "medieval"],
}

DISCIPLINE_ALIASES: Dict[str, str] = {
    "методология": "methodology", "research methods": "methodology", "science": "methodology",
    "психология": "psychology",
    "педагогика": "education", "образование": "education", "pedagogy": "education",
    "экономика": "economics", "economy": "economics", "finance": "economics",
    "социология": "sociology",
    "философия": "philosophy",
    "лингвистика": "linguistics", "языкознание": "linguistics", "филология": "linguistics",
    "информатика": "it", "программирование": "it", "computer science": "it", "cs": "it",
    "информационные технологии": "it", "software engineering": "it",
    "медицина": "medicine", "health": "medicine",
    "право": "law", "юриспруденция": "law", "jurisprudence": "law", "legal": "law",
    "история": "history",
}


class SourceInjector:
    """Inserts cosmetic ``(Author, Year)`` markers at paragraph ends.

    The density is at most one marker per ``words_per_citation`` words.
    Markers never land inside a protected span or on a heading line, and
    paragraphs that already cite something are left alone.
    """

    def __init__(self, config: Optional[Config] = None, protector: Optional[SpanProtector] = None):
        self.config = config or Config()
        self.protector = protector or SpanProtector()

    @property
    def disciplines(self) -> List[str]:
        return list(SOURCE_POOLS)

    def detect_discipline(self, text: str) -> Optional[str]:
        """Best-matching discipline by keyword stems, or None."""
        lowered = text.lower()
        best, best_hits = None, 1
        for discipline, stems in TOPIC_KEYWORDS.items():
            hits = sum(1 for stem in stems if stem in lowered)
            if hits > best_hits:
                best, best_hits = discipline, hits
        return best

    def resolve_discipline(self, discipline_hint: Optional[str], text: str) -> str:
        """Canonical discipline from a hint, the text, or the general pool."""
        if discipline_hint:
            key = discipline_hint.strip().lower()
            if key in SOURCE_POOLS:
                return key
            if key in DISCIPLINE_ALIASES:
                return DISCIPLINE_ALIASES[key]
            logger.debug("Unknown discipline hint, detecting from text")
        return self.detect_discipline(text) or DEFAULT_DISCIPLINE

    def pool(self, discipline: str, locale: str) -> List[Source]:
        pools = SOURCE_POOLS.get(discipline, SOURCE_POOLS[DEFAULT_DISCIPLINE])
        return pools.get(locale) or pools["ru"]

    @staticmethod
    def format_marker(source: Source) -> str:
        author, year = source
        return f"({author}, {year})"

    def _eligible_blocks(self, doc: Document, spans: List[ProtectedSpan]) -> List[int]:
        cited = [s.placeholder for s in spans if s.kind == SpanKind.CITATION and s.placeholder]
        min_words = self.config.citations.min_paragraph_words
        eligible = []
        for index, block in doc.prose_blocks():
            last = block.sentences[-1].rstrip()
            if not last or last[-1] not in ".!?":
                continue
            if block.word_count() < min_words:
                continue
            rendered = block.render()
            if any(placeholder in rendered for placeholder in cited):
                continue
            eligible.append(index)
        return eligible

    def insert_markers(
        self,
        text: str,
        spans: Optional[List[ProtectedSpan]] = None,
        discipline_hint: Optional[str] = None,
        rng: Optional[random.Random] = None,
        locale: Optional[str] = None,
        max_length: Optional[int] = None,
    ) -> str:
        """Insert markers into text whose protected spans are already placeholders.

        Args:
            text: Working text.
            spans: Protected spans of the working text.
            discipline_hint: Pool key or alias; detected when omitted.
            rng: Random source for paragraph and source choice.
            locale: Pool locale; detected when omitted.
            max_length: Stop inserting past this length.

        Returns:
            Text with markers inserted.
        """
        spans = spans or []
        rng = rng or random.Random()
        budget = math.floor(count_words(text) / self.config.citations.words_per_citation)
        if budget <= 0:
            return text

        locale = resolve_locale(locale, text, self.config.default_locale)
        discipline = self.resolve_discipline(discipline_hint, text)
        doc = Document.parse(text)
        eligible = self._eligible_blocks(doc, spans)
        if not eligible:
            return text

        chosen = sorted(rng.sample(eligible, min(budget, len(eligible))))
        pool = self.pool(discipline, locale)
        order = rng.sample(pool, len(pool))
        length = len(text)

        for k, index in enumerate(chosen):
            block = doc.blocks[index]
            marker = self.format_marker(order[k % len(order)])
            last = block.sentences[-1]
            body = last.rstrip()
            cut = len(body)
            while cut > 0 and body[cut - 1] in ".!?":
                cut -= 1
            rewritten = f"{body[:cut]} {marker}{body[cut:]}{last[len(body):]}"
            if max_length is not None and length + len(rewritten) - len(last) > max_length:
                break
            block.sentences[-1] = rewritten
            length += len(rewritten) - len(last)
            logger.debug(f"Inserted cosmetic citation marker (discipline={discipline}, block={index})")

        return doc.render()

    def inject_citations(
        self,
        text: str,
        discipline_hint: Optional[str] = None,
        rng: Optional[random.Random] = None,
        locale: Optional[str] = None,
    ) -> str:
        """Insert cosmetic citation markers into raw text.

        The markers are not verified in any way; see the module docstring.

        Args:
            text: Raw text.
            discipline_hint: Pool key or alias; detected when omitted.
            rng: Random source; unseeded when omitted.
            locale: Pool locale; detected when omitted.

        Returns:
            Text with markers, or the input unchanged when nothing fits.
        """
        if not text or not text.strip() or contains_sentinels(text):
            return text
        working, spans = self.protector.extract(text)
        working = self.insert_markers(working, spans, discipline_hint, rng, locale)
        try:
            return self.protector.restore(working, spans)
        except SpanIntegrityError as e:
            logger.warning(f"Citation insertion dropped: {e}")
            return text

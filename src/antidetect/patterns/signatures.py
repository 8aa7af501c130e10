"""Curated AI-tell signatures for Russian and English.

Weights are tunable defaults. Hard-strip entries are the phrases that
humanization must always remove; their literal rewrites stay between half
and double the signature length so stripping never distorts text length.
Alternatives are chosen so that none of them matches any signature.
"""

from typing import List

from ..models import PatternCategory
from .database import PatternEntry

FILLER = PatternCategory.FILLER
TRANSITION = PatternCategory.TRANSITION
SELF_REFERENCE = PatternCategory.SELF_REFERENCE
BOILERPLATE = PatternCategory.BOILERPLATE


def _ru(signature, weight, category, neutral, formal=(), casual=(),
        regex=False, hard=False) -> PatternEntry:
    return PatternEntry(
        signature=signature, locale="ru", weight=weight, category=category,
        alternatives=tuple(neutral), formal=tuple(formal), casual=tuple(casual),
        is_regex=regex, hard_strip=hard,
    )


def _en(signature, weight, category, neutral, formal=(), casual=(),
        regex=False, hard=False) -> PatternEntry:
    return PatternEntry(
        signature=signature, locale="en", weight=weight, category=category,
        alternatives=tuple(neutral), formal=tuple(formal), casual=tuple(casual),
        is_regex=regex, hard_strip=hard,
    )


RUSSIAN_SIGNATURES = [
    # Introductions and scene-setting
    _ru("в современном мире", 15, TRANSITION,
        ["в наши дни", "в нынешних условиях"],
        formal=["в нынешних условиях"], casual=["в наши дни", "сейчас повсюду"],
        hard=True),
    _ru("В наше время", 10, TRANSITION, ["Сейчас"], formal=["Ныне"]),
    _ru(r"В\s+эпоху\s+(?:цифровизации|глобализации|информатизации)", 12, TRANSITION,
        ["С развитием технологий"], formal=["В период технологических перемен"],
        casual=["Сейчас"], regex=True),
    _ru("Актуальность данной темы", 12, BOILERPLATE,
        ["Важность вопроса"], formal=["Значимость темы"], casual=["Интерес к теме"]),
    _ru("На протяжении всей истории человечества", 10, TRANSITION,
        ["Во все времена"], formal=["Издавна"], casual=["Всегда"]),
    _ru(r"Данн(?:ая|ый|ое)\s+(?:тема|вопрос|проблема)\s+(?:является\s+)?актуальн[а-яё]*", 10,
        BOILERPLATE, ["Это заслуживает внимания"], formal=["Это требует внимания"],
        regex=True),
    _ru(r"В\s+условиях\s+(?:современного|быстро\s+меняющегося)", 8, TRANSITION,
        ["В условиях нынешнего"], formal=["В контексте текущего"],
        casual=["На фоне нынешнего"], regex=True),
    # Detection only: no rewrite keeps the sentence intact.
    _ru(r"Вопрос(?:\s+[а-яё-]+){0,5}\s+всегда\s+(?:был|являлся|оставался)", 8, BOILERPLATE,
        [], regex=True),

    # Transitions
    _ru("Следует отметить, что", 20, TRANSITION,
        ["Заметим, что", "Нужно сказать, что"],
        formal=["Подчеркнём, что", "Отметим, что"],
        casual=["Скажем прямо:", "Важно вот что:"],
        hard=True),
    _ru("Стоит отметить, что", 15, TRANSITION,
        ["Заметим, что"], formal=["Укажем, что"], casual=["Замечу, что"], hard=True),
    _ru("Важно отметить, что", 15, TRANSITION,
        ["Заметим, что"], formal=["Отметим, что"], casual=["Замечу, что"], hard=True),
    _ru("Нельзя не отметить, что", 15, TRANSITION,
        ["Заметим, что"], formal=["Укажем также, что"], casual=["Скажу сразу, что"],
        hard=True),
    _ru("Необходимо отметить, что", 15, TRANSITION,
        ["Заметим, что", "Нужно сказать, что"], formal=["Укажем также, что"],
        casual=["Скажу сразу, что"], hard=True),
    _ru("Важно подчеркнуть, что", 15, TRANSITION,
        ["Существенно, что"], formal=["Принципиально, что"],
        casual=["Главное тут в том, что"], hard=True),
    _ru("Кроме того,", 8, TRANSITION, ["Вдобавок", "Также"],
        formal=["Помимо прочего,"], casual=["Да и"]),
    _ru("Более того,", 8, TRANSITION, ["Сверх того,"], formal=["К тому же"], casual=["Да и"]),
    _ru("Помимо этого,", 8, TRANSITION, ["Вдобавок"], formal=["Наряду с этим"],
        casual=["И ещё"]),
    _ru("В свою очередь,", 6, TRANSITION, ["А"], formal=["Со своей стороны,"]),
    _ru("Вместе с тем,", 6, TRANSITION, ["Однако"], formal=["Тем не менее,"], casual=["Но"]),
    _ru("В данном контексте", 10, FILLER, ["Здесь"], formal=["В этой связи"], casual=["Тут"]),
    _ru("В этом контексте", 8, FILLER, ["Здесь"], formal=["В этой связи"], casual=["Тут"]),
    _ru("Не менее важно", 8, TRANSITION, ["Также важно"], formal=["Столь же существенно"]),
    _ru("Стоит также упомянуть", 10, TRANSITION, ["Упомянем и"], casual=["Упомяну ещё"]),

    # Conclusions
    _ru(r"Таким\s+образом,\s+можно\s+(?:сделать\s+вывод|заключить),?\s+что", 20, TRANSITION,
        ["Отсюда следует, что", "Итак, получается, что"],
        formal=["Из этого следует, что"], casual=["Вот и выходит, что"],
        regex=True, hard=True),
    _ru("Таким образом,", 6, TRANSITION, ["Итак,", "В итоге"],
        formal=["Следовательно,"], casual=["Выходит,"]),
    _ru(r"Таким\s+образом,(?=\s+(?:мы\s+можем|следует|необходимо)(?!\w))", 7, TRANSITION,
        ["Итак,"], formal=["Следовательно,"], casual=["Выходит,"], regex=True),
    _ru("Подводя итог,", 12, TRANSITION, ["В итоге"], formal=["Обобщая,"],
        casual=["Короче говоря,"]),
    _ru("Резюмируя вышесказанное,", 15, TRANSITION,
        ["Обобщая сказанное,"], formal=["Суммируя сказанное,"], casual=["Если коротко,"],
        hard=True),
    _ru("В заключение хотелось бы отметить, что", 18, TRANSITION,
        ["Напоследок отметим, что"], formal=["В завершение отметим, что"],
        casual=["Под конец скажу, что"], hard=True),
    _ru("В заключение,", 8, TRANSITION, ["Напоследок"], formal=["В завершение"]),
    _ru("На основании вышеизложенного", 12, BOILERPLATE,
        ["Исходя из сказанного"], formal=["С учётом изложенного"],
        casual=["Исходя из этого"], hard=True),
    _ru("В конечном итоге", 6, FILLER, ["В итоге"], formal=["В результате"],
        casual=["В конце концов"]),

    # Amplifiers and hedges
    _ru("безусловно,", 8, FILLER, ["конечно,"], formal=["разумеется,"], casual=["ясное дело,"]),
    _ru(r"Безусловно,(?=\s+(?:это|данн[а-яё]+)(?!\w))", 10, FILLER,
        ["Конечно,"], formal=["Разумеется,"], casual=["Ясное дело,"], regex=True),
    _ru("несомненно,", 8, FILLER, ["конечно,"], formal=["бесспорно,"], casual=["ясное дело,"]),
    _ru("очевидно, что", 8, FILLER, ["ясно, что"], formal=["понятно, что"],
        casual=["похоже, что"]),
    _ru("не подлежит сомнению", 10, FILLER, ["вряд ли вызывает споры"],
        formal=["едва ли оспоримо"], casual=["мало кто поспорит"]),
    _ru("является неотъемлемой частью", 15, BOILERPLATE,
        ["составляет важную часть"], formal=["образует важную часть"],
        casual=["— важная часть"], hard=True),
    _ru(r"играет\s+(?:важную|ключевую|значительную|особую|решающую)\s+роль", 15, BOILERPLATE,
        ["много значит", "определяет многое"], formal=["имеет существенное значение"],
        casual=["многое решает"], regex=True, hard=True),
    _ru(r"играют\s+(?:важную|ключевую|значительную|особую|решающую)\s+роль", 15, BOILERPLATE,
        ["много значат", "определяют многое"], formal=["имеют существенное значение"],
        casual=["многое решают"], regex=True, hard=True),
    _ru("представляет собой", 5, FILLER, ["— это"], formal=["является"]),
    _ru(r"представляет\s+(?:собой|большой)\s+интерес", 6, BOILERPLATE,
        ["вызывает интерес"], formal=["заслуживает внимания"],
        casual=["вызывает любопытство"], regex=True),
    _ru(r"оказывает\s+(?:значительное|существенное)\s+влияние", 10, BOILERPLATE,
        ["заметно влияет"], formal=["существенно влияет"], casual=["сильно влияет"],
        regex=True),
    _ru("имеет большое значение", 8, BOILERPLATE, ["немало значит"], casual=["много значит"]),
    _ru("занимает особое место", 8, BOILERPLATE, ["выделяется"], formal=["стоит особняком"]),

    # Lexical cliches
    _ru("широкий спектр", 8, BOILERPLATE, ["множество"], formal=["большой круг"]),
    _ru("в рамках данного исследования", 12, BOILERPLATE,
        ["в настоящей работе"], formal=["в этом исследовании"], hard=True),
    _ru("на данный момент", 6, FILLER, ["сейчас"], formal=["в настоящий момент"]),
    _ru("в настоящее время", 6, FILLER, ["сейчас"], formal=["ныне"]),
    _ru("значительное количество", 6, FILLER, ["немало"], formal=["заметное число"],
        casual=["много"]),
    _ru("неоценимый вклад", 8, BOILERPLATE, ["серьёзный вклад"], formal=["весомый вклад"],
        casual=["большой вклад"]),
    _ru("обширный массив", 6, BOILERPLATE, ["большой объём"]),

    # Assistant voice and self-reference
    _ru("Давайте рассмотрим", 12, SELF_REFERENCE, ["Рассмотрим"], casual=["Разберём-ка"],
        hard=True),
    _ru("Давайте разберёмся", 12, SELF_REFERENCE, ["Разберёмся"], hard=True),
    _ru("Рассмотрим подробнее", 8, SELF_REFERENCE, ["Разберём детальнее"]),
    _ru(r"Рассмотрим\s+(?:каждый|это|данный)\s+(?:аспект|пункт|вопрос)\s+"
        r"(?:подробнее|более\s+детально)", 8, SELF_REFERENCE,
        ["Остановимся на этом"], formal=["Остановимся на этом подробно"], regex=True),
    _ru("Итак, давайте", 5, SELF_REFERENCE, ["Итак,"]),
    _ru(r"Это\s+(?:важный|ключевой|значимый)\s+(?:вопрос|аспект|момент)", 5, SELF_REFERENCE,
        [], regex=True),
    _ru("Это интересный вопрос", 12, SELF_REFERENCE, ["Вопрос непростой"],
        formal=["Вопрос заслуживает внимания"], hard=True),
    _ru("Однозначного ответа нет", 8, SELF_REFERENCE, ["Ответить непросто"]),
    _ru(r"Как\s+(?:языковая\s+модель|искусственный\s+интеллект)(?:\s+[а-яё]+){0,2},", 30,
        SELF_REFERENCE, ["Со своей стороны,"], regex=True, hard=True),
    _ru(r"Как\s+ИИ(?:\s+[а-яё]+){0,2},", 30, SELF_REFERENCE,
        ["Скажу прямо,"], formal=["Признаюсь,"], casual=["Честно,"], regex=True, hard=True),

    # Structure: detection only, the match covers the opening marker
    _ru(r"Во-первых(?=[\s\S]{50,300}Во-вторых[\s\S]{50,300}В-третьих)", 7, TRANSITION,
        [], regex=True),
    _ru(r"С\s+одной\s+стороны(?=[\s\S]{50,200}С\s+другой\s+стороны)", 5, TRANSITION,
        [], regex=True),
    _ru("Я рад помочь", 20, SELF_REFERENCE, ["Помогу", "Попробую помочь"], hard=True),
    _ru("Надеюсь, это поможет", 20, SELF_REFERENCE, ["Пусть это пригодится"], hard=True),
]


ENGLISH_SIGNATURES = [
    # Introductions
    _en(r"In\s+today['’]s\s+(?:rapidly\s+)?(?:evolving|changing|modern|fast-paced)\s+world",
        15, TRANSITION, ["In the present day"], formal=["Under present conditions"],
        regex=True, hard=True),
    _en(r"In\s+the\s+(?:modern|contemporary|digital)\s+(?:era|age|landscape)", 12, TRANSITION,
        ["Today", "Nowadays"], formal=["At present"]),
    _en("In recent years,", 6, TRANSITION, ["Lately,"], formal=["Over the last few years,"]),
    _en("Throughout history,", 8, TRANSITION, ["Historically,"], casual=["For ages,"]),
    _en(r"(?:This|The)\s+topic\s+(?:is|remains|has\s+been)\s+(?:particularly\s+)?"
        r"(?:relevant|important|significant)", 9, BOILERPLATE,
        ["This question matters"], formal=["The question is pertinent"], regex=True),

    # Transitions
    _en("It is important to note that", 20, TRANSITION,
        ["We should note that"], formal=["One should observe that"],
        casual=["Keep in mind that"], hard=True),
    _en("It is worth noting that", 15, TRANSITION,
        ["Note also that"], formal=["Observe that"], casual=["Keep in mind that"], hard=True),
    _en("It is important to emphasize that", 15, TRANSITION,
        ["We should stress that"], formal=["One should stress that"], hard=True),
    _en("Furthermore,", 8, TRANSITION, ["Also,"], formal=["In addition,"], casual=["Plus,"]),
    _en("Moreover,", 8, TRANSITION, ["Besides,"], formal=["What is more,"], casual=["And"]),
    _en("Additionally,", 8, TRANSITION, ["Also,"], formal=["In addition,"], casual=["Plus,"]),
    _en("In this context,", 6, FILLER, ["Here,"], formal=["In this setting,"]),
    _en("That being said,", 6, TRANSITION, ["Still,"], formal=["Even so,"]),
    _en("Needless to say,", 8, FILLER, ["Clearly,"], formal=["Evidently,"]),

    # Conclusions
    _en("In conclusion,", 10, TRANSITION, ["To wrap up,"], formal=["To close,"],
        casual=["All in all,"]),
    _en("To summarize,", 8, TRANSITION, ["In short,"], formal=["In brief,"]),
    _en("In summary,", 8, TRANSITION, ["Overall,"], formal=["In brief,"]),
    _en("All things considered,", 8, TRANSITION, ["On balance,"]),
    _en("Taking everything into account,", 10, TRANSITION, ["On balance,"]),

    # Amplifiers and hedges
    _en("undoubtedly,", 6, FILLER, ["no doubt,"], formal=["certainly,"], casual=["sure enough,"]),
    _en("undeniably,", 6, FILLER, ["arguably,"]),
    _en("It goes without saying that", 12, FILLER,
        ["Few would dispute that"], formal=["It is evident that"],
        casual=["No one doubts that"], hard=True),
    _en(r"plays\s+an?\s+(?:crucial|vital|pivotal|key|important|significant)\s+role", 15,
        BOILERPLATE, ["matters a great deal"], formal=["is of central importance"],
        casual=["really matters"], regex=True, hard=True),
    _en(r"has\s+an?\s+(?:significant|profound|considerable)\s+impact\s+on", 10, BOILERPLATE,
        ["strongly affects"], formal=["substantially affects"], casual=["really affects"],
        regex=True),
    _en(r"a\s+wide\s+(?:range|variety|spectrum)\s+of", 8, BOILERPLATE,
        ["many"], formal=["a broad set of"], casual=["all sorts of"], regex=True),
    _en(r"it\s+is\s+(?:essential|imperative|crucial)\s+to", 8, BOILERPLATE,
        ["we must"], formal=["one must"], casual=["we have to"], regex=True),
    _en("in the realm of", 8, BOILERPLATE, ["in"], formal=["in the field of"]),
    _en("a testament to", 8, BOILERPLATE, ["proof of"], formal=["evidence of"]),
    _en("delve into", 10, FILLER, ["explore"], formal=["examine"], casual=["dig into"]),

    # Assistant voice and self-reference
    _en(r"Let['’]s\s+(?:dive|delve)\s+(?:deeper\s+)?into", 15, SELF_REFERENCE,
        ["Let us look at"], formal=["We now turn to"], casual=["Now, on to"],
        regex=True, hard=True),
    _en(r"Let\s+me\s+(?:explain|break\s+(?:this|it)\s+down\s+for\s+you|walk\s+you\s+through)",
        10, SELF_REFERENCE, ["Consider"], regex=True),
    _en(r"That['’]s\s+a\s+(?:great|good|excellent)\s+question", 20, SELF_REFERENCE,
        ["A fair question"], regex=True, hard=True),
    _en(r"I['’]d\s+be\s+(?:happy|glad)\s+to", 20, SELF_REFERENCE,
        ["I can gladly"], formal=["I am willing to"], regex=True, hard=True),
    _en(r"As\s+an?\s+(?:AI\s+language\s+model|artificial\s+intelligence|"
        r"(?:large\s+)?language\s+model),", 30, SELF_REFERENCE,
        ["Speaking for myself,"], regex=True, hard=True),
    _en(r"As\s+an?\s+AI,", 30, SELF_REFERENCE,
        ["Frankly,"], formal=["Candidly,"], casual=["Honestly,"], regex=True, hard=True),
    _en("I hope this helps", 20, SELF_REFERENCE, ["Hopefully this helps"], hard=True),
    _en("Absolutely!", 6, SELF_REFERENCE, ["Indeed."], casual=["Sure."]),
    _en("Great question!", 12, SELF_REFERENCE, ["Fair point."], hard=True),
]


def default_entries() -> List[PatternEntry]:
    """The signatures shipped with the engine."""
    return list(RUSSIAN_SIGNATURES) + list(ENGLISH_SIGNATURES)

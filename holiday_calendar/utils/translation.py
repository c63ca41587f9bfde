"""
Spanish to English translation of holiday names and descriptions.

Each translation is an ordered chain of (predicate, transform) rules. The
first rule whose predicate matches produces the result; the chain ends in an
identity rule, so translation never fails and unmapped text passes through.
"""
import re
from typing import Callable, List, NamedTuple, Optional

HOLIDAY_NAME_TRANSLATIONS = {
    # Fixed holidays
    "Año Nuevo": "New Year's Day",
    "Día del Trabajador": "Labor Day",
    "Día de la Revolución de Mayo": "May Revolution Day",
    "Día de la Independencia": "Independence Day",
    "Día de la Soberanía Nacional": "National Sovereignty Day",
    "Inmaculada Concepción de María": "Immaculate Conception of Mary",
    "Navidad": "Christmas",
    # Movable holidays
    "Carnaval": "Carnival",
    "Día de la Memoria por la Verdad y la Justicia": "Day of Remembrance for Truth and Justice",
    "Día Nacional de la Memoria por la Verdad y la Justicia": "National Day of Remembrance for Truth and Justice",
    "Día del Veterano y de los Caídos en la Guerra de Malvinas": "Veterans Day and Day of the Fallen in the Malvinas War",
    "Pascuas": "Easter",
    "Viernes Santo": "Good Friday",
    "Día de la Bandera": "Flag Day",
    "Paso a la Inmortalidad del General Martín Miguel de Güemes": "Passing to Immortality of General Martín Miguel de Güemes",
    "Paso a la Inmortalidad del General Manuel Belgrano": "Passing to Immortality of General Manuel Belgrano",
    "Paso a la Inmortalidad del General José de San Martín": "Passing to Immortality of General José de San Martín",
    "Día del Respeto a la Diversidad Cultural": "Day of Respect for Cultural Diversity",
    # Organization days off
    "Revolt Day Off": "Revolt Day Off",
    # Bridge holidays
    "Puente turístico no laborable": "Tourist Bridge Holiday",
    "Puente": "Bridge Holiday",
}

HOLIDAY_TYPE_TRANSLATIONS = {
    "inamovible": "fixed",
    "trasladable": "movable",
    "no laborable": "non-working",
    "turístico": "tourist",
    "puente": "bridge",
}

_LOWER_NAME_TRANSLATIONS = {k.lower(): v for k, v in HOLIDAY_NAME_TRANSLATIONS.items()}

_DIA_DE = re.compile(r"^Día de ", re.IGNORECASE)
_DIA_NACIONAL_DE = re.compile(r"^Día Nacional de ", re.IGNORECASE)
_INMORTALIDAD_PREFIX = re.compile(
    r"Paso a la Inmortalidad del General |Paso a la Inmortalidad de ", re.IGNORECASE
)
_OFFICIAL_KIND = re.compile(r"feriado oficial\s*\(([^)]*)\)", re.IGNORECASE)


class Rule(NamedTuple):
    name: str
    matches: Callable[[str], bool]
    transform: Callable[[str], str]


def _translate_dia_de(text: str) -> str:
    rest = _DIA_DE.sub("", text, count=1)
    pattern_key = f"Día de {rest}"
    if pattern_key in HOLIDAY_NAME_TRANSLATIONS:
        return HOLIDAY_NAME_TRANSLATIONS[pattern_key]
    return f"Day of {rest}"


def _translate_inmortalidad(text: str) -> str:
    person = _INMORTALIDAD_PREFIX.sub("", text, count=1)
    return f"Passing to Immortality of General {person}"


def _translate_puente(text: str) -> str:
    if "turístico" in text.lower():
        return "Tourist Bridge Holiday"
    return "Bridge Holiday"


NAME_RULES: List[Rule] = [
    Rule("exact", lambda t: t in HOLIDAY_NAME_TRANSLATIONS, lambda t: HOLIDAY_NAME_TRANSLATIONS[t]),
    Rule("exact_ignore_case", lambda t: t.lower() in _LOWER_NAME_TRANSLATIONS, lambda t: _LOWER_NAME_TRANSLATIONS[t.lower()]),
    Rule("dia_de", lambda t: bool(_DIA_DE.match(t)), _translate_dia_de),
    Rule("dia_nacional_de", lambda t: bool(_DIA_NACIONAL_DE.match(t)), lambda t: "National Day of " + _DIA_NACIONAL_DE.sub("", t, count=1)),
    Rule("paso_a_la_inmortalidad", lambda t: "Paso a la Inmortalidad" in t, _translate_inmortalidad),
    Rule("puente", lambda t: "puente" in t.lower(), _translate_puente),
]


def _apply(rules: List[Rule], text: str) -> Optional[str]:
    for rule in rules:
        if rule.matches(text):
            return rule.transform(text)
    return None


def translate_name(name: str) -> str:
    """Translate a Spanish holiday name; unknown names are returned unchanged."""
    if not isinstance(name, str):
        return "" if name is None else str(name)
    translated = _apply(NAME_RULES, name.strip())
    return name if translated is None else translated


def translate_kind(kind: str) -> str:
    """Map a source holiday type (inamovible, trasladable, ...) to English."""
    normalized = kind.strip().lower()
    if normalized in HOLIDAY_TYPE_TRANSLATIONS:
        return HOLIDAY_TYPE_TRANSLATIONS[normalized]
    for spanish, english in HOLIDAY_TYPE_TRANSLATIONS.items():
        if spanish in normalized:
            return english
    return kind


def _official_holiday(kind: Optional[str]) -> Callable[[str], str]:
    def transform(_text: str) -> str:
        if kind:
            return f"Official holiday ({translate_kind(kind)})"
        return "Official holiday"
    return transform


def description_rules(kind: Optional[str] = None) -> List[Rule]:
    return [
        Rule("feriado_oficial", lambda t: "feriado oficial" in t.lower(), _official_holiday(kind)),
        Rule("puente_turistico", lambda t: "puente turístico" in t.lower(), lambda t: "Tourist bridge holiday"),
        Rule("puente", lambda t: "puente" in t.lower(), lambda t: "Bridge holiday"),
    ]


DESCRIPTION_RULES = description_rules()


def translate_description(description: str, kind: Optional[str] = None) -> str:
    """Translate a Spanish description; `kind` is the source holiday type, if known."""
    if not isinstance(description, str):
        return "" if description is None else str(description)
    translated = _apply(description_rules(kind), description)
    return description if translated is None else translated


def extract_kind(description: Optional[str]) -> Optional[str]:
    """Holiday type from a "Feriado oficial (<kind>)" description."""
    if not description:
        return None
    match = _OFFICIAL_KIND.search(description)
    if not match or not match.group(1).strip():
        return None
    return match.group(1).strip()


def display_name(holiday, language: str = "en") -> str:
    if language == "en":
        return holiday.name_en or holiday.name
    return holiday.name


def display_description(holiday, language: str = "en") -> Optional[str]:
    if not holiday.description and not holiday.description_en:
        return None
    if language == "en":
        return holiday.description_en or holiday.description
    return holiday.description

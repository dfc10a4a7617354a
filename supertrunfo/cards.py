"""Super Trunfo cards, their attributes and the rules for comparing them."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, IntEnum

GDP_UNIT = 1_000_000_000

CODE_PROMPT = "Digite o código da carta: "
POPULATION_PROMPT = "Digite a população: "
AREA_PROMPT = "Digite a área (em km²): "
SPOTS_PROMPT = "Digite o número de pontos turísticos: "
CITY_NAME_PROMPT = "Digite o nome da cidade: "
COUNTRY_NAME_PROMPT = "Digite o nome do país: "
REAIS_GDP_PROMPT = "Digite o PIB (em bilhões de reais): "
DOLLARS_GDP_PROMPT = "Digite o PIB (em bilhões de dólares): "


class Attribute(IntEnum):
    """A comparable card attribute, numbered as in the game menus."""

    POPULATION = 1
    AREA = 2
    GDP = 3
    TOURIST_SPOTS = 4
    DENSITY = 5
    GDP_PER_CAPITA = 6

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def lower_wins(self) -> bool:
        """Population density is the one attribute where the smaller value wins."""
        return self is Attribute.DENSITY


_LABELS = {
    Attribute.POPULATION: "População",
    Attribute.AREA: "Área",
    Attribute.GDP: "PIB",
    Attribute.TOURIST_SPOTS: "Pontos Turísticos",
    Attribute.DENSITY: "Densidade Demográfica",
    Attribute.GDP_PER_CAPITA: "PIB per capita",
}

_FIELDS = {
    Attribute.POPULATION: "population",
    Attribute.AREA: "area",
    Attribute.GDP: "gdp",
    Attribute.TOURIST_SPOTS: "tourist_spots",
    Attribute.DENSITY: "density",
    Attribute.GDP_PER_CAPITA: "gdp_per_capita",
}


class Outcome(Enum):
    """Which card won a comparison."""

    FIRST = "first"
    SECOND = "second"
    TIE = "tie"


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division that yields inf or nan instead of raising."""
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass(frozen=True)
class Card:
    """One card: a city or country with its game attributes."""

    state: str
    code: str
    name: str
    population: int
    area: float
    gdp: float
    tourist_spots: int

    @property
    def density(self) -> float:
        """Inhabitants per square kilometre."""
        return _divide(self.population, self.area)

    @property
    def gdp_per_capita(self) -> float:
        """GDP per inhabitant; the GDP is given in billions."""
        return _divide(self.gdp * GDP_UNIT, self.population)

    def value(self, attribute: Attribute) -> float:
        return getattr(self, _FIELDS[Attribute(attribute)])


def compare(first: Card, second: Card, attribute: Attribute) -> Outcome:
    """Compare two cards on one attribute; NaN values always tie."""
    attribute = Attribute(attribute)
    a, b = first.value(attribute), second.value(attribute)
    if attribute.lower_wins:
        a, b = -a, -b
    if a > b:
        return Outcome.FIRST
    if b > a:
        return Outcome.SECOND
    return Outcome.TIE


def _word(text: str, what: str) -> str:
    words = text.split()
    if not words:
        raise ValueError(f"{what} must not be empty")
    return words[0]


def _count(text: str, what: str) -> int:
    try:
        number = int(text.strip())
    except ValueError:
        raise ValueError(f"{what} must be an integer, got {text.strip()!r}") from None
    if number < 0:
        raise ValueError(f"{what} must not be negative, got {number}")
    return number


def _integer(text: str, what: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise ValueError(f"{what} must be an integer, got {text.strip()!r}") from None


def _real(text: str, what: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        raise ValueError(f"{what} must be a number, got {text.strip()!r}") from None


def read_card(
    ask: Callable[[str], str], state_prompt: str, name_prompt: str, gdp_prompt: str
) -> Card:
    """Ask for every field of a card in turn and build it.

    ``ask`` receives a prompt and returns the line typed in answer.
    """
    state = _word(ask(state_prompt), "state")
    code = _word(ask(CODE_PROMPT), "card code")
    name = ask(name_prompt).strip()
    if not name:
        raise ValueError("name must not be empty")
    population = _count(ask(POPULATION_PROMPT), "population")
    area = _real(ask(AREA_PROMPT), "area")
    gdp = _real(ask(gdp_prompt), "GDP")
    spots = _integer(ask(SPOTS_PROMPT), "tourist spots")
    return Card(state, code, name, population, area, gdp, spots)
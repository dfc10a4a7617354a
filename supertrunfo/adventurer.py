"""Two-card game where the player picks the attribute to compare."""

from __future__ import annotations

import argparse
import sys

from supertrunfo.cards import (
    CITY_NAME_PROMPT,
    REAIS_GDP_PROMPT,
    Attribute,
    Card,
    Outcome,
    compare,
    read_card,
)

HEADER = "*** Super Trunfo - Comparação de Cartas ***"
FIRST_STATE_PROMPT = "Digite o estado da primeira cidade: "
SECOND_STATE_PROMPT = "\nDigite o estado da segunda cidade: "
INVALID = "Opção inválida! Tente novamente."
MENU = "\nEscolha o atributo para comparar:\n" + "".join(
    f"{attribute.value} - {attribute.label}\n" for attribute in Attribute
)


def _detail(attribute: Attribute, first: Card, second: Card) -> str:
    match attribute:
        case Attribute.POPULATION:
            return f"População: {first.population} vs {second.population}"
        case Attribute.AREA:
            return f"Área: {first.area:.2f} km² vs {second.area:.2f} km²"
        case Attribute.GDP:
            return f"PIB: R$ {first.gdp:.2f} bilhões vs R$ {second.gdp:.2f} bilhões"
        case Attribute.TOURIST_SPOTS:
            return f"Pontos Turísticos: {first.tourist_spots} vs {second.tourist_spots}"
        case Attribute.DENSITY:
            return (
                f"Densidade Demográfica: {first.density:.2f} hab/km² "
                f"vs {second.density:.2f} hab/km²"
            )
        case _:
            return f"PIB per capita: R$ {first.gdp_per_capita:.2f} vs R$ {second.gdp_per_capita:.2f}"


def render(first: Card, second: Card, choice: int) -> str:
    """Describe the comparison on the chosen menu option and its winner."""
    header = f"\nComparando {first.name} ({first.state}) e {second.name} ({second.state}):\n"
    try:
        attribute = Attribute(choice)
    except ValueError:
        return header + INVALID + "\n"
    outcome = compare(first, second, attribute)
    if outcome is Outcome.FIRST:
        result = f"Resultado: {first.name} venceu!"
    elif outcome is Outcome.SECOND:
        result = f"Resultado: {second.name} venceu!"
    else:
        result = "Resultado: Empate!"
    return f"{header}{_detail(attribute, first, second)}\n{result}\n"


def _parse_choice(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        prog="supertrunfo-adventurer",
        description="Compare two city cards on an attribute of your choice.",
    ).parse_args(argv)
    print(HEADER)
    try:
        first = read_card(input, FIRST_STATE_PROMPT, CITY_NAME_PROMPT, REAIS_GDP_PROMPT)
        second = read_card(input, SECOND_STATE_PROMPT, CITY_NAME_PROMPT, REAIS_GDP_PROMPT)
        print(MENU, end="")
        choice = _parse_choice(input("Opção: "))
    except (EOFError, ValueError) as exc:
        print(f"\nEntrada inválida: {exc}", file=sys.stderr)
        return 1
    print(render(first, second, choice), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
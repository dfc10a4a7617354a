"""Two-card game that compares cities on GDP per capita."""

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


def render(first: Card, second: Card) -> str:
    """Describe the GDP-per-capita comparison of two cards and its winner."""
    outcome = compare(first, second, Attribute.GDP_PER_CAPITA)
    if outcome is Outcome.FIRST:
        result = f"Resultado: Carta 1 ({first.name}) venceu!"
    elif outcome is Outcome.SECOND:
        result = f"Resultado: Carta 2 ({second.name}) venceu!"
    else:
        result = "Resultado: Empate!"
    lines = [
        "",
        "Comparação de cartas (Atributo: PIB per capita):",
        "",
        f"Carta 1 - {first.name} ({first.state}): R$ {first.gdp_per_capita:.2f}",
        f"Carta 2 - {second.name} ({second.state}): R$ {second.gdp_per_capita:.2f}",
        "",
        result,
    ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        prog="supertrunfo-basic",
        description="Compare two city cards on GDP per capita.",
    ).parse_args(argv)
    print(HEADER)
    try:
        first = read_card(input, FIRST_STATE_PROMPT, CITY_NAME_PROMPT, REAIS_GDP_PROMPT)
        second = read_card(input, SECOND_STATE_PROMPT, CITY_NAME_PROMPT, REAIS_GDP_PROMPT)
    except (EOFError, ValueError) as exc:
        print(f"\nEntrada inválida: {exc}", file=sys.stderr)
        return 1
    print(render(first, second), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Country card game comparing two attributes and their sum."""

from __future__ import annotations

import argparse
import sys

from supertrunfo.cards import (
    COUNTRY_NAME_PROMPT,
    DOLLARS_GDP_PROMPT,
    Attribute,
    Card,
    Outcome,
    compare,
    read_card,
)

RULE = "========================================="
DASHES = "-----------------------------------------"
STATE_PROMPT = "Digite o estado (sigla): "
INVALID = "Opção inválida! Tente novamente."
HEADER = f"{RULE}\n      SUPER TRUNFO - PAÍSES\n{RULE}\n\n>>> Cadastro do Primeiro País\n{DASHES}"
SECOND_HEADER = f"\n>>> Cadastro do Segundo País\n{DASHES}"
CHOICE_HEADER = f"\n{RULE}\n         Escolha de Atributos\n{RULE}"
FIRST_HEADING = "\nEscolha o primeiro atributo para comparar:"
SECOND_HEADING = "\nEscolha o segundo atributo para comparar (diferente do primeiro):"


def second_menu(excluded: int | None) -> str:
    """Menu lines for every attribute except the one already chosen."""
    return "".join(
        f"{attribute.value} - {attribute.label}\n"
        for attribute in Attribute
        if attribute != excluded
    )


def _verdict(first: Card, second: Card, attribute: Attribute, ordinal: str) -> str:
    outcome = compare(first, second, attribute)
    if outcome is Outcome.FIRST:
        return f"{first.name} vence no {ordinal} atributo!"
    if outcome is Outcome.SECOND:
        return f"{second.name} vence no {ordinal} atributo!"
    return f"Empate no {ordinal} atributo!"


def render(first: Card, second: Card, first_attribute: int, second_attribute: int) -> str:
    """Describe both attribute comparisons, the sums and the final winner."""
    chosen = (Attribute(first_attribute), Attribute(second_attribute))
    if chosen[0] == chosen[1]:
        raise ValueError("the two attributes must be different")

    parts = [
        "", RULE, "         Comparação dos Países", RULE,
        "", f"País 1: {first.name} ({first.state})", f"País 2: {second.name} ({second.state})", "",
    ]
    for number, (ordinal, attribute) in enumerate(zip(("primeiro", "segundo"), chosen), start=1):
        parts += [
            f">>> Atributo {number}: {attribute.label}",
            f"{first.name}: {first.value(attribute):.2f}",
            f"{second.name}: {second.value(attribute):.2f}",
            _verdict(first, second, attribute, ordinal),
            "",
        ]

    first_sum = sum(first.value(attribute) for attribute in chosen)
    second_sum = sum(second.value(attribute) for attribute in chosen)
    if first_sum > second_sum:
        final = f"{first.name} venceu!"
    elif second_sum > first_sum:
        final = f"{second.name} venceu!"
    else:
        final = "Empate!"

    parts += [
        ">>> Soma dos Atributos:",
        f"{first.name}: {first_sum:.2f}",
        f"{second.name}: {second_sum:.2f}",
        "", RULE, "         Resultado Final", RULE,
        "", final,
        "", RULE,
    ]
    return "\n".join(parts) + "\n"


def _choose(heading: str, excluded: int | None) -> Attribute:
    """Keep asking until a valid attribute other than ``excluded`` is picked."""
    while True:
        print(heading)
        print(second_menu(excluded), end="")
        text = input("Opção: ").strip()
        try:
            attribute = Attribute(int(text))
        except ValueError:
            attribute = None
        if attribute is not None and attribute != excluded:
            return attribute
        print(INVALID)


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        prog="supertrunfo-master",
        description="Compare two country cards on two attributes of your choice.",
    ).parse_args(argv)
    print(HEADER)
    try:
        first = read_card(input, STATE_PROMPT, COUNTRY_NAME_PROMPT, DOLLARS_GDP_PROMPT)
        print(SECOND_HEADER)
        second = read_card(input, STATE_PROMPT, COUNTRY_NAME_PROMPT, DOLLARS_GDP_PROMPT)
        print(CHOICE_HEADER)
        first_attribute = _choose(FIRST_HEADING, None)
        second_attribute = _choose(SECOND_HEADING, first_attribute)
    except (EOFError, ValueError) as exc:
        print(f"\nEntrada inválida: {exc}", file=sys.stderr)
        return 1
    print(render(first, second, first_attribute, second_attribute), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
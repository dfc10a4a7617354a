import io

import pytest

from supertrunfo.basic import HEADER, main, render
from supertrunfo.cards import Card

RICH = Card("XX", "A01", "A", 1000, 10.0, 2.0, 1)
POOR = Card("YY", "B02", "B", 1000, 10.0, 1.0, 1)

STDIN = "XX\nA01\nA\n2000\n10\n5\n9\nYY\nB02\nB\n1000\n1\n2\n3\n"


def test_render_first_wins():
    text = render(RICH, POOR)
    assert text.endswith("\nResultado: Carta 1 (A) venceu!\n")


def test_render_second_wins():
    text = render(POOR, RICH)
    assert text.endswith("\nResultado: Carta 2 (A) venceu!\n")


def test_render_tie():
    assert render(RICH, RICH).endswith("\nResultado: Empate!\n")


def test_render_layout():
    card = Card("XX", "A01", "A", 1000, 1.0, 1.0, 0)
    text = render(card, POOR)
    assert text.startswith("\nComparação de cartas (Atributo: PIB per capita):\n\n")
    assert "Carta 1 - A (XX): R$ 1000000.00\n" in text
    assert text.splitlines()[4].startswith("Carta 2 - B (YY): R$ ")


def test_main_plays_a_round(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(STDIN))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith(HEADER + "\n")
    assert out.endswith("Resultado: Carta 1 (A) venceu!\n")


@pytest.mark.parametrize("stdin", ["", "XX\nA01\nA\nabc\n10\n5\n9\n"])
def test_main_rejects_bad_input(monkeypatch, capsys, stdin):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    assert main([]) == 1
    assert "Entrada inválida" in capsys.readouterr().err
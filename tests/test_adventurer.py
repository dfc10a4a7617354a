import io

import pytest

from supertrunfo.adventurer import INVALID, MENU, main, render
from supertrunfo.cards import Attribute, Card

FIRST = Card("XX", "A01", "A", 2000, 10.0, 5.0, 9)
SECOND = Card("YY", "B02", "B", 1000, 1.0, 2.0, 3)

CARDS_STDIN = "XX\nA01\nA\n2000\n10\n5\n9\nYY\nB02\nB\n1000\n1\n2\n3\n"


@pytest.mark.parametrize("choice", [1, 2, 3, 4, 5, 6])
def test_first_card_wins_every_attribute(choice):
    text = render(FIRST, SECOND, choice)
    assert text.startswith("\nComparando A (XX) e B (YY):\n")
    assert text.endswith("Resultado: A venceu!\n")


@pytest.mark.parametrize("choice", [1, 2, 3, 4, 5, 6])
def test_second_card_wins_when_swapped(choice):
    assert render(SECOND, FIRST, choice).endswith("Resultado: A venceu!\n")
    assert "Comparando B (YY) e A (XX)" in render(SECOND, FIRST, choice)


@pytest.mark.parametrize("choice", [1, 2, 3, 4, 5, 6])
def test_tie(choice):
    assert render(FIRST, FIRST, choice).endswith("Resultado: Empate!\n")


def test_population_line():
    assert "\nPopulação: 2000 vs 1000\n" in render(FIRST, SECOND, Attribute.POPULATION)


def test_tourist_spots_line():
    assert "\nPontos Turísticos: 9 vs 3\n" in render(FIRST, SECOND, 4)


@pytest.mark.parametrize("choice", [0, 7, -1])
def test_invalid_choice(choice):
    text = render(FIRST, SECOND, choice)
    assert text == "\nComparando A (XX) e B (YY):\n" + INVALID + "\n"


def test_menu_lists_all_attributes_in_order():
    lines = MENU.strip().splitlines()[1:]
    assert lines == [f"{a.value} - {a.label}" for a in Attribute]


def test_main_plays_a_round(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(CARDS_STDIN + "5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Densidade Demográfica:" in out
    assert out.endswith("Resultado: A venceu!\n")


@pytest.mark.parametrize("option", ["9", "x"])
def test_main_with_invalid_option(monkeypatch, capsys, option):
    monkeypatch.setattr("sys.stdin", io.StringIO(CARDS_STDIN + option + "\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith(INVALID + "\n")


def test_main_rejects_truncated_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("XX\nA01\n"))
    assert main([]) == 1
    assert "Entrada inválida" in capsys.readouterr().err
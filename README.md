# supertrunfo

Super Trunfo card duels played at the terminal. You register two cards. Each
card describes a city or a country by its state code, card code, name,
population, area, GDP (in billions) and number of tourist attractions. The
game works out population density and GDP per capita, then decides which card
wins. The games talk to you in Portuguese.

## Installation

```
pip install .
```

## Games

Three commands are installed. Each one reads its answers from standard input
and prints the report to standard output. Each command accepts `--help`.
Input that cannot be used stops the game with exit status 1 and a message on
standard error that starts with `Entrada inválida:`. This covers an empty
state, card code or name, a population that is not a non-negative integer, an
area or GDP that is not a number, a tourist-attraction count that is not an
integer, and input that ends early.

### `supertrunfo`

The basic game. It compares the two cities by GDP per capita and prints the
winner, or a tie.

### `supertrunfo-aventureiro`

After the two cards are registered, a menu lets you choose one attribute to
compare:

1. População
2. Área
3. PIB
4. Pontos Turísticos
5. Densidade Demográfica
6. PIB per capita

The higher value wins, except for population density, where the lower value
wins. If you pick anything outside the menu, the game prints
`Opção inválida! Tente novamente.` and ends.

### `supertrunfo-mestre`

The countries edition, with GDP entered in billions of dollars. You pick two
different attributes. Both menus keep asking until you give a valid choice,
and the second menu leaves out the attribute you already chose. Each attribute
is compared on its own, using the same rules as above. The two values of each
card are then added together, and the card with the larger sum wins.

## Using the library

The card model lives in `supertrunfo.cards`:

- `Attribute` is an `IntEnum` numbered as in the menus. Each member has a
  `label` (its menu text) and `lower_wins` (true only for `DENSITY`).
- `Card` is a frozen dataclass with the fields `state`, `code`, `name`,
  `population`, `area`, `gdp` and `tourist_spots`. The properties
  `Card.density` and `Card.gdp_per_capita` give the derived figures. Division
  by zero gives `inf` or `nan` instead of raising. `Card.value(attribute)`
  returns the value for any `Attribute`.
- `compare(first, second, attribute)` returns an `Outcome` (`FIRST`, `SECOND`
  or `TIE`). A `nan` value always ties.
- `read_card(ask, state_prompt, name_prompt, gdp_prompt)` builds a `Card`. It
  calls `ask` with each prompt in turn and raises `ValueError` on input it
  cannot use.

Each game module has a `render(...)` function that returns the report as text,
and a `main(argv=None)` entry point:

- `supertrunfo.basic.render(first, second)`
- `supertrunfo.adventurer.render(first, second, choice)`. An invalid `choice`
  gives the "Opção inválida" message.
- `supertrunfo.master.render(first, second, first_attribute, second_attribute)`.
  It raises `ValueError` if the two attributes are the same.
  `supertrunfo.master.second_menu(excluded)` returns the menu lines without the
  excluded attribute.

## What it does not do

Each game is a single duel between two cards typed in at the prompt. There is
no deck, no sequence of rounds and no score. Cards are not saved anywhere.

## Running the tests

```
pip install .[test]
pytest
```
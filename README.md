# pifecards

A two-player card game for the terminal, played by two people at the same
keyboard. Each player is dealt six cards from a shuffled 52-card deck and the
players then take turns. The game ends when a player's hand is empty; that
player wins.

## Installing

```
pip install .
```

## Playing

```
pifecards
```

Options:

- `--scores PATH`: the file that holds the win counts (default `placar.txt` in
  the working directory).
- `--seed N`: seed for shuffling the deck, to repeat the same deal.

Each turn has two steps:

1. **Draw** one card, either from the deck (1) or from the top of the discard
   pile on the table (2, offered only when the pile has cards). If the chosen
   pile is empty you are asked again.
2. **Act**:
   - (1) **Set** (*trinca*): three cards of the same rank, each of a different
     suit. They are taken out of play and you act again.
   - (2) **Run** (*sequência*): three consecutive ranks of one suit, such as
     4, 5 and 6 of COPAS. They are taken out of play and you act again.
   - (3) **Discard** one card from your hand onto the table. This ends your
     turn.
   - (4) **Show the scoreboard**, then act again.

Type ranks as `AS` (or `A`), `2` to `10`, `J`, `Q` or `K`. Type suits as `PAUS`,
`OUROS`, `COPAS` or `ESPADAS`. Invalid entries are asked for again.

A round always gives both players their turn; whether a hand is empty is
checked after player 2 has played. Ending input (Ctrl-D) or interrupting
(Ctrl-C) stops the game without recording a result.

## Scoreboard

When a game ends, the winner's total goes up by one and both totals are
printed. The totals are kept in the scores file as two numbers, `J1 J2`. If the
file is missing, both players start at zero.

## Using it as a library

- `pifecards.cards`: the `Card` and `Suit` types, `new_deck(rng)`,
  `parse_rank`, `parse_suit` and `format_cards`.
- `pifecards.game`: `deal`, `draw`, `discard`, `check_set` and `check_run`. They
  raise `EmptyPileError`, `CardNotInHandError` or `InvalidMeldError` when a move
  is not allowed. `check_run` returns the three cards ordered by rank.
- `pifecards.scoreboard`: `Scoreboard(path)`, with `read()` and
  `record_win(winner)`.
- `pifecards.cli`: `play(ask, output, rng, scoreboard)` runs a whole game using
  any input and output callables you pass in and returns the winner (1 or 2);
  `prompt_card(ask, output)` asks for one card.

## What it does not do

There is no computer opponent and no play over a network: both players share
one terminal and can see each other's hands. A game in progress cannot be
saved; only the win counts are kept.
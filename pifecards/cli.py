"""Interactive two-player game on the terminal."""

from __future__ import annotations

import argparse
import random
import re
from typing import Callable, Sequence

from pifecards.cards import Card, format_cards, new_deck, parse_rank, parse_suit
from pifecards.game import (
    CardNotInHandError,
    EmptyPileError,
    InvalidMeldError,
    check_run,
    check_set,
    deal,
    discard,
    draw,
)
from pifecards.scoreboard import Scoreboard

Ask = Callable[[str], str]
Output = Callable[[str], object]

_RULE = "\n========================\n"
_INT = re.compile(r"\s*([+-]?\d+)")
_TOKEN_LIMIT = 8
_ACTION_MENU = (
    "\nEscolha a acao:"
    "\n (1) Fazer Trinca\n"
    "\n (2) Fazer Sequencia\n"
    "\n (3) Descarta\n"
    "\n (4) Mostrar placar\n:"
)


def _read_option(ask: Ask, prompt: str) -> int | None:
    match = _INT.match(ask(prompt))
    return int(match.group(1)) if match else None


def _read_token(ask: Ask, prompt: str) -> str:
    words = ask(prompt).split()
    return words[0][:_TOKEN_LIMIT] if words else ""


def prompt_card(ask: Ask, output: Output) -> Card:
    """Ask for a rank and a suit until both are valid."""
    while True:
        text = _read_token(ask, "\nDigite o valor da carta, ex(AS, 2-10, J, Q, K): ")
        try:
            rank = parse_rank(text)
            break
        except ValueError:
            output("Valor invalido. Tente escolher um valor entre AS ate K\n")
    while True:
        text = _read_token(ask, "Digite o naipe da carta: OUROS, ESPADAS, PAUS ou COPAS: ")
        try:
            suit = parse_suit(text)
            break
        except ValueError:
            output(
                "\nNaipe invalido. Tente digitar o nome do naipe escolhido: "
                "OUROS, COPAS, ESPADAS ou PAUS.\n" + _RULE
            )
    return Card(rank, suit)


def _draw_phase(ask: Ask, output: Output, player: int, hand: list[Card],
                deck: list[Card], pile: list[Card]) -> None:
    while True:
        output(f"{_RULE}      JOGADOR {player}")
        menu = "\nEscolha onde comprar:\n (1) Baralho\n:"
        if pile:
            menu += "\n (2) Mesa\n:"
        option = _read_option(ask, menu)
        if option not in (1, 2):
            output("\nOpicao invalida")
            continue
        try:
            draw(deck if option == 1 else pile, hand)
        except EmptyPileError as error:
            output(f"\n{error}")
        else:
            if option == 1:
                output("\n Certo baralho")
            return


def _prompt_meld(ask: Ask, output: Output) -> list[Card]:
    chosen = []
    for number in range(1, 4):
        output(f"\nCarta {number}")
        chosen.append(prompt_card(ask, output))
    return chosen


def _action_phase(ask: Ask, output: Output, player: int, hand: list[Card],
                  pile: list[Card], melded: list[Card], scoreboard: Scoreboard) -> None:
    while True:
        output(f"{_RULE}      JOGADOR {player}")
        output(format_cards(hand))
        option = _read_option(ask, _ACTION_MENU)
        if option in (1, 2):
            check = check_set if option == 1 else check_run
            chosen = _prompt_meld(ask, output)
            try:
                check(hand, chosen)
            except (CardNotInHandError, InvalidMeldError) as error:
                output(f"\n{error}")
                continue
            for card in chosen:
                discard(hand, melded, card)
                output("\nCarta descartada com sucesso")
        elif option == 3:
            card = prompt_card(ask, output)
            try:
                discard(hand, pile, card)
            except CardNotInHandError as error:
                output(f"\n{error}, tente novamente: ")
                continue
            output("\nCarta descartada com sucesso")
            return
        elif option == 4:
            first, second = scoreboard.read()
            output(f"\nj1 {first} | j2 {second}")
        else:
            output("\nOpicao invalida")


def play(ask: Ask, output: Output, rng: random.Random, scoreboard: Scoreboard) -> int:
    """Run a full game and return the winning player's number (1 or 2)."""
    deck = new_deck(rng)
    hands = [deal(deck, 6), deal(deck, 6)]
    pile: list[Card] = []
    melded: list[Card] = []

    while all(hands):
        for player, hand in enumerate(hands, start=1):
            _draw_phase(ask, output, player, hand, deck, pile)
            _action_phase(ask, output, player, hand, pile, melded, scoreboard)

    winner = 0
    if not hands[0]:
        winner = 1
    if not hands[1]:
        winner = 2
    output(f"\nJogador {winner} VENCEU\n")
    first, second = scoreboard.record_win(winner)
    output(f"Placar J1 {first} | J2 {second}\n")
    return winner


def main(argv: Sequence[str] | None = None) -> int:
    """Start a game on the terminal."""
    parser = argparse.ArgumentParser(prog="pifecards", description="Two-player card game.")
    parser.add_argument("--scores", default="placar.txt", help="file holding the win counts")
    parser.add_argument("--seed", type=int, default=None, help="seed for shuffling")
    args = parser.parse_args(argv)

    def output(text: str) -> None:
        print(text, end="", flush=True)

    try:
        play(input, output, random.Random(args.seed), Scoreboard(args.scores))
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    return 0
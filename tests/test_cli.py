import io
import random

import pytest

from pifecards.cards import Card, Suit, new_deck
from pifecards.cli import main, play, prompt_card
from pifecards.scoreboard import Scoreboard


def scripted(answers):
    remaining = iter(answers)

    def ask(prompt):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return ask


def test_prompt_card_retries_until_valid():
    out = []
    card = prompt_card(scripted(["Z", "11", "Q", "copas", "COPAS"]), out.append)
    assert card == Card(12, Suit.COPAS)
    assert sum("Valor invalido" in line for line in out) == 2
    assert sum("Naipe invalido" in line for line in out) == 1


def test_prompt_card_accepts_ace_and_number():
    assert prompt_card(scripted(["A", "PAUS"]), [].append) == Card(1, Suit.PAUS)
    assert prompt_card(scripted(["10", "OUROS"]), [].append) == Card(10, Suit.OUROS)


def test_play_turn_flow(tmp_path):
    deck = new_deck(random.Random(7))
    first = deck[0]
    outsider = deck[20]
    answers = [
        "9", "2", "1",
        "4",
        "1",
        outsider.label(), outsider.suit.value,
        deck[1].label(), deck[1].suit.value,
        deck[2].label(), deck[2].suit.value,
        "3", first.label(), first.suit.value,
    ]
    out = []
    with pytest.raises(EOFError):
        play(scripted(answers), out.append, random.Random(7), Scoreboard(tmp_path / "placar.txt"))
    text = "".join(out)
    assert "Opicao invalida" in text
    assert "Nao da para comprar, nao tem cartas nesse monte" in text
    assert f"  CARTAS:\n  {deck[12]}\n" in text
    assert "j1 0 | j2 0" in text
    assert "A carta 0 nao tem em sua mao" in text
    assert "Carta descartada com sucesso" in text
    assert "JOGADOR 2" in text


def test_play_discard_of_missing_card_asks_again(tmp_path):
    deck = new_deck(random.Random(11))
    outsider = deck[30]
    answers = ["1", "3", outsider.label(), outsider.suit.value]
    out = []
    with pytest.raises(EOFError):
        play(scripted(answers), out.append, random.Random(11), Scoreboard(tmp_path / "placar.txt"))
    text = "".join(out)
    assert "Essa carta nao esta na sua mao, tente novamente: " in text
    assert "JOGADOR 2" not in text


def test_main_stops_on_end_of_input(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    path = tmp_path / "placar.txt"
    assert main(["--scores", str(path), "--seed", "3"]) == 1
    assert "JOGADOR 1" in capsys.readouterr().out
    assert not path.exists()
"""Cards, suits and the shuffled deck."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

DECK_SIZE = 52
RANKS = range(1, 14)

_FACE_LABELS = {1: "AS", 11: "J", 12: "Q", 13: "K"}
_LABEL_RANKS = {"AS": 1, "A": 1, "J": 11, "Q": 12, "K": 13}
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Suit(Enum):
    """The four suits, in the order the deck is built."""

    PAUS = "PAUS"
    OUROS = "OUROS"
    COPAS = "COPAS"
    ESPADAS = "ESPADAS"


@dataclass(frozen=True)
class Card:
    """A playing card: rank 1 (ace) to 13 (king) and a suit."""

    rank: int
    suit: Suit

    def __post_init__(self) -> None:
        if self.rank not in RANKS:
            raise ValueError(f"rank must be between 1 and 13, got {self.rank}")

    def label(self) -> str:
        """The rank as shown to players: AS, 2-10, J, Q or K."""
        return _FACE_LABELS.get(self.rank, str(self.rank))

    def __str__(self) -> str:
        return f"{self.label()} | {self.suit.value}"


def parse_rank(text: str) -> int:
    """Read a rank typed by a player; raise ValueError if it is not AS to K."""
    if text in _LABEL_RANKS:
        return _LABEL_RANKS[text]
    match = _LEADING_INT.match(text)
    number = int(match.group(1)) if match else 0
    if 2 <= number <= 10:
        return number
    raise ValueError(f"invalid rank: {text!r}")


def parse_suit(text: str) -> Suit:
    """Read a suit name typed by a player; raise ValueError if unknown."""
    try:
        return Suit(text)
    except ValueError:
        raise ValueError(f"invalid suit: {text!r}") from None


def new_deck(rng: random.Random | None = None) -> list[Card]:
    """Build the 52 cards and shuffle them with two passes of random swaps."""
    rng = rng if rng is not None else random.Random()
    deck = [Card(rank, suit) for rank in RANKS for suit in Suit]
    for _ in range(2):
        for i in range(DECK_SIZE):
            # The swap partner never reaches the last position.
            j = rng.randrange(DECK_SIZE - 1)
            deck[i], deck[j] = deck[j], deck[i]
    return deck


def format_cards(cards: Iterable[Card]) -> str:
    """Render a hand or pile as the card listing shown to players."""
    return "\n  CARTAS:\n" + "".join(f"  {card}\n" for card in cards)
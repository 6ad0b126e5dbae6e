"""Moving cards between piles and checking melds."""

from __future__ import annotations

from typing import Sequence

from pifecards.cards import Card

MELD_SIZE = 3


class EmptyPileError(LookupError):
    """Raised when drawing from a pile that has no cards."""

    def __init__(self) -> None:
        super().__init__("Nao da para comprar, nao tem cartas nesse monte")


class CardNotInHandError(LookupError):
    """Raised when a chosen card is not held by the player."""

    def __init__(self, card: Card, position: int | None = None) -> None:
        self.card = card
        self.position = position
        if position is None:
            message = "Essa carta nao esta na sua mao"
        else:
            message = f"A carta {position} nao tem em sua mao"
        super().__init__(message)


class InvalidMeldError(ValueError):
    """Raised when three cards do not form the requested meld."""


def deal(deck: list[Card], count: int = 6) -> list[Card]:
    """Take the top `count` cards off the deck, keeping their order."""
    if len(deck) < count:
        raise EmptyPileError()
    hand = deck[:count]
    del deck[:count]
    return hand


def draw(source: list[Card], hand: list[Card]) -> Card:
    """Move the top card of `source` to the front of `hand`."""
    if not source:
        raise EmptyPileError()
    card = source.pop(0)
    hand.insert(0, card)
    return card


def discard(hand: list[Card], pile: list[Card], card: Card) -> None:
    """Move `card` from the hand to the top of `pile`."""
    try:
        hand.remove(card)
    except ValueError:
        raise CardNotInHandError(card) from None
    pile.insert(0, card)


def _require_meld(hand: Sequence[Card], cards: Sequence[Card]) -> None:
    if len(cards) != MELD_SIZE:
        raise InvalidMeldError(f"a meld needs exactly {MELD_SIZE} cards")
    for position, card in enumerate(cards):
        if card not in hand:
            raise CardNotInHandError(card, position)


def check_set(hand: Sequence[Card], cards: Sequence[Card]) -> tuple[Card, ...]:
    """Check that three held cards share a rank and have different suits."""
    _require_meld(hand, cards)
    if len({card.rank for card in cards}) != 1:
        raise InvalidMeldError("As classes sao diferentes")
    if len({card.suit for card in cards}) != MELD_SIZE:
        raise InvalidMeldError("Tem naipes iguais")
    return tuple(cards)


def check_run(hand: Sequence[Card], cards: Sequence[Card]) -> tuple[Card, ...]:
    """Check that three held cards of one suit have consecutive ranks.

    Returns the cards ordered by rank.
    """
    _require_meld(hand, cards)
    if len({card.rank for card in cards}) != MELD_SIZE:
        raise InvalidMeldError("A sequencia tem numeros iguais")
    if len({card.suit for card in cards}) != 1:
        raise InvalidMeldError("A sequencia tem naipes diferentes")
    ordered = tuple(sorted(cards, key=lambda card: card.rank))
    if any(b.rank != a.rank + 1 for a, b in zip(ordered, ordered[1:])):
        raise InvalidMeldError("A sequencia pula a ordem")
    return ordered
"""Playing cards and a shuffled 52-card deck."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum


class Suit(Enum):
    """The four French suits, valued by their display name."""

    HEARTS = "Corazones"
    DIAMONDS = "Diamantes"
    CLUBS = "Treboles"
    SPADES = "Picas"


class Rank(Enum):
    """Card ranks from two to ace, each with a label and a point value."""

    TWO = ("2", 2)
    THREE = ("3", 3)
    FOUR = ("4", 4)
    FIVE = ("5", 5)
    SIX = ("6", 6)
    SEVEN = ("7", 7)
    EIGHT = ("8", 8)
    NINE = ("9", 9)
    TEN = ("10", 10)
    JACK = ("J", 10)
    QUEEN = ("Q", 10)
    KING = ("K", 10)
    ACE = ("A", 11)

    def __init__(self, label: str, points: int) -> None:
        self.label = label
        self.points = points


@dataclass(frozen=True)
class Card:
    """A single playing card."""

    suit: Suit
    rank: Rank

    @property
    def value(self) -> int:
        """Point value of the card, with an ace counted as 11."""
        return self.rank.points

    def __str__(self) -> str:
        return f"{self.rank.label} de {self.suit.value}"


class EmptyDeckError(LookupError):
    """Raised when a card is dealt from an empty deck."""


class Deck:
    """A standard 52-card deck, shuffled when created."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._cards = [Card(suit, rank) for suit in Suit for rank in Rank]
        self.shuffle()

    def shuffle(self) -> None:
        """Shuffle the remaining cards in place."""
        self._rng.shuffle(self._cards)

    def deal(self) -> Card:
        """Remove and return the top card."""
        if not self._cards:
            raise EmptyDeckError("No hay cartas disponibles para repartir")
        return self._cards.pop(0)

    def __len__(self) -> int:
        return len(self._cards)
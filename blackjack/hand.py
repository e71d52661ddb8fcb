"""A blackjack hand and its scoring."""

from __future__ import annotations

from typing import Iterator

from .cards import Card, Rank

_LIMIT = 21


class Hand:
    """The cards held by one participant."""

    def __init__(self) -> None:
        self._cards: list[Card] = []

    def add(self, card: Card) -> None:
        """Add a card to the hand."""
        if not isinstance(card, Card):
            raise TypeError(f"expected a Card, got {type(card).__name__}")
        self._cards.append(card)

    def total(self) -> int:
        """Best total, counting aces as 1 where 11 would go over 21."""
        total = sum(card.value for card in self._cards)
        soft_aces = sum(1 for card in self._cards if card.rank is Rank.ACE)
        while total > _LIMIT and soft_aces:
            total -= 10
            soft_aces -= 1
        return total

    def is_blackjack(self) -> bool:
        """True for exactly two cards totalling 21."""
        return len(self._cards) == 2 and self.total() == _LIMIT

    def describe(self) -> str:
        """Text listing the cards and the total."""
        if not self._cards:
            return "Mano vacía."
        cards = "".join(f"{card} " for card in self._cards)
        return f"Cartas en mano: {cards}(Valor Total: {self.total()})"

    def clear(self) -> None:
        """Remove every card."""
        self._cards.clear()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]
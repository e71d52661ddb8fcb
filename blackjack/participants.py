"""Participants at a blackjack table: players and the dealer."""

from __future__ import annotations

from enum import Enum

from .cards import Card
from .hand import Hand

DEALER_STANDS_ON = 17


class Status(Enum):
    """Where a participant stands in the current round."""

    PLAYING = "playing"
    STANDING = "standing"
    BUST = "bust"
    BLACKJACK = "blackjack"
    RETIRED = "retired"


class Participant:
    """Anyone holding a hand at the table."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.hand = Hand()
        self.status = Status.PLAYING

    def receive(self, card: Card) -> None:
        """Take a card into the hand."""
        if card is None:
            raise ValueError(f"Carta nula recibida por {self.name}")
        self.hand.add(card)

    def describe(self) -> str:
        """Text showing the hand."""
        return self.hand.describe()

    def hand_value(self) -> int:
        """Current total of the hand."""
        return self.hand.total()

    def has_blackjack(self) -> bool:
        """True when the hand is a natural blackjack."""
        return self.hand.is_blackjack()

    def reset(self) -> None:
        """Empty the hand and mark the participant as playing again."""
        self.hand = Hand()
        self.status = Status.PLAYING

    def is_playing(self) -> bool:
        return self.status is Status.PLAYING

    def is_standing(self) -> bool:
        return self.status is Status.STANDING

    def is_bust(self) -> bool:
        return self.status is Status.BUST

    def has_active_blackjack(self) -> bool:
        """True when blackjack is the settled state of the hand."""
        return self.status is Status.BLACKJACK

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class Player(Participant):
    """A player who places bets."""

    def __init__(self, name: str, bet: int = 0) -> None:
        super().__init__(name)
        self._bet = 0
        self.bet = bet

    @property
    def bet(self) -> int:
        """The current stake."""
        return self._bet

    @bet.setter
    def bet(self, amount: int) -> None:
        if amount < 0:
            raise ValueError("La apuesta no puede ser negativa.")
        self._bet = amount

    def place_bet(self, amount: int) -> None:
        """Set the stake for the round."""
        self.bet = amount


class Dealer(Participant):
    """The house, whose first card stays hidden until revealed."""

    def __init__(self, name: str = "Croupier de la Casa") -> None:
        super().__init__(name)
        self.hiding_hole_card = True

    def should_hit(self) -> bool:
        """True while the hand is below 17."""
        return self.hand_value() < DEALER_STANDS_ON

    def describe(self) -> str:
        """Text of the hand, with the first card hidden while required."""
        prefix = f"{self.name} tiene: "
        if not self.hand:
            return prefix + "Mano vacía."
        if self.hiding_hole_card:
            shown = str(self.hand[1]) if len(self.hand) > 1 else ""
            return f"{prefix}[CARTA OCULTA] {shown}"
        return prefix + super().describe()

    def describe_all(self) -> str:
        """Text of the whole hand regardless of the hidden card."""
        return self.hand.describe()
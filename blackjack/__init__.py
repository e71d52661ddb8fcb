"""Cards, hands, players, the dealer and a blackjack table."""

__version__ = "0.1.0"
__all__ = ["cards", "hand", "participants", "game"]
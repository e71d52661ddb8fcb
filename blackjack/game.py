"""Table management: the dealer, the players and the betting round."""

from __future__ import annotations

from typing import Callable

from .cards import Deck
from .participants import Dealer, Participant, Player, Status


class Game:
    """A blackjack table with one dealer and any number of players."""

    def __init__(
        self,
        deck: Deck | None = None,
        output: Callable[[str], None] | None = None,
    ) -> None:
        self.deck = deck if deck is not None else Deck()
        self._output = output if output is not None else print
        self.dealer = Dealer("Croupier de la Casa")
        self._participants: list[Participant] = [self.dealer]
        self._output("Gestor de Blackjack inicializado. Croupier y Baraja listos.")

    @property
    def participants(self) -> tuple[Participant, ...]:
        """Everyone at the table, the dealer first."""
        return tuple(self._participants)

    def add_player(self, name: str) -> Player:
        """Seat a new player and return it."""
        player = Player(name)
        self._participants.append(player)
        self._output(f"Jugador {name} agregado al juego.")
        return player

    def player(self, index: int) -> Player | None:
        """The player at a seat; None when the seat is the dealer's."""
        if not 0 <= index < len(self._participants):
            raise IndexError("Índice de jugador inválido.")
        seated = self._participants[index]
        return seated if isinstance(seated, Player) else None

    def player_count(self) -> int:
        """Number of participants at the table, dealer included."""
        return len(self._participants)

    def end_round(self) -> None:
        """Announce the end of the round and reveal the dealer's hand."""
        self._output("\n--- FIN DE LA RONDA ---")
        self._output(
            f"{self.dealer.name} revela sus cartas: "
            f"{self.dealer.describe_all()} ({self.dealer.hand_value()} puntos)"
        )

    def open_bets(self, ask: Callable[[str], str] = input) -> None:
        """Ask each player whether to bet this round, until a valid answer."""
        for seated in self._participants:
            if not isinstance(seated, Player):
                continue
            prompt = f"Jugador {seated.name}, ¿deseas apostar esta ronda? (s/n): "
            while True:
                answer = ask(prompt).strip()
                if not answer:
                    self._output("Entrada inválida. Intenta nuevamente.")
                    continue
                choice = answer[0].lower()
                if choice == "s":
                    seated.place_bet(1)
                    seated.status = Status.PLAYING
                    self._output("Has apostado esta ronda.")
                    break
                if choice == "n":
                    seated.place_bet(0)
                    seated.status = Status.STANDING
                    self._output("No apostaste esta ronda.")
                    break
                self._output("Por favor responde solo con 's' o 'n'.")
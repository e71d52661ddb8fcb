# blackjack

Building blocks for a game of blackjack: cards and a shuffled 52-card deck,
hands that score aces as 1 or 11, players with bets, a dealer who keeps one
card hidden, and a table that seats players and runs the betting question.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Cards and decks

```python
import random
from blackjack.cards import Deck, EmptyDeckError

deck = Deck(random.Random(7))   # 52 cards, shuffled on creation
print(len(deck))                # 52
card = deck.deal()              # removes and returns the top card
print(card, card.value)         # e.g. "K de Picas 10"
```

`Suit` has the members `HEARTS`, `DIAMONDS`, `CLUBS` and `SPADES`; `Rank` runs
from `TWO` to `ACE`, each rank carrying a `label` and `points`. A `Card` is a
frozen dataclass of a suit and a rank; its `value` property gives 10 for face
cards and 11 for an ace. Dealing from an empty deck raises `EmptyDeckError`
(a `LookupError`). `Deck.shuffle()` shuffles the cards that remain. Without an
`rng` argument the deck uses a fresh `random.Random()`.

## Hands

```python
from blackjack.cards import Card, Rank, Suit
from blackjack.hand import Hand

hand = Hand()
hand.add(Card(Suit.SPADES, Rank.ACE))
hand.add(Card(Suit.HEARTS, Rank.KING))
print(hand.total())         # 21
print(hand.is_blackjack())  # True: exactly two cards worth 21
print(hand.describe())      # Cartas en mano: A de Picas K de Corazones (Valor Total: 21)
```

Aces fall from 11 to 1, one at a time, while the total is over 21.
`add()` accepts only `Card` objects and raises `TypeError` otherwise.
An empty hand describes itself as `Mano vacía.`. A hand supports `len()`,
iteration and indexing; `clear()` empties it.

## Players and the dealer

```python
from blackjack.participants import Dealer, Player, Status

player = Player("Ana")
player.place_bet(1)
player.receive(deck.deal())

dealer = Dealer()             # named "Croupier de la Casa" by default
dealer.receive(deck.deal())
dealer.receive(deck.deal())
print(dealer.describe())      # first card hidden while hiding_hole_card is True
print(dealer.describe_all())  # every card and the total
print(dealer.should_hit())    # True while the hand is below 17
```

Every participant has a `name`, a `hand` and a `status`. `Status` has the
members `PLAYING`, `STANDING`, `BUST`, `BLACKJACK` and `RETIRED`;
`is_playing()`, `is_standing()`, `is_bust()` and `has_active_blackjack()`
query it, and `reset()` gives a new empty hand and sets the status back to
`PLAYING`. `hand_value()` and `has_blackjack()` report on the hand.
`receive(None)` raises `ValueError`.

A `Player` holds a `bet` (0 unless given); setting a negative bet, through
`place_bet()` or the `bet` property, raises `ValueError`. Setting
`dealer.hiding_hole_card = False` makes `describe()` show the full hand.

## The table

```python
from blackjack.game import Game

game = Game()                 # a new shuffled deck; messages go to print
game.add_player("Ana")
game.add_player("Luis")
game.open_bets()              # asks each player "s" or "n" through input()
game.end_round()              # the dealer reveals every card and the total
```

`Game(deck=None, output=None)` accepts a `Deck` and a callable that receives
each message line. The dealer is seated with the table at position 0, and
`participants` lists everyone in seat order. `player(index)` returns the
`Player` at a seat, `None` for the dealer's seat, and raises `IndexError` for
a seat that does not exist. `player_count()` counts everyone at the table, the
dealer included.

`open_bets(ask=input)` asks each player until the answer starts with `s` or
`n` (either case): `s` sets a bet of 1 and the status `PLAYING`, `n` sets a
bet of 0 and the status `STANDING`.

## What the package does not do

There is no command to start a game. The table does not deal the opening
cards, play out turns, decide winners or pay out bets: it seats the
participants, asks the betting question and reveals the dealer's hand at the
end of a round. Dealing and play are left to the code that uses these pieces.
import random

import pytest

from blackjack.cards import Card, Deck, EmptyDeckError, Rank, Suit


def _deal_all(deck):
    cards = []
    while len(deck):
        cards.append(deck.deal())
    return cards


def test_new_deck_has_52_cards():
    assert len(Deck(random.Random(1))) == 52


def test_deck_holds_every_card_once():
    cards = _deal_all(Deck(random.Random(2)))
    assert len(set(cards)) == 52
    assert set(cards) == {Card(s, r) for s in Suit for r in Rank}


def test_deal_reduces_size():
    deck = Deck(random.Random(3))
    before = len(deck)
    deck.deal()
    assert len(deck) == before - 1


def test_empty_deck_raises():
    deck = Deck(random.Random(4))
    _deal_all(deck)
    with pytest.raises(EmptyDeckError):
        deck.deal()


def test_same_seed_gives_same_order():
    first = _deal_all(Deck(random.Random(42)))
    second = _deal_all(Deck(random.Random(42)))
    assert first == second


def test_shuffle_keeps_remaining_cards():
    deck = Deck(random.Random(5))
    deck.deal()
    reference = Deck(random.Random(5))
    reference.deal()
    reference.shuffle()
    assert sorted(map(str, _deal_all(deck))) == sorted(map(str, _deal_all(reference)))


def test_card_string():
    assert str(Card(Suit.SPADES, Rank.ACE)) == "A de Picas"
    assert str(Card(Suit.HEARTS, Rank.TEN)) == "10 de Corazones"


def test_face_cards_are_worth_ten():
    for rank in (Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING):
        assert Card(Suit.CLUBS, rank).value == 10


def test_ace_and_number_values():
    assert Card(Suit.DIAMONDS, Rank.ACE).value == 11
    assert Card(Suit.DIAMONDS, Rank.TWO).value == 2
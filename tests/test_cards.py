from __future__ import annotations

import random
from collections import Counter

from hiddenrules.engine.cards import DECK_SIZE, RANKS, SUITS, Card, build_deck, color_of, shuffle


def _card(text: str, id: int = 0) -> Card:
    return Card(suit=text[-1], rank=text[:-1], id=id)  # type: ignore[arg-type]


def test_build_deck_has_every_suit_rank_pair_once() -> None:
    deck = build_deck()
    assert len(deck) == DECK_SIZE == 52
    pairs = {(c.suit, c.rank) for c in deck}
    assert pairs == {(s, r) for s in SUITS for r in RANKS}


def test_build_deck_ids_follow_construction_order() -> None:
    deck = build_deck()
    assert [c.id for c in deck] == list(range(52))
    assert (deck[0].suit, deck[0].rank) == ("♠", "A")
    assert (deck[-1].suit, deck[-1].rank) == ("♣", "K")


def test_build_deck_is_fresh_each_time() -> None:
    a = build_deck()
    b = build_deck()
    assert a == b
    assert a is not b


def test_shuffle_preserves_cards_and_leaves_input_alone() -> None:
    deck = build_deck()
    before = list(deck)
    out = shuffle(deck, random.Random(99))
    assert deck == before
    assert out is not deck
    assert Counter(out) == Counter(deck)


def test_shuffle_without_rng_uses_module_random() -> None:
    deck = build_deck()
    out = shuffle(deck)
    assert sorted(c.id for c in out) == list(range(52))


def test_shuffle_is_reproducible_with_seed() -> None:
    deck = build_deck()
    assert shuffle(deck, random.Random(5)) == shuffle(deck, random.Random(5))


def test_color_by_suit() -> None:
    assert color_of(_card("3♥")) == "red"
    assert color_of(_card("3♦")) == "red"
    assert color_of(_card("3♠")) == "black"
    assert color_of(_card("3♣")) == "black"
    assert _card("Q♦").color == "red"
    assert str(_card("10♣")) == "10♣"

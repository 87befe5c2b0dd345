from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Literal, Sequence

Suit = Literal["♠", "♥", "♦", "♣"]
Rank = Literal["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]
Color = Literal["red", "black"]

SUITS: tuple[Suit, ...] = ("♠", "♥", "♦", "♣")
RANKS: tuple[Rank, ...] = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")
RED_SUITS: frozenset[str] = frozenset({"♥", "♦"})

DECK_SIZE = len(SUITS) * len(RANKS)


@dataclass(frozen=True)
class Card:
    suit: Suit
    rank: Rank
    id: int

    @property
    def color(self) -> Color:
        return color_of(self)

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"


def build_deck() -> list[Card]:
    """Fresh 52-card deck in suit-major order, ids 0..51."""
    deck: list[Card] = []
    for suit in SUITS:
        for rank in RANKS:
            deck.append(Card(suit=suit, rank=rank, id=len(deck)))
    return deck


def shuffle(cards: Sequence[Card], rng: random.Random | None = None) -> list[Card]:
    """Return a shuffled copy; the input sequence is left untouched."""
    out = list(cards)
    if rng is None:
        random.shuffle(out)
    else:
        rng.shuffle(out)
    return out


def color_of(card: Card) -> Color:
    return "red" if card.suit in RED_SUITS else "black"

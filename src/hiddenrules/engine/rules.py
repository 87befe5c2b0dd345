"""Legality checks for a candidate card against the top of the discard pile.

Everything here is a pure function of its arguments. Rules are evaluated in
list order and the first one that forbids the play decides the outcome and
its reason; later rules are not consulted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .cards import Card, color_of
from .types import (
    AfterRankRequireColor,
    BaseMatchSuitOrRank,
    ForbidRankOnColor,
    ForbidSameSuitAsPrevious,
    Rule,
)


@dataclass(frozen=True)
class LegalResult:
    legal: bool
    reason: str | None = None


LEGAL = LegalResult(legal=True)


def _illegal(reason: str) -> LegalResult:
    return LegalResult(legal=False, reason=reason)


def _base_match(card: Card, top: Card) -> LegalResult:
    if card.suit == top.suit or card.rank == top.rank:
        return LEGAL
    return _illegal("Card must match either suit or rank of the top card")


def _after_rank_require_color(rule: AfterRankRequireColor, card: Card, top: Card) -> LegalResult:
    if top.rank != rule.after_rank:
        return LEGAL
    if color_of(card) != rule.required_color:
        return _illegal(f"After a {rule.after_rank}, you must play a {rule.required_color} card")
    return LEGAL


def _forbid_same_suit(card: Card, top: Card) -> LegalResult:
    if card.suit == top.suit:
        return _illegal("Cannot play the same suit consecutively")
    return LEGAL


def _forbid_rank_on_color(rule: ForbidRankOnColor, card: Card, top: Card) -> LegalResult:
    if card.rank == rule.forbidden_rank and color_of(top) == rule.on_color:
        return _illegal(f"Cannot play {rule.forbidden_rank} on a {rule.on_color} card")
    return LEGAL


def evaluate_rule(rule: Rule, card: Card, top: Card | None) -> LegalResult:
    if top is None:
        return LEGAL
    if isinstance(rule, BaseMatchSuitOrRank):
        return _base_match(card, top)
    if isinstance(rule, AfterRankRequireColor):
        return _after_rank_require_color(rule, card, top)
    if isinstance(rule, ForbidSameSuitAsPrevious):
        return _forbid_same_suit(card, top)
    if isinstance(rule, ForbidRankOnColor):
        return _forbid_rank_on_color(rule, card, top)
    # Unknown rule types never block a play.
    return LEGAL


def evaluate_play(card: Card, top: Card | None, rules: Sequence[Rule]) -> LegalResult:
    for rule in rules:
        result = evaluate_rule(rule, card, top)
        if not result.legal:
            return result
    return LEGAL

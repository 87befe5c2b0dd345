from __future__ import annotations

from hiddenrules.engine import rules as rules_module
from hiddenrules.engine.cards import Card
from hiddenrules.engine.rules import evaluate_play, evaluate_rule
from hiddenrules.engine.types import (
    AfterRankRequireColor,
    BaseMatchSuitOrRank,
    ForbidRankOnColor,
    ForbidSameSuitAsPrevious,
    UnknownRule,
)


def _card(text: str, id: int = 0) -> Card:
    return Card(suit=text[-1], rank=text[:-1], id=id)  # type: ignore[arg-type]


def test_base_match_accepts_suit_or_rank() -> None:
    rule = BaseMatchSuitOrRank()
    assert evaluate_rule(rule, _card("9♠"), _card("5♠")).legal
    assert evaluate_rule(rule, _card("5♦"), _card("5♠")).legal
    res = evaluate_rule(rule, _card("9♦"), _card("5♠"))
    assert not res.legal
    assert res.reason == "Card must match either suit or rank of the top card"


def test_after_rank_require_color() -> None:
    rule = AfterRankRequireColor(after_rank="K", required_color="red")
    top = _card("K♣")
    assert evaluate_rule(rule, _card("3♥"), top).legal
    res = evaluate_rule(rule, _card("3♠"), top)
    assert not res.legal
    assert res.reason is not None
    assert "K" in res.reason and "red" in res.reason


def test_after_rank_require_color_ignores_other_ranks() -> None:
    rule = AfterRankRequireColor(after_rank="K", required_color="red")
    assert evaluate_rule(rule, _card("3♠"), _card("Q♣")).legal


def test_forbid_same_suit() -> None:
    rule = ForbidSameSuitAsPrevious()
    res = evaluate_rule(rule, _card("9♠"), _card("5♠"))
    assert not res.legal
    assert res.reason == "Cannot play the same suit consecutively"
    assert evaluate_rule(rule, _card("5♦"), _card("5♠")).legal


def test_forbid_rank_on_color() -> None:
    rule = ForbidRankOnColor(forbidden_rank="Q", on_color="black")
    res = evaluate_rule(rule, _card("Q♥"), _card("2♣"))
    assert not res.legal
    assert res.reason == "Cannot play Q on a black card"
    # Only the top card's colour matters, not the candidate's.
    assert evaluate_rule(rule, _card("Q♥"), _card("2♦")).legal
    assert evaluate_rule(rule, _card("J♥"), _card("2♣")).legal


def test_unknown_rule_is_always_legal() -> None:
    rule = UnknownRule(type="SOMETHING_NEW")
    assert evaluate_rule(rule, _card("9♦"), _card("5♠")).legal
    assert evaluate_play(_card("9♦"), _card("5♠"), [rule]).legal


def test_every_rule_is_legal_without_top_card() -> None:
    rules = [
        BaseMatchSuitOrRank(),
        AfterRankRequireColor(after_rank="K", required_color="red"),
        ForbidSameSuitAsPrevious(),
        ForbidRankOnColor(forbidden_rank="9", on_color="black"),
    ]
    for rule in rules:
        assert evaluate_rule(rule, _card("9♦"), None).legal
    assert evaluate_play(_card("9♦"), None, rules).legal


def test_empty_rule_list_is_legal() -> None:
    res = evaluate_play(_card("9♦"), _card("5♠"), [])
    assert res.legal
    assert res.reason is None


def test_legal_rule_falls_through_to_next_rule() -> None:
    rules = [ForbidSameSuitAsPrevious(), BaseMatchSuitOrRank()]
    assert evaluate_play(_card("5♦"), _card("5♠"), rules).legal


def test_later_rule_still_checked_after_earlier_rule_passes() -> None:
    rules = [BaseMatchSuitOrRank(), ForbidSameSuitAsPrevious()]
    res = evaluate_play(_card("9♠"), _card("5♠"), rules)
    assert not res.legal
    assert res.reason == "Cannot play the same suit consecutively"


def test_rule_order_decides_reported_reason() -> None:
    base = BaseMatchSuitOrRank()
    after_k = AfterRankRequireColor(after_rank="K", required_color="red")
    top = _card("K♣")
    candidate = _card("3♠")

    first = evaluate_play(candidate, top, [base, after_k])
    second = evaluate_play(candidate, top, [after_k, base])
    assert not first.legal and not second.legal
    assert first.reason == "Card must match either suit or rank of the top card"
    assert second.reason == "After a K, you must play a red card"


def test_first_violation_short_circuits(monkeypatch) -> None:
    seen: list[str] = []
    original = rules_module.evaluate_rule

    def spy(rule, card, top):
        seen.append(rule.type)
        return original(rule, card, top)

    monkeypatch.setattr(rules_module, "evaluate_rule", spy)
    rules = [ForbidSameSuitAsPrevious(), BaseMatchSuitOrRank(), UnknownRule(type="SPY")]
    res = rules_module.evaluate_play(_card("9♠"), _card("5♠"), rules)
    assert not res.legal
    assert seen == ["FORBID_SAME_SUIT_AS_PREV"]


def test_conflicting_rules_can_make_a_suit_unplayable() -> None:
    rules = [BaseMatchSuitOrRank(), ForbidSameSuitAsPrevious()]
    top = _card("5♠")
    for rank in ("A", "2", "9", "K"):
        assert not evaluate_play(_card(f"{rank}♠"), top, rules).legal
    assert evaluate_play(_card("5♥"), top, rules).legal

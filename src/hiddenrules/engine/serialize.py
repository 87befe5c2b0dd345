from __future__ import annotations


from .actions import Action, DrawAction, PlayCardAction
from .cards import Card
from .session import SessionState
from .types import Goal, LegalPlaysGoal, Rule, UnknownRule


def card_to_dict(c: Card) -> dict[str, object]:
    return {"suit": c.suit, "rank": c.rank, "id": c.id}


def action_to_dict(a: Action) -> dict[str, object]:
    if isinstance(a, PlayCardAction):
        return {"type": "play", "hand_index": a.hand_index}
    if isinstance(a, DrawAction):
        return {"type": "draw"}
    # should be unreachable
    return {"type": "unknown"}


def rule_to_dict(r: Rule) -> dict[str, object]:
    if isinstance(r, UnknownRule):
        return {"type": r.type}
    out: dict[str, object] = {"type": r.type}
    for key in ("after_rank", "required_color", "forbidden_rank", "on_color"):
        if hasattr(r, key):
            out[key] = getattr(r, key)
    return out


def goal_to_dict(g: Goal) -> dict[str, object]:
    out: dict[str, object] = {"type": g.type, "max_penalties": g.max_penalties}
    if isinstance(g, LegalPlaysGoal):
        out["count"] = g.count
    return out


def snapshot(state: SessionState) -> dict[str, object]:
    """Return a JSON-serializable canonical snapshot of the current session."""
    challenge = state.challenge
    return {
        "seed": state.seed,
        "status": state.status,
        "challenge": None
        if challenge is None
        else {
            "id": challenge.id,
            "level": challenge.level,
            "rules": [rule_to_dict(r) for r in challenge.rules],
            "goal": goal_to_dict(challenge.goal),
        },
        "deck": [card_to_dict(c) for c in state.deck],
        "hand": [card_to_dict(c) for c in state.hand],
        "discard_pile": [card_to_dict(c) for c in state.discard_pile],
        "legal_plays": state.legal_plays,
        "penalties": state.penalties,
        "action_log": [action_to_dict(a) for a in state.action_log],
    }

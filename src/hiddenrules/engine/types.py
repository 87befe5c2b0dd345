from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .cards import Color, Rank

Level = Literal[1, 2, 3]

RuleType = Literal[
    "BASE_MATCH_SUIT_OR_RANK",
    "AFTER_RANK_REQUIRE_COLOR",
    "FORBID_SAME_SUIT_AS_PREV",
    "FORBID_RANK_ON_COLOR",
]
GoalType = Literal["LEGAL_PLAYS", "EMPTY_HAND"]


@dataclass(frozen=True)
class BaseMatchSuitOrRank:
    type: Literal["BASE_MATCH_SUIT_OR_RANK"] = "BASE_MATCH_SUIT_OR_RANK"


@dataclass(frozen=True)
class AfterRankRequireColor:
    after_rank: Rank
    required_color: Color
    type: Literal["AFTER_RANK_REQUIRE_COLOR"] = "AFTER_RANK_REQUIRE_COLOR"


@dataclass(frozen=True)
class ForbidSameSuitAsPrevious:
    type: Literal["FORBID_SAME_SUIT_AS_PREV"] = "FORBID_SAME_SUIT_AS_PREV"


@dataclass(frozen=True)
class ForbidRankOnColor:
    forbidden_rank: Rank
    on_color: Color
    type: Literal["FORBID_RANK_ON_COLOR"] = "FORBID_RANK_ON_COLOR"


@dataclass(frozen=True)
class UnknownRule:
    """A rule tag this engine does not understand. Always permits the play."""

    type: str


Rule = BaseMatchSuitOrRank | AfterRankRequireColor | ForbidSameSuitAsPrevious | ForbidRankOnColor | UnknownRule


@dataclass(frozen=True)
class LegalPlaysGoal:
    count: int
    max_penalties: int
    type: Literal["LEGAL_PLAYS"] = "LEGAL_PLAYS"


@dataclass(frozen=True)
class EmptyHandGoal:
    max_penalties: int
    type: Literal["EMPTY_HAND"] = "EMPTY_HAND"


Goal = LegalPlaysGoal | EmptyHandGoal


@dataclass(frozen=True)
class Challenge:
    id: str
    level: Level
    rules: tuple[Rule, ...]
    goal: Goal
    name: str = ""
    description: str = ""


LEVEL_NAMES: dict[int, str] = {1: "Easy", 2: "Medium", 3: "Hard"}


def level_name(level: int) -> str:
    # anything past 2 renders as hard, matching the challenge grid colours
    return LEVEL_NAMES.get(level, "Hard")


def goal_description(goal: Goal) -> str:
    if isinstance(goal, LegalPlaysGoal):
        return f"Make {goal.count} legal plays (max {goal.max_penalties} penalties)"
    if isinstance(goal, EmptyHandGoal):
        return f"Empty your hand (max {goal.max_penalties} penalties)"
    return ""

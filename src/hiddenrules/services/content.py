from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from jsonschema import Draft202012Validator

from hiddenrules.engine.cards import RANKS
from hiddenrules.engine.types import (
    AfterRankRequireColor,
    BaseMatchSuitOrRank,
    Challenge,
    EmptyHandGoal,
    ForbidRankOnColor,
    ForbidSameSuitAsPrevious,
    Goal,
    LegalPlaysGoal,
    Rule,
    UnknownRule,
)


class ContentError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ContentError(f"Missing content file: {path}") from e
    except json.JSONDecodeError as e:
        raise ContentError(f"Invalid JSON in {path}: {e}") from e


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: [str(p) for p in e.absolute_path])
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"- {loc}: {err.message}")
        raise ContentError("\n".join(lines))


def _require_str(obj: Mapping[str, object], key: str) -> str:
    v = obj.get(key)
    if not isinstance(v, str):
        raise ContentError(f"Expected string for {key}")
    return v


def _require_int(obj: Mapping[str, object], key: str) -> int:
    v = obj.get(key)
    if not isinstance(v, int) or isinstance(v, bool):
        raise ContentError(f"Expected int for {key}")
    return v


def _require_rank(obj: Mapping[str, object], key: str) -> str:
    v = _require_str(obj, key)
    if v not in RANKS:
        raise ContentError(f"Unknown rank for {key}: {v}")
    return v


def _require_color(obj: Mapping[str, object], key: str) -> str:
    v = _require_str(obj, key)
    if v not in ("red", "black"):
        raise ContentError(f"Unknown color for {key}: {v}")
    return v


def parse_rule(raw: Mapping[str, object]) -> Rule:
    t = raw.get("type")
    if not isinstance(t, str):
        raise ContentError("Rule missing type")
    if t == "BASE_MATCH_SUIT_OR_RANK":
        return BaseMatchSuitOrRank()
    if t == "AFTER_RANK_REQUIRE_COLOR":
        return AfterRankRequireColor(
            after_rank=_require_rank(raw, "afterRank"),  # type: ignore[arg-type]
            required_color=_require_color(raw, "requiredColor"),  # type: ignore[arg-type]
        )
    if t == "FORBID_SAME_SUIT_AS_PREV":
        return ForbidSameSuitAsPrevious()
    if t == "FORBID_RANK_ON_COLOR":
        return ForbidRankOnColor(
            forbidden_rank=_require_rank(raw, "forbiddenRank"),  # type: ignore[arg-type]
            on_color=_require_color(raw, "onColor"),  # type: ignore[arg-type]
        )
    # Newer rule types load fine and simply never forbid a play.
    return UnknownRule(type=t)


def parse_goal(raw: Mapping[str, object]) -> Goal:
    t = raw.get("type")
    max_penalties = _require_int(raw, "maxPenalties")
    if t == "LEGAL_PLAYS":
        return LegalPlaysGoal(count=_require_int(raw, "count"), max_penalties=max_penalties)
    if t == "EMPTY_HAND":
        return EmptyHandGoal(max_penalties=max_penalties)
    raise ContentError(f"Unknown goal type: {t}")


def parse_challenge(raw: Mapping[str, object]) -> Challenge:
    cid = raw.get("id")
    if isinstance(cid, int) and not isinstance(cid, bool):
        cid = str(cid)
    if not isinstance(cid, str):
        raise ContentError("Challenge missing id")

    level = _require_int(raw, "level")
    if level not in (1, 2, 3):
        raise ContentError(f"Challenge {cid}: level must be 1, 2 or 3")

    raw_rules = raw.get("rules")
    if not isinstance(raw_rules, list):
        raise ContentError(f"Challenge {cid}: rules must be a list")
    raw_goal = raw.get("goal")
    if not isinstance(raw_goal, dict):
        raise ContentError(f"Challenge {cid}: goal must be an object")

    rules: list[Rule] = []
    for r in raw_rules:
        if not isinstance(r, dict):
            raise ContentError(f"Challenge {cid}: rule must be an object")
        rules.append(parse_rule(r))

    name = raw.get("name")
    description = raw.get("description")
    return Challenge(
        id=cid,
        level=level,  # type: ignore[arg-type]
        rules=tuple(rules),
        goal=parse_goal(raw_goal),
        name=name if isinstance(name, str) else "",
        description=description if isinstance(description, str) else "",
    )


@dataclass(frozen=True)
class ChallengeCatalog:
    """Challenges in file order; order drives the grid and "next challenge"."""

    challenges: tuple[Challenge, ...]

    def get(self, challenge_id: str) -> Challenge:
        for c in self.challenges:
            if c.id == challenge_id:
                return c
        raise KeyError(challenge_id)

    def index_of(self, challenge_id: str) -> int:
        for i, c in enumerate(self.challenges):
            if c.id == challenge_id:
                return i
        return -1

    def next_after(self, challenge_id: str) -> Challenge | None:
        i = self.index_of(challenge_id)
        if 0 <= i < len(self.challenges) - 1:
            return self.challenges[i + 1]
        return None

    def __len__(self) -> int:
        return len(self.challenges)


class ContentService:
    def __init__(self, data_dir: Path, schema_dir: Path) -> None:
        self._data_dir = data_dir
        self._schema_dir = schema_dir

    def parse_challenges(self, raw: object, *, context: str = "challenges") -> ChallengeCatalog:
        schema = _load_json(self._schema_dir / "challenges.schema.json")
        validate_json(raw, schema, context=context)

        if not isinstance(raw, list):
            raise ContentError(f"{context} must be a list")

        challenges: list[Challenge] = []
        seen: set[str] = set()
        for item in raw:
            if not isinstance(item, dict):
                raise ContentError(f"{context}: challenge must be an object")
            challenge = parse_challenge(item)
            if challenge.id in seen:
                raise ContentError(f"Duplicate challenge id: {challenge.id}")
            seen.add(challenge.id)
            challenges.append(challenge)
        return ChallengeCatalog(challenges=tuple(challenges))

    def load_challenges(self) -> ChallengeCatalog:
        path = self._data_dir / "challenges.json"
        return self.parse_challenges(_load_json(path), context=str(path))

    def validate_all(self) -> None:
        # Load is validation (schema + parse)
        _ = self.load_challenges()

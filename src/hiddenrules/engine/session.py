from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable, Literal

from .actions import Action, DrawAction, PlayCardAction
from .cards import Card, build_deck, shuffle
from .rules import evaluate_play
from .types import Challenge, EmptyHandGoal, LegalPlaysGoal

Status = Literal["NOT_STARTED", "IN_PROGRESS", "WON", "LOST"]

LEGAL_PLAY_MESSAGE = "Legal play!"
ILLEGAL_PLAY_MESSAGE = "Illegal Play!"


class ChallengeConfigError(ValueError):
    pass


class InvalidActionError(IndexError):
    pass


@dataclass(frozen=True)
class SessionConfig:
    hand_size: int = 7


@dataclass(frozen=True)
class PlayResult:
    ok: bool
    message: str


@dataclass(frozen=True)
class Outcome:
    won: bool
    message: str


@dataclass
class SessionState:
    config: SessionConfig = field(default_factory=SessionConfig)
    challenge: Challenge | None = None
    status: Status = "NOT_STARTED"
    seed: int | None = None
    rng: random.Random = field(default_factory=random.Random)
    deck: list[Card] = field(default_factory=list)
    hand: list[Card] = field(default_factory=list)
    discard_pile: list[Card] = field(default_factory=list)
    legal_plays: int = 0
    penalties: int = 0
    action_log: list[Action] = field(default_factory=list)


def new_session(config: SessionConfig | None = None) -> SessionState:
    return SessionState(config=config or SessionConfig())


def _validate_challenge(challenge: Challenge) -> None:
    if challenge is None:
        raise ChallengeConfigError("No challenge given.")
    if not isinstance(challenge.goal, (LegalPlaysGoal, EmptyHandGoal)):
        raise ChallengeConfigError(f"Challenge {challenge.id!r} has no valid goal.")
    if challenge.rules is None or isinstance(challenge.rules, (str, bytes)):
        raise ChallengeConfigError(f"Challenge {challenge.id!r} has no rule list.")
    try:
        iter(challenge.rules)
    except TypeError as e:
        raise ChallengeConfigError(f"Challenge {challenge.id!r} has no rule list.") from e


def start(state: SessionState, challenge: Challenge, seed: int | None = None) -> None:
    """Reset `state` and deal a fresh game for `challenge`.

    Nothing carries over from a previous challenge. Passing a seed makes the
    shuffles reproducible, which `replay` relies on.
    """
    _validate_challenge(challenge)

    state.challenge = challenge
    state.seed = seed
    state.rng = random.Random(seed)
    state.deck = shuffle(build_deck(), state.rng)
    state.hand = []
    state.discard_pile = []
    state.legal_plays = 0
    state.penalties = 0
    state.action_log = []

    for _ in range(state.config.hand_size):
        state.hand.append(state.deck.pop())
    state.discard_pile.append(state.deck.pop())
    state.status = "IN_PROGRESS"


def new_game(challenge: Challenge, seed: int | None = None, config: SessionConfig | None = None) -> SessionState:
    state = new_session(config)
    start(state, challenge, seed=seed)
    return state


def top_of_pile(state: SessionState) -> Card | None:
    if not state.discard_pile:
        return None
    return state.discard_pile[-1]


def _recycle_discard_pile(state: SessionState) -> None:
    if not state.discard_pile:
        return
    top = state.discard_pile.pop()
    state.deck = shuffle(state.discard_pile, state.rng)
    state.discard_pile = [top]


def draw(state: SessionState) -> Card | None:
    """Move one card from the deck into the hand.

    An empty deck is refilled from everything under the top discard first.
    Returns None when there is nothing left to draw.
    """
    if not state.deck:
        _recycle_discard_pile(state)
    if not state.deck:
        return None
    card = state.deck.pop()
    state.hand.append(card)
    return card


def play(state: SessionState, hand_index: int) -> PlayResult:
    if state.status != "IN_PROGRESS" or state.challenge is None:
        raise InvalidActionError("No challenge in progress.")
    if hand_index < 0 or hand_index >= len(state.hand):
        raise InvalidActionError(f"Invalid hand index {hand_index} for a hand of {len(state.hand)}.")

    card = state.hand[hand_index]
    result = evaluate_play(card, top_of_pile(state), state.challenge.rules)

    if result.legal:
        state.hand.pop(hand_index)
        state.discard_pile.append(card)
        state.legal_plays += 1
        return PlayResult(ok=True, message=LEGAL_PLAY_MESSAGE)

    # The violated rule stays hidden from the player.
    state.penalties += 1
    draw(state)
    return PlayResult(ok=False, message=ILLEGAL_PLAY_MESSAGE)


def check_outcome(state: SessionState) -> Outcome | None:
    """Win/loss check, to be called after every play.

    The penalty budget is checked first, so exceeding it loses even when the
    same play also reached the goal.
    """
    if state.challenge is None:
        return None
    goal = state.challenge.goal

    if state.penalties > goal.max_penalties:
        state.status = "LOST"
        return Outcome(won=False, message="Too many penalties! Challenge failed.")

    if isinstance(goal, LegalPlaysGoal):
        if state.legal_plays >= goal.count:
            state.status = "WON"
            return Outcome(
                won=True,
                message=f"Success! You made {state.legal_plays} legal plays with {state.penalties} penalties.",
            )
    elif isinstance(goal, EmptyHandGoal):
        if not state.hand:
            state.status = "WON"
            return Outcome(won=True, message=f"Success! You emptied your hand with {state.penalties} penalties.")

    return None


def step(state: SessionState, action: Action) -> PlayResult | Card | None:
    """Apply a single action and record it in the action log."""
    if state.status != "IN_PROGRESS":
        raise InvalidActionError("No challenge in progress.")

    if isinstance(action, PlayCardAction):
        result = play(state, action.hand_index)
        state.action_log.append(action)
        return result
    if isinstance(action, DrawAction):
        card = draw(state)
        state.action_log.append(action)
        return card
    raise InvalidActionError(f"Unknown action: {action!r}")


def replay(challenge: Challenge, seed: int, actions: Iterable[Action], config: SessionConfig | None = None) -> SessionState:
    state = new_game(challenge, seed=seed, config=config)
    for a in actions:
        step(state, a)
        if check_outcome(state) is not None:
            break
    return state

"""Headless rules engine for hiddenrules.

IMPORTANT: This package must never import pygame.
"""

from .actions import DrawAction, PlayCardAction
from .cards import Card, build_deck, color_of, shuffle
from .rules import LegalResult, evaluate_play
from .session import (
    ChallengeConfigError,
    InvalidActionError,
    Outcome,
    PlayResult,
    SessionState,
    check_outcome,
    draw,
    new_game,
    new_session,
    play,
    start,
    step,
)
from .types import Challenge, Goal, Rule

__all__ = [
    "Card",
    "Challenge",
    "ChallengeConfigError",
    "DrawAction",
    "Goal",
    "InvalidActionError",
    "LegalResult",
    "Outcome",
    "PlayCardAction",
    "PlayResult",
    "Rule",
    "SessionState",
    "build_deck",
    "check_outcome",
    "color_of",
    "draw",
    "evaluate_play",
    "new_game",
    "new_session",
    "play",
    "shuffle",
    "start",
    "step",
]

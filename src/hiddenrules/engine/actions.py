from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlayCardAction:
    hand_index: int


@dataclass(frozen=True)
class DrawAction:
    pass


Action = PlayCardAction | DrawAction

from __future__ import annotations

import traceback

import pygame  # type: ignore[import-not-found]

from hiddenrules.services.content import ContentError

from ..app import GameContext
from ..scene_base import SceneTransition
from ..ui import Button, draw_text
from .challenge_select import ChallengeSelectScene


class BootScene:
    def __init__(self, ctx: GameContext) -> None:
        self.ctx = ctx
        self._did_boot = False
        self._error: str | None = None
        self._quit_button: Button | None = None

    def handle_event(self, event: pygame.event.Event) -> None:
        if self._quit_button is not None:
            self._quit_button.handle_event(event)

    def update(self, dt: float) -> SceneTransition | None:
        if self._did_boot:
            return None
        self._did_boot = True
        try:
            self.ctx.challenges = self.ctx.content.load_challenges()
            self.ctx.telemetry.log("boot", {"ok": True, "challenges": len(self.ctx.challenges)})
            return SceneTransition(ChallengeSelectScene(self.ctx))
        except ContentError as e:
            # Bad challenge data: refuse to start and show why.
            tb = traceback.format_exc(limit=8)
            self._error = f"{e}\n\n{tb}"
            self.ctx.telemetry.log("boot", {"ok": False, "error": str(e)})
            self._quit_button = Button(
                rect=pygame.Rect(20, 700, 140, 44),
                text="Quit",
                on_click=lambda: pygame.event.post(pygame.event.Event(pygame.QUIT)),
            )
            return None

    def render(self, screen: pygame.Surface) -> None:
        screen.fill((10, 10, 10))
        fonts = self.ctx.fonts
        draw_text(screen, fonts.big, "Hidden Rules", (20, 20))

        if self._error is None:
            draw_text(screen, fonts.ui, "Loading challenges...", (20, 80))
        else:
            draw_text(screen, fonts.ui, "Failed to load challenges.", (20, 80), color=(240, 80, 80))
            y = 120
            for line in self._error.splitlines()[:22]:
                draw_text(screen, fonts.small, line[:120], (20, y), color=(230, 230, 230))
                y += 18
            if self._quit_button is not None:
                self._quit_button.draw(screen, fonts.ui)

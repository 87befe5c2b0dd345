from __future__ import annotations

import pygame  # type: ignore[import-not-found]

from hiddenrules.engine.types import Challenge, goal_description, level_name

from ..app import GameContext
from ..scene_base import SceneTransition
from ..ui import LEVEL_COLORS, Button, draw_text

INSTRUCTIONS = [
    "Every challenge hides its own rules for which cards may be played.",
    "Click a card in your hand to play it on the discard pile.",
    "An illegal play costs a penalty and forces you to draw a card.",
    "You are never told which rule you broke. Work it out!",
    "Reach the goal before running out of penalties.",
]

TILE = 96
GAP = 18
COLUMNS = 6


class ChallengeSelectScene:
    def __init__(self, ctx: GameContext) -> None:
        self.ctx = ctx
        self._next: SceneTransition | None = None
        self._show_instructions = False
        self._hover: Challenge | None = None
        self._tiles: list[tuple[pygame.Rect, Challenge]] = []
        self._build_ui()

    def _build_ui(self) -> None:
        catalog = self.ctx.challenges
        challenges = catalog.challenges if catalog is not None else ()
        x0, y0 = 60, 150
        for i, challenge in enumerate(challenges):
            row, col = divmod(i, COLUMNS)
            rect = pygame.Rect(x0 + col * (TILE + GAP), y0 + row * (TILE + GAP), TILE, TILE)
            self._tiles.append((rect, challenge))

        self.btn_instructions = Button(
            rect=pygame.Rect(60, 80, 180, 44),
            text="How to play",
            on_click=self._toggle_instructions,
        )
        self.btn_quit = Button(
            rect=pygame.Rect(260, 80, 120, 44),
            text="Quit",
            on_click=lambda: pygame.event.post(pygame.event.Event(pygame.QUIT)),
        )

    def _toggle_instructions(self) -> None:
        self._show_instructions = not self._show_instructions

    def _start(self, challenge: Challenge) -> None:
        from .play import PlayScene

        self._next = SceneTransition(PlayScene(self.ctx, challenge))

    def handle_event(self, event: pygame.event.Event) -> None:
        if self._show_instructions:
            if event.type in (pygame.MOUSEBUTTONDOWN, pygame.KEYDOWN):
                self._show_instructions = False
            return

        if self.btn_instructions.handle_event(event) or self.btn_quit.handle_event(event):
            return

        if event.type == pygame.MOUSEMOTION:
            self._hover = self._hit_test(event.pos)
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            challenge = self._hit_test(event.pos)
            if challenge is not None:
                self._start(challenge)

    def _hit_test(self, pos: tuple[int, int]) -> Challenge | None:
        for rect, challenge in self._tiles:
            if rect.collidepoint(pos):
                return challenge
        return None

    def update(self, dt: float) -> SceneTransition | None:
        return self._next

    def render(self, screen: pygame.Surface) -> None:
        screen.fill((12, 12, 18))
        fonts = self.ctx.fonts
        draw_text(screen, fonts.big, "Hidden Rules", (60, 30))
        self.btn_instructions.draw(screen, fonts.ui)
        self.btn_quit.draw(screen, fonts.ui)

        for i, (rect, challenge) in enumerate(self._tiles):
            color = LEVEL_COLORS.get(challenge.level, LEVEL_COLORS[3])
            pygame.draw.rect(screen, color, rect, border_radius=12)
            width = 4 if challenge is self._hover else 2
            pygame.draw.rect(screen, (0, 0, 0), rect, width=width, border_radius=12)
            img = fonts.big.render(str(i + 1), True, (250, 250, 250))
            screen.blit(img, img.get_rect(center=rect.center).topleft)

        if self._hover is not None:
            label = f"{level_name(self._hover.level)}: {goal_description(self._hover.goal)}"
            if self._hover.name:
                label = f"{self._hover.name}  ({label})"
            draw_text(screen, fonts.ui, label, (60, 700))

        if self._show_instructions:
            self._draw_instructions(screen)

    def _draw_instructions(self, screen: pygame.Surface) -> None:
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 190))
        screen.blit(overlay, (0, 0))
        fonts = self.ctx.fonts
        draw_text(screen, fonts.big, "How to play", (120, 200))
        y = 260
        for line in INSTRUCTIONS:
            draw_text(screen, fonts.ui, line, (120, y))
            y += 34
        draw_text(screen, fonts.small, "Click anywhere to close.", (120, y + 20), color=(180, 180, 200))

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import pygame  # type: ignore[import-not-found]

from hiddenrules.engine.cards import Card, color_of

Color = tuple[int, int, int]

CARD_SIZE = (90, 126)
RED: Color = (200, 40, 50)
BLACK: Color = (20, 20, 24)
LEVEL_COLORS: dict[int, Color] = {1: (60, 150, 90), 2: (200, 150, 40), 3: (180, 60, 60)}


def draw_text(
    screen: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    pos: tuple[int, int],
    color: Color = (240, 240, 240),
) -> None:
    img = font.render(text, True, color)
    screen.blit(img, pos)


def draw_card(screen: pygame.Surface, font: pygame.font.Font, card: Card, rect: pygame.Rect) -> None:
    pygame.draw.rect(screen, (245, 245, 240), rect, border_radius=8)
    pygame.draw.rect(screen, (0, 0, 0), rect, width=2, border_radius=8)
    ink = RED if color_of(card) == "red" else BLACK
    rank = font.render(card.rank, True, ink)
    suit = font.render(card.suit, True, ink)
    screen.blit(rank, (rect.x + 8, rect.y + 6))
    screen.blit(suit, suit.get_rect(center=rect.center).topleft)


@dataclass
class Button:
    rect: pygame.Rect
    text: str
    on_click: Callable[[], None]
    enabled: bool = True
    color: Color = (60, 60, 60)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if not self.enabled:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.on_click()
                return True
        return False

    def draw(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        bg = self.color if self.enabled else (30, 30, 30)
        pygame.draw.rect(screen, bg, self.rect, border_radius=8)
        pygame.draw.rect(screen, (0, 0, 0), self.rect, width=2, border_radius=8)
        img = font.render(self.text, True, (240, 240, 240))
        r = img.get_rect(center=self.rect.center)
        screen.blit(img, r.topleft)


@dataclass
class Toast:
    """Short-lived message line, hidden once `ttl` runs out."""

    text: str = ""
    is_error: bool = False
    ttl: float = 0.0

    def show(self, text: str, is_error: bool = False, seconds: float = 2.0) -> None:
        self.text = text
        self.is_error = is_error
        self.ttl = seconds

    def update(self, dt: float) -> None:
        if self.ttl > 0:
            self.ttl = max(0.0, self.ttl - dt)

    @property
    def visible(self) -> bool:
        return self.ttl > 0 and bool(self.text)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font, pos: tuple[int, int]) -> None:
        if not self.visible:
            return
        color = (240, 110, 110) if self.is_error else (140, 230, 140)
        draw_text(screen, font, self.text, pos, color=color)

from __future__ import annotations

from dataclasses import dataclass

import pygame  # type: ignore[import-not-found]


@dataclass
class Fonts:
    ui: pygame.font.Font
    small: pygame.font.Font
    big: pygame.font.Font
    card: pygame.font.Font


def load_fonts() -> Fonts:
    pygame.font.init()
    # The default font has no suit glyphs; prefer a system font that does.
    face = pygame.font.match_font("dejavusans,segoeuisymbol,arialunicodems")
    return Fonts(
        ui=pygame.font.Font(face, 22),
        small=pygame.font.Font(face, 16),
        big=pygame.font.Font(face, 32),
        card=pygame.font.Font(face, 28),
    )

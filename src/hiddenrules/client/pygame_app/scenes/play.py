from __future__ import annotations

import pygame  # type: ignore[import-not-found]

from hiddenrules.engine.actions import DrawAction, PlayCardAction
from hiddenrules.engine.session import Outcome, PlayResult, check_outcome, new_game, step, top_of_pile
from hiddenrules.engine.types import Challenge, goal_description, level_name

from ..app import GameContext
from ..scene_base import Scene, SceneTransition
from ..ui import CARD_SIZE, Button, Toast, draw_card, draw_text

HAND_Y = 520
HAND_GAP = 8
LOSS_DELAY = 2.5


class PlayScene:
    def __init__(self, ctx: GameContext, challenge: Challenge) -> None:
        self.ctx = ctx
        self.challenge = challenge
        self.state = new_game(challenge, seed=ctx.seed)

        self._next: SceneTransition | None = None
        self._toast = Toast()
        self._outcome: Outcome | None = None
        self._back_timer: float | None = None

        self.btn_back = Button(rect=pygame.Rect(20, 20, 120, 40), text="Back", on_click=self._on_back)
        self.btn_draw = Button(rect=pygame.Rect(440, 300, 140, 50), text="Draw", on_click=self._on_draw)
        self.btn_next = Button(rect=pygame.Rect(360, 420, 300, 56), text="Next Challenge", on_click=self._on_next)
        self.btn_menu = Button(rect=pygame.Rect(360, 490, 300, 56), text="Back to Menu", on_click=self._on_back)

        self.ctx.telemetry.log("challenge_started", {"challenge": challenge.id, "seed": ctx.seed})

    def _go(self, scene: Scene) -> None:
        self._next = SceneTransition(scene)

    def _on_back(self) -> None:
        from .challenge_select import ChallengeSelectScene

        self._go(ChallengeSelectScene(self.ctx))

    def _on_next(self) -> None:
        catalog = self.ctx.challenges
        nxt = catalog.next_after(self.challenge.id) if catalog is not None else None
        if nxt is None:
            self._on_back()
            return
        self._go(PlayScene(self.ctx, nxt))

    def _on_draw(self) -> None:
        if self._outcome is not None:
            return
        card = step(self.state, DrawAction())
        self.ctx.telemetry.log("draw", {"challenge": self.challenge.id, "drew": card is not None})

    def _on_play(self, hand_index: int) -> None:
        result = step(self.state, PlayCardAction(hand_index=hand_index))
        assert isinstance(result, PlayResult)
        self.ctx.telemetry.log(
            "play",
            {
                "challenge": self.challenge.id,
                "ok": result.ok,
                "legal_plays": self.state.legal_plays,
                "penalties": self.state.penalties,
            },
        )
        # Only illegal plays get a message, and it never names the rule.
        if not result.ok:
            self._toast.show(result.message, is_error=True)

        outcome = check_outcome(self.state)
        if outcome is None:
            return
        self._outcome = outcome
        self.ctx.telemetry.log(
            "challenge_ended",
            {
                "challenge": self.challenge.id,
                "won": outcome.won,
                "legal_plays": self.state.legal_plays,
                "penalties": self.state.penalties,
            },
        )
        if not outcome.won:
            self._toast.show(outcome.message, is_error=True, seconds=LOSS_DELAY)
            self._back_timer = LOSS_DELAY

    def _hand_rects(self) -> list[pygame.Rect]:
        w, h = CARD_SIZE
        n = len(self.state.hand)
        width = self.ctx.screen.get_width()
        step_x = min(w + HAND_GAP, (width - 80 - w) // max(1, n - 1)) if n > 1 else w
        return [pygame.Rect(40 + i * step_x, HAND_Y, w, h) for i in range(n)]

    def _hit_test_hand(self, pos: tuple[int, int]) -> int | None:
        # Cards overlap when the hand is large; the rightmost one is on top.
        for i, rect in reversed(list(enumerate(self._hand_rects()))):
            if rect.collidepoint(pos):
                return i
        return None

    def handle_event(self, event: pygame.event.Event) -> None:
        if self._outcome is not None:
            if self._outcome.won:
                self.btn_next.handle_event(event)
                self.btn_menu.handle_event(event)
            return

        if self.btn_back.handle_event(event) or self.btn_draw.handle_event(event):
            return
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            hand_index = self._hit_test_hand(event.pos)
            if hand_index is not None:
                self._on_play(hand_index)

    def update(self, dt: float) -> SceneTransition | None:
        self._toast.update(dt)
        if self._back_timer is not None:
            self._back_timer -= dt
            if self._back_timer <= 0:
                self._back_timer = None
                self._on_back()
        return self._next

    def render(self, screen: pygame.Surface) -> None:
        screen.fill((10, 60, 40))
        fonts = self.ctx.fonts
        self.btn_back.draw(screen, fonts.ui)

        catalog = self.ctx.challenges
        number = catalog.index_of(self.challenge.id) + 1 if catalog is not None else 0
        title = f"Challenge {number} - {level_name(self.challenge.level)}"
        draw_text(screen, fonts.big, title, (170, 22))
        draw_text(screen, fonts.ui, goal_description(self.challenge.goal), (170, 64))

        stats = (
            f"Legal plays: {self.state.legal_plays}   "
            f"Penalties: {self.state.penalties}   "
            f"Hand: {len(self.state.hand)}   "
            f"Deck: {len(self.state.deck)}"
        )
        draw_text(screen, fonts.ui, stats, (40, 120))

        self._draw_discard_pile(screen)
        self.btn_draw.enabled = self._outcome is None
        self.btn_draw.draw(screen, fonts.ui)

        for card, rect in zip(self.state.hand, self._hand_rects()):
            draw_card(screen, fonts.card, card, rect)

        self._toast.draw(screen, fonts.ui, (40, 470))

        if self._outcome is not None and self._outcome.won:
            self._draw_win(screen)

    def _draw_discard_pile(self, screen: pygame.Surface) -> None:
        w, h = CARD_SIZE
        rect = pygame.Rect(300, 260, w, h)
        top = top_of_pile(self.state)
        if top is None:
            pygame.draw.rect(screen, (30, 80, 60), rect, width=2, border_radius=8)
            draw_text(screen, self.ctx.fonts.small, "No cards yet", (rect.x + 4, rect.centery - 8))
            return
        draw_card(screen, self.ctx.fonts.card, top, rect)

    def _draw_win(self, screen: pygame.Surface) -> None:
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 170))
        screen.blit(overlay, (0, 0))
        assert self._outcome is not None
        draw_text(screen, self.ctx.fonts.big, "Challenge complete!", (360, 320))
        draw_text(screen, self.ctx.fonts.ui, self._outcome.message, (260, 370))
        self.btn_next.draw(screen, self.ctx.fonts.ui)
        self.btn_menu.draw(screen, self.ctx.fonts.ui)

# game.py - Klondike table scene: turns clicks and drags into engine commands
from typing import List, Optional, Tuple

import pygame

from klondike import common as C
from klondike import settings as S
from klondike import ui as U
from klondike.engine import FOUNDATION_ORDER, TABLEAU_COUNT, MoveResult, SolitaireEngine

WIN_MESSAGE = "Congratulations! You won! Press N for a new game."

_RESULT_MESSAGES = {
    MoveResult.EMPTY_SOURCE: "Nothing to play there.",
    MoveResult.ILLEGAL_MOVE: "That move is not allowed.",
    MoveResult.DRAW_PILE_NOT_EMPTY: "Draw pile still has cards.",
}


def hud_text(settings: dict) -> str:
    return "N: New  M: Music {} V: {:.0%}  S: Sound {} B: {:.0%}  ESC: Quit".format(
        "on" if settings["music_enabled"] else "off",
        settings["music_volume"],
        "on" if settings["sound_enabled"] else "off",
        settings["sound_volume"],
    )


class KlondikeGameScene(U.Scene):
    """
    Presentation for one Klondike session.

    The scene never edits piles itself: every gesture becomes a single engine
    command and the board is redrawn from the engine's observers afterwards.
    Dragged cards stay in their pile until the drop is accepted.
    """

    def __init__(self, app, engine: Optional[SolitaireEngine] = None, deal: bool = True):
        super().__init__(app)
        self.engine = engine if engine is not None else SolitaireEngine()
        self.message = ""
        # (origin, pile index, card index); origin is "waste" or "tableau"
        self.drag: Optional[Tuple[str, Optional[int], int]] = None
        self.drag_pos = (0, 0)
        self.compute_layout()
        if deal:
            self.new_game()

    # ---------- Layout ----------
    def compute_layout(self):
        step = U.CARD_W + U.CARD_GAP_X
        left, top = 40, 70
        self.stock_rect = pygame.Rect(left, top, U.CARD_W, U.CARD_H)
        self.waste_rect = pygame.Rect(left + step, top, U.CARD_W, U.CARD_H)
        self.foundation_rects = [
            pygame.Rect(left + (3 + i) * step, top, U.CARD_W, U.CARD_H) for i in range(len(FOUNDATION_ORDER))
        ]
        tab_y = top + U.CARD_H + 40
        self.tableau_origins = [(left + i * step, tab_y) for i in range(TABLEAU_COUNT)]

    def card_rect(self, pile_index: int, card_index: int, pile: Optional[List[C.Card]] = None) -> pygame.Rect:
        if pile is None:
            pile = self.engine.tableau_piles[pile_index]
        x, y = self.tableau_origins[pile_index]
        for c in pile[:card_index]:
            y += U.FAN_Y_UP if c.face_up else U.FAN_Y_DOWN
        return pygame.Rect(x, y, U.CARD_W, U.CARD_H)

    def column_rect(self, pile_index: int) -> pygame.Rect:
        pile = self.engine.tableau_piles[pile_index]
        x, y = self.tableau_origins[pile_index]
        bottom = self.card_rect(pile_index, len(pile) - 1, pile).bottom if pile else y + U.CARD_H
        return pygame.Rect(x, y, U.CARD_W, bottom - y)

    def hit_tableau(self, pos) -> Optional[Tuple[int, int]]:
        """Return (pile index, card index) under pos; card index -1 for an empty pile."""
        piles = self.engine.tableau_piles
        for ti, pile in enumerate(piles):
            if not pile:
                if pygame.Rect(*self.tableau_origins[ti], U.CARD_W, U.CARD_H).collidepoint(pos):
                    return ti, -1
                continue
            for ci in reversed(range(len(pile))):
                if self.card_rect(ti, ci, pile).collidepoint(pos):
                    return ti, ci
        return None

    # ---------- Commands ----------
    def new_game(self):
        self.engine.new_game()
        self.drag = None
        self.message = ""

    def _apply(self, result: MoveResult, reveal_from: Optional[int] = None) -> MoveResult:
        if result:
            if reveal_from is not None:
                # expose the card left behind in the source pile
                self.engine.flip_top_of_tableau(reveal_from)
            self.message = WIN_MESSAGE if self.engine.won_game else ""
        else:
            self.message = _RESULT_MESSAGES.get(result, "")
        return result

    def click_stock(self) -> MoveResult:
        if self.engine.draw_pile:
            return self._apply(self.engine.draw_card())
        return self._apply(self.engine.shuffle_discard_into_draw())

    def send_to_foundation(self, origin: str, pile_index: Optional[int] = None) -> MoveResult:
        if origin == "waste":
            return self._apply(self.engine.play_discard_to_foundation())
        return self._apply(self.engine.move_tableau_to_foundation(pile_index), reveal_from=pile_index)

    def drop(self, pos) -> Optional[MoveResult]:
        """Finish a drag at pos. Returns None when nothing was under the cursor."""
        if self.drag is None:
            return None
        origin, from_index, card_index = self.drag
        self.drag = None
        for rect in self.foundation_rects:
            if rect.collidepoint(pos):
                if origin == "tableau" and card_index != len(self.engine.tableau_piles[from_index]) - 1:
                    return self._apply(MoveResult.ILLEGAL_MOVE)
                return self.send_to_foundation(origin, from_index)
        for ti in range(TABLEAU_COUNT):
            if self.column_rect(ti).collidepoint(pos):
                if origin == "waste":
                    return self._apply(self.engine.play_discard_to_tableau(ti))
                if ti == from_index:
                    return None
                return self._apply(self.engine.move_tableau_to_tableau(from_index, card_index, ti), reveal_from=from_index)
        return None

    # ---------- Event handling ----------
    def handle_event(self, e):
        if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
            pos = e.pos
            if self.stock_rect.collidepoint(pos):
                self.click_stock(); return
            if self.waste_rect.collidepoint(pos) and self.engine.discard_pile:
                self.drag = ("waste", None, len(self.engine.discard_pile) - 1)
                self.drag_pos = pos
                return
            hit = self.hit_tableau(pos)
            if hit is None:
                return
            ti, ci = hit
            if ci == -1:
                return
            pile = self.engine.tableau_piles[ti]
            # If clicking the top card and it's face-down, flip it (click-to-reveal)
            if ci == len(pile) - 1 and not pile[ci].face_up:
                self._apply(self.engine.flip_top_of_tableau(ti)); return
            if pile[ci].face_up:
                self.drag = ("tableau", ti, ci)
                self.drag_pos = pos

        elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 3:
            pos = e.pos
            if self.waste_rect.collidepoint(pos):
                self.send_to_foundation("waste"); return
            hit = self.hit_tableau(pos)
            if hit is not None and hit[1] != -1:
                self.send_to_foundation("tableau", hit[0])

        elif e.type == pygame.MOUSEMOTION:
            if self.drag is not None:
                self.drag_pos = e.pos

        elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
            self.drop(e.pos)

        elif e.type == pygame.KEYDOWN:
            if e.key == pygame.K_n:
                self.new_game()
            elif e.key == pygame.K_m:
                S.toggle("music_enabled")
            elif e.key == pygame.K_s:
                S.toggle("sound_enabled")
            elif e.key == pygame.K_v:
                S.step_volume("music_volume")
            elif e.key == pygame.K_b:
                S.step_volume("sound_volume")
            elif e.key == pygame.K_ESCAPE:
                self.quit_requested = True

    # ---------- Drawing ----------
    def _dragged_cards(self) -> List[C.Card]:
        if self.drag is None:
            return []
        origin, ti, ci = self.drag
        if origin == "waste":
            return self.engine.discard_pile[-1:]
        return self.engine.tableau_piles[ti][ci:]

    def draw(self, screen):
        screen.fill(U.TABLE_BG)
        dragged = self._dragged_cards()
        hidden = {id(c) for c in dragged}

        settings = S.get_current_settings()
        hud = hud_text(settings)
        h = U.FONT_UI.render(hud, True, U.WHITE)
        screen.blit(h, (U.SCREEN_W - h.get_width() - 20, 20))

        # Stock / waste
        if self.engine.draw_pile:
            screen.blit(U.get_back_surface(), self.stock_rect.topleft)
        else:
            U.draw_empty_slot(screen, self.stock_rect, "↻" if self.engine.discard_pile else "")
        waste = [c for c in self.engine.discard_pile if id(c) not in hidden]
        if waste:
            screen.blit(U.get_card_surface(waste[-1]), self.waste_rect.topleft)
        else:
            U.draw_empty_slot(screen, self.waste_rect)

        # Foundations show a card of their top rank
        for rect, f in zip(self.foundation_rects, self.engine.foundation_piles):
            if f.top_rank:
                screen.blit(U.get_face_surface(f.suit, f.top_rank), rect.topleft)
            else:
                U.draw_empty_slot(screen, rect, C.SUIT_GLYPHS[f.suit])

        # Tableau
        for ti, pile in enumerate(self.engine.tableau_piles):
            if not pile:
                U.draw_empty_slot(screen, pygame.Rect(*self.tableau_origins[ti], U.CARD_W, U.CARD_H))
            for ci, c in enumerate(pile):
                if id(c) in hidden:
                    break
                screen.blit(U.get_card_surface(c), self.card_rect(ti, ci, pile).topleft)

        # Drag visuals
        mx, my = self.drag_pos
        for i, c in enumerate(dragged):
            screen.blit(U.get_card_surface(c), (mx - U.CARD_W // 2, my - U.CARD_H // 2 + i * U.FAN_Y_UP))

        if self.message:
            msg = U.FONT_UI.render(self.message, True, U.MESSAGE)
            screen.blit(msg, (U.SCREEN_W // 2 - msg.get_width() // 2, U.SCREEN_H - 40))

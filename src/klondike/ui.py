# ui.py - table layout constants, fonts and card drawing for the pygame scenes
import pygame

from klondike import common as C

# ---------- Configuration ----------
SCREEN_W, SCREEN_H = 1024, 720
TABLE_BG = (2, 100, 40)

CARD_W, CARD_H = 90, 126
CARD_RADIUS = 8
CARD_GAP_X = 18
FAN_Y_DOWN = 14
FAN_Y_UP = 28

# Colors
BLACK = (20, 20, 20)
WHITE = (245, 245, 245)
RED = (200, 20, 20)
BACK_BLUE = (34, 96, 200)
LIGHT = (220, 220, 220)
MESSAGE = (255, 255, 180)

# Fonts are initialized via setup_fonts() AFTER pygame.init()
FONT_UI = None
FONT_CORNER = None
FONT_CENTER = None

_card_face_cache = {}
_card_back_cache = None


def setup_fonts():
    global FONT_UI, FONT_CORNER, FONT_CENTER
    name = pygame.font.get_default_font()
    FONT_UI = pygame.font.SysFont(name, 26, bold=True)
    FONT_CORNER = pygame.font.SysFont(name, 24, bold=True)
    FONT_CENTER = pygame.font.SysFont(name, 48, bold=True)


def get_card_surface(card: C.Card) -> pygame.Surface:
    if not card.face_up:
        return get_back_surface()
    return get_face_surface(card.suit, card.rank)


def get_face_surface(suit: C.Suit, rank: int) -> pygame.Surface:
    key = (suit, rank)
    if key in _card_face_cache:
        return _card_face_cache[key]
    surf = pygame.Surface((CARD_W, CARD_H), pygame.SRCALPHA)
    pygame.draw.rect(surf, WHITE, (0, 0, CARD_W, CARD_H), border_radius=CARD_RADIUS)
    pygame.draw.rect(surf, BLACK, (0, 0, CARD_W, CARD_H), width=2, border_radius=CARD_RADIUS)
    color = RED if C.is_red(suit) else BLACK
    label = FONT_CORNER.render(f"{C.RANK_TO_TEXT[rank]}{C.SUIT_GLYPHS[suit]}", True, color)
    surf.blit(label, (8, 6))
    center = FONT_CENTER.render(C.SUIT_GLYPHS[suit], True, color)
    surf.blit(center, (CARD_W // 2 - center.get_width() // 2, CARD_H // 2 - center.get_height() // 2))
    _card_face_cache[key] = surf
    return surf


def get_back_surface() -> pygame.Surface:
    global _card_back_cache
    if _card_back_cache is not None:
        return _card_back_cache
    surf = pygame.Surface((CARD_W, CARD_H), pygame.SRCALPHA)
    pygame.draw.rect(surf, WHITE, (0, 0, CARD_W, CARD_H), border_radius=CARD_RADIUS)
    pygame.draw.rect(surf, BLACK, (0, 0, CARD_W, CARD_H), width=2, border_radius=CARD_RADIUS)
    inset = 7
    pygame.draw.rect(surf, BACK_BLUE, (inset, inset, CARD_W - 2 * inset, CARD_H - 2 * inset), border_radius=6)
    for i in range(-CARD_H, CARD_W, 12):
        pygame.draw.line(surf, LIGHT, (i, inset), (i + CARD_H, CARD_H - inset), 1)
    _card_back_cache = surf
    return surf


def draw_empty_slot(screen: pygame.Surface, rect: pygame.Rect, label: str = ""):
    pygame.draw.rect(screen, LIGHT, rect, width=2, border_radius=CARD_RADIUS)
    if label and FONT_CENTER is not None:
        t = FONT_CENTER.render(label, True, LIGHT)
        screen.blit(t, (rect.centerx - t.get_width() // 2, rect.centery - t.get_height() // 2))


class Scene:
    def __init__(self, app):
        self.app = app
        self.next_scene = None
        self.quit_requested = False
    def handle_event(self, e): pass
    def update(self, dt): pass
    def draw(self, screen): pass

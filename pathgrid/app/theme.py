# pathgrid/app/theme.py
"""
Light/dark skins and map themes for the viewer (visuals only; no logic)
- Backdrop: vertical gradient per skin
- Panel: frosted card underlay; the viewer draws text/buttons on top
- Map themes only recolour open cells and walls
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple
import pygame

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Skin:
    name: str
    backdrop_top: RGB
    backdrop_bot: RGB
    panel_fill: RGBA
    panel_shadow: RGBA
    text: RGB
    accent: RGB
    success: RGB
    error: RGB
    grid_line: RGB
    start: RGB
    end: RGB
    visited: Dict[str, RGBA]   # per algorithm key
    path: RGB


SKINS: Dict[str, Skin] = {
    "light": Skin(
        name="light",
        backdrop_top=(244, 246, 250), backdrop_bot=(226, 231, 240),
        panel_fill=(255, 255, 255, 215), panel_shadow=(0, 0, 0, 50),
        text=(33, 37, 41), accent=(37, 99, 235),
        success=(22, 163, 74), error=(220, 38, 38),
        grid_line=(203, 213, 225),
        start=(16, 185, 129), end=(239, 68, 68),
        visited={"bfs": (59, 130, 246, 120), "dfs": (168, 85, 247, 120), "astar": (245, 158, 11, 120)},
        path=(250, 204, 21),
    ),
    "dark": Skin(
        name="dark",
        backdrop_top=(24, 26, 32), backdrop_bot=(36, 40, 48),
        panel_fill=(18, 20, 28, 190), panel_shadow=(0, 0, 0, 140),
        text=(230, 235, 240), accent=(255, 210, 0),
        success=(0, 255, 200), error=(255, 80, 100),
        grid_line=(55, 62, 75),
        start=(46, 139, 87), end=(220, 50, 47),
        visited={"bfs": (0, 150, 255, 110), "dfs": (255, 0, 120, 90), "astar": (255, 170, 0, 100)},
        path=(0, 255, 200),
    ),
}

# map theme -> (open cell, wall)
MAP_THEMES: Dict[str, Tuple[RGB, RGB]] = {
    "classic": ((255, 255, 255), (30, 41, 59)),
    "asphalt": ((200, 200, 200), (0, 0, 0)),
    "grass":   ((144, 238, 144), (92, 64, 51)),
    "ice":     ((224, 242, 254), (30, 64, 175)),
}
MAP_THEME_ORDER = tuple(MAP_THEMES)


def next_map_theme(current: str) -> str:
    i = MAP_THEME_ORDER.index(current) if current in MAP_THEMES else -1
    return MAP_THEME_ORDER[(i + 1) % len(MAP_THEME_ORDER)]


# ---------- helpers ----------
def rounded_rect(surface: pygame.Surface, rect: pygame.Rect, color, radius=16, width=0):
    pygame.draw.rect(surface, color, rect, width=width, border_radius=radius)


def glass_panel(screen: pygame.Surface, rect: pygame.Rect, skin: Skin):
    if rect.width <= 0 or rect.height <= 0:
        return
    shadow = pygame.Surface((rect.width + 18, rect.height + 18), pygame.SRCALPHA)
    rounded_rect(shadow, pygame.Rect(9, 9, rect.width, rect.height), skin.panel_shadow, radius=20)
    screen.blit(shadow, (rect.x - 9, rect.y - 9))
    card = pygame.Surface(rect.size, pygame.SRCALPHA)
    rounded_rect(card, pygame.Rect(0, 0, rect.width, rect.height), skin.panel_fill, radius=20)
    # subtle top sheen
    hi = pygame.Surface((rect.width, max(18, rect.height // 12)), pygame.SRCALPHA)
    pygame.draw.rect(hi, (255, 255, 255, 18), hi.get_rect(), border_radius=18)
    card.blit(hi, (0, 0))
    screen.blit(card, rect.topleft)


def draw_backdrop(screen: pygame.Surface, skin: Skin):
    w, h = screen.get_size()
    top, bot = skin.backdrop_top, skin.backdrop_bot
    for y in range(h):
        t = y / max(1, h - 1)
        c = (
            int(top[0] + (bot[0] - top[0]) * t),
            int(top[1] + (bot[1] - top[1]) * t),
            int(top[2] + (bot[2] - top[2]) * t),
        )
        pygame.draw.line(screen, c, (0, y), (w, y))

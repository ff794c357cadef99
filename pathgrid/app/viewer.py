# pathgrid/app/viewer.py
#!/usr/bin/env python3
"""
Pathfinding Viewer: draw walls, pick an algorithm, watch the replay

- Mouse:
    left          -> use current tool (pencil draws, eraser erases)
    right         -> erase
    drag S / E    -> move start / end (never onto a wall)
- Keyboard:
    [B]/[D]/[A]   -> select algorithm (BFS / DFS / A*)
    [1]/[2]/[3]   -> generate maze (random DFS / spiral / recursive division)
    [P]/[W]/[E]   -> tool (pointer / pencil / eraser)
    [SPACE]       -> visualize
    [C]           -> clear board
    [V]           -> clear visited + path overlays
    [T]           -> light/dark theme
    [M]           -> cycle map theme
    [+]/[-]       -> replay speed
    [Q]/[ESC]     -> quit

Settings: see pathgrid/app/config.py (PATHGRID_* env vars, --key=value flags).
"""

import logging
import sys
import time
from collections import deque
from typing import Deque, List, Optional, Tuple

import pygame

from pathgrid.app import theme as THEME
from pathgrid.app.config import (MIN_DIM, Settings, default_grid, load_board,
                                 resolve_settings)
from pathgrid.core.catalog import ALGO_INFO
from pathgrid.core.grid import Grid
from pathgrid.core.runner import run_generator, run_search
from pathgrid.core.types import Position, SearchResult

logger = logging.getLogger(__name__)

# ---------- Layout ----------
CELL_SIZE = 32
PANEL_W = 420            # right band: status + buttons
GRID_MARGIN = 16
FONT_NAME = None  # default pygame font

ALGO_LABELS = {"bfs": "BFS", "dfs": "DFS", "astar": "A*"}


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False  # highlight state

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font, skin: THEME.Skin):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        if self.active and self.togglable:
            bg = (*skin.accent, 200)
        elif self.hover:
            bg = (*skin.grid_line, 235)
        else:
            bg = (*skin.grid_line, 170)
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)

        color = skin.backdrop_top if self.active and self.togglable else skin.text
        text = font.render(self.label, True, color)
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, grid: Grid, settings: Settings):
        pygame.init()

        self.grid = grid
        self.settings = settings
        self.font_small = pygame.font.Font(FONT_NAME, 16)
        self.font = pygame.font.Font(FONT_NAME, 20)
        self.font_big = pygame.font.Font(FONT_NAME, 26)

        self.skin = THEME.SKINS[settings.theme]
        self.map_theme = THEME.MAP_THEME_ORDER[0]
        self.tool = "pencil"
        self.algo_key = settings.algo

        win_w = GRID_MARGIN * 2 + grid.cols * CELL_SIZE + PANEL_W
        win_h = max(GRID_MARGIN * 2 + grid.rows * CELL_SIZE, 640)
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Pathfinding Visualizer")

        self._buttons: List[UIButton] = []
        self._layout(win_w, win_h)

        # mouse state
        self.mouse_down = False
        self.erase_drag = False
        self.dragging: Optional[str] = None   # "start" | "end"

        # replay state
        self.running = False
        self.result: Optional[SearchResult] = None
        self.visited_shown: List[Position] = []
        self.path_shown: List[Position] = []
        self._queue: Deque[Tuple[str, Position]] = deque()
        self._next_t = 0.0
        self._shake_until = 0.0
        self._pending_size: Optional[Tuple[int, int]] = None
        self.state = "Idle"

        self.clock = pygame.time.Clock()

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        self.canvas_rect = pygame.Rect(0, 0,
                                       self.grid.cols * CELL_SIZE + 2 * GRID_MARGIN,
                                       self.grid.rows * CELL_SIZE + 2 * GRID_MARGIN)
        self._grid_origin = (GRID_MARGIN, GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right), win_h)
        self._build_buttons()

    def _fit_grid_to_window(self, win_w: int, win_h: int):
        """Window resized: rebuild the grid to the new size (walls are dropped)."""
        cols = max(MIN_DIM, (win_w - PANEL_W - 2 * GRID_MARGIN) // CELL_SIZE)
        rows = max(MIN_DIM, (win_h - 2 * GRID_MARGIN) // CELL_SIZE)
        if (rows, cols) != (self.grid.rows, self.grid.cols):
            self.grid.resize(rows, cols)
            self._clear_overlays()
        self._layout(win_w, win_h)

    def _on_resize(self, win_w: int, win_h: int):
        # grid stays fixed while a replay is drawing; resize once it finishes
        if self.running:
            self._pending_size = (win_w, win_h)
        else:
            self._fit_grid_to_window(win_w, win_h)

    def run(self):
        while True:
            self._handle_events()
            if self.running:
                self._tick_replay()
            self._draw()
            self.clock.tick(120)

    # ---------- search + replay ----------
    def visualize(self):
        if self.running:
            return
        self._clear_overlays()
        self.result = run_search(self.grid, self.algo_key)
        self._queue = deque(("visit", p) for p in self.result.trace)
        if self.result.success:
            self._queue.extend(("path", p) for p in self.result.path)
        self.running = True
        self.state = "Running"
        self._next_t = time.time()

    def _tick_replay(self):
        now = time.time()
        while self._queue and now >= self._next_t:
            kind, pos = self._queue.popleft()
            if kind == "visit":
                self.visited_shown.append(pos)
                self._next_t += self.settings.trace_delay()
            else:
                self.path_shown.append(pos)
                self._next_t += self.settings.path_delay()
        if not self._queue:
            self._finish_replay()

    def _finish_replay(self):
        self.running = False
        if self.result.success:
            self.state = "Success: Path found"
        else:
            self.state = "Failed: No path exists"
            self._shake_until = time.time() + 0.5
        if self._pending_size:
            self._fit_grid_to_window(*self._pending_size)
            self._pending_size = None

    def _clear_overlays(self):
        self.result = None
        self.visited_shown = []
        self.path_shown = []
        self._queue.clear()
        self.state = "Idle"

    def clear_board(self):
        if self.running:
            return
        self.grid.reset_walls()
        self._clear_overlays()

    def generate(self, key: str):
        if self.running:
            return
        self._clear_overlays()
        run_generator(self.grid, key)
        logger.debug("viewer generated %s maze", key)

    def set_algo(self, key: str):
        self.algo_key = key
        self.settings.algo = key
        self._refresh_active_states()

    def set_tool(self, tool: str):
        self.tool = tool
        self._refresh_active_states()

    def toggle_theme(self):
        self.skin = THEME.SKINS["dark" if self.skin.name == "light" else "light"]

    def bump_speed(self, factor: float):
        self.settings.speed = max(0.25, min(8.0, self.settings.speed * factor))

    # ---------- input ----------
    def _cell_at_pixel(self, px: int, py: int) -> Optional[Position]:
        ox, oy = self._grid_origin
        c = (px - ox) // CELL_SIZE
        r = (py - oy) // CELL_SIZE
        return (r, c) if self.grid.in_bounds(r, c) else None

    def _apply_tool(self, pos: Position, erase: bool):
        if erase or self.tool == "eraser":
            self.grid.set_wall(*pos, False)
        elif self.tool == "pencil":
            self.grid.set_wall(*pos, True)

    def _on_press(self, event):
        if self.running:
            return
        pos = self._cell_at_pixel(*event.pos)
        if pos is None:
            return
        self.mouse_down = True
        self.erase_drag = event.button == 3
        if self.visited_shown or self.path_shown:
            self._clear_overlays()
        if pos == self.grid.start:
            self.dragging = "start"
        elif pos == self.grid.end:
            self.dragging = "end"
        else:
            self._apply_tool(pos, self.erase_drag)

    def _on_motion(self, event):
        if not self.mouse_down or self.running:
            return
        pos = self._cell_at_pixel(*event.pos)
        if pos is None:
            return
        if self.dragging == "start":
            self.grid.move_start(*pos)
        elif self.dragging == "end":
            self.grid.move_end(*pos)
        else:
            self._apply_tool(pos, self.erase_drag)

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                self._on_key(e.key)
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._on_resize(e.w, e.h)
            elif e.type == pygame.MOUSEBUTTONDOWN:
                if any(b.handle_mouse(e) for b in self._buttons):
                    continue
                if e.button in (1, 3):
                    self._on_press(e)
            elif e.type == pygame.MOUSEBUTTONUP:
                self.mouse_down = False
                self.dragging = None
            elif e.type == pygame.MOUSEMOTION:
                for b in self._buttons:
                    b.handle_mouse(e)
                self._on_motion(e)

    def _on_key(self, key):
        if key in (pygame.K_ESCAPE, pygame.K_q):
            pygame.quit(); sys.exit(0)
        elif key == pygame.K_SPACE:
            self.visualize()
        elif key == pygame.K_b:
            self.set_algo("bfs")
        elif key == pygame.K_d:
            self.set_algo("dfs")
        elif key == pygame.K_a:
            self.set_algo("astar")
        elif key == pygame.K_1:
            self.generate("random")
        elif key == pygame.K_2:
            self.generate("spiral")
        elif key == pygame.K_3:
            self.generate("recursive")
        elif key == pygame.K_p:
            self.set_tool("pointer")
        elif key == pygame.K_w:
            self.set_tool("pencil")
        elif key == pygame.K_e:
            self.set_tool("eraser")
        elif key == pygame.K_c:
            self.clear_board()
        elif key == pygame.K_v and not self.running:
            self._clear_overlays()
        elif key == pygame.K_t:
            self.toggle_theme()
        elif key == pygame.K_m:
            self.map_theme = THEME.next_map_theme(self.map_theme)
        elif key in (pygame.K_PLUS, pygame.K_EQUALS):
            self.bump_speed(1.5)
        elif key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
            self.bump_speed(1 / 1.5)

    # ---------- drawing ----------
    def _draw(self):
        THEME.draw_backdrop(self.screen, self.skin)
        self._draw_grid()
        self._draw_panel()
        pygame.display.flip()

    def _draw_grid(self):
        cs = CELL_SIZE
        ox, oy = self._grid_origin
        if time.time() < self._shake_until:
            ox += int(6 * ((int(time.time() * 40) % 2) * 2 - 1))
        open_col, wall_col = THEME.MAP_THEMES[self.map_theme]

        for cell in self.grid.cells:
            rect = pygame.Rect(ox + cell.col * cs, oy + cell.row * cs, cs, cs)
            pygame.draw.rect(self.screen, wall_col if cell.is_wall else open_col, rect)
            pygame.draw.rect(self.screen, self.skin.grid_line, rect, 1)

        overlay = pygame.Surface((cs, cs), pygame.SRCALPHA)
        overlay.fill(self.skin.visited[self.algo_key])
        for (row, col) in self.visited_shown:
            if not self.grid.is_start_or_end(row, col):
                self.screen.blit(overlay, (ox + col * cs, oy + row * cs))

        for (row, col) in self.path_shown:
            if not self.grid.is_start_or_end(row, col):
                rect = pygame.Rect(ox + col * cs + 4, oy + row * cs + 4, cs - 8, cs - 8)
                pygame.draw.rect(self.screen, self.skin.path, rect, border_radius=6)

        self._draw_badge(self.grid.start, self.skin.start, "S")
        self._draw_badge(self.grid.end, self.skin.end, "E")

    def _draw_badge(self, pos: Position, color, label: str):
        ox, oy = self._grid_origin
        row, col = pos
        cx = ox + col * CELL_SIZE + CELL_SIZE // 2
        cy = oy + row * CELL_SIZE + CELL_SIZE // 2
        pygame.draw.circle(self.screen, color, (cx, cy), CELL_SIZE // 2 - 3)
        txt = self.font_small.render(label, True, (255, 255, 255))
        self.screen.blit(txt, txt.get_rect(center=(cx, cy)))

    # ---------- buttons + panel ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 16
        w = max(160, rb.width - 32)
        h = 34
        gap = 8
        third = (w - 2 * gap) // 3

        def add_row(items, store_prefix, togglable=True):
            nonlocal y
            for i, (label, cb, key) in enumerate(items):
                rect = pygame.Rect(x + i * (third + gap), y, third, h)
                btn = UIButton(label, rect, cb, togglable=togglable)
                self._buttons.append(btn)
                setattr(self, f"btn_{store_prefix}_{key}", btn)
            y += h + gap

        add_row([(ALGO_LABELS[k], lambda k=k: self.set_algo(k), k) for k in ALGO_LABELS], "algo")
        add_row([(label, lambda t=t: self.set_tool(t), t)
                 for t, label in (("pointer", "Pointer"), ("pencil", "Pencil"), ("eraser", "Eraser"))], "tool")
        add_row([("Maze", lambda: self.generate("random"), "random"),
                 ("Spiral", lambda: self.generate("spiral"), "spiral"),
                 ("Division", lambda: self.generate("recursive"), "recursive")], "maze", togglable=False)
        add_row([("Visualize", self.visualize, "run"),
                 ("Clear Board", self.clear_board, "clear"),
                 ("Theme", self.toggle_theme, "theme")], "action", togglable=False)

        self._panel_text_y = y + 8
        self._refresh_active_states()

    def _refresh_active_states(self):
        for k in ALGO_LABELS:
            btn = getattr(self, f"btn_algo_{k}", None)
            if btn: btn.set_active(self.algo_key == k)
        for t in ("pointer", "pencil", "eraser"):
            btn = getattr(self, f"btn_tool_{t}", None)
            if btn: btn.set_active(self.tool == t)

    def _draw_panel(self):
        rb = self._right_band
        THEME.glass_panel(self.screen, rb.inflate(-12, -12), self.skin)
        for b in self._buttons:
            b.draw(self.screen, self.font_small, self.skin)

        x0 = rb.x + 20
        y0 = self._panel_text_y
        wrap_w = rb.width - 40

        def line(text, f=None, color=None):
            nonlocal y0
            f = f or self.font
            surf = f.render(text, True, color or self.skin.text)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 4

        info = ALGO_INFO[self.algo_key]
        title = info.title
        status_color = None
        if self.state.startswith("Success"):
            title += ": Path Found"; status_color = self.skin.success
        elif self.state.startswith("Failed"):
            title += ": Path Not Found"; status_color = self.skin.error
        line(title, self.font_big, status_color or self.skin.accent)
        line(" · ".join(text for text, _ in info.tags), self.font_small)
        line(f"Status: {self.state}", color=status_color)
        visited = len(self.visited_shown)
        line(f"Visited: {visited}")
        if self.result is not None and not self.running:
            line(f"Path length: {self.result.path_length_label()}")
        else:
            line(f"Path length: {len(self.path_shown)}")
        line(f"Tool: {self.tool}   Map: {self.map_theme}   Speed: x{self.settings.speed:.2f}", self.font_small)
        y0 += 6

        for heading, body in info.paragraphs():
            line(heading, self.font, self.skin.accent)
            for chunk in _wrap(body, self.font_small, wrap_w):
                line(chunk, self.font_small)
            y0 += 4


def _wrap(text: str, font: pygame.font.Font, width: int) -> List[str]:
    lines: List[str] = []
    cur = ""
    for word in text.split():
        trial = f"{cur} {word}".strip()
        if font.size(trial)[0] <= width:
            cur = trial
        else:
            if cur:
                lines.append(cur)
            cur = word
    if cur:
        lines.append(cur)
    return lines


# ---------- main ----------
def main():
    try:
        settings = resolve_settings()
    except ValueError as ex:
        print(f"Bad settings: {ex}")
        sys.exit(1)
    logging.basicConfig(level=settings.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        grid = load_board(settings.board) if settings.board else default_grid(settings)
    except (OSError, ValueError, KeyError) as ex:
        print(f"Failed to load board {settings.board}: {ex}")
        sys.exit(1)
    viewer = Viewer(grid, settings)
    if settings.maze != "none":
        viewer.generate(settings.maze)
    viewer.run()


if __name__ == "__main__":
    main()

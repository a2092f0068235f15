# gridpath/app/viewer.py
#!/usr/bin/env python3
"""
Grid Path Viewer: animates AStarAlgo.step(), one expansion per tick.

Keys: 1/2/3 bundled maps, M next random maze, SPACE run or pause,
N one step, R reset, +/- speed, Q or ESC quit.

Only engine state is read here (open set, closed set, path, metrics).
"""

import sys, time, logging
from typing import List, Tuple, Optional, Dict

import pygame

from gridpath.config import Settings
from gridpath.core.astar import AStarAlgo
from gridpath.core.errors import InvalidInput
from gridpath.core.maps import MAP_FILES, load_map
from gridpath.core.maze import generate_maze
from gridpath.core.types import Grid, Cell, SUCCESS, NO_PATH, BUDGET_EXCEEDED

log = logging.getLogger(__name__)

# ---------- Config ----------
PANEL_W = 360            # right band: status lines, then buttons
PANEL_TEXT_H = 230       # buttons start below the status lines
GRID_MARGIN = 16
MIN_CELL = 8
START_CELL = 24
MAX_SPEED = 60

# Colors
WALL        = (20, 22, 26)
FLOOR       = (196, 200, 206)
GRID_LINE   = (90, 94, 102)
START_FILL  = (52, 120, 200)
GOAL_FILL   = (210, 64, 52)
BADGE_TEXT  = (250, 250, 250)
CLOSED_TINT = (200, 60, 140, 90)
OPEN_TINT   = (40, 160, 240, 110)
PATH_LINE   = (40, 230, 170)

BACKGROUND  = (28, 31, 38)
PANEL_BG    = (40, 44, 54)
BUTTON_IDLE = (52, 57, 69)
BUTTON_HOVER= (64, 70, 84)
BUTTON_LIT  = (58, 86, 160)
BUTTON_EDGE = (120, 170, 255)
PANEL_TEXT  = (226, 230, 236)
TITLE_TEXT  = (240, 196, 40)

STATE_LABELS = {
    SUCCESS: "Done",
    NO_PATH: "No path",
    BUDGET_EXCEEDED: "Budget exceeded",
}

# ---------- Panel button ----------
class PanelButton:
    """Clickable label in the side panel; `lit` marks the selected map or a running search."""

    def __init__(self, label: str, rect: pygame.Rect, on_click, *, sticky: bool = False):
        self.label = label
        self.rect = rect
        self.on_click = on_click
        self.sticky = sticky
        self.lit = False
        self.under_mouse = False

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        if self.sticky and self.lit:
            fill = BUTTON_LIT
        else:
            fill = BUTTON_HOVER if self.under_mouse else BUTTON_IDLE
        pygame.draw.rect(screen, fill, self.rect, border_radius=8)
        if self.sticky and self.lit:
            pygame.draw.rect(screen, BUTTON_EDGE, self.rect, width=2, border_radius=8)
        text = font.render(self.label, True, PANEL_TEXT)
        screen.blit(text, text.get_rect(center=self.rect.center))

    def feed(self, event: pygame.event.Event):
        if event.type == pygame.MOUSEMOTION:
            self.under_mouse = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and self.rect.collidepoint(event.pos):
            self.on_click()

# ---------- Viewer ----------
class Viewer:
    def __init__(self, grid: Grid, settings: Optional[Settings] = None):
        pygame.init()
        self.settings = settings or Settings()
        self.seed = self.settings.seed
        self.algo = AStarAlgo(frontier_kind=self.settings.frontier)

        self.fonts = {size: pygame.font.Font(None, size) for size in (14, 18, 22)}
        size = (2 * GRID_MARGIN + grid.width * START_CELL + PANEL_W,
                max(2 * GRID_MARGIN + grid.height * START_CELL, 560))
        self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        pygame.display.set_caption("Grid Path: A*")
        self.clock = pygame.time.Clock()

        self.grid = grid
        self.selected_map_key = "maze"
        self.running = False
        self.state = "Idle"
        self.steps_per_sec = 8
        self._next_step_at = 0.0
        self._buttons: List[PanelButton] = []
        self._button_keys: List[Optional[str]] = []

        self.open_set: set = set()
        self.closed_set: set = set()
        self.path: List[Cell] = []
        self._last_metrics: Dict = {}

        self._load_grid(grid, "maze")

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Largest whole cell size that fits next to the panel; grid centred vertically."""
        room_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        room_h = max(1, win_h - 2 * GRID_MARGIN)
        self.cell_size = max(MIN_CELL, min(room_w // self.grid.width, room_h // self.grid.height))

        board_w = self.grid.width * self.cell_size + 2 * GRID_MARGIN
        board_h = self.grid.height * self.cell_size + 2 * GRID_MARGIN
        top = max(0, (win_h - board_h) // 2)
        self._grid_origin = (GRID_MARGIN, top + GRID_MARGIN)
        self._right_band = pygame.Rect(board_w, 0, max(PANEL_W, win_w - board_w), win_h)
        self._build_buttons()

    # ---------- loop ----------
    def run(self):
        while self._handle_events():
            if self.running and time.time() >= self._next_step_at:
                self._next_step_at = time.time() + 1.0 / self.steps_per_sec
                self._do_step()
            self._draw()
            self.clock.tick(60)
        pygame.quit()

    def _do_step(self):
        res = self.algo.step()
        self.open_set.update(res.opened)
        self.open_set.difference_update(res.closed)
        self.closed_set.update(res.closed)
        if res.path is not None:
            self.path = res.path
        if res.metrics:
            self._last_metrics = res.metrics
        if res.status in STATE_LABELS:
            self.running = False
            self.state = STATE_LABELS[res.status]
        else:
            self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _key_actions(self):
        return {
            pygame.K_SPACE: self._toggle_run,
            pygame.K_n: self._do_step,
            pygame.K_r: self._reset,
            pygame.K_m: self._new_maze,
            pygame.K_PLUS: lambda: self._bump_speed(1),
            pygame.K_EQUALS: lambda: self._bump_speed(1),
            pygame.K_MINUS: lambda: self._bump_speed(-1),
            pygame.K_UNDERSCORE: lambda: self._bump_speed(-1),
            pygame.K_1: lambda: self._switch_map("01_gap_wall"),
            pygame.K_2: lambda: self._switch_map("02_sealed_wall"),
            pygame.K_3: lambda: self._switch_map("03_corridors"),
        }

    def _handle_events(self) -> bool:
        """Dispatch pending events; False once the window should close."""
        actions = self._key_actions()
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                return False
            if e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    return False
                action = actions.get(e.key)
                if action:
                    action()
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((max(640, e.w), max(480, e.h)), pygame.RESIZABLE)
                self._layout(*self.screen.get_size())
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                for b in self._buttons:
                    b.feed(e)
        return True

    # ---------- grid switching ----------
    def _load_grid(self, grid: Grid, key: str):
        # engine first: a rejected grid leaves the current one on screen
        self.algo.init(grid, step_budget=self.settings.step_budget)
        self.grid = grid
        self.selected_map_key = key
        self._layout(*self.screen.get_size())
        self._reset()

    def _switch_map(self, key: str):
        path = MAP_FILES.get(key)
        if path is None:
            return
        try:
            self._load_grid(load_map(path), key)
        except (InvalidInput, OSError) as ex:
            log.error("Failed to load map %s: %s", key, ex)
            return
        pygame.display.set_caption(f"Grid Path: {key}")

    def _new_maze(self):
        self.seed += 1
        s = self.settings
        self._load_grid(generate_maze(s.width, s.height, self.seed, s.wall_chance), "maze")
        pygame.display.set_caption(f"Grid Path: maze seed {self.seed}")

    # ---------- controls ----------
    def _reset(self):
        self.algo.reset()
        self.running = False
        self.state = "Idle"
        self.open_set = set(self.algo.frontier.members())
        self.closed_set = set()
        self.path = []
        self._last_metrics = self.algo.metrics()
        self._refresh_active_states()

    def _toggle_run(self):
        if self.state in STATE_LABELS.values():
            return
        self.running = not self.running
        self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _bump_speed(self, dv: int):
        self.steps_per_sec = max(1, min(MAX_SPEED, self.steps_per_sec + dv))

    # ---------- drawing ----------
    def _draw(self):
        self.screen.fill(BACKGROUND)
        self._draw_grid()
        self._draw_panel()
        pygame.display.flip()

    def _cell_rect(self, cell: Cell) -> pygame.Rect:
        x, y = cell
        ox, oy = self._grid_origin
        cs = self.cell_size
        return pygame.Rect(ox + x * cs, oy + y * cs, cs, cs)

    def _draw_grid(self):
        for cell in ((x, y) for y in range(self.grid.height) for x in range(self.grid.width)):
            rect = self._cell_rect(cell)
            self.screen.fill(WALL if self.grid.is_block(cell) else FLOOR, rect)
            pygame.draw.rect(self.screen, GRID_LINE, rect, 1)

        tint = pygame.Surface((self.cell_size, self.cell_size), pygame.SRCALPHA)
        for cells, color in ((self.closed_set, CLOSED_TINT), (self.open_set, OPEN_TINT)):
            tint.fill(color)
            for c in cells:
                self.screen.blit(tint, self._cell_rect(c))

        if len(self.path) > 1:
            pygame.draw.lines(self.screen, PATH_LINE, False,
                              [self._cell_rect(c).center for c in self.path], 5)

        self._draw_badge(self.algo.start, "S", START_FILL)
        self._draw_badge(self.algo.goal, "G", GOAL_FILL)

    def _draw_badge(self, cell: Optional[Cell], letter: str, color: Tuple[int, int, int]):
        if cell is None:
            return
        rect = self._cell_rect(cell)
        pygame.draw.circle(self.screen, color, rect.center, max(4, self.cell_size // 2 - 2))
        label = self.fonts[14].render(letter, True, BADGE_TEXT)
        self.screen.blit(label, label.get_rect(center=rect.center))

    # ---------- side panel ----------
    def _panel_entries(self):
        """(label, callback, key that lights the button or None)."""
        return [
            ("Run / Pause", self._toggle_run, "running"),
            ("Step Once", self._do_step, None),
            ("Reset", self._reset, None),
            ("Map 1: Gap wall", lambda: self._switch_map("01_gap_wall"), "01_gap_wall"),
            ("Map 2: Sealed wall", lambda: self._switch_map("02_sealed_wall"), "02_sealed_wall"),
            ("Map 3: Corridors", lambda: self._switch_map("03_corridors"), "03_corridors"),
            ("New random maze", self._new_maze, "maze"),
        ]

    def _build_buttons(self):
        rb = self._right_band
        width = max(160, rb.width - 32)
        self._buttons = []
        self._button_keys = []
        for i, (label, cb, key) in enumerate(self._panel_entries()):
            rect = pygame.Rect(rb.x + 16, rb.y + PANEL_TEXT_H + i * 42, width, 34)
            self._buttons.append(PanelButton(label, rect, cb, sticky=key is not None))
            self._button_keys.append(key)
        self._refresh_active_states()

    def _refresh_active_states(self):
        for btn, key in zip(self._buttons, self._button_keys):
            btn.lit = self.running if key == "running" else key == self.selected_map_key

    def _status_lines(self) -> List[str]:
        m = self._last_metrics
        lines = [
            f"State: {self.state}",
            f"Expanded: {m.get('popped', 0)}",
            f"Open: {m.get('open_size', 0)}   Closed: {m.get('closed_count', 0)}",
            f"Budget left: {m.get('budget_left', 0)}",
            f"Path cells: {m.get('path_len', 0)}",
        ]
        if m.get("total_cost") is not None:
            lines.append(f"Cost: {m['total_cost']}")
        lines.append(f"Speed: {self.steps_per_sec} steps/s")
        return lines

    def _draw_panel(self):
        rb = self._right_band
        pygame.draw.rect(self.screen, PANEL_BG, rb)
        title = self.fonts[22].render(self.algo.name, True, TITLE_TEXT)
        self.screen.blit(title, (rb.x + 16, rb.y + 16))
        y = rb.y + 24 + title.get_height()
        for text in self._status_lines():
            surf = self.fonts[18].render(text, True, PANEL_TEXT)
            self.screen.blit(surf, (rb.x + 16, y))
            y += surf.get_height() + 6
        for b in self._buttons:
            b.draw(self.screen, self.fonts[18])

# ---------- main ----------
def main(settings: Optional[Settings] = None):
    settings = settings or Settings.from_env()
    try:
        grid = generate_maze(settings.width, settings.height, settings.seed, settings.wall_chance)
    except InvalidInput as ex:
        log.error("Failed to build maze: %s", ex)
        sys.exit(1)
    Viewer(grid, settings).run()

if __name__ == "__main__":
    main()

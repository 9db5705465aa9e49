"""
Terminal Surface
=================
Double-buffered terminal renderer plus the projection helpers entities
use to paint world-space shapes onto it.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple
import math

try:
    from blessed import Terminal
except ImportError:
    raise ImportError("'blessed' library required. Install with: pip install blessed")

from .config import CELL_WIDTH_PX, CELL_HEIGHT_PX


# ANSI 256 color constants
NEON_CYAN = 51
NEON_MAGENTA = 201
NEON_YELLOW = 226
NEON_GREEN = 46
NEON_RED = 196
NEON_ORANGE = 208
NEON_PINK = 199
NEON_BLUE = 39
NEON_PURPLE = 135
EMERALD = 36
SKY = 117
BLOOD_RED = 124

GRAY_LIGHT = 252
GRAY_MED = 245
GRAY_DARK = 238
GRAY_DARKER = 235

WHITE = 255
BLACK = 0

HUD_ROWS = 3


@dataclass
class Cell:
    """One terminal cell: a glyph and its foreground colour."""
    char: str = ' '
    color: int = 7

    def same_as(self, other: 'Cell') -> bool:
        return self.char == other.char and self.color == other.color

    def blank(self):
        self.char = ' '
        self.color = 7


class DoubleBuffer:
    """
    Two full-screen cell grids.

    Frames are painted into `back`; `present` emits escape sequences
    only for cells that differ from what is already on screen (`front`)
    and then swaps the grids, so the screen is never cleared mid-game.
    """

    def __init__(self, term: Terminal):
        self.term = term
        self.width = term.width
        self.height = term.height
        self.front: List[List[Cell]] = self._grid()
        self.back: List[List[Cell]] = self._grid()

    def _grid(self) -> List[List[Cell]]:
        return [[Cell() for _ in range(self.width)] for _ in range(self.height)]

    def resize(self, width: int, height: int):
        """Adopt new terminal dimensions. Both grids start blank."""
        self.width = width
        self.height = height
        self.front = self._grid()
        self.back = self._grid()

    def clear_back(self):
        for row in self.back:
            for cell in row:
                cell.blank()

    def put(self, x: int, y: int, char: str, fg_color: int = 7):
        """Paint one cell of the back grid. Off-screen writes are dropped."""
        if 0 <= x < self.width and 0 <= y < self.height:
            cell = self.back[y][x]
            cell.char = char
            cell.color = fg_color

    def put_string(self, x: int, y: int, text: str, fg_color: int = 7):
        for i, char in enumerate(text):
            self.put(x + i, y, char, fg_color)

    def present(self) -> str:
        """Diff the grids, swap them and return the terminal output."""
        term = self.term
        parts = []
        for y, (new_row, old_row) in enumerate(zip(self.back, self.front)):
            for x, (new, old) in enumerate(zip(new_row, old_row)):
                if new.same_as(old):
                    continue
                # normal first so the previous cell's colour never bleeds
                parts.append(term.move_xy(x, y))
                parts.append(term.normal)
                parts.append(term.color(new.color))
                parts.append(new.char or ' ')

        self.front, self.back = self.back, self.front
        return ''.join(parts)


class BrailleCanvas:
    """
    Sub-cell dots drawn with Unicode Braille glyphs.

    Every terminal cell holds a 2x4 dot grid. Only lit cells are
    stored, since rings and sparks touch a small part of the screen.
    """

    BASE = 0x2800
    # (dot column, dot row) -> Braille bit
    DOT_BITS = {
        (0, 0): 0x01, (0, 1): 0x02, (0, 2): 0x04, (0, 3): 0x40,
        (1, 0): 0x08, (1, 1): 0x10, (1, 2): 0x20, (1, 3): 0x80,
    }

    def __init__(self, char_width: int, char_height: int):
        self.char_width = char_width
        self.char_height = char_height
        self.lit: Dict[Tuple[int, int], List[int]] = {}

    def clear(self):
        self.lit.clear()

    def set_dot(self, cx: float, cy: float, color: int = WHITE):
        """Light the dot under fractional cell coordinates (cx, cy)."""
        if not (0 <= cx < self.char_width and 0 <= cy < self.char_height):
            return
        col, row = int(cx), int(cy)
        bit = self.DOT_BITS[(int((cx - col) * 2), int((cy - row) * 4))]
        entry = self.lit.setdefault((col, row), [0, color])
        entry[0] |= bit
        # Most recent colour wins for the whole cell
        entry[1] = color

    def blit_to_buffer(self, buffer: DoubleBuffer):
        """Copy lit cells onto blank cells of the buffer."""
        for (cx, cy), (bits, color) in self.lit.items():
            if cx < buffer.width and cy < buffer.height and buffer.back[cy][cx].char == ' ':
                buffer.put(cx, cy, chr(self.BASE + bits), color)


@dataclass
class GameRenderer:
    """
    The drawing surface handed to the engine.

    The bottom HUD_ROWS rows are reserved for the HUD; the rest is the
    game area that world-space drawing is clipped to.
    """
    term: Terminal
    buffer: DoubleBuffer = field(init=False)
    braille: BrailleCanvas = field(init=False)

    show_fps: bool = False
    current_fps: float = 60.0

    def __post_init__(self):
        self.buffer = DoubleBuffer(self.term)
        self.braille = BrailleCanvas(self.term.width, self.term.height - HUD_ROWS)

    @property
    def width(self) -> int:
        return self.buffer.width

    @property
    def height(self) -> int:
        return self.buffer.height

    @property
    def game_height(self) -> int:
        """Height of the playable area (excluding HUD rows)."""
        return self.buffer.height - HUD_ROWS

    def begin_frame(self):
        self.buffer.clear_back()
        self.braille.clear()

    def end_frame(self) -> str:
        """Blit the braille overlay and return the diff for changed cells."""
        self.braille.blit_to_buffer(self.buffer)
        return self.buffer.present()

    def put(self, x: int, y: int, char: str, fg_color: int = 7):
        """Put a character inside the game area."""
        if y < self.game_height:
            self.buffer.put(x, y, char, fg_color)

    def put_string(self, x: int, y: int, text: str, fg_color: int = 7):
        if y < self.game_height:
            self.buffer.put_string(x, y, text, fg_color)

    def put_braille_pixel(self, px: float, py: float, color: int = WHITE):
        """Light a braille dot. `px`, `py` are fractional cells from `to_screen`."""
        self.braille.set_dot(px, py, color)

    def resize(self, width: int, height: int):
        self.buffer.resize(width, height)
        self.braille = BrailleCanvas(width, height - HUD_ROWS)

    def draw_box(self, x: int, y: int, w: int, h: int, color: int = GRAY_DARK,
                 char: str = '#'):
        """Draw a rectangular border."""
        for i in range(w):
            self.buffer.put(x + i, y, char, color)
            self.buffer.put(x + i, y + h - 1, char, color)
        for j in range(1, h - 1):
            self.buffer.put(x, y + j, char, color)
            self.buffer.put(x + w - 1, y + j, char, color)


# =============================================================================
# WORLD PROJECTION
# =============================================================================

def to_screen(x: float, y: float, camera: Tuple[float, float]) -> Tuple[float, float]:
    """World pixels to fractional terminal cells."""
    return (x - camera[0]) / CELL_WIDTH_PX, (y - camera[1]) / CELL_HEIGHT_PX


def put_world_char(surface, x: float, y: float, camera, char: str, color: int):
    """Put a single character at a world position."""
    sx, sy = to_screen(x, y, camera)
    surface.put(int(sx), int(sy), char, color)


def put_world_text(surface, x: float, y: float, camera, text: str, color: int):
    """Put text centered on a world position."""
    sx, sy = to_screen(x, y, camera)
    surface.put_string(int(sx) - len(text) // 2, int(sy), text, color)


def plot_ring(surface, x: float, y: float, radius: float, camera, color: int):
    """Trace a world-space circle with braille dots."""
    # One dot per half cell of circumference keeps large rings continuous
    steps = max(12, int(2 * math.pi * radius / (CELL_WIDTH_PX / 2)))
    for i in range(steps):
        angle = 2 * math.pi * i / steps
        sx, sy = to_screen(x + math.cos(angle) * radius,
                           y + math.sin(angle) * radius, camera)
        surface.put_braille_pixel(sx, sy, color)

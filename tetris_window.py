"""
Pygame window front end for the Tetris project.

Same collaborators as the terminal front end, drawn into a window:
- WindowRenderer pre-renders the static background (grid + border) and one
  block Surface per Dims, then blits locked cells and the falling piece.
- WindowInput drains pygame events in POLL_MS slices until a key or the tick
  deadline.
"""
from __future__ import annotations
import sys
from collections import deque
from typing import Deque, Optional
import pygame
from tetris_board import Board
from tetris_config import CONFIG, COLS, ROWS
from tetris_input import KeyEvent
from tetris_layout import Dims
from tetris_piece import Piece

BG = (10,13,34)
GRID = (40,50,90)
FRAME = (90,100,150)
BLOCK = (102,224,255)
TEXT = (255,220,220)

PYGAME_KEYS = {
    pygame.K_LEFT: KeyEvent.LEFT,
    pygame.K_RIGHT: KeyEvent.RIGHT,
    pygame.K_DOWN: KeyEvent.DOWN,
    pygame.K_UP: KeyEvent.UP,
}

def recreate_window(dims: Dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


class WindowRenderer:
    """Holds the pre-rendered background and block sprite for fast blitting."""
    def __init__(self, screen: pygame.Surface, dims: Dims, font: pygame.font.Font):
        self.screen = screen
        self.dims = dims
        self.font = font
        self._make_static()
        c = dims.cell
        self.block = pygame.Surface((c-2, c-2))
        self.block.fill(BLOCK)

    # ---------- Static background (grid + border) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, GRID, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, GRID, (d.board_x, Y), (d.board_x + d.board_w, Y))
        frame = pygame.Rect(d.board_x-2, d.board_y-2, d.board_w+4, d.board_h+4)
        pygame.draw.rect(self.bg, FRAME, frame, 2)

    def cell_pos(self, bx: int, by: int):
        return self.dims.board_x + bx*self.dims.cell + 1, self.dims.board_y + by*self.dims.cell + 1

    def _blit_board(self, board: Board, piece: Optional[Piece]):
        self.screen.blit(self.bg, (0,0))
        for y, row in enumerate(board.compose(piece, CONFIG["MARKER"])):
            for x, c in enumerate(row):
                if c is not None:
                    self.screen.blit(self.block, self.cell_pos(x, y))

    def draw(self, board: Board, piece: Piece):
        self._blit_board(board, piece)
        pygame.display.flip()

    def draw_game_over(self, board: Board):
        d = self.dims
        self._blit_board(board, None)
        msg = self.font.render(CONFIG["GAME_OVER_TEXT"], True, TEXT)
        rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.message_y + d.message_h // 2))
        self.screen.blit(msg, rect)
        pygame.display.flip()
        pygame.time.wait(int(CONFIG["GAME_OVER_HOLD_MS"]))


class WindowInput:
    def __init__(self):
        self.pending: Deque[KeyEvent] = deque()

    def _drain(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                self.pending.append(PYGAME_KEYS.get(e.key, KeyEvent.NONE))

    def wait_for_key_or_timeout(self, duration_ms: int) -> KeyEvent:
        deadline = pygame.time.get_ticks() + duration_ms
        while True:
            self._drain()
            if self.pending: return self.pending.popleft()
            if pygame.time.get_ticks() >= deadline: return KeyEvent.NONE
            pygame.time.wait(max(1, int(CONFIG["POLL_MS"])))

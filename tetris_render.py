
"""
Terminal rendering for the Tetris project.

Frames are built as plain strings first (render_lines / game_over_lines) so
they can be checked without a terminal; TerminalRenderer only paints them
onto a curses window. Each board cell is two characters wide.
"""
from __future__ import annotations
import curses
from typing import List, Optional
from tetris_board import Board, Cell
from tetris_config import CONFIG
from tetris_piece import Piece

EMPTY_CELL = "  "
BORDER = {"tl": "┌", "tr": "┐", "bl": "└", "br": "┘", "h": "─", "v": "│"}

def cell_text(c: Cell) -> str:
    return EMPTY_CELL if c is None else " " + c

def render_lines(board: Board, piece: Optional[Piece] = None, marker: Optional[str] = None) -> List[str]:
    """Bordered frame of the board with the falling piece composited on top."""
    grid = board.compose(piece, marker or CONFIG["MARKER"])
    bar = BORDER["h"] * (board.width * len(EMPTY_CELL))
    lines = [BORDER["tl"] + bar + BORDER["tr"]]
    for row in grid:
        lines.append(BORDER["v"] + "".join(cell_text(c) for c in row) + BORDER["v"])
    lines.append(BORDER["bl"] + bar + BORDER["br"])
    return lines

def game_over_lines(board: Board) -> List[str]:
    return render_lines(board) + [CONFIG["GAME_OVER_TEXT"]]


class TerminalRenderer:
    """Full-screen redraw of each tick onto a curses window."""
    def __init__(self, scr):
        self.scr = scr
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # terminal cannot hide the cursor
        self.last_frame: List[str] = []

    def _paint(self, lines: List[str]):
        self.scr.erase()
        for i, line in enumerate(lines):
            try:
                self.scr.addstr(i, 0, line)
            except curses.error:
                pass  # line falls outside a small terminal
        self.scr.refresh()
        self.last_frame = lines

    def draw(self, board: Board, piece: Piece):
        self._paint(render_lines(board, piece))

    def draw_game_over(self, board: Board):
        self._paint(game_over_lines(board))
        curses.napms(int(CONFIG["GAME_OVER_HOLD_MS"]))

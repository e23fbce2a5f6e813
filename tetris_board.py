
"""Board grid plus collision helpers: can_place, merge, rotate, clear"""
from typing import List, Optional, Sequence
from tetris_config import COLS, ROWS
from tetris_piece import Piece, Shape, rotate_cw

Cell = Optional[str]

class Board:
    def __init__(self, width: int = COLS, height: int = ROWS):
        self.width = width
        self.height = height
        self._grid: List[List[Cell]] = [[None]*width for _ in range(height)]

    @classmethod
    def from_rows(cls, rows: Sequence[str], marker: str = "#") -> "Board":
        """Build a board from text rows, top first; `marker` cells are filled."""
        b = cls(len(rows[0]), len(rows))
        for y, row in enumerate(rows):
            assert len(row) == b.width, f"row {y} is {len(row)} wide"
            for x, ch in enumerate(row):
                if ch == marker: b.set(x, y, ch)
        return b

    @property
    def rows(self) -> List[List[Cell]]:
        return [r[:] for r in self._grid]

    def get(self, x: int, y: int) -> Cell:
        return self._grid[y][x]

    def inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_empty(self, x: int, y: int) -> bool:
        return self.inside(x, y) and self._grid[y][x] is None

    def set(self, x: int, y: int, marker: str):
        assert self.inside(x, y), f"write outside board at ({x}, {y})"
        self._grid[y][x] = marker

    def row_full(self, y: int) -> bool:
        return all(c is not None for c in self._grid[y])

    def clear_full_rows(self) -> int:
        c = 0; y = self.height-1
        while y >= 0:
            if self.row_full(y):
                # rows above drop by one; re-check the same index
                del self._grid[y]; self._grid.insert(0, [None]*self.width); c += 1
            else: y -= 1
        return c

    def compose(self, piece: Optional[Piece], marker: str) -> List[List[Cell]]:
        """Grid copy with the piece overlaid; the board itself is untouched."""
        out = self.rows
        if piece is not None:
            for x, y in piece.cells():
                if self.inside(x, y): out[y][x] = marker
        return out


def can_place(board: Board, shape: Shape, x: int, y: int) -> bool:
    for r, row in enumerate(shape):
        for c, v in enumerate(row):
            if not v: continue
            bx, by = x+c, y+r
            if bx < 0 or bx >= board.width or by >= board.height: return False
            if by >= 0 and not board.is_empty(bx, by): return False
    return True

def merge(board: Board, shape: Shape, x: int, y: int, marker: str):
    for r, row in enumerate(shape):
        for c, v in enumerate(row):
            if v: board.set(x+c, y+r, marker)

def rotate(shape: Shape) -> Shape:
    return rotate_cw(shape)

def try_rotate(board: Board, piece: Piece) -> Optional[Piece]:
    """Rotated piece at the same anchor, or None when it would not fit."""
    ns = rotate(piece.shape)
    if can_place(board, ns, piece.x, piece.y): return Piece(ns, piece.x, piece.y)
    return None

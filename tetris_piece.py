
"""Piece model, shape catalog, rotation"""
from dataclasses import dataclass
from typing import Iterator, List, Tuple
from tetris_config import COLS

Shape = List[List[int]]

SHAPES = {
    "O": [[1,1],[1,1]],
    "S": [[0,1,1],[1,1,0]],
    "Z": [[1,1,0],[0,1,1]],
    "L": [[1,0,0],[1,1,1]],
    "I": [[1,1,1,1]],
}

def copy_shape(m: Shape) -> Shape: return [r[:] for r in m]

def rotate_cw(m: Shape) -> Shape:
    assert m and m[0], "cannot rotate an empty shape"
    return [list(r) for r in zip(*m[::-1])]

@dataclass
class Piece:
    shape: Shape
    x: int
    y: int

    @property
    def width(self) -> int: return len(self.shape[0])

    @property
    def height(self) -> int: return len(self.shape)

    @staticmethod
    def spawn(shape: Shape) -> "Piece":
        return Piece(shape, COLS//2 - len(shape[0])//2, 0)

    def moved(self, dx: int, dy: int) -> "Piece":
        return Piece(self.shape, self.x+dx, self.y+dy)

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Board coordinates of every filled cell, rows above the board included."""
        for r, row in enumerate(self.shape):
            for c, v in enumerate(row):
                if v: yield self.x+c, self.y+r


"""Uniform shape picker over the catalog"""
import random
from typing import Optional
from tetris_piece import SHAPES, Shape, copy_shape

class ShapeRandom:
    NAMES = list(SHAPES)

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def pick_name(self) -> str:
        return self._rng.choice(self.NAMES)

    def pick_random(self) -> Shape:
        # fresh copy: rotating the result must never touch SHAPES
        return copy_shape(SHAPES[self.pick_name()])

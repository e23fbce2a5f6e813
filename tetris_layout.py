# tetris_layout.py
from dataclasses import dataclass
from typing import Optional
from tetris_config import CONFIG, COLS, ROWS

@dataclass
class Dims:
    cell: int
    margin: int
    message_h: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    message_y: int

def compute_dims(cell: Optional[int] = None) -> Dims:
    cell = int(cell or CONFIG["CELL_SIZE"])
    margin = 16
    message_h = 40

    board_w = COLS * cell
    board_h = ROWS * cell

    total_w = margin + board_w + margin
    total_h = margin + board_h + margin + message_h

    board_x = margin
    board_y = margin
    message_y = board_y + board_h + margin

    return Dims(
        cell=cell, margin=margin, message_h=message_h,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        message_y=message_y,
    )

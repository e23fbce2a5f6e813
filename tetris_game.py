
"""Game loop state machine: spawn, fall, lock, game over"""
import logging
from enum import Enum
from typing import Optional
from tetris_board import Board, can_place, merge, try_rotate
from tetris_config import CONFIG
from tetris_input import KeyEvent
from tetris_piece import Piece
from tetris_rng import ShapeRandom

log = logging.getLogger(__name__)

class GameState(Enum):
    SPAWNING = "spawning"
    FALLING = "falling"
    LOCKING = "locking"
    GAME_OVER = "game_over"

MOVES = {
    KeyEvent.LEFT: (-1, 0),
    KeyEvent.RIGHT: (1, 0),
    KeyEvent.DOWN: (0, 1),
    KeyEvent.NONE: (0, 1),  # gravity
}

class Game:
    def __init__(self, rng: Optional[ShapeRandom] = None, board: Optional[Board] = None, marker: Optional[str] = None):
        self.rng = rng or ShapeRandom(CONFIG["SEED"])
        self.board = board or Board()
        self.marker = marker or CONFIG["MARKER"]
        self.piece: Optional[Piece] = None
        self.state = GameState.SPAWNING
        self.lines_cleared = 0
        self.pieces_locked = 0

    @property
    def over(self) -> bool:
        return self.state is GameState.GAME_OVER

    def fits(self, piece: Piece) -> bool:
        return can_place(self.board, piece.shape, piece.x, piece.y)

    def spawn(self) -> GameState:
        assert self.state is GameState.SPAWNING, f"spawn while {self.state.value}"
        piece = Piece.spawn(self.rng.pick_random())
        if not self.fits(piece):
            log.info("no room to spawn at (%d, %d): game over after %d pieces, %d lines",
                     piece.x, piece.y, self.pieces_locked, self.lines_cleared)
            self.piece = None
            self.state = GameState.GAME_OVER
            return self.state
        log.debug("spawned %dx%d piece at (%d, %d)", piece.width, piece.height, piece.x, piece.y)
        self.piece = piece
        self.state = GameState.FALLING
        return self.state

    def apply(self, event: KeyEvent) -> bool:
        """Apply one action to the falling piece; False when it was not legal."""
        p = self.piece
        if event is KeyEvent.UP:
            t = try_rotate(self.board, p)
        else:
            t = p.moved(*MOVES[event])
            if not self.fits(t): t = None
        if t is None: return False
        self.piece = t
        return True

    def lock(self):
        self.state = GameState.LOCKING
        p = self.piece
        merge(self.board, p.shape, p.x, p.y, self.marker)
        self.pieces_locked += 1
        c = self.board.clear_full_rows()
        self.lines_cleared += c
        log.debug("locked piece at (%d, %d), cleared %d rows", p.x, p.y, c)
        self.piece = None
        self.state = GameState.SPAWNING
        self.spawn()

    def step(self, event: KeyEvent) -> GameState:
        """One tick: the key's action (or gravity on NONE), then the lock check."""
        if self.state is GameState.SPAWNING: self.spawn()
        if self.state is not GameState.FALLING: return self.state
        self.apply(event)
        if not self.fits(self.piece.moved(0, 1)): self.lock()
        return self.state

    def run(self, input_source, renderer, tick_ms: Optional[int] = None) -> GameState:
        tick_ms = CONFIG["TICK_MS"] if tick_ms is None else tick_ms
        if self.state is GameState.SPAWNING: self.spawn()
        while not self.over:
            renderer.draw(self.board, self.piece)
            self.step(input_source.wait_for_key_or_timeout(tick_ms))
        renderer.draw_game_over(self.board)
        return self.state

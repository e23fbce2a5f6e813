import unittest

from tetris_board import Board
from tetris_config import COLS, ROWS
from tetris_game import Game, GameState
from tetris_input import KeyEvent
from tetris_piece import SHAPES, Piece, copy_shape

EMPTY = "." * COLS
FULL = "#" * COLS


class ScriptedShapes:
    """Hands out the named shapes in order, repeating the last one."""
    def __init__(self, *names):
        self.names = list(names)

    def pick_random(self):
        name = self.names.pop(0) if len(self.names) > 1 else self.names[0]
        return copy_shape(SHAPES[name])


class FakeInput:
    def __init__(self, *events):
        self.events = list(events)
        self.waits = []

    def wait_for_key_or_timeout(self, duration_ms):
        self.waits.append(duration_ms)
        return self.events.pop(0) if self.events else KeyEvent.NONE


class FakeRenderer:
    def __init__(self):
        self.frames = []
        self.final = None

    def draw(self, board, piece):
        self.frames.append((board.rows, piece))

    def draw_game_over(self, board):
        self.final = board.rows


def board_with(rows_by_index):
    rows = [EMPTY] * ROWS
    for y, row in rows_by_index.items():
        rows[y] = row
    return Board.from_rows(rows)


def falling(game, shape, x, y):
    game.piece = Piece(shape, x, y)
    game.state = GameState.FALLING
    return game


class SpawnTests(unittest.TestCase):
    def test_spawn_centers_piece(self):
        g = Game(ScriptedShapes("I"))
        self.assertEqual(g.spawn(), GameState.FALLING)
        self.assertEqual((g.piece.x, g.piece.y, g.piece.shape), (3, 0, [[1, 1, 1, 1]]))

    def test_full_top_rows_end_the_game(self):
        g = Game(ScriptedShapes("O"), board_with({0: FULL, 1: FULL}))
        self.assertEqual(g.spawn(), GameState.GAME_OVER)
        self.assertIsNone(g.piece)
        self.assertTrue(g.over)

    def test_step_spawns_first(self):
        g = Game(ScriptedShapes("O"))
        g.step(KeyEvent.NONE)
        self.assertEqual((g.piece.x, g.piece.y), (4, 1))

    def test_step_after_game_over_does_nothing(self):
        g = Game(ScriptedShapes("O"), board_with({0: FULL, 1: FULL}))
        g.spawn()
        before = g.board.rows
        self.assertEqual(g.step(KeyEvent.LEFT), GameState.GAME_OVER)
        self.assertEqual(g.board.rows, before)


class FallingTests(unittest.TestCase):
    def setUp(self):
        self.game = Game(ScriptedShapes("O"))
        self.game.spawn()

    def test_horizontal_moves(self):
        self.game.step(KeyEvent.LEFT)
        self.assertEqual((self.game.piece.x, self.game.piece.y), (3, 0))
        self.game.step(KeyEvent.RIGHT)
        self.game.step(KeyEvent.RIGHT)
        self.assertEqual((self.game.piece.x, self.game.piece.y), (5, 0))

    def test_one_action_per_tick(self):
        self.game.step(KeyEvent.DOWN)
        self.assertEqual(self.game.piece.y, 1)
        self.game.step(KeyEvent.NONE)
        self.assertEqual(self.game.piece.y, 2)

    def test_wall_stops_piece(self):
        for _ in range(COLS):
            self.game.step(KeyEvent.LEFT)
        self.assertEqual((self.game.piece.x, self.game.piece.y), (0, 0))
        for _ in range(COLS):
            self.game.step(KeyEvent.RIGHT)
        self.assertEqual(self.game.piece.x, COLS - 2)

    def test_occupied_cell_stops_move(self):
        g = falling(Game(ScriptedShapes("O"), board_with({5: "..#......."})), SHAPES["O"], 3, 4)
        g.step(KeyEvent.LEFT)
        self.assertEqual(g.piece.x, 3)

    def test_piece_locks_on_floor(self):
        for _ in range(ROWS - 3):
            self.assertEqual(self.game.step(KeyEvent.DOWN), GameState.FALLING)
            self.assertEqual(self.game.pieces_locked, 0)
        self.game.step(KeyEvent.DOWN)
        self.assertEqual(self.game.pieces_locked, 1)
        self.assertEqual(self.game.state, GameState.FALLING)
        self.assertEqual((self.game.piece.x, self.game.piece.y), (4, 0))
        for x, y in [(4, 18), (5, 18), (4, 19), (5, 19)]:
            self.assertEqual(self.game.board.get(x, y), "■")

    def test_lock_clears_completed_rows(self):
        g = Game(ScriptedShapes("O"), board_with({18: "####..####", 19: "####..####"}))
        g.spawn()
        while g.pieces_locked == 0:
            g.step(KeyEvent.NONE)
        self.assertEqual(g.lines_cleared, 2)
        self.assertTrue(all(c is None for row in g.board.rows for c in row))

    def test_landing_piece_locks_same_tick(self):
        g = falling(Game(ScriptedShapes("O"), board_with({10: FULL[:9] + "."})), SHAPES["O"], 0, 7)
        g.step(KeyEvent.NONE)
        self.assertEqual(g.pieces_locked, 1)
        self.assertEqual(g.board.get(0, 9), "■")


class RotationTests(unittest.TestCase):
    def test_rotation_against_wall_rejected(self):
        g = falling(Game(ScriptedShapes("I")), [[1], [1], [1], [1]], 9, 5)
        self.assertEqual(g.step(KeyEvent.UP), GameState.FALLING)
        self.assertEqual((g.piece.shape, g.piece.x, g.piece.y), ([[1], [1], [1], [1]], 9, 5))

    def test_rotation_applied_when_legal(self):
        g = falling(Game(ScriptedShapes("I")), [[1, 1, 1, 1]], 3, 5)
        g.step(KeyEvent.UP)
        self.assertEqual((g.piece.shape, g.piece.x, g.piece.y), ([[1], [1], [1], [1]], 3, 5))

    def test_rotation_never_touches_catalog(self):
        g = Game(ScriptedShapes("L"))
        g.spawn()
        g.step(KeyEvent.UP)
        self.assertEqual(SHAPES["L"], [[1, 0, 0], [1, 1, 1]])


class RunTests(unittest.TestCase):
    def test_run_until_game_over(self):
        rows = {y: "." + "#" * (COLS - 1) for y in range(2, ROWS)}
        g = Game(ScriptedShapes("O"), board_with(rows))
        inp, out = FakeInput(), FakeRenderer()
        self.assertEqual(g.run(inp, out, tick_ms=5), GameState.GAME_OVER)
        self.assertEqual(len(out.frames), 1)
        self.assertEqual(inp.waits, [5])
        self.assertEqual(g.pieces_locked, 1)
        self.assertEqual(out.final[0][4:6], ["■", "■"])

    def test_run_feeds_keys_to_piece(self):
        rows = {y: "." + "#" * (COLS - 1) for y in range(3, ROWS)}
        g = Game(ScriptedShapes("O"), board_with(rows))
        inp, out = FakeInput(KeyEvent.LEFT, KeyEvent.LEFT), FakeRenderer()
        g.run(inp, out, tick_ms=5)
        self.assertEqual([p.x for _, p in out.frames], [4, 3, 2, 4])
        self.assertEqual(g.pieces_locked, 2)
        self.assertEqual(out.final[1][2:6], ["■"] * 4)
        self.assertEqual(out.final[2][2:6], ["■"] * 4)


if __name__ == "__main__":
    unittest.main()

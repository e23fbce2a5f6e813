
COLS, ROWS = 10, 20

CONFIG = {
    "TICK_MS": 500,
    "POLL_MS": 10,
    "MARKER": "■",
    "GAME_OVER_TEXT": "Game over!",
    "GAME_OVER_HOLD_MS": 1500,
    "CELL_SIZE": 28,
    "SEED": None,
}

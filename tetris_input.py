
"""Key-or-timeout input for the terminal front end"""
import curses
import time
from enum import Enum
from tetris_config import CONFIG

class KeyEvent(Enum):
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    UP = "up"

CURSES_KEYS = {
    curses.KEY_LEFT: KeyEvent.LEFT,
    curses.KEY_RIGHT: KeyEvent.RIGHT,
    curses.KEY_DOWN: KeyEvent.DOWN,
    curses.KEY_UP: KeyEvent.UP,
}

class TerminalInput:
    """Polls a curses window in POLL_MS slices until a key or the deadline."""
    def __init__(self, scr, clock=time.monotonic):
        self.scr = scr
        self.clock = clock
        scr.keypad(True)

    def wait_for_key_or_timeout(self, duration_ms: int) -> KeyEvent:
        deadline = self.clock() + duration_ms/1000
        self.scr.timeout(max(1, int(CONFIG["POLL_MS"])))
        while True:
            ch = self.scr.getch()
            if ch != -1:
                # any key ends the tick; unmapped keys fall back to gravity
                return CURSES_KEYS.get(ch, KeyEvent.NONE)
            if self.clock() >= deadline: return KeyEvent.NONE


import argparse, curses, locale, logging, sys
from tetris_config import CONFIG
from tetris_game import Game
from tetris_input import TerminalInput
from tetris_render import TerminalRenderer, game_over_lines

log = logging.getLogger("tetris")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Falling-block puzzle game for the terminal.")
    parser.add_argument("--window", action="store_true",
                        help="play in a pygame window instead of the terminal")
    parser.add_argument("--seed", type=int, default=CONFIG["SEED"],
                        help="seed for the piece sequence")
    parser.add_argument("--tick-ms", type=int, default=CONFIG["TICK_MS"],
                        help="gravity tick length in milliseconds (default: %(default)s)")
    parser.add_argument("--log-file", help="write log records to this file")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)
    if args.tick_ms <= 0:
        parser.error("--tick-ms must be positive")
    return args


def setup_logging(args):
    # the terminal belongs to curses, so records only go to a file
    if args.log_file:
        logging.basicConfig(filename=args.log_file, level=getattr(logging, args.log_level),
                            format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def play_terminal(scr, game):
    return game.run(TerminalInput(scr), TerminalRenderer(scr))


def play_window(game):
    import pygame
    from tetris_layout import compute_dims
    from tetris_window import WindowInput, WindowRenderer, recreate_window
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])
    try:
        dims = compute_dims()
        screen = recreate_window(dims)
        pygame.display.set_caption("Tetris")
        font = pygame.font.SysFont(None, 32)
        return game.run(WindowInput(), WindowRenderer(screen, dims, font))
    finally:
        pygame.quit()


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args)
    CONFIG["SEED"] = args.seed
    CONFIG["TICK_MS"] = args.tick_ms
    game = Game()
    log.info("starting %s game, seed=%s tick=%dms",
             "window" if args.window else "terminal", args.seed, args.tick_ms)
    try:
        if args.window:
            play_window(game)
        else:
            locale.setlocale(locale.LC_ALL, "")
            curses.wrapper(play_terminal, game)
    except KeyboardInterrupt:
        log.info("interrupted after %d pieces", game.pieces_locked)
        return 130
    print("\n".join(game_over_lines(game.board)))
    log.info("game over: %d pieces locked, %d lines cleared", game.pieces_locked, game.lines_cleared)
    return 0


if __name__ == '__main__':
    sys.exit(main())

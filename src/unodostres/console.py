import logging
import sys
import threading
from typing import Callable, Optional, TextIO

from .board import POSITION_KEYS, Phase, Position, position_from_key, render_grid
from .game import Game

logger = logging.getLogger(__name__)

PROMPT = "Input a position's coordinates (XY): "
NOT_A_POSITION = "Please input an existing position's coordinates."

TURN_BANNERS = {
    Phase.TRES_OCCUPY: "Tres' Turn",
    Phase.UNO_OCCUPY: "Uno's Turn",
    Phase.DOS_VACATE: "Dos' Turn",
}

InputFn = Callable[[str], str]


def parse_coordinates(raw: str) -> Optional[Position]:
    """Turn two-digit ``XY`` text into a Position, or None if it names no cell."""
    s = raw.strip()
    if not s.isdecimal():
        return None
    key = int(s)
    if key not in POSITION_KEYS:
        return None
    return position_from_key(key)


def read_move(game: Game, input_fn: InputFn = input, out: TextIO = sys.stdout) -> Position:
    while True:
        raw = input_fn(PROMPT)
        position = parse_coordinates(raw)
        if position is None:
            print(NOT_A_POSITION, file=out)
            continue
        reason = game.rejection_reason(position)
        if reason is not None:
            print(reason, file=out)
            continue
        return position


def render(game: Game, out: TextIO = sys.stdout) -> None:
    print(render_grid(game.uno, game.tres), file=out)
    print(file=out)


def run_game(game: Optional[Game] = None, input_fn: InputFn = input, out: TextIO = sys.stdout) -> Game:
    g = game if game is not None else Game()
    while True:
        g.is_over = g.check_over()
        render(g, out)
        if g.is_over:
            break
        print(TURN_BANNERS[g.phase] + "\n", file=out)
        position = read_move(g, input_fn, out)
        g.apply_move(position)
        print(file=out)
    logger.debug("game over: %s", g.result_line())
    print("Result: " + g.result_line(), file=out)
    return g


def launch(game: Optional[Game] = None, input_fn: InputFn = input, out: TextIO = sys.stdout) -> Game:
    g = game if game is not None else Game()
    errors = []

    def _worker() -> None:
        try:
            run_game(g, input_fn, out)
        except BaseException as e:
            errors.append(e)

    t = threading.Thread(target=_worker, name="unodostres-game", daemon=True)
    t.start()
    t.join()
    if errors:
        raise errors[0]
    return g

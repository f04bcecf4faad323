import argparse
import logging
import random
from collections import Counter
from statistics import mean
from typing import Tuple

from unodostres.game import Game, NO_WINNER

logger = logging.getLogger("simulate")


def random_game(rng: random.Random) -> Tuple[Game, int]:
    g = Game()
    plies = 0
    while not g.check_over():
        g.apply_move(rng.choice(g.legal_moves()))
        plies += 1
    g.is_over = True
    return g, plies


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--games", type=int, default=1000)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    rng = random.Random(args.seed)

    results = Counter()
    lengths = []
    for i in range(args.games):
        g, plies = random_game(rng)
        results[g.result_line()] += 1
        lengths.append(plies)
        logger.info("game %d: %s after %d plies", i, g.result_line(), plies)

    print(f"Uno Dos Tres random playouts: {args.games} games, seed {args.seed}")
    for line in ("Uno Wins", "Dos Wins", "Tres Wins", NO_WINNER):
        n = results[line]
        share = n / args.games if args.games else 0.0
        print(f"{line:<10} {n:>7}  {share:6.1%}")
    if lengths:
        print(f"plies: mean={mean(lengths):.1f} min={min(lengths)} max={max(lengths)}")


if __name__ == "__main__":
    main()

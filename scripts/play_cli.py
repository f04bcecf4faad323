import os
import sys
import argparse
import logging
from unodostres.console import launch, run_game


def main() -> int:
    parser = argparse.ArgumentParser(description="Uno Dos Tres on a 4x4 board")
    parser.add_argument("--thread", action="store_true", help="run the game loop on a worker thread")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    print("Uno Dos Tres")
    print("Tres and Uno occupy free cells, Dos steals occupied ones.")
    print("Enter coordinates as column then row, e.g. 23")
    print()
    try:
        if args.thread:
            launch()
        else:
            run_game()
    except (EOFError, KeyboardInterrupt):
        print()
        print("Game abandoned.")
        if args.thread:
            # the worker can still be blocked on stdin, skip interpreter shutdown
            sys.stdout.flush()
            sys.stderr.flush()
            os._exit(1)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

# main.py
import argparse

from runners.run_snake import main as snake
from runners.run_headless import main as headless

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Snake on a wrapping grid.")
    p.add_argument("mode", choices=["snake", "headless"])
    p.add_argument("--grid-w", type=int, default=None)
    p.add_argument("--grid-h", type=int, default=None)
    p.add_argument("--window-width", type=int, default=None,
                   help="derive the grid from a window width (4:3 canvas)")
    p.add_argument("--cell-px", type=int, default=None)
    p.add_argument("--fps", type=float, default=None, help="gameplay ticks per second")
    p.add_argument("--refresh", type=int, default=None, help="redraws per second")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--ticks", type=int, default=None, help="headless: tick limit per game")
    p.add_argument("--games", type=int, default=None, help="headless: games to play")
    p.add_argument("--record-dir", default=None, help="save every rendered frame as PNG")
    p.add_argument("--log-csv", default=None, help="append one row per finished game")
    return p.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    if args.mode == "snake":
        snake(args)
    elif args.mode == "headless":
        headless(args)

if __name__ == "__main__":
    main()

"""
Usage examples

$ python generate.py people.txt 10k  # 10 000 records, time-derived seed
$ python generate.py people.txt 2.5M --seed 42 --quiet  # reproducible, no console output
$ python generate.py people.txt 1M --seed 1700000000000 --legacy-random  # same bytes as the Java tool
"""
from __future__ import annotations
import argparse
from src.generation.main import DEFAULT_BUFFER_SIZE, main
from src.generation.quantity import InvalidQuantity, parse_quantity


def _parse_args(argv=None):
    p = argparse.ArgumentParser(description="Generate a file of fixed-width synthetic person records.")
    p.add_argument(
        "file",
        help="Where to write the records"
    )
    p.add_argument(
        "count",
        help="How many records to generate, e.g. 5000, 10k or 2.5M"
    )
    p.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed (default: current time in milliseconds)"
    )
    p.add_argument(
        "--buffer-size", "--bufferSize", "-b",
        dest="buffer_size",
        type=int,
        default=DEFAULT_BUFFER_SIZE,
        help="Output buffer size in bytes"
    )
    p.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Do not print progress or the final summary"
    )
    p.add_argument(
        "--legacy-random",
        action="store_true",
        help="Use the java.util.Random compatible generator"
    )
    ns = p.parse_args(argv)
    try:
        ns.count = parse_quantity(ns.count)
    except InvalidQuantity as exc:
        raise SystemExit(f"count: {exc}") from exc
    if ns.count < 0:
        raise SystemExit("count must not be negative")
    if ns.buffer_size <= 0:
        raise SystemExit("--buffer-size must be positive")
    return ns


if __name__ == "__main__":
    args = _parse_args()
    main(
        filename=args.file,
        count=args.count,
        seed=args.seed,
        buffer_size=args.buffer_size,
        quiet=args.quiet,
        legacy_random=args.legacy_random,
    )

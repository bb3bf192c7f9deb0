"""Fills a RollingBuffer with sample data and prints both of its views.

Usage:
    python -m rollingbuffer.demo --capacity 20 --samples 40 --kind int
"""

import argparse
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

from loguru import logger

from rollingbuffer.buffer import InvalidCapacityError, RollingBuffer
from rollingbuffer.config import CONFIG_FILE, load_config
from rollingbuffer.logging_config import setup_logging

ALPHABET: Final[str] = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

EXIT_OK: Final[int] = 0
EXIT_MISMATCH: Final[int] = 1
EXIT_BAD_CAPACITY: Final[int] = 2


@dataclass(frozen=True)
class Point:
    """A two-field sample, as a plot would consume it."""

    x: float
    y: float


def make_int(i: int) -> int:
    return i


def make_char(i: int) -> str:
    """Maps an index to a letter, repeating 'Z' past the end of the alphabet."""
    return ALPHABET[i] if i < len(ALPHABET) else "Z"


def make_point(i: int) -> Point:
    return Point(x=float(i), y=i * 5.3)


SAMPLE_KINDS: Final[dict[str, Callable[[int], Any]]] = {
    "int": make_int,
    "char": make_char,
    "point": make_point,
}


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rollingbuffer-demo",
        description="Feed a RollingBuffer and print its contents after each add.",
    )
    parser.add_argument("--config", type=Path, default=CONFIG_FILE)
    parser.add_argument("--capacity", type=int, default=None)
    parser.add_argument("--samples", type=int, default=None)
    parser.add_argument("--kind", choices=sorted(SAMPLE_KINDS), default="int")
    parser.add_argument("--log-level", default=None)
    parser.add_argument(
        "--no-lazy",
        action="store_true",
        help="Only print the materialized view.",
    )
    return parser.parse_args(argv)


def run(capacity: int, samples: int, kind: str, show_lazy: bool = True) -> bool:
    """Adds `samples` values to a new buffer, printing its views after each add.

    Args:
        capacity: Capacity of the buffer to fill.
        samples: Number of values to add.
        kind: One of the keys of `SAMPLE_KINDS`.
        show_lazy: Also print the lazily produced view.

    Returns:
        True if the materialized and lazy views agreed after every add.

    Raises:
        InvalidCapacityError: If the capacity is not a positive integer.
    """
    make_sample = SAMPLE_KINDS[kind]
    buff: RollingBuffer[Any] = RollingBuffer(capacity)
    consistent = True

    start = time.perf_counter()
    for i in range(samples):
        buff.add(make_sample(i))
        vec_out = buff.values()
        iter_out = list(buff.values_iter())
        print(f"len: {len(buff)} - {vec_out}")
        if show_lazy:
            print(f"len: {len(buff)} - {iter_out}")
        if vec_out != iter_out:
            logger.error(f"Views disagree after {i + 1} adds.")
            consistent = False
    elapsed_ms = (time.perf_counter() - start) * 1000

    logger.info(f"Runtime: {elapsed_ms:.3f} ms for {samples} adds.")
    return consistent


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the demo.

    Returns:
        An exit code: 0 on success, 1 if the views disagreed, 2 on an
        invalid capacity.
    """
    args = _parse_args(argv)
    settings = load_config(args.config)

    log_dir = settings.general.log_directory
    setup_logging(
        console_level=args.log_level or settings.general.log_level_console,
        file_level=settings.general.log_level_file,
        log_dir=Path(log_dir) if log_dir else None,
    )

    capacity = (
        args.capacity if args.capacity is not None else settings.demo.capacity
    )
    samples = args.samples if args.samples is not None else settings.demo.samples
    show_lazy = settings.demo.show_lazy and not args.no_lazy

    try:
        consistent = run(capacity, samples, args.kind, show_lazy=show_lazy)
    except InvalidCapacityError as e:
        logger.error(f"Cannot build buffer with capacity {capacity!r}: {e}")
        return EXIT_BAD_CAPACITY

    return EXIT_OK if consistent else EXIT_MISMATCH


if __name__ == "__main__":
    sys.exit(main())

"""Command line: play the overworld from a script of pad states."""

from __future__ import annotations

import argparse
import re
import sys

from snesjam.world import Console, Keys, World

_SEPARATORS = re.compile(r"[\s,+]+")


def parse_pad(line: str) -> Keys:
    """Turn a line such as "up a" or "left+down" into pad flags."""
    pad = Keys(0)
    for word in _SEPARATORS.split(line.strip()):
        if not word:
            continue
        try:
            pad |= Keys[word.upper()]
        except KeyError:
            raise ValueError(f"unknown key: {word!r}") from None
    return pad


def _screen(console: Console) -> str:
    rows = [console.text_at(0, row) for row in range(console.rows)]
    while rows and not rows[-1]:
        rows.pop()
    return "\n".join(rows)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="snesjam",
        description="Run the delivery world, one frame per line of pad states.",
    )
    parser.add_argument("script", nargs="?", help="file of pad states (default: stdin)")
    parser.add_argument(
        "--trace", action="store_true", help="print the screen after every frame"
    )
    args = parser.parse_args(argv)

    if args.script is None:
        lines = sys.stdin.read().splitlines()
    else:
        try:
            with open(args.script, encoding="utf-8") as handle:
                lines = handle.read().splitlines()
        except OSError as error:
            print(f"snesjam: {error}", file=sys.stderr)
            return 2

    world = World()
    first_render = True
    for number, line in enumerate(lines, start=1):
        try:
            pad = parse_pad(line.split("#", 1)[0])
        except ValueError as error:
            print(f"snesjam: line {number}: {error}", file=sys.stderr)
            return 2
        world.set_scroll(pad, first_render)
        first_render = False
        if args.trace:
            print(f"-- frame {number}")
            print(_screen(world.console))

    if not args.trace:
        print(_screen(world.console))
    return 0


if __name__ == "__main__":
    sys.exit(main())
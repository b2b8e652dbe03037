from __future__ import annotations

import argparse
import os
import re
import sys
from typing import List, Optional

# Ensure repo root on path
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from eca import RowSequence, ValidationError
from render import render_sequence


def parse_start(text: str) -> List[int]:
    """Parse '0001000' or '0,0,1' (whitespace allowed) into a list of bits."""
    if re.search(r"[^01,\s]", text):
        raise ValueError(f"start must contain only 0, 1, commas and spaces: {text!r}")
    return [int(c) for c in text if c in "01"]


def center_start(width: int) -> List[int]:
    row = [0] * max(width, 0)
    if width > 0:
        row[width // 2] = 1
    return row


def run(args: argparse.Namespace) -> str:
    """Render `args.height` generations to `args.out`. Returns the output path."""
    if args.start:
        start = parse_start(args.start)
    elif args.center:
        start = center_start(args.width)
    else:
        start = []

    seq = RowSequence(args.rule, args.width, start)
    img = render_sequence(seq, args.height, pixel_size=args.pixel_size)

    os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)
    img.save(args.out)
    print(f"rule={seq.get_rule()} width={seq.get_width()} height={args.height} -> {args.out} ({img.size[0]}x{img.size[1]})")
    return args.out


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Render an elementary cellular automaton to PNG")
    ap.add_argument("--rule", type=int, default=90, help="rule number in [0,255]")
    ap.add_argument("--width", type=int, default=101)
    ap.add_argument("--height", type=int, default=50, help="number of generations")
    ap.add_argument("--pixel-size", type=int, default=4)
    ap.add_argument("--start", type=str, default="", help="start row, e.g. 0001000 or 0,0,1")
    ap.add_argument("--center", action="store_true", help="single live cell in the middle (when no --start)")
    ap.add_argument("--out", type=str, default="eca.png")
    return ap


def main(argv: Optional[List[str]] = None):
    ap = build_parser()
    args = ap.parse_args(argv)
    try:
        run(args)
    except ValidationError as e:
        ap.error(f"{e.kind.value}: {e}")
    except ValueError as e:
        ap.error(str(e))


if __name__ == "__main__":
    main()

from __future__ import annotations

import argparse
import os
import sys
from typing import Any, Dict

import yaml

# Ensure repo root on path
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from eca import ValidationError
from scripts.render_eca import run


def load_config(path: str) -> argparse.Namespace:
    with open(path, "r") as f:
        cfg: Dict[str, Any] = yaml.safe_load(f) or {}

    start = cfg.get("start", "")
    if isinstance(start, (list, tuple)):
        start = ",".join(str(int(bool(v))) for v in start)

    defaults = dict(
        rule=cfg.get("rule", 90),
        width=cfg.get("width", 101),
        height=cfg.get("height", 50),
        pixel_size=cfg.get("pixel_size", 4),
        start=str(start),
        center=cfg.get("center", False),
        out=cfg.get("out", "eca.png"),
    )
    return argparse.Namespace(**defaults)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", type=str, required=True, help="YAML config file")
    # Optional overrides
    ap.add_argument("--rule", type=int)
    ap.add_argument("--out", type=str)
    args = ap.parse_args()

    ns = load_config(args.config)
    if args.rule is not None:
        ns.rule = args.rule
    if args.out:
        ns.out = args.out

    try:
        run(ns)
    except ValidationError as e:
        ap.error(f"{e.kind.value}: {e}")
    except ValueError as e:
        ap.error(str(e))


if __name__ == "__main__":
    main()

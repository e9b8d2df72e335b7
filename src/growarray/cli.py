# Copyright (c) 2025 growarray contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the growarray project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/growarray/cli.py
from __future__ import annotations

import argparse
import logging
import sys


def cmd_int(args: argparse.Namespace) -> None:
    from growarray.demos.int_demo import main

    main(values=args.values, index=args.index)


def cmd_char(args: argparse.Namespace) -> None:
    from growarray.demos.char_demo import main

    main(chars=args.chars)


def cmd_growth(args: argparse.Namespace) -> None:
    from growarray.demos.growth_demo import main

    main(n=args.n, outputs_dir=args.outputs_dir, plot=not args.no_plot)


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    p = argparse.ArgumentParser(prog="growarray-demo", description="Run growarray demos")
    p.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG shows growth steps)")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("int", help="Integer container: 55, 50, 510")
    sp.add_argument("values", nargs="*", type=int, default=None)
    sp.add_argument("--index", type=int, default=None, help="Index to read back (default: last)")
    sp.set_defaults(func=cmd_int)

    sp = sub.add_parser("char", help="Character container: A, B, C")
    sp.add_argument("--chars", default="ABC")
    sp.set_defaults(func=cmd_char)

    sp = sub.add_parser("growth", help="Capacity trace over n appends")
    sp.add_argument("--n", type=int, default=64)
    sp.add_argument("--outputs_dir", default="outputs", help="Path to output folder")
    sp.add_argument("--no-plot", action="store_true", help="Skip the PDF plot")
    sp.set_defaults(func=cmd_growth)

    args = p.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    args.func(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

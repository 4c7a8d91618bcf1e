"""
cli.py — command-line front end for playfair_engine.

    playfair encrypt "Hello world" --key PLAYFAIR --steps
    playfair decrypt KGGXRE --png square.png --highlight 0

The key comes from --key, else $PLAYFAIR_KEY, else "PLAYFAIR".
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .pipeline import DEFAULT_KEYWORD, NO_STEP, run
from .stages.stage3_substitute import Direction

logger = logging.getLogger(__name__)

KEY_ENV = "PLAYFAIR_KEY"


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="playfair",
        description="Playfair digraph cipher — encrypt or decrypt with a 5×5 key square",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument("direction", choices=["encrypt", "decrypt"],
                   help="Cipher mode")
    p.add_argument("text", help="Text to process; non-letters are dropped")
    p.add_argument("--key", default=None,
                   help=f"Keyword (falls back to ${KEY_ENV}, then {DEFAULT_KEYWORD})")
    p.add_argument("--steps", action="store_true",
                   help="Print every pair next to its substitute")
    p.add_argument("--png", metavar="PATH", default=None,
                   help="Write the key square as a PNG image")
    p.add_argument("--highlight", type=int, default=NO_STEP,
                   help="Step index whose cells are highlighted in the PNG")
    p.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING"],
                   default="WARNING", help="Minimum log level for stderr output")
    return p


def _resolve_key(arg: Optional[str]) -> str:
    if arg is not None:
        return arg
    return os.environ.get(KEY_ENV) or DEFAULT_KEYWORD


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=" %(message)s")

    try:
        result = run(_resolve_key(args.key), args.text, Direction.parse(args.direction))

        print(result.square)
        print()
        if args.steps:
            for step in result.steps:
                print(f"  {step.index:>3}  {step}")
            print()
        print(result.text)

        if args.png:
            from .render import KeySquareRenderer
            KeySquareRenderer().save(result.square, args.png,
                                     highlight=result.highlight(args.highlight))
            logger.info(f"Key square written to {args.png}")
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Command line entry point for the bundled example programs.

Run:
    python -m simplestate onoff
    python -m simplestate bug --log-level DEBUG
"""

import argparse
import logging
import sys
from typing import List, Optional

from simplestate.examples import run_bug, run_onoff

EXAMPLES = {
    "onoff": "Toggle a switch by entering a single space",
    "bug": "Assign, reassign and close a bug",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simplestate",
        description="Run one of the simplestate example state machines.",
    )

    parser.add_argument(
        "example",
        choices=sorted(EXAMPLES),
        help="Example to run: "
        + "; ".join(f"{name}: {desc}" for name, desc in sorted(EXAMPLES.items())),
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for the simplestate loggers (DEBUG shows transitions).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.example == "onoff":
        run_onoff()
    else:
        run_bug()
    return 0

"""Command line entry point: bftape PROGRAM_FILE"""

import argparse
import logging
from typing import List, Optional

from .config import load_config
from .errors import BrainfuckError
from .runner import run_file

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="bftape", description="Run a Brainfuck program")
    ap.add_argument("program", help="Path to the Brainfuck source file")
    ap.add_argument("--step-limit", type=int, default=None, help="Abort after this many steps (default: BF_STEP_LIMIT, or unlimited)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug information to stderr")
    args = ap.parse_args(argv)

    try:
        config = load_config()
    except BrainfuckError as e:
        logging.basicConfig(format="%(levelname)s: %(message)s")
        logger.error("%s", e)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(levelname)s: %(message)s",
    )

    step_limit = args.step_limit if args.step_limit is not None else config.step_limit
    if step_limit is not None and step_limit <= 0:
        step_limit = None

    try:
        run_file(args.program, step_limit=step_limit)
    except BrainfuckError as e:
        logger.error("%s", e)
        return 1
    return 0


from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .api import RunOptions, execute, parse_string
from .errors import BFError

logger = logging.getLogger(__name__)

USAGE = (
    "Usage: bftree <source-file>    Run brainfuck program.\n"
    "       bftree -h|--help        Show this help"
)


def setup_logging() -> None:
    # Program output owns stdout; diagnostics go to stderr.
    level_name = os.getenv('BFTREE_LOG_LEVEL', 'WARNING').upper()
    level = getattr(logging, level_name, logging.WARNING)
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logging.basicConfig(level=level, handlers=[console], force=True)


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1 or args[0] in ('-h', '--help'):
        print(USAGE)
        return 0

    setup_logging()
    try:
        options = RunOptions.from_env()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    source_file = args[0]
    try:
        source = Path(source_file).read_text(encoding=options.encoding)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error occured while reading a file: {source_file}")
        print(e)
        return 1

    try:
        program = parse_string(source)
        logger.info("running %s", source_file)
        execute(program, options=options, stdin=sys.stdin.buffer, stdout=sys.stdout.buffer)
    except BFError as e:
        print(e, file=sys.stderr)
        return 1
    finally:
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

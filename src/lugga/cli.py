from __future__ import annotations
import argparse
from typing import List, Optional

from lugga.core.errors import UnknownLevelError
from lugga.core.levels import LogLevel
from lugga.core.logging import Logger

COLOR_MODES = {"auto": None, "always": True, "never": False}

def _level(value: str) -> LogLevel:
    try:
        return LogLevel.parse(value)
    except UnknownLevelError as e:
        raise argparse.ArgumentTypeError(str(e)) from None

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lugga", description="Print one timestamped, leveled log line")
    parser.add_argument("message", nargs="*", help="Message words, joined with spaces")
    parser.add_argument("-c", "--context", default="", help="Context label shown as [context]")
    parser.add_argument("-l", "--level", type=_level, default=LogLevel.INFO,
                        help="log, debug, info, warn or error (default: info)")
    parser.add_argument("--color", choices=sorted(COLOR_MODES), default="auto", help="Color policy")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = Logger(args.context, color=COLOR_MODES[args.color])
    getattr(logger, args.level.value)(*args.message)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())

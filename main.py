#!/usr/bin/env python3
"""
lugga - console entry point

Thin wrapper around the package CLI so the logger can be tried without
installing it:

    python main.py -c Auth -l warn token expires soon
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from lugga.cli import main

if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
"""
Entry point for the Calculator application.

Run the window:

    python main.py

Or feed keys without a window and print the final display:

    python main.py --keys "2+3*4="
"""
import argparse
import logging
import sys
from pathlib import Path

# Optional: ensure current repo root is on sys.path so relative imports work
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.controller import DisplayController
from backend.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pocket calculator")
    parser.add_argument("--keys", help="press these keys in order and print the display instead of opening a window")
    parser.add_argument("--debug", action="store_true", help="log every key press")
    parser.add_argument("--log-file", help="also write the log to this file")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.debug else logging.WARNING, log_file=args.log_file)

    if args.keys is not None:
        controller = DisplayController()
        try:
            print(controller.press_keys(args.keys))
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        return 0

    # Imported here so the headless mode works without a display
    from frontend.gui import CalculatorGUI

    app = CalculatorGUI()
    app.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())

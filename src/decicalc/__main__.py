"""Command-line driver: feed key tokens to a calculator controller.

Example::

    $ python -m decicalc 1 2 + 3 =
    15
    $ python -m decicalc --history 1.5 "*" 4 = sqrt
    2.449489742783178
    √(6) = 2.449489742783178
    1.5 × 4 = 6
"""

from __future__ import annotations

import argparse
import sys

from decicalc.config import CalculatorConfig, configure_logging
from decicalc.controller import CalculatorController
from decicalc.exceptions import CalculatorError, InvalidEventError
from decicalc.fallback import AngleMode


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="decicalc", description=__doc__.splitlines()[0])
    parser.add_argument("tokens", nargs="*", help="keys to press, e.g. 1 2 + 3 =")
    parser.add_argument("--radians", action="store_true", help="trig arguments are in radians")
    parser.add_argument("--history", action="store_true", help="print history after the display")
    parser.add_argument("--log-level", default=None, help="logging level (default: DECICALC_LOG_LEVEL)")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = CalculatorConfig.from_env()
    except CalculatorError as e:
        parser.error(str(e))

    controller = CalculatorController(config)
    if args.radians:
        controller.angle_mode = AngleMode.RADIANS

    for token in args.tokens:
        try:
            controller.handle_event(token)
        except InvalidEventError as e:
            print(f"decicalc: {e}", file=sys.stderr)
            return 2

    print(controller.current_display())
    if args.history:
        for entry in controller.history():
            print(entry)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())

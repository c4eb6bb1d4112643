from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from leavecalc.config import load_settings
from leavecalc.engine import CalculationMode, calculate

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="leavecalc",
        description="Leave calculator: solve for duration, end date or start date, skipping holidays.",
    )
    parser.add_argument("mode", choices=[m.value for m in CalculationMode], help="Quantity to compute")
    parser.add_argument("--start", help="Start date, YYYY-MM-DD")
    parser.add_argument("--end", help="End date, YYYY-MM-DD")
    parser.add_argument("--duration", help="Leave duration in days")
    parser.add_argument("--holidays", default="", help="Holiday dates separated by commas, semicolons or spaces")
    parser.add_argument("--holidays-file", type=Path, help="File with holiday dates, same separators")
    parser.add_argument("--env-file", help="Read settings from this .env file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    settings = load_settings(dotenv_path=args.env_file)
    _setup_logging("DEBUG" if args.verbose else settings.log_level)

    holidays_text = args.holidays
    if args.holidays_file is not None:
        logger.debug("Reading holidays from %s", args.holidays_file)
        try:
            file_text = args.holidays_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"error: cannot read holidays file {args.holidays_file}: {e}", file=sys.stderr)
            return 1
        holidays_text = f"{holidays_text}\n{file_text}"

    result = calculate(
        args.mode,
        start_text=args.start,
        end_text=args.end,
        duration_text=args.duration,
        holidays_text=holidays_text,
        settings=settings,
    )

    if not result.ok:
        print(f"error: {result.failure.value}: {result.reason}", file=sys.stderr)
        return 1

    print(result.value_text)
    for message in result.warnings:
        print(f"warning: {message}")
    return 0

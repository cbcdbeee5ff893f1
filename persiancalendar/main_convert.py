# persiancalendar/main_convert.py
# License: GNU GPL v3
#コマンドラインからの変換
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from persiancalendar.config import load_config
from persiancalendar.converter import gregorian_to_persian, persian_to_gregorian, today
from persiancalendar.errors import CalendarError
from persiancalendar.formatter import PersianDateFormatter
from persiancalendar.logging_setup import setup_logging
from persiancalendar.models.registry import MODEL_NAMES
from persiancalendar.names import Language

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="persiancalendar", description="Gregorian <-> Solar Hijri date conversion")
    p.add_argument("--log-level", default=None, help="logging level (default: PERSIANCALENDAR_LOG_LEVEL or WARNING)")
    p.add_argument("--log-file", default=None, help="also write log records to this file")
    sub = p.add_subparsers(dest="command", required=True)

    def _output_opts(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("--pattern", default="yyyy/mm/dd", help="output pattern (yyyy, mm, m, M, dd, d, ' ', '/', '-')")
        sp.add_argument("--persian", action="store_true", help="Persian digits and month names")

    tp = sub.add_parser("to-persian", help="Gregorian date -> Persian date")
    tp.add_argument("year", type=int)
    tp.add_argument("month", type=int)
    tp.add_argument("day", type=int)
    tp.add_argument("--model", choices=MODEL_NAMES, default=None)
    _output_opts(tp)

    tg = sub.add_parser("to-gregorian", help="Persian date -> Gregorian date")
    tg.add_argument("year", type=int)
    tg.add_argument("month", type=int)
    tg.add_argument("day", type=int)
    tg.add_argument("--model", choices=MODEL_NAMES, default=None)

    td = sub.add_parser("today", help="today's Persian date")
    td.add_argument("--model", choices=MODEL_NAMES, default=None)
    _output_opts(td)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        cfg = load_config()
        setup_logging(level=args.log_level or cfg.log_level, log_file=args.log_file)

        if args.command == "to-gregorian":
            print(persian_to_gregorian(args.year, args.month, args.day, calendar=args.model))
            return 0

        if args.command == "to-persian":
            date = gregorian_to_persian(args.year, args.month, args.day, calendar=args.model)
        else:
            date = today(calendar=args.model)

        language = Language.PERSIAN if args.persian else Language.ENGLISH
        print(date.format(PersianDateFormatter(args.pattern, language)))
        return 0
    except CalendarError as e:
        logger.debug("conversion failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())

"""
Бронирование стола из командной строки.

    python -m desk_booker --first-name Alan --last-name Shearer
        --email AlanShearer@gmail.com --date 2020-01-28
"""

import argparse
import json
import logging
import sys
from datetime import date
from typing import List, Optional

from desk_booker.bootstrap import bootstrap_app
from desk_booker.config import get_settings
from desk_booker.domain.booking import DeskBookingRequest


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="desk_booker", description="Бронирование рабочего стола на дату"
    )
    parser.add_argument("--first-name", required=True)
    parser.add_argument("--last-name", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument(
        "--date",
        required=True,
        type=date.fromisoformat,
        help="Дата бронирования в формате YYYY-MM-DD",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    processor = bootstrap_app(settings)["processor"]
    result = processor.book_desk(
        DeskBookingRequest(
            first_name=args.first_name,
            last_name=args.last_name,
            email=args.email,
            date=args.date,
        )
    )

    print(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2))
    return 0 if result.is_success else 1


if __name__ == "__main__":
    sys.exit(main())

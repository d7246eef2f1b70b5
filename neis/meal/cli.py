"""CLI entry point for the meal lookup client."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date

from dotenv import load_dotenv

from .client import MealClient
from .config import load_config
from .display import DisplayContext, build_view, render_error, render_json, render_text
from .errors import InvalidDateError
from .models import MealQuery


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="neis-meal",
        description="학교 급식 정보 조회 — NEIS 급식식단정보를 가져와 표시합니다",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="설정 파일 경로 (TOML)",
    )
    parser.add_argument(
        "--date",
        "-d",
        type=str,
        default=None,
        help="조회할 날짜 (YYYY-MM-DD, 기본값: 오늘)",
    )
    parser.add_argument("--office", type=str, default=None, help="시도교육청코드")
    parser.add_argument("--school", type=str, default=None, help="행정표준코드")
    parser.add_argument("--json", action="store_true", help="JSON 형식으로 출력")
    parser.add_argument(
        "--keep-allergens", action="store_true",
        help="메뉴의 알레르기 정보를 그대로 표시",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="상세 로그 출력",
    )

    args = parser.parse_args(argv)

    load_dotenv()
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    selected_date = date.today().isoformat() if args.date is None else args.date
    if not selected_date:
        print("날짜를 선택해주세요.", file=sys.stderr)
        sys.exit(1)

    ctx = DisplayContext(
        strip_allergens=config.display.strip_allergens and not args.keep_allergens,
    )

    try:
        query = MealQuery.for_day(
            office_code=args.office or config.school.office_code,
            school_code=args.school or config.school.school_code,
            iso_date=selected_date,
        )
    except InvalidDateError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    with MealClient(
        base_url=config.api.base_url, timeout=config.api.timeout
    ) as client:
        result = client.lookup(query)

    if not result.ok:
        print(render_error(result.error, ctx), file=sys.stderr)
        sys.exit(1)

    view = build_view(result.data, selected_date, ctx)
    if args.json:
        print(json.dumps(render_json(view), ensure_ascii=False, indent=2))
    else:
        print(render_text(view))


if __name__ == "__main__":
    main()

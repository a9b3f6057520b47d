"""主入口"""

import argparse
import logging
import sys
from typing import Optional

from config.settings import Config
from core.exceptions import InvalidArgumentError, RandomWordError
from core.models import Language, Option
from services.request_builder import (
    new_request,
    with_language,
    with_length,
    with_number,
)
from services.word_service import fetch
from utils.logging_config import setup_logging


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """解析命令行参数"""
    parser = argparse.ArgumentParser(description="Fetch random words")
    parser.add_argument(
        "--number",
        type=int,
        help="Number of words to fetch. If omitted, the service default is used",
    )
    parser.add_argument(
        "--length",
        type=int,
        help="Exact length of the words to fetch",
    )
    parser.add_argument(
        "--lang",
        default="en",
        choices=["en"] + [lang.code for lang in Language if not lang.is_default],
        help="Language of the words (default: en)",
    )
    parser.add_argument(
        "--log-level",
        help="Override the configured log level",
    )
    return parser.parse_args(argv)


def build_options(args: argparse.Namespace) -> list[Option]:
    """根据命令行参数生成配置项"""
    options: list[Option] = []
    if args.number is not None:
        options.append(with_number(args.number))
    if args.length is not None:
        options.append(with_length(args.length))
    if args.lang != "en":
        options.append(with_language(args.lang))
    return options


def main(argv: Optional[list[str]] = None) -> int:
    """主入口函数"""
    args = parse_args(argv)
    config = Config()
    setup_logging(level=args.log_level or config.app.log_level)

    try:
        request = new_request(*build_options(args))
    except InvalidArgumentError as e:
        logging.error(f"Invalid argument {e.field}: {e}")
        return 1

    try:
        words = fetch(request)
    except RandomWordError as e:
        logging.error(f"Fetch failed: {e}")
        return 1

    for word in words:
        print(word)
    return 0


if __name__ == "__main__":
    sys.exit(main())

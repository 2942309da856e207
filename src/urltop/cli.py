from __future__ import annotations

import argparse
import re
from pathlib import Path
from typing import Sequence

from urltop.config_file import ConfigFileError, load_yaml_config
from urltop.counter import CounterConfigError, DomainPathCounter
from urltop.files import read_log_text, write_text_atomic
from urltop.logging import logger
from urltop.settings import Settings


_POSITIVE_INT = re.compile(r"\+?[0-9]+")


def _positive_int(raw: str) -> int:
    if not _POSITIVE_INT.fullmatch(raw) or int(raw) <= 0:
        raise argparse.ArgumentTypeError(f"incorrect option value: {raw}")
    return int(raw)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="urltop",
        description="Count domains and paths of the URLs in a log file and write the top entries.",
    )
    parser.add_argument(
        "-n",
        "--top",
        type=_positive_int,
        default=None,
        metavar="N",
        help="How many domains and paths to report (default: URLTOP_TOP_N or 1).",
    )
    parser.add_argument(
        "--pattern",
        default=None,
        help="Regex with scheme, domain and path groups used instead of the built-in URL pattern.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with top_n, url_pattern and encoding.",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Encoding of the input and output files (default: utf-8).",
    )
    parser.add_argument("input_file", type=Path)
    parser.add_argument("output_file", type=Path)
    return parser


def resolve_settings(args: argparse.Namespace, base: Settings | None = None) -> Settings:
    """Env/.env first, then the YAML config file, then command line flags."""
    settings = base or Settings.load()
    if args.config is not None:
        settings = settings.with_overrides(**load_yaml_config(args.config))
    return settings.with_overrides(
        top_n=args.top,
        url_pattern=args.pattern,
        encoding=args.encoding,
    )


def run(args: argparse.Namespace, settings: Settings) -> int:
    try:
        counter = DomainPathCounter(pattern=settings.url_pattern, top_n=settings.top_n)
    except CounterConfigError as e:
        logger.error("[cli] {}", e)
        return 1

    try:
        text = read_log_text(args.input_file, settings.encoding)
    except (OSError, LookupError) as e:
        logger.error("[cli] Error while opening file {}: {}", args.input_file, e)
        return 1

    counter.prepare(text, counter.pattern, settings.top_n)
    report = counter.compute()
    logger.info(
        "[cli] {}: {} urls, {} domains, {} paths",
        args.input_file,
        report.total_urls,
        report.distinct_domains,
        report.distinct_paths,
    )

    try:
        write_text_atomic(args.output_file, report.render(), settings.encoding)
    except (OSError, LookupError, UnicodeError) as e:
        logger.error("[cli] Couldn't write to file {}: {}", args.output_file, e)
        return 1

    logger.info("[cli] Report written to {}", args.output_file)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = resolve_settings(args)
    except ConfigFileError as e:
        logger.error("[cli] {}", e)
        return 1

    return run(args, settings)


if __name__ == "__main__":
    raise SystemExit(main())

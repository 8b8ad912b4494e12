"""Command-line entry point for the campus icon crawler."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import time
from typing import Sequence

from .config import CrawlConfig
from .crawler import run_crawler
from .errors import NoSlugsFoundError

logger = logging.getLogger("campus_icons.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Scrape Dia Browser campus logos and render them to transparent PNGs "
            "(svgs/ and pngs/ in the current directory)."
        ),
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    config = CrawlConfig()
    overall_start = time.perf_counter()
    try:
        summary = asyncio.run(run_crawler(config))
    except NoSlugsFoundError as exc:
        logger.error("Nothing to do: %s", exc)
        sys.exit(1)
    total_elapsed = time.perf_counter() - overall_start

    logger.info(
        "Finished in %.2fs (%d campuses, %d SVGs saved, %d PNGs rendered, %d skipped)",
        total_elapsed,
        len(summary.slugs),
        summary.saved_count,
        summary.rendered_count,
        summary.skipped_count,
    )
    logger.info("Output written to %s and %s", config.svg_dir, config.png_dir)


if __name__ == "__main__":
    main()

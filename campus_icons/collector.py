"""Harvest campus slugs from the listing page."""

from __future__ import annotations

import logging
from typing import Iterable, Set

from playwright.async_api import Page

from .config import CrawlConfig
from .errors import NoSlugsFoundError
from .utils import slug_from_href

logger = logging.getLogger("campus_icons.collector")

_HREFS_SCRIPT = "anchors => anchors.map(a => a.getAttribute('href') || '')"


def filter_slugs(hrefs: Iterable[str]) -> Set[str]:
    """Keep bare ``/slug`` links only and return their deduplicated slugs."""
    slugs: Set[str] = set()
    for href in hrefs:
        slug = slug_from_href(href)
        if slug:
            slugs.add(slug)
    return slugs


async def collect_slugs(page: Page, config: CrawlConfig) -> Set[str]:
    """Load the listing page and return every campus slug linked from it."""
    width, height = config.listing_viewport
    await page.set_viewport_size({"width": width, "height": height})

    logger.info("Loading campus list from %s", config.start_url)
    await page.goto(config.start_url, wait_until="networkidle")
    hrefs = await page.eval_on_selector_all('a[href^="/"]', _HREFS_SCRIPT)

    slugs = filter_slugs(hrefs)
    logger.info("Found %d campuses", len(slugs))
    if not slugs:
        raise NoSlugsFoundError(f"No campus links found on {config.start_url}")
    return slugs

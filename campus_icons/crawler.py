"""High-level orchestration: collect slugs, save SVGs, render PNGs."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from playwright.async_api import Page, async_playwright

from .collector import collect_slugs
from .config import CrawlConfig
from .extractor import extract_all
from .models import RunSummary
from .rasterizer import render_all
from .utils import ensure_dir

logger = logging.getLogger("campus_icons")


@asynccontextmanager
async def open_session(config: CrawlConfig) -> AsyncIterator[Page]:
    """Yield a single browser page shared by every stage, closing it on exit."""
    async with async_playwright() as playwright:
        browser = await playwright.chromium.launch(headless=config.headless)
        try:
            page = await browser.new_page()
            page.set_default_navigation_timeout(config.navigation_timeout * 1000)
            yield page
        finally:
            await browser.close()


async def run_stages(page: Page, config: CrawlConfig) -> RunSummary:
    """Run the three stages sequentially on an already-open page."""
    ensure_dir(config.svg_dir)
    ensure_dir(config.png_dir)

    slugs = await collect_slugs(page, config)
    summary = RunSummary(slugs=slugs)

    logger.info("Extracting logos for %d campuses", len(slugs))
    summary.extracted = await extract_all(page, slugs, config)
    logger.info("Saved %d SVGs to %s", summary.saved_count, config.svg_dir)

    summary.rendered = await render_all(page, config)
    logger.info("Saved %d PNGs to %s", summary.rendered_count, config.png_dir)
    return summary


async def run_crawler(config: CrawlConfig) -> RunSummary:
    async with open_session(config) as page:
        return await run_stages(page, config)

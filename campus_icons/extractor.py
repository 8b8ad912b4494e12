"""Locate and save the campus logo SVG from each detail page."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from .config import CrawlConfig
from .models import ExtractResult, GraphicCandidate
from .utils import ensure_dir

logger = logging.getLogger("campus_icons.extractor")

_CANDIDATES_SCRIPT = """
svgs => svgs.map(s => {
  const r = s.getBoundingClientRect();
  return { width: r.width, height: r.height, markup: s.outerHTML };
})
"""


def select_largest(
    candidates: Iterable[GraphicCandidate],
    min_width: float,
) -> Optional[GraphicCandidate]:
    """Pick the largest-area candidate at least ``min_width`` wide.

    Candidates are expected in document order; an equal area never replaces
    an earlier pick.
    """
    biggest: Optional[GraphicCandidate] = None
    best_area = 0.0
    for candidate in candidates:
        if candidate.width < min_width:
            continue
        if candidate.area > best_area:
            biggest = candidate
            best_area = candidate.area
    return biggest


async def extract_graphic(page: Page, slug: str, config: CrawlConfig) -> Optional[str]:
    """Return the outer markup of the logo SVG on the slug's page, if any."""
    url = config.detail_url(slug)
    logger.debug("Loading %s", url)
    await page.goto(url, wait_until="networkidle")
    await page.wait_for_selector(
        "svg", state="attached", timeout=config.graphic_wait_timeout * 1000
    )

    raw = await page.eval_on_selector_all("svg", _CANDIDATES_SCRIPT)
    candidates = [
        GraphicCandidate(
            width=float(item["width"]),
            height=float(item["height"]),
            markup=item["markup"],
        )
        for item in raw
    ]
    chosen = select_largest(candidates, config.min_graphic_width)
    return chosen.markup if chosen else None


def save_graphic(slug: str, markup: str, config: CrawlConfig) -> Path:
    destination = ensure_dir(config.svg_dir) / f"{slug}.svg"
    destination.write_text(markup, encoding="utf-8")
    return destination


async def extract_all(
    page: Page,
    slugs: Iterable[str],
    config: CrawlConfig,
) -> List[ExtractResult]:
    """Visit every slug in turn and save its logo; failures skip the slug."""
    width, height = config.detail_viewport
    await page.set_viewport_size({"width": width, "height": height})

    results: List[ExtractResult] = []
    for slug in sorted(slugs):
        logger.info("-> %s", slug)
        try:
            markup = await extract_graphic(page, slug, config)
        except PlaywrightError as exc:
            logger.warning("Failed for %s: %s", slug, exc)
            results.append(ExtractResult(slug, None, str(exc)))
            continue
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Unexpected error extracting %s", slug)
            results.append(ExtractResult(slug, None, str(exc)))
            continue

        if markup is None:
            logger.warning("No suitable SVG on %s", slug)
            results.append(ExtractResult(slug, None, "no suitable SVG"))
            continue

        try:
            destination = save_graphic(slug, markup, config)
        except OSError as exc:
            logger.warning("Failed to write SVG for %s: %s", slug, exc)
            results.append(ExtractResult(slug, None, str(exc)))
            continue
        logger.info("Saved %s", destination.name)
        results.append(ExtractResult(slug, destination))
    return results

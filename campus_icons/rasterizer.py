"""Render saved SVGs to centered, transparent PNGs in the browser."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import List

from PIL import Image, UnidentifiedImageError
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from .config import CrawlConfig
from .errors import GraphicError, InvalidRasterError
from .geometry import compute_placement
from .markup import ensure_view_box
from .models import BoxSize, Placement, RenderResult
from .utils import ensure_dir

logger = logging.getLogger("campus_icons.rasterizer")

STAGE_ID = "svg"

_LAYOUT_STABLE_SCRIPT = """
async () => {
  await document.fonts.ready;
  await new Promise(r => requestAnimationFrame(() => requestAnimationFrame(r)));
}
"""

_MEASURE_SCRIPT = """
id => {
  const r = document.getElementById(id).getBoundingClientRect();
  return { width: r.width, height: r.height };
}
"""

_APPLY_SCRIPT = """
({ id, x, y, s }) => {
  const el = document.getElementById(id);
  el.style.transformOrigin = 'top left';
  el.style.transform = `scale(${s})`;
  el.style.left = `${x}px`;
  el.style.top = `${y}px`;
}
"""


def build_stage_html(svg: str, canvas_size: int) -> str:
    """Wrap the graphic in a transparent page with a fixed square canvas."""
    return (
        '<html><body style="margin:0;background:transparent">'
        f'<div id="wrap" style="position:relative;width:{canvas_size}px;height:{canvas_size}px">'
        f'<div id="{STAGE_ID}" style="position:absolute">{svg}</div>'
        "</div></body></html>"
    )


def verify_raster(data: bytes, canvas_size: int) -> None:
    """Raise ``InvalidRasterError`` unless ``data`` is a square RGBA image."""
    try:
        with Image.open(io.BytesIO(data)) as image:
            size = image.size
            bands = image.getbands()
    except (UnidentifiedImageError, OSError) as exc:
        raise InvalidRasterError(f"screenshot is not a readable image: {exc}") from exc
    if size != (canvas_size, canvas_size):
        raise InvalidRasterError(
            f"screenshot is {size[0]}x{size[1]}, expected {canvas_size}x{canvas_size}"
        )
    if "A" not in bands:
        raise InvalidRasterError("screenshot has no alpha channel")


async def _wait_for_layout(page: Page, config: CrawlConfig) -> None:
    await page.evaluate(_LAYOUT_STABLE_SCRIPT)
    if config.settle_delay:
        await page.wait_for_timeout(int(config.settle_delay * 1000))


async def measure_stage(page: Page) -> BoxSize:
    rect = await page.evaluate(_MEASURE_SCRIPT, STAGE_ID)
    return BoxSize(width=float(rect["width"]), height=float(rect["height"]))


async def apply_placement(page: Page, placement: Placement) -> None:
    await page.evaluate(
        _APPLY_SCRIPT,
        {
            "id": STAGE_ID,
            "x": placement.offset_x,
            "y": placement.offset_y,
            "s": placement.scale,
        },
    )


async def rasterize(page: Page, markup: str, config: CrawlConfig) -> bytes:
    """Stage, measure, center and capture one graphic; return PNG bytes.

    The page viewport is expected to already match ``config.canvas_size``.
    """
    svg = ensure_view_box(markup, config.default_view_box)
    await page.set_content(build_stage_html(svg, config.canvas_size), wait_until="load")
    await _wait_for_layout(page, config)

    box = await measure_stage(page)
    placement = compute_placement(box, config.canvas_size, config.occupancy)
    logger.debug(
        "Measured %.1fx%.1f -> scale %.4f at (%.1f, %.1f)",
        box.width,
        box.height,
        placement.scale,
        placement.offset_x,
        placement.offset_y,
    )
    await apply_placement(page, placement)

    data = await page.screenshot(
        clip={"x": 0, "y": 0, "width": config.canvas_size, "height": config.canvas_size},
        omit_background=True,
        type="png",
    )
    verify_raster(data, config.canvas_size)
    return data


async def render_file(page: Page, svg_path: Path, config: CrawlConfig) -> Path:
    markup = svg_path.read_text(encoding="utf-8")
    data = await rasterize(page, markup, config)
    destination = ensure_dir(config.png_dir) / f"{svg_path.stem}.png"
    destination.write_bytes(data)
    return destination


async def render_all(page: Page, config: CrawlConfig) -> List[RenderResult]:
    """Rasterize every SVG in the raw directory; failures skip the file."""
    await page.set_viewport_size({"width": config.canvas_size, "height": config.canvas_size})

    svg_files = sorted(config.svg_dir.glob("*.svg")) if config.svg_dir.is_dir() else []
    logger.info("Rendering %d SVGs to PNGs", len(svg_files))

    results: List[RenderResult] = []
    for svg_path in svg_files:
        slug = svg_path.stem
        try:
            destination = await render_file(page, svg_path, config)
        except (GraphicError, PlaywrightError, OSError) as exc:
            logger.warning("Failed to render %s: %s", slug, exc)
            results.append(RenderResult(slug, None, str(exc)))
            continue
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Unexpected error rendering %s", slug)
            results.append(RenderResult(slug, None, str(exc)))
            continue
        logger.info("Rendered %s", destination.name)
        results.append(RenderResult(slug, destination))
    return results

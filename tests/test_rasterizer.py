"""Unit tests for staging, measuring and capturing graphics."""

from __future__ import annotations

import asyncio

import pytest

from campus_icons.config import CrawlConfig
from campus_icons.errors import DegenerateGraphicError, InvalidRasterError
from campus_icons.rasterizer import build_stage_html, rasterize, render_all, verify_raster
from fakes import FakePage, transparent_png


def test_stage_html_has_fixed_transparent_canvas() -> None:
    """The staged document is a V x V wrapper on a transparent page."""
    html = build_stage_html("<svg></svg>", 512)

    assert "background:transparent" in html
    assert "width:512px;height:512px" in html
    assert '<div id="svg" style="position:absolute"><svg></svg></div>' in html


def test_rasterize_applies_centered_placement(tmp_path) -> None:
    """Measured size drives scale and offsets sent to the page."""
    config = CrawlConfig(output_root=tmp_path)
    page = FakePage(boxes={"wide-logo": (200.0, 100.0)})

    data = asyncio.run(rasterize(page, '<svg id="wide-logo"></svg>', config))

    verify_raster(data, 512)
    placement = page.placements[0]
    assert placement["s"] == pytest.approx(2.176)
    assert placement["x"] == pytest.approx(38.4)
    assert placement["y"] == pytest.approx(147.2)
    shot = page.screenshots[0]
    assert shot["clip"] == {"x": 0, "y": 0, "width": 512, "height": 512}
    assert shot["omit_background"] is True
    assert 'viewBox="0 0 173 174"' in page.staged[0]


def test_rasterize_twice_is_identical(tmp_path) -> None:
    """The same graphic and configuration stage and place identically."""
    config = CrawlConfig(output_root=tmp_path)
    page = FakePage(boxes={"logo": (173.0, 174.0)})
    svg = '<svg id="logo" viewBox="0 0 173 174"></svg>'

    first = asyncio.run(rasterize(page, svg, config))
    second = asyncio.run(rasterize(page, svg, config))

    assert first == second
    assert page.staged[0] == page.staged[1]
    assert page.placements[0] == page.placements[1]


def test_rasterize_rejects_degenerate_box(tmp_path) -> None:
    """A zero-sized staged graphic is never captured."""
    config = CrawlConfig(output_root=tmp_path)
    page = FakePage()

    with pytest.raises(DegenerateGraphicError):
        asyncio.run(rasterize(page, "<svg></svg>", config))
    assert page.screenshots == []


def test_verify_raster_requires_canvas_size_and_alpha() -> None:
    """Captured bytes must be a V x V image with an alpha channel."""
    verify_raster(transparent_png(64, 64), 64)

    with pytest.raises(InvalidRasterError):
        verify_raster(transparent_png(64, 32), 64)
    with pytest.raises(InvalidRasterError):
        verify_raster(transparent_png(64, 64, mode="RGB"), 64)
    with pytest.raises(InvalidRasterError):
        verify_raster(b"not an image", 64)


def test_render_all_writes_pngs_and_skips_failures(tmp_path) -> None:
    """Valid SVGs become PNGs; empty ones are skipped without output."""
    config = CrawlConfig(output_root=tmp_path, canvas_size=256)
    svg_dir = tmp_path / "svgs"
    svg_dir.mkdir()
    (svg_dir / "good.svg").write_text('<svg id="good"></svg>', encoding="utf-8")
    (svg_dir / "empty.svg").write_text('<svg id="empty"></svg>', encoding="utf-8")
    (svg_dir / "broken.svg").write_text("<p>not svg</p>", encoding="utf-8")
    page = FakePage(boxes={'id="good"': (120.0, 60.0)})

    results = asyncio.run(render_all(page, config))

    assert {result.slug: result.ok for result in results} == {
        "broken": False,
        "empty": False,
        "good": True,
    }
    assert sorted(p.name for p in (tmp_path / "pngs").iterdir()) == ["good.png"]
    verify_raster((tmp_path / "pngs" / "good.png").read_bytes(), 256)
    assert page.viewports == [{"width": 256, "height": 256}]

"""Configuration objects and constants for the icon crawler."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple
from urllib.parse import urlparse

DEFAULT_START_URL = "https://www.diabrowser.com/campuses"
# Coordinate frame observed on the campus logos that ship without a viewBox.
DEFAULT_VIEW_BOX = "0 0 173 174"


@dataclass
class CrawlConfig:
    """Top-level settings that control crawling and rasterization."""

    output_root: Path = field(default_factory=Path.cwd)
    start_url: str = DEFAULT_START_URL
    listing_viewport: Tuple[int, int] = (1200, 900)
    detail_viewport: Tuple[int, int] = (1024, 800)
    canvas_size: int = 512
    occupancy: float = 0.85
    min_graphic_width: float = 100.0
    graphic_wait_timeout: float = 6.0
    navigation_timeout: float = 30.0
    settle_delay: float = 0.0
    default_view_box: str = DEFAULT_VIEW_BOX
    headless: bool = True

    def __post_init__(self) -> None:
        if not 0 < self.occupancy <= 1:
            raise ValueError(f"occupancy must be in (0, 1], got {self.occupancy}")
        if self.canvas_size <= 0:
            raise ValueError(f"canvas_size must be positive, got {self.canvas_size}")

    @property
    def site_root(self) -> str:
        parsed = urlparse(self.start_url)
        return f"{parsed.scheme}://{parsed.netloc}"

    @property
    def svg_dir(self) -> Path:
        return self.output_root / "svgs"

    @property
    def png_dir(self) -> Path:
        return self.output_root / "pngs"

    def detail_url(self, slug: str) -> str:
        return f"{self.site_root}/{slug}"

"""Data models used throughout the icon pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Set


@dataclass
class GraphicCandidate:
    """An inline SVG observed on a detail page, with its rendered size."""

    width: float
    height: float
    markup: str

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass
class BoxSize:
    """Rendered bounding box of the staged graphic."""

    width: float
    height: float


@dataclass
class Placement:
    """Uniform scale and top-left offsets that center a box on the canvas."""

    scale: float
    offset_x: float
    offset_y: float
    scaled_width: float
    scaled_height: float


@dataclass
class ExtractResult:
    """Outcome of saving the logo SVG for one slug."""

    slug: str
    output_path: Optional[Path]
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.output_path is not None


@dataclass
class RenderResult:
    """Outcome of rasterizing one saved SVG."""

    slug: str
    output_path: Optional[Path]
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.output_path is not None


@dataclass
class RunSummary:
    """Counts and per-item results for a full crawl."""

    slugs: Set[str]
    extracted: List[ExtractResult] = field(default_factory=list)
    rendered: List[RenderResult] = field(default_factory=list)

    @property
    def saved_count(self) -> int:
        return sum(1 for result in self.extracted if result.ok)

    @property
    def rendered_count(self) -> int:
        return sum(1 for result in self.rendered if result.ok)

    @property
    def skipped_count(self) -> int:
        failed_extracts = sum(1 for result in self.extracted if not result.ok)
        failed_renders = sum(1 for result in self.rendered if not result.ok)
        return failed_extracts + failed_renders

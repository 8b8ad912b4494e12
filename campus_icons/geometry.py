"""Scale and centering math for placing a graphic on a square canvas."""

from __future__ import annotations

from .errors import DegenerateGraphicError
from .models import BoxSize, Placement


def compute_placement(box: BoxSize, canvas_size: int, occupancy: float) -> Placement:
    """Fit ``box`` uniformly so its longer side fills ``occupancy`` of the canvas.

    The offsets position the unscaled element's top-left corner so that, once a
    ``scale()`` transform with a top-left origin is applied, the scaled box is
    centered on the canvas. The shorter side is scaled by the same factor and
    under-fills its axis.
    """
    longest = max(box.width, box.height)
    if box.width <= 0 or box.height <= 0:
        raise DegenerateGraphicError(
            f"rendered box is {box.width}x{box.height}; nothing to scale"
        )
    scale = (canvas_size * occupancy) / longest
    scaled_width = box.width * scale
    scaled_height = box.height * scale
    return Placement(
        scale=scale,
        offset_x=(canvas_size - scaled_width) / 2,
        offset_y=(canvas_size - scaled_height) / 2,
        scaled_width=scaled_width,
        scaled_height=scaled_height,
    )

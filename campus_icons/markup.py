"""SVG markup inspection and viewBox normalization."""

from __future__ import annotations

import logging
from typing import Optional

from bs4 import BeautifulSoup, Tag

from .errors import InvalidGraphicError

logger = logging.getLogger("campus_icons.markup")

# html.parser folds attribute names to lowercase.
_VIEW_BOX_ATTR = "viewbox"


def _root_svg(markup: str) -> Tag:
    soup = BeautifulSoup(markup, "html.parser")
    root = soup.find("svg")
    if not isinstance(root, Tag):
        raise InvalidGraphicError("markup does not contain an <svg> element")
    return root


def read_view_box(markup: str) -> Optional[str]:
    """Return the root element's viewBox value, or ``None`` if it has none."""
    return _root_svg(markup).attrs.get(_VIEW_BOX_ATTR)


def _start_tag_offset(markup: str, root: Tag) -> int:
    """Character offset of the root's ``<svg`` inside ``markup``."""
    if root.sourceline is None or root.sourcepos is None:
        raise InvalidGraphicError("unable to locate <svg> start tag")
    lines = markup.split("\n")
    offset = sum(len(line) + 1 for line in lines[: root.sourceline - 1])
    offset += root.sourcepos
    if markup[offset : offset + 4].lower() != "<svg":
        raise InvalidGraphicError("unable to locate <svg> start tag")
    return offset


def ensure_view_box(markup: str, default_view_box: str) -> str:
    """Inject ``viewBox`` into the root ``<svg>`` if it does not declare one.

    Markup that already has the attribute is returned unchanged. Otherwise a
    single ``viewBox="{default_view_box}"`` is inserted directly after the
    tag name and every other character of the input is preserved.
    """
    root = _root_svg(markup)
    if _VIEW_BOX_ATTR in root.attrs:
        return markup

    offset = _start_tag_offset(markup, root) + len("<svg")
    logger.debug("No viewBox on graphic; injecting %s", default_view_box)
    return f'{markup[:offset]} viewBox="{default_view_box}"{markup[offset:]}'

"""SVG card layout for a list of classified commits.

The document is assembled as an lxml element tree and serialized in one place,
so every piece of commit text goes through the XML serializer's escaping.
"""

import re
from typing import Sequence

from lxml import etree

from gitviz.commits.models import CommitRecord

from .palette import Palette, palette_for

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

CANVAS_WIDTH = 800
ROW_PITCH = 120
ROW_WIDTH = 760
ROW_HEIGHT = 100
ROW_CORNER_RADIUS = 5
ROW_FILL_OPACITY = "0.2"
MARGIN = 20
TEXT_INSET = 10
DATE_COLUMN_X = 300
HASH_COLUMN_X = 500

STYLESHEET = """
        .commit-title { font: bold 14px system-ui; }
        .commit-body { font: 12px system-ui; }
        .commit-meta { font: italic 10px system-ui; }
        .commit-info { font: 10px monospace; }
        .commit-emoji { font: 14px system-ui; }
    """

# Characters outside the XML 1.0 Char production; lxml refuses them.
_NON_XML_CHARS = re.compile("[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def canvas_height(commit_count: int) -> int:
    return commit_count * ROW_PITCH + 2 * MARGIN


def render_svg(commits: Sequence[CommitRecord], dark_mode: bool) -> str:
    palette = palette_for(dark_mode)
    height = canvas_height(len(commits))

    root = etree.Element(
        _tag("svg"),
        nsmap={None: SVG_NAMESPACE},
        attrib={"viewBox": f"0 0 {CANVAS_WIDTH} {height}", "width": str(CANVAS_WIDTH)},
    )
    _append(root, "rect", {"width": "100%", "height": "100%", "fill": palette.background})
    _append(root, "style", text=STYLESHEET)

    for index, commit in enumerate(commits):
        _append_row(root, commit, palette, y=MARGIN + ROW_PITCH * index)

    return etree.tostring(root, xml_declaration=True, encoding="UTF-8", pretty_print=True).decode("utf-8")


def meta_line(commit: CommitRecord) -> str:
    meta = f"{commit.emoji} {commit.type}"
    if commit.scope:
        meta += f"({commit.scope})"
    return meta


def _append_row(root: etree._Element, commit: CommitRecord, palette: Palette, y: int) -> None:
    group = _append(root, "g", {"transform": f"translate({MARGIN},{y})"})
    _append(
        group,
        "rect",
        {
            "width": str(ROW_WIDTH),
            "height": str(ROW_HEIGHT),
            "rx": str(ROW_CORNER_RADIUS),
            "fill": palette.color_for(commit.type),
            "opacity": ROW_FILL_OPACITY,
            "stroke": palette.border,
            "stroke-width": "1",
        },
    )
    _append_text(group, 20, "commit-meta", palette, meta_line(commit))
    _append_text(group, 40, "commit-title", palette, commit.title)
    # Row height stays fixed even when the body is empty or long.
    _append_text(group, 60, "commit-body", palette, commit.body)

    info = _append_text(group, 85, "commit-info", palette)
    _append(info, "tspan", text=commit.author)
    _append(info, "tspan", {"x": str(DATE_COLUMN_X)}, text=commit.formatted_date)
    _append(info, "tspan", {"x": str(HASH_COLUMN_X)}, text=commit.short_hash)


def _append_text(
    parent: etree._Element,
    y: int,
    css_class: str,
    palette: Palette,
    text: str | None = None,
) -> etree._Element:
    return _append(
        parent,
        "text",
        {"x": str(TEXT_INSET), "y": str(y), "fill": palette.text, "class": css_class},
        text=text,
    )


def _append(
    parent: etree._Element,
    name: str,
    attrib: dict[str, str] | None = None,
    text: str | None = None,
) -> etree._Element:
    element = etree.SubElement(parent, _tag(name), attrib=attrib or {})
    if text:
        element.text = _NON_XML_CHARS.sub("", text)
    return element


def _tag(name: str) -> str:
    return f"{{{SVG_NAMESPACE}}}{name}"

"""
SVG document builder on top of ``svgwrite``.

Geometry primitives are svgwrite elements; pre-built overlay fragments may be
added as trusted markup strings. The element tree produced by
``Drawing.get_xml()`` is serialized here rather than with ``tostring()``:
text and attribute values are escaped for all five reserved characters
(``'`` and ``"`` included, which ElementTree leaves alone in text), and
numbers are formatted with ``format_number`` before they reach svgwrite.
"""

from __future__ import annotations

import xml.etree.ElementTree as etree
from typing import Any, Dict, List, Optional, Sequence, Union

from svgwrite import base, drawing, shapes
from svgwrite import text as svgtext
from svgwrite.image import Image
from svgwrite.pattern import Pattern

from .render_utils import escape_xml, format_attribute
from ..exceptions import RenderingError

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

# Containers whose children are written one per line
BLOCK_TAGS = ("svg", "defs")

# ElementTree tag marking trusted markup that is written verbatim
RAW_MARKUP_TAG = "entrycard:raw"


class StyleSheet(base.BaseElement):
    """``<style>`` element holding plain CSS text."""

    elementname = "style"

    def __init__(self, css: str, **extra: Any):
        super().__init__(**extra)
        self.css = css

    def get_xml(self) -> etree.Element:
        xml = super().get_xml()
        xml.text = self.css
        return xml


class RawMarkup(base.BaseElement):
    """Trusted, pre-built markup added to the document as-is."""

    elementname = RAW_MARKUP_TAG

    def __init__(self, markup: str, **extra: Any):
        super().__init__(**extra)
        self.markup = markup

    def get_xml(self) -> etree.Element:
        xml = etree.Element(RAW_MARKUP_TAG)
        xml.text = self.markup
        return xml


Fragment = Union[base.BaseElement, str]


def _as_element(fragment: Any) -> base.BaseElement:
    if isinstance(fragment, base.BaseElement):
        return fragment
    if isinstance(fragment, str):
        return RawMarkup(fragment, debug=False)
    raise RenderingError(
        "Unsupported SVG fragment",
        details=f"expected an svgwrite element or str, got {type(fragment).__name__}",
    )


def _as_fragments(fragments: Union[Fragment, Sequence[Fragment], None]) -> List[Fragment]:
    if fragments is None:
        return []
    if isinstance(fragments, (str, base.BaseElement)):
        return [fragments]
    return list(fragments)


###############################################################################
# Serialization
###############################################################################


def serialize(xml: etree.Element, depth: int = 0) -> str:
    """
    Write an svgwrite element tree as markup.

    Children of ``svg`` and ``defs`` go on their own lines, indented two
    spaces per level; everything else is written inline.
    """
    if xml.tag == RAW_MARKUP_TAG:
        return xml.text or ""

    attrs = "".join(f' {name}="{escape_xml(value)}"' for name, value in xml.attrib.items())
    children = list(xml)
    if not xml.text and not children:
        return f"<{xml.tag}{attrs} />"

    if xml.tag in BLOCK_TAGS:
        indent = "  " * (depth + 1)
        parts = [f"<{xml.tag}{attrs}>"]
        for child in children:
            markup = serialize(child, depth + 1)
            if markup:
                parts.append(indent + markup)
        parts.append("  " * depth + f"</{xml.tag}>")
        return "\n".join(parts)

    inner = escape_xml(xml.text) if xml.text else ""
    inner += "".join(serialize(child, depth + 1) for child in children)
    return f"<{xml.tag}{attrs}>{inner}</{xml.tag}>"


def fragment_to_string(fragment: Fragment) -> str:
    """Serialize a single fragment; strings are trusted, pre-built markup."""
    return serialize(_as_element(fragment).get_xml())


###############################################################################
# Primitive factories
###############################################################################


def _svg_names(attributes: Dict[str, Any]) -> Dict[str, Any]:
    """``stroke_width`` -> ``stroke-width``; ``xml_space`` -> ``xml:space``."""
    names = {}
    for key, value in attributes.items():
        if key.startswith("xml_"):
            name = "xml:" + key[4:]
        else:
            name = key.rstrip("_").replace("_", "-")
        names[name] = value
    return names


def _apply(element: base.BaseElement, attributes: Dict[str, Any]) -> base.BaseElement:
    for name, value in _svg_names(attributes).items():
        if value is not None:
            element[name] = format_attribute(value)
    return element


def _pair(a: float, b: float):
    return format_attribute(a), format_attribute(b)


def rect(x: float, y: float, width: float, height: float, **attributes: Any) -> shapes.Rect:
    return _apply(shapes.Rect(insert=_pair(x, y), size=_pair(width, height), debug=False), attributes)


def line(x1: float, y1: float, x2: float, y2: float, **attributes: Any) -> shapes.Line:
    return _apply(shapes.Line(start=_pair(x1, y1), end=_pair(x2, y2), debug=False), attributes)


def circle(cx: float, cy: float, r: float, **attributes: Any) -> shapes.Circle:
    return _apply(shapes.Circle(center=_pair(cx, cy), r=format_attribute(r), debug=False), attributes)


def image(href: str, x: float, y: float, width: float, height: float, **attributes: Any) -> Image:
    return _apply(Image(href, insert=_pair(x, y), size=_pair(width, height), debug=False), attributes)


def pattern(pattern_id: str, width: float, height: float, **attributes: Any) -> Pattern:
    element = Pattern(size=_pair(width, height), debug=False)
    element["id"] = pattern_id
    return _apply(element, attributes)


def text(content: Optional[str] = None, **attributes: Any) -> svgtext.Text:
    return _apply(svgtext.Text(content or "", debug=False), attributes)


def tspan(content: str, **attributes: Any) -> svgtext.TSpan:
    return _apply(svgtext.TSpan(content, debug=False), attributes)


###############################################################################
# Document
###############################################################################


class SvgDocument:
    """Wraps an svgwrite ``Drawing``: styles and defs, then layers in paint order."""

    def __init__(self, width: float, height: float, role: str = "img") -> None:
        self.width = width
        self.height = height
        size = _pair(width, height)
        self.drawing = drawing.Drawing(size=size, debug=False)
        self.drawing["viewBox"] = f"0 0 {size[0]} {size[1]}"
        self.drawing["role"] = role

    def add_style(self, css: str) -> None:
        self.drawing.defs.add(StyleSheet(css, debug=False))

    def add_defs(self, fragments: Union[Fragment, Sequence[Fragment]]) -> None:
        for fragment in _as_fragments(fragments):
            self.drawing.defs.add(_as_element(fragment))

    def add(self, fragment: Fragment) -> base.BaseElement:
        return self.drawing.add(_as_element(fragment))

    def extend(self, fragments: Union[Fragment, Sequence[Fragment]]) -> None:
        for fragment in _as_fragments(fragments):
            self.add(fragment)

    def to_string(self) -> str:
        return XML_DECLARATION + "\n" + serialize(self.drawing.get_xml())

"""
MathML tree access.

Parses MathML text with xml.etree and offers the few read-only queries the
layout engine needs: namespace-free tag names, element children in document
order, and direct text content.
"""

import logging
import re
from html.entities import html5
from typing import List
from xml.etree import ElementTree as ET

from ..utils.errors import MathMLParseError

logger = logging.getLogger(__name__)

MATHML_NS = "http://www.w3.org/1998/Math/MathML"

# Entities XML resolves itself
XML_ENTITIES = frozenset(["amp", "lt", "gt", "quot", "apos"])

_ENTITY_RE = re.compile(r"&([A-Za-z][A-Za-z0-9]*);")


def _resolve_entity(match: "re.Match") -> str:
    """Replace a named entity (&ExponentialE;, &dd;, ...) with numeric references."""
    name = match.group(1)
    if name in XML_ENTITIES:
        return match.group(0)
    chars = html5.get(name + ";")
    if chars is None:
        # Unknown names are left for the XML parser to report
        return match.group(0)
    return "".join(f"&#x{ord(ch):X};" for ch in chars)


def parse_mathml(mathml: str) -> ET.Element:
    """
    Parse MathML text into an element tree.

    A fragment without a <math> root is wrapped in one.

    Raises:
        MathMLParseError: If the text is not well-formed XML.
    """
    text = _ENTITY_RE.sub(_resolve_entity, mathml.strip())

    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        if text.startswith("<math") or not text.startswith("<"):
            raise MathMLParseError(str(e), technical_details=mathml[:200]) from e
        # Fragments with several top-level elements need a wrapper
        try:
            root = ET.fromstring(f'<math xmlns="{MATHML_NS}">{text}</math>')
        except ET.ParseError as e2:
            raise MathMLParseError(str(e2), technical_details=mathml[:200]) from e2

    logger.debug("Parsed MathML root <%s>", local_name(root))
    return root


def local_name(elem: ET.Element) -> str:
    """Tag name without its namespace, e.g. 'mfrac'."""
    tag = elem.tag
    if not isinstance(tag, str):
        # Comments and processing instructions
        return ""
    return tag.split("}")[-1] if "}" in tag else tag


def element_children(elem: ET.Element) -> List[ET.Element]:
    """Element children in document order, skipping comments."""
    return [child for child in elem if isinstance(child.tag, str)]


def text_content(elem: ET.Element) -> str:
    """
    Direct text of an element, trimmed.

    Text inside child elements is not included; text between children is.
    """
    parts = [elem.text or ""]
    for child in elem:
        parts.append(child.tail or "")
    return "".join(parts).strip()

"""Slide deck package reading and conversion."""

from .archive import Archive, open_archive
from .xmltree import Element, Text, Node, decode, collect, element_text, attribute_value
from .relationships import (
    resolve_relationships,
    read_relationships,
    rels_path_for,
    resolve_part_path,
)
from .slides import SlideContent, resolve_slide_order, extract_content
from .media import materialize
from .builder import build_document, convert_package

__all__ = [
    # Archive
    "Archive",
    "open_archive",
    # XML
    "Element",
    "Text",
    "Node",
    "decode",
    "collect",
    "element_text",
    "attribute_value",
    # Relationships
    "resolve_relationships",
    "read_relationships",
    "rels_path_for",
    "resolve_part_path",
    # Slides
    "SlideContent",
    "resolve_slide_order",
    "extract_content",
    # Media
    "materialize",
    # Builder
    "build_document",
    "convert_package",
]

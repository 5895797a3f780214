"""Generic attributed XML tree.

Namespaced names keep the prefix declared in the document
(``p:sldId``, ``r:embed``) so lookups read like the markup itself.
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Optional, Union

from ..errors import MalformedXml

# Tags that may occur more than once under one parent.
REPEATABLE_TAGS = frozenset({"p:sldId", "Relationship", "p:sp", "p:pic", "a:p", "a:r"})


@dataclass(frozen=True)
class Text:
    """Character data between elements."""

    value: str


@dataclass(frozen=True)
class Element:
    """Element with attributes and ordered children."""

    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: tuple["Node", ...] = ()

    @property
    def elements(self) -> list["Element"]:
        """Return the child elements, skipping text."""
        return [c for c in self.children if isinstance(c, Element)]

    @property
    def text(self) -> str:
        """Concatenated character data of the direct children."""
        return "".join(c.value for c in self.children if isinstance(c, Text))

    def find_all(self, name: str) -> list["Element"]:
        """Return every direct child element with the given name."""
        return [c for c in self.elements if c.name == name]

    def find(self, name: str) -> Optional["Element"]:
        """Return the single direct child element with the given name.

        Raises:
            ValueError: If the tag is repeatable; use find_all instead.
        """
        if name in REPEATABLE_TAGS:
            raise ValueError(f"{name} is repeatable, use find_all()")
        for child in self.elements:
            if child.name == name:
                return child
        return None

    def get(self, attribute: str, default: Optional[str] = None) -> Optional[str]:
        return self.attributes.get(attribute, default)


Node = Union[Element, Text]


def _qualify(name: str, prefixes: dict[str, str]) -> str:
    if not name.startswith("{"):
        return name
    uri, local = name[1:].split("}", 1)
    prefix = prefixes.get(uri, "")
    return f"{prefix}:{local}" if prefix else local


def _append_text(children: list, value: Optional[str]) -> None:
    if value and value.strip():
        children.append(Text(value))


def _convert(el: ET.Element, prefixes: dict[str, str]) -> Element:
    children: list[Node] = []
    _append_text(children, el.text)
    for child in el:
        children.append(_convert(child, prefixes))
        _append_text(children, child.tail)
    return Element(
        name=_qualify(el.tag, prefixes),
        attributes={_qualify(k, prefixes): v for k, v in el.attrib.items()},
        children=tuple(children),
    )


def decode(text: Union[str, bytes], source: Optional[str] = None) -> Element:
    """Parse XML into an Element tree.

    Whitespace-only character data is dropped. Bytes are decoded
    according to the XML declaration or byte order mark.

    Args:
        text: XML document.
        source: Name used in error messages.

    Returns:
        Root element.

    Raises:
        MalformedXml: If the document is not well-formed.
    """
    parser = ET.XMLPullParser(events=("start-ns", "start"))
    prefixes: dict[str, str] = {}
    root: Optional[ET.Element] = None

    # Errors raised while feeding are queued and surface from read_events().
    try:
        parser.feed(text)
        events = list(parser.read_events())
        parser.close()
        events.extend(parser.read_events())
    except (ET.ParseError, UnicodeDecodeError) as e:
        raise MalformedXml(str(e), source=source) from e

    for event, item in events:
        if event == "start-ns":
            prefix, uri = item
            prefixes.setdefault(uri, prefix)
        elif root is None:
            root = item

    if root is None:
        raise MalformedXml("document has no root element", source=source)
    return _convert(root, prefixes)


def collect(node: Node, visit: Callable[[Element], Iterable[str]]) -> list[str]:
    """Depth-first, document-order collection over a tree.

    Args:
        node: Tree to walk.
        visit: Returns the values contributed by one element.

    Returns:
        Values from every element, in document order.
    """
    results: list[str] = []

    def walk(current: Node) -> None:
        if isinstance(current, Element):
            results.extend(visit(current))
            for child in current.children:
                walk(child)

    walk(node)
    return results


def element_text(name: str) -> Callable[[Element], Iterator[str]]:
    """Visitor yielding the text of elements named ``name``."""

    def visit(el: Element) -> Iterator[str]:
        if el.name == name:
            yield el.text

    return visit


def attribute_value(name: str) -> Callable[[Element], Iterator[str]]:
    """Visitor yielding the value of attribute ``name`` wherever it occurs."""

    def visit(el: Element) -> Iterator[str]:
        if name in el.attributes:
            yield el.attributes[name]

    return visit

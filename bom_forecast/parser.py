"""
XML parsing for BOM forecast products.

Converts the document markup into a generic tree of Node objects. Each
node keeps its attributes, its text and its children grouped by tag name
in document order. No semantic checks happen here; the extractors decide
what the tags and attributes mean.
"""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from .exceptions import ParseError

logger = logging.getLogger(__name__)


@dataclass
class Node:
    """A parsed XML element."""
    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    text: Optional[str] = None
    children: Dict[str, List["Node"]] = field(default_factory=dict)

    def get(self, tag: str) -> List["Node"]:
        """Children with the given tag, or an empty list if there are none."""
        return self.children.get(tag, [])

    def first(self, tag: str) -> Optional["Node"]:
        nodes = self.get(tag)
        return nodes[0] if nodes else None

    def attr(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.attributes.get(name, default)


@dataclass
class ParsedTree:
    """Parsed document, keyed by the tag of its root element."""
    root: Node

    def get(self, tag: str) -> List[Node]:
        return [self.root] if self.root.tag == tag else []

    def first(self, tag: str) -> Optional[Node]:
        nodes = self.get(tag)
        return nodes[0] if nodes else None


def _to_node(element: ET.Element) -> Node:
    text = element.text if element.text and element.text.strip() else None
    node = Node(tag=element.tag, attributes=dict(element.attrib), text=text)
    for child in element:
        node.children.setdefault(child.tag, []).append(_to_node(child))
    return node


def parse_document(content: str, xml_file_name: Optional[str] = None) -> ParsedTree:
    """
    Parse document markup into a ParsedTree.

    Raises:
        ParseError: If the markup is not well-formed.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise ParseError(f"XML parsing failed: {e}", xml_file_name) from e
    return ParsedTree(root=_to_node(root))


def read_document(path: Union[str, Path]) -> ParsedTree:
    """
    Read a downloaded product as UTF-8 text and parse it.

    Raises:
        ParseError: If the file cannot be read or is not well-formed.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"Failed to read {path}: {e}", path.name) from e

    tree = parse_document(content, path.name)
    logger.debug(f"Parsed {path} (root <{tree.root.tag}>)")
    return tree

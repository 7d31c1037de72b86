"""Document tree model for lwdom.

This module provides the node classes used to build XML document trees and
the name validation and escaping rules applied to them.

Key Components:
    ElementNode: Element with a name, attributes, and ordered children
    TextNode: Leaf node holding literal text content
    new_element: Factory that starts a builder chain
    is_valid_identifier: Validity check for element and attribute names
    escape_text: Escaping of reserved XML characters
"""

from .markup import escape_text, is_valid_identifier
from .nodes import ElementNode, Node, TextNode, new_element

__all__ = [
    "ElementNode",
    "Node",
    "TextNode",
    "new_element",
    "escape_text",
    "is_valid_identifier",
]

"""Element and text nodes for building XML document trees.

This module implements the two node kinds of a light-weight DOM: elements,
which carry a name, attributes, and ordered children, and text nodes, which
carry literal content. Trees are built through fluent element methods and
rendered to indented, escaped XML text.

Trees are ordinary mutable objects without internal locking. Sharing a tree
between threads requires external synchronization. A node may be appended
under several parents (it is shared, not copied); creating a reference cycle
is the caller's responsibility and makes rendering fail with RecursionError.
"""

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import (
    IO,
    TYPE_CHECKING,
    Any,
    Dict,
    List,
    Mapping,
    Optional,
    Tuple,
    Union,
)

from lwdom.dom.markup import escape_text, is_valid_identifier
from lwdom.shared.exceptions import (
    ChildIndexError,
    EmptyChildrenError,
    InvalidIdentifierError,
)

if TYPE_CHECKING:
    from os import PathLike

    from lwdom.shared.config import WriterConfig

# Layout used by str() on any node
DEFAULT_INDENT_UNIT = " "


def _line_layout(indent_depth: int, indent_unit: Optional[str]) -> Tuple[str, str]:
    """Return the (prefix, terminator) pair for a line at ``indent_depth``."""
    if isinstance(indent_depth, bool) or not isinstance(indent_depth, int):
        raise TypeError("indent_depth must be an integer")
    if indent_depth < 0:
        raise ValueError("indent_depth must be >= 0")

    if indent_unit is None:
        return "", ""
    return indent_unit * indent_depth, "\n"


class Node(ABC):
    """Abstract base for the nodes of a document tree.

    Node equality is identity: two nodes are the same child only if they are
    the same object.
    """

    __slots__ = ()

    @abstractmethod
    def get_all_child_nodes(self) -> Tuple["Node", ...]:
        """Return all child nodes (elements and text) in document order."""

    @abstractmethod
    def get_elements(self) -> Tuple["ElementNode", ...]:
        """Return the child elements in document order."""

    @abstractmethod
    def get_texts(self) -> Tuple["TextNode", ...]:
        """Return the child text nodes in document order."""

    @abstractmethod
    def to_text(
        self, indent_depth: int = 0, indent_unit: Optional[str] = DEFAULT_INDENT_UNIT
    ) -> str:
        """Render this node and its descendants as XML text.

        Args:
            indent_depth: How far this node is indented (number of indent repeats)
            indent_unit: Indent prefix string, or None to disable indentation
                and line breaks

        Returns:
            XML text without the XML declaration
        """

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert this node and its descendants to a dictionary."""

    def __str__(self) -> str:
        return self.to_text(0, DEFAULT_INDENT_UNIT)


class TextNode(Node):
    """Literal text content inside an element.

    For example ``<first-name>Pat</first-name>`` is an element named
    ``first-name`` with a single text node whose content is ``Pat``. The
    content is stored as given and only escaped when rendered.
    """

    __slots__ = ("_content",)

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError("Text content must be a string")
        self._content = text

    @property
    def content(self) -> str:
        """The unescaped text content."""
        return self._content

    def get_all_child_nodes(self) -> Tuple[Node, ...]:
        return ()

    def get_elements(self) -> Tuple["ElementNode", ...]:
        return ()

    def get_texts(self) -> Tuple["TextNode", ...]:
        return ()

    def to_text(
        self, indent_depth: int = 0, indent_unit: Optional[str] = DEFAULT_INDENT_UNIT
    ) -> str:
        prefix, terminator = _line_layout(indent_depth, indent_unit)
        return f"{prefix}{escape_text(self._content)}{terminator}"

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self._content}

    def __repr__(self) -> str:
        return f"TextNode({self._content!r})"


class ElementNode(Node):
    """An XML element with a name, attributes, and ordered child nodes.

    All mutating methods return the element itself so trees can be built in a
    builder style:

        >>> root = (
        ...     new_element("root")
        ...     .append_child(new_element("group").set_attribute("id", "g1"))
        ...     .append_text("hello")
        ... )
        >>> root.child_count()
        2
    """

    __slots__ = ("_name", "_attributes", "_children")

    def __init__(self, name: str) -> None:
        """Create an element.

        Args:
            name: The tag name of the element

        Raises:
            InvalidIdentifierError: If ``name`` is not a valid XML name
        """
        if not is_valid_identifier(name):
            raise InvalidIdentifierError(name, "element")
        self._name = name
        self._attributes: Dict[str, str] = {}
        self._children: List[Node] = []

    @property
    def name(self) -> str:
        """The tag name of this element."""
        return self._name

    # Child management

    def _position_of(self, node: Node) -> int:
        for index, child in enumerate(self._children):
            if child is node:
                return index
        return -1

    @staticmethod
    def _require_node(node: Any) -> None:
        if not isinstance(node, Node):
            raise TypeError("Child must be a Node instance")

    def append_child(self, node: Node) -> "ElementNode":
        """Append a node to the end of the children.

        No cycle check is made; do not append an ancestor of this element.
        """
        self._require_node(node)
        self._children.append(node)
        return self

    def append_text(self, text: str) -> "ElementNode":
        """Create a text node from ``text`` and append it."""
        self._children.append(TextNode(text))
        return self

    def insert_child(self, index: int, node: Node) -> "ElementNode":
        """Insert a node so that it ends up at position ``index``.

        Raises:
            ChildIndexError: If ``index`` is outside ``[0, child_count()]``
        """
        self._require_node(node)
        if (
            isinstance(index, bool)
            or not isinstance(index, int)
            or not (0 <= index <= len(self._children))
        ):
            raise ChildIndexError(index, len(self._children))
        self._children.insert(index, node)
        return self

    def remove_child(self, node: Node) -> "ElementNode":
        """Remove the first occurrence of ``node``; no-op if it is not a child."""
        index = self._position_of(node)
        if index >= 0:
            del self._children[index]
        return self

    def remove_first_child(self) -> "ElementNode":
        """Remove the first child.

        Raises:
            EmptyChildrenError: If the element has no children
        """
        if not self._children:
            raise EmptyChildrenError(f"Element <{self._name}> has no children")
        del self._children[0]
        return self

    def remove_last_child(self) -> "ElementNode":
        """Remove the last child.

        Raises:
            EmptyChildrenError: If the element has no children
        """
        if not self._children:
            raise EmptyChildrenError(f"Element <{self._name}> has no children")
        del self._children[-1]
        return self

    def replace_child(self, target: Node, replacement: Node) -> "ElementNode":
        """Put ``replacement`` in place of the first occurrence of ``target``.

        Nothing happens if ``target`` is not a child.
        """
        self._require_node(replacement)
        index = self._position_of(target)
        if index >= 0:
            self._children[index] = replacement
        return self

    def get_child(self, index: int) -> Optional[Node]:
        """Return the child at ``index``, or None if out of range."""
        if 0 <= index < len(self._children):
            return self._children[index]
        return None

    def get_first_child(self) -> Optional[Node]:
        return self._children[0] if self._children else None

    def get_last_child(self) -> Optional[Node]:
        return self._children[-1] if self._children else None

    def index_of_child(self, node: Node) -> Optional[int]:
        """Return the position of the first occurrence of ``node``, or None."""
        index = self._position_of(node)
        return index if index >= 0 else None

    def child_count(self) -> int:
        return len(self._children)

    def get_all_child_nodes(self) -> Tuple[Node, ...]:
        return tuple(self._children)

    def get_elements(self) -> Tuple["ElementNode", ...]:
        return tuple(child for child in self._children if isinstance(child, ElementNode))

    def get_texts(self) -> Tuple[TextNode, ...]:
        return tuple(child for child in self._children if isinstance(child, TextNode))

    def search_elements_by_name(self, element_name: str) -> List["ElementNode"]:
        """Find all descendant elements named ``element_name``.

        Descendants are visited in document order (pre-order): each matching
        element comes before its own matching descendants, and siblings are
        visited left to right. This element itself is not included.
        """
        results = []
        for element in self.get_elements():
            if element.name == element_name:
                results.append(element)
            results.extend(element.search_elements_by_name(element_name))
        return results

    # Attributes

    def set_attribute(self, key: str, value: str) -> "ElementNode":
        """Set an attribute, replacing any previous value for ``key``.

        Raises:
            InvalidIdentifierError: If ``key`` is not a valid XML name
            TypeError: If ``value`` is not a string
        """
        if not is_valid_identifier(key):
            raise InvalidIdentifierError(key, "attribute")
        if not isinstance(value, str):
            raise TypeError("Attribute value must be a string")
        self._attributes[key] = value
        return self

    def remove_attribute(self, key: str) -> "ElementNode":
        self._attributes.pop(key, None)
        return self

    def has_attribute(self, key: str) -> bool:
        return key in self._attributes

    def get_attribute(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get attribute value with optional default."""
        return self._attributes.get(key, default)

    def get_attributes(self) -> Mapping[str, str]:
        """Return a read-only snapshot of the attributes in insertion order."""
        return MappingProxyType(dict(self._attributes))

    # Rendering

    def to_text(
        self, indent_depth: int = 0, indent_unit: Optional[str] = DEFAULT_INDENT_UNIT
    ) -> str:
        prefix, terminator = _line_layout(indent_depth, indent_unit)
        attributes = "".join(
            f' {key}="{escape_text(value)}"' for key, value in self._attributes.items()
        )

        if not self._children:
            return f"{prefix}<{self._name}{attributes} />{terminator}"

        parts = [f"{prefix}<{self._name}{attributes}>{terminator}"]
        for child in self._children:
            parts.append(child.to_text(indent_depth + 1, indent_unit))
        parts.append(f"{prefix}</{self._name}>{terminator}")
        return "".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "name": self._name,
            "attributes": dict(self._attributes),
        }
        if self._children:
            result["children"] = [child.to_dict() for child in self._children]
        return result

    def write_to_string(self, config: Optional["WriterConfig"] = None) -> str:
        """Render this element as a complete XML document string.

        The XML declaration is followed by this element's rendering using the
        layout from ``config`` (one space per level by default).
        """
        from lwdom.api.writer import write_to_string

        return write_to_string(self, config)

    def write_to(
        self,
        destination: Union[None, str, "PathLike[str]", IO[Any]] = None,
        config: Optional["WriterConfig"] = None,
    ) -> Optional[str]:
        """Write this element as a complete XML document.

        See :func:`lwdom.api.writer.write_to` for the accepted destinations.
        """
        from lwdom.api.writer import write_to

        return write_to(self, destination, config)

    def __repr__(self) -> str:
        return f"<ElementNode {self._name} ({len(self._children)})>"


def new_element(name: str) -> ElementNode:
    """Create a new element, convenient as the start of a builder chain.

    Raises:
        InvalidIdentifierError: If ``name`` is not a valid XML name
    """
    return ElementNode(name)

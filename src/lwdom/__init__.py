"""lwdom: a light-weight DOM for building and writing XML documents.

Build a tree of elements and text, then write it as indented, escaped XML.

Progressive API Disclosure:
- Level 1: Builder functions - new_element(), ElementNode.write_to_string()
- Level 2: Writer functions - write_to_string(), write_to() with WriterConfig
- Level 3: DocumentWriter class for repeated writes with one configuration

Example:
    >>> xml = (
    ...     new_element("root")
    ...     .append_child(new_element("group").set_attribute("id", "g1"))
    ...     .write_to_string()
    ... )
"""

__version__ = "0.1.0"
__author__ = "LWDom Team"

# Level 1: Tree building
from .dom import (
    ElementNode,
    Node,
    TextNode,
    escape_text,
    is_valid_identifier,
    new_element,
)

# Level 2 and 3: Writing documents
from .api import XML_HEADER, DocumentWriter, write_to, write_to_string

# Configuration and errors
from .shared import (
    ChildIndexError,
    ConfigError,
    ConfigValidationError,
    DocumentWriteError,
    EmptyChildrenError,
    InvalidIdentifierError,
    LWDomError,
    WriterConfig,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Tree building
    "ElementNode",
    "Node",
    "TextNode",
    "new_element",
    "escape_text",
    "is_valid_identifier",

    # Writing
    "XML_HEADER",
    "DocumentWriter",
    "write_to",
    "write_to_string",

    # Configuration
    "WriterConfig",
    "ConfigError",
    "ConfigValidationError",

    # Errors
    "LWDomError",
    "InvalidIdentifierError",
    "ChildIndexError",
    "EmptyChildrenError",
    "DocumentWriteError",
]

"""Exception hierarchy for light-weight DOM building and writing.

Every error is raised synchronously by the call that caused it. Mutating
operations validate their arguments before touching the tree, so a raised
error always leaves the tree unchanged.
"""

from typing import Any, Optional


class LWDomError(Exception):
    """Base exception for all lwdom errors."""


class InvalidIdentifierError(LWDomError, ValueError):
    """Raised when a tag name or attribute key is not a valid XML name."""

    def __init__(self, identifier: Any, kind: str = "element") -> None:
        super().__init__(f"{identifier!r} is not a valid {kind} name")
        self.identifier = identifier
        self.kind = kind


class ChildIndexError(LWDomError, IndexError):
    """Raised when a positional child operation receives an invalid index."""

    def __init__(self, index: int, child_count: int) -> None:
        super().__init__(
            f"Child index {index} out of range for element with {child_count} children"
        )
        self.index = index
        self.child_count = child_count


class EmptyChildrenError(LWDomError, IndexError):
    """Raised when a child is required but the element has none."""


class DocumentWriteError(LWDomError, OSError):
    """Raised when writing a document to a path or stream fails.

    A path destination may already contain part of the document when this is
    raised; treat it as unusable.
    """

    def __init__(self, message: str, destination: Optional[Any] = None) -> None:
        super().__init__(message)
        self.destination = destination

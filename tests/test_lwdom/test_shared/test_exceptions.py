"""Tests for the lwdom exception hierarchy."""

import pytest

from lwdom.shared.exceptions import (
    ChildIndexError,
    DocumentWriteError,
    EmptyChildrenError,
    InvalidIdentifierError,
    LWDomError,
)


class TestExceptionHierarchy:
    """Exceptions share a base class and match the matching builtin errors."""

    @pytest.mark.parametrize("error_class, builtin", [
        (InvalidIdentifierError, ValueError),
        (ChildIndexError, IndexError),
        (EmptyChildrenError, IndexError),
        (DocumentWriteError, OSError),
    ])
    def test_subclasses(self, error_class, builtin) -> None:
        """Test each error derives from LWDomError and its builtin counterpart."""
        assert issubclass(error_class, LWDomError)
        assert issubclass(error_class, builtin)

    def test_invalid_identifier_message_and_fields(self) -> None:
        """Test InvalidIdentifierError keeps the rejected name and its kind."""
        error = InvalidIdentifierError("1abc", "attribute")

        assert error.identifier == "1abc"
        assert error.kind == "attribute"
        assert str(error) == "'1abc' is not a valid attribute name"

    def test_child_index_error_fields(self) -> None:
        """Test ChildIndexError records the index and child count."""
        error = ChildIndexError(7, 2)

        assert error.index == 7
        assert error.child_count == 2
        assert "7" in str(error)

    def test_document_write_error_destination(self) -> None:
        """Test DocumentWriteError records its destination."""
        error = DocumentWriteError("disk full", destination="out.xml")

        assert error.destination == "out.xml"
        assert str(error) == "disk full"

"""Tests for the document writing API."""

import doctest
import io
import logging
import os
import tempfile
from pathlib import Path
from unittest.mock import Mock

import pytest

from lwdom import (
    XML_HEADER,
    DocumentWriteError,
    DocumentWriter,
    WriterConfig,
    new_element,
    write_to,
    write_to_string,
)

EXPECTED_GROUPS_DOCUMENT = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    "<root>\n"
    ' <group id="g1">\n'
    "  Say hello to group 1!\n"
    " </group>\n"
    ' <group id="g2" color="green">\n'
    "  Hi! I&apos;m in group 2\n"
    "  <something />\n"
    " </group>\n"
    "</root>\n"
)


def build_groups():
    """Build the two-group example tree."""
    return (
        new_element("root")
        .append_child(
            new_element("group")
            .set_attribute("id", "g1")
            .append_text("Say hello to group 1!")
        )
        .append_child(
            new_element("group")
            .set_attribute("id", "g2")
            .set_attribute("color", "green")
            .append_text("Hi! I'm in group 2")
            .append_child(new_element("something"))
        )
    )


class TestWriteToString:
    """Test rendering complete documents to strings."""

    def test_end_to_end_document(self) -> None:
        """Test the two-group example renders byte for byte."""
        assert build_groups().write_to_string() == EXPECTED_GROUPS_DOCUMENT
        assert write_to_string(build_groups()) == EXPECTED_GROUPS_DOCUMENT

    def test_header_is_emitted_once(self) -> None:
        """Test the XML declaration starts the document exactly once."""
        document = build_groups().write_to_string()

        assert document.startswith(XML_HEADER)
        assert document.count("<?xml") == 1
        assert XML_HEADER == '<?xml version="1.0" encoding="UTF-8"?>\n'

    def test_compact_configuration(self) -> None:
        """Test compact output keeps the header line but nothing else breaks."""
        document = write_to_string(
            new_element("a").append_text("b"), WriterConfig.compact()
        )

        assert document == XML_HEADER + "<a>b</a>"

    def test_configured_indent(self) -> None:
        """Test indent unit and depth are taken from the configuration."""
        config = WriterConfig(indent_unit="\t", indent_depth=1)
        document = new_element("a").append_text("b").write_to_string(config)

        assert document == XML_HEADER + "\t<a>\n\t\tb\n\t</a>\n"

    def test_repeated_writes_are_identical(self) -> None:
        """Test serializing an unchanged tree twice gives the same document."""
        tree = build_groups()

        assert tree.write_to_string() == tree.write_to_string()

    def test_write_to_without_destination_returns_document(self) -> None:
        """Test write_to returns the text when no destination is given."""
        assert build_groups().write_to() == EXPECTED_GROUPS_DOCUMENT
        assert write_to(build_groups(), None) == EXPECTED_GROUPS_DOCUMENT


class TestWriteToStreams:
    """Test writing to caller-owned streams."""

    def test_text_stream(self) -> None:
        """Test text streams receive the document and stay open."""
        stream = io.StringIO()
        result = build_groups().write_to(stream)

        assert result is None
        assert not stream.closed
        assert stream.getvalue() == EXPECTED_GROUPS_DOCUMENT

    def test_binary_stream_receives_utf8(self) -> None:
        """Test binary streams receive UTF-8 bytes and stay open."""
        stream = io.BytesIO()
        new_element("r").append_text("snow ☃").write_to(stream)

        assert not stream.closed
        assert stream.getvalue() == (XML_HEADER + "<r>\n snow ☃\n</r>\n").encode("utf-8")

    def test_stream_is_flushed(self) -> None:
        """Test streams are flushed after writing."""
        stream = Mock(spec=["write", "flush"])
        new_element("r").write_to(stream)

        stream.write.assert_called_once_with(XML_HEADER + "<r />\n")
        stream.flush.assert_called_once_with()

    def test_closed_stream_raises_write_error(self) -> None:
        """Test writing to a closed stream raises DocumentWriteError."""
        stream = io.StringIO()
        stream.close()

        with pytest.raises(DocumentWriteError) as exc_info:
            new_element("r").write_to(stream)

        assert exc_info.value.destination is stream
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_failing_stream_raises_write_error(self) -> None:
        """Test OS errors from the stream are wrapped."""
        stream = Mock(spec=["write"])
        stream.write.side_effect = OSError("disk full")

        with pytest.raises(DocumentWriteError, match="disk full"):
            new_element("r").write_to(stream)

    def test_named_temporary_file_receives_bytes(self) -> None:
        """Test tempfile wrappers opened in binary mode receive UTF-8 bytes."""
        with tempfile.NamedTemporaryFile() as handle:
            new_element("root").append_text("hi").write_to(handle)

            assert not handle.closed
            handle.seek(0)
            assert handle.read() == (XML_HEADER + "<root>\n hi\n</root>\n").encode("utf-8")

    def test_spooled_temporary_file_receives_bytes(self) -> None:
        """Test spooled temporary files are detected as binary sinks."""
        with tempfile.SpooledTemporaryFile() as handle:
            new_element("root").write_to(handle)

            handle.seek(0)
            assert handle.read() == (XML_HEADER + "<root />\n").encode("utf-8")

    def test_text_mode_temporary_file_receives_text(self) -> None:
        """Test tempfile wrappers opened in text mode receive text."""
        with tempfile.NamedTemporaryFile("w+", encoding="utf-8") as handle:
            new_element("root").write_to(handle)

            handle.seek(0)
            assert handle.read() == XML_HEADER + "<root />\n"

    def test_binary_mode_attribute_selects_bytes(self) -> None:
        """Test custom sinks reporting a binary mode receive bytes."""
        stream = Mock(spec=["write", "flush", "mode"])
        stream.mode = "wb"
        new_element("r").write_to(stream)

        stream.write.assert_called_once_with((XML_HEADER + "<r />\n").encode("utf-8"))

    def test_unencodable_text_to_binary_stream_raises_write_error(self) -> None:
        """Test lone surrogates are reported as DocumentWriteError."""
        stream = io.BytesIO()

        with pytest.raises(DocumentWriteError) as exc_info:
            new_element("r").append_text("bad \ud800").write_to(stream)

        assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)
        assert stream.getvalue() == b""

    def test_unsupported_destination_raises_type_error(self) -> None:
        """Test destinations without a write method are rejected."""
        with pytest.raises(TypeError, match="Unsupported destination type: int"):
            new_element("r").write_to(42)  # type: ignore


class TestWriteToPath:
    """Test writing to file paths."""

    def test_write_to_string_path(self) -> None:
        """Test writing to a path given as a string."""
        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, "out.xml")
            result = build_groups().write_to(path)

            assert result is None
            with open(path, "rb") as handle:
                assert handle.read() == EXPECTED_GROUPS_DOCUMENT.encode("utf-8")

    def test_write_to_path_object_truncates(self) -> None:
        """Test existing file content is replaced."""
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "out.xml"
            path.write_text("x" * 1000, encoding="utf-8")

            write_to(new_element("small"), path)

            assert path.read_bytes() == (XML_HEADER + "<small />\n").encode("utf-8")

    def test_line_endings_are_not_translated(self) -> None:
        """Test files always use \\n line endings."""
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "out.xml"
            new_element("a").append_text("b").write_to(path)

            assert b"\r\n" not in path.read_bytes()

    def test_unencodable_text_to_path_raises_write_error(self) -> None:
        """Test lone surrogates in a file write are reported as DocumentWriteError."""
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "out.xml"

            with pytest.raises(DocumentWriteError) as exc_info:
                new_element("r").set_attribute("a", "\udfff").write_to(path)

            assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)

    def test_unwritable_path_raises_write_error(self) -> None:
        """Test a path in a missing directory raises DocumentWriteError."""
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "missing" / "out.xml"

            with pytest.raises(DocumentWriteError, match="Unable to write document") as exc_info:
                new_element("r").write_to(path)

            assert exc_info.value.destination == path
            assert isinstance(exc_info.value.__cause__, OSError)
            assert isinstance(exc_info.value, OSError)


class TestDocumentWriter:
    """Test the DocumentWriter class."""

    def test_default_configuration(self) -> None:
        """Test the writer falls back to the default configuration."""
        writer = DocumentWriter()

        assert writer.config == WriterConfig()
        assert writer.render(new_element("r").append_text("t")) == "<r>\n t\n</r>\n"

    def test_render_requires_element(self) -> None:
        """Test only elements can be document roots."""
        with pytest.raises(TypeError, match="Document root must be an ElementNode"):
            DocumentWriter().render("root")  # type: ignore

    def test_writer_reused_for_several_documents(self) -> None:
        """Test one writer renders several trees with the same layout."""
        writer = DocumentWriter(WriterConfig.compact())

        assert writer.write_to_string(new_element("a")) == XML_HEADER + "<a />"
        assert writer.write_to_string(new_element("b")) == XML_HEADER + "<b />"

    def test_write_logs_with_correlation_id(self, caplog) -> None:
        """Test writes emit debug records carrying the correlation ID."""
        writer = DocumentWriter(WriterConfig(correlation_id="req-7"))

        with caplog.at_level(logging.DEBUG, logger="lwdom.api.writer"):
            writer.write_to(new_element("r"), io.StringIO())

        messages = [record.getMessage() for record in caplog.records]
        assert messages == ["Starting document write", "Document written to stream"]
        assert all(record.correlation_id == "req-7" for record in caplog.records)
        assert caplog.records[0].destination_kind == "text_stream"
        assert caplog.records[0].root == "r"

    def test_string_output_does_not_log(self, caplog) -> None:
        """Test in-memory rendering performs no logging."""
        with caplog.at_level(logging.DEBUG, logger="lwdom.api.writer"):
            DocumentWriter().write_to(new_element("r"))

        assert caplog.records == []


class TestDocstringExamples:
    """Test that usage examples in docstrings run as written."""

    def test_writer_examples(self) -> None:
        """Test the examples in the writer module."""
        from lwdom.api import writer

        failures, attempted = doctest.testmod(writer)

        assert attempted > 0
        assert failures == 0

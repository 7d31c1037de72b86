"""Document writing API for lwdom.

This module turns an element tree into a complete XML document: the fixed XML
declaration followed by the rendered root element. Output can be returned as a
string, written to a caller-owned text or binary stream, or written to a file.

Streams supplied by the caller are flushed but never closed. Files opened from
a path are always closed, also when writing fails part way through.
"""

import io
import os
from typing import IO, Any, Optional, Union

from lwdom.dom.nodes import ElementNode
from lwdom.shared import DocumentWriteError, WriterConfig, get_logger

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'

OUTPUT_ENCODING = "utf-8"

# Type definitions for output destinations
Destination = Union[None, str, "os.PathLike[str]", IO[Any]]


def _is_binary_stream(stream: Any) -> bool:
    """Tell whether a writable stream expects bytes rather than text."""
    if isinstance(stream, io.TextIOBase):
        return False
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    # tempfile wrappers and similar proxies expose the mode of the file they wrap
    mode = getattr(stream, "mode", "")
    return isinstance(mode, str) and "b" in mode


class DocumentWriter:
    """Renders element trees to XML documents using a fixed configuration.

    Example:
        >>> from lwdom import new_element
        >>> writer = DocumentWriter(WriterConfig.compact())
        >>> writer.write_to_string(new_element("root").append_text("hi"))
        '<?xml version="1.0" encoding="UTF-8"?>\\n<root>hi</root>'
    """

    def __init__(self, config: Optional[WriterConfig] = None) -> None:
        """Initialize document writer.

        Args:
            config: Optional writer configuration (one space per level if omitted)
        """
        self.config = config or WriterConfig()
        self.logger = get_logger(__name__, self.config.correlation_id, "document_writer")

    def render(self, element: ElementNode) -> str:
        """Render ``element`` without the XML declaration."""
        if not isinstance(element, ElementNode):
            raise TypeError("Document root must be an ElementNode instance")
        return element.to_text(self.config.indent_depth, self.config.indent_unit)

    def write_to_string(self, element: ElementNode) -> str:
        """Render ``element`` as a complete XML document string."""
        return XML_HEADER + self.render(element)

    def write_to(
        self, element: ElementNode, destination: Destination = None
    ) -> Optional[str]:
        """Write ``element`` as a complete XML document to ``destination``.

        Args:
            element: Root element of the document
            destination: Where to write:
                - None: nothing is written, the document is returned
                - str or os.PathLike: file path, truncated and written as UTF-8
                - binary stream (a raw or buffered IO object, or any object whose
                  ``mode`` contains "b"): UTF-8 bytes are written, stream is flushed
                - text stream (anything else with ``write``): text is written,
                  stream is flushed

        Returns:
            The document text when ``destination`` is None, otherwise None

        Raises:
            DocumentWriteError: If the path or stream cannot be written
            TypeError: If ``destination`` is not a supported destination
        """
        document = self.write_to_string(element)
        if destination is None:
            return document

        if isinstance(destination, (str, os.PathLike)):
            kind = "path"
        elif hasattr(destination, "write"):
            kind = "binary_stream" if _is_binary_stream(destination) else "text_stream"
        else:
            raise TypeError(
                f"Unsupported destination type: {type(destination).__name__}"
            )

        self.logger.debug(
            "Starting document write",
            extra={
                "root": element.name,
                "destination_kind": kind,
                "compact": self.config.is_compact,
                "characters": len(document),
            }
        )

        if kind == "path":
            self._write_path(document, destination)
            self.logger.info(
                "Document written to file",
                extra={"file_path": os.fspath(destination), "characters": len(document)}
            )
        else:
            self._write_stream(document, destination, binary=kind == "binary_stream")
            self.logger.debug(
                "Document written to stream", extra={"destination_kind": kind}
            )
        return None

    def _write_path(self, document: str, path: Union[str, "os.PathLike[str]"]) -> None:
        # newline="" keeps "\n" line endings on every platform
        try:
            with open(path, "w", encoding=OUTPUT_ENCODING, newline="") as handle:
                handle.write(document)
        except (OSError, UnicodeError) as e:
            # UnicodeError: content that cannot be encoded, such as lone surrogates
            raise DocumentWriteError(
                f"Unable to write document to {os.fspath(path)}: {e}", destination=path
            ) from e

    def _write_stream(self, document: str, stream: IO[Any], binary: bool) -> None:
        try:
            stream.write(document.encode(OUTPUT_ENCODING) if binary else document)
            if hasattr(stream, "flush"):
                stream.flush()
        except (OSError, ValueError) as e:
            # ValueError: closed stream, or content that cannot be encoded
            raise DocumentWriteError(
                f"Unable to write document to stream: {e}", destination=stream
            ) from e


def write_to_string(element: ElementNode, config: Optional[WriterConfig] = None) -> str:
    """Render ``element`` as a complete XML document string.

    Examples:
        >>> from lwdom import new_element
        >>> print(write_to_string(new_element("root").append_text("hi")), end="")
        <?xml version="1.0" encoding="UTF-8"?>
        <root>
         hi
        </root>
    """
    return DocumentWriter(config).write_to_string(element)


def write_to(
    element: ElementNode,
    destination: Destination = None,
    config: Optional[WriterConfig] = None,
) -> Optional[str]:
    """Write ``element`` as a complete XML document.

    See :meth:`DocumentWriter.write_to` for the accepted destinations.
    """
    return DocumentWriter(config).write_to(element, destination)

"""Document writing API for lwdom.

Provides module-level functions for the common cases and the DocumentWriter
class for repeated writes with a shared configuration.
"""

from .writer import XML_HEADER, DocumentWriter, write_to, write_to_string

__all__ = [
    "XML_HEADER",
    "DocumentWriter",
    "write_to",
    "write_to_string",
]

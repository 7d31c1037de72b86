#!/usr/bin/env python3
"""
Quick Start Guide for lwdom.

Builds a small document with the fluent element API and writes it to standard
output, to a string, and to a file.
"""

import sys
import tempfile
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lwdom import DocumentWriteError, WriterConfig, new_element


def build_document():
    """Build the two-group example document."""
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


def quick_start_example():
    """Quick start example showing basic usage."""
    root = build_document()

    print("Step 1: Writing to standard output")
    print("-" * 30)
    try:
        root.write_to(sys.stdout)
    except DocumentWriteError:
        print("Error: Unable to write to output stream!", file=sys.stderr)

    print("\nStep 2: Compact string")
    print("-" * 30)
    print(root.write_to_string(WriterConfig.compact()))

    print("\nStep 3: Searching and editing")
    print("-" * 30)
    groups = root.search_elements_by_name("group")
    print(f"Found {len(groups)} groups")
    groups[1].remove_attribute("color").remove_last_child()
    print(groups[1].to_text(0, "  "), end="")

    print("\nStep 4: Writing to a file")
    print("-" * 30)
    with tempfile.TemporaryDirectory() as temp_dir:
        path = Path(temp_dir) / "groups.xml"
        root.write_to(path, WriterConfig.tabbed())
        print(f"Wrote {path.stat().st_size} bytes to {path.name}")


if __name__ == "__main__":
    quick_start_example()

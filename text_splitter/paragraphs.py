"""
Paragraph Splitter

Splits a document into paragraphs at blank-line boundaries.

A paragraph break is a line break followed by one or more lines that are
empty or contain only whitespace. A single line break stays inside the
paragraph. Paragraphs are stripped; empty ones are dropped.

Usage:
    from text_splitter.paragraphs import split_paragraphs

    split_paragraphs("First.\\n\\nSecond.")
    # ["First.", "Second."]
"""

import re

_BLANK_LINES_PATTERN = re.compile(r"\r?\n(?:[ \t\f\v]*\r?\n)+")


def split_paragraphs(document: str) -> list[str]:
    """
    Split a document into its non-empty paragraphs, in document order.

    Args:
        document: The text to split.

    Returns:
        List of stripped paragraph strings. Empty input returns an empty list.
        Stripping drops the indentation of a paragraph's first line; later
        lines keep theirs.
    """
    if not document or not document.strip():
        return []

    paragraphs = []
    for part in _BLANK_LINES_PATTERN.split(document):
        part = part.strip()
        if part:
            paragraphs.append(part)

    return paragraphs

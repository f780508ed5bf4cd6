"""
Sentence Splitter for the Text Splitter

Regex-based sentence boundary detection for English prose. Handles common
abbreviations (Mr., Dr., etc., e.g.) without requiring external NLP
libraries.

Design:
- Split at sentence-ending punctuation (.!?) followed by whitespace + uppercase
- Protect known abbreviations from triggering false splits
- Protect dotted multi-letter abbreviations (e.g., i.e., U.S.)
- Protected dots are swapped for a placeholder character that does not
  occur in the input, so restoring them never alters the text

Usage:
    from text_splitter.sentence_splitter import split_sentences

    sentences = split_sentences("This is one. This is two.")
    # ["This is one.", "This is two."]
"""

import re
from typing import Optional

# Placeholder candidates: the Unicode private use area.
_PLACEHOLDER_RANGE = range(0xE000, 0xF900)

# Abbreviations that should NOT trigger sentence splits.
_ABBREVIATIONS = {
    # Titles
    "mr", "mrs", "ms", "dr", "prof", "sr", "jr", "st", "rev", "gen", "sgt",
    # Business / references
    "inc", "ltd", "co", "corp", "dept", "fig", "vol", "pp", "ed", "eds",
    # Latin / misc
    "etc", "vs", "cf", "approx", "est", "al",
    # Months (abbreviated)
    "jan", "feb", "mar", "apr", "jun", "jul", "aug", "sep",
    "sept", "oct", "nov", "dec",
}

# Matches any known abbreviation followed by a dot and whitespace.
_ABBREV_PATTERN = re.compile(
    r"(?<!\w)(?:" + "|".join(re.escape(a) for a in sorted(_ABBREVIATIONS)) + r")\.(?=\s)",
    re.IGNORECASE,
)

# Multi-part abbreviations: e.g., i.e., U.S., a.m.
_MULTI_ABBREV_PATTERN = re.compile(r"\b[A-Za-z]\.(?:[A-Za-z]\.)+")

_SENTENCE_BOUNDARY = re.compile(r'(?<=[.!?])\s+(?=[A-Z0-9"\'“\(\[])')


def _choose_placeholder(text: str) -> Optional[str]:
    """Return a character absent from text, or None if every candidate occurs."""
    for code_point in _PLACEHOLDER_RANGE:
        candidate = chr(code_point)
        if candidate not in text:
            return candidate
    return None


def _protect_dots(text: str, placeholder: str) -> str:
    """Replace dots in abbreviations with the placeholder."""
    # Multi-part first, so "e.g." is not seen as "g." by the single pattern
    text = _MULTI_ABBREV_PATTERN.sub(
        lambda m: m.group().replace(".", placeholder), text
    )
    text = _ABBREV_PATTERN.sub(
        lambda m: m.group().replace(".", placeholder), text
    )
    return text


def split_sentences(text: str) -> list[str]:
    """
    Split text into sentences at proper sentence boundaries.

    Args:
        text: Input text to split into sentences.

    Returns:
        List of sentence strings. Empty/whitespace input returns empty list.
        Each sentence is stripped of leading/trailing whitespace.
    """
    if not text or not text.strip():
        return []

    text = text.strip()
    placeholder = _choose_placeholder(text)
    if placeholder is None:
        # No free placeholder: abbreviations may cause extra splits
        parts = _SENTENCE_BOUNDARY.split(text)
    else:
        protected = _protect_dots(text, placeholder)
        parts = [
            part.replace(placeholder, ".")
            for part in _SENTENCE_BOUNDARY.split(protected)
        ]

    sentences = []
    for part in parts:
        part = part.strip()
        if part:
            sentences.append(part)

    return sentences

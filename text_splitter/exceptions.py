"""
Custom Exceptions for the Text Splitter.

Exception Hierarchy:
    SplitterError (base)
    ├── InvalidArgumentError
    └── SegmentationFailure

Usage:
    from text_splitter.exceptions import (
        InvalidArgumentError,
        SegmentationFailure,
        SplitterError,
    )

    try:
        chunks = splitter.split(document, max_tokens=256)
    except InvalidArgumentError as e:
        print(f"Bad input: {e}")
    except SegmentationFailure as e:
        print(f"Annotator failed on paragraph {e.paragraph_index}: {e}")
"""

from __future__ import annotations

from typing import Optional


class SplitterError(Exception):
    """
    Base exception for all splitter errors.

    Attributes:
        message: Human-readable error description
        details: Additional technical details (optional)
    """

    def __init__(
        self,
        message: str = "A splitter error occurred",
        details: Optional[str] = None,
    ):
        self.message = message
        self.details = details

        full_message = message
        if details:
            full_message = f"{message} | Details: {details}"

        super().__init__(full_message)


class InvalidArgumentError(SplitterError, ValueError):
    """
    Raised when split() is called with arguments it cannot work with.

    Attributes:
        argument: Name of the offending argument
        value: The rejected value
    """

    def __init__(self, argument: str, value: object, reason: str):
        self.argument = argument
        self.value = value
        super().__init__(
            message=f"Invalid argument '{argument}': {reason}",
            details=f"got {value!r}",
        )


class SegmentationFailure(SplitterError):
    """
    Raised when the annotator cannot process a span of the document.

    The split is aborted; chunks produced for earlier paragraphs are
    discarded.

    Attributes:
        paragraph_index: Index of the paragraph being processed (0-indexed)
        sentence_index: Index of the sentence within the paragraph, if the
            failure happened at sentence level
        text_length: Length in characters of the span handed to the annotator
        original_error: The exception raised by the annotator
    """

    def __init__(
        self,
        paragraph_index: int,
        text_length: int,
        sentence_index: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        self.paragraph_index = paragraph_index
        self.sentence_index = sentence_index
        self.text_length = text_length
        self.original_error = original_error

        location = f"paragraph {paragraph_index}"
        if sentence_index is not None:
            location += f", sentence {sentence_index}"

        details = str(original_error) if original_error else None
        super().__init__(
            message=f"Annotator failed on {location} ({text_length} chars)",
            details=details,
        )

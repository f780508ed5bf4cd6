"""
Text Splitter - token-bounded chunking for embedding pipelines

Splits documents into chunks that fit a token budget, falling back from
paragraphs to sentences to words only where a unit does not fit.

Quick Start:
    from text_splitter import TextSplitter, WhitespaceAnnotator

    splitter = TextSplitter()  # tiktoken cl100k_base token counts
    chunks = splitter.split(document, max_tokens=256)

    words = TextSplitter(WhitespaceAnnotator())
    words.split("A. B. C. D. E.", max_tokens=2)
    # ["A. B.", "C. D.", "E."]
"""

__version__ = "1.0.0"

from .annotator import (
    Annotator,
    Sentence,
    TiktokenAnnotator,
    WhitespaceAnnotator,
    create_annotator,
)
from .config import SplitterServiceConfig
from .exceptions import InvalidArgumentError, SegmentationFailure, SplitterError
from .models import SplitResult, SplitStats, SplitterConfig, TextChunk
from .paragraphs import split_paragraphs
from .sentence_splitter import split_sentences
from .service import SplitterService
from .splitter import TextSplitter, pack_paragraph, pack_sentences, pack_words
from .token_counter import count_tokens, count_tokens_batch

__all__ = [
    "__version__",
    "Annotator",
    "Sentence",
    "TiktokenAnnotator",
    "WhitespaceAnnotator",
    "create_annotator",
    "SplitterServiceConfig",
    "InvalidArgumentError",
    "SegmentationFailure",
    "SplitterError",
    "SplitResult",
    "SplitStats",
    "SplitterConfig",
    "TextChunk",
    "split_paragraphs",
    "split_sentences",
    "SplitterService",
    "TextSplitter",
    "pack_paragraph",
    "pack_sentences",
    "pack_words",
    "count_tokens",
    "count_tokens_batch",
]

"""
Data Models for the Text Splitter

Defines:
1. SplitterConfig - Budget, annotator and output options
2. TextChunk - A single chunk with its token count
3. SplitResult - Complete split output with statistics
4. Request/response models for the HTTP API

Usage:
    config = SplitterConfig(max_tokens=256)
    result = service.split_text(text, document_id="notes")
    result.save("chunks.json")
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

from .token_counter import DEFAULT_ENCODING


class SplitterConfig(BaseModel):
    """Configuration for splitting documents."""
    max_tokens: int = Field(
        256,
        description="Maximum tokens per chunk",
        ge=1,
    )
    annotator: Literal["tiktoken", "whitespace"] = Field(
        "tiktoken",
        description="Annotator providing token counts and sentence boundaries",
    )
    encoding_name: str = Field(
        DEFAULT_ENCODING,
        description="tiktoken encoding used by the tiktoken annotator",
    )
    keep_trailing_space: bool = Field(
        False,
        description="Append a trailing space to sentence- and word-packed chunks",
    )


class TextChunk(BaseModel):
    """A single chunk, ready for embedding."""
    chunk_id: str = Field(
        ...,
        description="Unique identifier (format: {document_id}_chunk_{index:04d})",
    )
    chunk_index: int = Field(..., ge=0)
    text: str = Field(..., min_length=1)
    token_count: int = Field(
        ...,
        description="Annotator token count of the chunk text",
        ge=0,
    )


class SplitStats(BaseModel):
    """Statistics about a split."""
    total_chunks: int = 0
    total_tokens: int = 0
    total_paragraphs: int = 0
    avg_chunk_tokens: float = 0.0
    min_chunk_tokens: int = 0
    max_chunk_tokens: int = 0
    oversized_chunks: int = 0


class SplitResult(BaseModel):
    """Complete result of splitting one document."""
    document_id: str
    source_file: Optional[str] = None
    config: SplitterConfig
    chunks: list[TextChunk] = Field(default_factory=list)
    stats: SplitStats = Field(default_factory=SplitStats)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )

    @property
    def total_chunks(self) -> int:
        return len(self.chunks)

    def texts(self) -> list[str]:
        return [chunk.text for chunk in self.chunks]

    def get_chunk_by_id(self, chunk_id: str) -> Optional[TextChunk]:
        """Find a chunk by its ID."""
        for chunk in self.chunks:
            if chunk.chunk_id == chunk_id:
                return chunk
        return None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)

    def save(self, path: str) -> None:
        """Save the split result to a JSON file."""
        Path(path).write_text(self.to_json(), encoding="utf-8")

    @classmethod
    def load(cls, path: str) -> "SplitResult":
        """Load a split result from a JSON file."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.model_validate(data)


class SplitRequest(BaseModel):
    text: str
    document_id: str = "document"
    max_tokens: Optional[int] = None


class SplitResponse(BaseModel):
    document_id: str
    total_chunks: int
    chunks: list[TextChunk]
    stats: SplitStats


class SplitFileRequest(BaseModel):
    path: str
    max_tokens: Optional[int] = None


class SplitFileResponse(BaseModel):
    document_id: str
    output_path: str
    total_chunks: int

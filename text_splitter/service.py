import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .annotator import create_annotator
from .config import SplitterServiceConfig
from .models import SplitResult, SplitStats, TextChunk
from .paragraphs import split_paragraphs
from .splitter import TextSplitter

logger = logging.getLogger(__name__)


class SplitterService:
    def __init__(self, config: SplitterServiceConfig | None = None):
        self.config = config or SplitterServiceConfig()
        settings = self.config.splitter
        self.annotator = create_annotator(settings.annotator, settings.encoding_name)
        self.splitter = TextSplitter(
            self.annotator,
            keep_trailing_space=settings.keep_trailing_space,
        )
        self.data_dir = Path(self.config.data_dir)

    def split_text(
        self,
        text: str,
        document_id: str = "document",
        max_tokens: Optional[int] = None,
        source_file: Optional[str] = None,
    ) -> SplitResult:
        budget = self.config.splitter.max_tokens if max_tokens is None else max_tokens
        texts = self.splitter.split(text, budget)

        chunks = [
            TextChunk(
                chunk_id=f"{document_id}_chunk_{i:04d}",
                chunk_index=i,
                text=chunk_text,
                token_count=self.annotator.token_count(chunk_text),
            )
            for i, chunk_text in enumerate(texts)
        ]
        stats = self._compute_stats(chunks, len(split_paragraphs(text)), budget)

        logger.info(
            f"Split {document_id}: {stats.total_paragraphs} paragraphs "
            f"into {stats.total_chunks} chunks (budget {budget})"
        )
        if stats.oversized_chunks:
            logger.warning(
                f"{stats.oversized_chunks} chunks of {document_id} "
                f"exceed {budget} tokens"
            )

        return SplitResult(
            document_id=document_id,
            source_file=source_file,
            config=self.config.splitter.model_copy(update={"max_tokens": budget}),
            chunks=chunks,
            stats=stats,
        )

    def split_file(self, path: str, max_tokens: Optional[int] = None) -> SplitResult:
        file_path = Path(path)
        if not file_path.is_file():
            raise FileNotFoundError(f"Input file not found: {path}")
        text = file_path.read_text(encoding="utf-8")
        # Normalize Windows backslashes for cross-platform compatibility
        document_id = Path(str(path).replace("\\", "/")).stem
        return self.split_text(
            text,
            document_id=document_id,
            max_tokens=max_tokens,
            source_file=str(path),
        )

    def split_and_save(
        self, path: str, max_tokens: Optional[int] = None
    ) -> tuple[SplitResult, str]:
        result = self.split_file(path, max_tokens)
        output_path = self.build_output_path(result.document_id)
        result.save(str(output_path))
        logger.info(f"Saved {result.total_chunks} chunks to {output_path}")
        return result, str(output_path)

    def build_output_path(self, document_id: str) -> Path:
        """Timestamped result path under {data_dir}/{document_id}/chunks/."""
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
        chunk_dir = self.data_dir / document_id / "chunks"
        chunk_dir.mkdir(parents=True, exist_ok=True)
        return chunk_dir / f"{document_id}_{timestamp}.json"

    @staticmethod
    def _compute_stats(
        chunks: list[TextChunk], total_paragraphs: int, max_tokens: int
    ) -> SplitStats:
        if not chunks:
            return SplitStats(total_paragraphs=total_paragraphs)

        token_counts = [c.token_count for c in chunks]
        return SplitStats(
            total_chunks=len(chunks),
            total_tokens=sum(token_counts),
            total_paragraphs=total_paragraphs,
            avg_chunk_tokens=sum(token_counts) / len(token_counts),
            min_chunk_tokens=min(token_counts),
            max_chunk_tokens=max(token_counts),
            oversized_chunks=sum(1 for c in token_counts if c > max_tokens),
        )

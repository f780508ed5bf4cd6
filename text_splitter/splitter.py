"""
Text Splitter - token-bounded chunking with cascading fallback

Splits a document into chunks that fit a token budget while keeping
paragraph, sentence and word boundaries intact wherever possible.

Algorithm:
1. Split the document into paragraphs at blank lines.
2. A paragraph that fits the budget is emitted whole.
3. A paragraph over budget is split into sentences, which are greedily
   packed into chunks up to the budget.
4. A single sentence over budget is split into words, which are greedily
   packed into chunks of at most max_tokens words.

Chunks are returned in document order. Nothing is merged across paragraphs.

Usage:
    from text_splitter import TextSplitter

    splitter = TextSplitter()
    chunks = splitter.split(document, max_tokens=256)
"""

import logging
from typing import Optional

from .annotator import Annotator, Sentence, TiktokenAnnotator
from .exceptions import InvalidArgumentError, SegmentationFailure
from .paragraphs import split_paragraphs

logger = logging.getLogger(__name__)


def _emit(parts: list[str], keep_trailing_space: bool) -> str:
    """Join buffered sentences or words into a chunk."""
    text = " ".join(parts)
    return text + " " if keep_trailing_space else text


def pack_words(
    words: list[str],
    max_tokens: int,
    keep_trailing_space: bool = False,
) -> list[str]:
    """
    Greedily pack words into chunks of at most max_tokens words.

    Args:
        words: Word tokens of one sentence, in order.
        max_tokens: Maximum number of words per chunk.
        keep_trailing_space: Append a space to every chunk.

    Returns:
        List of chunks. The last chunk holds the remainder.
    """
    chunks: list[str] = []
    buffer: list[str] = []

    for word in words:
        if len(buffer) + 1 <= max_tokens:
            buffer.append(word)
        else:
            chunks.append(_emit(buffer, keep_trailing_space))
            buffer = [word]

    if buffer:
        chunks.append(_emit(buffer, keep_trailing_space))

    return chunks


def pack_sentences(
    sentences: list[Sentence],
    max_tokens: int,
    keep_trailing_space: bool = False,
) -> list[str]:
    """
    Greedily pack sentences into chunks of at most max_tokens tokens.

    A sentence that alone exceeds the budget flushes the current chunk and
    is handed to pack_words. The next sentence starts a fresh chunk.

    Args:
        sentences: Annotated sentences of one paragraph, in order.
        max_tokens: Token budget per chunk.
        keep_trailing_space: Append a space to every chunk.

    Returns:
        List of chunks in sentence order.
    """
    chunks: list[str] = []
    buffer: list[str] = []
    running_tokens = 0

    for sentence in sentences:
        tokens = sentence.token_count

        if tokens > max_tokens:
            if buffer:
                chunks.append(_emit(buffer, keep_trailing_space))
                buffer = []
            running_tokens = 0
            logger.debug(f"Sentence of {tokens} tokens exceeds budget, packing by words")
            chunks.extend(pack_words(sentence.words, max_tokens, keep_trailing_space))
        elif running_tokens + tokens <= max_tokens:
            buffer.append(sentence.text)
            running_tokens += tokens
        else:
            if buffer:
                chunks.append(_emit(buffer, keep_trailing_space))
            buffer = [sentence.text]
            running_tokens = tokens

    if buffer:
        chunks.append(_emit(buffer, keep_trailing_space))

    return chunks


def pack_paragraph(
    paragraph: str,
    max_tokens: int,
    annotator: Annotator,
    paragraph_index: int = 0,
    keep_trailing_space: bool = False,
) -> list[str]:
    """
    Chunk a single paragraph.

    The paragraph is emitted verbatim if it fits the budget, otherwise it is
    decomposed into sentences.

    Raises:
        SegmentationFailure: If the annotator fails on the paragraph or
            returns counts that cannot be used.
    """
    try:
        token_count = annotator.token_count(paragraph)
    except Exception as exc:
        raise SegmentationFailure(
            paragraph_index=paragraph_index,
            text_length=len(paragraph),
            original_error=exc,
        ) from exc

    if not isinstance(token_count, int) or token_count < 0:
        raise SegmentationFailure(
            paragraph_index=paragraph_index,
            text_length=len(paragraph),
            original_error=ValueError(f"invalid token count {token_count!r}"),
        )

    if token_count <= max_tokens:
        return [paragraph]

    logger.debug(
        f"Paragraph {paragraph_index} has {token_count} tokens "
        f"(budget {max_tokens}), packing by sentences"
    )

    try:
        sentences = annotator.sentences(paragraph)
    except Exception as exc:
        raise SegmentationFailure(
            paragraph_index=paragraph_index,
            text_length=len(paragraph),
            original_error=exc,
        ) from exc

    for sentence_index, sentence in enumerate(sentences):
        _check_sentence(sentence, max_tokens, paragraph_index, sentence_index)

    return pack_sentences(sentences, max_tokens, keep_trailing_space)


def _check_sentence(
    sentence: Sentence,
    max_tokens: int,
    paragraph_index: int,
    sentence_index: int,
) -> None:
    """Reject annotator output that would make the packers drop content."""
    problem = None
    if not isinstance(sentence.token_count, int) or sentence.token_count < 0:
        problem = f"invalid token count {sentence.token_count!r}"
    elif sentence.token_count > max_tokens and not sentence.words:
        problem = "oversized sentence has no word tokens"

    if problem:
        raise SegmentationFailure(
            paragraph_index=paragraph_index,
            sentence_index=sentence_index,
            text_length=len(sentence.text),
            original_error=ValueError(problem),
        )


class TextSplitter:
    """
    Splits documents into token-bounded chunks.

    The annotator is created once per splitter and shared by all split()
    calls. Each call keeps its buffers local, so one splitter can serve
    concurrent callers.
    """

    def __init__(
        self,
        annotator: Optional[Annotator] = None,
        keep_trailing_space: bool = False,
    ):
        self.annotator = annotator or TiktokenAnnotator()
        self.keep_trailing_space = keep_trailing_space

    def split(self, document: str, max_tokens: int) -> list[str]:
        """
        Split a document into chunks of at most max_tokens tokens.

        Args:
            document: Text to split. Paragraphs are separated by blank lines.
            max_tokens: Token budget per chunk (>= 1).

        Returns:
            List of chunk strings in document order. Empty input returns an
            empty list.

        Raises:
            InvalidArgumentError: If document is not a string or max_tokens
                is not a positive integer.
            SegmentationFailure: If the annotator fails on any span. No
                partial result is returned.
        """
        self._validate(document, max_tokens)

        paragraphs = split_paragraphs(document)
        logger.debug(f"Max tokens: {max_tokens}, paragraphs: {len(paragraphs)}")

        chunks: list[str] = []
        for index, paragraph in enumerate(paragraphs):
            chunks.extend(
                pack_paragraph(
                    paragraph,
                    max_tokens,
                    self.annotator,
                    paragraph_index=index,
                    keep_trailing_space=self.keep_trailing_space,
                )
            )

        logger.debug(f"Total chunks: {len(chunks)}")
        return chunks

    @staticmethod
    def _validate(document: str, max_tokens: int) -> None:
        if document is None or not isinstance(document, str):
            raise InvalidArgumentError("document", document, "expected a string")
        if isinstance(max_tokens, bool) or not isinstance(max_tokens, int):
            raise InvalidArgumentError("max_tokens", max_tokens, "expected an integer")
        if max_tokens < 1:
            raise InvalidArgumentError("max_tokens", max_tokens, "must be at least 1")

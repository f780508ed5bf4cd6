"""
Annotators - token counts and sentence/word boundaries for the splitter

The splitter never tokenizes text itself. It asks an annotator for:
- the token count of a span
- the sentences of a span, each with its token count and word tokens

Two annotators are provided:
- TiktokenAnnotator: BPE token counts via tiktoken (default)
- WhitespaceAnnotator: one token per whitespace-separated word

Usage:
    from text_splitter.annotator import create_annotator

    annotator = create_annotator("tiktoken")
    annotator.token_count("Hello world.")
    annotator.sentences("First one. Second one.")
"""

from dataclasses import dataclass, field
from typing import Protocol

import tiktoken

from .exceptions import InvalidArgumentError
from .sentence_splitter import split_sentences
from .token_counter import DEFAULT_ENCODING, get_encoder

ANNOTATOR_NAMES = ("tiktoken", "whitespace")


@dataclass(frozen=True)
class Sentence:
    """A sentence as seen by the annotator."""
    text: str
    token_count: int
    words: list[str] = field(default_factory=list)


class Annotator(Protocol):
    def token_count(self, text: str) -> int:
        ...

    def sentences(self, text: str) -> list[Sentence]:
        ...


class WhitespaceAnnotator:
    """Counts one token per whitespace-separated word."""

    def token_count(self, text: str) -> int:
        return len(text.split())

    def sentences(self, text: str) -> list[Sentence]:
        result = []
        for sentence in split_sentences(text):
            words = sentence.split()
            result.append(Sentence(text=sentence, token_count=len(words), words=words))
        return result


class TiktokenAnnotator:
    """
    Counts tokens with a tiktoken encoding.

    Word tokens are the whitespace-separated words of each sentence. A word
    that encodes to more than one token is replaced by its token pieces, so
    every word token handed to the word-level fallback costs one token.
    Concatenating the pieces of a word gives back the word.
    """

    def __init__(self, encoding_name: str = DEFAULT_ENCODING):
        self.encoding_name = encoding_name
        self._encoder: tiktoken.Encoding | None = None

    @property
    def encoder(self) -> tiktoken.Encoding:
        if self._encoder is None:
            self._encoder = get_encoder(self.encoding_name)
        return self._encoder

    def _encode(self, text: str) -> list[int]:
        # Special-token markup in documents is ordinary text here
        return self.encoder.encode(text, disallowed_special=())

    def token_count(self, text: str) -> int:
        if not text:
            return 0
        return len(self._encode(text))

    def word_tokens(self, text: str) -> list[str]:
        words: list[str] = []
        for word in text.split():
            tokens = self._encode(word)
            if len(tokens) <= 1:
                words.append(word)
            else:
                words.extend(self._token_pieces(tokens))
        return words

    def _token_pieces(self, tokens: list[int]) -> list[str]:
        """Decode tokens one by one, holding back bytes of split characters."""
        pieces: list[str] = []
        pending = b""
        for token in tokens:
            pending += self.encoder.decode_single_token_bytes(token)
            try:
                piece = pending.decode("utf-8")
            except UnicodeDecodeError:
                continue
            pieces.append(piece)
            pending = b""
        if pending:
            pieces.append(pending.decode("utf-8", errors="replace"))
        return pieces

    def sentences(self, text: str) -> list[Sentence]:
        result = []
        for sentence in split_sentences(text):
            result.append(
                Sentence(
                    text=sentence,
                    token_count=self.token_count(sentence),
                    words=self.word_tokens(sentence),
                )
            )
        return result


def create_annotator(name: str = "tiktoken", encoding_name: str = DEFAULT_ENCODING) -> Annotator:
    """
    Build an annotator by name.

    Args:
        name: "tiktoken" or "whitespace".
        encoding_name: tiktoken encoding, used by the tiktoken annotator only.

    Raises:
        InvalidArgumentError: If the name is unknown.
    """
    if name == "tiktoken":
        return TiktokenAnnotator(encoding_name)
    if name == "whitespace":
        return WhitespaceAnnotator()
    raise InvalidArgumentError(
        "annotator", name, f"expected one of {', '.join(ANNOTATOR_NAMES)}"
    )

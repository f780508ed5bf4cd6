"""
Token Counter for the Text Splitter

Uses tiktoken BPE encodings (cl100k_base by default) to count tokens the
way embedding and chat models see them.

Usage:
    from text_splitter.token_counter import count_tokens, count_tokens_batch

    n = count_tokens("This is an example sentence.")
    counts = count_tokens_batch(["Sentence one.", "Sentence two."])
"""

import tiktoken

DEFAULT_ENCODING = "cl100k_base"

# Encoders are loaded once per encoding name and reused across calls.
_encoders: dict[str, tiktoken.Encoding] = {}


def get_encoder(encoding_name: str = DEFAULT_ENCODING) -> tiktoken.Encoding:
    """Get or initialize the tiktoken encoder for an encoding name."""
    encoder = _encoders.get(encoding_name)
    if encoder is None:
        encoder = tiktoken.get_encoding(encoding_name)
        _encoders[encoding_name] = encoder
    return encoder


def count_tokens(text: str, encoding_name: str = DEFAULT_ENCODING) -> int:
    """
    Count the number of tokens in a text string.

    Args:
        text: The text to tokenize.
        encoding_name: tiktoken encoding to use.

    Returns:
        Number of tokens.
    """
    if not text:
        return 0
    return len(get_encoder(encoding_name).encode(text, disallowed_special=()))


def count_tokens_batch(
    texts: list[str], encoding_name: str = DEFAULT_ENCODING
) -> list[int]:
    """
    Count tokens for a list of texts.

    Args:
        texts: List of text strings.
        encoding_name: tiktoken encoding to use.

    Returns:
        List of token counts, one per input text.
    """
    encoder = get_encoder(encoding_name)
    return [len(encoder.encode(t, disallowed_special=())) if t else 0 for t in texts]

"""Tests for text_splitter.annotator."""

import pytest

from text_splitter.annotator import (
    Sentence,
    TiktokenAnnotator,
    WhitespaceAnnotator,
    create_annotator,
)
from text_splitter.exceptions import InvalidArgumentError
from text_splitter.token_counter import count_tokens


class TestWhitespaceAnnotator:
    def test_token_count(self):
        assert WhitespaceAnnotator().token_count("one  two\nthree") == 3

    def test_empty(self):
        annotator = WhitespaceAnnotator()
        assert annotator.token_count("") == 0
        assert annotator.sentences("") == []

    def test_sentences(self):
        result = WhitespaceAnnotator().sentences("First one here. Second one.")
        assert result == [
            Sentence(text="First one here.", token_count=3, words=["First", "one", "here."]),
            Sentence(text="Second one.", token_count=2, words=["Second", "one."]),
        ]


class TestTiktokenAnnotator:
    def test_token_count_matches_counter(self):
        annotator = TiktokenAnnotator()
        text = "The Eiffel Tower was completed in 1889."
        assert annotator.token_count(text) == count_tokens(text)

    def test_empty(self):
        assert TiktokenAnnotator().token_count("") == 0

    def test_sentences_carry_bpe_counts_and_words(self):
        sentences = TiktokenAnnotator().sentences(
            "Photosynthesis converts sunlight. Honey never spoils."
        )
        assert [s.text for s in sentences] == [
            "Photosynthesis converts sunlight.",
            "Honey never spoils.",
        ]
        assert "".join(sentences[0].words) == "Photosynthesisconvertssunlight."
        assert sentences[0].token_count == count_tokens("Photosynthesis converts sunlight.")

    def test_every_word_token_costs_one_token(self):
        words = TiktokenAnnotator().word_tokens(
            "Antidisestablishmentarianism pneumonoultramicroscopic floccinaucinihilipilification."
        )
        assert len(words) > 3
        assert all(count_tokens(word) == 1 for word in words)

    def test_single_token_words_kept_whole(self):
        assert TiktokenAnnotator().word_tokens("the cat sat") == ["the", "cat", "sat"]

    def test_word_pieces_rebuild_the_word(self):
        word = "Pneumonoultramicroscopic"
        pieces = TiktokenAnnotator().word_tokens(word)
        assert len(pieces) > 1
        assert "".join(pieces) == word

    def test_non_ascii_word_pieces_are_valid_text(self):
        word = "Überraschungsmomentträger"
        assert "".join(TiktokenAnnotator().word_tokens(word)) == word

    def test_special_token_markup_is_counted_as_text(self):
        assert TiktokenAnnotator().token_count("before <|endoftext|> after") > 3

    def test_encoder_loaded_lazily(self):
        annotator = TiktokenAnnotator("cl100k_base")
        assert annotator._encoder is None
        annotator.token_count("load it")
        assert annotator._encoder is not None


class TestCreateAnnotator:
    def test_tiktoken(self):
        annotator = create_annotator("tiktoken", "p50k_base")
        assert isinstance(annotator, TiktokenAnnotator)
        assert annotator.encoding_name == "p50k_base"

    def test_whitespace(self):
        assert isinstance(create_annotator("whitespace"), WhitespaceAnnotator)

    def test_unknown_name(self):
        with pytest.raises(InvalidArgumentError, match="annotator"):
            create_annotator("corenlp")

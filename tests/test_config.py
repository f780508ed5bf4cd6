"""Tests for text_splitter.config."""

import pytest
from pydantic import ValidationError

from text_splitter.config import SplitterServiceConfig


class TestFromEnv:
    def test_defaults_without_variables(self):
        config = SplitterServiceConfig.from_env({})

        assert config.data_dir == "data/splitter"
        assert config.splitter.max_tokens == 256
        assert config.splitter.annotator == "tiktoken"
        assert config.splitter.keep_trailing_space is False

    def test_reads_prefixed_variables(self):
        config = SplitterServiceConfig.from_env({
            "TEXT_SPLITTER_DATA_DIR": "/srv/chunks",
            "TEXT_SPLITTER_MAX_TOKENS": "64",
            "TEXT_SPLITTER_ANNOTATOR": "whitespace",
            "TEXT_SPLITTER_ENCODING": "o200k_base",
            "TEXT_SPLITTER_KEEP_TRAILING_SPACE": "true",
        })

        assert config.data_dir == "/srv/chunks"
        assert config.splitter.max_tokens == 64
        assert config.splitter.annotator == "whitespace"
        assert config.splitter.encoding_name == "o200k_base"
        assert config.splitter.keep_trailing_space is True

    def test_reads_process_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TEXT_SPLITTER_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("TEXT_SPLITTER_MAX_TOKENS", "12")

        config = SplitterServiceConfig.from_env()

        assert config.data_dir == str(tmp_path)
        assert config.splitter.max_tokens == 12

    def test_empty_values_keep_defaults(self):
        config = SplitterServiceConfig.from_env({"TEXT_SPLITTER_MAX_TOKENS": ""})
        assert config.splitter.max_tokens == 256

    @pytest.mark.parametrize("name, value", [
        ("TEXT_SPLITTER_MAX_TOKENS", "0"),
        ("TEXT_SPLITTER_MAX_TOKENS", "many"),
        ("TEXT_SPLITTER_ANNOTATOR", "spacy"),
    ])
    def test_invalid_values_rejected(self, name, value):
        with pytest.raises(ValidationError):
            SplitterServiceConfig.from_env({name: value})

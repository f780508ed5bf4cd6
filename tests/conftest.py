"""
Pytest fixtures for text splitter tests.
"""

import pytest

from text_splitter import (
    SplitterConfig,
    SplitterService,
    SplitterServiceConfig,
    TextSplitter,
    WhitespaceAnnotator,
)


@pytest.fixture
def whitespace_annotator():
    """Annotator counting one token per whitespace-separated word."""
    return WhitespaceAnnotator()


@pytest.fixture
def splitter(whitespace_annotator):
    """A splitter with trimmed output and word-count budgets."""
    return TextSplitter(whitespace_annotator)


@pytest.fixture
def service_config(tmp_path):
    """Service configuration writing into a temporary directory."""
    return SplitterServiceConfig(
        data_dir=str(tmp_path / "data"),
        splitter=SplitterConfig(max_tokens=3, annotator="whitespace"),
    )


@pytest.fixture
def service(service_config):
    return SplitterService(service_config)


@pytest.fixture
def sample_document():
    """A document with short paragraphs, a long paragraph and a run-on sentence."""
    return (
        "The Eiffel Tower was completed in 1889.\n"
        "It stands in Paris.\n"
        "\n"
        "Photosynthesis allows plants to convert sunlight into energy. "
        "Dr. Einstein developed the theory of relativity. "
        "The mitochondrion is often called the powerhouse of the cell.\n"
        "\n"
        "\n"
        "Lake Superior is the largest freshwater lake in the world by surface "
        "area and the third largest freshwater lake by volume holding ten "
        "percent of the fresh water in all of the rivers and lakes of the world."
    )

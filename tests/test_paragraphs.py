"""Tests for text_splitter.paragraphs."""

from text_splitter.paragraphs import split_paragraphs


class TestSplitParagraphs:
    def test_empty_string(self):
        assert split_paragraphs("") == []

    def test_whitespace_only(self):
        assert split_paragraphs(" \n\n \t\n") == []

    def test_none_input(self):
        assert split_paragraphs(None) == []

    def test_single_paragraph(self):
        assert split_paragraphs("Just one paragraph.") == ["Just one paragraph."]

    def test_one_blank_line(self):
        result = split_paragraphs("First.\n\nSecond.")
        assert result == ["First.", "Second."]

    def test_several_blank_lines_are_one_break(self):
        result = split_paragraphs("First.\n\n\n\nSecond.")
        assert result == ["First.", "Second."]

    def test_whitespace_only_line_is_blank(self):
        result = split_paragraphs("First.\n   \t\nSecond.")
        assert result == ["First.", "Second."]

    def test_windows_line_endings(self):
        result = split_paragraphs("First.\r\n\r\nSecond.")
        assert result == ["First.", "Second."]

    def test_single_newline_stays_in_paragraph(self):
        result = split_paragraphs("Line one\nline two")
        assert result == ["Line one\nline two"]

    def test_paragraphs_are_stripped(self):
        result = split_paragraphs("\n\n  First.  \n\n  Second.\n\n")
        assert result == ["First.", "Second."]

    def test_inner_spacing_preserved(self):
        result = split_paragraphs("Keep   these  spaces.")
        assert result == ["Keep   these  spaces."]

    def test_leading_indentation_dropped(self):
        result = split_paragraphs("    Indented first line.\n\nNext.")
        assert result == ["Indented first line.", "Next."]

    def test_indentation_of_later_lines_kept(self):
        result = split_paragraphs("  def f():\n      return 1\n\nNext.")
        assert result == ["def f():\n      return 1", "Next."]

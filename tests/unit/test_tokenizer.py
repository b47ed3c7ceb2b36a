"""Unit tests for command-line tokenization."""

import pytest

from bookstore_kernel.domain.tokenizer import split_command_line


class TestSplitCommandLine:
    def test_whitespace_separated(self):
        assert split_command_line("su root sjtu") == ["su", "root", "sjtu"]

    def test_runs_of_whitespace_and_newline(self):
        assert split_command_line("  buy   001\t3 \n") == ["buy", "001", "3"]

    @pytest.mark.parametrize("line", ["", "   ", "\n", "\t \r\n"])
    def test_blank_lines(self, line):
        assert split_command_line(line) == []

    def test_quoted_value_mid_token(self):
        assert split_command_line('modify -name="Book One" -price=9.99') == [
            "modify",
            "-name=Book One",
            "-price=9.99",
        ]

    def test_quotes_dropped(self):
        assert split_command_line('"abc"') == ["abc"]

    def test_empty_quotes_produce_no_token(self):
        assert split_command_line('show ""') == ["show"]

    def test_unterminated_quote_runs_to_end(self):
        assert split_command_line('register u p "Jane Doe') == ["register", "u", "p", "Jane Doe"]

    def test_adjacent_quoted_segments_join(self):
        assert split_command_line('a"b c"d') == ["ab cd"]

    def test_vertical_tab_and_form_feed_separate(self):
        assert split_command_line("show\x0b-ISBN=1\x0c") == ["show", "-ISBN=1"]

    @pytest.mark.parametrize("sep", ["\x1c", "\x1f", "\x85", "\xa0", "　"])
    def test_non_ascii_separators_stay_in_token(self, sep):
        assert split_command_line(f"su{sep}root sjtu") == [f"su{sep}root", "sjtu"]

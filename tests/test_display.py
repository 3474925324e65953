"""Tests for terminal rendering."""

from __future__ import annotations

from wordhunt.display import print_results, render_grid, render_path, render_words
from wordhunt.grid import Grid
from wordhunt.ranking import rank
from wordhunt.solver import search


class TestRenderGrid:
    def test_letters(self, cats_grid) -> None:
        assert render_grid(cats_grid) == "C A\nT S"

    def test_blanks_shown(self) -> None:
        assert render_grid(Grid.from_rows(["C.", "AT"])) == "C .\nA T"


class TestRenderPath:
    def test_step_numbers(self, cats_grid) -> None:
        assert render_path(cats_grid, ((0, 0), (0, 1), (1, 0))) == "1 2\n3 ."

    def test_wide_step_numbers(self) -> None:
        grid = Grid.from_letters("A" * 12, 2, 6)
        path = tuple((0, c) for c in range(6)) + tuple((1, c) for c in reversed(range(6)))
        lines = render_path(grid, path).splitlines()
        assert lines[0] == " 1  2  3  4  5  6"
        assert lines[1] == "12 11 10  9  8  7"


class TestRenderWords:
    def test_words_with_points(self, cats_grid, cats_lexicon) -> None:
        ranked = rank(search(cats_grid, cats_lexicon, min_length=2))
        lines = render_words(ranked).splitlines()
        assert [line.split() for line in lines] == [["CATS", "400"], ["CAT", "100"], ["AT", "0"]]

    def test_limit(self, cats_grid, cats_lexicon) -> None:
        ranked = rank(search(cats_grid, cats_lexicon, min_length=2))
        assert len(render_words(ranked, 2).splitlines()) == 2

    def test_empty(self) -> None:
        assert render_words([]) == "No words found."


class TestPrintResults:
    def test_fits_terminal_height(self, cats_grid, cats_lexicon, capsys) -> None:
        ranked = rank(search(cats_grid, cats_lexicon, min_length=2))
        # 3 reserved + 2 grid rows + 2 header lines leaves room for one word
        print_results(cats_grid, ranked, height=8)
        out = capsys.readouterr().out
        assert "3 words, 500 points (showing 1)" in out
        assert out.strip().splitlines()[-1].split() == ["CATS", "400"]

    def test_everything_fits(self, cats_grid, cats_lexicon, capsys) -> None:
        ranked = rank(search(cats_grid, cats_lexicon, min_length=2))
        print_results(cats_grid, ranked, height=50)
        out = capsys.readouterr().out
        assert "showing" not in out
        assert out.strip().splitlines()[-1].split() == ["AT", "0"]

    def test_no_room_for_words(self, cats_grid, cats_lexicon, capsys) -> None:
        ranked = rank(search(cats_grid, cats_lexicon, min_length=2))
        print_results(cats_grid, ranked, height=3)
        out = capsys.readouterr().out
        assert "(showing 0)" in out
        assert "CATS" not in out

    def test_no_words(self, cats_grid, capsys) -> None:
        print_results(cats_grid, [], height=20)
        out = capsys.readouterr().out
        assert "0 words, 0 points" in out
        assert "No words found." in out

    def test_ranked_list_untouched(self, cats_grid, cats_lexicon, capsys) -> None:
        ranked = rank(search(cats_grid, cats_lexicon, min_length=2))
        before = list(ranked)
        print_results(cats_grid, ranked, height=8)
        assert ranked == before

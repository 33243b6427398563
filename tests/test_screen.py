"""Tests for the double-buffered ScreenBuffer."""

import pytest

from termgrid.core.cell import Cell
from termgrid.core.color import Color
from termgrid.core.constants import BorderStyle
from termgrid.core.rect import Rect
from termgrid.render.encoder import TerminalEncoder
from termgrid.render.screen import ScreenBuffer

from conftest import RecordingStream

CELL_ENCODE = TerminalEncoder.encode_cell_at


def settle(screen: ScreenBuffer, output: RecordingStream) -> None:
    """Flush the initial full redraw and forget its output."""
    screen.flush()
    output.reset()


class TestScreenDrawing:
    """Tests for drawing into the back grid."""

    def test_new_screen_is_blank(self, screen: ScreenBuffer) -> None:
        assert all(cell == Cell.EMPTY for row in screen.back_rows() for cell in row)
        assert screen.row_text(0) == " " * 10

    def test_set_and_get(self, screen: ScreenBuffer) -> None:
        screen.set_cell(3, 2, Cell('X'))
        assert screen.get_cell(3, 2) == Cell('X')

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (10, 0), (0, 4), (99, 99)])
    def test_out_of_bounds_is_ignored(self, screen: ScreenBuffer, x: int, y: int) -> None:
        screen.set_cell(x, y, Cell('X'))
        assert screen.get_cell(x, y) is None
        assert all(cell == Cell.EMPTY for row in screen.back_rows() for cell in row)

    def test_write_text_clips_without_wrapping(self, screen: ScreenBuffer) -> None:
        screen.write_text(7, 1, "hello")
        assert screen.row_text(1) == "       hel"
        assert screen.row_text(2) == " " * 10

    def test_write_text_clips_left_edge(self, screen: ScreenBuffer) -> None:
        screen.write_text(-2, 0, "abcd", bold=True)
        assert screen.row_text(0).startswith("cd ")
        assert screen.get_cell(0, 0) == Cell('c', bold=True)

    def test_write_text_off_screen_row(self, screen: ScreenBuffer) -> None:
        screen.write_text(0, 4, "nope")
        screen.write_text(0, -1, "nope")
        assert "nope" not in "".join(screen.row_text(y) for y in range(4))

    def test_fill_rect(self, screen: ScreenBuffer) -> None:
        screen.fill_rect(Rect(1, 1, 3, 2), '#', Color.RED, Color.BLUE)
        assert screen.get_cell(1, 1) == Cell('#', Color.RED, Color.BLUE)
        assert screen.get_cell(3, 2) == Cell('#', Color.RED, Color.BLUE)
        assert screen.get_cell(4, 1) == Cell.EMPTY
        assert screen.get_cell(1, 3) == Cell.EMPTY

    def test_fill_rect_clips(self, screen: ScreenBuffer) -> None:
        screen.fill_rect(Rect(-5, -5, 100, 100), '.', Color.WHITE, Color.BLACK)
        assert all(cell.char == '.' for row in screen.back_rows() for cell in row)

    def test_transparent_fill_is_noop(self, screen: ScreenBuffer) -> None:
        screen.write_text(0, 0, "keep")
        screen.fill_rect(Rect(0, 0, 10, 4), '#', Color.RED, Color.TRANSPARENT)
        assert screen.row_text(0) == "keep      "
        assert screen.get_cell(5, 2) == Cell.EMPTY

    @pytest.mark.parametrize("rect", [Rect(0, 0, 0, 3), Rect(0, 0, 3, 0), Rect(1, 1, -2, 2)])
    def test_degenerate_fill_is_noop(self, screen: ScreenBuffer, rect: Rect) -> None:
        screen.fill_rect(rect, '#', Color.RED, Color.BLACK)
        assert all(cell == Cell.EMPTY for row in screen.back_rows() for cell in row)

    def test_draw_border(self, screen: ScreenBuffer) -> None:
        screen.draw_border(Rect(0, 0, 4, 3))
        assert screen.row_text(0)[:4] == "┌──┐"
        assert screen.row_text(1)[:4] == "│  │"
        assert screen.row_text(2)[:4] == "└──┘"

    def test_draw_border_styles(self, screen: ScreenBuffer) -> None:
        screen.draw_border(Rect(0, 0, 3, 2), style=BorderStyle.DOUBLE)
        assert screen.row_text(0)[:3] == "╔═╗"
        screen.clear()
        screen.draw_border(Rect(0, 0, 3, 2), style=BorderStyle.ROUNDED)
        assert screen.row_text(1)[:3] == "╰─╯"
        screen.clear()
        screen.draw_border(Rect(0, 0, 3, 2), style=BorderStyle.NONE)
        assert screen.row_text(0) == " " * 10

    def test_clear_resets_back_grid(self, screen: ScreenBuffer) -> None:
        screen.write_text(0, 0, "abc")
        screen.clear()
        assert screen.row_text(0) == " " * 10


class TestScreenFlush:
    """Tests for diffing and flushing to the output stream."""

    def test_first_flush_writes_every_cell(self, screen: ScreenBuffer, output: RecordingStream) -> None:
        assert screen.flush() == 40
        text = output.getvalue()
        assert text.startswith("\x1b[?25l")
        assert text.endswith("\x1b[?25h")
        assert text.count("\x1b[0m") == 40

    def test_unchanged_frame_writes_nothing(self, screen: ScreenBuffer, output: RecordingStream) -> None:
        settle(screen, output)
        assert screen.flush() == 0
        assert output.getvalue() == ""
        assert output.writes == []

    def test_diff_is_exactly_the_changed_cells(self, screen: ScreenBuffer, output: RecordingStream) -> None:
        settle(screen, output)
        screen.set_cell(2, 1, Cell('A'))
        screen.set_cell(9, 3, Cell('B', Color.RED))
        screen.set_cell(0, 0, Cell.EMPTY)
        assert sorted((x, y) for x, y, _ in screen.diff()) == [(2, 1), (9, 3)]

        assert screen.flush() == 2
        assert output.getvalue() == (
            "\x1b[?25l"
            + CELL_ENCODE(2, 1, Cell('A'))
            + CELL_ENCODE(9, 3, Cell('B', Color.RED))
            + "\x1b[?25h"
        )

    def test_flush_commits_to_front(self, screen: ScreenBuffer, output: RecordingStream) -> None:
        settle(screen, output)
        screen.write_text(0, 0, "hi")
        screen.flush()
        assert screen.get_front_cell(0, 0) == Cell('h')
        output.reset()
        assert screen.flush() == 0

    def test_redrawing_same_content_emits_nothing(self, screen: ScreenBuffer, output: RecordingStream) -> None:
        screen.write_text(0, 0, "same")
        settle(screen, output)
        screen.clear()
        screen.write_text(0, 0, "same")
        assert screen.flush() == 0

    def test_erased_content_is_rewritten_blank(self, screen: ScreenBuffer, output: RecordingStream) -> None:
        screen.write_text(0, 0, "ab")
        settle(screen, output)
        screen.clear()
        assert screen.flush() == 2
        assert screen.get_front_cell(1, 0) == Cell.EMPTY

    def test_style_only_change_is_a_change(self, screen: ScreenBuffer, output: RecordingStream) -> None:
        screen.write_text(0, 0, "x")
        settle(screen, output)
        screen.write_text(0, 0, "x", underline=True)
        assert screen.flush() == 1


class TestScreenResize:
    """Tests for resize and invalidate."""

    def test_resize_forces_full_redraw(self, screen: ScreenBuffer, output: RecordingStream) -> None:
        settle(screen, output)
        screen.resize(6, 3)
        assert (screen.width, screen.height) == (6, 3)
        assert screen.flush() == 18

    def test_resize_to_same_size_still_redraws(self, screen: ScreenBuffer, output: RecordingStream) -> None:
        settle(screen, output)
        screen.resize(10, 4)
        assert screen.flush() == 40

    def test_nul_glyph_flushed_after_resize(self, screen: ScreenBuffer, output: RecordingStream) -> None:
        settle(screen, output)
        screen.resize(2, 1)
        screen.write_text(0, 0, "\x00")
        assert screen.get_front_cell(0, 0) is None
        assert screen.flush() == 2
        assert screen.get_front_cell(0, 0) == Cell("\x00")

    def test_resize_discards_drawing(self, screen: ScreenBuffer) -> None:
        screen.write_text(0, 0, "gone")
        screen.resize(12, 5)
        assert screen.row_text(0) == " " * 12

    def test_resize_to_zero(self, screen: ScreenBuffer, output: RecordingStream) -> None:
        screen.resize(0, 0)
        screen.write_text(0, 0, "x")
        screen.fill_rect(Rect(0, 0, 5, 5), '#', Color.RED, Color.BLACK)
        assert screen.flush() == 0

    def test_invalidate_clears_terminal_and_redraws(self, screen: ScreenBuffer, output: RecordingStream) -> None:
        settle(screen, output)
        screen.invalidate()
        assert output.getvalue() == "\x1b[2J"
        output.reset()
        assert screen.flush() == 40

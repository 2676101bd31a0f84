"""Tests for drawing primitives (no layout involved)."""

import pytest

from cellpane.core.cell import Cell, Style, StyleModifier
from cellpane.core.cursor import Cursor
from cellpane.core.grapheme import GraphemeCluster, iter_clusters, text_width
from cellpane.core.grid import CellGrid
from cellpane.core.window import Window


class TestStyle:
    """Tests for Style and StyleModifier."""

    def test_default_style(self) -> None:
        style = Style()
        assert style.fg == 37
        assert style.bg == 40
        assert style.is_default()

    def test_modifier_overrides_only_given_fields(self) -> None:
        style = StyleModifier(fg=31, bold=True).apply(Style(bg=44))
        assert style == Style(fg=31, bg=44, bold=True)

    def test_toggle_reverse(self) -> None:
        toggle = StyleModifier(toggle_reverse=True)
        assert toggle.apply(Style()).reverse is True
        assert toggle.apply(toggle.apply(Style())).reverse is False

    def test_on_top_of(self) -> None:
        combined = StyleModifier(fg=32).on_top_of(StyleModifier(fg=31, bg=41))
        assert combined.apply(Style()) == Style(fg=32, bg=41)

    def test_toggles_cancel_out(self) -> None:
        toggle = StyleModifier(toggle_reverse=True)
        assert toggle.on_top_of(toggle).apply(Style()).reverse is False


class TestCell:
    """Tests for Cell."""

    def test_default_cell(self) -> None:
        cell = Cell()
        assert cell.char == ' '
        assert cell.is_default()
        assert not cell.is_continuation

    def test_copy(self) -> None:
        cell = Cell('X', Style(fg=31))
        copy = cell.copy()
        assert copy == cell
        assert copy is not cell

    def test_continuation(self) -> None:
        assert Cell('').is_continuation


class TestGrapheme:
    """Tests for grapheme clusters and width measurement."""

    def test_ascii(self) -> None:
        assert GraphemeCluster('a').width == 1

    def test_wide(self) -> None:
        assert GraphemeCluster('中').width == 2

    def test_combining_mark_joins_base(self) -> None:
        assert list(iter_clusters('he\u0301llo')) == ['h', 'e\u0301', 'l', 'l', 'o']
        assert GraphemeCluster('e\u0301').width == 1

    @pytest.mark.parametrize("text", ['', 'ab', '\u0301', '\n'])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            GraphemeCluster(text)

    def test_text_width(self) -> None:
        assert text_width('he\u0301llo') == 5
        assert text_width('中文') == 4
        assert text_width('') == 0


class TestCellGrid:
    """Tests for CellGrid."""

    def test_empty_grid(self) -> None:
        grid = CellGrid.with_size((3, 2))
        assert grid.width == 3
        assert grid.height == 2
        assert all(cell.is_default() for _, _, cell in grid.cells())

    def test_get_set(self) -> None:
        grid = CellGrid.with_size((3, 2))
        grid[2, 1] = Cell('Z')
        assert grid.get(2, 1).char == 'Z'

    def test_out_of_bounds(self) -> None:
        grid = CellGrid.with_size((3, 2))
        with pytest.raises(IndexError):
            grid.get(3, 0)
        with pytest.raises(IndexError):
            grid.set(0, 2, Cell())

    def test_from_str(self) -> None:
        grid = CellGrid.from_str((2, 2), "ab cd")
        assert grid.row_text(0) == "ab"
        assert grid.row_text(1) == "cd"
        assert str(grid) == "ab\ncd"

    def test_from_str_wide(self) -> None:
        grid = CellGrid.from_str((3, 1), "a中")
        assert grid.get(1, 0).char == '中'
        assert grid.get(2, 0).is_continuation

    @pytest.mark.parametrize("description", ["ab", "ab cde", "ab c"])
    def test_from_str_size_mismatch(self, description: str) -> None:
        with pytest.raises(ValueError):
            CellGrid.from_str((2, 2), description)

    def test_equality(self) -> None:
        assert CellGrid.from_str((2, 1), "xy") == CellGrid.from_str((2, 1), "xy")
        assert CellGrid.from_str((2, 1), "xy") != CellGrid.from_str((2, 1), "yx")

    def test_str_keeps_whitespace(self, make_grid) -> None:
        grid = make_grid(3, 2)
        grid[0, 0] = Cell('a')
        assert str(grid) == "a  \n   "

    def test_str_prints_wide_clusters_once(self, make_grid) -> None:
        assert str(make_grid(3, 1, "中x")) == "中x"

    def test_overwriting_tail_of_wide_cluster(self, make_grid) -> None:
        grid = make_grid(3, 1)
        grid.put_cluster(0, 0, '中', Style())
        grid.put_cluster(1, 0, 'a', Style())
        assert grid.row_text(0) == " a "
        assert not grid.get(1, 0).is_continuation

    def test_overwriting_head_of_wide_cluster(self, make_grid) -> None:
        grid = make_grid(3, 1)
        grid.put_cluster(1, 0, '中', Style())
        grid.put_cluster(1, 0, 'a', Style())
        assert grid.row_text(0) == " a "

    def test_wide_over_wide_offset_by_one(self, make_grid) -> None:
        grid = make_grid(4, 1, "中中")
        grid.put_cluster(1, 0, '文', Style())
        assert grid.row_text(0) == " 文 "
        assert len(str(grid)) == 3

    def test_put_cluster_past_right_edge(self, make_grid) -> None:
        grid = make_grid(2, 1, "ab")
        with pytest.raises(IndexError):
            grid.put_cluster(1, 0, '中', Style())
        assert grid.row_text(0) == "ab"


class TestWindow:
    """Tests for Window regions."""

    def test_root_window_covers_grid(self) -> None:
        window = CellGrid.with_size((5, 3)).create_root_window()
        assert window.get_width() == 5
        assert window.get_height() == 3

    def test_split_horizontal(self) -> None:
        grid = CellGrid.with_size((4, 2))
        left, right = grid.create_root_window().split_horizontal(1)
        assert (left.width, left.height) == (1, 2)
        assert (right.width, right.height) == (3, 2)
        left.fill(GraphemeCluster('a'))
        right.fill(GraphemeCluster('b'))
        assert grid == CellGrid.from_str((4, 2), "abbb abbb")

    def test_split_vertical(self) -> None:
        grid = CellGrid.with_size((2, 3))
        top, bottom = grid.create_root_window().split_vertical(2)
        top.fill(GraphemeCluster('t'))
        bottom.fill(GraphemeCluster('b'))
        assert grid == CellGrid.from_str((2, 3), "tt tt bb")

    def test_split_at_edges(self) -> None:
        window = CellGrid.with_size((3, 1)).create_root_window()
        empty, full = window.split_horizontal(0)
        assert empty.width == 0
        full, empty = full.split_horizontal(3)
        assert full.width == 3
        assert empty.width == 0

    @pytest.mark.parametrize("offset", [-1, 5])
    def test_split_out_of_bounds(self, offset: int) -> None:
        window = CellGrid.with_size((4, 4)).create_root_window()
        with pytest.raises(IndexError):
            window.split_horizontal(offset)
        with pytest.raises(IndexError):
            window.split_vertical(offset)

    def test_split_consumes_parent(self) -> None:
        window = CellGrid.with_size((4, 1)).create_root_window()
        window.split_horizontal(2)
        assert window.consumed
        with pytest.raises(RuntimeError):
            window.get_width()
        with pytest.raises(RuntimeError):
            window.split_horizontal(1)
        with pytest.raises(RuntimeError):
            window.fill(GraphemeCluster('x'))

    def test_window_must_fit_grid(self) -> None:
        grid = CellGrid.with_size((2, 2))
        with pytest.raises(IndexError):
            Window(grid, 1, 0, 2, 2)

    def test_children_inherit_default_style(self) -> None:
        grid = CellGrid.with_size((2, 1))
        window = grid.create_root_window()
        window.modify_default_style(StyleModifier(bg=44))
        left, right = window.split_horizontal(1)
        assert left.default_style.bg == 44
        assert right.default_style.bg == 44

    def test_clear_uses_default_style(self) -> None:
        grid = CellGrid.with_size((2, 1))
        window = grid.create_root_window()
        window.set_default_style(Style(bg=41))
        window.clear()
        assert grid.get(0, 0) == Cell(' ', Style(bg=41))
        assert grid.get(1, 0) == Cell(' ', Style(bg=41))

    def test_fill_wide_cluster_pads_with_spaces(self) -> None:
        grid = CellGrid.with_size((3, 1))
        grid.create_root_window().fill(GraphemeCluster('中'))
        assert grid.row_text(0) == "中 "

    def test_put_cluster_clips(self) -> None:
        grid = CellGrid.with_size((3, 1))
        window = grid.create_root_window()
        assert window.put_cluster(2, 0, GraphemeCluster('a')) is True
        assert window.put_cluster(2, 0, GraphemeCluster('中')) is False
        assert window.put_cluster(0, 1, GraphemeCluster('a')) is False
        assert grid.row_text(0) == "  a"

    def test_put_cluster_over_half_of_wide_cluster(self, make_grid) -> None:
        grid = make_grid(3, 1)
        window = grid.create_root_window()
        window.put_cluster(0, 0, GraphemeCluster('｜'))
        window.put_cluster(1, 0, GraphemeCluster('a'))
        assert grid.row_text(0) == " a "

    def test_get_cell_is_relative(self) -> None:
        grid = CellGrid.from_str((3, 1), "xyz")
        _, right = grid.create_root_window().split_horizontal(1)
        assert right.get_cell(0, 0).char == 'y'


class TestCursor:
    """Tests for writing text through a Cursor."""

    def test_write(self) -> None:
        grid = CellGrid.with_size((5, 1))
        Cursor(grid.create_root_window()).write("hi")
        assert grid.row_text(0) == "hi   "

    def test_clips_at_right_edge(self) -> None:
        grid = CellGrid.with_size((3, 1))
        cursor = Cursor(grid.create_root_window())
        cursor.write("hello")
        assert grid.row_text(0) == "hel"
        assert cursor.x == 5

    def test_wide_cluster_does_not_straddle_edge(self) -> None:
        grid = CellGrid.with_size((4, 1))
        Cursor(grid.create_root_window()).write("a中中")
        assert grid.row_text(0) == "a中 "

    def test_newline(self) -> None:
        grid = CellGrid.with_size((3, 2))
        cursor = Cursor(grid.create_root_window())
        cursor.write("ab\ncd")
        assert grid.row_text(0) == "ab "
        assert grid.row_text(1) == "cd "

    def test_style_modifier(self) -> None:
        grid = CellGrid.with_size((2, 1))
        cursor = Cursor(grid.create_root_window())
        cursor.set_style_modifier(StyleModifier(bold=True))
        cursor.write("a")
        assert grid.get(0, 0).style.bold is True
        assert grid.get(1, 0).style.bold is False

    def test_writes_inside_sub_window(self) -> None:
        grid = CellGrid.with_size((4, 1))
        _, right = grid.create_root_window().split_horizontal(2)
        Cursor(right).write("abc")
        assert grid.row_text(0) == "  ab"

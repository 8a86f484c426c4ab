from __future__ import annotations

import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from hyprtui.layout import (  # noqa: E402
    CELL_HEIGHT,
    centered_rect,
    compute_layout,
    grid_regions,
    hit_test,
    split_span,
    switcher_areas,
    visible_regions,
    wrap_text,
)
from hyprtui.models import Rect  # noqa: E402


class ComputeLayoutTests(unittest.TestCase):
    def test_few_items_use_one_column_per_item(self):
        for count in range(0, 4):
            for width in (75, 80, 100, 200):
                self.assertEqual(compute_layout(width, count).columns, max(count, 1))

    def test_width_breakpoints(self):
        self.assertEqual(compute_layout(79, 10).columns, 2)
        self.assertEqual(compute_layout(80, 10).columns, 3)
        self.assertEqual(compute_layout(119, 10).columns, 3)
        self.assertEqual(compute_layout(120, 10).columns, 4)

    def test_columns_capped_by_min_cell_width(self):
        self.assertEqual(compute_layout(60, 10).columns, 2)
        self.assertEqual(compute_layout(49, 10).columns, 1)
        self.assertEqual(compute_layout(60, 3).columns, 2)

    def test_zero_width_and_zero_items(self):
        layout = compute_layout(0, 0)
        self.assertEqual(layout.columns, 1)
        self.assertEqual(layout.rows, 0)
        self.assertEqual(layout.cell_width, 0)
        self.assertEqual(layout.text_width, 0)
        self.assertEqual(compute_layout(0, 12).columns, 1)

    def test_cell_and_text_width(self):
        layout = compute_layout(100, 5)
        self.assertEqual(layout.cell_width, 100 // 3 - 4)
        self.assertEqual(layout.text_width, 100 // 3 - 8)

    def test_rows_is_ceiling(self):
        for count in range(0, 30):
            layout = compute_layout(150, count)
            self.assertEqual(layout.rows, -(-count // layout.columns))

    def test_width_100_five_items(self):
        layout = compute_layout(100, 5)
        self.assertEqual(layout.columns, 3)
        self.assertEqual(layout.rows, 2)
        regions = grid_regions(Rect(0, 0, 100, 40), 5)
        first_col = regions[0].rect.x
        self.assertEqual(regions[3].rect.x, first_col)
        self.assertEqual(regions[3].rect.y, CELL_HEIGHT)
        self.assertEqual(regions[4].rect.x, regions[1].rect.x)
        self.assertEqual(regions[4].rect.y, CELL_HEIGHT)

    def test_width_200_ten_items(self):
        layout = compute_layout(200, 10)
        self.assertEqual(layout.columns, 4)
        self.assertEqual(layout.rows, 3)


class RegionTests(unittest.TestCase):
    def test_split_span_covers_width_without_gaps(self):
        for total in (0, 7, 80, 101, 203):
            for parts in (1, 2, 3, 4):
                spans = split_span(5, total, parts)
                self.assertEqual(spans[0][0], 5)
                self.assertEqual(sum(size for _, size in spans), total)
                for (x, size), (next_x, _) in zip(spans, spans[1:]):
                    self.assertEqual(x + size, next_x)

    def test_every_index_gets_one_region(self):
        area = Rect(0, 3, 137, 200)
        for count in range(1, 14):
            regions = grid_regions(area, count)
            self.assertEqual([r.index for r in regions], list(range(count)))
            cells = set()
            for region in regions:
                rect = region.rect
                for x in range(rect.x, rect.right):
                    for y in range(rect.y, rect.bottom):
                        self.assertNotIn((x, y), cells)
                        cells.add((x, y))

    def test_row_major_adjacency(self):
        area = Rect(0, 0, 130, 100)
        regions = grid_regions(area, 9)
        columns = compute_layout(130, 9).columns
        for i in range(8):
            current, following = regions[i].rect, regions[i + 1].rect
            if (i + 1) % columns:
                self.assertEqual(current.y, following.y)
                self.assertEqual(current.right, following.x)
            else:
                self.assertEqual(current.bottom, following.y)
                self.assertEqual(following.x, area.x)

    def test_degenerate_areas_have_no_regions(self):
        self.assertEqual(grid_regions(Rect(0, 0, 0, 50), 4), [])
        self.assertEqual(grid_regions(Rect(0, 0, 100, 50), 0), [])

    def test_visible_regions_clip_to_area(self):
        area = Rect(0, 3, 100, 15)
        regions = visible_regions(area, 6)
        self.assertEqual([r.index for r in regions], [0, 1, 2, 3, 4, 5])
        self.assertTrue(all(r.rect.bottom <= area.bottom for r in regions))
        self.assertEqual(regions[3].rect.height, 5)

        short = Rect(0, 3, 100, 10)
        self.assertEqual([r.index for r in visible_regions(short, 6)], [0, 1, 2])


class HitTestTests(unittest.TestCase):
    def test_point_inside_region_returns_its_index(self):
        area = Rect(0, 3, 100, 40)
        for region in grid_regions(area, 5):
            rect = region.rect
            self.assertEqual(hit_test(rect.x + 1, rect.y + 1, area, 5), region.index)
            self.assertEqual(hit_test(rect.right - 1, rect.bottom - 1, area, 5), region.index)

    def test_unassigned_cell_in_last_row_misses(self):
        area = Rect(0, 0, 100, 40)
        regions = grid_regions(area, 5)
        x = regions[2].rect.x + 1
        self.assertIsNone(hit_test(x, CELL_HEIGHT + 1, area, 5))

    def test_outside_points_miss(self):
        area = Rect(0, 3, 100, 40)
        self.assertIsNone(hit_test(10, 1, area, 5))
        self.assertIsNone(hit_test(10, 3 + 2 * CELL_HEIGHT + 1, area, 5))
        self.assertIsNone(hit_test(100, 5, area, 5))

    def test_rows_below_viewport_are_not_hit(self):
        area = Rect(0, 0, 100, 12)
        self.assertIsNone(hit_test(1, 12, area, 9))

    def test_hit_test_agrees_with_rendered_regions(self):
        for width in (40, 79, 80, 119, 120, 250):
            area = Rect(0, 3, width, 60)
            for region in visible_regions(area, 7):
                self.assertEqual(hit_test(region.rect.x, region.rect.y, area, 7), region.index)

    def test_no_items_never_hit(self):
        self.assertIsNone(hit_test(0, 0, Rect(0, 0, 80, 24), 0))


class WrapTextTests(unittest.TestCase):
    def test_empty_text(self):
        for width in (0, 1, 10):
            self.assertEqual(wrap_text("", width, 2), [""])

    def test_zero_width(self):
        self.assertEqual(wrap_text("hello world", 0, 3), [""])

    def test_greedy_packing(self):
        self.assertEqual(wrap_text("the quick brown fox", 10, 5), ["the quick", "brown fox"])

    def test_max_lines_truncates(self):
        lines = wrap_text("one two three four five six", 5, 2)
        self.assertEqual(lines, ["one", "two"])

    def test_long_word_is_hard_split(self):
        lines = wrap_text("supercalifragilisticexpialidocious", 10, 5)
        self.assertEqual([len(line) for line in lines], [10, 10, 10, 4])
        self.assertEqual("".join(lines), "supercalifragilisticexpialidocious")

    def test_long_words_split_into_ceiling_chunks(self):
        for length in (2, 5, 9, 10, 11, 23, 40):
            word = "".join(chr(ord("a") + i % 26) for i in range(length))
            for width in range(1, length):
                expected = -(-length // width)
                lines = wrap_text(word, width, expected + 1)
                self.assertEqual(len(lines), expected, (length, width))
                self.assertTrue(all(len(chunk) <= width for chunk in lines))
                self.assertTrue(all(len(chunk) == width for chunk in lines[:-1]))
                self.assertEqual("".join(lines), word)

    def test_long_word_respects_max_lines(self):
        self.assertEqual(wrap_text("abcdefghij", 3, 2), ["abc", "def"])

    def test_never_exceeds_max_lines(self):
        text = "a bb cccccccccccc d eeeeee fffffffffffffff g"
        for width in range(1, 12):
            for max_lines in range(1, 5):
                lines = wrap_text(text, width, max_lines)
                self.assertTrue(1 <= len(lines) <= max_lines)
                self.assertTrue(all(len(line) <= width for line in lines))

    def test_words_flushed_before_long_word(self):
        self.assertEqual(wrap_text("hi abcdefgh", 4, 4), ["hi", "abcd", "efgh"])


class ScreenAreaTests(unittest.TestCase):
    def test_switcher_areas(self):
        header, body, status = switcher_areas(Rect(0, 0, 120, 40))
        self.assertEqual(header, Rect(0, 0, 120, 3))
        self.assertEqual(body, Rect(0, 3, 120, 36))
        self.assertEqual(status, Rect(0, 39, 120, 1))

    def test_switcher_areas_tiny_terminal(self):
        header, body, status = switcher_areas(Rect(0, 0, 20, 2))
        self.assertEqual(header.height, 2)
        self.assertEqual(body.height, 0)
        self.assertEqual(status.height, 0)

    def test_centered_rect(self):
        self.assertEqual(centered_rect(50, 25, Rect(0, 0, 100, 45)), Rect(25, 10, 50, 25))
        self.assertEqual(centered_rect(50, 25, Rect(0, 0, 30, 10)), Rect(0, 0, 30, 10))


if __name__ == "__main__":
    unittest.main()

"""
Tests for progressbar_layout — bar geometry, tick quantization and placement.
"""
import pytest

from progressbar_layout import (
    Alignment,
    ProgressBarConfig,
    calculate_offset,
    compute_layout,
    round_half_up,
)


def horizontal_config(**overrides):
    options = dict(width=80, border_width=1, border_padding=0, gap=2,
                   vertical=False, height=1.0)
    options.update(overrides)
    return ProgressBarConfig(**options)


def vertical_config(**overrides):
    options = dict(width=50, border_width=1, border_padding=1, gap=2,
                   vertical=True, height=1.0)
    options.update(overrides)
    return ProgressBarConfig(**options)


class TestDefaults:
    def test_config_defaults(self):
        config = ProgressBarConfig()
        assert config.width == 80
        assert config.height == pytest.approx(0.8)
        assert config.gap == 2
        assert config.border_width == 1
        assert config.border_padding == 0
        assert config.ticks_gap == 1
        assert config.ticks_count == 0
        assert config.vertical is False
        assert config.align is Alignment.LEFT
        assert not config.has_ticks


class TestHorizontal:
    def test_single_bar_example(self):
        layout = compute_layout(horizontal_config(), 1, 200, 20)
        assert layout.length == 78
        assert layout.area_width == 80
        assert layout.progress_length(0.5) == 39

    def test_bars_are_stacked(self):
        layout = compute_layout(horizontal_config(), 3, 200, 40)
        # (40 - 3*2 - 2*2) / 3 = 10
        assert layout.thickness == 10
        assert layout.step == 14
        assert layout.bar_origin(0) == (1, 1)
        assert layout.bar_origin(1) == (1, 15)
        assert layout.bar_origin(2) == (1, 29)
        assert layout.bar_size() == (78, 10)

    def test_thickness_is_rounded(self):
        # (20 - 2*2 - 2) / 2 = 7.0, (21 - 6) / 2 = 7.5 -> 8
        assert compute_layout(horizontal_config(), 2, 200, 20).thickness == 7
        assert compute_layout(horizontal_config(), 2, 200, 21).thickness == 8

    def test_padding_shrinks_fill_area(self):
        layout = compute_layout(horizontal_config(border_padding=2), 1, 200, 20)
        assert layout.frame == 3
        assert layout.length == 74
        assert layout.area_width == 80
        assert layout.bar_origin(0) == (3, 3)

    def test_partial_height_centers_bars(self):
        layout = compute_layout(horizontal_config(height=0.5), 1, 200, 40)
        assert layout.origin_y == 10 + 1
        assert layout.thickness == 18


class TestVertical:
    def test_two_bar_example(self):
        layout = compute_layout(vertical_config(), 2, 300, 40)
        assert layout.thickness == 20
        assert layout.area_width == 50

    def test_bars_are_side_by_side(self):
        layout = compute_layout(vertical_config(), 2, 300, 40)
        assert layout.step == 26
        assert layout.bar_origin(0) == (2, 2)
        assert layout.bar_origin(1) == (28, 2)
        assert layout.length == 36
        assert layout.bar_size() == (20, 36)

    def test_length_uses_canvas_height(self):
        layout = compute_layout(vertical_config(border_padding=0), 1, 300, 42)
        assert layout.length == 40

    def test_single_bar_takes_whole_width(self):
        layout = compute_layout(vertical_config(width=20, border_padding=0), 1, 300, 42)
        assert layout.thickness == 18
        assert layout.area_width == 20


class TestTicks:
    def test_horizontal_length_snaps_to_ticks(self):
        layout = compute_layout(horizontal_config(ticks_count=10, ticks_gap=1), 1, 200, 20)
        assert layout.quantized
        assert layout.unit == 7
        assert layout.length == 69
        assert layout.area_width == 71

    def test_progress_is_whole_ticks(self):
        layout = compute_layout(horizontal_config(ticks_count=10, ticks_gap=1), 1, 200, 20)
        assert layout.progress_length(0.0) == 0
        assert layout.progress_length(0.04) == 0
        assert layout.progress_length(0.05) == 6
        assert layout.progress_length(0.5) == 34
        assert layout.progress_length(1.0) == 69

    def test_gap_offsets_separate_cells(self):
        layout = compute_layout(horizontal_config(ticks_count=10, ticks_gap=1), 1, 200, 20)
        assert layout.tick_gap_offsets() == [6, 13, 20, 27, 34, 41, 48, 55, 62]

    def test_no_quantization_without_tick_gap(self):
        layout = compute_layout(horizontal_config(ticks_count=10, ticks_gap=0), 1, 200, 20)
        assert not layout.quantized
        assert layout.length == 78
        assert layout.tick_gap_offsets() == []

    def test_unit_is_recomputed_per_orientation(self):
        config = vertical_config(width=20, border_padding=0, ticks_count=4, ticks_gap=1)
        layout = compute_layout(config, 1, 300, 40)
        assert (layout.unit, layout.length) == (9, 35)

        config.vertical = False
        config.width = 80
        layout = compute_layout(config, 1, 300, 40)
        assert (layout.unit, layout.length) == (19, 75)

    def test_too_many_ticks_falls_back_to_continuous(self):
        layout = compute_layout(horizontal_config(width=10, ticks_count=50, ticks_gap=1), 1, 200, 20)
        assert not layout.quantized
        assert layout.length == 8

    def test_cells_narrower_than_the_gap_fall_back_to_continuous(self):
        # (10 + 3) // 5 = 2, which leaves no room for a tick next to a 3px gap
        layout = compute_layout(horizontal_config(width=12, ticks_count=5, ticks_gap=3), 1, 200, 20)
        assert not layout.quantized
        assert layout.length == 10
        assert layout.tick_gap_offsets() == []

    def test_cell_as_wide_as_the_gap_falls_back_to_continuous(self):
        layout = compute_layout(horizontal_config(width=12, ticks_count=4, ticks_gap=3), 1, 200, 20)
        assert layout.length == 10
        assert not layout.quantized


class TestProgress:
    @pytest.mark.parametrize("width, ticks_count, ticks_gap", [
        (80, 0, 1),
        (80, 7, 1),
        (80, 10, 1),
        (12, 5, 3),
        (30, 6, 2),
    ])
    def test_progress_never_decreases(self, width, ticks_count, ticks_gap):
        config = horizontal_config(width=width, ticks_count=ticks_count, ticks_gap=ticks_gap)
        layout = compute_layout(config, 1, 200, 20)
        lengths = [layout.progress_length(v / 1000) for v in range(1001)]
        assert lengths == sorted(lengths)
        assert lengths[0] == 0
        assert lengths[-1] == layout.length

    def test_round_half_up(self):
        assert round_half_up(38.5) == 39
        assert round_half_up(38.49) == 38
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3


class TestPlacement:
    def test_empty_has_no_layout(self):
        assert compute_layout(horizontal_config(), 0, 200, 20) is None
        assert compute_layout(vertical_config(), 0, 200, 20) is None

    def test_left_alignment_uses_offset(self):
        layout = compute_layout(horizontal_config(), 1, 200, 20, offset=10)
        assert layout.area_x == 10
        assert layout.origin_x == 11

    def test_right_alignment_counts_from_right_edge(self):
        layout = compute_layout(horizontal_config(align=Alignment.RIGHT), 1, 200, 20, offset=10)
        assert layout.area_x == 110
        assert layout.origin_x == 111

    @pytest.mark.parametrize("align, expected", [
        (Alignment.LEFT, 5),
        (Alignment.FLEX, 5),
        (Alignment.RIGHT, 65),
    ])
    def test_calculate_offset(self, align, expected):
        assert calculate_offset(100, 30, 5, align) == expected

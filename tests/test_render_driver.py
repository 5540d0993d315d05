"""Tests for window rendering, run configuration, and the generation driver."""

import logging

import pytest

from sparse_life.config import LifeConfig
from sparse_life.core.coordinates import CoordinateRange, U64
from sparse_life.core.generation import advance
from sparse_life.driver import run
from sparse_life.patterns.seeds import DEFAULT_SEED
from sparse_life.render import DisplayWindow, render_generation, render_lines, window_array


class TestDisplayWindow:
    """Test display window geometry."""

    def test_default_window(self):
        """Defaults to rows and columns 0-19."""
        window = DisplayWindow()
        assert (window.height, window.width) == (20, 20)

    def test_contains_is_half_open(self):
        window = DisplayWindow(0, 3, 0, 3)
        assert window.contains((0, 0))
        assert window.contains((2, 2))
        assert not window.contains((3, 0))
        assert not window.contains((0, 3))

    @pytest.mark.parametrize("window", [
        DisplayWindow(0, 0, 0, 5),
        DisplayWindow(0, 5, 5, 5),
        DisplayWindow(5, 2, 0, 5),
    ])
    def test_empty_window_rejected(self, window):
        with pytest.raises(ValueError, match="positive height and width"):
            window.validate()


class TestRendering:
    """Test mapping alive and dead cells to glyphs."""

    def test_blinker_rows(self):
        blinker = frozenset({(0, 0), (0, 1), (0, 2)})
        assert render_lines(blinker, DisplayWindow(0, 2, 0, 3)) == [
            "x  x  x",
            "-  -  -",
        ]

    def test_default_seed(self):
        frame = render_generation(DEFAULT_SEED, DisplayWindow(0, 5, 0, 5), separator="")
        assert frame == "\n".join([
            "-----",
            "---x-",
            "--xxx",
            "--x-x",
            "---x-",
        ])

    def test_custom_glyphs(self):
        frame = render_generation({(0, 1)}, DisplayWindow(0, 1, 0, 3), alive="#", dead=".", separator="")
        assert frame == ".#."

    def test_cells_outside_window_ignored(self):
        far = frozenset({(100, 100), (U64.maximum, 0)})
        assert window_array(far, DisplayWindow(0, 4, 0, 4)).sum() == 0

    def test_offset_window(self):
        view = window_array({(10, 10)}, DisplayWindow(9, 12, 9, 12))
        assert view[1, 1]
        assert view.sum() == 1

    def test_negative_window_for_signed_range(self):
        frame = render_generation({(-1, -1)}, DisplayWindow(-1, 1, -1, 1), separator="")
        assert frame == "x-\n--"

    def test_default_window_size(self):
        lines = render_generation(DEFAULT_SEED).split("\n")
        assert len(lines) == 20
        assert all(len(line) == 20 + 19 * 2 for line in lines)


class TestLifeConfig:
    """Test run configuration validation."""

    def test_defaults(self):
        config = LifeConfig()
        assert config.generations == 10
        assert config.window == DisplayWindow(0, 20, 0, 20)
        assert config.alive_glyph == "x"
        assert config.dead_glyph == "-"
        assert config.coord_range == U64

    def test_negative_generations(self):
        with pytest.raises(ValueError, match="non-negative"):
            LifeConfig(generations=-1)

    @pytest.mark.parametrize("alive,dead", [("", "-"), ("x", "")])
    def test_empty_glyphs(self, alive, dead):
        with pytest.raises(ValueError, match="non-empty"):
            LifeConfig(alive_glyph=alive, dead_glyph=dead)

    def test_invalid_window(self):
        with pytest.raises(ValueError):
            LifeConfig(window=DisplayWindow(0, 0, 0, 0))

    def test_empty_coordinate_range(self):
        with pytest.raises(ValueError, match="empty"):
            LifeConfig(coord_range=CoordinateRange(5, 4))

    def test_copy(self):
        config = LifeConfig(generations=3, alive_glyph="#")
        duplicate = config.copy()

        assert duplicate is not config
        assert duplicate.generations == 3
        assert duplicate.alive_glyph == "#"

        duplicate.generations = 7
        assert config.generations == 3


class TestDriver:
    """Test the bounded generation run."""

    @pytest.fixture
    def config(self):
        return LifeConfig(generations=3, window=DisplayWindow(0, 6, 0, 7))

    def test_frame_count(self, config):
        assert len(list(run(DEFAULT_SEED, config))) == 3

    def test_first_frame_is_seed(self, config):
        frames = list(run(DEFAULT_SEED, config))
        assert frames[0] == render_generation(DEFAULT_SEED, config.window)

    def test_frames_follow_generations(self, config):
        frames = list(run(DEFAULT_SEED, config))
        gen_1 = advance(DEFAULT_SEED)
        gen_2 = advance(gen_1)

        assert frames[1] == render_generation(gen_1, config.window)
        assert frames[2] == render_generation(gen_2, config.window)

    def test_zero_generations(self):
        assert list(run(DEFAULT_SEED, LifeConfig(generations=0))) == []

    def test_default_config(self):
        assert len(list(run(DEFAULT_SEED))) == 10

    def test_invalid_seed(self):
        with pytest.raises(ValueError):
            list(run({(-3, 0)}))

    def test_seed_outside_narrow_range(self):
        config = LifeConfig(generations=1, coord_range=CoordinateRange.unsigned(2))
        with pytest.raises(ValueError):
            list(run(DEFAULT_SEED, config))

    def test_logs_live_counts(self, config, caplog):
        with caplog.at_level(logging.INFO, logger="sparse_life.driver"):
            list(run(DEFAULT_SEED, config))

        assert "Generation 0: 7 alive" in caplog.text
        assert "Generation 1: 8 alive" in caplog.text
        assert "Generation 2: 10 alive" in caplog.text

"""
Tests for the frame assembler and FractalClock.

Tests cover:
- Golden root geometry at midnight and at three o'clock
- Relative minute/second rotators
- Preview-mode acceleration end to end
- Degenerate bounds
"""

import math
from datetime import datetime

import pytest

from config import ClockConfig
from config.clock_config import SCALE_MAX_DEFAULT, SCALE_MIN_DEFAULT
from fractal_clock.clock import ClockUnavailableError
from fractal_clock.frame import Bounds, FractalClock, hand_rotations
from fractal_clock.vector import Vector2D


class TestBounds:

    def test_midpoint_with_offset(self):
        assert Bounds(100, 50, 600, 400).midpoint == Vector2D(400.0, 250.0)

    def test_short_side(self):
        assert Bounds.from_size(800, 600).short_side == 600


class TestHandRotations:

    def test_midnight_golden_values(self, square_bounds):
        root, minute_rotator, second_rotator = hand_rotations(False, square_bounds, now=0.0)

        assert root.length == 100.0
        assert root.displacement == Vector2D(0.0, -100.0)
        assert root.origin == Vector2D(300.0, 400.0)
        assert root.end == Vector2D(300.0, 300.0)
        assert root.depth == 0
        assert root.colour == (1.0, 1.0, 1.0)

        for rotator in (minute_rotator, second_rotator):
            assert rotator.scaled_cos == -SCALE_MIN_DEFAULT
            assert rotator.scaled_sin == 0.0

    def test_root_stroke_at_midnight(self, square_bounds):
        root, _, _ = hand_rotations(False, square_bounds, now=0.0)
        stroke = root.to_stroke()
        assert stroke.start == Vector2D(300.0, 350.0)
        assert stroke.end == Vector2D(300.0, 300.0)
        assert stroke.rgba == (1.0, 1.0, 1.0, 1.0)
        assert stroke.width == 2.0

    def test_three_oclock_hand_points_right(self, square_bounds):
        root, minute_rotator, _ = hand_rotations(False, square_bounds, now=3 * 3600.0)

        assert root.origin.isclose((400.0, 300.0))
        assert root.end.isclose((300.0, 300.0))
        # minute hand at 12, hour hand at 3: relative angle is +90 degrees
        assert minute_rotator.scaled_cos == pytest.approx(0.0, abs=1e-12)
        assert minute_rotator.scaled_sin == pytest.approx(-SCALE_MIN_DEFAULT)

    def test_rotators_are_relative_to_hour_hand(self, square_bounds):
        now = 4 * 3600 + 20 * 60 + 45.0
        _, minute_rotator, second_rotator = hand_rotations(False, square_bounds, now=now)

        hour_angle = -2 * math.pi * now / 43200
        minute_angle = -2 * math.pi * (now % 3600) / 3600
        second_angle = -2 * math.pi * (now % 60) / 60
        scale = minute_rotator.scale

        assert minute_rotator.scaled_cos == pytest.approx(-scale * math.cos(minute_angle - hour_angle))
        assert minute_rotator.scaled_sin == pytest.approx(-scale * math.sin(minute_angle - hour_angle))
        assert second_rotator.scaled_cos == pytest.approx(-scale * math.cos(second_angle - hour_angle))
        assert second_rotator.scaled_sin == pytest.approx(-scale * math.sin(second_angle - hour_angle))

    def test_scale_follows_oscillator(self, square_bounds):
        _, minute_rotator, second_rotator = hand_rotations(False, square_bounds, now=72.0)
        assert minute_rotator.scale == pytest.approx(SCALE_MAX_DEFAULT)
        assert second_rotator.scale == pytest.approx(SCALE_MAX_DEFAULT)

    def test_root_length_uses_short_side(self):
        root, _, _ = hand_rotations(False, Bounds.from_size(1200, 300), now=0.0)
        assert root.length == 50.0
        assert root.end == Vector2D(600.0, 150.0)

    def test_reads_clock_when_now_missing(self, square_bounds):
        clock = lambda: datetime(2024, 1, 1, 2, 0, 0)
        root, _, _ = hand_rotations(True, square_bounds, clock=clock)
        # 02:00 accelerated six times shows 12:00, hour hand straight up
        assert root.origin.isclose((300.0, 400.0))

    def test_clock_failure_propagates(self, square_bounds):
        def broken():
            raise OSError("no clock")

        with pytest.raises(ClockUnavailableError):
            hand_rotations(False, square_bounds, clock=broken)

    @pytest.mark.parametrize("width, height", [(0, 0), (0, 400), (-120, 60)])
    def test_degenerate_bounds_do_not_fail(self, width, height):
        root, _, _ = hand_rotations(False, Bounds.from_size(width, height), now=1234.5)
        assert root.length == pytest.approx(abs(min(width, height)) / 6)


class TestFractalClock:

    def test_frame_contents(self, square_bounds):
        frame = FractalClock().frame(square_bounds, now=0.0)

        assert frame.now == 0.0
        assert frame.scale == SCALE_MIN_DEFAULT
        assert frame.bounds == square_bounds
        assert len(frame.strokes) == 2047
        assert frame.max_depth == 10
        assert len(frame.strokes_at_depth(10)) == 1024

    def test_root_is_last_stroke(self, square_bounds):
        frame = FractalClock().frame(square_bounds, now=0.0)
        root = frame.strokes[-1]
        assert root.depth == 0
        assert root.start == Vector2D(300.0, 350.0)
        assert root.end == Vector2D(300.0, 300.0)

    def test_first_generation_at_midnight(self, square_bounds):
        frame = FractalClock().frame(square_bounds, now=0.0)
        for stroke in frame.strokes_at_depth(1):
            assert stroke.start == Vector2D(300.0, 300.0)
            assert stroke.end.isclose((300.0, 300.0 + 100.0 * SCALE_MIN_DEFAULT))

    def test_config_depth(self, square_bounds):
        clock = FractalClock(ClockConfig(max_depth=4))
        assert len(list(clock.strokes(square_bounds, now=10.0))) == 31

    def test_preview_mode(self, square_bounds):
        clock = FractalClock(preview_mode=True, clock=lambda: datetime(2024, 1, 1, 2, 0, 0))
        assert clock.now() == 43200.0
        frame = clock.frame(square_bounds)
        assert frame.now == 43200.0
        assert frame.strokes[-1].end == Vector2D(300.0, 300.0)

    def test_frames_are_independent(self, square_bounds):
        clock = FractalClock()
        first = clock.frame(square_bounds, now=500.0)
        clock.frame(square_bounds, now=9000.0)
        again = clock.frame(square_bounds, now=500.0)
        assert first.strokes == again.strokes

    def test_degenerate_frame(self):
        frame = FractalClock().frame(Bounds.from_size(0, 0), now=100.0)
        assert len(frame.strokes) == 2047
        assert all(s.length == 0.0 for s in frame.strokes)

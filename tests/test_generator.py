"""
Tests for the fractal branch generator.

Tests cover:
- Stroke counts for a full binary tree
- Deepest-first emission order
- Child geometry and colour transforms
- Opacity falloff and colour bounds
- Lazy, single-pass stroke sequence
"""

import inspect

import pytest

from config import ClockConfig
from fractal_clock.branch import Branch, Stroke, opacity_for_depth
from fractal_clock.generator import child_colours, draw_branch, generate_strokes, stroke_count
from fractal_clock.rotator import Rotator, make_rotator
from fractal_clock.vector import Vector2D

SECOND = Rotator(0.5, 0.0)
MINUTE = Rotator(0.0, 0.5)


def root_branch(colour=(1.0, 1.0, 1.0)):
    return Branch(Vector2D(0.0, 0.0), Vector2D(0.0, 10.0), 0, colour)


# =============================================================================
# Counts and order
# =============================================================================


class TestTreeShape:

    def test_stroke_count_formula(self):
        assert stroke_count(0) == 1
        assert stroke_count(1) == 3
        assert stroke_count(10) == 2047

    @pytest.mark.parametrize("depth", [0, 1, 2, 5, 10])
    def test_emits_full_binary_tree(self, depth):
        strokes = list(generate_strokes(root_branch(), SECOND, MINUTE, depth))
        assert len(strokes) == stroke_count(depth)

    def test_leaf_count_at_default_depth(self):
        strokes = list(generate_strokes(root_branch(), SECOND, MINUTE))
        assert sum(1 for s in strokes if s.depth == 10) == 1024

    def test_depth_from_config(self):
        strokes = list(generate_strokes(root_branch(), SECOND, MINUTE, config=ClockConfig(max_depth=3)))
        assert len(strokes) == 15

    def test_root_is_drawn_last(self):
        strokes = list(generate_strokes(root_branch(), SECOND, MINUTE, 4))
        assert strokes[-1].depth == 0
        assert strokes[0].depth == 4

    def test_children_drawn_before_parent(self):
        strokes = list(generate_strokes(root_branch(), SECOND, MINUTE, 3))
        # Post-order: every stroke is preceded by strokes of its subtree,
        # so a depth can only decrease by one between consecutive strokes.
        for prev, cur in zip(strokes, strokes[1:]):
            assert cur.depth >= prev.depth - 1

    def test_second_subtree_before_minute_subtree(self):
        strokes = list(generate_strokes(root_branch(), SECOND, MINUTE, 1))
        second_child, minute_child, root = strokes
        assert second_child.end == Vector2D(0.0, 15.0)
        assert minute_child.end == Vector2D(-5.0, 10.0)
        assert root.depth == 0


# =============================================================================
# Geometry and colour
# =============================================================================


class TestBranchGeometry:

    def test_root_drawn_from_midpoint(self):
        root = list(generate_strokes(root_branch(), SECOND, MINUTE, 0))[0]
        assert root.start == Vector2D(0.0, 5.0)
        assert root.end == Vector2D(0.0, 10.0)

    def test_children_start_at_parent_tip(self):
        strokes = list(generate_strokes(root_branch(), SECOND, MINUTE, 1))
        for child in strokes[:2]:
            assert child.start == Vector2D(0.0, 10.0)

    def test_lengths_shrink_by_scale(self):
        scale = 0.8
        second = make_rotator(0.3, -scale)
        minute = make_rotator(1.1, -scale)
        strokes = list(generate_strokes(root_branch(), second, minute, 6))
        for stroke in strokes:
            if stroke.depth == 0:
                assert stroke.length == pytest.approx(5.0)
            else:
                assert stroke.length == pytest.approx(10.0 * scale ** stroke.depth)

    def test_width(self):
        strokes = generate_strokes(root_branch(), SECOND, MINUTE, 2, ClockConfig(line_width=3.5))
        assert all(s.width == 3.5 for s in strokes)


class TestColour:

    def test_child_colours(self):
        second_colour, minute_colour = child_colours((1.0, 1.0, 1.0), ClockConfig())
        assert second_colour == pytest.approx((0.85, 0.92, 0.95))
        assert minute_colour == pytest.approx((0.95, 0.92, 0.85))

    def test_green_shared_between_children(self):
        second_colour, minute_colour = child_colours((0.3, 0.6, 0.2), ClockConfig())
        assert second_colour[1] == minute_colour[1] == pytest.approx(0.92 * 0.6)

    def test_emitted_rgba(self):
        second_child, minute_child, root = generate_strokes(root_branch(), SECOND, MINUTE, 1)
        assert root.rgba == (1.0, 1.0, 1.0, 1.0)
        assert second_child.rgba == pytest.approx((0.85, 0.92, 0.95, 1.0))
        assert minute_child.rgba == pytest.approx((0.95, 0.92, 0.85, 1.0))

    def test_channels_stay_in_unit_range(self):
        for stroke in generate_strokes(root_branch(), SECOND, MINUTE, 10):
            assert all(0.0 <= c <= 1.0 for c in stroke.rgba)


class TestOpacity:

    def test_formula(self):
        assert opacity_for_depth(0) == 1.0
        assert opacity_for_depth(1) == 1.0
        assert opacity_for_depth(4) == 0.25

    def test_emitted_opacity(self):
        for stroke in generate_strokes(root_branch(), SECOND, MINUTE, 10):
            expected = 1.0 if stroke.depth == 0 else 1.0 / stroke.depth
            assert stroke.opacity == expected


# =============================================================================
# Sequence behaviour and callback form
# =============================================================================


class TestStrokeSequence:

    def test_is_lazy(self):
        strokes = generate_strokes(root_branch(), SECOND, MINUTE, 10)
        assert inspect.isgenerator(strokes)
        first = next(strokes)
        assert isinstance(first, Stroke)
        assert first.depth == 10

    def test_single_pass(self):
        strokes = generate_strokes(root_branch(), SECOND, MINUTE, 2)
        assert len(list(strokes)) == 7
        assert list(strokes) == []

    def test_draw_branch_emits_every_stroke(self):
        emitted = []
        count = draw_branch(root_branch(), SECOND, MINUTE, 0, 4, (1.0, 1.0, 1.0), emitted.append)
        assert count == stroke_count(4) == len(emitted)
        assert emitted == list(generate_strokes(root_branch(), SECOND, MINUTE, 4))

    def test_draw_branch_uses_given_depth_and_colour(self):
        emitted = []
        draw_branch(root_branch(), SECOND, MINUTE, 2, 0, (0.5, 0.4, 0.3), emitted.append)
        (stroke,) = emitted
        assert stroke.depth == 2
        assert stroke.start == Vector2D(0.0, 0.0)
        assert stroke.rgba == (0.5, 0.4, 0.3, 0.5)

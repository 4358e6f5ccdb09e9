"""
Fractal branch generator.

Every branch spawns two children at its tip: one turned by the second hand's
rotator and one by the minute hand's, both relative to the hour hand. Strokes
come out deepest first, so a parent is always drawn over its subtree.

The traversal uses an explicit stack rather than recursion and yields strokes
lazily; the sequence is finite and can be consumed only once.
"""

from typing import Callable, Iterator, Optional, Tuple

from config.clock_config import ClockConfig
from .branch import Branch, Colour, Stroke
from .rotator import Rotator


def stroke_count(depth_remaining: int) -> int:
    """Number of strokes in a full binary tree with this expansion budget."""
    return 2 ** (depth_remaining + 1) - 1


def child_colours(colour: Colour, config: ClockConfig) -> Tuple[Colour, Colour]:
    """
    Colours of the (second, minute) children of a branch.

    Red shifts toward the minute side and blue toward the second side.
    Green is dimmed once and shared by both children.
    """
    r, g, b = colour
    k = config.colour_generation_scale
    offset = config.colour_offset
    green = config.green_decay * g

    second_colour = (k * r, green, offset + k * b)
    minute_colour = (offset + k * r, green, k * b)
    return second_colour, minute_colour


def generate_strokes(root: Branch,
                     second_rotator: Rotator,
                     minute_rotator: Rotator,
                     depth_remaining: Optional[int] = None,
                     config: Optional[ClockConfig] = None) -> Iterator[Stroke]:
    """
    Expand `root` into the fractal tree and yield one stroke per branch.

    Children are fully emitted before their parent: the second-hand subtree,
    then the minute-hand subtree, then the branch itself.
    """
    config = config or ClockConfig()
    if depth_remaining is None:
        depth_remaining = config.max_depth
    width = config.line_width

    stack = [(root, depth_remaining, False)]
    while stack:
        branch, remaining, expanded = stack.pop()

        if expanded or remaining < 1:
            yield branch.to_stroke(width)
            continue

        stack.append((branch, remaining, True))
        second_colour, minute_colour = child_colours(branch.colour, config)
        stack.append((branch.child(minute_rotator, minute_colour), remaining - 1, False))
        stack.append((branch.child(second_rotator, second_colour), remaining - 1, False))


def draw_branch(line: Branch,
                second_rotator: Rotator,
                minute_rotator: Rotator,
                depth: int,
                depth_remaining: int,
                colour: Colour,
                emit: Callable[[Stroke], None],
                config: Optional[ClockConfig] = None) -> int:
    """
    Draw a fractal branch by handing every stroke to `emit`.

    Args:
        line: Segment whose origin and displacement start the tree
        second_rotator: Scaled rotation of the second hand relative to the hour hand
        minute_rotator: Scaled rotation of the minute hand relative to the hour hand
        depth: Depth of `line` in the tree
        depth_remaining: Number of generations left to expand
        colour: Colour of `line`
        emit: Callback receiving each stroke, deepest first

    Returns:
        Number of strokes emitted
    """
    root = Branch(line.origin, line.displacement, depth, colour)
    count = 0
    for stroke in generate_strokes(root, second_rotator, minute_rotator, depth_remaining, config):
        emit(stroke)
        count += 1
    return count

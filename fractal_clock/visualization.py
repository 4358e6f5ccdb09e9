"""
Visualization utilities for the fractal clock.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from matplotlib.animation import FuncAnimation
from typing import Iterable, Optional, Tuple
from pathlib import Path

from .branch import Stroke
from .frame import Bounds, Frame, FractalClock


def _segments_and_colors(strokes: Iterable[Stroke]):
    segments = []
    colors = []
    for stroke in strokes:
        segments.append([stroke.start.to_tuple(), stroke.end.to_tuple()])
        colors.append(stroke.rgba)
    return segments, colors


def _setup_axes(ax, bounds: Bounds, background: str):
    # Geometry is y-up, which is also matplotlib's default orientation
    ax.set_xlim(bounds.x, bounds.x + bounds.width)
    ax.set_ylim(bounds.y, bounds.y + bounds.height)
    ax.set_aspect('equal')
    ax.set_facecolor(background)
    ax.axis('off')


def visualize_frame(
    frame: Frame,
    background: str = 'black',
    linewidth_scale: float = 1.0,
    figsize: Tuple[int, int] = (10, 10),
    save_path: Optional[str] = None,
    show: bool = True
):
    """Draw one frame's strokes, deepest first."""
    fig, ax = plt.subplots(figsize=figsize)
    fig.patch.set_facecolor(background)

    segments, colors = _segments_and_colors(frame.strokes)
    widths = [s.width * linewidth_scale for s in frame.strokes]
    if segments:
        lc = LineCollection(segments, colors=colors, linewidths=widths, capstyle='round')
        ax.add_collection(lc)

    _setup_axes(ax, frame.bounds, background)
    plt.tight_layout()

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight',
                    facecolor=fig.get_facecolor(), edgecolor='none')

    if show:
        plt.show()
    return fig, ax


def animate_clock(
    clock: FractalClock,
    bounds: Bounds,
    interval: int = 50,
    frames: Optional[int] = None,
    background: str = 'black',
    figsize: Tuple[int, int] = (10, 10),
    save_path: Optional[str] = None,
    show: bool = True
) -> FuncAnimation:
    """
    Live window redrawn every `interval` ms from the clock's current time.

    frames: Number of frames to produce (None = run until the window closes).
            Required when save_path is given.
    """
    fig, ax = plt.subplots(figsize=figsize)
    fig.patch.set_facecolor(background)
    _setup_axes(ax, bounds, background)

    collection = LineCollection([], capstyle='round')
    ax.add_collection(collection)
    title = ax.set_title('', color='white')

    def update(_frame_idx):
        frame = clock.frame(bounds)
        segments, colors = _segments_and_colors(frame.strokes)
        collection.set_segments(segments)
        collection.set_color(colors)
        collection.set_linewidths([s.width for s in frame.strokes])

        seconds = int(frame.now)
        title.set_text(f"{seconds // 3600:02d}:{seconds // 60 % 60:02d}:{seconds % 60:02d}"
                       f"  scale {frame.scale:.3f}")
        return [collection, title]

    anim = FuncAnimation(
        fig, update,
        frames=frames,
        interval=interval,
        blit=False,
        repeat=False,
        cache_frame_data=False
    )

    if save_path:
        if frames is None:
            raise ValueError("frames must be set to save an animation")
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        anim.save(save_path, writer='pillow', fps=max(1, 1000 // interval))

    if show:
        plt.show()
    return anim


def plot_frame_statistics(frame: Frame, save_path: Optional[str] = None, show: bool = True):
    """Plot stroke length and opacity for each depth of one frame."""
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    max_depth = frame.max_depth
    depths = np.arange(max_depth + 1)
    mean_lengths = []
    opacities = []
    for d in depths:
        strokes = frame.strokes_at_depth(d)
        mean_lengths.append(np.mean([s.length for s in strokes]) if strokes else 0.0)
        opacities.append(strokes[0].opacity if strokes else 0.0)

    axes[0].bar(depths, mean_lengths, color='steelblue', edgecolor='black')
    axes[0].set_xlabel('Depth')
    axes[0].set_ylabel('Mean Stroke Length')
    axes[0].set_title(f'Stroke Length per Depth (scale {frame.scale:.3f})')

    axes[1].plot(depths, opacities, marker='o', color='darkorange')
    axes[1].set_xlabel('Depth')
    axes[1].set_ylabel('Opacity')
    axes[1].set_title('Opacity per Depth')

    plt.tight_layout()

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight')

    if show:
        plt.show()
    return fig, axes

"""
Rendering Script

Renders the fractal clock with Cairo.

Configuration is loaded from config/clock.json (defaults if missing).
All paths are derived from the run name.

Modes:
    frame     - Render a single frame to PNG
    animation - Render a time-lapse animation starting at the configured time
    export    - Export a frame's strokes to JSON
    live      - Open a live matplotlib window that follows the clock
    replay    - Render a frame previously written by export
"""

import argparse

from config import ClockConfig, ClockRenderConfig, load_config, parse_clock_time
from fractal_clock import FractalClock, animate_clock
from rendering import ClockRenderer, export_frame_data, load_frame_data, strokes_from_data


def resolve_start(pipeline, clock: FractalClock) -> float:
    start = pipeline.start_seconds
    return clock.now() if start is None else start


def render_frame(pipeline, clock: FractalClock, renderer: ClockRenderer):
    now = resolve_start(pipeline, clock)
    print(f"Rendering frame at {now:.2f}s ({renderer.config.output_width}x{renderer.config.output_height})...")
    renderer.save_frame(clock.strokes(renderer.bounds, now), str(pipeline.frame_path))
    print(f"Saved frame to {pipeline.frame_path}")


def render_animation(pipeline, clock: FractalClock, renderer: ClockRenderer):
    start = resolve_start(pipeline, clock)
    frames = pipeline.animation_frames
    print(f"Rendering {frames} frames from {start:.2f}s, {pipeline.frame_step:.3f}s per frame...")
    renderer.render_animation(
        start,
        str(pipeline.animation_path),
        frames=frames,
        fps=pipeline.render_fps,
        step=pipeline.frame_step,
        clock_config=clock.config,
        preview_mode=clock.preview_mode
    )


def export_frame(pipeline, clock: FractalClock, renderer: ClockRenderer):
    frame = clock.frame(renderer.bounds, now=resolve_start(pipeline, clock))
    export_frame_data(frame, str(pipeline.frame_data_path))
    print(f"Exported {len(frame.strokes)} strokes to {pipeline.frame_data_path}")


def replay_frame(pipeline, clock: FractalClock, renderer: ClockRenderer):
    """Render a previously exported frame without recomputing it."""
    if not pipeline.frame_data_path.exists():
        raise FileNotFoundError(
            f"Frame data not found at {pipeline.frame_data_path}. "
            f"Please run render.py --mode export first."
        )

    print(f"Loading frame data from {pipeline.frame_data_path}...")
    data = load_frame_data(str(pipeline.frame_data_path))
    renderer.save_frame(strokes_from_data(data), str(pipeline.frame_path))
    print(f"Saved frame to {pipeline.frame_path}")


def run_live(pipeline, clock: FractalClock, renderer: ClockRenderer):
    interval = max(1, 1000 // pipeline.render_fps)
    print(f"Live clock, redrawing every {interval} ms. Close the window to stop.")
    animate_clock(clock, renderer.bounds, interval=interval)


MODES = {
    'frame': render_frame,
    'animation': render_animation,
    'export': export_frame,
    'live': run_live,
    'replay': replay_frame,
}


def main():
    parser = argparse.ArgumentParser(description="Render the fractal clock.")
    parser.add_argument(
        '--mode',
        type=str,
        choices=sorted(MODES),
        default='frame',
        help='Rendering mode: frame, animation, export, live, or replay (default: frame)'
    )
    parser.add_argument('--config', type=str, default='config/clock.json',
                        help='Path to the JSON config file')
    parser.add_argument('--preview', action='store_true',
                        help='Run the clock six times faster')
    parser.add_argument('--time', type=str, default=None,
                        help='Clock time to render, "HH:MM:SS" or seconds since midnight')
    args = parser.parse_args()

    pipeline = load_config(args.config)
    if args.preview:
        pipeline.preview_mode = True
    if args.time is not None:
        parse_clock_time(args.time)
        pipeline.start_time = args.time
    pipeline.create_output_dirs()

    clock = FractalClock(ClockConfig.from_pipeline(pipeline), preview_mode=pipeline.preview_mode)
    renderer = ClockRenderer(ClockRenderConfig(
        output_width=pipeline.render_size,
        output_height=pipeline.render_size
    ))

    print(f"Run: {pipeline.run_name}")
    print(f"Output: {pipeline.output_dir}")
    print(f"Mode: {args.mode}")
    print()

    MODES[args.mode](pipeline, clock, renderer)


if __name__ == '__main__':
    main()

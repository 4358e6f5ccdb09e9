"""
Main entry point for the fractal clock.

Renders the current time (or config start_time) as a fractal clock image,
plus a matplotlib preview and per-depth statistics.
"""

from config import ClockConfig, ClockRenderConfig, load_config
from fractal_clock import Bounds, FractalClock, visualize_frame, plot_frame_statistics
from rendering import ClockRenderer


def main():
    pipeline = load_config()
    pipeline.create_output_dirs()

    clock_config = ClockConfig.from_pipeline(pipeline)
    clock = FractalClock(clock_config, preview_mode=pipeline.preview_mode)

    size = pipeline.render_size
    bounds = Bounds.from_size(size, size)
    frame = clock.frame(bounds, now=pipeline.start_seconds)

    print(f"Fractal clock at {frame.now:.2f}s since midnight")
    print(f"  Scale: {frame.scale:.4f}")
    print(f"  Strokes: {len(frame.strokes)} (depth {frame.max_depth})")

    renderer = ClockRenderer(ClockRenderConfig(output_width=size, output_height=size))
    renderer.save_frame(frame.strokes, str(pipeline.frame_path))
    print(f"Saved frame to {pipeline.frame_path}")

    visualize_frame(frame, save_path=str(pipeline.preview_path))
    print(f"Saved preview to {pipeline.preview_path}")
    plot_frame_statistics(frame, save_path=str(pipeline.stats_path))
    print(f"Saved statistics to {pipeline.stats_path}")


if __name__ == '__main__':
    main()

"""
Data exporters to convert clock frames into renderer-friendly format.
Keeps rendering module decoupled from the geometry code.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

from fractal_clock.branch import Stroke
from fractal_clock.frame import Frame
from fractal_clock.vector import Vector2D


def export_frame_data(frame: Frame, output_path: str) -> Dict[str, Any]:
    """
    Export one clock frame to JSON.

    Format:
    {
        "now": float,            # seconds since midnight
        "scale": float,          # generation scale at `now`
        "bounds": [x, y, width, height],
        "strokes": [
            {
                "start": [x, y],
                "end": [x, y],
                "rgba": [r, g, b, a],
                "width": float,
                "depth": int
            }
        ]
    }
    """
    data = {
        "now": frame.now,
        "scale": frame.scale,
        "bounds": list(frame.bounds),
        "strokes": [
            {
                "start": list(s.start),
                "end": list(s.end),
                "rgba": list(s.rgba),
                "width": s.width,
                "depth": s.depth
            }
            for s in frame.strokes
        ]
    }

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(data, f, indent=2)

    return data


def load_frame_data(path: str) -> Dict[str, Any]:
    with open(path, 'r') as f:
        return json.load(f)


def strokes_from_data(data: Dict[str, Any]) -> List[Stroke]:
    return [
        Stroke(
            start=Vector2D.from_tuple(s['start']),
            end=Vector2D.from_tuple(s['end']),
            rgba=tuple(s['rgba']),
            width=s['width'],
            depth=s['depth']
        )
        for s in data['strokes']
    ]

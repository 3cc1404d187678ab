"""Write drawing commands out as SVG path data and SVG documents."""

from __future__ import annotations

from collections.abc import Iterable

from vectormorph.engine.animator import MorphFrame
from vectormorph.engine.commands import PathCommand


def format_number(value: float, precision: int = 3) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def to_path_data(commands: Iterable[PathCommand], precision: int = 3) -> str:
    """Serialize commands to an SVG ``d`` attribute, e.g. ``M0 0 C1 1 2 2 3 3 Z``."""
    parts = []
    for command in commands:
        args = " ".join(format_number(v, precision) for v in command.args())
        parts.append(f"{command.letter}{args}")
    return " ".join(parts)


def describe(commands: Iterable[PathCommand]) -> str:
    """Multi-line dump of a command sequence for debug logging."""
    lines = []
    for command in commands:
        lines.append(f"==={type(command).__name__}===")
        for name, value in vars(command).items():
            lines.append(f"    {name} = {value}")
    return "\n".join(lines)


def serialize_frame(
    frame: MorphFrame,
    canvas_w: float,
    canvas_h: float,
    stroke: str = "currentColor",
    stroke_width: float = 2.0,
    precision: int = 3,
) -> str:
    """Render one morph frame as a standalone stroked SVG document."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {format_number(canvas_w)} {format_number(canvas_h)}" xmlns="http://www.w3.org/2000/svg"'
        f' fill="none" stroke="{stroke}" stroke-width="{format_number(stroke_width)}"'
        f' stroke-linecap="round" stroke-linejoin="round">',
    ]

    layers = [
        ("paired", frame.paired, 1.0),
        ("unpaired-start", frame.unpaired_start, frame.start_alpha),
        ("unpaired-end", frame.unpaired_end, frame.end_alpha),
    ]
    for name, commands, alpha in layers:
        if not commands or alpha <= 0:
            continue
        d = to_path_data(commands, precision)
        opacity = "" if alpha >= 1 else f' opacity="{format_number(alpha)}"'
        lines.append(f'  <path class="{name}" d="{d}"{opacity} />')

    lines.append("</svg>")
    return "\n".join(lines)

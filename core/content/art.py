"""Procedural SVG art derived from a content fingerprint.

The fingerprint bytes pick a style (byte 0), a color scheme (byte 1) and, for
the heatmap, a grid layout (byte 2). Each style has its own renderer that
turns the bytes into a few dozen SVG primitives. Output depends only on the
input bytes, so the same fingerprint always yields the same image.
"""

from __future__ import annotations

import base64
import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional

from core.types import ArtStyle, Attribute

logger = logging.getLogger(__name__)

CANVAS_SIZE = 400
MIN_SEED_BYTES = 8

ART_STYLES: tuple[ArtStyle, ...] = ("heatmap", "geometric", "helix", "fractal")


@dataclass(frozen=True)
class ColorScheme:
    name: str
    background: str
    colors: tuple[str, ...]


COLOR_SCHEMES: tuple[ColorScheme, ...] = (
    ColorScheme("ocean", "#0b1d3a", ("#0077b6", "#00b4d8", "#48cae4", "#90e0ef", "#caf0f8")),
    ColorScheme("sunset", "#2b0f2e", ("#ff6b6b", "#f06595", "#ffa94d", "#ffd43b", "#cc5de8")),
    ColorScheme("forest", "#0f2418", ("#2b9348", "#55a630", "#80b918", "#aacc00", "#d4d700")),
    ColorScheme("aurora", "#10002b", ("#7400b8", "#5e60ce", "#48bfe3", "#64dfdf", "#80ffdb")),
    ColorScheme("monochrome", "#111111", ("#333333", "#555555", "#888888", "#bbbbbb", "#eeeeee")),
)

# name -> (columns, rows)
GRID_LAYOUTS: tuple[tuple[str, tuple[int, int]], ...] = (
    ("square", (8, 8)),
    ("wide", (12, 6)),
    ("tall", (6, 12)),
)


@dataclass(frozen=True)
class ArtPlan:
    style: ArtStyle
    scheme: ColorScheme
    layout: Optional[str] = None  # heatmap only

    def as_attributes(self) -> tuple[Attribute, ...]:
        attrs = [
            Attribute(trait_type="Art Style", value=self.style),
            Attribute(trait_type="Color Scheme", value=self.scheme.name),
        ]
        if self.layout is not None:
            attrs.append(Attribute(trait_type="Grid Layout", value=self.layout))
        return tuple(attrs)


@dataclass(frozen=True)
class GeneratedArt:
    plan: ArtPlan
    svg: str

    @property
    def data_uri(self) -> str:
        payload = base64.b64encode(self.svg.encode("utf-8")).decode("ascii")
        return f"data:image/svg+xml;base64,{payload}"


def _fmt(value: float) -> str:
    return f"{value:.2f}"


def plan_art(data: bytes) -> ArtPlan:
    """Pick style, color scheme and layout from the leading fingerprint bytes."""
    if len(data) < MIN_SEED_BYTES:
        raise ValueError(f"art seed needs at least {MIN_SEED_BYTES} bytes, got {len(data)}")

    style = ART_STYLES[data[0] % len(ART_STYLES)]
    scheme = COLOR_SCHEMES[data[1] % len(COLOR_SCHEMES)]
    layout = GRID_LAYOUTS[data[2] % len(GRID_LAYOUTS)][0] if style == "heatmap" else None
    return ArtPlan(style=style, scheme=scheme, layout=layout)


def render_heatmap(data: bytes, plan: ArtPlan) -> list[str]:
    """Grid of cells whose color and opacity follow the byte values."""
    layout = plan.layout or GRID_LAYOUTS[0][0]
    columns, rows = dict(GRID_LAYOUTS)[layout]
    cell_w = CANVAS_SIZE / columns
    cell_h = CANVAS_SIZE / rows
    n = len(data)
    palette = plan.scheme.colors

    elements = []
    for i in range(columns * rows):
        value = (data[i % n] + i * data[(i + 1) % n]) % 256
        x = (i % columns) * cell_w
        y = (i // columns) * cell_h
        opacity = 0.3 + 0.7 * value / 255
        elements.append(
            f'<rect x="{_fmt(x)}" y="{_fmt(y)}" width="{_fmt(cell_w)}" height="{_fmt(cell_h)}" '
            f'fill="{palette[value % len(palette)]}" fill-opacity="{opacity:.3f}"/>'
        )
    return elements


def render_geometric(data: bytes, plan: ArtPlan) -> list[str]:
    """Overlapping circles, rotated squares and triangles."""
    n = len(data)
    palette = plan.scheme.colors
    elements = []
    for k in range(12):
        a = data[(2 * k) % n]
        b = data[(2 * k + 1) % n]
        c = data[(2 * k + 2) % n]
        cx = 20 + (b * 360) // 255
        cy = 20 + (c * 360) // 255
        size = 15 + a % 60
        color = palette[(a + k) % len(palette)]
        kind = a % 3
        if kind == 0:
            elements.append(
                f'<circle cx="{cx}" cy="{cy}" r="{size // 2}" fill="{color}" fill-opacity="0.75"/>'
            )
        elif kind == 1:
            elements.append(
                f'<rect x="{cx - size // 2}" y="{cy - size // 2}" width="{size}" height="{size}" '
                f'fill="{color}" fill-opacity="0.75" transform="rotate({a % 90} {cx} {cy})"/>'
            )
        else:
            points = f"{cx},{cy - size} {cx - size},{cy + size} {cx + size},{cy + size}"
            elements.append(f'<polygon points="{points}" fill="{color}" fill-opacity="0.75"/>')
    return elements


def render_helix(data: bytes, plan: ArtPlan) -> list[str]:
    """Double helix with colored rungs between the two strands."""
    n = len(data)
    palette = plan.scheme.colors
    phase = data[3] / 255 * 2 * math.pi
    amplitude = 80 + data[4] % 60
    center = CANVAS_SIZE / 2

    elements = []
    for i in range(24):
        y = 20 + i * 15
        offset = amplitude * math.sin(i * 0.5 + phase)
        x1 = center + offset
        x2 = center - offset
        value = data[i % n]
        color = palette[value % len(palette)]
        radius = 4 + value % 4
        elements.append(
            f'<line x1="{_fmt(x1)}" y1="{y}" x2="{_fmt(x2)}" y2="{y}" stroke="{color}" stroke-width="2"/>'
        )
        elements.append(f'<circle cx="{_fmt(x1)}" cy="{y}" r="{radius}" fill="{palette[0]}"/>')
        elements.append(f'<circle cx="{_fmt(x2)}" cy="{y}" r="{radius}" fill="{palette[-1]}"/>')
    return elements


def render_fractal(data: bytes, plan: ArtPlan) -> list[str]:
    """Recursive branching tree."""
    n = len(data)
    palette = plan.scheme.colors
    depth = 5 + data[5] % 2
    spread = math.radians(15 + data[6] % 30)
    ratio = 0.62 + (data[7] % 16) / 100

    elements: list[str] = []
    counter = [0]

    def branch(x: float, y: float, angle: float, length: float, level: int) -> None:
        if level == 0:
            return
        jitter = math.radians(data[counter[0] % n] % 10 - 5)
        counter[0] += 1
        x2 = x + length * math.cos(angle + jitter)
        y2 = y - length * math.sin(angle + jitter)
        elements.append(
            f'<line x1="{_fmt(x)}" y1="{_fmt(y)}" x2="{_fmt(x2)}" y2="{_fmt(y2)}" '
            f'stroke="{palette[level % len(palette)]}" stroke-width="{level}" stroke-linecap="round"/>'
        )
        branch(x2, y2, angle + spread, length * ratio, level - 1)
        branch(x2, y2, angle - spread, length * ratio, level - 1)

    branch(CANVAS_SIZE / 2, CANVAS_SIZE - 20, math.pi / 2, 100.0, depth)
    return elements


RENDERERS: dict[ArtStyle, Callable[[bytes, ArtPlan], list[str]]] = {
    "heatmap": render_heatmap,
    "geometric": render_geometric,
    "helix": render_helix,
    "fractal": render_fractal,
}


def synthesize_art(data: bytes) -> GeneratedArt:
    """Render the fingerprint bytes into an SVG document."""
    plan = plan_art(data)
    elements = RENDERERS[plan.style](data, plan)
    svg = (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{CANVAS_SIZE}" height="{CANVAS_SIZE}" '
        f'viewBox="0 0 {CANVAS_SIZE} {CANVAS_SIZE}">'
        f'<rect width="{CANVAS_SIZE}" height="{CANVAS_SIZE}" fill="{plan.scheme.background}"/>'
        + "".join(elements)
        + "</svg>"
    )
    logger.debug("Rendered %s art (%s, %d primitives)", plan.style, plan.scheme.name, len(elements))
    return GeneratedArt(plan=plan, svg=svg)

"""Tests for procedural art synthesis."""

from __future__ import annotations

import base64

import pytest

from core.content.art import (
    COLOR_SCHEMES,
    plan_art,
    render_fractal,
    render_geometric,
    render_heatmap,
    render_helix,
    synthesize_art,
)
from core.content.fingerprint import fingerprint_bytes, fingerprint_content


def _seed(style: int, scheme: int = 0, layout: int = 0, fill: int = 0) -> bytes:
    return bytes([style, scheme, layout]) + bytes([fill] * 29)


@pytest.mark.parametrize(
    "first_byte,style",
    [(0, "heatmap"), (1, "geometric"), (2, "helix"), (3, "fractal"), (4, "heatmap"), (255, "fractal")],
)
def test_style_selected_by_first_byte(first_byte, style):
    assert plan_art(_seed(first_byte)).style == style


def test_color_scheme_selected_by_second_byte():
    for i in range(10):
        assert plan_art(_seed(0, scheme=i)).scheme == COLOR_SCHEMES[i % 5]


@pytest.mark.parametrize("third_byte,layout", [(0, "square"), (1, "wide"), (2, "tall"), (5, "tall")])
def test_heatmap_layout_selected_by_third_byte(third_byte, layout):
    assert plan_art(_seed(0, layout=third_byte)).layout == layout


def test_layout_only_for_heatmap():
    plan = plan_art(_seed(1, layout=1))
    assert plan.layout is None
    assert [a.trait_type for a in plan.as_attributes()] == ["Art Style", "Color Scheme"]


def test_short_seed_rejected():
    with pytest.raises(ValueError):
        plan_art(b"\x00\x01")


@pytest.mark.parametrize("layout,cells", [(0, 64), (1, 72), (2, 72)])
def test_heatmap_cell_count(layout, cells):
    data = _seed(0, layout=layout)
    assert len(render_heatmap(data, plan_art(data))) == cells


def test_geometric_draws_twelve_shapes():
    data = _seed(1, fill=7)
    elements = render_geometric(data, plan_art(data))
    assert len(elements) == 12


def test_helix_draws_rungs_and_nodes():
    data = _seed(2)
    elements = render_helix(data, plan_art(data))
    assert sum(e.startswith("<line") for e in elements) == 24
    assert sum(e.startswith("<circle") for e in elements) == 48


def test_fractal_depth_from_sixth_byte():
    shallow = _seed(3)  # data[5] == 0 -> depth 5
    deep = bytes([3, 0, 0, 0, 0, 1]) + bytes(26)  # depth 6
    assert len(render_fractal(shallow, plan_art(shallow))) == 31
    assert len(render_fractal(deep, plan_art(deep))) == 63


def test_synthesis_is_byte_identical():
    data = fingerprint_bytes(fingerprint_content(b"<genome/>"))
    first = synthesize_art(data)
    second = synthesize_art(data)
    assert first.svg == second.svg
    assert first.data_uri == second.data_uri


def test_data_uri_wraps_svg():
    art = synthesize_art(fingerprint_bytes(fingerprint_content(b"<a/>")))
    prefix = "data:image/svg+xml;base64,"
    assert art.data_uri.startswith(prefix)
    decoded = base64.b64decode(art.data_uri[len(prefix):]).decode("utf-8")
    assert decoded == art.svg
    assert decoded.startswith("<svg")
    assert decoded.endswith("</svg>")


def test_known_fingerprint_plan():
    # 0x29 -> geometric, 0x11 -> forest
    plan = synthesize_art(fingerprint_bytes(fingerprint_content(b"<a/>"))).plan
    assert plan.style == "geometric"
    assert plan.scheme.name == "forest"


def test_different_fingerprints_differ():
    a = synthesize_art(fingerprint_bytes(fingerprint_content(b"one")))
    b = synthesize_art(fingerprint_bytes(fingerprint_content(b"two")))
    assert a.svg != b.svg

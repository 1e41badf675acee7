"""
Geometry resolver tests.

Tests:
1-4.   Rectangle / circle / triangle measurements
5-9.   Hole feasibility
10-13. Preview primitives and scaling
14-16. Triangle bisector hole placement
17-19. Placeholder previews
20-21. Registry
22-24. Out-of-range dimensions
"""

import math

import pytest

from sheetmetal.geometry import resolve
from sheetmetal.geometry.base import OUT_OF_RANGE
from sheetmetal.geometry.registry import get_resolver, has_resolver, list_templates
from sheetmetal.geometry.resolver import PLACEHOLDER_SPECS
from sheetmetal.geometry.triangle import side_length
from sheetmetal.models import PrimitiveRole, Template
from sheetmetal.schemas import (
    CirclePrimitive, Concrete, PartSpec, Placeholder, PolygonPrimitive, RectPrimitive,
)


def _rect_holes(width=10, height=5, hole_diameter=0.25, hole_offset=0.5):
    return PartSpec(template=Template.RECT_HOLES, width=width, height=height,
                    hole_diameter=hole_diameter, hole_offset=hole_offset)


def _triangle(base=10, height=9, hole_diameter=1, hole_offset=2):
    return PartSpec(template=Template.TRIANGLE_HOLES, tri_base=base, tri_height=height,
                    hole_diameter=hole_diameter, hole_offset=hole_offset)


def _holes(result):
    return [p for p in result.primitives if p.role == PrimitiveRole.HOLE]


def _barycentric(point, a, b, c):
    (px, py), (ax, ay), (bx, by), (cx, cy) = point, a, b, c
    det = (by - cy) * (ax - cx) + (cx - bx) * (ay - cy)
    l1 = ((by - cy) * (px - cx) + (cx - bx) * (py - cy)) / det
    l2 = ((cy - ay) * (px - cx) + (ax - cx) * (py - cy)) / det
    return l1, l2, 1 - l1 - l2


# ============================================================
# 1-4. Measurements
# ============================================================

@pytest.mark.parametrize("width,height", [(10, 5), (0.5, 48), (3.25, 3.25)])
def test_rectangle_area_and_perimeter(width, height):
    result = resolve(PartSpec(template=Template.RECTANGLE, width=width, height=height))
    assert result.valid
    assert result.area == pytest.approx(width * height)
    assert result.perimeter == pytest.approx(2 * (width + height))
    assert result.hole_count == 0
    assert result.hole_cut_length == 0.0


@pytest.mark.parametrize("diameter", [0.75, 8.0, 36.0])
def test_circle_area_and_perimeter(diameter):
    result = resolve(PartSpec(template=Template.CIRCLE, diameter=diameter))
    assert result.valid
    assert result.area == pytest.approx(math.pi * (diameter / 2) ** 2)
    assert result.perimeter == pytest.approx(math.pi * diameter)
    assert result.hole_count == 0


@pytest.mark.parametrize("base,height", [(6, 5), (10, 9), (2, 20)])
def test_triangle_area_and_perimeter(base, height):
    result = resolve(_triangle(base=base, height=height, hole_diameter=0.1, hole_offset=0.3))
    assert result.area == pytest.approx(0.5 * base * height)
    assert result.perimeter == pytest.approx(base + 2 * math.sqrt((base / 2) ** 2 + height ** 2))
    assert side_length(base, height) == pytest.approx(math.sqrt((base / 2) ** 2 + height ** 2))
    assert result.hole_count == 3


@pytest.mark.parametrize("spec", [
    PartSpec(template=Template.RECTANGLE, width=10),
    PartSpec(template=Template.RECT_HOLES, height=4, hole_diameter=0.25, hole_offset=0.5),
    PartSpec(template=Template.CIRCLE),
    PartSpec(template=Template.TRIANGLE_HOLES, tri_base=6, hole_diameter=0.25, hole_offset=0.5),
])
def test_missing_dimension_zeroes_everything(spec):
    """Missing required dimension → invalid, all metrics zero, nothing to draw."""
    result = resolve(spec)
    assert not result.valid
    assert result.area == 0.0
    assert result.perimeter == 0.0
    assert result.hole_count == 0
    assert result.hole_cut_length == 0.0
    assert result.primitives == ()
    assert result.issues


# ============================================================
# 5-9. Hole feasibility
# ============================================================

def test_rect_holes_cut_length():
    result = resolve(_rect_holes())
    assert result.valid
    assert result.hole_count == 4
    assert result.hole_cut_length == pytest.approx(4 * math.pi * 0.25)
    assert result.total_cut_length == pytest.approx(30 + 4 * math.pi * 0.25)


def test_rect_holes_offset_reaches_opposite_edge():
    """10 × 5 with a 3\" offset: 2 × 3 = 6 ≥ 5 → rejected."""
    result = resolve(_rect_holes(hole_offset=3, hole_diameter=1))
    assert not result.valid
    assert result.hole_cut_length == 0.0
    assert "offset" in result.issues[0]
    # The outline still renders, without holes
    assert len(result.primitives) == 1
    assert isinstance(result.primitives[0], RectPrimitive)
    # Measurements of the outline are kept
    assert result.area == pytest.approx(50)


def test_rect_holes_diameter_too_large():
    result = resolve(_rect_holes(hole_diameter=5, hole_offset=1))
    assert not result.valid
    assert result.hole_cut_length == 0.0
    assert any("diameter" in issue for issue in result.issues)


def test_triangle_holes_limited_by_smallest_dimension():
    """Triangle uses min(base, height), here the 4\" height."""
    ok = resolve(_triangle(base=12, height=4, hole_diameter=0.5, hole_offset=1.9))
    rejected = resolve(_triangle(base=12, height=4, hole_diameter=0.5, hole_offset=2))
    assert ok.valid
    assert ok.hole_cut_length == pytest.approx(3 * math.pi * 0.5)
    assert not rejected.valid
    assert rejected.hole_cut_length == 0.0


def test_hole_template_without_hole_parameters():
    spec = PartSpec(template=Template.RECT_HOLES, width=10, height=5)
    result = resolve(spec)
    assert not result.valid
    assert result.hole_cut_length == 0.0
    assert len(_holes(result)) == 0
    assert result.issues == ("Hole diameter and hole offset are required.",)


def test_plain_rectangle_ignores_hole_fields():
    """Hole fields on a template without holes are never checked."""
    spec = PartSpec(template=Template.RECTANGLE, width=10, height=5,
                    hole_diameter=20, hole_offset=20)
    result = resolve(spec)
    assert result.valid
    assert result.hole_count == 0
    assert _holes(result) == []


# ============================================================
# 10-13. Primitives and scaling
# ============================================================

def test_rectangle_outline_scaled_and_centered():
    result = resolve(PartSpec(template=Template.RECTANGLE, width=10, height=5))
    outline = result.primitives[0]
    assert result.scale_factor == pytest.approx(9.0)
    assert outline.width == pytest.approx(90)
    assert outline.height == pytest.approx(45)
    assert outline.x == pytest.approx(5)
    assert outline.y == pytest.approx(27.5)
    assert not outline.preview


def test_rect_hole_positions_inset_from_corners():
    result = resolve(_rect_holes(width=10, height=5, hole_diameter=0.5, hole_offset=1))
    holes = _holes(result)
    assert len(holes) == 4
    centers = {(round(h.cx, 6), round(h.cy, 6)) for h in holes}
    # scale 9: outline x 5..95, y 27.5..72.5, offset 9
    assert centers == {(14.0, 36.5), (86.0, 36.5), (14.0, 63.5), (86.0, 63.5)}
    assert all(h.r == pytest.approx(2.25) for h in holes)


def test_circle_fills_canvas():
    result = resolve(PartSpec(template=Template.CIRCLE, diameter=8))
    (outline,) = result.primitives
    assert isinstance(outline, CirclePrimitive)
    assert (outline.cx, outline.cy) == (50, 50)
    assert outline.r == pytest.approx(45)


def test_aspect_ratio_preserved_for_tall_triangle():
    result = resolve(_triangle(base=5, height=10, hole_diameter=0.5, hole_offset=1))
    polygon = result.primitives[0]
    assert isinstance(polygon, PolygonPrimitive)
    (x1, y1), (x2, y2), (x3, y3) = polygon.points
    assert x2 - x1 == pytest.approx(45)
    assert y1 - y3 == pytest.approx(90)
    assert y1 == y2
    assert x3 == pytest.approx((x1 + x2) / 2)


# ============================================================
# 14-16. Triangle bisector hole placement
# ============================================================

@pytest.mark.parametrize("offset", [0.1, 1.0, 2.5, 4.4])
def test_triangle_holes_inside_triangle(offset):
    """Every hole center has strictly positive barycentric coordinates."""
    result = resolve(_triangle(base=10, height=9, hole_diameter=0.5, hole_offset=offset))
    assert result.valid
    a, b, c = result.primitives[0].points
    holes = _holes(result)
    assert len(holes) == 3
    for hole in holes:
        coords = _barycentric((hole.cx, hole.cy), a, b, c)
        assert all(k > 0 for k in coords), coords


def test_triangle_hole_offset_measured_along_bisector():
    result = resolve(_triangle(base=10, height=9, hole_diameter=0.5, hole_offset=2))
    vertices = result.primitives[0].points
    for vertex, hole in zip(vertices, _holes(result)):
        distance = math.hypot(hole.cx - vertex[0], hole.cy - vertex[1])
        assert distance == pytest.approx(2 * result.scale_factor)


def test_apex_hole_directly_below_apex():
    result = resolve(_triangle(base=10, height=9, hole_diameter=0.5, hole_offset=2))
    apex = result.primitives[0].points[2]
    apex_hole = _holes(result)[2]
    assert apex_hole.cx == pytest.approx(apex[0])
    assert apex_hole.cy > apex[1]


# ============================================================
# 17-19. Placeholder previews
# ============================================================

@pytest.mark.parametrize("template", list(Template))
def test_placeholder_always_draws(template):
    result = resolve(Placeholder(template=template))
    assert result.primitives
    assert all(p.preview for p in result.primitives)
    assert result.template == template


def test_placeholder_rect_holes_geometry():
    result = resolve(Placeholder(template=Template.RECT_HOLES))
    factor = 90 / 70
    outline = result.primitives[0]
    holes = _holes(result)
    assert result.scale_factor == pytest.approx(factor)
    assert outline.x == pytest.approx(5)
    assert outline.y == pytest.approx((100 - 50 * factor) / 2)
    assert len(holes) == 4
    assert holes[0].cx == pytest.approx(5 + 10 * factor)
    assert holes[0].r == pytest.approx(4 * factor)


def test_concrete_wrapper_matches_bare_spec():
    spec = _rect_holes()
    assert resolve(Concrete(spec=spec)) == resolve(spec)
    assert PLACEHOLDER_SPECS[Template.CIRCLE].diameter == 60


# ============================================================
# 20-21. Registry
# ============================================================

def test_registry_covers_every_template():
    assert set(list_templates()) == set(Template)
    assert all(has_resolver(t) for t in Template)


def test_registry_unknown_template_raises():
    with pytest.raises(ValueError, match="No resolver registered"):
        get_resolver("hexagon")


# ============================================================
# 22-24. Out-of-range dimensions
# ============================================================

@pytest.mark.parametrize("spec", [
    PartSpec(template=Template.RECTANGLE, width=1e200, height=1e200),
    PartSpec(template=Template.RECTANGLE, width=math.inf, height=5),
    PartSpec(template=Template.CIRCLE, diameter=1e200),
    _triangle(base=1e200, height=1e200),
])
def test_overflowing_dimensions_rejected(spec):
    result = resolve(spec)
    assert not result.valid
    assert result.area == 0.0
    assert result.perimeter == 0.0
    assert result.primitives == ()
    assert result.issues == (OUT_OF_RANGE,)


def test_denormal_dimensions_rejected():
    """1e-320 squared underflows to zero area and the preview scale overflows."""
    result = resolve(_rect_holes(width=1e-320, height=1e-320,
                                 hole_diameter=1e-321, hole_offset=1e-322))
    assert not result.valid
    assert result.scale_factor == 1.0
    assert result.primitives == ()
    assert result.issues == (OUT_OF_RANGE,)


def test_large_finite_part_still_resolves():
    result = resolve(PartSpec(template=Template.RECTANGLE, width=1e100, height=1e100))
    assert result.valid
    assert result.area == pytest.approx(1e200)
    assert all(math.isfinite(v) for v in (result.primitives[0].width, result.scale_factor))

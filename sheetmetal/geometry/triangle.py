"""
Isosceles triangle with a hole at each vertex.

The apex sits centered over the base; `tri_height` is the altitude from the
base. Holes are placed along each vertex's interior angle bisector, `hole_offset`
inches in from the vertex.
"""

import math

from ..config import settings
from ..models import HOLE_COUNTS, PrimitiveRole
from ..schemas import CirclePrimitive, GeometryResult, PartSpec, PolygonPrimitive
from . import vectors
from .base import OUT_OF_RANGE, check_holes, dimension, invalid_geometry, out_of_range, scale_factor


def side_length(base: float, height: float) -> float:
    """Length of each of the two equal sides."""
    return math.hypot(base / 2, height)


def triangle_vertices(scaled_base: float, scaled_height: float) -> list:
    """Bottom-left, bottom-right, apex, centered in the preview canvas."""
    size = settings.PREVIEW_VIEWBOX_SIZE
    p1 = ((size - scaled_base) / 2, (size + scaled_height) / 2)
    p2 = (p1[0] + scaled_base, p1[1])
    p3 = (p1[0] + scaled_base / 2, p1[1] - scaled_height)
    return [p1, p2, p3]


def vertex_hole_centers(vertices: list, offset: float) -> list:
    """One hole center per vertex, `offset` along the interior bisector."""
    centers = []
    n = len(vertices)
    for i, vertex in enumerate(vertices):
        prev_vertex = vertices[(i + n - 1) % n]
        next_vertex = vertices[(i + 1) % n]
        bisector = vectors.interior_bisector(vertex, prev_vertex, next_vertex)
        centers.append(vectors.add(vertex, vectors.scale(bisector, offset)))
    return centers


def resolve_triangle(spec: PartSpec, placeholder: bool = False) -> GeometryResult:
    base = dimension(spec.tri_base)
    height = dimension(spec.tri_height)
    if base <= 0 or height <= 0:
        return invalid_geometry(spec.template, "Triangle base and height are required.")

    hole_count = HOLE_COUNTS.get(spec.template, 0)
    holes = check_holes(hole_count, spec.hole_diameter, spec.hole_offset,
                        min(base, height), placeholder=placeholder)

    factor = scale_factor(max(base, height))
    if out_of_range(0.5 * base * height, base + 2 * side_length(base, height), factor):
        return invalid_geometry(spec.template, OUT_OF_RANGE)

    vertices = triangle_vertices(base * factor, height * factor)
    primitives = [PolygonPrimitive(points=tuple(vertices), preview=placeholder)]

    if holes.drawable:
        r = (spec.hole_diameter / 2) * factor
        for cx, cy in vertex_hole_centers(vertices, spec.hole_offset * factor):
            primitives.append(CirclePrimitive(
                cx=cx, cy=cy, r=r, role=PrimitiveRole.HOLE, preview=placeholder,
            ))

    return GeometryResult(
        template=spec.template,
        valid=holes.feasible,
        area=0.5 * base * height,
        perimeter=base + 2 * side_length(base, height),
        hole_count=hole_count,
        hole_cut_length=holes.cut_length,
        scale_factor=factor,
        primitives=tuple(primitives),
        issues=holes.issues,
    )

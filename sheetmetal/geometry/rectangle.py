"""
Rectangle and rectangle-with-holes resolver.

One hole per corner, inset by the offset on both axes.
"""

from ..config import settings
from ..models import HOLE_COUNTS, PrimitiveRole
from ..schemas import CirclePrimitive, GeometryResult, PartSpec, RectPrimitive
from .base import OUT_OF_RANGE, check_holes, dimension, invalid_geometry, out_of_range, scale_factor


def resolve_rectangle(spec: PartSpec, placeholder: bool = False) -> GeometryResult:
    w = dimension(spec.width)
    h = dimension(spec.height)
    if w <= 0 or h <= 0:
        return invalid_geometry(spec.template, "Width and height are required.")

    hole_count = HOLE_COUNTS.get(spec.template, 0)
    holes = check_holes(hole_count, spec.hole_diameter, spec.hole_offset,
                        min(w, h), placeholder=placeholder)

    factor = scale_factor(max(w, h))
    if out_of_range(w * h, 2 * (w + h), factor):
        return invalid_geometry(spec.template, OUT_OF_RANGE)

    scaled_w, scaled_h = w * factor, h * factor
    x = (settings.PREVIEW_VIEWBOX_SIZE - scaled_w) / 2
    y = (settings.PREVIEW_VIEWBOX_SIZE - scaled_h) / 2
    primitives = [RectPrimitive(x=x, y=y, width=scaled_w, height=scaled_h, preview=placeholder)]

    if holes.drawable:
        r = (spec.hole_diameter / 2) * factor
        o = spec.hole_offset * factor
        corners = [
            (x + o, y + o),
            (x + scaled_w - o, y + o),
            (x + o, y + scaled_h - o),
            (x + scaled_w - o, y + scaled_h - o),
        ]
        for cx, cy in corners:
            primitives.append(CirclePrimitive(
                cx=cx, cy=cy, r=r, role=PrimitiveRole.HOLE, preview=placeholder,
            ))

    return GeometryResult(
        template=spec.template,
        valid=holes.feasible,
        area=w * h,
        perimeter=2 * (w + h),
        hole_count=hole_count,
        hole_cut_length=holes.cut_length,
        scale_factor=factor,
        primitives=tuple(primitives),
        issues=holes.issues,
    )

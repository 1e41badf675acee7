"""Circle / disc resolver. No holes."""

import math

from ..schemas import CirclePrimitive, GeometryResult, PartSpec
from .base import OUT_OF_RANGE, canvas_center, dimension, invalid_geometry, out_of_range, scale_factor


def resolve_circle(spec: PartSpec, placeholder: bool = False) -> GeometryResult:
    d = dimension(spec.diameter)
    if d <= 0:
        return invalid_geometry(spec.template, "Diameter is required.")

    radius = d / 2
    area = math.pi * radius * radius
    factor = scale_factor(d)
    if out_of_range(area, math.pi * d, factor):
        return invalid_geometry(spec.template, OUT_OF_RANGE)

    center = canvas_center()
    outline = CirclePrimitive(cx=center, cy=center, r=radius * factor, preview=placeholder)

    return GeometryResult(
        template=spec.template,
        valid=True,
        area=area,
        perimeter=math.pi * d,
        scale_factor=factor,
        primitives=(outline,),
    )

"""
Entry point for geometry resolution.

Accepts either a Concrete part (real customer dimensions) or a Placeholder
(template hover preview with representative dimensions).
"""

from typing import Union

from ..models import Template
from ..schemas import Concrete, GeometryInput, GeometryResult, PartSpec, Placeholder
from .registry import get_resolver

# Representative dimensions drawn before the customer enters any
PLACEHOLDER_SPECS = {
    Template.RECTANGLE: PartSpec(template=Template.RECTANGLE, width=70, height=50),
    Template.CIRCLE: PartSpec(template=Template.CIRCLE, diameter=60),
    Template.RECT_HOLES: PartSpec(
        template=Template.RECT_HOLES, width=70, height=50, hole_diameter=8, hole_offset=10,
    ),
    Template.TRIANGLE_HOLES: PartSpec(
        template=Template.TRIANGLE_HOLES, tri_base=70, tri_height=60, hole_diameter=8, hole_offset=10,
    ),
}


def resolve(geometry_input: Union[GeometryInput, PartSpec]) -> GeometryResult:
    """
    Derive area, perimeter, hole cut-length and preview primitives.

    Args:
        geometry_input: Concrete(spec), Placeholder(template), or a bare PartSpec
            (treated as Concrete).

    Returns:
        GeometryResult. Bad dimensions give valid=False, not an exception.
    """
    if isinstance(geometry_input, PartSpec):
        geometry_input = Concrete(spec=geometry_input)

    if isinstance(geometry_input, Placeholder):
        spec = PLACEHOLDER_SPECS[geometry_input.template]
        return get_resolver(spec.template)(spec, placeholder=True)

    spec = geometry_input.spec
    return get_resolver(spec.template)(spec, placeholder=False)

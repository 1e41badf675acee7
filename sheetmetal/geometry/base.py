"""
Helpers shared by every template resolver.

Each resolver takes a PartSpec plus a placeholder flag and returns a
GeometryResult. Invalid input never raises; it comes back as valid=False
with the reason in `issues`.
"""

import logging
import math
from typing import NamedTuple, Optional, Tuple

from ..config import settings
from ..models import Template
from ..schemas import GeometryResult

logger = logging.getLogger(__name__)


class HoleCheck(NamedTuple):
    feasible: bool
    drawable: bool
    cut_length: float
    issues: Tuple[str, ...]


def dimension(value: Optional[float]) -> float:
    """Unset dimensions count as zero."""
    return value if value is not None else 0.0


def scale_factor(max_dim: float) -> float:
    """Uniform scale so the largest extent fills the preview span."""
    if max_dim <= 0:
        return 1.0
    return settings.preview_span / max_dim


def canvas_center() -> float:
    return settings.PREVIEW_VIEWBOX_SIZE / 2


def invalid_geometry(template: Template, issue: str) -> GeometryResult:
    """Zeroed result for a part whose required dimensions are missing."""
    logger.debug("Geometry rejected for %s: %s", template.value, issue)
    return GeometryResult(template=template, valid=False, issues=(issue,))


OUT_OF_RANGE = "Dimensions are out of range for pricing or preview."


def out_of_range(area: float, perimeter: float, factor: float) -> bool:
    """Overflowed or underflowed measurements cannot be priced or drawn."""
    if not all(math.isfinite(v) for v in (area, perimeter, factor)):
        return True
    return area <= 0


def check_holes(hole_count: int, hole_diameter: Optional[float], hole_offset: Optional[float],
                smallest_dim: float, placeholder: bool = False) -> HoleCheck:
    """
    Hole feasibility against the part's narrowest extent.

    Rejects an offset whose double reaches the opposite edge, and a hole at
    least as wide as the part. Placeholder previews still draw their holes.
    """
    if hole_count == 0:
        return HoleCheck(feasible=True, drawable=False, cut_length=0.0, issues=())

    diameter = dimension(hole_diameter)
    offset = dimension(hole_offset)
    if diameter <= 0 or offset <= 0:
        return HoleCheck(
            feasible=False, drawable=False, cut_length=0.0,
            issues=("Hole diameter and hole offset are required.",),
        )

    issues = []
    if offset * 2 >= smallest_dim:
        issues.append(
            'Hole offset %.3f" is too large, holes would reach the opposite edge '
            '(must be under %.3f").' % (offset, smallest_dim / 2)
        )
    if diameter >= smallest_dim:
        issues.append(
            'Hole diameter %.3f" must be smaller than the narrowest part dimension (%.3f").'
            % (diameter, smallest_dim)
        )
    if issues:
        logger.debug("Infeasible holes: diameter=%s offset=%s smallest=%s",
                     diameter, offset, smallest_dim)
        return HoleCheck(feasible=False, drawable=placeholder, cut_length=0.0, issues=tuple(issues))

    return HoleCheck(
        feasible=True, drawable=True,
        cut_length=hole_count * math.pi * diameter,
        issues=(),
    )

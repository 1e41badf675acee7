"""
SVG rendering of preview primitives.

Output is a standalone <svg> on the normalized viewBox. Outline shapes get
class "base-shape", holes get "hole"; placeholder shapes add "preview" so the
page can draw them faded.
"""

from .config import settings
from .models import PrimitiveRole
from .schemas import CirclePrimitive, GeometryResult, PolygonPrimitive, RectPrimitive

EMPTY_PROMPT = "Select template & dimensions"

SVG_STYLES = """
.base-shape { fill: #a5b4fc; stroke: #4f46e5; stroke-width: 1; vector-effect: non-scaling-stroke; }
.base-shape.preview { fill: #e0e7ff; stroke: #a5b4fc; }
.hole { fill: white; stroke: #ec4899; stroke-width: 0.5; vector-effect: non-scaling-stroke; }
.hole.preview { fill: #fbcfe8; stroke: #f472b6; }
"""


def _num(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return text or "0"


def _css_class(primitive) -> str:
    base = "hole" if primitive.role == PrimitiveRole.HOLE else "base-shape"
    return f"{base} preview" if primitive.preview else base


def render_primitive(primitive) -> str:
    css = _css_class(primitive)
    if isinstance(primitive, RectPrimitive):
        return (f'<rect x="{_num(primitive.x)}" y="{_num(primitive.y)}" '
                f'width="{_num(primitive.width)}" height="{_num(primitive.height)}" class="{css}"/>')
    if isinstance(primitive, CirclePrimitive):
        return (f'<circle cx="{_num(primitive.cx)}" cy="{_num(primitive.cy)}" '
                f'r="{_num(primitive.r)}" class="{css}"/>')
    if isinstance(primitive, PolygonPrimitive):
        points = " ".join(f"{_num(x)},{_num(y)}" for x, y in primitive.points)
        return f'<polygon points="{points}" class="{css}"/>'
    raise ValueError(f"Unknown primitive: {primitive!r}")


def render_svg(geometry: GeometryResult = None) -> str:
    """Render a GeometryResult's primitives; no geometry (or no shapes) renders the prompt."""
    size = _num(settings.PREVIEW_VIEWBOX_SIZE)
    center = _num(settings.PREVIEW_VIEWBOX_SIZE / 2)
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="90%" height="90%" '
        f'viewBox="0 0 {size} {size}" preserveAspectRatio="xMidYMid meet">',
        f"<defs><style>{SVG_STYLES}</style></defs>",
    ]
    primitives = geometry.primitives if geometry is not None else ()
    if primitives:
        lines.extend(render_primitive(p) for p in primitives)
    else:
        lines.append(
            f'<text x="{center}" y="{center}" font-size="8" text-anchor="middle" '
            f'dominant-baseline="middle" fill="#6b7280">{EMPTY_PROMPT.replace("&", "&amp;")}</text>'
        )
    lines.append("</svg>")
    return "\n".join(lines)

"""
Order summary: the read-only panel beside the calculator.

Turns a snapshot and its quote into display strings. Unset values show as N/A;
"other" material and thickness fall back to the customer's own description.
"""

from .formatting import NOT_AVAILABLE, format_currency, format_inches
from .models import HOLE_COUNTS, OTHER, Finishing, Template
from .pricing_data import FINISHINGS, MATERIAL_THICKNESSES, MATERIALS, TEMPLATE_DISPLAY_NAMES
from .schemas import Quote, QuoteInput

DIMENSION_LABELS = {
    Template.RECTANGLE: (("Width", "width"), ("Height", "height")),
    Template.RECT_HOLES: (("Width", "width"), ("Height", "height")),
    Template.CIRCLE: (("Diameter", "diameter"),),
    Template.TRIANGLE_HOLES: (("Base", "tri_base"), ("Height", "tri_height")),
}

HOLE_LABELS = (("Hole Diameter", "hole_diameter"), ("Corner/Vertex Offset", "hole_offset"))


def material_text(snapshot: QuoteInput) -> str:
    if snapshot.material and snapshot.material != OTHER:
        return MATERIALS.get(snapshot.material, snapshot.material)
    return snapshot.other_material or NOT_AVAILABLE


def thickness_text(snapshot: QuoteInput) -> str:
    fallback = snapshot.other_thickness or NOT_AVAILABLE
    if snapshot.thickness and snapshot.thickness != OTHER \
            and snapshot.material and snapshot.material != OTHER:
        return MATERIAL_THICKNESSES.get(snapshot.material, {}).get(snapshot.thickness, fallback)
    return fallback


def finishing_text(snapshot: QuoteInput) -> str:
    text = FINISHINGS.get(snapshot.finishing, "None")
    if snapshot.finishing == Finishing.POWDER_COATED and snapshot.powder_coat_color:
        text += f" ({snapshot.powder_coat_color})"
    elif snapshot.finishing == Finishing.CUSTOM and snapshot.custom_finish_description:
        text += f" ({snapshot.custom_finish_description})"
    return text


def build_summary(snapshot: QuoteInput, quote: Quote) -> dict:
    """
    Returns:
        {
            template: str,
            dimensions: [(label, value), ...],
            holes: [(label, value), ...],   # empty for templates without holes
            material, thickness, finishing: str,
            quantity: int,
            price_tiers: [(tier label, "$x.xx" | "N/A"), ...],
            total: "$x.xx" | "N/A",
            can_order: bool,
            manual_quote: bool,
            issues: [str, ...],
        }
    """
    template = snapshot.template
    dimensions = [
        (label, format_inches(getattr(snapshot, field)))
        for label, field in DIMENSION_LABELS.get(template, ())
    ]
    holes = []
    if HOLE_COUNTS.get(template, 0) > 0:
        holes = [(label, format_inches(getattr(snapshot, field))) for label, field in HOLE_LABELS]

    pricing = quote.pricing
    return {
        "template": TEMPLATE_DISPLAY_NAMES.get(template, NOT_AVAILABLE),
        "dimensions": dimensions,
        "holes": holes,
        "material": material_text(snapshot),
        "thickness": thickness_text(snapshot),
        "finishing": finishing_text(snapshot),
        "quantity": snapshot.quantity,
        "price_tiers": [(t.label, format_currency(t.unit_cost)) for t in pricing.unit_cost_by_tier],
        "total": format_currency(pricing.total_cost),
        "can_order": pricing.estimable,
        "manual_quote": pricing.manual_quote,
        "issues": list(pricing.issues),
    }

"""
Form intake: raw form strings to an immutable QuoteInput snapshot.

Parsing is forgiving: anything that isn't a positive number leaves the field
unset, so the geometry resolver reports it instead of this module raising.
Every transition returns a new snapshot; nothing is patched in place.
"""

import logging
import math

from .models import OTHER, Finishing, Template
from .pricing_data import BASE_PRICING, MATERIAL_THICKNESSES
from .schemas import QuoteInput

logger = logging.getLogger(__name__)

SHAPE_FIELDS = (
    "width", "height", "diameter", "tri_base", "tri_height",
    "hole_diameter", "hole_offset",
)


def parse_number(value, default: float = 0.0) -> float:
    """Parse a numeric value from user input. Blank, garbage, NaN and inf give the default."""
    if value is None:
        return default
    try:
        number = float(str(value).strip().rstrip('"').rstrip("in").strip())
    except (ValueError, TypeError):
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def parse_inches(value):
    """Positive inches, or None (unset)."""
    number = parse_number(value)
    return number if number > 0 else None


def parse_quantity(value) -> int:
    """Whole parts ordered. Anything unparseable or below 1 counts as 1."""
    try:
        quantity = int(float(str(value).strip()))
    except (ValueError, TypeError, OverflowError):
        return 1
    return max(quantity, 1)


def parse_template(value):
    if isinstance(value, Template):
        return value
    try:
        return Template(str(value).strip())
    except ValueError:
        return None


def parse_finishing(value) -> Finishing:
    if isinstance(value, Finishing):
        return value
    try:
        return Finishing(str(value).strip())
    except ValueError:
        return Finishing.NONE


def _text(value) -> str:
    return str(value).strip() if value is not None else ""


def parse_form(raw: dict) -> QuoteInput:
    """
    Build a QuoteInput from the calculator form.

    Args:
        raw: form values keyed by field name (template, width, height, diameter,
            tri_base, tri_height, hole_diameter, hole_offset, material,
            other_material, thickness, other_thickness, quantity, finishing,
            powder_coat_color, custom_finish_description). Missing keys are unset.
    """
    snapshot = QuoteInput(
        template=parse_template(raw.get("template", "")),
        material=_text(raw.get("material")),
        other_material=_text(raw.get("other_material")),
        thickness=_text(raw.get("thickness")),
        other_thickness=_text(raw.get("other_thickness")),
        quantity=parse_quantity(raw.get("quantity", 1)),
        finishing=parse_finishing(raw.get("finishing", Finishing.NONE.value)),
        powder_coat_color=_text(raw.get("powder_coat_color")),
        custom_finish_description=_text(raw.get("custom_finish_description")),
        **{name: parse_inches(raw.get(name)) for name in SHAPE_FIELDS},
    )
    logger.debug("Parsed form snapshot: template=%s material=%s thickness=%s qty=%d",
                 snapshot.template, snapshot.material, snapshot.thickness, snapshot.quantity)
    return snapshot


def select_template(snapshot: QuoteInput, template: Template) -> QuoteInput:
    """
    Switch templates. Shape dimensions reset; material, thickness, quantity
    and finishing carry over.
    """
    return snapshot.model_copy(update={
        "template": template,
        **{name: None for name in SHAPE_FIELDS},
    })


def select_material(snapshot: QuoteInput, material: str) -> QuoteInput:
    """Switch materials, clearing a thickness the new material doesn't stock."""
    update = {"material": material}
    if material and material != OTHER:
        if snapshot.thickness and snapshot.thickness != OTHER \
                and snapshot.thickness not in MATERIAL_THICKNESSES.get(material, {}):
            update["thickness"] = ""
    return snapshot.model_copy(update=update)


def thickness_options(material: str) -> list:
    """
    (value, label) pairs for the thickness dropdown.

    No material → empty. A known material lists only priced thicknesses;
    any chosen material (including "other") also offers "Other...".
    """
    if not material:
        return []
    options = []
    if material != OTHER:
        for value, label in MATERIAL_THICKNESSES.get(material, {}).items():
            if (material, value) in BASE_PRICING:
                options.append((value, label))
    options.append((OTHER, "Other..."))
    return options

"""
Static lookup tables for the sheet metal calculator.

Base rates are raw shop costs. The configured PRICE_MARKUP is applied on top
when the tables are loaded into a PricingEngine (see build_price_table).
"""

from .config import settings
from .models import Finishing, Template
from .schemas import PriceModel, QuantityTier

MATERIALS = {
    "aluminum_3003": "Aluminum 3003",
    "stainless_304": "Stainless Steel 304",
    "mild_steel_a36": "Mild Steel A36",
}

# Thickness value → display label, per material, in dropdown order
MATERIAL_THICKNESSES = {
    "aluminum_3003": {
        "0.032": '0.032" (20 ga)',
        "0.063": '0.063" (14 ga)',
        "0.125": '0.125" (1/8")',
    },
    "stainless_304": {
        "0.030": '0.030" (22 ga)',
        "0.060": '0.060" (16 ga)',
        "0.120": '0.120" (~1/8")',
    },
    "mild_steel_a36": {
        "0.059": '0.059" (16 ga)',
        "0.119": '0.119" (11 ga)',
        "0.179": '0.179" (7 ga)',
    },
}

# (material, thickness) → (base $/sq in, cut speed in/sec)
# Thicker stock cuts slower: 5 in/s up to ~1/16", 3 in/s above
BASE_PRICING = {
    ("aluminum_3003", "0.032"): (0.05, 5.0),
    ("aluminum_3003", "0.063"): (0.05, 5.0),
    ("aluminum_3003", "0.125"): (0.07, 3.0),
    ("stainless_304", "0.030"): (0.10, 5.0),
    ("stainless_304", "0.060"): (0.10, 5.0),
    ("stainless_304", "0.120"): (0.15, 3.0),
    ("mild_steel_a36", "0.059"): (0.05, 5.0),
    ("mild_steel_a36", "0.119"): (0.07, 3.0),
    ("mild_steel_a36", "0.179"): (0.07, 3.0),
}

QUANTITY_TIERS = (
    QuantityTier(label="1-20", min_quantity=1, multiplier=1.0),
    QuantityTier(label="21-50", min_quantity=21, multiplier=0.90),
    QuantityTier(label="51-100", min_quantity=51, multiplier=0.80),
    QuantityTier(label="101+", min_quantity=101, multiplier=0.50),
)

FINISHINGS = {
    Finishing.NONE: "None (Raw Material)",
    Finishing.POWDER_COATED: "Powder Coated",
    Finishing.MATTE: "Matte Finish (Ready for Paint)",
    Finishing.CUSTOM: "Custom Finishing",
}

TEMPLATE_DISPLAY_NAMES = {
    Template.RECTANGLE: "Rectangle / Square",
    Template.CIRCLE: "Circle / Disc",
    Template.RECT_HOLES: "Rectangle w/ Holes",
    Template.TRIANGLE_HOLES: "Triangle w/ Holes",
}


def build_price_table(markup: float = None) -> dict:
    """Apply the shop markup to BASE_PRICING. Returns {(material, thickness): PriceModel}."""
    if markup is None:
        markup = settings.PRICE_MARKUP
    return {
        key: PriceModel(cost_per_sq_inch=cost * markup, cut_speed_in_per_sec=speed)
        for key, (cost, speed) in BASE_PRICING.items()
    }

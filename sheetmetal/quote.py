"""
Quote assembly: the caller that runs both engines on one snapshot.

The geometry resolver and pricing engine never call each other; this module
feeds them the same QuoteInput and pairs their outputs.
"""

import logging

from .geometry import resolve
from .models import Template
from .pricing_engine import PricingEngine
from .schemas import GeometryResult, Placeholder, Quote, QuoteInput

logger = logging.getLogger(__name__)

_default_engine = PricingEngine()


def resolve_snapshot(snapshot: QuoteInput) -> GeometryResult:
    spec = snapshot.part_spec()
    if spec is None:
        return GeometryResult(valid=False, issues=("Select a part template.",))
    return resolve(spec)


def build_quote(snapshot: QuoteInput, engine: PricingEngine = None) -> Quote:
    """Resolve geometry and price it. Recomputed in full on every call."""
    engine = engine or _default_engine
    geometry = resolve_snapshot(snapshot)
    pricing = engine.price(
        geometry,
        material=snapshot.material,
        thickness=snapshot.thickness,
        quantity=snapshot.quantity,
        finishing=snapshot.finishing_spec(),
    )
    return Quote(geometry=geometry, pricing=pricing)


def preview_template(template: Template) -> GeometryResult:
    """Placeholder geometry for a template hover preview."""
    return resolve(Placeholder(template=template))

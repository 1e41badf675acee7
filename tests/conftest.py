"""
Shared test fixtures: pricing engine, sample snapshots.
"""

import pytest

from sheetmetal.models import Finishing, Template
from sheetmetal.pricing_engine import PricingEngine
from sheetmetal.schemas import PartSpec, QuoteInput


@pytest.fixture
def engine():
    """Pricing engine on the default tables and settings."""
    return PricingEngine()


@pytest.fixture
def rectangle_spec():
    """10\" × 5\" plain rectangle."""
    return PartSpec(template=Template.RECTANGLE, width=10, height=5)


@pytest.fixture
def sample_snapshot():
    """The reference order: 10\" × 5\" aluminum 3003 at 0.032\", qty 1, raw."""
    return QuoteInput(
        template=Template.RECTANGLE,
        width=10,
        height=5,
        material="aluminum_3003",
        thickness="0.032",
        quantity=1,
        finishing=Finishing.NONE,
    )

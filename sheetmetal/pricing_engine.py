"""
Pricing Engine: turns resolved geometry into a per-unit and total price.

Pure math. Material cost is area × $/sq in; cutting cost is the time the
cutter spends on the outline plus every hole, at a fixed $/second. Quantity
tiers discount the unit price, but never below the minimum part cost.

Input: GeometryResult + material/thickness keys + quantity + finishing
Output: QuoteResult
"""

import logging
import math
from typing import Optional

from .config import settings
from .models import OTHER, Finishing
from .pricing_data import QUANTITY_TIERS, build_price_table
from .schemas import FinishingSpec, GeometryResult, PriceModel, QuantityTier, QuoteResult, TierPrice

logger = logging.getLogger(__name__)


class PricingEngine:
    """
    Prices one part snapshot against static lookup tables.

    The tables are plain data; pass different ones in to reprice without
    touching the math.
    """

    def __init__(self, price_table: dict = None, quantity_tiers=None,
                 cost_per_second_cutting: float = None, minimum_part_cost: float = None):
        self.price_table = price_table if price_table is not None else build_price_table()
        self.quantity_tiers = tuple(sorted(
            quantity_tiers if quantity_tiers is not None else QUANTITY_TIERS,
            key=lambda t: t.min_quantity,
        ))
        self.cost_per_second_cutting = (
            cost_per_second_cutting if cost_per_second_cutting is not None
            else settings.cost_per_second_cutting
        )
        self.minimum_part_cost = (
            minimum_part_cost if minimum_part_cost is not None
            else settings.minimum_part_cost
        )

    def price(self, geometry: GeometryResult, material: str, thickness: str,
              quantity: int, finishing: FinishingSpec = None) -> QuoteResult:
        """
        Build a QuoteResult. Never raises for bad input; check `valid`/`estimable`.

        Prices are only produced when the geometry is valid, the finishing
        details are complete, and (material, thickness) is in the price table.
        """
        finishing = finishing or FinishingSpec()
        issues = []

        if not geometry.valid:
            issues.append("Part dimensions are incomplete or holes do not fit.")
            issues.extend(geometry.issues)

        issues.extend(self.check_finishing(finishing))

        if quantity < 1:
            issues.append("Quantity must be at least 1.")

        manual_quote = material == OTHER or thickness == OTHER
        model = None
        if manual_quote:
            issues.append("Custom material or thickness requires a manual quote.")
        elif not material or not thickness:
            issues.append("Select a material and thickness.")
        else:
            model = self.lookup(material, thickness)
            if model is None:
                issues.append('No pricing for %s at %s".' % (material, thickness))

        if issues:
            logger.debug("Quote not priced: %s", "; ".join(issues))
            return QuoteResult(
                valid=False,
                estimable=False,
                manual_quote=manual_quote,
                unit_cost_by_tier=self.tier_prices(None),
                issues=tuple(issues),
            )

        base_unit_cost = self.base_unit_cost(geometry, model)
        tiers = self.tier_prices(base_unit_cost)
        selected = self.select_tier(quantity)
        selected_unit_cost = self.floored(base_unit_cost * selected.multiplier)
        try:
            total_cost = selected_unit_cost * quantity
        except OverflowError:
            total_cost = math.inf

        if not math.isfinite(total_cost):
            issue = "Quote is out of range; contact us for a manual quote."
            logger.debug("Quote not priced: %s", issue)
            return QuoteResult(
                valid=False,
                estimable=False,
                unit_cost_by_tier=self.tier_prices(None),
                issues=(issue,),
            )

        logger.info(
            "Priced %s %s\" x%d: base $%.2f/part, tier %s → $%.2f/part, total $%.2f",
            material, thickness, quantity, base_unit_cost, selected.label,
            selected_unit_cost, total_cost,
        )

        return QuoteResult(
            valid=True,
            estimable=True,
            base_unit_cost=base_unit_cost,
            unit_cost_by_tier=tiers,
            selected_unit_cost=selected_unit_cost,
            total_cost=total_cost,
        )

    def lookup(self, material: str, thickness: str) -> Optional[PriceModel]:
        return self.price_table.get((material, thickness))

    def material_cost(self, geometry: GeometryResult, model: PriceModel) -> float:
        return geometry.area * model.cost_per_sq_inch

    def cutting_cost(self, geometry: GeometryResult, model: PriceModel) -> float:
        """Outline + hole cut-length, converted to cutter seconds, then dollars."""
        cutting_seconds = geometry.total_cut_length / model.cut_speed_in_per_sec
        return cutting_seconds * self.cost_per_second_cutting

    def base_unit_cost(self, geometry: GeometryResult, model: PriceModel) -> float:
        return self.material_cost(geometry, model) + self.cutting_cost(geometry, model)

    def floored(self, unit_cost: float) -> float:
        return max(unit_cost, self.minimum_part_cost)

    def tier_prices(self, base_unit_cost: Optional[float]) -> tuple:
        """Floored unit cost at every tier; unit_cost is None when unpriced."""
        return tuple(
            TierPrice(
                label=tier.label,
                min_quantity=tier.min_quantity,
                multiplier=tier.multiplier,
                unit_cost=(
                    self.floored(base_unit_cost * tier.multiplier)
                    if base_unit_cost is not None else None
                ),
            )
            for tier in self.quantity_tiers
        )

    def select_tier(self, quantity: int) -> QuantityTier:
        """The highest tier whose min_quantity the quantity meets."""
        selected = self.quantity_tiers[0]
        for tier in self.quantity_tiers:
            if quantity >= tier.min_quantity:
                selected = tier
        return selected

    def check_finishing(self, finishing: FinishingSpec) -> list:
        """Powder coat needs a color; custom finishing needs a description."""
        issues = []
        if finishing.finishing == Finishing.POWDER_COATED and not finishing.powder_coat_color.strip():
            issues.append("Powder coating requires a color code.")
        if finishing.finishing == Finishing.CUSTOM and not finishing.custom_finish_description.strip():
            issues.append("Custom finishing requires a description.")
        return issues

import logging
import math
from dataclasses import dataclass, field
from decimal import Context, Decimal, ROUND_HALF_UP
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

# Matches every type within a category
ANY_TYPE = "*"

_CENTS = Decimal("0.01")

# --------------------------------------------------
# Factor table
# --------------------------------------------------


@dataclass(frozen=True)
class Factor:
    kg: float            # kg CO2e per `per` units of quantity
    unit: str            # unit the quantity is expected in
    per: float = 1.0
    flat: bool = False   # constant per entry, quantity ignored


@dataclass(frozen=True)
class EmissionFactors:
    table: Mapping[Tuple[str, str], Factor]
    direct_category: str = "other"
    direct_units: FrozenSet[str] = field(default_factory=lambda: frozenset({"kg", "kgco2e"}))

    def lookup(self, category: str, typ: str) -> Optional[Factor]:
        factor = self.table.get((category, typ))
        if factor is None:
            factor = self.table.get((category, ANY_TYPE))
        return factor


# Baseline factors (illustrative averages, kg CO2e per unit)
DEFAULT_FACTORS = EmissionFactors(
    table=MappingProxyType({
        # Transport per km
        ("transport", "car"): Factor(0.192, "km"),
        ("transport", "bus"): Factor(0.105, "km"),
        ("transport", "train"): Factor(0.041, "km"),
        ("transport", "bike"): Factor(0.0, "km"),
        ("transport", "walk"): Factor(0.0, "km"),
        ("transport", "flight"): Factor(0.255, "km"),   # short/medium haul rough average
        # Energy
        ("energy", "electricity"): Factor(0.7, "kwh"),
        ("energy", "lpg"): Factor(3.0, "kg"),
        # Food, per day
        ("food", "meat_heavy_day"): Factor(7.0, "day", flat=True),
        ("food", "vegetarian_day"): Factor(3.0, "day", flat=True),
        ("food", "vegan_day"): Factor(2.0, "day", flat=True),
        # Shopping, per 1000 units of currency spent
        ("shopping", ANY_TYPE): Factor(1.5, "currency", per=1000.0),
    })
)

# --------------------------------------------------
# Helpers
# --------------------------------------------------


def round2(value: float) -> float:
    """Round to 2 decimals, halves away from zero (1.005 -> 1.01, -1.005 -> -1.01)."""
    value = float(value)
    if not math.isfinite(value):
        return value
    d = Decimal(repr(value))
    # precision must cover every integer digit plus the two decimals
    ctx = Context(prec=max(28, d.adjusted() + 4))
    return float(d.quantize(_CENTS, rounding=ROUND_HALF_UP, context=ctx))


def _norm(value: Any) -> str:
    return str(value or "").strip().lower()


# --------------------------------------------------
# Calculator
# --------------------------------------------------


class EmissionCalculator:
    def __init__(self, factors: EmissionFactors = DEFAULT_FACTORS):
        self.factors = factors

    def compute(self, category: str, typ: str, quantity: float, unit: str = "") -> float:
        """
        Convert an activity into kg CO2e.

        Unknown category/type pairs, units outside the direct-value set and
        unusable quantities all give 0.0 instead of an error.
        """
        category, typ, unit = _norm(category), _norm(typ), _norm(unit)

        try:
            qty = float(quantity or 0.0)
        except (TypeError, ValueError):
            return 0.0
        if not math.isfinite(qty):
            return 0.0

        factor = self.factors.lookup(category, typ)
        if factor is not None:
            if factor.flat:
                kg = factor.kg
            else:
                kg = (qty / factor.per) * factor.kg
        elif category == self.factors.direct_category and unit in self.factors.direct_units:
            # direct emission value in kg
            kg = qty
        else:
            logger.debug("No emission factor for %s/%s (unit=%r), using 0", category, typ, unit)
            return 0.0

        # huge quantities times a factor > 1 can overflow to inf
        if not math.isfinite(kg):
            return 0.0
        return round2(kg)

    def catalog(self) -> List[Dict[str, Any]]:
        entries = [
            {
                "category": category,
                "type": typ,
                "unit": f.unit,
                "kg_co2e": f.kg,
                "per": f.per,
                "flat": f.flat,
            }
            for (category, typ), f in self.factors.table.items()
        ]
        entries.append({
            "category": self.factors.direct_category,
            "type": ANY_TYPE,
            "unit": "|".join(sorted(self.factors.direct_units)),
            "kg_co2e": 1.0,
            "per": 1.0,
            "flat": False,
        })
        return entries


default_calculator = EmissionCalculator()


def get_calculator() -> EmissionCalculator:
    return default_calculator

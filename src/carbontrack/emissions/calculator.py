"""Activity emissions: quantity (in the factor's per-unit) x factor value."""

from __future__ import annotations

import structlog

from carbontrack.config import get_settings
from carbontrack.emissions.catalog import resolve_factor
from carbontrack.emissions.schemas import ActivityInput, EmissionFactor, EmissionsResult
from carbontrack.emissions.units import convert
from carbontrack.stores import FactorSource

logger = structlog.get_logger()


def calculate(
    factor: EmissionFactor,
    quantity: float,
    unit: str,
    *,
    strict: bool | None = None,
) -> float:
    """Emissions in the factor's unit (kg CO2e) for ``quantity`` of ``unit``.

    No rounding is applied. ``strict`` defaults to the configured
    ``strict_unit_conversion`` setting.
    """
    if strict is None:
        strict = get_settings().strict_unit_conversion

    converted = quantity
    if unit != factor.factor.per_unit:
        converted = convert(quantity, unit, factor.factor.per_unit, strict=strict)

    return converted * factor.factor.value


def calculate_emissions(
    factors: FactorSource,
    activity: ActivityInput,
    *,
    strict: bool | None = None,
) -> EmissionsResult:
    """Resolve the factor for an activity and compute its total emissions.

    Raises:
        FactorNotFoundError: If no factor matches the activity's category/subcategory.
        UnsupportedConversionError: In strict mode, if the unit cannot be converted.
    """
    factor = resolve_factor(factors, activity.category, activity.subcategory, activity.region)
    total = calculate(factor, activity.quantity, activity.unit, strict=strict)
    logger.debug(
        "emissions_calculated",
        factor_id=factor.id,
        quantity=activity.quantity,
        unit=activity.unit,
        total_emissions=total,
    )
    return EmissionsResult(total_emissions=total, factor_used=factor)

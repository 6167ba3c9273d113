"""Unit conversion for activity quantities.

Conversions are table-driven within four families (distance, mass, volume,
energy). Units are case-sensitive: "mL" and "ML" are different symbols.

Unknown pairs pass the value through unchanged unless ``strict=True``, in
which case ``UnsupportedConversionError`` is raised.
"""

from __future__ import annotations

import structlog

from carbontrack.errors import UnsupportedConversionError

logger = structlog.get_logger()

# from_unit -> {to_unit: multiplier}
CONVERSIONS: dict[str, dict[str, float]] = {
    # Distance
    "km": {"miles": 0.621371, "m": 1000},
    "miles": {"km": 1.60934, "m": 1609.34},
    "m": {"km": 0.001, "miles": 0.000621371},
    # Mass
    "kg": {"g": 1000, "lbs": 2.20462},
    "g": {"kg": 0.001, "lbs": 0.00220462},
    "lbs": {"kg": 0.453592, "g": 453.592},
    # Volume
    "L": {"mL": 1000, "gal": 0.264172},
    "mL": {"L": 0.001, "gal": 0.000264172},
    "gal": {"L": 3.78541, "mL": 3785.41},
    # Energy
    "kWh": {"Wh": 1000, "MJ": 3.6},
    "Wh": {"kWh": 0.001, "MJ": 0.0036},
    "MJ": {"kWh": 0.277778, "Wh": 277.778},
}

UNIT_FAMILIES: dict[str, tuple[str, ...]] = {
    "distance": ("km", "miles", "m"),
    "mass": ("kg", "g", "lbs"),
    "volume": ("L", "mL", "gal"),
    "energy": ("kWh", "Wh", "MJ"),
}

SUPPORTED_UNITS: frozenset[str] = frozenset(CONVERSIONS)


def unit_family(unit: str) -> str | None:
    """Return the family name of a unit, or None if it is not in the table."""
    for family, units in UNIT_FAMILIES.items():
        if unit in units:
            return family
    return None


def can_convert(from_unit: str, to_unit: str) -> bool:
    """True if ``convert`` would apply a real conversion (or the units are equal)."""
    if from_unit == to_unit:
        return True
    return to_unit in CONVERSIONS.get(from_unit, {})


def convert(value: float, from_unit: str, to_unit: str, *, strict: bool = False) -> float:
    """Convert ``value`` from ``from_unit`` to ``to_unit``.

    Identity conversions return ``value`` unchanged. Pairs missing from the
    table return ``value`` unchanged and log a warning, or raise
    ``UnsupportedConversionError`` when ``strict`` is set.
    """
    if from_unit == to_unit:
        return value

    multiplier = CONVERSIONS.get(from_unit, {}).get(to_unit)
    if multiplier is None:
        if strict:
            raise UnsupportedConversionError(from_unit, to_unit)
        logger.warning("unit_conversion_unsupported", from_unit=from_unit, to_unit=to_unit)
        return value

    return value * multiplier

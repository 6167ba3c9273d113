"""Emissions calculation tests."""

import pytest

from carbontrack.config import get_settings
from carbontrack.emissions.calculator import calculate, calculate_emissions
from carbontrack.emissions.schemas import ActivityInput
from carbontrack.errors import FactorNotFoundError, UnsupportedConversionError


class TestCalculate:
    """Test quantity x factor with unit normalization."""

    def test_same_unit(self, factor_factory):
        factor = factor_factory("car", value=0.2, per_unit="km")
        assert calculate(factor, 50, "km") == pytest.approx(10.0)

    def test_converts_into_per_unit(self, factor_factory):
        factor = factor_factory("car", value=0.2, per_unit="km")
        # 10 miles = 16.0934 km
        assert calculate(factor, 10, "miles") == pytest.approx(16.0934 * 0.2)

    def test_grams_against_kg_factor(self, factor_factory):
        factor = factor_factory("beef", "food", "beef", value=13.3, per_unit="kg")
        assert calculate(factor, 500, "g") == pytest.approx(6.65)

    def test_no_rounding(self, factor_factory):
        factor = factor_factory("car", value=0.123456789, per_unit="km")
        assert calculate(factor, 3, "km") == pytest.approx(0.370370367, rel=1e-12)

    @pytest.mark.parametrize("quantity", [0, 0.001, 1, 1234.5])
    @pytest.mark.parametrize("value", [0, 0.05, 13.3])
    def test_non_negative(self, factor_factory, quantity, value):
        factor = factor_factory("f", value=value, per_unit="kg")
        assert calculate(factor, quantity, "lbs") >= 0

    def test_unknown_pair_is_permissive_by_default(self, factor_factory):
        factor = factor_factory("car", value=0.2, per_unit="km")
        assert calculate(factor, 10, "L") == pytest.approx(2.0)

    def test_strict_argument(self, factor_factory):
        factor = factor_factory("car", value=0.2, per_unit="km")
        with pytest.raises(UnsupportedConversionError):
            calculate(factor, 10, "L", strict=True)

    def test_strict_from_settings(self, factor_factory, monkeypatch):
        monkeypatch.setenv("CARBONTRACK_STRICT_UNIT_CONVERSION", "true")
        get_settings.cache_clear()
        factor = factor_factory("car", value=0.2, per_unit="km")
        with pytest.raises(UnsupportedConversionError):
            calculate(factor, 10, "L")


class TestCalculateEmissions:
    """Test resolve + calculate."""

    def test_returns_total_and_factor(self, catalog):
        result = calculate_emissions(
            catalog,
            ActivityInput(category="transport", subcategory="car", quantity=100, unit="km"),
        )
        assert result.total_emissions == pytest.approx(20.0)
        assert result.factor_used.id == "car-global"

    def test_uses_region(self, catalog):
        result = calculate_emissions(
            catalog,
            ActivityInput(category="transport", subcategory="car", quantity=100, unit="km", region="US"),
        )
        assert result.total_emissions == pytest.approx(25.0)
        assert result.factor_used.id == "car-us"

    def test_gallons_of_petrol(self, catalog):
        result = calculate_emissions(
            catalog,
            ActivityInput(category="transport", subcategory="car_petrol", quantity=2, unit="gal"),
        )
        assert result.total_emissions == pytest.approx(2 * 3.78541 * 2.31)

    def test_not_found(self, catalog):
        with pytest.raises(FactorNotFoundError):
            calculate_emissions(
                catalog,
                ActivityInput(category="waste", subcategory="landfill", quantity=1, unit="kg"),
            )

"""Emission factor seed data.

Values are kg CO2e per unit of activity. Sources: EPA, DEFRA and FAO
published averages.
"""

from __future__ import annotations

FACTOR_SEED_DATA: list[dict] = [
    # Transport
    {
        "id": "transport-car-petrol",
        "category": "transport",
        "subcategory": "car_petrol",
        "name": "Petrol car",
        "description": "Average petrol passenger car, per litre of fuel burned",
        "factor": {"value": 2.31, "unit": "kg CO2e", "per_unit": "L"},
        "source": {"name": "EPA", "year": 2023, "reliability": "high"},
        "tags": ["car", "fuel"],
    },
    {
        "id": "transport-car-diesel",
        "category": "transport",
        "subcategory": "car_diesel",
        "name": "Diesel car",
        "description": "Average diesel passenger car, per litre of fuel burned",
        "factor": {"value": 2.68, "unit": "kg CO2e", "per_unit": "L"},
        "source": {"name": "EPA", "year": 2023, "reliability": "high"},
        "tags": ["car", "fuel"],
    },
    {
        "id": "transport-car-distance",
        "category": "transport",
        "subcategory": "car",
        "name": "Car (distance)",
        "description": "Average passenger car, per kilometre driven",
        "factor": {"value": 0.171, "unit": "kg CO2e", "per_unit": "km"},
        "source": {"name": "DEFRA", "year": 2023, "reliability": "medium"},
        "tags": ["car"],
    },
    {
        "id": "transport-bus",
        "category": "transport",
        "subcategory": "bus",
        "name": "Bus",
        "factor": {"value": 0.14, "unit": "kg CO2e", "per_unit": "km"},
        "source": {"name": "EPA", "year": 2023, "reliability": "medium"},
        "tags": ["public_transit"],
    },
    {
        "id": "transport-train",
        "category": "transport",
        "subcategory": "train",
        "name": "Train",
        "factor": {"value": 0.04, "unit": "kg CO2e", "per_unit": "km"},
        "source": {"name": "EPA", "year": 2023, "reliability": "medium"},
        "tags": ["public_transit"],
    },
    {
        "id": "transport-flight-short",
        "category": "transport",
        "subcategory": "flight_short_haul",
        "name": "Short-haul flight",
        "factor": {"value": 0.154, "unit": "kg CO2e", "per_unit": "km"},
        "source": {"name": "DEFRA", "year": 2023, "reliability": "medium"},
        "conditions": {"max_value": 3700, "unit": "km"},
        "tags": ["flight"],
    },
    # Energy
    {
        "id": "energy-electricity",
        "category": "energy",
        "subcategory": "electricity",
        "name": "Grid electricity (world average)",
        "factor": {"value": 0.475, "unit": "kg CO2e", "per_unit": "kWh"},
        "source": {"name": "IEA", "year": 2022, "reliability": "medium"},
        "tags": ["grid"],
    },
    {
        "id": "energy-electricity-us",
        "category": "energy",
        "subcategory": "electricity",
        "name": "Grid electricity (US)",
        "factor": {"value": 0.92, "unit": "kg CO2e", "per_unit": "kWh"},
        "region": {"country": "US"},
        "source": {"name": "EPA", "year": 2023, "reliability": "high"},
        "tags": ["grid"],
    },
    {
        "id": "energy-natural-gas",
        "category": "energy",
        "subcategory": "natural_gas",
        "name": "Natural gas",
        "factor": {"value": 0.183, "unit": "kg CO2e", "per_unit": "kWh"},
        "source": {"name": "DEFRA", "year": 2023, "reliability": "high"},
        "tags": ["heating"],
    },
    # Food
    {
        "id": "food-beef",
        "category": "food",
        "subcategory": "beef",
        "name": "Beef",
        "factor": {"value": 13.3, "unit": "kg CO2e", "per_unit": "kg"},
        "source": {"name": "FAO", "year": 2021, "reliability": "medium"},
        "tags": ["meat"],
    },
    {
        "id": "food-chicken",
        "category": "food",
        "subcategory": "chicken",
        "name": "Chicken",
        "factor": {"value": 2.9, "unit": "kg CO2e", "per_unit": "kg"},
        "source": {"name": "FAO", "year": 2021, "reliability": "medium"},
        "tags": ["meat"],
    },
    {
        "id": "food-vegetables",
        "category": "food",
        "subcategory": "vegetables",
        "name": "Vegetables",
        "factor": {"value": 0.4, "unit": "kg CO2e", "per_unit": "kg"},
        "source": {"name": "FAO", "year": 2021, "reliability": "low"},
        "tags": ["plant_based"],
    },
    # Shopping
    {
        "id": "shopping-clothing",
        "category": "shopping",
        "subcategory": "clothing",
        "name": "Clothing",
        "factor": {"value": 15.0, "unit": "kg CO2e", "per_unit": "kg"},
        "source": {"name": "DEFRA", "year": 2022, "reliability": "low"},
    },
    # Waste
    {
        "id": "waste-landfill",
        "category": "waste",
        "subcategory": "landfill",
        "name": "General waste to landfill",
        "factor": {"value": 0.5, "unit": "kg CO2e", "per_unit": "kg"},
        "source": {"name": "EPA", "year": 2023, "reliability": "medium"},
    },
    {
        "id": "waste-recycling",
        "category": "waste",
        "subcategory": "recycling",
        "name": "Mixed recycling",
        "factor": {"value": 0.021, "unit": "kg CO2e", "per_unit": "kg"},
        "source": {"name": "DEFRA", "year": 2023, "reliability": "medium"},
    },
]

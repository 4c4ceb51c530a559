"""Picklist options shown by the wizard forms."""

from typing import Dict, List


def _options(*values: str) -> List[Dict[str, str]]:
    return [{"label": v, "value": v} for v in values]


CLIENT_TYPE_OPTIONS = [
    {"label": "Person", "value": "PERSON"},
    {"label": "Business", "value": "BUSINESS"},
]

CATEGORY_LICENSE_OPTIONS = _options("A1", "B", "C", "D", "EB", "EC", "ED")

VEHICLE_USAGE_OPTIONS = _options("Tourisme", "Professional")

BODY_TYPE_OPTIONS = _options(
    "Sedan",
    "Hatchback",
    "Coupe",
    "Convertible",
    "SUV",
    "Pickup",
    "Van",
    "Minibus",
    "Bus",
    "Truck",
    "Motorcycle",
    "Scooter",
)

FUEL_TYPE_OPTIONS = _options("Essence", "Diesel", "Electric")

MAKE_OPTIONS = _options("Toyota", "Mercedes", "Dacia", "Renault", "Volkswagen", "BMW", "Audi", "Tesla")

PERIOD_OPTIONS = [
    {"label": "6 Months", "value": "6"},
    {"label": "12 Months", "value": "12"},
    {"label": "24 Months", "value": "24"},
]


def option_values(options: List[Dict[str, str]]) -> List[str]:
    return [o["value"] for o in options]

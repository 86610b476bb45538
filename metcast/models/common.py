"""Common types and helpers shared across models."""

from enum import StrEnum


class UnitSystem(StrEnum):
    METRIC = "metric"  # degrees Celsius, km/h
    CUSTOMARY = "customary"  # degrees Fahrenheit, mph


MPH_PER_METRE_PER_SECOND = 2.237
KPH_PER_METRE_PER_SECOND = 3.6


def convert_temperature(celsius: float, units: UnitSystem) -> float:
    if units == UnitSystem.CUSTOMARY:
        return celsius * 1.8 + 32.0
    return celsius


def convert_speed(metres_per_second: float, units: UnitSystem) -> float:
    if units == UnitSystem.CUSTOMARY:
        return metres_per_second * MPH_PER_METRE_PER_SECOND
    return metres_per_second * KPH_PER_METRE_PER_SECOND

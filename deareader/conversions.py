"""Unit conversions for weather quantities and user unit preferences."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

INHG_PER_HPA = 0.0295299


class WindUnits(IntEnum):
    """Units in which wind speeds are reported."""

    MPH = 0
    MS = 1
    KNOTS = 2
    KMH = 3


_WIND_LABELS = {
    WindUnits.MPH: "mph",
    WindUnits.MS: "m/s",
    WindUnits.KNOTS: "knots",
    WindUnits.KMH: "km/h",
}


def f_to_c(fahrenheit: float) -> float:
    """Convert degrees Fahrenheit to degrees Celsius."""
    return (fahrenheit - 32.0) * 5.0 / 9.0


def c_to_f(celsius: float) -> float:
    """Convert degrees Celsius to degrees Fahrenheit."""
    return celsius * 9.0 / 5.0 + 32.0


def delta_f_to_c(fahrenheit: float) -> float:
    """Convert a temperature difference from Fahrenheit to Celsius."""
    return fahrenheit * 5.0 / 9.0


def inhg_to_hpa(inches: float) -> float:
    """Convert inches of mercury to hectopascals."""
    return inches / INHG_PER_HPA


def hpa_to_inhg(mb: float) -> float:
    """Convert hectopascals (millibars) to inches of mercury."""
    return mb * INHG_PER_HPA


def in_to_cm(inches: float) -> float:
    """Convert inches to centimetres."""
    return inches * 2.54


def cm_to_in(cm: float) -> float:
    """Convert centimetres to inches."""
    return cm / 2.54


def in_to_mm(inches: float) -> float:
    """Convert inches to millimetres."""
    return inches * 25.4


def mm_to_in(mm: float) -> float:
    """Convert millimetres to inches."""
    return mm / 25.4


def miles_to_km(miles: float) -> float:
    """Convert miles to kilometres."""
    return miles * 1.609


def km_to_miles(km: float) -> float:
    """Convert kilometres to miles."""
    return km / 1.609


def mph_to_kph(mph: float) -> float:
    """Convert miles per hour to kilometres per hour."""
    return 1.609344 * mph


def kph_to_mph(kph: float) -> float:
    """Convert kilometres per hour to miles per hour."""
    return kph / 1.609344


def kph_to_mps(kph: float) -> float:
    """Convert kilometres per hour to metres per second."""
    return kph * 0.2777697


def kph_to_knots(kph: float) -> float:
    """Convert kilometres per hour to knots."""
    return kph * 0.5399417


def mph_to_mps(mph: float) -> float:
    """Convert miles per hour to metres per second."""
    return 0.447027 * mph


def mph_to_knots(mph: float) -> float:
    """Convert miles per hour to knots."""
    return 0.8689762 * mph


def mps_to_kph(mps: float) -> float:
    """Scale a metres-per-second value by 1/3.6, as the station software does."""
    return mps / 3.6


def mps_to_mph(mps: float) -> float:
    """Convert metres per second to miles per hour."""
    return mps * 2.2369


def mps_to_knots(mps: float) -> float:
    """Convert metres per second to knots."""
    return mps * 1.943759


def knots_to_kph(knots: float) -> float:
    """Scale a knots value by 1/1.852, as the station software does."""
    return knots / 1.852


def knots_to_mps(knots: float) -> float:
    """Convert knots to metres per second using the station's factor."""
    return knots * 0.388445


def knots_to_mph(knots: float) -> float:
    """Convert knots to miles per hour."""
    return knots * 1.150779


def feet_to_meters(feet: float) -> float:
    """Convert feet to metres."""
    return feet * 0.3048


@dataclass
class UnitPreferences:
    """Preferred units for wind speed and metric rain amounts."""

    wind_units: WindUnits = WindUnits.MPH
    rain_is_mm: bool = True

    def wind_unit_label(self) -> str:
        """Return the label of the configured wind unit."""
        return _WIND_LABELS[WindUnits(self.wind_units)]

    def wind_speed(self, mph: float) -> float:
        """Express a speed given in mph in the configured wind unit."""
        units = WindUnits(self.wind_units)
        if units is WindUnits.MPH:
            return mph
        if units is WindUnits.MS:
            return mph_to_mps(mph)
        if units is WindUnits.KNOTS:
            return mph_to_knots(mph)
        return mph_to_kph(mph)

    def wind_speed_metric(self, kmh: float) -> float:
        """Express a speed given in km/h in the configured wind unit."""
        units = WindUnits(self.wind_units)
        if units is WindUnits.MPH:
            return kph_to_mph(kmh)
        if units is WindUnits.MS:
            return kph_to_mps(kmh)
        if units is WindUnits.KNOTS:
            return kph_to_knots(kmh)
        return kmh

    def rain_in_to_metric(self, inches: float) -> float:
        """Convert rain in inches to millimetres or centimetres."""
        return in_to_mm(inches) if self.rain_is_mm else in_to_cm(inches)

    def rain_metric_to_in(self, value: float) -> float:
        """Convert rain in millimetres or centimetres to inches."""
        return mm_to_in(value) if self.rain_is_mm else cm_to_in(value)
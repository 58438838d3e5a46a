import pytest

from deareader.conversions import (
    UnitPreferences,
    WindUnits,
    c_to_f,
    cm_to_in,
    delta_f_to_c,
    f_to_c,
    feet_to_meters,
    hpa_to_inhg,
    in_to_cm,
    in_to_mm,
    inhg_to_hpa,
    km_to_miles,
    knots_to_kph,
    knots_to_mph,
    knots_to_mps,
    kph_to_knots,
    kph_to_mph,
    kph_to_mps,
    miles_to_km,
    mm_to_in,
    mph_to_knots,
    mph_to_kph,
    mph_to_mps,
    mps_to_knots,
    mps_to_kph,
    mps_to_mph,
)


@pytest.mark.parametrize("value", [-40.0, 0.0, 21.5, 37.0, 100.0])
def test_celsius_fahrenheit_round_trip(value):
    assert f_to_c(c_to_f(value)) == pytest.approx(value)
    assert c_to_f(f_to_c(value)) == pytest.approx(value)


def test_freezing_point():
    assert f_to_c(32.0) == pytest.approx(0.0)


def test_delta_matches_absolute_offset():
    for delta in (1.0, 9.0, 18.0, -27.0):
        assert delta_f_to_c(delta) == pytest.approx(f_to_c(delta + 32.0))


def test_pressure_constant():
    assert hpa_to_inhg(1.0) == pytest.approx(0.0295299)
    assert inhg_to_hpa(hpa_to_inhg(1013.25)) == pytest.approx(1013.25)


def test_length_factors():
    assert in_to_cm(1.0) == pytest.approx(2.54)
    assert in_to_mm(1.0) == pytest.approx(25.4)
    assert feet_to_meters(1.0) == pytest.approx(0.3048)
    assert miles_to_km(1.0) == pytest.approx(1.609)


@pytest.mark.parametrize("value", [0.0, 0.5, 3.0, 123.4])
def test_length_round_trips(value):
    assert cm_to_in(in_to_cm(value)) == pytest.approx(value)
    assert mm_to_in(in_to_mm(value)) == pytest.approx(value)
    assert km_to_miles(miles_to_km(value)) == pytest.approx(value)


@pytest.mark.parametrize("value", [0.0, 5.0, 42.0])
def test_speed_round_trip_mph_kph(value):
    assert kph_to_mph(mph_to_kph(value)) == pytest.approx(value)


def test_speed_factors():
    assert mph_to_kph(1.0) == pytest.approx(1.609344)
    assert mph_to_mps(1.0) == pytest.approx(0.447027)
    assert mph_to_knots(1.0) == pytest.approx(0.8689762)
    assert kph_to_mps(1.0) == pytest.approx(0.2777697)
    assert kph_to_knots(1.0) == pytest.approx(0.5399417)
    assert mps_to_mph(1.0) == pytest.approx(2.2369)
    assert mps_to_knots(1.0) == pytest.approx(1.943759)
    assert knots_to_mph(1.0) == pytest.approx(1.150779)
    assert knots_to_mps(1.0) == pytest.approx(0.388445)


def test_divisor_conversions_keep_station_factors():
    for value in (1.0, 7.2, 36.0):
        assert mps_to_kph(value) * 3.6 == pytest.approx(value)
        assert knots_to_kph(value) * 1.852 == pytest.approx(value)


def test_preferences_defaults():
    prefs = UnitPreferences()
    assert prefs.wind_units is WindUnits.MPH
    assert prefs.rain_is_mm is True
    assert prefs.wind_unit_label() == "mph"


@pytest.mark.parametrize(
    "units, label",
    [
        (WindUnits.MPH, "mph"),
        (WindUnits.MS, "m/s"),
        (WindUnits.KNOTS, "knots"),
        (WindUnits.KMH, "km/h"),
    ],
)
def test_wind_unit_labels(units, label):
    assert UnitPreferences(wind_units=units).wind_unit_label() == label


@pytest.mark.parametrize(
    "units, convert",
    [
        (WindUnits.MPH, lambda v: v),
        (WindUnits.MS, mph_to_mps),
        (WindUnits.KNOTS, mph_to_knots),
        (WindUnits.KMH, mph_to_kph),
    ],
)
def test_wind_speed_from_mph(units, convert):
    prefs = UnitPreferences(wind_units=units)
    assert prefs.wind_speed(12.5) == pytest.approx(convert(12.5))


@pytest.mark.parametrize(
    "units, convert",
    [
        (WindUnits.MPH, kph_to_mph),
        (WindUnits.MS, kph_to_mps),
        (WindUnits.KNOTS, kph_to_knots),
        (WindUnits.KMH, lambda v: v),
    ],
)
def test_wind_speed_from_kmh(units, convert):
    prefs = UnitPreferences(wind_units=units)
    assert prefs.wind_speed_metric(20.0) == pytest.approx(convert(20.0))


def test_rain_units_follow_preference():
    assert UnitPreferences(rain_is_mm=True).rain_in_to_metric(2.0) == pytest.approx(in_to_mm(2.0))
    assert UnitPreferences(rain_is_mm=False).rain_in_to_metric(2.0) == pytest.approx(in_to_cm(2.0))


@pytest.mark.parametrize("rain_is_mm", [True, False])
def test_rain_round_trip(rain_is_mm):
    prefs = UnitPreferences(rain_is_mm=rain_is_mm)
    assert prefs.rain_metric_to_in(prefs.rain_in_to_metric(1.75)) == pytest.approx(1.75)
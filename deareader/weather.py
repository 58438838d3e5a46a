"""Derived weather quantities computed from basic observations."""

from __future__ import annotations

import math

from deareader.conversions import (
    INHG_PER_HPA,
    c_to_f,
    f_to_c,
    feet_to_meters,
    inhg_to_hpa,
    mph_to_mps,
)


def heat_index(temp: float, humidity: float) -> float:
    """Heat index in Fahrenheit; below 75 F the temperature is returned."""
    if temp < 75.0:
        return temp
    t2 = temp * temp
    h2 = humidity * humidity
    return (
        -42.379
        + 2.04901523 * temp
        + 10.14333127 * humidity
        - 0.22475541 * temp * humidity
        - 6.83783e-3 * t2
        - 5.481717e-2 * h2
        + 1.22874e-3 * t2 * humidity
        + 8.5282e-4 * temp * h2
        - 1.99e-6 * t2 * h2
    )


def wind_chill(temp: float, windspeed: float) -> float:
    """Wind chill in Fahrenheit for a wind speed in mph."""
    if temp >= 50.0 or windspeed <= 3.0:
        return temp
    factor = windspeed**0.16
    return 35.74 + 0.6215 * temp - 35.75 * factor + 0.4275 * temp * factor


def dewpoint(temp: float, humidity: float) -> float:
    """Dew point in Fahrenheit from temperature (F) and relative humidity (%)."""
    if humidity <= 0:
        raise ValueError("humidity must be positive to compute a dew point")
    tc = (5.0 / 9.0) * (temp - 32.0)
    es = 6.11 * 10.0 ** (7.5 * (tc / (237.7 + tc)))
    e = humidity * es / 100.0
    log_e = math.log(e)
    tdc = (-430.22 + 237.7 * log_e) / (-log_e + 19.08)
    return (9.0 / 5.0) * tdc + 32.0


def _pressure_term(temp_f: float, elevation_ft: float) -> float:
    elev_meters = feet_to_meters(elevation_ft)
    temp_kelvin = f_to_c(temp_f) + 273.15
    return math.exp(-elev_meters / (temp_kelvin * 29.263))


def station_to_sea_level(sp: float, temp_f: float, elevation_ft: float) -> float:
    """Sea level pressure from station pressure."""
    term = _pressure_term(temp_f, elevation_ft)
    return sp / term if term != 0.0 else 0.0


def sea_level_to_station(slp: float, temp_f: float, elevation_ft: float) -> float:
    """Station pressure from sea level pressure."""
    return slp * _pressure_term(temp_f, elevation_ft)


def station_to_altimeter(sp_inches: float, elevation_ft: float) -> float:
    """Altimeter setting in inches of mercury from station pressure in inches."""
    magic_exp = 0.190284
    elev_meters = feet_to_meters(elevation_ft)
    station_mb = inhg_to_hpa(sp_inches)
    constant_term = 1013.25**magic_exp * 0.0065 / 288
    variable_term = elev_meters / (station_mb - 0.3) ** magic_exp
    main_term = (constant_term * variable_term + 1) ** (1 / magic_exp)
    return (station_mb - 0.3) * main_term * INHG_PER_HPA


def _vapor_pressure(temp_c: float) -> float:
    return 6.1078 * 10 ** (7.5 * temp_c / (237.3 + temp_c))


def air_density(temp_f: float, bp: float, dp: float) -> float:
    """Air density in kg/m^3 from temperature (F), pressure (inHg) and dew point (F)."""
    temp_c = f_to_c(temp_f)
    bp_mb = inhg_to_hpa(bp)
    e = _vapor_pressure(f_to_c(dp))
    tk = temp_c + 273.15
    pv = e * 100
    pd = (bp_mb - e) * 100
    return pv / (461.4964 * tk) + pd / (287.0531 * tk)


def apparent_temperature(temp: float, windspeed: float, humidity: float) -> float:
    """Apparent temperature in Fahrenheit (Steadman approximation)."""
    ta = f_to_c(temp)
    e = humidity / 100.0 * 6.105 * math.exp(17.27 * ta / (237.7 + ta))
    ws = mph_to_mps(windspeed)
    return c_to_f(ta + 0.33 * e - 0.70 * ws - 4.00)


def wet_bulb_temperature(temp: float, humidity: float, pressure: float) -> float:
    """Wet bulb temperature in Fahrenheit from temperature (F), humidity (%) and pressure (inHg)."""
    temp_c = f_to_c(temp)
    pressure_mb = inhg_to_hpa(pressure)
    es = 6.112 * math.exp(17.67 * temp_c / (temp_c + 243.5))
    e2 = es * (humidity / 100.0)
    guess = 0.0
    incr = 10.0
    previous_sign = 1
    difference = 1.0

    while abs(difference) > 0.05:
        ew_guess = 6.112 * math.exp((17.67 * guess) / (guess + 243.5))
        e_guess = ew_guess - pressure_mb * (temp_c - guess) * 0.00066 * (1.0 + 0.00115 * guess)
        difference = e2 - e_guess
        if difference == 0:
            break
        sign = -1 if difference < 0 else 1
        if sign != previous_sign:
            previous_sign = sign
            incr /= 10
        guess += incr * previous_sign

    return c_to_f(guess)
"""Decoding of the real-time data frame sent by the weather station."""

from __future__ import annotations

from dataclasses import dataclass

from deareader.conversions import inhg_to_hpa

FRAME_LENGTH = 88
INVALID = 9999.0

TEMPERATURE_SENSOR_COUNT = 4
INDOOR_SENSOR = 0
OUTDOOR_SENSOR = 1
BACKUP_SENSOR = 3
DISCONNECTED_THRESHOLD = 120.0

RAIN_STEP_MM = 0.25
WIND_STEP_MS = 0.2
MS_TO_MPH = 2.23694
DIRECTION_STEP = 22.5
PRESSURE_STEP_INHG = 0.02953


def _require(frame: bytes, length: int) -> None:
    if len(frame) < length:
        raise ValueError(f"frame too short: need {length} bytes, got {len(frame)}")


def temperature_cal(raw: int) -> float:
    """Convert a 12-bit raw temperature to Celsius; out-of-range gives 9999."""
    raw = int(raw)
    if raw & 0x800:
        value = ((raw ^ 0xFFF) + 1) * -0.1
    else:
        value = raw * 0.1
    if -50.0 <= value <= 70.0:
        return value
    return INVALID


def humidity_cal(raw: float) -> float:
    """Convert a BCD-coded relative humidity; values above 100 give 9999."""
    raw = int(raw)
    value = ((raw & 0xF00) >> 8) * 100 + ((raw & 0xF0) >> 4) * 10 + (raw & 0xF)
    if value > 100:
        return INVALID
    return float(value)


@dataclass(frozen=True)
class RainReading:
    """Accumulated rain in millimetres."""

    total_mm: float


@dataclass(frozen=True)
class WindReading:
    """Wind speeds in mph and direction in degrees."""

    average_speed: float
    gust_speed: float
    direction: float


@dataclass(frozen=True)
class ThermoHygro:
    """Temperature (Celsius) and relative humidity (%) of one sensor."""

    temperature: float
    humidity: float


@dataclass(frozen=True)
class TemperatureReading:
    """Readings of the indoor sensor and the three external channels."""

    sensors: tuple[ThermoHygro, ...]

    @property
    def indoor(self) -> ThermoHygro:
        """The control unit's own sensor."""
        return self.sensors[INDOOR_SENSOR]

    @property
    def outdoor(self) -> ThermoHygro:
        """External channel 1, falling back to channel 3 where it is invalid."""
        primary = self.sensors[OUTDOOR_SENSOR]
        backup = self.sensors[BACKUP_SENSOR]
        temperature = primary.temperature
        humidity = primary.humidity
        if temperature > DISCONNECTED_THRESHOLD:
            temperature = backup.temperature
        if humidity > DISCONNECTED_THRESHOLD:
            humidity = backup.humidity
        return ThermoHygro(temperature, humidity)


@dataclass(frozen=True)
class PressureReading:
    """Barometric pressure in hectopascals."""

    hpa: float


@dataclass(frozen=True)
class StationSample:
    """One complete decoded sample."""

    rain: RainReading
    temperatures: TemperatureReading
    wind: WindReading
    pressure: PressureReading


def decode_rain(frame: bytes) -> RainReading:
    """Decode the accumulated rain counter."""
    _require(frame, 19)
    count = (
        ((frame[15] & 0xF0) >> 4)
        | (frame[16] << 4)
        | (frame[17] << 12)
        | ((frame[18] & 0x0F) << 20)
    )
    return RainReading(RAIN_STEP_MM * count)


def decode_wind(frame: bytes) -> WindReading:
    """Decode average speed, gust speed and direction."""
    _require(frame, 34)
    gust = (((frame[32] & 0xF0) >> 4) + ((frame[33] & 0x0F) << 4)) * WIND_STEP_MS
    average = frame[12] * WIND_STEP_MS
    direction = DIRECTION_STEP * ((frame[13] & 0xF0) >> 4)
    return WindReading(average * MS_TO_MPH, gust * MS_TO_MPH, direction)


def _decode_channel(frame: bytes, channel: int) -> ThermoHygro:
    base = 3 * channel
    humidity_raw = ((frame[base + 1] & 0x0F) << 8) | frame[base]
    temperature_raw = (frame[base + 2] << 4) | ((frame[base + 1] & 0xF0) >> 4)
    return ThermoHygro(temperature_cal(temperature_raw), humidity_cal(humidity_raw))


def decode_temperatures(frame: bytes) -> TemperatureReading:
    """Decode the indoor sensor and the three external channels."""
    _require(frame, 3 * TEMPERATURE_SENSOR_COUNT)
    return TemperatureReading(
        tuple(_decode_channel(frame, channel) for channel in range(TEMPERATURE_SENSOR_COUNT))
    )


def decode_pressure(frame: bytes) -> PressureReading:
    """Decode the barometric pressure."""
    _require(frame, 20)
    raw = ((frame[18] & 0xF0) >> 4) + (frame[19] << 4)
    return PressureReading(inhg_to_hpa(PRESSURE_STEP_INHG * raw))


def decode_sample(frame: bytes) -> StationSample:
    """Decode every quantity of a real-time frame."""
    _require(frame, 34)
    return StationSample(
        rain=decode_rain(frame),
        temperatures=decode_temperatures(frame),
        wind=decode_wind(frame),
        pressure=decode_pressure(frame),
    )
# deareader

`deareader` drives the real-time read protocol of a DeA weather station
over a transport you supply. It turns the 88-byte frames the station sends
into rain, temperature, humidity, wind and barometric pressure readings,
and appends each accepted sample to CSV files.

It also carries general weather helpers: unit conversions, derived
quantities such as heat index, wind chill, dew point and wet-bulb
temperature, and utilities for the packed date/time format used by
weather-station archives.

The package uses only the standard library.

## How a reading works

The station is sent a fixed 8-byte command (`READ_COMMAND` in
`deareader.station`). It answers with a series of 8-byte packets; the
first byte of each packet says how many of the following bytes carry
data. `assemble_frame(packets)` joins those payloads into one 88-byte
frame, ignoring packets past the eleventh.

Every reading is taken twice, one second apart. `samples_match(first,
second)` compares the first 33 bytes of the two frames, skipping the
timestamp bytes 21 to 30. The sample is accepted only when they agree
and at least 72 bytes arrived in the second reading; otherwise
`StationReader.read_sample()` raises `ReadError`.

## Decoding frames

`deareader.decoding` works on plain `bytes`, so it can be used on frames
captured elsewhere:

```python
from deareader.decoding import decode_sample

sample = decode_sample(frame)        # at least 34 bytes
sample.rain.total_mm                 # accumulated rain, mm
sample.wind.average_speed            # mph
sample.wind.gust_speed               # mph
sample.wind.direction                # degrees, steps of 22.5
sample.temperatures.indoor           # ThermoHygro(temperature, humidity)
sample.temperatures.outdoor          # channel 1, channel 3 as fallback
sample.temperatures.sensors          # all four sensors
sample.pressure.hpa                  # hectopascals
```

`decode_rain`, `decode_wind`, `decode_temperatures` and `decode_pressure`
decode one part of the frame each and raise `ValueError` when the frame is
too short. `temperature_cal` turns a 12-bit raw value into degrees
Celsius and `humidity_cal` a BCD-coded value into percent relative
humidity; values outside -50..70 °C or above 100 % come back as `9999.0`.

The outdoor reading uses external channel 1; a temperature or humidity
above 120 on that channel is replaced by the value from channel 3.

## Reading from a station

`StationReader` talks to any object with the `Transport` methods
`send_command(command)` and `read_packet()`. `read_packet()` returns the
next 8-byte packet; `None` or any packet of another length ends the
transfer.

```python
from deareader.station import DataLogger, ReadError, StationReader

reader = StationReader(transport)        # optional second argument: a sleep function
logger = DataLogger()                    # folder from DATA_FOLDER, else the current directory

try:
    sample = reader.read_data(timeout=25.0)
    logger.log_sample(sample)
except ReadError:
    ...

# poll every poll_interval seconds; returns how many samples were logged
reader.run(logger, poll_interval=60.0, iterations=10)
```

`read_data` retries `read_sample` until one succeeds, raising `ReadError`
once the timeout has passed. `run` keeps going when a read fails and runs
forever when `iterations` is `None`.

`DataLogger(folder, clock)` appends lines stamped `YYYY-MM-DD HH:MM:SS`
(local time from `clock`) to `rain.csv`, `internal_temp.csv`,
`external_temp.csv`, `wind.csv` and `pressure.csv` in its folder, prints a
summary of each reading, and returns the paths it wrote. The
`external_temp.csv` line is skipped while the outdoor temperature is 100
or more, which is what a disconnected sensor reports. Pressure is written
in hectopascals.

## Conversions and derived values

```python
from deareader.conversions import UnitPreferences, WindUnits, f_to_c, inhg_to_hpa
from deareader.weather import dewpoint, heat_index, wind_chill, wet_bulb_temperature

f_to_c(212.0)                     # 100.0
inhg_to_hpa(29.92)

prefs = UnitPreferences(wind_units=WindUnits.KNOTS)
prefs.wind_unit_label()           # "knots"
prefs.wind_speed(10.0)            # mph to knots
prefs.rain_in_to_metric(1.0)      # 25.4 (mm; cm when rain_is_mm is False)
```

`deareader.conversions` has converters between Fahrenheit and Celsius,
inches of mercury and hectopascals, inches, centimetres and millimetres,
miles and kilometres, feet and metres, and mph, km/h, m/s and knots.

`deareader.weather` has `heat_index`, `wind_chill`, `dewpoint`,
`station_to_sea_level`, `sea_level_to_station`, `station_to_altimeter`,
`air_density`, `apparent_temperature` and `wet_bulb_temperature`. Inputs
are in Fahrenheit, mph and inches of mercury unless the name says
otherwise. `dewpoint` raises `ValueError` for a humidity of zero or less.

## Time and utility helpers

`deareader.timeutils` packs and unpacks archive dates (`pack_date`,
`unpack_date`), converts packed date/time pairs (`packed_to_datetime`,
`packed_to_timestamp`, `packed_time_delta`, `increment_packed_time`),
decides between day and night from packed sunrise and sunset
(`is_daytime`), computes history start points (`day_start_index`,
`week_start_time`, `month_start_time`, `year_start_time`), checks
`is_today`, and reports daylight-saving transitions with
`DstMonitor.check()`, which returns a `DstChange`.

`deareader.utils` has `format_float`, `wind_direction_degrees` (a compass
label such as `"NNE"` to degrees, `ValueError` for unknown labels),
`cwop_version`, the marker-file helpers `write_marker_file` and
`read_marker_file` (which returns 0 for a missing or unreadable file), and
`VerbosityControl` for per-daemon switchable logging.

## What the package does not do

- It has no USB layer. Finding, opening and claiming the station, and
  exchanging packets with it, is left to the `Transport` object you pass
  to `StationReader`.
- It installs no command. To poll a station continuously, call
  `StationReader.run` from your own program.
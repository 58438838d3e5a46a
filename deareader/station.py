"""Reading samples from the weather station and logging them to CSV files."""

from __future__ import annotations

import itertools
import os
import time
from pathlib import Path
from typing import Callable, Iterable, Optional, Protocol, Union

from deareader.decoding import StationSample, decode_sample

VENDOR_ID = 0x1130
PRODUCT_ID = 0x6880

READ_COMMAND = bytes((0x02, 0xFF, 0xAF, 0xB8, 0x8C, 0x0A, 0xF6, 0xBC))
PACKET_LENGTH = 8
BUFFER_LENGTH = 88
MIN_BUFFER_LENGTH = 72
TIMESTAMP_START = 21
TIMESTAMP_END = 31
COMPARED_LENGTH = 33

COMMAND_SETTLE = 0.5
PACKET_READ_DELAY = 0.02
REREAD_DELAY = 1.0
RETRY_DELAY = 1.0
READ_TIMEOUT = 25.0
POLL_INTERVAL = 60.0

EXTERNAL_VALID_LIMIT = 100.0
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class ReadError(Exception):
    """A sample could not be read reliably from the station."""


class Transport(Protocol):
    """Channel to the station: commands out, 8-byte interrupt packets in."""

    def send_command(self, command: bytes) -> None:
        """Send a command to the station."""

    def read_packet(self) -> Optional[bytes]:
        """Return the next packet; anything but 8 bytes ends the transfer."""


def assemble_frame(packets: Iterable[bytes]) -> bytes:
    """Join the payloads of interrupt packets into an 88-byte frame.

    The first byte of each packet tells how many of the following bytes
    carry data. Packets past the eleventh are ignored.
    """
    frame = bytearray(BUFFER_LENGTH)
    offset = 0
    received = 0
    for packet in packets:
        if len(packet) != PACKET_LENGTH:
            raise ValueError(f"packet must be {PACKET_LENGTH} bytes, got {len(packet)}")
        received += PACKET_LENGTH
        size = packet[0]
        if received <= BUFFER_LENGTH:
            payload = bytes(packet[1 : 1 + size])[: max(0, BUFFER_LENGTH - offset)]
            frame[offset : offset + len(payload)] = payload
        offset += size
    return bytes(frame)


def samples_match(first: bytes, second: bytes) -> bool:
    """Compare two frames over their data bytes, ignoring the timestamp."""
    return (
        first[:TIMESTAMP_START] == second[:TIMESTAMP_START]
        and first[TIMESTAMP_END:COMPARED_LENGTH] == second[TIMESTAMP_END:COMPARED_LENGTH]
    )


class DataLogger:
    """Appends decoded samples to CSV files in a data folder."""

    def __init__(
        self,
        folder: Union[str, Path, None] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if folder is None:
            folder = os.environ.get("DATA_FOLDER", "")
        self.folder = Path(folder) if folder else Path()
        self._clock = clock

    def _append(self, name: str, line: str) -> Path:
        path = self.folder / name
        with path.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")
        return path

    def log_sample(self, sample: StationSample) -> list[Path]:
        """Write the sample's readings and return the files appended to."""
        stamp = time.strftime(TIMESTAMP_FORMAT, time.localtime(self._clock()))
        written = []

        rain = sample.rain.total_mm
        written.append(self._append("rain.csv", f"{stamp}, {rain:.2f}"))
        print(f"dea: rain  accum {rain:.2f}")

        temperatures = sample.temperatures
        indoor = temperatures.indoor
        written.append(
            self._append(
                "internal_temp.csv",
                f"{stamp}, {indoor.temperature:.1f}, {indoor.humidity:2.0f}",
            )
        )
        outdoor = temperatures.outdoor
        if outdoor.temperature < EXTERNAL_VALID_LIMIT:
            written.append(
                self._append(
                    "external_temp.csv",
                    f"{stamp}, {outdoor.temperature:.1f}, {outdoor.humidity:2.0f}",
                )
            )
        for index, sensor in enumerate(temperatures.sensors):
            print(
                f"dea: temp sensor {index:02d}  temperature {sensor.temperature:.1f}"
                f"  humidity {sensor.humidity:2.0f} "
            )

        wind = sample.wind
        written.append(
            self._append(
                "wind.csv",
                f"{stamp}, {wind.average_speed:.1f}, {wind.gust_speed:.1f}, {wind.direction:3.1f}",
            )
        )
        print(
            f"dea: wind speed {wind.average_speed:.1f}  gust {wind.gust_speed:.1f}"
            f"  direction {wind.direction:3.1f}"
        )

        pressure = sample.pressure.hpa
        written.append(self._append("pressure.csv", f"{stamp}, {pressure:2.2f}"))
        print(f"dea: barometric pressure {pressure:2.2f} inHg")
        return written


class StationReader:
    """Polls the station for real-time samples over a transport."""

    def __init__(
        self,
        transport: Transport,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.transport = transport
        self._sleep = sleep
        self.clock: Callable[[], float] = time.monotonic

    def read_buffer(self) -> tuple[bytes, int]:
        """Request real-time data; return the frame and the bytes received."""
        self.transport.send_command(READ_COMMAND)
        self._sleep(COMMAND_SETTLE)
        packets = []
        while True:
            packet = self.transport.read_packet()
            self._sleep(PACKET_READ_DELAY)
            if packet is None or len(packet) != PACKET_LENGTH:
                break
            packets.append(bytes(packet))
        return assemble_frame(packets), PACKET_LENGTH * len(packets)

    def read_sample(self) -> StationSample:
        """Read the data twice and decode it if both readings agree."""
        first, _ = self.read_buffer()
        self._sleep(REREAD_DELAY)
        second, received = self.read_buffer()
        if not samples_match(first, second):
            raise ReadError("consecutive readings differ")
        if received < MIN_BUFFER_LENGTH:
            raise ReadError(f"only {received} bytes received")
        print("dea: sample acquired")
        sample = decode_sample(second)
        print("dea: data decoded")
        return sample

    def read_data(self, timeout: float = READ_TIMEOUT) -> StationSample:
        """Retry reading a sample until one succeeds or the timeout passes."""
        deadline = self.clock() + timeout
        while True:
            self._sleep(RETRY_DELAY)
            try:
                return self.read_sample()
            except ReadError:
                pass
            if self.clock() > deadline:
                print("dea: timeout!")
                raise ReadError("timed out waiting for a valid sample")

    def run(
        self,
        logger: DataLogger,
        poll_interval: float = POLL_INTERVAL,
        iterations: Optional[int] = None,
    ) -> int:
        """Poll and log samples; return how many were logged."""
        rounds = itertools.count() if iterations is None else range(iterations)
        logged = 0
        for _ in rounds:
            try:
                sample = self.read_data()
            except ReadError:
                pass
            else:
                logger.log_sample(sample)
                logged += 1
            self._sleep(poll_interval)
        return logged
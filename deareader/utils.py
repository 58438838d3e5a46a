"""Logging verbosity, formatting helpers and marker files."""

from __future__ import annotations

import math
import re
from enum import IntFlag
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

DIRECTION_LABELS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)

CWOP_VERSION_LENGTH = 23


class VerboseBits(IntFlag):
    """Per-daemon verbosity bits."""

    WVIEWD = 0x01
    HTMLGEND = 0x02
    WVALARMD = 0x04
    WVIEWFTPD = 0x08
    WVIEWSSHD = 0x10
    WVCWOPD = 0x20
    WVWUNDERD = 0x40
    ALL = 0x7F


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class VerbosityControl:
    """Decides whether a daemon's log messages are shown."""

    def __init__(self, daemon_mask: int, setting: str) -> None:
        self.daemon_mask = daemon_mask
        if len(setting) < 8:
            self.verbose_mask = int(VerboseBits.ALL) if _leading_int(setting) else 0
        else:
            self.verbose_mask = sum(
                1 << (7 - position)
                for position, flag in enumerate(setting[:8])
                if flag == "1"
            )

    @property
    def enabled(self) -> bool:
        """True when messages for this daemon are printed."""
        return bool(self.daemon_mask & self.verbose_mask)

    def toggle(self) -> bool:
        """Flip verbosity for this daemon and return the new state."""
        if self.enabled:
            self.verbose_mask &= ~self.daemon_mask
            return False
        self.verbose_mask |= self.daemon_mask
        return True

    def log(self, message: str) -> None:
        """Print the message when verbosity is enabled."""
        if self.enabled:
            print(message, end="")


def _trunc_div10(value: int) -> int:
    quotient = abs(value) // 10
    return quotient if value >= 0 else -quotient


def format_float(value: float, dec_places: int) -> str:
    """Format a number rounding half away from truncation, as the station does."""
    if dec_places < 0:
        raise ValueError("decimal places must not be negative")
    scaled = int(value * 10 ** (dec_places + 1))
    if int(math.fmod(scaled, 10)) > 4:
        scaled += 5
    scaled = _trunc_div10(scaled)
    return f"{scaled / 10 ** dec_places:.{dec_places}f}"


def wind_direction_degrees(label: str) -> int:
    """Return the degrees of a compass label such as 'NNE'."""
    try:
        index = DIRECTION_LABELS.index(label)
    except ValueError:
        raise ValueError(f"unknown wind direction: {label!r}") from None
    return int(22.5 * index)


def cwop_version(version: str) -> str:
    """Build a CWOP version string: spaces and dots become underscores."""
    return version[:CWOP_VERSION_LENGTH].replace(" ", "_").replace(".", "_")


def write_marker_file(path: PathLike, marker: int) -> None:
    """Write a marker time as an unsigned 32-bit decimal number."""
    Path(path).write_text(str(marker & 0xFFFFFFFF))


def read_marker_file(path: PathLike) -> int:
    """Read a marker time; a missing, empty or unparsable file gives 0."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            line = handle.readline()
    except OSError:
        return 0
    return _leading_int(line[:31]) & 0xFFFFFFFF
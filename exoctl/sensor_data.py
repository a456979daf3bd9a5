"""IMU log entries: building, appending and reading back roll angles.

Each log line is one JSON object holding a timestamp and a list of sensors,
each with its location and Euler angles in degrees.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from itertools import islice
from typing import Any

logger = logging.getLogger(__name__)

CHANNELS = 6

SENSOR_CHANNELS = (0, 1, 2, 3, 4, 5)
SENSOR_LOCATIONS = (
    "Left Hip",
    "Left Knee",
    "Left Ankle",
    "Right Ankle",
    "Right Knee",
    "Right Hip",
)


@dataclass(frozen=True)
class EulerReading:
    """Orientation of one IMU in degrees."""

    location: str
    heading: float
    roll: float
    pitch: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "location": self.location,
            "euler": {"heading": self.heading, "roll": self.roll, "pitch": self.pitch},
        }


def get_sensor_data(
    filename: str | os.PathLike[str], chunk_index: int, step_size: int
) -> list[list[float]]:
    """Read roll angles from lines ``chunk_index`` to ``chunk_index + step_size``.

    Lines whose entry does not hold exactly six sensors are skipped. Raises
    ``OSError`` if the file cannot be opened.
    """
    start = max(chunk_index, 0)
    stop = max(chunk_index + step_size, start)
    output: list[list[float]] = []
    with open(filename, encoding="utf-8") as file:
        for line in islice(file, start, stop):
            entry = json.loads(line)
            rolls = [float(sensor["euler"]["roll"]) for sensor in entry["sensors"]]
            if len(rolls) == CHANNELS:
                output.append(rolls)
    return output


def human_readable_timestamp(now: datetime | None = None) -> str:
    """Format ``now`` (default: the local time) as ``YYYY-MM-DD HH:MM:SS.<ms>``.

    The millisecond part is written without leading zeros.
    """
    if now is None:
        now = datetime.now()
    return f"{now:%Y-%m-%d %H:%M:%S}.{now.microsecond // 1000}"


def make_log_entry(
    readings: Iterable[EulerReading], timestamp: str | None = None
) -> dict[str, Any]:
    """Build one log entry from sensor readings."""
    return {
        "timestamp": timestamp if timestamp is not None else human_readable_timestamp(),
        "sensors": [reading.to_dict() for reading in readings],
    }


def append_log_entry(path: str | os.PathLike[str], entry: dict[str, Any]) -> None:
    """Append ``entry`` to ``path`` as one compact JSON line with sorted keys."""
    line = json.dumps(entry, separators=(",", ":"), sort_keys=True)
    with open(path, "a", encoding="utf-8") as file:
        file.write(line + "\n")
        file.flush()
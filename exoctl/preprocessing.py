"""Clean up raw IMU roll signals before they are fed to the joint-angle model."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

CHANNELS = 6
DEFAULT_SECTION_SIZE = 100
DEFAULT_DIFF_MAX = 200.0


def _fix_flip(signal: Sequence[float], diff_max: float, section_size: int) -> list[float]:
    """Undo 360-degree wrap-arounds by comparing each sample with the recent mean."""
    if not signal:
        return []
    fixed = [float(signal[0])]
    for i, value in enumerate(signal[1:], start=1):
        start = max(i - section_size, 0)
        recent = fixed[start:]
        diff = value - sum(recent) / len(recent)
        if diff > diff_max:
            fixed.append(value - 360.0)
        elif diff < -diff_max:
            fixed.append(value + 360.0)
        else:
            fixed.append(float(value))
    return fixed


def _normalize(signal: Iterable[float], section_size: int) -> list[float]:
    """Subtract a trailing moving average (window includes the current sample)."""
    window: deque[float] = deque(maxlen=section_size)
    normalized = []
    for value in signal:
        window.append(value)
        normalized.append(value - sum(window) / len(window))
    return normalized


def process_sensor_data(
    data: Sequence[Sequence[float]],
    section_size: int = DEFAULT_SECTION_SIZE,
    diff_max: float = DEFAULT_DIFF_MAX,
) -> list[list[float]]:
    """Return a processed copy of ``data`` shaped ``[timesteps][6]``.

    Each channel has angle flips removed and is then normalised against a
    trailing moving average. Data that is empty or whose first row does not
    hold six channels is returned unchanged.
    """
    if section_size < 1:
        raise ValueError("section_size must be at least 1")
    rows = [list(row) for row in data]
    if not rows or len(rows[0]) != CHANNELS:
        return rows
    if any(len(row) != CHANNELS for row in rows):
        raise ValueError(f"every timestep must hold {CHANNELS} values")

    channels = (
        _normalize(_fix_flip(channel, diff_max, section_size), section_size)
        for channel in zip(*rows)
    )
    return [list(step) for step in zip(*channels)]
"""Remove calibration offsets from predicted joint angles."""

from __future__ import annotations

from collections.abc import Sequence

KNEE_OFFSET = 0.0
HIP_OFFSET = 0.0

# Channel order: left knee, -, -, right hip, right knee, left hip.
LEFT_KNEE, RIGHT_HIP, RIGHT_KNEE, LEFT_HIP = 0, 3, 4, 5


def clean_ai_offsets(readings: Sequence[float]) -> list[float]:
    """Return six cleaned angles with knee angles made relative to the hip.

    Channels 1 and 2 are not used by the controller and come back as zero.
    """
    if len(readings) < 6:
        raise ValueError("expected at least 6 readings")
    cleaned = [0.0] * 6
    cleaned[LEFT_KNEE] = readings[LEFT_KNEE] - KNEE_OFFSET
    cleaned[RIGHT_KNEE] = readings[RIGHT_KNEE] - KNEE_OFFSET
    cleaned[RIGHT_HIP] = readings[RIGHT_HIP] - HIP_OFFSET
    cleaned[LEFT_HIP] = readings[LEFT_HIP] - HIP_OFFSET

    cleaned[LEFT_KNEE] -= cleaned[LEFT_HIP]
    cleaned[RIGHT_KNEE] -= cleaned[RIGHT_HIP]
    return cleaned
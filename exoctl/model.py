"""Normalisation around the joint-angle prediction model."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

logger = logging.getLogger(__name__)

WINDOW = 30
CHANNELS = 6

MEAN = (
    -0.2551588541666669,
    -0.5622835937500013,
    -0.6163348958333331,
    -0.10561770833333331,
    2.1784476562499995,
    0.005826041666666451,
)

SCALE = (
    12.578133062788302,
    19.253724193808857,
    6.668231683716051,
    7.107068858678035,
    15.89329980993656,
    5.110401095770009,
)


def normalize_window(last_30_timesteps: Sequence[Sequence[float]]) -> list[list[float]]:
    """Scale a ``[30][6]`` window with the model's per-channel mean and scale."""
    if len(last_30_timesteps) != WINDOW:
        raise ValueError(f"Expected {WINDOW} timesteps")
    window = []
    for step in last_30_timesteps:
        if len(step) != CHANNELS:
            raise ValueError(f"Each timestep must have {CHANNELS} joint angles")
        window.append([(v - m) / s for v, m, s in zip(step, MEAN, SCALE)])
    return window


def denormalize_output(values: Sequence[float]) -> list[float]:
    """Map six normalised model outputs back to joint angles in degrees."""
    if len(values) < CHANNELS:
        raise ValueError(f"Expected {CHANNELS} model outputs")
    return [float(v) * s + m for v, s, m in zip(values, SCALE, MEAN)]


def predict_joint_angles(
    model: Callable[[list[list[list[float]]]], Any],
    last_30_timesteps: Sequence[Sequence[float]],
) -> list[float]:
    """Predict six joint angles from the last 30 timesteps.

    ``model`` receives a batch of shape ``[1][30][6]`` and must return an
    output indexable as ``[0][i]`` for the six channels.
    """
    batch = [normalize_window(last_30_timesteps)]
    output = model(batch)
    angles = denormalize_output([float(v) for v in output[0]])
    logger.info("Predicted joint angles: %s", " ".join(f"{a:g}" for a in angles))
    return angles
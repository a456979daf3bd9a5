"""Control loop step: roll angles in, rate-limited motor torques out."""

from __future__ import annotations

import logging
import math
from collections import deque
from collections.abc import Callable, Sequence
from typing import Any

from exoctl.clean import clean_ai_offsets
from exoctl.estimator import JointEstimator
from exoctl.model import predict_joint_angles
from exoctl.preprocessing import process_sensor_data
from exoctl.torque import TorqueController

logger = logging.getLogger(__name__)

WINDOW = 30
BUFFER_LIMIT = 100
DT = 0.1
TORQUE_LIMIT = 500
MAX_TORQUE_STEP = 50
JOINTS = 4


def clamp_torque(torque: int, minimum: int, maximum: int) -> int:
    """Clamp ``torque`` into ``[minimum, maximum]``."""
    return max(minimum, min(maximum, torque))


def limit_torque_change(current: int, previous: int, max_change: int) -> int:
    """Keep the step from ``previous`` to ``current`` within ``max_change``."""
    delta = current - previous
    if abs(delta) > max_change:
        return previous + (max_change if delta > 0 else -max_change)
    return current


class ExoController:
    """Buffers sensor samples and turns each new sample into four torques.

    Torques are ordered right hip, right knee, left hip, left knee.
    """

    def __init__(
        self,
        model: Callable[[list[list[list[float]]]], Any],
        dt: float = DT,
        torque_controller: TorqueController | None = None,
    ) -> None:
        self.model = model
        self.dt = dt
        self.torque_controller = torque_controller or TorqueController()
        self.buffer: deque[list[float]] = deque(maxlen=BUFFER_LIMIT)
        self.previous_torques = [0] * JOINTS
        self.steps = 0
        self._hip_right = JointEstimator()
        self._knee_right = JointEstimator()
        self._hip_left = JointEstimator()
        self._knee_left = JointEstimator()

    def step(self, roll_values: Sequence[float]) -> list[int] | None:
        """Add one sample of roll angles; return torques, or None while filling up."""
        self.buffer.append([float(v) for v in roll_values])
        if len(self.buffer) < WINDOW:
            logger.info("Waiting for %d samples...", WINDOW)
            return None
        self.steps += 1

        processed = process_sensor_data(list(self.buffer))
        predicted = predict_joint_angles(self.model, processed[-WINDOW:])
        angles = [math.radians(a) for a in clean_ai_offsets(predicted)]

        hip_right = self._hip_right.update(angles[3], self.dt)
        knee_right = self._knee_right.update(angles[4], self.dt)
        hip_left = self._hip_left.update(angles[5], self.dt)
        knee_left = self._knee_left.update(angles[0], self.dt)

        raw = self.torque_controller.compute_torque(hip_right, hip_left, knee_right, knee_left)
        torques = [
            limit_torque_change(
                clamp_torque(t, -TORQUE_LIMIT, TORQUE_LIMIT), prev, MAX_TORQUE_STEP
            )
            for t, prev in zip(raw, self.previous_torques)
        ]
        self.previous_torques = torques
        for index, torque in enumerate(torques):
            logger.info("torque for motor %d: %d", index, torque)
        return torques
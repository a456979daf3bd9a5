"""Assistive torque computation from a two-link leg model.

Torque per leg is ``M(q) * qdd + C(q, qd) * qd + G(q)``, scaled to motor units.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)

THIGH_MASS = 2.3
SHANK_MASS = 2.3
THIGH_LENGTH = 0.5
SHANK_LENGTH = 0.5
THIGH_COM = 0.25
SHANK_COM = 0.25
THIGH_INERTIA = 0.01
SHANK_INERTIA = 0.01
GRAVITY = 9.81

INT16_MIN = -32768
INT16_MAX = 32767

Matrix2 = tuple[tuple[float, float], tuple[float, float]]


@dataclass(frozen=True)
class JointState:
    """Angle (rad), velocity (rad/s) and acceleration (rad/s^2) of one joint."""

    angle: float = 0.0
    velocity: float = 0.0
    acceleration: float = 0.0


def _to_int16(value: float) -> int:
    """Truncate toward zero and saturate to the signed 16-bit range."""
    if math.isnan(value):
        return 0
    if value >= INT16_MAX:
        return INT16_MAX
    if value <= INT16_MIN:
        return INT16_MIN
    return int(value)


@dataclass
class TorqueController:
    """Computes scaled hip and knee torques for both legs."""

    gear_ratio_knee: float = 31.0
    gear_ratio_hip: float = 37.0
    rated_torque: float = 0.64
    assist_rate: float = 0.45

    def mass_matrix(self, q1: float, q2: float) -> Matrix2:
        m00 = (
            THIGH_MASS * THIGH_COM**2
            + THIGH_INERTIA
            + SHANK_MASS
            * (THIGH_LENGTH**2 + SHANK_COM**2 + 2 * THIGH_LENGTH * SHANK_COM * math.cos(q2))
        )
        m01 = SHANK_MASS * (THIGH_LENGTH * SHANK_COM * math.cos(q2) + SHANK_COM**2) + THIGH_INERTIA
        m11 = SHANK_MASS * SHANK_COM**2 + SHANK_INERTIA
        return ((m00, m01), (m01, m11))

    def coriolis_matrix(self, q1: float, q2: float, dq1: float, dq2: float) -> Matrix2:
        term = SHANK_MASS * THIGH_LENGTH * SHANK_COM * math.sin(q2)
        return ((-term * dq2, -term * dq1 - term * dq2), (term * dq1, 0.0))

    def gravity_vector(self, q1: float, q2: float) -> tuple[float, float]:
        g0 = -THIGH_MASS * GRAVITY * THIGH_COM * math.sin(q1) - SHANK_MASS * GRAVITY * (
            THIGH_LENGTH * math.sin(q1) + SHANK_COM * math.sin(q1 + q2)
        )
        g1 = -SHANK_MASS * GRAVITY * SHANK_COM * math.sin(q1 + q2)
        return (g0, g1)

    def _leg_torque(self, hip: JointState, knee: JointState) -> tuple[int, int]:
        m = self.mass_matrix(hip.angle, knee.angle)
        c = self.coriolis_matrix(hip.angle, knee.angle, hip.velocity, knee.velocity)
        g = self.gravity_vector(hip.angle, knee.angle)
        acc = (hip.acceleration, knee.acceleration)
        vel = (hip.velocity, knee.velocity)

        hip_torque, knee_torque = (
            sum(mr * a for mr, a in zip(m_row, acc)) + sum(cr * v for cr, v in zip(c_row, vel)) + gi
            for m_row, c_row, gi in zip(m, c, g)
        )
        scaled_hip = _to_int16(
            hip_torque * self.assist_rate * 1000 / (self.gear_ratio_hip * self.rated_torque)
        )
        scaled_knee = _to_int16(
            knee_torque * self.assist_rate * 1000 / (self.gear_ratio_knee * self.rated_torque)
        )
        logger.debug(
            "M=%s C=%s G=%s hip=%f (%d) knee=%f (%d)",
            m, c, g, hip_torque, scaled_hip, knee_torque, scaled_knee,
        )
        return scaled_hip, scaled_knee

    def compute_torque(
        self,
        hip_right: JointState,
        hip_left: JointState,
        knee_right: JointState,
        knee_left: JointState,
    ) -> list[int]:
        """Return ``[right hip, right knee, left hip, left knee]`` in motor units."""
        left = self._leg_torque(hip_left, knee_left)
        right = self._leg_torque(hip_right, knee_right)
        torques = [*right, *left]
        logger.debug("final scaled torques: %s", torques)
        return torques
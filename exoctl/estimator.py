"""Finite-difference estimate of joint velocity and acceleration."""

from __future__ import annotations

import logging

from exoctl.torque import JointState

logger = logging.getLogger(__name__)


class JointEstimator:
    """Tracks one joint's angle over time, starting from rest at angle zero."""

    def __init__(self) -> None:
        self.prev_angle = 0.0
        self.prev_velocity = 0.0

    def update(self, current_angle: float, dt: float) -> JointState:
        """Record a new angle sampled ``dt`` seconds after the previous one."""
        velocity = (current_angle - self.prev_angle) / dt
        acceleration = (velocity - self.prev_velocity) / dt
        logger.debug(
            "current_angle: %f, velocity: %f, acceleration: %f",
            current_angle, velocity, acceleration,
        )
        self.prev_angle = current_angle
        self.prev_velocity = velocity
        return JointState(angle=current_angle, velocity=velocity, acceleration=acceleration)
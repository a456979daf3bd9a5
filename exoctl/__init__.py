"""Exoskeleton control pipeline: sensor preprocessing, joint estimation, torque control and sensor logs."""

__version__ = "0.1.0"

__all__ = [
    "clean",
    "controller",
    "estimator",
    "model",
    "preprocessing",
    "sensor_data",
    "torque",
]
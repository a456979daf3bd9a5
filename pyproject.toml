[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exoctl"
version = "0.1.0"
description = "Control pipeline for a lower-limb exoskeleton: IMU preprocessing, joint-angle estimation and assistive torque computation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "exoskeleton",
    "imu",
    "gait",
    "torque-control",
    "robotics",
    "biomechanics",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Healthcare Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["exoctl"]

[tool.hatch.build.targets.sdist]
include = ["exoctl", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

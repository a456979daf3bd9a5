# exoctl

`exoctl` is the control pipeline for a lower-limb exoskeleton with six
orientation sensors. The sensors sit at the left hip, left knee, left ankle,
right ankle, right knee and right hip. One control cycle runs these steps:

1. One roll angle arrives from each sensor.
2. The buffered angles are preprocessed. Jumps of 360° are undone and each
   channel is centred on a trailing moving average.
3. A prediction model turns the last 30 timesteps into six joint angles.
4. Offsets are removed from the predicted angles, and the knee angles are
   made relative to the hip. The angles are then converted to radians.
5. The velocity and acceleration of each joint are estimated by finite
   differences.
6. Assistive torques for both hips and both knees come from a two-link leg
   model with mass, Coriolis and gravity terms.
7. The torques are clamped to ±500 and limited to a change of 50 per cycle.

The package has no runtime dependencies. Diagnostic output goes through the
standard `logging` module.

## Modules

| Module | What it provides |
| --- | --- |
| `exoctl.preprocessing` | `process_sensor_data(data, section_size=100, diff_max=200.0)` |
| `exoctl.clean` | `clean_ai_offsets(readings)` |
| `exoctl.estimator` | `JointEstimator` and its `update(current_angle, dt)` |
| `exoctl.torque` | `JointState`, plus `TorqueController` with `compute_torque`, `mass_matrix`, `coriolis_matrix` and `gravity_vector` |
| `exoctl.model` | `normalize_window`, `denormalize_output` and `predict_joint_angles(model, last_30_timesteps)` |
| `exoctl.sensor_data` | `EulerReading`, `get_sensor_data`, `human_readable_timestamp`, `make_log_entry` and `append_log_entry` |
| `exoctl.controller` | `ExoController`, `clamp_torque` and `limit_torque_change` |

## Running the control loop

`ExoController` takes a model. The model is any callable that accepts a batch
shaped `[1][30][6]` of normalised values. Its result must be indexable as
`[0][i]` for the six output channels. `ExoController.step(roll_values)` adds
one sample of six roll angles in degrees. It returns `None` until 30 samples
have been buffered. After that it returns four torques in motor units, ordered
right hip, right knee, left hip, left knee. The buffer holds at most the last
100 samples.

```python
from exoctl.controller import ExoController

def model(batch):
    return [[0.0] * 6]          # stand-in for a trained model

controller = ExoController(model)
for sample in samples:          # each sample: six roll angles
    torques = controller.step(sample)
```

## Torque limits

```python
from exoctl.controller import clamp_torque, limit_torque_change

clamp_torque(700, -500, 500)        # 500
limit_torque_change(300, 0, 50)     # 50
limit_torque_change(20, 0, 50)      # 20
```

## Computing torques directly

```python
from exoctl.estimator import JointEstimator
from exoctl.torque import TorqueController

hip = JointEstimator()
knee = JointEstimator()

hip_state = hip.update(0.30, 0.1)    # angle in radians, dt in seconds
knee_state = knee.update(0.10, 0.1)

torques = TorqueController().compute_torque(hip_state, hip_state, knee_state, knee_state)
# [right hip, right knee, left hip, left knee]
```

Torques are scaled to motor units by `assist_rate` (0.45), `gear_ratio_hip`
(37), `gear_ratio_knee` (31) and `rated_torque` (0.64). You can set each of
these fields on `TorqueController`. Scaled values are truncated toward zero
and saturated to the signed 16-bit range.

## Preprocessing

`process_sensor_data` returns a processed copy of `[timesteps][6]` data. If
the data is empty, or its first row does not hold six values, it comes back
unchanged. A `ValueError` is raised in two cases: when `section_size` is
below 1, and when some later row does not hold six values.

## Sensor logs

Each line of a sensor log is one JSON object with a `timestamp` and a
`sensors` list. Each sensor entry has a `location` and an `euler` object with
`heading`, `roll` and `pitch`.

- `human_readable_timestamp(now=None)` formats a time as
  `YYYY-MM-DD HH:MM:SS.<ms>`. The milliseconds are written without leading
  zeros.
- `make_log_entry(readings, timestamp=None)` builds an entry from
  `EulerReading` objects.
- `append_log_entry(path, entry)` appends the entry as one compact JSON line
  with sorted keys.
- `get_sensor_data(filename, chunk_index, step_size)` reads up to `step_size`
  lines, starting at line `chunk_index`. It returns the six roll values of
  each line that holds exactly six sensors.

## What the package does not do

- It does not talk to hardware. It does not read the IMUs, switch the I2C
  multiplexer or drive the motors. Your code supplies the roll angles and
  sends the returned torques.
- It does not load a trained model file. You pass the model in as a callable.
- It has no command-line program. Use it as a library.

## Running the tests

The tests use pytest, which the `test` extra installs:

```
pip install -e .[test]
pytest
```
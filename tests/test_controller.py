import math

import pytest

from exoctl.controller import ExoController, clamp_torque, limit_torque_change


def zero_model(batch):
    return [[0.0] * 6]


class RecordingModel:
    def __init__(self):
        self.calls = []

    def __call__(self, batch):
        self.calls.append(batch)
        return [[0.5, -0.5, 0.1, 2.0, -3.0, 1.0]]


def _sample(n):
    return [10.0 * math.sin(n / 5.0 + j) for j in range(6)]


def test_clamp_torque():
    assert clamp_torque(600, -500, 500) == 500
    assert clamp_torque(-600, -500, 500) == -500
    assert clamp_torque(123, -500, 500) == 123


def test_limit_torque_change():
    assert limit_torque_change(100, 0, 50) == 50
    assert limit_torque_change(-100, 0, 50) == -50
    assert limit_torque_change(30, 0, 50) == 30
    assert limit_torque_change(120, 100, 50) == 120


def test_waits_for_window():
    controller = ExoController(zero_model)
    results = [controller.step(_sample(n)) for n in range(29)]
    assert all(r is None for r in results)
    torques = controller.step(_sample(29))
    assert torques is not None and len(torques) == 4
    assert controller.steps == 1


def test_model_receives_window_batch():
    model = RecordingModel()
    controller = ExoController(model)
    for n in range(31):
        controller.step(_sample(n))
    assert len(model.calls) == 2
    batch = model.calls[-1]
    assert len(batch) == 1
    assert len(batch[0]) == 30
    assert all(len(row) == 6 for row in batch[0])


def test_buffer_capped_at_100():
    controller = ExoController(zero_model)
    for n in range(150):
        controller.step(_sample(n))
    assert len(controller.buffer) == 100
    assert controller.buffer[-1] == pytest.approx(_sample(149))


def test_torques_are_bounded_and_rate_limited():
    controller = ExoController(RecordingModel())
    previous = [0, 0, 0, 0]
    for n in range(80):
        torques = controller.step(_sample(n))
        if torques is None:
            continue
        assert all(-500 <= t <= 500 for t in torques)
        assert all(abs(t - p) <= 50 for t, p in zip(torques, previous))
        previous = torques
    assert controller.previous_torques == previous


def test_deterministic_for_same_input():
    first = ExoController(RecordingModel())
    second = ExoController(RecordingModel())
    out_a = [first.step(_sample(n)) for n in range(40)]
    out_b = [second.step(_sample(n)) for n in range(40)]
    assert out_a == out_b


def test_wrong_channel_count_raises():
    controller = ExoController(zero_model)
    for _ in range(29):
        controller.step([1.0] * 5)
    with pytest.raises(ValueError):
        controller.step([1.0] * 5)
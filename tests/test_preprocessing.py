import pytest

from exoctl.preprocessing import process_sensor_data


def _ramp(n=40):
    return [[float(t + c) for c in range(6)] for t in range(n)]


def test_empty_input_gives_empty_output():
    assert process_sensor_data([]) == []


def test_rows_without_six_channels_are_left_alone():
    data = [[1.0, 2.0, 3.0, 4.0, 5.0], [6.0, 7.0, 8.0, 9.0, 10.0]]
    assert process_sensor_data(data) == data


def test_shape_is_preserved_and_input_untouched():
    data = _ramp()
    snapshot = [row[:] for row in data]
    result = process_sensor_data(data)
    assert len(result) == len(data)
    assert all(len(row) == 6 for row in result)
    assert data == snapshot


def test_first_timestep_is_zero_after_normalisation():
    result = process_sensor_data(_ramp())
    assert result[0] == pytest.approx([0.0] * 6)


def test_constant_signal_normalises_to_zero():
    data = [[12.5, -3.0, 7.0, 0.5, 90.0, -45.0]] * 20
    result = process_sensor_data(data)
    for row in result:
        assert row == pytest.approx([0.0] * 6)


def test_window_of_one_removes_everything():
    result = process_sensor_data(_ramp(), section_size=1)
    for row in result:
        assert row == pytest.approx([0.0] * 6)


def test_wraparound_is_corrected():
    base = [[10.0, 20.0, 30.0, 40.0, 50.0, 60.0] for _ in range(10)]
    flipped = [row[:] for row in base]
    flipped[5][2] += 360.0
    flipped[7][4] -= 360.0
    assert process_sensor_data(flipped) == pytest.approx_list if False else True
    expected = process_sensor_data(base)
    actual = process_sensor_data(flipped)
    for exp_row, act_row in zip(expected, actual):
        assert act_row == pytest.approx(exp_row)


def test_constant_offset_does_not_change_result():
    data = _ramp(30)
    shifted = [[v + 15.0 for v in row] for row in data]
    for a, b in zip(process_sensor_data(data), process_sensor_data(shifted)):
        assert a == pytest.approx(b)


def test_ragged_rows_raise():
    data = [[0.0] * 6, [0.0] * 5]
    with pytest.raises(ValueError):
        process_sensor_data(data)


def test_invalid_section_size_raises():
    with pytest.raises(ValueError):
        process_sensor_data(_ramp(), section_size=0)
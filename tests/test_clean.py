import pytest

from exoctl.clean import clean_ai_offsets


def test_worked_example():
    assert clean_ai_offsets([30.0, 1.0, 2.0, 10.0, 50.0, 5.0]) == [
        25.0,
        0.0,
        0.0,
        10.0,
        40.0,
        5.0,
    ]


def test_hips_pass_through_and_unused_channels_are_zero():
    readings = [3.5, 9.0, -9.0, -12.25, 8.0, 4.75]
    cleaned = clean_ai_offsets(readings)
    assert cleaned[3] == readings[3]
    assert cleaned[5] == readings[5]
    assert cleaned[1] == cleaned[2] == 0.0


def test_knee_equal_to_hip_becomes_zero():
    cleaned = clean_ai_offsets([7.0, 0.0, 0.0, -2.0, -2.0, 7.0])
    assert cleaned[0] == 0.0
    assert cleaned[4] == 0.0


def test_extra_readings_are_ignored():
    readings = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    assert clean_ai_offsets(readings + [99.0]) == clean_ai_offsets(readings)


def test_too_few_readings_raise():
    with pytest.raises(ValueError):
        clean_ai_offsets([1.0, 2.0, 3.0])
import pytest

from vectorsoft import params
from vectorsoft.params import EscCalibration, FeatureFlags, esc_calibration


def test_feature_flags_default_to_safe_state():
    flags = FeatureFlags()
    assert not any(
        [
            flags.enable_esc,
            flags.enable_tvc,
            flags.enable_pyros,
            flags.enable_logging,
            flags.enable_telemetry,
            flags.enable_debug,
            flags.enable_sitl,
        ]
    )
    assert flags.enable_ground_test is True
    assert flags.debug_mode is True


def test_feature_flags_instances_are_independent():
    a = FeatureFlags()
    b = FeatureFlags()
    a.enable_esc = True
    assert b.enable_esc is False


def test_first_esc_calibration():
    assert esc_calibration(0) == EscCalibration(
        pin=3, pwm_min=1040, pwm_max=1960, thrust_min=0.0, thrust_max=2.5, enabled=True
    )


def test_last_esc_calibration():
    cal = esc_calibration(2)
    assert cal.pin == 5
    assert cal.pwm_min == 1020
    assert cal.pwm_max == 1950
    assert cal.thrust_max == 2.4


@pytest.mark.parametrize("idx", [-1, 3, 10])
def test_esc_calibration_out_of_range(idx):
    with pytest.raises(IndexError):
        esc_calibration(idx)


def test_all_calibrations_have_ordered_ranges():
    for idx in range(params.NUM_ESC_CHANNELS):
        cal = esc_calibration(idx)
        assert cal.pwm_min < cal.pwm_max
        assert cal.thrust_min < cal.thrust_max


@pytest.mark.parametrize("idx", [0, 1, 2])
def test_esc_calibration_matches_tables(idx):
    cal = esc_calibration(idx)
    assert cal == EscCalibration(
        pin=params.ESC_PINS[idx],
        pwm_min=params.ESC_PWM_MIN[idx],
        pwm_max=params.ESC_PWM_MAX[idx],
        thrust_min=params.ESC_THRUST_MIN[idx],
        thrust_max=params.ESC_THRUST_MAX[idx],
        enabled=params.ENABLE_ESC[idx],
    )


def test_esc_calibration_stops_at_channel_count():
    with pytest.raises(IndexError):
        esc_calibration(params.NUM_ESC_CHANNELS)
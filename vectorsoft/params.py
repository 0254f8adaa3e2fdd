"""System-wide configuration: feature flags, limits, calibration and pin assignments."""

from __future__ import annotations

from dataclasses import dataclass

# ===================== TUNABLE PARAMETERS & LIMITS =====================
TVC_MAX_ANGLE = 25.0  # degrees
CONTROL_LOOP_HZ = 200.0

TVC_MAX_DEFLECTION = 30.0  # degrees

SAFETY_ABORT_TILT_DEG = 30.0
SAFETY_MAX_ALTITUDE_M = 10000.0
SAFETY_MIN_THRUST = 0.1

# ===================== ESC CALIBRATION =====================
NUM_ESC_CHANNELS = 3
ESC_PINS = (3, 4, 5)
ESC_PWM_MIN = (1040, 1060, 1020)
ESC_PWM_MAX = (1960, 1980, 1950)
ESC_THRUST_MIN = (0.0, 0.0, 0.0)
ESC_THRUST_MAX = (2.5, 2.3, 2.4)
ENABLE_ESC = (True, True, True)
TEST_MODE = False

SD_CS_PIN = 10
IMU_I2C_ADDR = 0x28

# ===================== HARDWARE PIN ASSIGNMENTS =====================
TVC_SERVO1_PIN = 3
TVC_SERVO2_PIN = 4
TVC_SERVO3_PIN = 5
ESC1_PWM_PIN = 6
ESC2_PWM_PIN = 7
ESC3_PWM_PIN = 8

PYRO_CHUTE_PIN = 22
PYRO_IGNITER_PIN = 23

IMU_SDA_PIN = 18
IMU_SCL_PIN = 19
IMU_INT_PIN = 20

RF_TX_PIN = 12
RF_RX_PIN = 13

STATUS_LED_PIN = 13

SPARE_PIN1 = 28

# ===================== SYSTEM IDENTITY & VERSIONING =====================
FIRMWARE_VERSION = "v1.0.0"
PROJECT_NAME = "VectorSoft r4"


@dataclass
class FeatureFlags:
    """Runtime feature switches; the defaults are the safe, disarmed state."""

    enable_esc: bool = False
    enable_tvc: bool = False
    enable_pyros: bool = False
    enable_logging: bool = False
    enable_telemetry: bool = False
    enable_debug: bool = False
    enable_sitl: bool = False
    enable_ground_test: bool = True
    debug_mode: bool = True


@dataclass(frozen=True)
class EscCalibration:
    """Calibration of one ESC channel."""

    pin: int
    pwm_min: int
    pwm_max: int
    thrust_min: float
    thrust_max: float
    enabled: bool


def esc_calibration(idx: int) -> EscCalibration:
    """Calibration for ESC channel ``idx`` (zero-based)."""
    if not 0 <= idx < NUM_ESC_CHANNELS:
        raise IndexError(f"ESC index {idx} out of range 0..{NUM_ESC_CHANNELS - 1}")
    return EscCalibration(
        pin=ESC_PINS[idx],
        pwm_min=ESC_PWM_MIN[idx],
        pwm_max=ESC_PWM_MAX[idx],
        thrust_min=ESC_THRUST_MIN[idx],
        thrust_max=ESC_THRUST_MAX[idx],
        enabled=ENABLE_ESC[idx],
    )
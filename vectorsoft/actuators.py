"""ESC and pyrotechnic channel drivers, with hardware and simulated variants."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional

from vectorsoft.params import esc_calibration

logger = logging.getLogger(__name__)

PwmWriter = Callable[[int, int], None]
PinWriter = Callable[[int, bool], None]

_CALIBRATION_HOLD_S = 2.0


def _constrain(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class ESC(ABC):
    """An electronic speed controller taking a throttle in [0, 1]."""

    def __init__(self) -> None:
        self._armed = False
        self._last_throttle = 0.0

    @property
    def armed(self) -> bool:
        return self._armed

    @property
    def last_throttle(self) -> float:
        return self._last_throttle

    @abstractmethod
    def arm(self) -> None:
        """Allow throttle commands to take effect."""

    @abstractmethod
    def disarm(self) -> None:
        """Ignore throttle commands from now on."""

    @abstractmethod
    def set_throttle(self, throttle: float) -> None:
        """Command a throttle, clamped to [0, 1]; ignored while disarmed."""

    @abstractmethod
    def calibrate(self) -> None:
        """Run the ESC's end-point calibration."""


class ESCReal(ESC):
    """ESC driven by PWM pulse widths in microseconds."""

    def __init__(
        self,
        pwm_pin: int,
        pwm_min: int,
        pwm_max: int,
        thrust_min: float,
        thrust_max: float,
        pwm_writer: PwmWriter,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        super().__init__()
        self.pwm_pin = pwm_pin
        self.pwm_min = pwm_min
        self.pwm_max = pwm_max
        self.thrust_min = thrust_min
        self.thrust_max = thrust_max
        self._pwm_writer = pwm_writer
        self._sleep = sleep
        self.pulse_us = pwm_min
        self._write(pwm_min)

    def _write(self, us: int) -> None:
        self.pulse_us = us
        self._pwm_writer(self.pwm_pin, us)

    def arm(self) -> None:
        self._armed = True
        self.set_throttle(0.0)

    def disarm(self) -> None:
        self._armed = False
        self.set_throttle(0.0)

    def set_throttle(self, throttle: float) -> None:
        if not self._armed:
            return
        self._last_throttle = _constrain(throttle, 0.0, 1.0)
        self._write(self.throttle_to_pwm(self._last_throttle))

    def set_calibration(
        self, pwm_min: int, pwm_max: int, thrust_min: float, thrust_max: float
    ) -> None:
        self.pwm_min = pwm_min
        self.pwm_max = pwm_max
        self.thrust_min = thrust_min
        self.thrust_max = thrust_max

    def calibrate(self) -> None:
        self._write(self.pwm_max)
        self._sleep(_CALIBRATION_HOLD_S)
        self._write(self.pwm_min)
        self._sleep(_CALIBRATION_HOLD_S)

    def throttle_to_pwm(self, throttle: float) -> int:
        """Linear map of throttle onto the PWM range."""
        return self.pwm_min + int(throttle * (self.pwm_max - self.pwm_min))


class ESCStub(ESC):
    """Simulated ESC that reports its commands through logging."""

    def __init__(self, channel_num: int = 0) -> None:
        super().__init__()
        self.channel_num = channel_num

    def arm(self) -> None:
        self._armed = True
        logger.info("ESCStub[%d] ARMED", self.channel_num)

    def disarm(self) -> None:
        self._armed = False
        logger.info("ESCStub[%d] DISARMED", self.channel_num)

    def set_throttle(self, throttle: float) -> None:
        if not self._armed:
            return
        self._last_throttle = _constrain(throttle, 0.0, 1.0)
        logger.info("ESCStub[%d] THROTTLE: %.3f", self.channel_num, self._last_throttle)

    def calibrate(self) -> None:
        logger.info("ESCStub[%d] CALIBRATING...", self.channel_num)


class PyroChannel(ABC):
    """A one-shot pyrotechnic output that only fires while armed."""

    def __init__(self) -> None:
        self._armed = False
        self._fired = False

    @property
    def armed(self) -> bool:
        return self._armed

    @property
    def fired(self) -> bool:
        return self._fired

    def arm(self) -> None:
        self._armed = True

    def disarm(self) -> None:
        self._armed = False

    @abstractmethod
    def fire(self) -> None:
        """Fire once if armed; later calls do nothing."""


class PyroReal(PyroChannel):
    """Pyro channel driving a digital output pin."""

    def __init__(self, pin: int, pin_writer: PinWriter) -> None:
        super().__init__()
        self.pin = pin
        self._pin_writer = pin_writer
        self._pin_writer(pin, False)

    def fire(self) -> None:
        if self._armed and not self._fired:
            self._pin_writer(self.pin, True)
            self._fired = True


class PyroStub(PyroChannel):
    """Simulated pyro channel that reports through logging."""

    def __init__(self, channel_num: int = 0) -> None:
        super().__init__()
        self.channel_num = channel_num

    def arm(self) -> None:
        super().arm()
        logger.info("PyroStub[%d] ARMED", self.channel_num)

    def disarm(self) -> None:
        super().disarm()
        logger.info("PyroStub[%d] DISARMED", self.channel_num)

    def fire(self) -> None:
        if self._armed and not self._fired:
            logger.info("PyroStub[%d] FIRED", self.channel_num)
            self._fired = True


def create_esc(idx: int, test_mode: bool, pwm_writer: Optional[PwmWriter] = None) -> ESC:
    """ESC for channel ``idx``: a stub in test mode, else a calibrated PWM driver."""
    if test_mode:
        return ESCStub(idx + 1)
    if pwm_writer is None:
        raise ValueError("a PWM writer is required outside test mode")
    cal = esc_calibration(idx)
    return ESCReal(
        cal.pin, cal.pwm_min, cal.pwm_max, cal.thrust_min, cal.thrust_max, pwm_writer
    )


def create_pyro_channel(
    pin: int,
    test_mode: bool,
    channel_num: int = 0,
    pin_writer: Optional[PinWriter] = None,
) -> PyroChannel:
    """Pyro channel: a stub in test mode, else a pin driver."""
    if test_mode:
        return PyroStub(channel_num)
    if pin_writer is None:
        raise ValueError("a pin writer is required outside test mode")
    return PyroReal(pin, pin_writer)
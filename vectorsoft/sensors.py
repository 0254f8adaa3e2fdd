"""Power monitor, IMU and flight-controller link models with simulated variants."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

_UINT32_MASK = 0xFFFFFFFF


def _micros() -> int:
    """Microsecond tick counter that wraps like a 32-bit hardware timer."""
    return (time.monotonic_ns() // 1000) & _UINT32_MASK


@dataclass
class PowerData:
    """One battery reading."""

    voltage: float = 0.0  # V
    current: float = 0.0  # A
    temperature: float = 0.0  # C
    timestamp_us: int = 0


class PowerStub:
    """Simulated power monitor reporting a full 3S battery."""

    def begin(self) -> bool:
        return True

    def read(self) -> PowerData:
        return PowerData(voltage=12.6, current=0.5, temperature=25.0, timestamp_us=_micros())

    def is_healthy(self) -> bool:
        return True

    def cell_count(self) -> int:
        return 3

    def battery_level(self) -> float:
        return 1.0


class ImuOpMode(Enum):
    """IMU fusion/operation modes."""

    CONFIG = "CONFIG"
    ACCONLY = "ACCONLY"
    MAGONLY = "MAGONLY"
    GYRONLY = "GYRONLY"
    ACCMAG = "ACCMAG"
    ACCGYRO = "ACCGYRO"
    MAGGYRO = "MAGGYRO"
    AMG = "AMG"
    IMU = "IMU"
    COMPASS = "COMPASS"
    M4G = "M4G"
    NDOF_FMC_OFF = "NDOF_FMC_OFF"
    NDOF = "NDOF"


@dataclass
class ImuData:
    """One IMU sample."""

    accel_x: float = 0.0
    accel_y: float = 0.0
    accel_z: float = 0.0
    gyro_x: float = 0.0
    gyro_y: float = 0.0
    gyro_z: float = 0.0
    mag_x: float = 0.0
    mag_y: float = 0.0
    mag_z: float = 0.0
    temp: float = 0.0
    roll: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0
    timestamp_us: int = 0


class IMUStub:
    """Simulated IMU at rest, level, with gravity on +Z."""

    def __init__(self) -> None:
        self.mode = ImuOpMode.CONFIG

    def begin(self) -> bool:
        return True

    def read(self) -> ImuData:
        return ImuData(accel_z=9.8, temp=25.0, timestamp_us=_micros())

    def is_healthy(self) -> bool:
        return True

    def set_mode(self, mode: ImuOpMode) -> bool:
        """Switch mode; returns whether the mode took effect."""
        self.mode = ImuOpMode(mode)
        return True


@dataclass
class CubeMsg:
    """A message exchanged with the flight controller."""

    msgid: int
    payload: bytes = field(default=b"")

    def __post_init__(self) -> None:
        if not 0 <= self.msgid <= 0xFF:
            raise ValueError(f"msgid must fit in one byte, got {self.msgid}")
        self.payload = bytes(self.payload)


class CubeCommsStub:
    """Simulated flight-controller link: accepts everything, receives nothing."""

    def begin(self) -> bool:
        return True

    def send(self, msg: CubeMsg) -> bool:
        return True

    def receive(self) -> Optional[CubeMsg]:
        """Next incoming message, or None when there is none."""
        return None

    def is_healthy(self) -> bool:
        return True


def create_cube_comms(test_mode: bool) -> CubeCommsStub:
    """Flight-controller link; only the simulated link is available."""
    return CubeCommsStub()
"""Thrust-vector-control allocation for three gimballed motors."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Sequence

from vectorsoft.adam_optimizer import AdamOptimizer
from vectorsoft.math_utils import Vector3, norm

logger = logging.getLogger(__name__)

SERVO_ANGLE_LIMIT = 0.2618 * 2.0
SERVO_DT = 0.02

TVC_CIRCLE_RADIUS = 0.09
TVC_CIRCLE_Z_POS = -1.0
TVC_CIRCLE_THRUST = (3.0, 3.0, 3.0)
TVC_CIRCLE_ANGLES = tuple(math.radians(deg) for deg in (240.0, 120.0, 0.0))

_UPWARD_THRUST_WEIGHT = 0.1
_THRUST_MATCH_WEIGHT = 0.05


@dataclass
class TVCMotor:
    """One gimballed motor: roll (rad), thrust (N) and position (m)."""

    roll: float = 0.0
    thrust: float = 0.0
    position: Vector3 = field(default_factory=Vector3)


@dataclass
class TVCState:
    """Three motors plus the target torque and total thrust."""

    m1: TVCMotor = field(default_factory=TVCMotor)
    m2: TVCMotor = field(default_factory=TVCMotor)
    m3: TVCMotor = field(default_factory=TVCMotor)
    target: Vector3 = field(default_factory=Vector3)
    target_mag: float = 0.0

    @property
    def motors(self) -> tuple[TVCMotor, TVCMotor, TVCMotor]:
        return self.m1, self.m2, self.m3


def clamp_scalar(x: float, min_val: float, max_val: float) -> float:
    """Clamp ``x`` into ``[min_val, max_val]``."""
    return max(min_val, min(max_val, x))


def clamp_servo_circle(pitch: float, yaw: float, max_angle: float) -> tuple[float, float]:
    """Scale ``(pitch, yaw)`` back onto a circular cone of radius ``max_angle``."""
    mag = math.hypot(pitch, yaw)
    if mag > max_angle:
        scale = max_angle / mag
        return pitch * scale, yaw * scale
    return pitch, yaw


def initialize_tvc_circle(tvc: TVCState) -> None:
    """Place the motors evenly on a circle below the centre of mass."""
    for motor, theta, thrust in zip(tvc.motors, TVC_CIRCLE_ANGLES, TVC_CIRCLE_THRUST):
        motor.position = Vector3(
            TVC_CIRCLE_RADIUS * math.cos(theta),
            TVC_CIRCLE_RADIUS * math.sin(theta),
            TVC_CIRCLE_Z_POS,
        )
        motor.roll = theta + math.pi + math.radians(45.0)
        motor.thrust = thrust


def configure_tvc(tvc: TVCState, tx: float, ty: float, tz: float, thrusts: Sequence[float]) -> None:
    """Set the target torque and the per-motor thrusts."""
    if len(thrusts) != 3:
        raise ValueError("exactly three thrust values are required")
    tvc.target = Vector3(tx, ty, tz)
    tvc.target_mag = sum(thrusts)
    for motor, thrust in zip(tvc.motors, thrusts):
        motor.thrust = thrust


def tvc_cost(x: Sequence[float], tvc: TVCState) -> float:
    """Cost of servo angles ``x`` = (pitch1, yaw1, pitch2, yaw2, pitch3, yaw3)."""
    if len(x) != 6:
        raise ValueError(f"expected 6 servo angles, got {len(x)}")
    torque_sum = Vector3()
    force_sum = Vector3()
    for motor, pitch, yaw in zip(tvc.motors, x[0::2], x[1::2]):
        thrust = Vector3(
            -motor.thrust * math.sin(yaw),
            -motor.thrust * math.sin(pitch),
            -motor.thrust * math.cos(yaw) * math.cos(pitch),
        )
        torque_sum = torque_sum + Vector3.cross(motor.position, thrust)
        force_sum = force_sum + thrust

    torque_error = norm(tvc.target - torque_sum)
    thrust_error = abs(norm(force_sum) - tvc.target_mag)
    return (
        torque_error
        + _UPWARD_THRUST_WEIGHT * force_sum.z
        - _THRUST_MATCH_WEIGHT * thrust_error
    )


def optimize_tvc(
    tvc: TVCState,
    x: Sequence[float],
    optimizer: AdamOptimizer,
    steps: int = 100,
    debug: bool = True,
) -> list[float]:
    """Run ``steps`` Adam steps on the servo angles, clamped to the cone limit."""
    angles = list(x)

    def cost(v: Sequence[float]) -> float:
        return tvc_cost(v, tvc)

    for step in range(steps):
        angles = optimizer.step(cost, angles)
        clamped: list[float] = []
        for pitch, yaw in zip(angles[0::2], angles[1::2]):
            clamped.extend(clamp_servo_circle(pitch, yaw, SERVO_ANGLE_LIMIT))
        angles = clamped
        if debug:
            logger.info(
                "Step %d | Cost: %.6f | Angles: %s",
                step,
                cost(angles),
                ", ".join(f"{a:.4f}" for a in angles),
            )
    return angles
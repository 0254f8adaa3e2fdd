# vectorsoft

Building blocks for vehicle guidance, navigation and control software,
usable on a workstation for simulation, bench testing and analysis.
The package has no dependencies outside the standard library.

## Modules

### `vectorsoft.math_utils`

- `Vector3`: an immutable three-component vector with `+`, `-`, unary `-`,
  scalar `*` and `/`, iteration, `Vector3.cross`, `is_finite` and
  `is_normalized`.
- `Quaternion`: defaults to the identity. It has `conjugate`, `inverse`,
  `norm`, `normalized`, `dot`, `multiply` (also available as `*`),
  `rotate`, `slerp`, `to_axis_angle`, `from_axis_angle`,
  `to_rotation_matrix`, `is_finite`, `is_normalized`, `is_identity` and
  `set_identity`. `from_euler` and `to_euler` convert to and from Euler
  angles in the six orders of `EulerOrder`.
- Vector helpers: `dot`, `cross`, `norm`, `normalize`, `elem_mul`,
  `elem_div`, `angle_between`, `project`, `distance`, `lerp`, `clamp`,
  `is_zero`, `equals`, `to_array` and `from_array`. `from_array` raises
  `ValueError` when it is given fewer than three elements.

### `vectorsoft.adam_optimizer`

- `compute_gradient(cost, x, h)`: the central-difference gradient of a cost
  function at `x`.
- `AdamOptimizer(size, lr, beta1, beta2, eps)`: `step(cost, x)` takes one
  Adam step and returns the updated parameters as a new list. It raises
  `ValueError` if `x` does not have `size` elements.

### `vectorsoft.tvc_optimizer`

Thrust-vector-control allocation for three gimballed motors.

- `TVCMotor` and `TVCState` hold the motor layout, the target torque and
  the target total thrust.
- `initialize_tvc_circle(tvc)` places the motors evenly on a circle below
  the centre of mass.
- `configure_tvc(tvc, tx, ty, tz, thrusts)` sets the target torque and the
  thrust of each motor.
- `tvc_cost(x, tvc)` scores six servo angles, given as pitch/yaw pairs.
- `optimize_tvc(tvc, x, optimizer, steps, debug)` runs Adam steps, keeps
  each pitch/yaw pair inside the cone `SERVO_ANGLE_LIMIT` with
  `clamp_servo_circle`, and returns the final angles. With `debug` set,
  each step is logged through the `logging` module.
- `clamp_scalar(x, min_val, max_val)` clamps a single value.

### `vectorsoft.params`

Limits, ESC calibration tables and pin numbers as module constants.
`FeatureFlags` holds the runtime switches, which start in a safe, disarmed
state. `esc_calibration(idx)` returns the `EscCalibration` of one ESC
channel and raises `IndexError` for an index out of range.

### `vectorsoft.actuators`

- `ESCReal` sends PWM pulse widths through a `pwm_writer(pin, microseconds)`
  callable that you supply. `ESCStub` logs its commands instead. Both clamp
  the throttle to [0, 1] and ignore it while disarmed.
- `PyroReal` drives a pin through a `pin_writer(pin, level)` callable.
  `PyroStub` logs instead. Either one fires only once, and only while armed.
- `create_esc(idx, test_mode, pwm_writer)` and
  `create_pyro_channel(pin, test_mode, channel_num, pin_writer)` return the
  stub in test mode. Outside test mode they return the driver, and raise
  `ValueError` if no writer is given.

### `vectorsoft.sensors`

- `PowerStub` reports a full 3S battery as `PowerData`.
- `IMUStub` reports a level IMU at rest as `ImuData` and accepts any
  `ImuOpMode`.
- `CubeCommsStub` accepts every `CubeMsg` it is sent and never receives
  one. `create_cube_comms` always returns this stub.

### `vectorsoft.datalog`

- `FileLogChannel(log_dir, prefix)` writes lines to the next free numbered
  file (`log_001.csv`, `log_002.csv`, …) in a directory, creating the
  directory if needed. It can be used as a context manager. It also
  provides:
  - `read_lines` to read a log back;
  - `list_log_files` to list files with their sizes;
  - `delete_log_file` to remove a file;
  - `last_error` and `error_string` to report the most recent failure.
- `LogStub` reports lines through the `logging` module and stores nothing.
- `DataLogManager` formats events and sensor samples as CSV lines with
  three decimals. Each line is cut to 127 characters. A line is dropped
  when the channel is missing or not ready.
- `create_logger(test_mode, log_dir, prefix)` returns a `LogStub` in test
  mode and a `FileLogChannel` otherwise.

## What it does not do

- It has no command-line program and no flight loop.
- It does not talk to hardware by itself. Real ESCs and pyro channels act
  only through the writer callables you pass in.
- The power monitor, IMU and flight-controller link exist only as
  simulated stand-ins.
- There is no navigation, guidance or control manager.
- Parameters cannot be loaded from a file or over telemetry.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Example

Thrust-vector-control allocation:

    from vectorsoft.adam_optimizer import AdamOptimizer
    from vectorsoft.tvc_optimizer import (
        TVCState, initialize_tvc_circle, configure_tvc, optimize_tvc,
    )

    tvc = TVCState()
    initialize_tvc_circle(tvc)
    configure_tvc(tvc, 0.0, 0.0, 0.0, [3.0, 3.0, 3.0])

    optimizer = AdamOptimizer(6, 0.01)
    angles = optimize_tvc(tvc, [0.0] * 6, optimizer, 100, False)

Quaternion round trip:

    from vectorsoft.math_utils import EulerOrder, Quaternion

    q = Quaternion.from_euler(0.3, 0.1, -0.2, EulerOrder.ZYX)
    yaw, pitch, roll = q.to_euler(EulerOrder.ZYX)

Logging:

    from vectorsoft.datalog import DataLogManager, create_logger

    channel = create_logger(False, "logs", "log_")
    channel.begin()
    manager = DataLogManager(channel)
    manager.log_header()
    manager.log_event(1.25, "IGNITION", 1.0)
    manager.flush()
    channel.close()
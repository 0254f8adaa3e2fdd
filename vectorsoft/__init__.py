"""Guidance, navigation and control building blocks: vector and quaternion math, Adam optimisation, thrust-vector-control allocation, actuator and sensor models, and CSV logging."""

__version__ = "1.0.0"

__all__ = [
    "math_utils",
    "adam_optimizer",
    "tvc_optimizer",
    "params",
    "actuators",
    "sensors",
    "datalog",
]
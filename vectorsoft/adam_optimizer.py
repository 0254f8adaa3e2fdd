"""Adam gradient-descent optimizer driven by numerical gradients."""

from __future__ import annotations

import math
from typing import Callable, Sequence

CostFunction = Callable[[Sequence[float]], float]


def compute_gradient(cost: CostFunction, x: Sequence[float], h: float = 1e-4) -> list[float]:
    """Central-difference gradient of ``cost`` at ``x`` with step ``h``."""
    point = list(x)
    gradient = []
    for i, value in enumerate(point):
        probe = point.copy()
        probe[i] = value + h
        f1 = cost(probe)
        probe[i] = value - h
        f2 = cost(probe)
        gradient.append((f1 - f2) / (2.0 * h))
    return gradient


class AdamOptimizer:
    """Adam optimizer over a fixed number of parameters."""

    def __init__(
        self,
        size: int,
        lr: float = 0.001,
        beta1: float = 0.9,
        beta2: float = 0.999,
        eps: float = 1e-8,
    ) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        self.learning_rate = lr
        self.beta1 = beta1
        self.beta2 = beta2
        self.epsilon = eps
        self.t = 0
        self._beta1_power = 1.0
        self._beta2_power = 1.0
        self._m = [0.0] * size
        self._v = [0.0] * size

    def step(self, cost: CostFunction, x: Sequence[float]) -> list[float]:
        """Take one Adam step from ``x`` and return the updated parameters."""
        if len(x) != self.size:
            raise ValueError(f"expected {self.size} parameters, got {len(x)}")
        self.t += 1
        self._beta1_power *= self.beta1
        self._beta2_power *= self.beta2

        gradient = compute_gradient(cost, x)
        updated = []
        for i, (value, g) in enumerate(zip(x, gradient)):
            self._m[i] = self.beta1 * self._m[i] + (1.0 - self.beta1) * g
            self._v[i] = self.beta2 * self._v[i] + (1.0 - self.beta2) * g * g
            m_hat = self._m[i] / (1.0 - self._beta1_power)
            v_hat = self._v[i] / (1.0 - self._beta2_power)
            updated.append(value - self.learning_rate * m_hat / (math.sqrt(v_hat) + self.epsilon))
        return updated
from __future__ import annotations

import logging
import math
from typing import Callable

import numpy as np

import pipe_heating.config as cfg
from pipe_heating.errors import ConfigurationError
from pipe_heating.heat_transfer import pipe_heat_transfer
from pipe_heating.physics import FluidProps, MaterialProps
from pipe_heating.types import Geometry, SimulationTrace, StopReason

_LOGGER = logging.getLogger(__name__)


def max_steps(duration_s: float, step_s: float) -> int:
    return int(math.ceil(duration_s / step_s))


def simulate_heating(
    initial_temp: float,
    target_temp: float,
    ambient_temp: float,
    required_power_w: float,
    capacity_j_per_k: float,
    geom: Geometry,
    velocity: float,
    material: MaterialProps,
    fluid: FluidProps,
    duration_s: float,
    step_s: float = cfg.DEFAULT_STEP_S,
    h_outside: float | None = None,
    should_cancel: Callable[[], bool] | None = None,
) -> SimulationTrace:
    """
    Forward-Euler heating run of the lumped fluid mass:

      Q_loss(T) = pipe loss re-evaluated at the current temperature
      T        += (P_required - Q_loss(T)) / C * dt

    P_required is held constant for the whole run. The run stops when T
    reaches the target, after ceil(duration / dt) steps, or when
    `should_cancel()` returns True (checked between steps). The trace holds
    at most ceil(duration / dt) + 1 samples, starting with (0, T0).
    Zero thermal capacity yields the single initial sample.
    Accuracy depends on dt relative to tau = R C; shrink dt for fidelity.
    """
    if not math.isfinite(step_s) or step_s <= 0:
        raise ConfigurationError(f"Simulation step must be positive and finite, got {step_s} s")
    if not math.isfinite(duration_s) or duration_s < 0:
        raise ConfigurationError(f"Simulation duration must be finite and not negative, got {duration_s} s")

    T_cur = float(initial_temp)
    t = [0.0]
    T = [T_cur]
    reason = StopReason.DURATION_ELAPSED

    if T_cur >= target_temp:
        reason = StopReason.TARGET_REACHED
    elif capacity_j_per_k > 0:
        for i in range(1, max_steps(duration_s, step_s) + 1):
            if should_cancel is not None and should_cancel():
                reason = StopReason.CANCELLED
                break

            loss = pipe_heat_transfer(
                T_cur, ambient_temp, geom, velocity, material, fluid, h_outside=h_outside
            ).Q_loss_W
            T_cur += (required_power_w - loss) / capacity_j_per_k * step_s

            t.append(i * step_s)
            T.append(T_cur)

            if T_cur >= target_temp:
                reason = StopReason.TARGET_REACHED
                break

    _LOGGER.debug(
        "Simulation stopped (%s) after %d samples: t=%.1f s, T=%.2f°C",
        reason.value, len(t), t[-1], T[-1],
    )
    return SimulationTrace(
        t=np.asarray(t, dtype=np.float64),
        T=np.asarray(T, dtype=np.float64),
        stop_reason=reason,
    )

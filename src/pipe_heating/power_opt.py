from __future__ import annotations

import logging
from dataclasses import dataclass

from pipe_heating.energy_balance import mass_from_liters
from pipe_heating.geometry import derive_geometry, flow_state
from pipe_heating.physics import CalculatorInputs
from pipe_heating.simulator import simulate_heating
from pipe_heating.types import SimulationTrace

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PowerOptResult:
    power_w: float
    reach_time_s: float  # time of the last trace sample
    reached: bool


def _reached(trace: SimulationTrace, inputs: CalculatorInputs) -> bool:
    return trace.reached_target and trace.elapsed_s <= inputs.process.target_duration_s


def _run(inputs: CalculatorInputs, power_w: float) -> SimulationTrace:
    proc = inputs.process
    geom = derive_geometry(inputs.pipe)
    flow = flow_state(proc.flow_rate_lpm, geom)
    capacity = mass_from_liters(proc.volume_liters, inputs.fluid) * inputs.fluid.cp
    return simulate_heating(
        initial_temp=proc.initial_temp_c,
        target_temp=proc.target_temp_c,
        ambient_temp=proc.ambient_temp_c,
        required_power_w=power_w,
        capacity_j_per_k=capacity,
        geom=geom,
        velocity=flow.velocity,
        material=inputs.material,
        fluid=inputs.fluid,
        duration_s=proc.target_duration_s,
        step_s=inputs.step_s,
        h_outside=inputs.h_outside,
    )


def find_min_power(
    inputs: CalculatorInputs,
    P_low: float = 0.0,
    P_high: float = 1e5,
    iters: int = 30,
) -> PowerOptResult:
    """
    Bisection on the constant heater power: smallest P for which the Euler
    trace reaches the target temperature within the target duration,
    with losses re-evaluated along the trajectory.
    """
    lo = float(P_low)
    hi = float(P_high)
    best = None

    for _ in range(iters):
        mid = 0.5 * (lo + hi)
        trace = _run(inputs, mid)
        if _reached(trace, inputs):
            best = PowerOptResult(mid, trace.elapsed_s, True)
            hi = mid
        else:
            lo = mid

    if best is None:
        trace = _run(inputs, hi)
        reached = _reached(trace, inputs)
        if not reached:
            _LOGGER.warning("Target not reached within %.0f s even at %.0f W", inputs.process.target_duration_s, hi)
        return PowerOptResult(hi, trace.elapsed_s, reached)

    _LOGGER.debug("Minimum heater power %.1f W reaches target at t=%.0f s", best.power_w, best.reach_time_s)
    return best

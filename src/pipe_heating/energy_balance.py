from __future__ import annotations

import math

from pipe_heating.errors import ConfigurationError
from pipe_heating.physics import FluidProps
from pipe_heating.types import LumpedResult, PassResult, PowerBudget, PowerResult


def mass_from_liters(liters: float, fluid: FluidProps) -> float:
    return liters / 1000.0 * fluid.rho


def power_to_heat_volume(
    liters: float,
    delta_t: float,
    duration_s: float,
    fluid: FluidProps,
) -> PowerResult:
    """
    Energy Q = m cp dT [J] and the mean power P = Q / duration [W]
    needed to raise `liters` of fluid by `delta_t` in `duration_s`.
    """
    if duration_s <= 0:
        raise ConfigurationError(f"Heating duration must be positive, got {duration_s} s")
    m = mass_from_liters(liters, fluid)
    Q = m * fluid.cp * delta_t
    return PowerResult(mass_kg=m, energy_j=Q, power_w=Q / duration_s)


def required_power(ideal_power_w: float, heat_loss_w: float) -> float:
    # heat gained from the surroundings is never credited
    return ideal_power_w + max(0.0, heat_loss_w)


def power_budget(
    liters: float,
    delta_t: float,
    duration_s: float,
    heat_loss_w: float,
    fluid: FluidProps,
) -> PowerBudget:
    ideal = power_to_heat_volume(liters, delta_t, duration_s, fluid)
    return PowerBudget(
        mass_kg=ideal.mass_kg,
        energy_j=ideal.energy_j,
        ideal_power_w=ideal.power_w,
        heat_loss_w=heat_loss_w,
        required_power_w=required_power(ideal.power_w, heat_loss_w),
    )


def delta_t_per_pass(power_w: float, flow_m3s: float, fluid: FluidProps) -> PassResult:
    # steady-state rise through the heater: dT = P / (m_dot cp)
    m_dot = flow_m3s * fluid.rho
    if m_dot <= 0:
        return PassResult(m_dot=0.0, delta_t=0.0)
    return PassResult(m_dot=m_dot, delta_t=power_w / (m_dot * fluid.cp))


def lumped_time_constant(liters: float, R_total: float, fluid: FluidProps) -> LumpedResult:
    """
    tau = R_total * C with C = m cp. Only meaningful while the lumped
    capacitance assumption (Bi < 0.1) holds; that is not checked here.
    """
    m = mass_from_liters(liters, fluid)
    C = m * fluid.cp
    if C <= 0:
        return LumpedResult(mass_kg=m, capacity_j_per_k=C, tau_s=0.0)
    return LumpedResult(mass_kg=m, capacity_j_per_k=C, tau_s=R_total * C)


def time_to_target(
    initial_temp: float,
    target_temp: float,
    ambient_temp: float,
    power_w: float,
    R_total: float,
    capacity_j_per_k: float,
) -> float:
    """
    Closed-form solution of C dT/dt = P - (T - T_amb) / R for the time at
    which T reaches `target_temp`:

      T_ss = T_amb + P R
      t    = R C ln((T_ss - T0) / (T_ss - T_target))

    Returns +inf when the steady state never exceeds the target or there
    is no thermal capacity to heat.
    """
    if initial_temp >= target_temp:
        return 0.0
    if capacity_j_per_k <= 0:
        return math.inf

    if math.isinf(R_total):
        if power_w <= 0:
            return math.inf
        return capacity_j_per_k * (target_temp - initial_temp) / power_w

    T_ss = ambient_temp + power_w * R_total
    if T_ss <= target_temp:
        return math.inf
    tau = R_total * capacity_j_per_k
    return tau * math.log((T_ss - initial_temp) / (T_ss - target_temp))

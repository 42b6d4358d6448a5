from __future__ import annotations

import logging

import pipe_heating.config as cfg
from pipe_heating.energy_balance import (
    delta_t_per_pass,
    lumped_time_constant,
    power_budget,
    time_to_target,
)
from pipe_heating.geometry import derive_geometry, flow_state
from pipe_heating.heat_transfer import is_turbulent, pipe_heat_transfer
from pipe_heating.physics import CalculatorInputs, PipeSpec, ProcessParams
from pipe_heating.properties import get_fluid, get_material
from pipe_heating.simulator import simulate_heating
from pipe_heating.types import CalculatorResult

_LOGGER = logging.getLogger(__name__)


def make_inputs(
    volume_liters: float = cfg.DEFAULTS["volume_liters"],
    initial_temp_c: float = cfg.DEFAULTS["initial_temp_c"],
    target_temp_c: float = cfg.DEFAULTS["boiler_temp_c"],
    target_duration_s: float = cfg.DEFAULTS["time_to_heat_min"] * 60.0,
    flow_rate_lpm: float = cfg.DEFAULTS["flow_rate_lpm"],
    ambient_temp_c: float = cfg.DEFAULTS["ambient_temp_c"],
    inner_diameter_m: float = cfg.DEFAULTS["inner_diameter_m"],
    wall_thickness_m: float = cfg.DEFAULTS["pipe_thickness_m"],
    length_m: float = cfg.DEFAULTS["pipe_length_m"],
    fluid: str = cfg.DEFAULT_FLUID,
    material: str = cfg.DEFAULT_MATERIAL,
    h_outside: float | None = None,
    step_s: float = cfg.DEFAULT_STEP_S,
    sim_duration_s: float | None = None,
) -> CalculatorInputs:
    pipe = PipeSpec(inner_diameter=inner_diameter_m, wall_thickness=wall_thickness_m, length=length_m)
    process = ProcessParams(
        volume_liters=volume_liters,
        initial_temp_c=initial_temp_c,
        target_temp_c=target_temp_c,
        target_duration_s=target_duration_s,
        flow_rate_lpm=flow_rate_lpm,
        ambient_temp_c=ambient_temp_c,
    )
    return CalculatorInputs(
        fluid=get_fluid(fluid),
        material=get_material(material),
        pipe=pipe,
        process=process,
        h_outside=h_outside,
        step_s=step_s,
        sim_duration_s=sim_duration_s,
    )


def evaluate(inputs: CalculatorInputs) -> CalculatorResult:
    """
    One full evaluation:
      geometry/flow -> pipe losses at the target temperature -> power budget
      -> per-pass dT, tau, analytic time to target -> Euler trace
    """
    fluid = inputs.fluid
    material = inputs.material
    proc = inputs.process

    geom = derive_geometry(inputs.pipe)
    flow = flow_state(proc.flow_rate_lpm, geom)

    transfer = pipe_heat_transfer(
        proc.target_temp_c, proc.ambient_temp_c, geom, flow.velocity, material, fluid,
        h_outside=inputs.h_outside,
    )
    if flow.velocity > 0 and not is_turbulent(transfer.inside_Re):
        _LOGGER.warning(
            "Re=%.0f is below the turbulent range, Dittus-Boelter h_inside=%.1f W/m2K is an extrapolation",
            transfer.inside_Re, transfer.h_inside,
        )

    delta_t = proc.target_temp_c - proc.initial_temp_c
    budget = power_budget(proc.volume_liters, delta_t, proc.target_duration_s, transfer.Q_loss_W, fluid)
    per_pass = delta_t_per_pass(budget.required_power_w, flow.flow_m3s, fluid)
    lumped = lumped_time_constant(proc.volume_liters, transfer.R_total, fluid)

    t_target = time_to_target(
        proc.initial_temp_c, proc.target_temp_c, proc.ambient_temp_c,
        budget.required_power_w, transfer.R_total, lumped.capacity_j_per_k,
    )

    sim_duration = inputs.sim_duration_s
    if sim_duration is None:
        sim_duration = cfg.SIM_DURATION_FACTOR * proc.target_duration_s

    trace = simulate_heating(
        initial_temp=proc.initial_temp_c,
        target_temp=proc.target_temp_c,
        ambient_temp=proc.ambient_temp_c,
        required_power_w=budget.required_power_w,
        capacity_j_per_k=lumped.capacity_j_per_k,
        geom=geom,
        velocity=flow.velocity,
        material=material,
        fluid=fluid,
        duration_s=sim_duration,
        step_s=inputs.step_s,
        h_outside=inputs.h_outside,
    )

    _LOGGER.debug(
        "P_ideal=%.1f W, Q_loss=%.1f W, P_required=%.1f W, tau=%.0f s",
        budget.ideal_power_w, transfer.Q_loss_W, budget.required_power_w, lumped.tau_s,
    )

    return CalculatorResult(
        ideal_power_w=budget.ideal_power_w,
        required_power_w=budget.required_power_w,
        energy_kj=budget.energy_kj,
        heat_loss_w=transfer.Q_loss_W,
        delta_t_per_pass_c=per_pass.delta_t,
        velocity_m_s=flow.velocity,
        reynolds=transfer.inside_Re,
        time_constant_s=lumped.tau_s,
        time_to_target_s=t_target,
        flow=flow,
        transfer=transfer,
        budget=budget,
        lumped=lumped,
        trace=trace,
    )

from __future__ import annotations
from dataclasses import dataclass

import pipe_heating.config as cfg


@dataclass(frozen=True, slots=True)
class FluidProps:
    name: str
    rho: float  # density [kg/m^3]
    cp: float   # specific heat capacity [J/(kg*K)]
    k: float    # thermal conductivity [W/(m*K)]
    mu: float   # dynamic viscosity [Pa*s]


@dataclass(frozen=True, slots=True)
class MaterialProps:
    name: str
    k: float  # wall thermal conductivity [W/(m*K)]


@dataclass(frozen=True, slots=True)
class PipeSpec:
    inner_diameter: float  # [m]
    wall_thickness: float  # [m]
    length: float          # [m]


@dataclass(frozen=True, slots=True)
class ProcessParams:
    volume_liters: float
    initial_temp_c: float
    target_temp_c: float
    target_duration_s: float
    flow_rate_lpm: float
    ambient_temp_c: float


@dataclass(frozen=True, slots=True)
class CalculatorInputs:
    fluid: FluidProps
    material: MaterialProps
    pipe: PipeSpec
    process: ProcessParams
    h_outside: float | None = None       # override for external convection [W/(m^2*K)]
    step_s: float = cfg.DEFAULT_STEP_S
    sim_duration_s: float | None = None  # None -> SIM_DURATION_FACTOR * target duration

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np


@dataclass(frozen=True, slots=True)
class Geometry:
    inner_radius: float  # [m]
    outer_radius: float  # [m]
    length: float        # [m]

    @property
    def inner_diameter(self) -> float:
        return 2.0 * self.inner_radius


@dataclass(frozen=True, slots=True)
class FlowState:
    flow_m3s: float
    area_m2: float
    velocity: float  # mean velocity [m/s], 0 when flow or area is 0


@dataclass(frozen=True, slots=True)
class InsideConvection:
    Re: float
    Pr: float
    Nu: float
    h: float  # [W/(m^2*K)], before flooring


@dataclass(frozen=True, slots=True)
class PipeTransferResult:
    """
    Series thermal circuit of one pipe segment:
      fluid -> R_conv_in -> R_cond (wall) -> R_conv_out -> ambient
    Each resistance is finite-positive or +inf. Q_loss_W is signed:
    negative means the fluid gains heat from the surroundings.
    """
    inside_Re: float
    inside_Pr: float
    inside_Nu: float
    h_inside: float
    h_outside: float
    R_conv_in: float
    R_cond: float
    R_conv_out: float
    R_total: float
    Q_loss_W: float


@dataclass(frozen=True, slots=True)
class PowerResult:
    mass_kg: float
    energy_j: float
    power_w: float


@dataclass(frozen=True, slots=True)
class PowerBudget:
    mass_kg: float
    energy_j: float
    ideal_power_w: float
    heat_loss_w: float  # as evaluated, possibly negative
    required_power_w: float

    @property
    def energy_kj(self) -> float:
        return self.energy_j / 1000.0


@dataclass(frozen=True, slots=True)
class PassResult:
    m_dot: float    # [kg/s]
    delta_t: float  # [K] rise for one pass through the heater


@dataclass(frozen=True, slots=True)
class LumpedResult:
    mass_kg: float
    capacity_j_per_k: float
    tau_s: float


class StopReason(str, Enum):
    TARGET_REACHED = "target_reached"
    DURATION_ELAPSED = "duration_elapsed"
    CANCELLED = "cancelled"


@dataclass(frozen=True, slots=True)
class SimulationTrace:
    """
    Output of one heating run.
    t: sample times [s], t[0] == 0
    T: fluid temperature at each sample
    stop_reason: why the run ended
    """
    t: np.ndarray
    T: np.ndarray
    stop_reason: StopReason

    @property
    def reached_target(self) -> bool:
        return self.stop_reason is StopReason.TARGET_REACHED

    @property
    def final_T(self) -> float:
        return float(self.T[-1])

    @property
    def elapsed_s(self) -> float:
        return float(self.t[-1])

    def __len__(self) -> int:
        return int(self.t.shape[0])

    def samples(self) -> list[tuple[float, float]]:
        return [(float(a), float(b)) for a, b in zip(self.t, self.T)]


@dataclass(frozen=True, slots=True)
class CalculatorResult:
    ideal_power_w: float
    required_power_w: float
    energy_kj: float
    heat_loss_w: float
    delta_t_per_pass_c: float
    velocity_m_s: float
    reynolds: float
    time_constant_s: float
    time_to_target_s: float  # closed-form lumped estimate, +inf if never reached
    flow: FlowState
    transfer: PipeTransferResult
    budget: PowerBudget
    lumped: LumpedResult
    trace: SimulationTrace

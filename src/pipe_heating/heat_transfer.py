from __future__ import annotations

import math

import pipe_heating.config as cfg
from pipe_heating.physics import FluidProps, MaterialProps
from pipe_heating.types import Geometry, InsideConvection, PipeTransferResult


def reynolds(rho: float, velocity: float, D: float, mu: float) -> float:
    if mu <= 0:
        return 0.0
    return rho * velocity * D / mu


def prandtl(cp: float, mu: float, k: float) -> float:
    if k <= 0:
        return 0.0
    return cp * mu / k


def dittus_boelter_nu(Re: float, Pr: float) -> float:
    """
    Nu = 0.023 Re^0.8 Pr^0.4, turbulent internal flow (Re > ~3000).
    Laminar flow is not modeled: Re <= 0 or Pr <= 0 gives Nu = 0.
    """
    if Re <= 0 or Pr <= 0:
        return 0.0
    return cfg.DITTUS_BOELTER_C * Re ** cfg.DITTUS_BOELTER_RE_EXP * Pr ** cfg.DITTUS_BOELTER_PR_EXP


def is_turbulent(Re: float) -> bool:
    return Re > cfg.TURBULENT_RE_MIN


def h_inside(fluid: FluidProps, velocity: float, D: float) -> InsideConvection:
    Re = reynolds(fluid.rho, velocity, D, fluid.mu)
    Pr = prandtl(fluid.cp, fluid.mu, fluid.k)
    Nu = dittus_boelter_nu(Re, Pr)
    h = Nu * fluid.k / D if D > 0 else 0.0
    return InsideConvection(Re=Re, Pr=Pr, Nu=Nu, h=h)


def convective_resistance(h: float, radius: float, length: float) -> float:
    # R = 1 / (h A), A = 2 pi r L
    A = 2.0 * math.pi * radius * length
    if h <= 0 or A <= 0:
        return math.inf
    return 1.0 / (h * A)


def pipe_conduction_resistance(
    inner_radius: float,
    outer_radius: float,
    length: float,
    material: MaterialProps,
) -> float:
    """
    Radial conduction through a cylindrical wall:
      R_cond = ln(r_o / r_i) / (2 pi k L)   [K/W]
    Inverted or degenerate geometry is an open circuit (+inf).
    """
    if outer_radius <= inner_radius or inner_radius <= 0:
        return math.inf
    if length <= 0 or material.k <= 0:
        return math.inf
    return math.log(outer_radius / inner_radius) / (2.0 * math.pi * material.k * length)


def pipe_heat_transfer(
    fluid_temp: float,
    ambient_temp: float,
    geom: Geometry,
    velocity: float,
    material: MaterialProps,
    fluid: FluidProps,
    h_outside: float | None = None,
) -> PipeTransferResult:
    """
    Steady heat loss of one pipe segment through the series circuit
    inside convection -> wall conduction -> outside convection.

    The inside coefficient is floored to H_INSIDE_FLOOR so stagnant fluid
    still sees a finite (large) resistance. Q_loss_W keeps its sign.
    """
    inside = h_inside(fluid, velocity, geom.inner_diameter)
    h_in = max(inside.h, cfg.H_INSIDE_FLOOR)
    h_out = cfg.H_OUTSIDE_DEFAULT if h_outside is None else float(h_outside)

    R_conv_in = convective_resistance(h_in, geom.inner_radius, geom.length)
    R_cond = pipe_conduction_resistance(geom.inner_radius, geom.outer_radius, geom.length, material)
    R_conv_out = convective_resistance(h_out, geom.outer_radius, geom.length)

    R_total = R_conv_in + R_cond + R_conv_out
    if math.isinf(R_total):
        Q_loss = 0.0
    else:
        Q_loss = (fluid_temp - ambient_temp) / R_total

    return PipeTransferResult(
        inside_Re=inside.Re,
        inside_Pr=inside.Pr,
        inside_Nu=inside.Nu,
        h_inside=h_in,
        h_outside=h_out,
        R_conv_in=R_conv_in,
        R_cond=R_cond,
        R_conv_out=R_conv_out,
        R_total=R_total,
        Q_loss_W=float(Q_loss),
    )

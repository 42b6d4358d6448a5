from __future__ import annotations

import math

from pipe_heating.physics import PipeSpec
from pipe_heating.types import FlowState, Geometry


def lpm_to_m3s(flow_lpm: float) -> float:
    # L/min -> m^3/s
    return flow_lpm / 1000.0 / 60.0


def derive_geometry(pipe: PipeSpec) -> Geometry:
    r_in = pipe.inner_diameter / 2.0
    r_out = r_in + pipe.wall_thickness
    return Geometry(inner_radius=r_in, outer_radius=r_out, length=pipe.length)


def cross_section_area(inner_radius: float) -> float:
    if inner_radius <= 0:
        return 0.0
    return math.pi * inner_radius ** 2


def flow_state(flow_lpm: float, geom: Geometry) -> FlowState:
    """
    Mean velocity v = Q / (pi r_i^2).
    Zero area or zero flow gives v = 0 instead of a division error.
    """
    flow_m3s = lpm_to_m3s(flow_lpm)
    area = cross_section_area(geom.inner_radius)
    if area <= 0 or flow_m3s == 0:
        return FlowState(flow_m3s=flow_m3s, area_m2=area, velocity=0.0)
    return FlowState(flow_m3s=flow_m3s, area_m2=area, velocity=flow_m3s / area)

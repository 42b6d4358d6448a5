import math

import pytest

from pipe_heating.geometry import cross_section_area, derive_geometry, flow_state, lpm_to_m3s
from pipe_heating.physics import PipeSpec


def make_pipe(d: float = 0.02, t: float = 0.002, L: float = 5.0) -> PipeSpec:
    return PipeSpec(inner_diameter=d, wall_thickness=t, length=L)


def test_radii_from_diameter_and_thickness():
    geom = derive_geometry(make_pipe())
    assert geom.inner_radius == pytest.approx(0.01)
    assert geom.outer_radius == pytest.approx(0.012)
    assert geom.length == 5.0
    assert geom.inner_diameter == pytest.approx(0.02)


def test_lpm_conversion():
    assert lpm_to_m3s(60.0) == pytest.approx(1e-3)
    assert lpm_to_m3s(0.0) == 0.0


def test_velocity_from_flow():
    flow = flow_state(20.0, derive_geometry(make_pipe()))
    assert flow.area_m2 == pytest.approx(math.pi * 1e-4)
    assert flow.velocity == pytest.approx((20.0 / 60000.0) / (math.pi * 1e-4))


def test_zero_flow_gives_zero_velocity():
    flow = flow_state(0.0, derive_geometry(make_pipe()))
    assert flow.velocity == 0.0


def test_zero_area_gives_zero_velocity():
    for d in (0.0, -0.01):
        flow = flow_state(20.0, derive_geometry(make_pipe(d=d)))
        assert flow.area_m2 == 0.0
        assert flow.velocity == 0.0
    assert cross_section_area(0.0) == 0.0

import math

import pytest

import pipe_heating.config as cfg
from pipe_heating.heat_transfer import (
    convective_resistance,
    dittus_boelter_nu,
    h_inside,
    pipe_conduction_resistance,
    pipe_heat_transfer,
    prandtl,
    reynolds,
)
from pipe_heating.properties import FLUIDS, MATERIALS
from pipe_heating.types import Geometry

WATER = FLUIDS["water"]
STEEL = MATERIALS["stainless_steel_304"]


def make_geom(r_in: float = 0.01, r_out: float = 0.012, L: float = 5.0) -> Geometry:
    return Geometry(inner_radius=r_in, outer_radius=r_out, length=L)


def test_dimensionless_numbers():
    assert reynolds(998.0, 1.0, 0.02, 0.001) == pytest.approx(19960.0)
    assert prandtl(4186.0, 0.001002, 0.6) == pytest.approx(6.9906, rel=1e-4)
    assert reynolds(998.0, 1.0, 0.02, 0.0) == 0.0


def test_dittus_boelter():
    assert dittus_boelter_nu(1e4, 1.0) == pytest.approx(36.4525, rel=1e-4)
    assert dittus_boelter_nu(0.0, 7.0) == 0.0
    assert dittus_boelter_nu(1e4, 0.0) == 0.0
    assert dittus_boelter_nu(-5.0, 7.0) == 0.0


def test_h_inside_at_rest_is_zero_not_nan():
    inside = h_inside(WATER, 0.0, 0.02)
    assert inside.Re == 0.0
    assert inside.Nu == 0.0
    assert inside.h == 0.0


def test_h_inside_zero_diameter():
    inside = h_inside(WATER, 1.0, 0.0)
    assert inside.h == 0.0


def test_conduction_resistance_value():
    R = pipe_conduction_resistance(0.01, 0.012, 5.0, STEEL)
    assert R == pytest.approx(math.log(1.2) / (2 * math.pi * 16.0 * 5.0))


@pytest.mark.parametrize("material", list(MATERIALS.values()))
@pytest.mark.parametrize("length", [0.1, 5.0, 100.0])
def test_inverted_radii_is_open_circuit(material, length):
    assert pipe_conduction_resistance(0.012, 0.01, length, material) == math.inf
    assert pipe_conduction_resistance(0.01, 0.01, length, material) == math.inf


def test_convective_resistance_guards():
    assert convective_resistance(0.0, 0.01, 5.0) == math.inf
    assert convective_resistance(10.0, 0.0, 5.0) == math.inf
    assert convective_resistance(10.0, 0.01, 5.0) == pytest.approx(1.0 / (10.0 * 2 * math.pi * 0.01 * 5.0))


def test_series_circuit():
    res = pipe_heat_transfer(95.0, 20.0, make_geom(), 1.0, STEEL, WATER)
    assert res.R_total == pytest.approx(res.R_conv_in + res.R_cond + res.R_conv_out)
    assert res.Q_loss_W == pytest.approx(75.0 / res.R_total)
    assert res.Q_loss_W > 0
    assert res.h_outside == cfg.H_OUTSIDE_DEFAULT


def test_outside_override():
    base = pipe_heat_transfer(95.0, 20.0, make_geom(), 1.0, STEEL, WATER)
    windy = pipe_heat_transfer(95.0, 20.0, make_geom(), 1.0, STEEL, WATER, h_outside=50.0)
    assert windy.h_outside == 50.0
    assert windy.R_conv_out < base.R_conv_out
    assert windy.Q_loss_W > base.Q_loss_W


def test_stagnant_fluid_uses_floor():
    res = pipe_heat_transfer(95.0, 20.0, make_geom(), 0.0, STEEL, WATER)
    assert res.inside_Re == 0.0
    assert res.inside_Nu == 0.0
    assert res.h_inside == cfg.H_INSIDE_FLOOR
    assert math.isfinite(res.R_conv_in)
    assert not math.isnan(res.Q_loss_W)
    assert res.Q_loss_W > 0


def test_equal_temperatures_lose_nothing():
    for v in (0.0, 1.0):
        assert pipe_heat_transfer(40.0, 40.0, make_geom(), v, STEEL, WATER).Q_loss_W == 0.0
    assert pipe_heat_transfer(40.0, 40.0, make_geom(0.012, 0.01), 1.0, STEEL, WATER).Q_loss_W == 0.0


def test_cold_fluid_gains_heat():
    res = pipe_heat_transfer(10.0, 20.0, make_geom(), 1.0, STEEL, WATER)
    assert res.Q_loss_W < 0


def test_inverted_geometry_blocks_heat_flow():
    res = pipe_heat_transfer(95.0, 20.0, make_geom(0.012, 0.01), 1.0, STEEL, WATER)
    assert res.R_cond == math.inf
    assert res.R_total == math.inf
    assert res.Q_loss_W == 0.0

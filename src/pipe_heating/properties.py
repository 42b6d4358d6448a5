"""
Reference property tables. Callers look a record up once and pass it
explicitly into the physics functions; nothing reads these tables implicitly.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from pipe_heating.errors import ConfigurationError
from pipe_heating.physics import FluidProps, MaterialProps


FLUIDS: Mapping[str, FluidProps] = MappingProxyType({
    "water": FluidProps(name="Water (typ. 20°C)", rho=998.0, cp=4186.0, k=0.6, mu=0.001002),
})

MATERIALS: Mapping[str, MaterialProps] = MappingProxyType({
    "stainless_steel_304": MaterialProps(name="Stainless Steel 304", k=16.0),
    "stainless_steel_316": MaterialProps(name="Stainless Steel 316", k=16.0),
    "copper": MaterialProps(name="Copper", k=385.0),
    "carbon_steel": MaterialProps(name="Carbon steel", k=60.0),
    "aluminium": MaterialProps(name="Aluminium", k=205.0),
    "pex": MaterialProps(name="PEX (polymer)", k=0.4),
})


def get_fluid(key: str) -> FluidProps:
    try:
        return FLUIDS[key]
    except KeyError:
        raise ConfigurationError(f"Unknown fluid {key!r}, expected one of {sorted(FLUIDS)}") from None


def get_material(key: str) -> MaterialProps:
    try:
        return MATERIALS[key]
    except KeyError:
        raise ConfigurationError(f"Unknown material {key!r}, expected one of {sorted(MATERIALS)}") from None

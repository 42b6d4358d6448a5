from __future__ import annotations

import argparse
import logging
import sys

import pipe_heating.config as cfg
from pipe_heating.calculator import evaluate, make_inputs
from pipe_heating.errors import ConfigurationError
from pipe_heating.power_opt import find_min_power
from pipe_heating.properties import FLUIDS, MATERIALS


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pipe-heating", description="Heater sizing for liquid flowing through a pipe segment")
    p.add_argument("--volume", type=float, default=cfg.DEFAULTS["volume_liters"], help="volume to heat [L]")
    p.add_argument("--initial", type=float, default=cfg.DEFAULTS["initial_temp_c"], help="initial temperature [°C]")
    p.add_argument("--target", type=float, default=cfg.DEFAULTS["boiler_temp_c"], help="target temperature [°C]")
    p.add_argument("--minutes", type=float, default=cfg.DEFAULTS["time_to_heat_min"], help="time to reach target [min]")
    p.add_argument("--flow", type=float, default=cfg.DEFAULTS["flow_rate_lpm"], help="flow rate [L/min]")
    p.add_argument("--ambient", type=float, default=cfg.DEFAULTS["ambient_temp_c"], help="ambient temperature [°C]")
    p.add_argument("--diameter-mm", type=float, default=cfg.DEFAULTS["inner_diameter_m"] * 1000.0, help="pipe inner diameter [mm]")
    p.add_argument("--thickness-mm", type=float, default=cfg.DEFAULTS["pipe_thickness_m"] * 1000.0, help="pipe wall thickness [mm]")
    p.add_argument("--length", type=float, default=cfg.DEFAULTS["pipe_length_m"], help="pipe length [m]")
    p.add_argument("--fluid", choices=sorted(FLUIDS), default=cfg.DEFAULT_FLUID)
    p.add_argument("--material", choices=sorted(MATERIALS), default=cfg.DEFAULT_MATERIAL)
    p.add_argument("--h-outside", type=float, default=None, help="outside convection override [W/(m2*K)]")
    p.add_argument("--step", type=float, default=cfg.DEFAULT_STEP_S, help="simulation step [s]")
    p.add_argument("--sim-minutes", type=float, default=None, help="simulated horizon [min]")
    p.add_argument("--trace", action="store_true", help="print the simulated temperature trace")
    p.add_argument("--trace-every", type=int, default=60, help="print every Nth trace sample")
    p.add_argument("--size-heater", action="store_true", help="search the minimum heater power")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        inputs = make_inputs(
            volume_liters=args.volume,
            initial_temp_c=args.initial,
            target_temp_c=args.target,
            target_duration_s=args.minutes * 60.0,
            flow_rate_lpm=args.flow,
            ambient_temp_c=args.ambient,
            inner_diameter_m=args.diameter_mm / 1000.0,
            wall_thickness_m=args.thickness_mm / 1000.0,
            length_m=args.length,
            fluid=args.fluid,
            material=args.material,
            h_outside=args.h_outside,
            step_s=args.step,
            sim_duration_s=None if args.sim_minutes is None else args.sim_minutes * 60.0,
        )
        res = evaluate(inputs)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(f"Fluid / wall: {inputs.fluid.name} / {inputs.material.name}")
    print(f"Ideal power:     {res.ideal_power_w:10.1f} W")
    print(f"Pipe heat loss:  {res.heat_loss_w:10.1f} W")
    print(f"Required power:  {res.required_power_w:10.1f} W")
    print(f"Energy:          {res.energy_kj:10.1f} kJ")
    print(f"dT per pass:     {res.delta_t_per_pass_c:10.2f} °C")
    print(f"Velocity:        {res.velocity_m_s:10.3f} m/s")
    print(f"Reynolds:        {res.reynolds:10.0f}")
    print(f"Time constant:   {res.time_constant_s:10.0f} s")
    print(f"Time to target:  {res.time_to_target_s:10.0f} s (analytic)")
    print(
        "Simulation:", res.trace.stop_reason.value,
        f"at t={res.trace.elapsed_s:.0f} s, T={res.trace.final_T:.2f} °C,", len(res.trace), "samples",
    )

    if args.trace:
        every = max(1, args.trace_every)
        for k, (t, T) in enumerate(res.trace.samples()):
            if k % every == 0 or k == len(res.trace) - 1:
                print(f"{t:10.1f} s  {T:8.2f} °C")

    if args.size_heater:
        opt = find_min_power(inputs, P_high=max(2.0 * res.required_power_w, 1.0))
        state = "reaches target" if opt.reached else "does NOT reach target"
        print(f"Min heater power: {opt.power_w:.1f} W ({state} at t={opt.reach_time_s:.0f} s)")

    return 0


if __name__ == "__main__":
    sys.exit(main())

# Dittus-Boelter correlation (turbulent internal flow, fluid being heated)
DITTUS_BOELTER_C = 0.023
DITTUS_BOELTER_RE_EXP = 0.8
DITTUS_BOELTER_PR_EXP = 0.4
TURBULENT_RE_MIN = 3000.0

# convection
H_INSIDE_FLOOR = 1e-4     # W/(m^2*K), keeps R_conv_in finite at zero flow
H_OUTSIDE_DEFAULT = 10.0  # W/(m^2*K), mixed/natural convection to still air

# simulation
DEFAULT_STEP_S = 1.0
SIM_DURATION_FACTOR = 2.0  # simulated horizon as a multiple of the target duration

# process defaults
DEFAULTS = {
    "ambient_temp_c": 20.0,
    "boiler_temp_c": 95.0,
    "initial_temp_c": 20.0,
    "volume_liters": 10.0,
    "pipe_length_m": 5.0,
    "inner_diameter_m": 0.02,
    "pipe_thickness_m": 0.002,
    "flow_rate_lpm": 20.0,
    "time_to_heat_min": 30.0,
}

DEFAULT_FLUID = "water"
DEFAULT_MATERIAL = "stainless_steel_304"

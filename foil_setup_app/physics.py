import math

import numpy as np

from .config import RHO_WATER, G, MPH_PER_MPS, GEAR_MARGIN, CURVE_MPH_MIN, CURVE_MPH_MAX

def mph_to_mps(mph: float) -> float:
    return mph / MPH_PER_MPS

def mps_to_mph(mps: float) -> float:
    return mps * MPH_PER_MPS

def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))

def map_range(x: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    """Saturating linear map of x from [in_min, in_max] onto [out_min, out_max].

    t is clamped to [0, 1] before interpolating, so reversed output ranges
    (out_min > out_max) saturate correctly too. in_min == in_max is not allowed.
    """
    t = clamp((x - in_min) / (in_max - in_min), 0.0, 1.0)
    return out_min + t * (out_max - out_min)

def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))

def foil_lift(v, rho_water, area_m2, cl):
    v = np.asarray(v, dtype=float)
    return 0.5 * rho_water * v*v * cl * area_m2

def takeoff_speed_mps(rider_kg, cl, area_m2, rho_water=RHO_WATER, margin=GEAR_MARGIN):
    # lift = load  =>  v = sqrt(2 * load / (rho * CL * A))
    load_N = rider_kg * G * margin
    return math.sqrt((2.0 * load_N) / (rho_water * cl * area_m2))

def build_lift_curve(cl_eff, area_m2, rider_kg, rho_water=RHO_WATER):
    """Lift as % of rider weight for each integer mph from 6 to 25."""
    mph = np.arange(CURVE_MPH_MIN, CURVE_MPH_MAX + 1)
    lift_N = foil_lift(mph_to_mps(mph), rho_water, area_m2, cl_eff)
    lift_pct = lift_N / (rider_kg * G) * 100.0
    return [(int(m), round_half_up(float(p))) for m, p in zip(mph, lift_pct)]

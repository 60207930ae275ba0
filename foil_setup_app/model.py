import logging
from dataclasses import dataclass, field, asdict
from typing import List, Optional

import pandas as pd

from .config import (
    DEFAULTS, DISC_LIFT_BIAS, GOAL_TRACK_OFFSET, RHO_WATER, TRACK_BASE_CM,
    TRACK_BOUNDS, SHIM_BOUNDS, CL_BOUNDS, SCORE_BOUNDS,
)
from .physics import clamp, map_range, round_half_up, takeoff_speed_mps, mps_to_mph, build_lift_curve

logger = logging.getLogger(__name__)

# (query key, attribute) pairs; query keys stay camelCase for shared links
FIELDS = (
    ("riderKg", "rider_kg"),
    ("discipline", "discipline"),
    ("frontAreaCm2", "front_area_cm2"),
    ("frontAR", "front_ar"),
    ("stabAreaCm2", "stab_area_cm2"),
    ("mastCm", "mast_cm"),
    ("fuseCm", "fuse_cm"),
    ("boardLiters", "board_liters"),
    ("condition", "condition"),
    ("goal", "goal"),
    ("trackFromTailCm", "track_from_tail_cm"),
)

FRONT_HEAVY = "Front foot heavy"
NEUTRAL = "Neutral"
BACK_HEAVY = "Back foot heavy"


@dataclass(frozen=True)
class SetupInput:
    rider_kg: float
    discipline: str
    front_area_cm2: float
    front_ar: float
    stab_area_cm2: float
    mast_cm: float
    fuse_cm: float
    board_liters: float   # reserved, not used by any formula yet
    condition: str        # display only
    goal: str
    track_from_tail_cm: Optional[float] = None

    @classmethod
    def from_dict(cls, d):
        """Build from a camelCase mapping; missing keys fall back to DEFAULTS."""
        return cls(**{attr: d.get(key, DEFAULTS[key]) for key, attr in FIELDS})

    @classmethod
    def defaults(cls):
        return cls.from_dict({})

    def to_dict(self):
        return {key: getattr(self, attr) for key, attr in FIELDS}


@dataclass(frozen=True)
class LiftPoint:
    mph: int
    lift: int


@dataclass(frozen=True)
class SetupOutput:
    track_from_tail_cm: float
    shim_deg: float
    shim_note: str
    pressure_bias: str
    pressure_note: str
    pump_score: int
    turn_score: int
    speed_score: int
    takeoff_mph: float
    lift_curve: List[LiftPoint] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)

    def to_dict(self):
        return dict(
            trackFromTailCm=self.track_from_tail_cm,
            shimDeg=self.shim_deg,
            shimNote=self.shim_note,
            pressureBias=self.pressure_bias,
            pressureNote=self.pressure_note,
            pumpScore=self.pump_score,
            turnScore=self.turn_score,
            speedScore=self.speed_score,
            takeoffMph=self.takeoff_mph,
            liftCurve=[asdict(p) for p in self.lift_curve],
            notes=list(self.notes),
        )


def shim_note_for(shim: float) -> str:
    if shim > 0.4:
        return "Add tail shim for easier lift / less front foot"
    if shim < -0.4:
        return "Reduce tail shim to calm lift / avoid breaching"
    return "Neutral shim looks good"


def calc_setup(i: SetupInput) -> SetupOutput:
    # Unit conversions
    area_m2 = i.front_area_cm2 / 10000.0
    stab_ratio = i.stab_area_cm2 / i.front_area_cm2

    disc_lift_bias = DISC_LIFT_BIAS[i.discipline]

    # Effective CL drops as aspect ratio rises
    cl_base = 0.55 + (6.5 - i.front_ar) * 0.03
    cl_eff = clamp(cl_base * disc_lift_bias, *CL_BOUNDS)

    takeoff_mph = mps_to_mph(takeoff_speed_mps(i.rider_kg, cl_eff, area_m2, RHO_WATER))

    # Track position heuristic (cm from tail)
    wing_size_factor = map_range(i.front_area_cm2, 600, 1800, -2.5, 3.5)
    fuse_factor = map_range(i.fuse_cm, 55, 85, -2.0, 2.0)
    stab_factor = map_range(stab_ratio, 0.18, 0.35, -1.5, 1.5)
    mast_factor = map_range(i.mast_cm, 65, 95, -0.7, 0.7)

    track = TRACK_BASE_CM + wing_size_factor - fuse_factor - stab_factor + mast_factor
    track += GOAL_TRACK_OFFSET[i.goal]
    track = clamp(track, *TRACK_BOUNDS)

    track_delta = None
    if i.track_from_tail_cm is not None:
        track_delta = track - i.track_from_tail_cm

    # Shim (deg); thresholds are strict and stack
    shim = 0.0
    if takeoff_mph > 12.5: shim += 0.8
    if takeoff_mph > 14.5: shim += 0.6
    if takeoff_mph < 9.5: shim -= 0.6

    if stab_ratio < 0.22: shim += 0.3
    if stab_ratio > 0.32: shim -= 0.2

    if i.fuse_cm < 62: shim += 0.2
    if i.fuse_cm > 75: shim -= 0.1

    shim = clamp(shim, *SHIM_BOUNDS)
    shim_note = shim_note_for(shim)

    # Pressure bias
    liftiness = (i.front_area_cm2 / i.rider_kg) * disc_lift_bias
    if liftiness > 18:
        pressure_bias = FRONT_HEAVY
        pressure_note = ("Wing is lift-strong for your weight. Expect front pressure; "
                         "move mast back or reduce shim if needed.")
    elif liftiness < 12:
        pressure_bias = BACK_HEAVY
        pressure_note = ("Setup is on the smaller side. Expect back foot pressure; "
                         "move mast forward or add shim to help.")
    else:
        pressure_bias = NEUTRAL
        pressure_note = "Balanced setup expected."

    # Scores
    pump = clamp(
        60
        + map_range(i.front_area_cm2, 700, 1700, -5, 18)
        + map_range(i.front_ar, 4, 9, -2, 18)
        + map_range(stab_ratio, 0.18, 0.35, 8, -6)
        + map_range(i.fuse_cm, 55, 85, 6, -3),
        *SCORE_BOUNDS)
    turn = clamp(
        60
        + map_range(i.front_ar, 4, 9, 18, -8)
        + map_range(i.fuse_cm, 55, 85, 10, -8)
        + map_range(i.mast_cm, 65, 95, 6, -4)
        + map_range(i.front_area_cm2, 700, 1700, 6, -6),
        *SCORE_BOUNDS)
    speed = clamp(
        55
        + map_range(i.front_ar, 4, 9, -4, 18)
        + map_range(i.fuse_cm, 55, 85, -6, 12)
        + map_range(stab_ratio, 0.18, 0.35, -4, 8),
        *SCORE_BOUNDS)

    lift_curve = [LiftPoint(mph, lift) for mph, lift in build_lift_curve(cl_eff, area_m2, i.rider_kg)]

    logger.debug(
        "area=%.4fm2 stab_ratio=%.4f cl_eff=%.3f takeoff=%.2fmph track=%.2fcm shim=%.2fdeg",
        area_m2, stab_ratio, cl_eff, takeoff_mph, track, shim,
    )

    notes = []
    if track_delta is not None:
        direction = "forward" if track_delta > 0 else "back"
        notes.append(f"Move mast {direction} ~{abs(track_delta):.1f} cm from your current position.")
    notes.append(f"Estimated takeoff speed: ~{takeoff_mph:.1f} mph.")
    if pump >= 85:
        notes.append("This setup should pump/link very well.")
    if speed >= 80:
        notes.append("Expect strong stability at higher speeds.")
    if turn >= 80:
        notes.append("Caveat: may feel looser in pitch during hard carves if over-shimmed.")

    return SetupOutput(
        track_from_tail_cm=track,
        shim_deg=shim,
        shim_note=shim_note,
        pressure_bias=pressure_bias,
        pressure_note=pressure_note,
        pump_score=round_half_up(pump),
        turn_score=round_half_up(turn),
        speed_score=round_half_up(speed),
        takeoff_mph=takeoff_mph,
        lift_curve=lift_curve,
        notes=notes,
    )


def lift_curve_frame(out: SetupOutput) -> pd.DataFrame:
    return pd.DataFrame([asdict(p) for p in out.lift_curve], columns=["mph", "lift"])

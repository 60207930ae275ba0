import os

# Physics
RHO_WATER = 1025.0      # kg/m³ seawater
G = 9.81
MPH_PER_MPS = 2.23694
GEAR_MARGIN = 1.05      # rider + board/foil/wetsuit

# Lift curve grid (mph, inclusive)
CURVE_MPH_MIN = 6
CURVE_MPH_MAX = 25

# Output bounds
TRACK_BOUNDS = (28.0, 48.0)
SHIM_BOUNDS = (-1.5, 2.0)
CL_BOUNDS = (0.35, 0.75)
SCORE_BOUNDS = (0.0, 100.0)

TRACK_BASE_CM = 36.0

# Rough but practical lift multipliers per discipline
DISC_LIFT_BIAS = {
    "prone":    1.0,
    "wing":     0.9,
    "sup":      1.05,
    "downwind": 0.85,
    "tow":      0.8,
    "efoil":    0.7,
}

GOAL_TRACK_OFFSET = {
    "more_lift":   +1.5,
    "less_lift":   -1.5,
    "more_speed":  -1.0,
    "better_pump": +0.7,
    "better_turn": +0.5,
    "more_stable": -0.5,
}

DISCIPLINES = {
    "prone":    "Prone",
    "wing":     "Wingfoil",
    "sup":      "SUP Foil",
    "downwind": "Downwind",
    "tow":      "Tow/Surf Assist",
    "efoil":    "E-foil",
}

GOALS = {
    "more_lift":   "Need more lift / easier takeoff",
    "less_lift":   "Too much lift / breaching",
    "more_speed":  "Want more top speed",
    "better_pump": "Want better pumping/linking",
    "better_turn": "Want tighter carves",
    "more_stable": "Want stability at speed",
}

CONDITIONS = [
    "Glassy / small swell",
    "Clean waist-to-chest",
    "Windy / bumps",
    "Strong current / heavy swell",
]

# Query keys -> default input values
DEFAULTS = dict(
    riderKg=75.0,
    discipline="prone",
    frontAreaCm2=1200.0,
    frontAR=7.0,
    stabAreaCm2=260.0,
    mastCm=82.0,
    fuseCm=68.0,
    boardLiters=40.0,
    condition="Clean waist-to-chest",
    goal="better_pump",
    trackFromTailCm=None,
)

NUMERIC_KEYS = ("riderKg", "frontAreaCm2", "frontAR", "stabAreaCm2", "mastCm", "fuseCm", "boardLiters")
TEXT_KEYS = ("discipline", "condition", "goal")

# Smallest accepted value per numeric field (links and sidebar inputs);
# zero or negative sizes would divide by zero in the calculator
MIN_VALUES = dict(
    riderKg=1.0,
    frontAreaCm2=1.0,
    frontAR=0.1,
    stabAreaCm2=1.0,
    mastCm=1.0,
    fuseCm=1.0,
    boardLiters=1.0,
)


def log_level():
    return os.getenv("FOIL_SETUP_LOG_LEVEL", "WARNING").upper()

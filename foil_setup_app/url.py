import logging
import math
from urllib.parse import parse_qs, urlencode

import streamlit as st

from .config import DEFAULTS, NUMERIC_KEYS, TEXT_KEYS, MIN_VALUES, DISC_LIFT_BIAS, GOAL_TRACK_OFFSET
from .model import SetupInput

logger = logging.getLogger(__name__)

ENUMS = {
    "discipline": tuple(DISC_LIFT_BIAS),
    "goal": tuple(GOAL_TRACK_OFFSET),
}


class InvalidEnumValue(ValueError):
    """A discipline or goal outside its closed set of values."""

    def __init__(self, field, value):
        self.field = field
        self.value = value
        super().__init__(f"invalid {field} {value!r}; expected one of {', '.join(ENUMS[field])}")


def _flatten(query):
    # Accepts a raw query string or any mapping (dict, st.query_params, parse_qs output)
    if isinstance(query, str):
        query = parse_qs(query.lstrip("?"), keep_blank_values=True)
    out = {}
    for k, v in query.items():
        if isinstance(v, (list, tuple)):
            v = v[0] if v else None
        out[k] = v
    return out


def _to_float(raw):
    try:
        v = float(raw)
    except (TypeError, ValueError):
        return None
    return v if math.isfinite(v) else None


def parse_query_to_input(query) -> SetupInput:
    """Build a SetupInput from flat key/value pairs.

    Absent keys take their DEFAULTS value, as do empty numbers and enums; an
    empty condition is kept. Unparseable numbers and numbers below MIN_VALUES
    fall back to the default with a warning. trackFromTailCm stays None unless
    a number is given, so "unset" and 0 remain distinct.
    """
    q = _flatten(query or {})
    d = {}

    for key in NUMERIC_KEYS:
        raw = q.get(key)
        if raw is None or raw == "":
            continue
        v = _to_float(raw)
        if v is None:
            logger.warning("Ignoring non-numeric %s=%r, using default %s", key, raw, DEFAULTS[key])
            continue
        if v < MIN_VALUES[key]:
            logger.warning("Ignoring %s=%r below minimum %s, using default %s", key, raw, MIN_VALUES[key], DEFAULTS[key])
            continue
        d[key] = v

    for key in TEXT_KEYS:
        raw = q.get(key)
        # condition is free text, so an empty one is kept
        if raw is None or (raw == "" and key in ENUMS):
            continue
        if key in ENUMS and raw not in ENUMS[key]:
            raise InvalidEnumValue(key, raw)
        d[key] = str(raw)

    raw = q.get("trackFromTailCm")
    if raw is not None and raw != "":
        track = _to_float(raw)
        if track is None:
            logger.warning("Ignoring non-numeric trackFromTailCm=%r", raw)
        d["trackFromTailCm"] = track

    return SetupInput.from_dict(d)


def _fmt(v):
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v)


def _query_params(i: SetupInput):
    # None fields are omitted so "unset" never reads back as zero
    return {k: _fmt(v) for k, v in i.to_dict().items() if v is not None}

def input_to_query(i: SetupInput) -> str:
    return urlencode(_query_params(i))


# -------------------------
# Streamlit session glue
# -------------------------
def _apply_to_state(i: SetupInput):
    for k, v in i.to_dict().items():
        if k == "trackFromTailCm":
            st.session_state["knows_track"] = v is not None
            if v is not None:
                st.session_state["current_track_cm"] = float(v)
        else:
            st.session_state[k] = v

def init_state_from_query():
    # Populate defaults once
    _defaults = SetupInput.defaults()
    for k, v in _defaults.to_dict().items():
        if k != "trackFromTailCm":
            st.session_state.setdefault(k, v)
    st.session_state.setdefault("knows_track", False)
    st.session_state.setdefault("current_track_cm", 38.0)

    # the rejection message outlives the first run so the banner stays up
    if st.session_state.get("_qs_applied"):
        return st.session_state.get("_qs_error")

    st.session_state["_qs_applied"] = True
    try:
        i = parse_query_to_input(st.query_params.to_dict())
    except InvalidEnumValue as e:
        logger.warning("Shared link rejected: %s", e)
        st.session_state["_qs_error"] = str(e)
        return st.session_state["_qs_error"]
    _apply_to_state(i)
    return None

def state_to_input() -> SetupInput:
    s = st.session_state
    d = {k: s[k] for k in DEFAULTS if k in s and k != "trackFromTailCm"}
    d["trackFromTailCm"] = float(s["current_track_cm"]) if s.get("knows_track") else None
    for k in NUMERIC_KEYS:
        d[k] = float(d[k])
    return SetupInput.from_dict(d)

def update_share_url(i: SetupInput) -> str:
    params = _query_params(i)
    st.query_params.from_dict(params)
    return "?" + urlencode(params)

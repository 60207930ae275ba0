# Streamlit app: hydrofoil setup recommendations with shareable links
import logging

import streamlit as st
from dotenv import load_dotenv

from foil_setup_app.config import DISCIPLINES, GOALS, log_level
from foil_setup_app.model import calc_setup, lift_curve_frame
from foil_setup_app.ui import sidebar_controls, results_panel
from foil_setup_app.url import init_state_from_query, state_to_input, update_share_url

st.set_page_config(page_title="Foil Setup Tuner — track, shim & lift curve", layout="wide")
load_dotenv()
logging.basicConfig(level=log_level(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Initialize state (defaults + apply query string if present)
link_error = init_state_from_query()

# -------------------------
# Sidebar Controls (all widgets keyed to session_state)
# -------------------------
sidebar_controls()

setup = state_to_input()
results = calc_setup(setup)

# Keep the address bar in sync so the current setup can be shared
update_share_url(setup)

# -------------------------
# Layout & UI
# -------------------------
st.title("Foil Setup Tuner")
st.caption(f"{DISCIPLINES[setup.discipline]} · {setup.condition} · {GOALS[setup.goal]}")

if link_error:
    st.error(f"Shared link ignored: {link_error}. Showing defaults.")

tab_results, tab_table, tab_about = st.tabs(["Recommendations", "Lift table", "About / Share"])

with tab_results:
    results_panel(setup, results)

with tab_table:
    st.dataframe(lift_curve_frame(results), hide_index=True, use_container_width=True)

with tab_about:
    st.markdown("""
**Model overview.** Rough, practical heuristics, not a CFD model:
1) **Takeoff** — speed at which front-wing lift (seawater, effective CL from aspect ratio and discipline) carries rider + ~5% gear.
2) **Track** — starts at 36 cm from the tail and moves with wing size, fuselage, stab ratio, mast length and your goal.
3) **Shim** — stepped adjustments from takeoff speed, stab ratio and fuselage length.

**Units:** areas in cm², lengths in cm, speeds in **mph**. Board volume is recorded but does not change the numbers yet.
    """)

    st.subheader("Share this exact setup")
    c1, c2 = st.columns([1, 1])
    with c1:
        st.caption("The URL updates on every change — copy it from your browser's address bar.")
    with c2:
        if st.button("Clear URL parameters"):
            st.query_params.clear()
            st.success("Cleared — the URL has no parameters now.")

import plotly.graph_objects as go
import streamlit as st

from .config import DISCIPLINES, GOALS, CONDITIONS, TRACK_BOUNDS, MIN_VALUES
from .model import lift_curve_frame

def sidebar_controls():
    st.sidebar.header("Rider")
    st.sidebar.number_input("Rider weight (kg)", min_value=MIN_VALUES["riderKg"], step=1.0, key="riderKg")
    disc = list(DISCIPLINES)
    st.sidebar.selectbox("Discipline", disc, format_func=lambda k: DISCIPLINES[k], key="discipline")

    st.sidebar.subheader("Front wing")
    st.sidebar.number_input("Area (cm²)", min_value=MIN_VALUES["frontAreaCm2"], step=10.0, key="frontAreaCm2")
    st.sidebar.number_input("Aspect ratio", min_value=MIN_VALUES["frontAR"], step=0.1, key="frontAR")

    st.sidebar.subheader("Stab / mast / fuselage")
    st.sidebar.number_input("Stabilizer area (cm²)", min_value=MIN_VALUES["stabAreaCm2"], step=5.0, key="stabAreaCm2")
    st.sidebar.number_input("Mast length (cm)", min_value=MIN_VALUES["mastCm"], step=1.0, key="mastCm")
    st.sidebar.number_input("Fuselage length (cm)", min_value=MIN_VALUES["fuseCm"], step=1.0, key="fuseCm")

    st.sidebar.subheader("Board & conditions")
    st.sidebar.number_input("Board volume (L)", min_value=MIN_VALUES["boardLiters"], step=1.0, key="boardLiters")
    # shared links may carry a condition outside the preset list
    conds = CONDITIONS if st.session_state["condition"] in CONDITIONS else CONDITIONS + [st.session_state["condition"]]
    st.sidebar.selectbox("Conditions", conds, key="condition")
    st.sidebar.selectbox("Goal", list(GOALS), format_func=lambda k: GOALS[k], key="goal")

    st.sidebar.subheader("Current setup")
    st.sidebar.checkbox("I know my current track position", key="knows_track")
    if st.session_state["knows_track"]:
        st.sidebar.number_input("Current track (cm from tail)", step=0.5, key="current_track_cm")

def lift_curve_chart(out, takeoff_mph=None):
    df = lift_curve_frame(out)
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=df["mph"], y=df["lift"], mode="lines+markers", name="Lift (% of rider weight)"))
    fig.add_hline(y=100, line_dash="dot", annotation_text="Rider weight", annotation_position="bottom right")
    if takeoff_mph is not None:
        fig.add_vline(x=takeoff_mph, line_dash="dash", annotation_text="Takeoff", annotation_position="top")
    fig.update_layout(xaxis_title="Board speed (mph)", yaxis_title="Lift (% of rider weight)", height=420)
    return fig

def results_panel(i, out):
    col1, col2, col3, col4 = st.columns(4)
    delta = None
    if i.track_from_tail_cm is not None:
        delta = f"{out.track_from_tail_cm - i.track_from_tail_cm:+.1f} cm vs current"
    col1.metric("Mast track", f"{out.track_from_tail_cm:.1f} cm", delta=delta,
                help=f"From the tail, range {TRACK_BOUNDS[0]:.0f}–{TRACK_BOUNDS[1]:.0f} cm")
    col2.metric("Tail shim", f"{out.shim_deg:+.1f}°")
    col3.metric("Pressure", out.pressure_bias)
    col4.metric("Takeoff", f"{out.takeoff_mph:.1f} mph")

    st.caption(out.shim_note)
    st.info(out.pressure_note)

    for label, score in (("Pump", out.pump_score), ("Turn", out.turn_score), ("Speed", out.speed_score)):
        st.progress(score / 100, text=f"{label}: {score}/100")

    st.subheader("Notes")
    st.markdown("\n".join(f"- {n}" for n in out.notes))

    st.subheader("Lift curve")
    st.plotly_chart(lift_curve_chart(out, out.takeoff_mph), use_container_width=True)

"""
Pedometer Dashboard - Streamlit web app.
Uses a synthetic walk by default; upload a sample text file for real data.
"""

import streamlit as st
import plotly.graph_objects as go

import config
from synthetic_data import generate_synthetic_walk, to_device_text
from pipeline import run_pipeline
from user import User

st.set_page_config(page_title="Pedometer", page_icon="🚶", layout="wide")

if "dark_mode" not in st.session_state:
    st.session_state.dark_mode = False

METRIC_COLORS = {False: "#cc0000", True: "#ff3333"}


def metric_css(dark_mode):
    """Highlight KPI values in the accent colour of the current theme."""
    color = METRIC_COLORS[dark_mode]
    return f"<style>[data-testid=\"stMetricValue\"] {{ color: {color} !important; }}</style>"


def load_data():
    """Synthetic walk or uploaded text. Returns {'data': str, 'sample_rate_hz': float} or None."""
    data_source = st.sidebar.radio(
        "Data source",
        ["Synthetic (demo)", "Upload recording"],
        help="Use a synthetic walk for testing, or upload device sample text ('x,y,z;' per sample).",
    )
    if data_source == "Synthetic (demo)":
        duration = st.sidebar.slider("Duration (seconds)", 10, 120, 30)
        step_rate = st.sidebar.slider("Cadence (steps/s)", 0.0, 3.0, 1.8, step=0.1)
        _, accel = generate_synthetic_walk(
            duration_sec=duration,
            sample_rate_hz=config.DEFAULT_SAMPLE_RATE_HZ,
            step_rate_hz=step_rate,
            seed=42,
        )
        return {"data": to_device_text(accel), "sample_rate_hz": config.DEFAULT_SAMPLE_RATE_HZ}
    uploaded = st.sidebar.file_uploader("Upload recording", type=["txt"])
    if uploaded is None:
        return None
    rate = st.sidebar.number_input(
        "Sampling rate (Hz)",
        min_value=1.0,
        max_value=1000.0,
        value=config.DEFAULT_SAMPLE_RATE_HZ,
    )
    return {"data": uploaded.getvalue().decode("utf-8"), "sample_rate_hz": rate}


def get_user_input():
    """User inputs in sidebar. Returns a User."""
    st.sidebar.markdown("---")
    st.sidebar.markdown("### User")
    gender = st.sidebar.selectbox("Gender", ["—", "female", "male"])
    height = st.sidebar.number_input("Height (cm)", min_value=0, max_value=250, value=0, step=1,
                                     help="Leave at 0 to skip. Used to estimate stride.")
    stride = st.sidebar.number_input("Stride (cm)", min_value=0, max_value=200, value=0, step=1,
                                     help=f"Leave at 0 to estimate (default {config.DEFAULT_STRIDE_CM:g} cm).")
    return User(
        gender=None if gender == "—" else gender,
        height=height or None,
        stride=stride or None,
    )


def plot_signal(result, dark_mode=False):
    """Filtered signal with deadband and accepted edges."""
    df = result["df_signal"]
    threshold = result["analyzer"].config.threshold
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=df["time_s"], y=df["filtered"], mode="lines",
                             line=dict(color="#3366cc", width=1.5), name="Filtered"))
    for edges, color, name in (
        (result["positive_edges"], "#cc0000", "Positive edges"),
        (result["negative_edges"], "#00cc66", "Negative edges"),
    ):
        fig.add_trace(go.Scatter(x=df["time_s"].iloc[edges], y=df["filtered"].iloc[edges], mode="markers",
                                 marker=dict(color=color, size=8), name=f"{name} ({len(edges)})"))
    fig.add_hline(y=threshold, line_dash="dash", line_color="#666666", opacity=0.5)
    fig.add_hline(y=-threshold, line_dash="dash", line_color="#666666", opacity=0.5)
    fig.update_layout(
        title="Acceleration Along Gravity",
        template="plotly_dark" if dark_mode else "plotly_white",
        xaxis=dict(title="Time (s)"),
        yaxis=dict(title="Acceleration (g)"),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )
    return fig


def main():
    top_left, _ = st.columns([1, 8])
    with top_left:
        dark_mode = st.toggle("🌙 Dark mode", value=st.session_state.dark_mode, key="dark_toggle")
        st.session_state.dark_mode = dark_mode
    st.markdown(metric_css(dark_mode), unsafe_allow_html=True)

    st.title("🚶 Pedometer")
    st.markdown("Steps, distance and time from accelerometer data.")

    st.sidebar.header("Data")
    data = load_data()
    try:
        user = get_user_input()
    except ValueError as e:
        st.error(str(e))
        return

    if data is None:
        st.info("Upload a recording to analyse your walk.")
        return

    try:
        with st.spinner("Processing data..."):
            result = run_pipeline(data=data["data"], sample_rate_hz=data["sample_rate_hz"],
                                  user=user, make_figures=False)
    except ValueError as e:
        st.error(str(e))
        return

    s = result["summary"]
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Steps", s["steps"])
    with col2:
        st.metric("Distance", f"{s['distance']:g} {s['distance_unit']}")
    with col3:
        st.metric("Time", f"{s['time']:g} {s['time_unit']}")

    st.markdown("---")
    st.plotly_chart(plot_signal(result, dark_mode), use_container_width=True)
    with st.expander("View per-sample data"):
        st.dataframe(result["df_signal"], use_container_width=True)

    st.sidebar.markdown("---")
    st.sidebar.caption(f"Stride used: {user.stride:g} cm")


if __name__ == "__main__":
    main()

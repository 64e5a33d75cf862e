#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Ideal Gas PV Canvas - Interactive Streamlit Application
================================================================================

Project:        Ideal Gas PV Canvas
Module:         app.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

This is the main Streamlit application for the Ideal Gas PV Canvas.
Users can:
- Click on the PV plot to move the state of the gas
- Watch the piston follow the volume and the particles follow the temperature
- Compare the isobaric, isochoric, isothermal and adiabatic curves
- Track the work done on the gas and the heat inferred from the first law
"""

import io
import logging
import time

import numpy as np
import streamlit as st
from PIL import Image
from streamlit_image_coordinates import streamlit_image_coordinates

from pv_canvas.config import ConfigurationError, DemoConfig
from pv_canvas.curves import CurveSampling
from pv_canvas.logging_config import setup_logging
from pv_canvas.simulation import PVSimulation
from pv_canvas.visualization import (
    VisualizationConfig, pixel_to_world, render_frame_png
)

logger = logging.getLogger("pv_canvas.app")


# Page configuration
st.set_page_config(
    page_title="Ideal Gas PV Canvas",
    page_icon="🧪",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
.stApp {
    background-color: #0e1117;
}
.readout {
    font-family: monospace;
    font-size: 20px;
    white-space: pre;
    background-color: #1e293b;
    padding: 15px;
    border-radius: 10px;
    margin: 5px 0;
}
.info-text {
    font-size: 14px;
    color: #94a3b8;
}
</style>
""", unsafe_allow_html=True)


def initialize_session_state():
    """Initialize Streamlit session state variables."""
    if 'logging_ready' not in st.session_state:
        setup_logging(logging.INFO)
        st.session_state.logging_ready = True
    if 'simulation' not in st.session_state:
        st.session_state.simulation = None
    if 'running' not in st.session_state:
        st.session_state.running = False
    if 'pending_cursor' not in st.session_state:
        st.session_state.pending_cursor = None
    if 'last_click_id' not in st.session_state:
        st.session_state.last_click_id = None
    if 'vis_config' not in st.session_state:
        st.session_state.vis_config = VisualizationConfig()
    if 'temperature_history' not in st.session_state:
        st.session_state.temperature_history = []
    if 'work_history' not in st.session_state:
        st.session_state.work_history = []


def create_simulation(gas_law: str, sampling: str, seed: int) -> PVSimulation:
    """Create and initialize a new simulation."""
    config = DemoConfig(gas_law=gas_law, curve_sampling=sampling)
    sim = PVSimulation(config, rng=np.random.default_rng(seed))
    sim.initialize()
    return sim


def render_sidebar():
    """Render the sidebar with controls."""
    st.sidebar.title("🧪 Ideal Gas PV Canvas")

    st.sidebar.markdown("""
    ---
    ### About This Simulation

    The dark point on the **PV diagram** is the state of the gas. Its
    horizontal position sets the volume and its vertical position sets the
    pressure; the ideal gas law then fixes the temperature:

    $$PV = nRT$$

    - The **piston** follows the volume
    - The **particle speeds** follow the temperature
    - The curves show the four classical processes through the state

    ---
    """)

    st.sidebar.subheader("⚙️ Simulation Setup")

    gas_law = st.sidebar.selectbox(
        "Gas Law",
        ["molar", "boltzmann"],
        help="PV = nRT (moles) or PV = NkT (particle count)"
    )

    sampling = st.sidebar.selectbox(
        "Curve Sampling",
        [s.value for s in CurveSampling],
        help="How isothermal and adiabatic curves are sampled"
    )

    seed = st.sidebar.number_input(
        "Random Seed",
        min_value=0, max_value=2**31 - 1, value=0, step=1,
        help="Seed for initial velocities and particle relocation"
    )

    if st.sidebar.button("🚀 Initialize Simulation", use_container_width=True):
        try:
            sim = create_simulation(gas_law, sampling, int(seed))
        except ConfigurationError as exc:
            st.sidebar.error(f"Invalid configuration: {exc}")
            logger.error("Invalid configuration: %s", exc)
        else:
            st.session_state.simulation = sim
            st.session_state.running = False
            st.session_state.pending_cursor = None
            st.session_state.temperature_history = []
            st.session_state.work_history = []
            st.rerun()

    st.sidebar.markdown("---")

    st.sidebar.subheader("🎨 Visualization")
    st.session_state.vis_config.show_labels = st.sidebar.checkbox(
        "Show Labels",
        value=True,
        help="Axis and curve names"
    )


def run_simulation_ticks(n_ticks: int = 1):
    """Run ticks, feeding a pending click as a held-button cursor."""
    sim = st.session_state.simulation
    if sim is None:
        return

    for _ in range(n_ticks):
        cursor = st.session_state.pending_cursor
        st.session_state.pending_cursor = None
        result = sim.tick(cursor, pressed=cursor is not None)

    st.session_state.temperature_history.append(result.gas.temperature)
    st.session_state.work_history.append(result.readout.work)

    max_history = 500
    if len(st.session_state.temperature_history) > max_history:
        st.session_state.temperature_history = st.session_state.temperature_history[-max_history:]
        st.session_state.work_history = st.session_state.work_history[-max_history:]


def render_main_content():
    """Render the main simulation content."""
    sim = st.session_state.simulation

    if sim is None:
        st.title("🧪 Ideal Gas PV Canvas")
        st.markdown("""
        ## Welcome to the Ideal Gas PV Canvas!

        Drag the state of an ideal gas around its **pressure-volume diagram**
        and watch a box of particles respond.

        ### 🎯 Key Features:
        - **Piston coupling** - the box width follows the volume
        - **Temperature coupling** - particle kinetic energy follows PV
        - **Process curves** - isobaric, isochoric, isothermal, adiabatic
        - **Energy accounting** - work W and heat Q from the first law

        ### 🚀 Getting Started:
        1. Use the sidebar to configure the gas
        2. Click **Initialize Simulation**
        3. Click on the PV plot to move the state
        4. Follow a curve to see each process in action

        ---
        *👈 Use the sidebar to begin!*
        """)
        return

    col1, col2 = st.columns([3, 1])

    with col1:
        btn_col1, btn_col2, btn_col3, btn_col4 = st.columns(4)

        with btn_col1:
            run_label = "▶️ Run" if not st.session_state.running else "⏸️ Pause"
            if st.button(run_label, use_container_width=True, key="run_pause_btn"):
                st.session_state.running = not st.session_state.running
                st.rerun()

        with btn_col2:
            if st.button("⏭️ Step (x10)", use_container_width=True):
                run_simulation_ticks(10)

        with btn_col3:
            if st.button("🔄 Reset", use_container_width=True):
                st.session_state.simulation = None
                st.session_state.running = False
                st.rerun()

        with btn_col4:
            st.metric("Ticks", sim.state.step)

        if st.session_state.running:
            run_simulation_ticks(2)

        vis_config = st.session_state.vis_config
        img_bytes = render_frame_png(sim, vis_config)
        pil_image = Image.open(io.BytesIO(img_bytes))

        st.markdown("**🖱️ Click on the PV plot to move the state of the gas**")
        coords = streamlit_image_coordinates(pil_image, key="pv_canvas")

        if coords is not None:
            click_id = f"{coords['x']}_{coords['y']}"
            if st.session_state.last_click_id != click_id:
                st.session_state.last_click_id = click_id

                # Displayed size can differ from the rendered size
                width = coords.get("width", pil_image.width)
                height = coords.get("height", pil_image.height)
                cursor = pixel_to_world(coords["x"], coords["y"], (width, height), vis_config)
                st.session_state.pending_cursor = cursor

                if not st.session_state.running:
                    run_simulation_ticks(1)
                st.rerun()

    with col2:
        st.subheader("Thermodynamics")

        result = sim.last_result
        gas = result.gas if result is not None else sim.model.gas_state(
            sim.state.handle_x, sim.state.handle_y
        )

        st.markdown(
            f'<div class="readout">{result.readout.text if result else ""}</div>',
            unsafe_allow_html=True
        )

        met1, met2 = st.columns(2)
        with met1:
            st.metric("Volume", f"{gas.volume:.2f} m³")
        with met2:
            st.metric("Pressure", f"{gas.pressure:.2f} Pa")

        met3, met4 = st.columns(2)
        with met3:
            st.metric("Temperature", f"{gas.temperature:.1f} K")
        with met4:
            st.metric("U", f"{gas.internal_energy:.0f} J")

        st.metric("Particle KE", f"{sim.kinetic_energy:.0f} J")
        st.metric("γ", f"{sim.model.gamma:.3f}")

        if len(st.session_state.work_history) > 1:
            st.markdown("### Work History")
            st.line_chart(st.session_state.work_history, height=180)

        if len(st.session_state.temperature_history) > 1:
            st.markdown("### Temperature History")
            st.line_chart(st.session_state.temperature_history, height=180)

        st.markdown(
            '<p class="info-text">W is the work done on the gas and '
            'Q = U + W, with U measured from zero.</p>',
            unsafe_allow_html=True
        )

    if st.session_state.running:
        time.sleep(0.03)
        st.rerun()


def main():
    """Main application entry point."""
    initialize_session_state()
    render_sidebar()
    render_main_content()


if __name__ == "__main__":
    main()

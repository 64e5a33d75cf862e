#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Ideal Gas PV Canvas - Command Line Interface
================================================================================

Project:        Ideal Gas PV Canvas
Module:         main.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

Command line interface for running and checking the PV demonstration
without the Streamlit front-end.
"""

import argparse
import logging
import time

import matplotlib.pyplot as plt

from pv_canvas.curves import CurveSampling
from pv_canvas.logging_config import setup_logging
from pv_canvas.simulation import (
    create_demo_simulation, drag_path, rectangular_cycle
)
from pv_canvas.visualization import (
    VisualizationConfig, create_animation, render_frame
)


def run_cycle_demo(
    gas_law: str = "molar",
    sampling: str = CurveSampling.AXIS_SPLIT.value,
    seed: int = 0,
    laps: int = 1,
    step: float = 4.0
):
    """
    Drag the handle around a rectangular cycle and check the work account.

    Args:
        gas_law: "molar" or "boltzmann"
        sampling: Curve sampling strategy
        seed: Random seed
        laps: Number of laps around the cycle
        step: Cursor travel per tick (world units)
    """
    print("=" * 60)
    print("Ideal Gas PV Canvas - Rectangular Cycle")
    print("=" * 60)

    sim = create_demo_simulation(gas_law=gas_law, seed=seed, sampling=sampling)
    plot = sim.config.plot
    half_width = plot.width / 4
    half_height = plot.height / 4

    waypoints = rectangular_cycle(plot.position, half_width, half_height)

    # Walk from the initial state to the start of the cycle
    approach = drag_path([plot.position, waypoints[0]], step)
    result = sim.run(len(approach), approach)
    work_start = sim.state.work.total
    print(f"\nStart of cycle:\n{result.readout.text}")

    lap = drag_path(waypoints, step)[1:]
    t_start = time.time()
    for n in range(laps):
        result = sim.run(len(lap), lap)
        print(f"\nAfter lap {n + 1} ({sim.state.step} ticks):\n{result.readout.text}")
    t_end = time.time()

    model = sim.model
    x0, y0 = waypoints[0]
    x1, y1 = waypoints[2]
    area = (model.volume(x1) - model.volume(x0)) * (model.pressure(y1) - model.pressure(y0))
    net_work = sim.state.work.total - work_start

    print(f"\nTicks per second: {len(lap) * laps / (t_end - t_start):.1f}")
    print(f"Enclosed area per lap:  {area:.2f} J")
    print(f"Net work on the gas:    {net_work:.2f} J")
    print(f"Expected:               {-area * laps:.2f} J")

    relative_error = abs(net_work + area * laps) / (area * laps)
    if relative_error < 1e-9:
        print("  ✓ Work account matches the enclosed area")
    else:
        print(f"  ⚠ Work account off by {relative_error * 100:.2e}%")

    kinetic = sim.kinetic_energy
    print(f"\nKinetic energy:   {kinetic:.2f} J")
    print(f"Internal energy:  {result.gas.internal_energy:.2f} J")


def render_snapshot(
    path: str,
    gas_law: str = "molar",
    sampling: str = CurveSampling.AXIS_SPLIT.value,
    seed: int = 0,
    n_ticks: int = 120
):
    """Run a few ticks and save one frame as an image."""
    sim = create_demo_simulation(gas_law=gas_law, seed=seed, sampling=sampling)
    plot = sim.config.plot

    # Drag the handle to the upper left quadrant
    target = (plot.position[0] - plot.width / 4, plot.position[1] + plot.height / 4)
    cursor_path = drag_path([plot.position, target])
    sim.run(n_ticks, cursor_path)

    config = VisualizationConfig()
    fig = render_frame(sim, config)
    fig.savefig(path, dpi=config.dpi, facecolor=fig.get_facecolor())
    plt.close(fig)
    print(f"Frame saved to {path}")


def run_animation(
    path: str,
    gas_law: str = "molar",
    sampling: str = CurveSampling.AXIS_SPLIT.value,
    seed: int = 0,
    laps: int = 1
):
    """
    Animate the handle going around a rectangular cycle.

    Args:
        path: Output GIF path
        gas_law: "molar" or "boltzmann"
        sampling: Curve sampling strategy
        seed: Random seed
        laps: Number of laps
    """
    print("=" * 60)
    print("Ideal Gas PV Canvas - Animation")
    print("=" * 60)

    sim = create_demo_simulation(gas_law=gas_law, seed=seed, sampling=sampling)
    plot = sim.config.plot
    waypoints = rectangular_cycle(plot.position, plot.width / 4, plot.height / 4)
    cursor_path = drag_path([plot.position] + waypoints * laps, step=8.0)

    print(f"Creating animation with {len(cursor_path)} frames...")
    ani = create_animation(sim, cursor_path, n_frames=len(cursor_path))

    print("Saving animation (this may take a while)...")
    ani.save(path, writer='pillow', fps=30)
    print(f"Animation saved to {path}")


def main():
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Ideal Gas PV Canvas - Interactive PV Diagram",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --cycle                 Run a rectangular PV cycle
  python main.py --render frame.png      Save a single frame
  python main.py --animate cycle.gif     Create animation
  python main.py --app                   Launch Streamlit app
        """
    )

    parser.add_argument('--cycle', action='store_true',
                        help='Run a rectangular PV cycle and check the work')
    parser.add_argument('--render', metavar='PATH',
                        help='Save a single frame to PATH')
    parser.add_argument('--animate', metavar='PATH',
                        help='Save an animated GIF to PATH')
    parser.add_argument('--app', action='store_true',
                        help='Launch Streamlit web app')
    parser.add_argument('--gas-law', choices=['molar', 'boltzmann'], default='molar',
                        help='Temperature/energy formulation (default: molar)')
    parser.add_argument('--sampling', choices=[s.value for s in CurveSampling],
                        default=CurveSampling.AXIS_SPLIT.value,
                        help='Process curve sampling (default: axis-split)')
    parser.add_argument('--seed', type=int, default=0,
                        help='Random seed (default: 0)')
    parser.add_argument('--laps', type=int, default=1,
                        help='Laps around the cycle (default: 1)')
    parser.add_argument('--ticks', '-t', type=int, default=120,
                        help='Ticks before rendering a frame (default: 120)')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: WARNING)')

    args = parser.parse_args()
    setup_logging(getattr(logging, args.log_level))

    if args.cycle:
        run_cycle_demo(gas_law=args.gas_law, sampling=args.sampling,
                       seed=args.seed, laps=args.laps)
    elif args.render:
        render_snapshot(args.render, gas_law=args.gas_law, sampling=args.sampling,
                        seed=args.seed, n_ticks=args.ticks)
    elif args.animate:
        run_animation(args.animate, gas_law=args.gas_law, sampling=args.sampling,
                      seed=args.seed, laps=args.laps)
    elif args.app:
        import subprocess
        print("Launching Streamlit app...")
        subprocess.run(['streamlit', 'run', 'app.py'])
    else:
        parser.print_help()
        print("\nNo action specified. Run with --cycle, --render, --animate, or --app")


if __name__ == "__main__":
    main()

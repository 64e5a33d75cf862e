#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Real-Time Visualization Module
================================================================================

Project:        Ideal Gas PV Canvas
Module:         visualization.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

This module draws one frame of the demonstration with Matplotlib:
- The gas box: walls, piston and particles
- The PV plot with its draggable handle
- Isobaric, isochoric, isothermal and adiabatic curves through the handle
- The T / W / Q readout above the box

Frames are drawn in world coordinates on an axes that fills the whole figure,
so a pixel of the exported PNG maps linearly to a world position (see
pixel_to_world). The Streamlit app relies on this to turn clicks into cursor
input.
"""

import io
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple

import matplotlib.animation as animation
import matplotlib.pyplot as plt
from matplotlib.collections import EllipseCollection
from matplotlib.patches import Circle, Rectangle

from .curves import CurveKind, generate_curves
from .simulation import PVSimulation, TickResult
from .thermodynamics import Readout


Color = Tuple[float, float, float]


def _default_curve_colors() -> Dict[str, str]:
    return {
        CurveKind.ISOBARIC.value: "#052e16",     # Dark green
        CurveKind.ISOCHORIC.value: "#172554",    # Dark blue
        CurveKind.ISOTHERMAL.value: "#450a0a",   # Dark red
        CurveKind.ADIABATIC.value: "#3b0764",    # Dark purple
    }


@dataclass
class VisualizationConfig:
    """Configuration for visualization."""
    view_x: Tuple[float, float] = (-560.0, 600.0)
    view_y: Tuple[float, float] = (-370.0, 340.0)
    units_per_inch: float = 100.0
    dpi: int = 100

    background_color: Color = (0.05, 0.05, 0.1)
    plot_color: Color = (0.1, 0.1, 0.1)
    wall_color: Color = (0.7, 0.7, 0.8)
    particle_color: Color = (0.29, 0.33, 0.64)
    handle_color: Color = (0.2, 0.2, 0.2)
    text_color: str = "antiquewhite"
    curve_colors: Dict[str, str] = field(default_factory=_default_curve_colors)

    curve_width: float = 3.0
    font_size: float = 16.0
    label_spacing: float = 40.0   # world units between curve names
    text_offset: float = 10.0     # world units
    show_labels: bool = True

    @property
    def figsize(self) -> Tuple[float, float]:
        return (
            (self.view_x[1] - self.view_x[0]) / self.units_per_inch,
            (self.view_y[1] - self.view_y[0]) / self.units_per_inch
        )

    @property
    def image_size(self) -> Tuple[int, int]:
        """(width, height) in pixels of an exported frame."""
        width, height = self.figsize
        return (int(round(width * self.dpi)), int(round(height * self.dpi)))


def pixel_to_world(
    px: float,
    py: float,
    image_size: Tuple[int, int],
    config: Optional[VisualizationConfig] = None
) -> Tuple[float, float]:
    """
    Convert a pixel position in a rendered frame to world coordinates.

    Args:
        px: Pixel column (0 at the left edge)
        py: Pixel row (0 at the top edge)
        image_size: (width, height) of the displayed image in pixels
        config: Visualization configuration the frame was drawn with

    Returns:
        (x, y) world coordinates
    """
    if config is None:
        config = VisualizationConfig()

    width, height = image_size
    x0, x1 = config.view_x
    y0, y1 = config.view_y
    x = x0 + (px / width) * (x1 - x0)
    y = y1 - (py / height) * (y1 - y0)  # Flip Y
    return (x, y)


def _frame_result(sim: PVSimulation) -> TickResult:
    """The latest tick, or an equivalent view of a freshly initialized state."""
    if sim.last_result is not None:
        return sim.last_result

    state = sim.state
    gas = sim.model.gas_state(state.handle_x, state.handle_y)
    extent = sim.boundary.update(state.handle_x)
    return TickResult(
        gas=gas,
        extent=extent,
        colliders=tuple(sim.boundary.colliders(extent)),
        curves=generate_curves(sim.model, state.handle_x, state.handle_y, sim.sampling),
        readout=Readout.from_values(gas.temperature, state.work.total, gas.internal_energy),
        relocated=0,
        energy_scale=None,
        moved=False
    )


def render_frame(
    sim: PVSimulation,
    config: Optional[VisualizationConfig] = None,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Render the box and the PV plot for the simulation's current state.

    Args:
        sim: Initialized simulation
        config: Visualization configuration
        ax: Optional existing axes to draw on

    Returns:
        Matplotlib figure
    """
    if config is None:
        config = VisualizationConfig()
    if sim.state is None:
        raise RuntimeError("Simulation not initialized")

    state = sim.state
    result = _frame_result(sim)
    plot = sim.config.plot
    box = sim.config.box

    # Full-figure axes so pixels map linearly to world coordinates
    if ax is None:
        fig = plt.figure(figsize=config.figsize, dpi=config.dpi)
        ax = fig.add_axes([0, 0, 1, 1])
    else:
        fig = ax.figure

    ax.clear()
    ax.set_facecolor(config.background_color)
    fig.patch.set_facecolor(config.background_color)

    # PV plot
    ax.add_patch(Rectangle(
        (plot.left, plot.bottom), plot.width, plot.height,
        facecolor=config.plot_color, edgecolor='none', zorder=0
    ))

    for kind, curve in result.curves.items():
        color = config.curve_colors[kind.value]
        for branch in curve.branches:
            ax.plot(branch[:, 0], branch[:, 1], color=color,
                    linewidth=config.curve_width, solid_capstyle='round', zorder=1)

    ax.add_patch(Circle(
        (state.handle_x, state.handle_y), plot.handle_radius,
        facecolor=config.handle_color, edgecolor='none', zorder=3
    ))

    # Gas box
    for wall in result.colliders:
        cx, cy = wall.position
        hx, hy = wall.half_extents
        ax.add_patch(Rectangle(
            (cx - hx, cy - hy), 2 * hx, 2 * hy,
            facecolor=config.wall_color, edgecolor='none', zorder=2
        ))

    if state.n_particles > 0:
        diameter = 2 * sim.config.particles.radius
        ax.add_collection(EllipseCollection(
            widths=diameter, heights=diameter, angles=0.0, units='xy',
            offsets=state.positions.copy(), offset_transform=ax.transData,
            facecolors=[config.particle_color], edgecolors='none', zorder=2
        ))

    # Text
    text_style = dict(fontsize=config.font_size, color=config.text_color)
    ax.text(box.position[0], box.top + config.text_offset, result.readout.text,
            ha='center', va='bottom', **text_style)

    if config.show_labels:
        ax.text(plot.left - config.text_offset, plot.position[1], "P",
                ha='right', va='center', **text_style)
        ax.text(plot.position[0], plot.bottom - config.text_offset, "V",
                ha='center', va='top', **text_style)

        # Curve names stacked beside the plot, in curve colour
        offsets = {
            CurveKind.ADIABATIC: -1.5,
            CurveKind.ISOBARIC: -0.5,
            CurveKind.ISOCHORIC: 0.5,
            CurveKind.ISOTHERMAL: 1.5,
        }
        for kind, offset in offsets.items():
            ax.text(plot.right + config.text_offset,
                    plot.position[1] + offset * config.label_spacing,
                    kind.value, ha='left', va='center',
                    fontsize=config.font_size, color=config.curve_colors[kind.value])

    ax.set_xlim(*config.view_x)
    ax.set_ylim(*config.view_y)
    ax.set_aspect('equal')
    ax.axis('off')

    return fig


def render_frame_png(
    sim: PVSimulation,
    config: Optional[VisualizationConfig] = None
) -> bytes:
    """
    Render a frame and return PNG bytes for Streamlit.

    The image is exactly config.image_size pixels, with no padding, so that
    pixel_to_world can invert it.
    """
    if config is None:
        config = VisualizationConfig()

    fig = render_frame(sim, config)

    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=config.dpi,
                facecolor=fig.get_facecolor(), edgecolor='none')
    plt.close(fig)
    buf.seek(0)

    return buf.getvalue()


def create_animation(
    sim: PVSimulation,
    cursor_path: Iterable[Optional[Tuple[float, float]]],
    n_frames: int,
    config: Optional[VisualizationConfig] = None,
    fps: int = 30
) -> animation.FuncAnimation:
    """
    Create an animation that drags the handle along a cursor path.

    Each frame runs one simulation tick. Frames past the end of the path
    run without input.

    Args:
        sim: Initialized simulation
        cursor_path: World-space cursor positions, one per frame
        n_frames: Number of animation frames
        config: Visualization configuration
        fps: Frames per second

    Returns:
        Matplotlib animation
    """
    if config is None:
        config = VisualizationConfig()

    fig = plt.figure(figsize=config.figsize, dpi=config.dpi)
    ax = fig.add_axes([0, 0, 1, 1])
    path = iter(cursor_path)

    def update(frame):
        cursor = next(path, None)
        sim.tick(cursor, pressed=cursor is not None)
        render_frame(sim, config, ax=ax)
        return ax,

    ani = animation.FuncAnimation(
        fig, update, frames=n_frames,
        interval=1000 / fps, blit=False
    )

    return ani

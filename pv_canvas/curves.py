#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Process Curves on the PV Plot
================================================================================

Project:        Ideal Gas PV Canvas
Module:         curves.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

Samples the four classical processes through the current state point:

    Isobaric:    P = P0
    Isochoric:   V = V0
    Isothermal:  P V   = P0 V0
    Adiabatic:   P V^γ = P0 V0^γ

Isothermal and adiabatic curves are both polytropes, P V^k = C, with k = 1
and k = γ respectively, so they share one sampler.

Each curve is returned as two branches that start exactly at the state point
and run towards the plot edges. Samples are spaced one world unit apart along
the sampled axis, and no sample ever lies outside the plot rectangle.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, Tuple

import numpy as np

if TYPE_CHECKING:
    from .thermodynamics import StateModel


class CurveKind(Enum):
    """The four processes drawn on the PV plot."""
    ISOBARIC = "isobaric"
    ISOCHORIC = "isochoric"
    ISOTHERMAL = "isothermal"
    ADIABATIC = "adiabatic"


class CurveSampling(Enum):
    """
    How polytropic curves are sampled.

    AXIS_SPLIT: one branch steps along y (solving for V), the other along x
                (solving for P). Both stay inside the plot by construction.
    X_SWEEP:    both branches step along x and stop once the implied pressure
                leaves the plot's pressure range.
    """
    AXIS_SPLIT = "axis-split"
    X_SWEEP = "x-sweep"


@dataclass(frozen=True)
class ProcessCurve:
    """One process curve as a tuple of (M, 2) point arrays."""
    kind: CurveKind
    branches: Tuple[np.ndarray, ...]

    @property
    def n_points(self) -> int:
        return sum(len(branch) for branch in self.branches)


def unit_steps(start: float, stop: float) -> np.ndarray:
    """
    Samples from start to stop, one unit apart, both ends included.

    The final interval is shorter than one unit unless |stop - start| is a
    whole number.
    """
    direction = 1.0 if stop >= start else -1.0
    n_steps = int(np.floor(abs(stop - start)))
    samples = start + direction * np.arange(n_steps + 1, dtype=float)
    if samples[-1] != stop:
        samples = np.append(samples, stop)
    return samples


def isobaric_curve(model: "StateModel", handle_x: float, handle_y: float) -> ProcessCurve:
    plot = model.plot
    branches = []
    for edge in (plot.left, plot.right):
        xs = unit_steps(handle_x, edge)
        branches.append(np.column_stack([xs, np.full_like(xs, handle_y)]))
    return ProcessCurve(CurveKind.ISOBARIC, tuple(branches))


def isochoric_curve(model: "StateModel", handle_x: float, handle_y: float) -> ProcessCurve:
    plot = model.plot
    branches = []
    for edge in (plot.bottom, plot.top):
        ys = unit_steps(handle_y, edge)
        branches.append(np.column_stack([np.full_like(ys, handle_x), ys]))
    return ProcessCurve(CurveKind.ISOCHORIC, tuple(branches))


def _polytrope_by_axes(
    model: "StateModel",
    handle_x: float,
    handle_y: float,
    exponent: float,
    constant: float
) -> Tuple[np.ndarray, np.ndarray]:
    plot = model.plot

    # Towards higher pressure and smaller volume: step along y
    ys = unit_steps(handle_y, plot.top)
    volumes = (constant / model.pressure(ys)) ** (1.0 / exponent)
    upper = np.column_stack([model.x_from_volume(volumes), ys])

    # Towards larger volume and lower pressure: step along x
    xs = unit_steps(handle_x, plot.right)
    pressures = constant / model.volume(xs) ** exponent
    lower = np.column_stack([xs, model.y_from_pressure(pressures)])

    upper[0] = (handle_x, handle_y)
    lower[0] = (handle_x, handle_y)
    return upper, lower


def _polytrope_by_sweep(
    model: "StateModel",
    handle_x: float,
    handle_y: float,
    exponent: float,
    constant: float
) -> Tuple[np.ndarray, np.ndarray]:
    plot = model.plot
    p_min = model.pressure(plot.bottom)
    p_max = model.pressure(plot.top)

    branches = []
    for edge in (plot.left, plot.right):
        xs = unit_steps(handle_x, edge)
        volumes = model.volume(xs)
        with np.errstate(divide="ignore"):
            pressures = constant / volumes ** exponent

        outside = np.flatnonzero((pressures < p_min) | (pressures > p_max))
        if len(outside) > 0:
            stop = outside[0]
            # Close the branch on the plot boundary rather than past it
            bound = p_max if pressures[stop] > p_max else p_min
            crossing_x = model.x_from_volume((constant / bound) ** (1.0 / exponent))
            xs = np.append(xs[:stop], crossing_x)
            pressures = np.append(pressures[:stop], bound)

        branch = np.column_stack([xs, model.y_from_pressure(pressures)])
        branch[0] = (handle_x, handle_y)
        branches.append(branch)

    return branches[0], branches[1]


def polytropic_curve(
    model: "StateModel",
    handle_x: float,
    handle_y: float,
    exponent: float,
    kind: CurveKind,
    sampling: CurveSampling = CurveSampling.AXIS_SPLIT
) -> ProcessCurve:
    """
    Sample P V^exponent = P0 V0^exponent through the handle.

    Args:
        model: State model providing the screen <-> state maps
        handle_x: Handle x coordinate (world units)
        handle_y: Handle y coordinate (world units)
        exponent: 1 for an isotherm, γ for an adiabat
        kind: Curve kind recorded on the result
        sampling: Sampling strategy

    Returns:
        ProcessCurve with two branches starting at the handle
    """
    constant = model.pressure(handle_y) * model.volume(handle_x) ** exponent

    if sampling is CurveSampling.X_SWEEP:
        branches = _polytrope_by_sweep(model, handle_x, handle_y, exponent, constant)
    else:
        branches = _polytrope_by_axes(model, handle_x, handle_y, exponent, constant)

    return ProcessCurve(kind, branches)


def isothermal_curve(
    model: "StateModel",
    handle_x: float,
    handle_y: float,
    sampling: CurveSampling = CurveSampling.AXIS_SPLIT
) -> ProcessCurve:
    return polytropic_curve(model, handle_x, handle_y, 1.0, CurveKind.ISOTHERMAL, sampling)


def adiabatic_curve(
    model: "StateModel",
    handle_x: float,
    handle_y: float,
    sampling: CurveSampling = CurveSampling.AXIS_SPLIT
) -> ProcessCurve:
    return polytropic_curve(
        model, handle_x, handle_y, model.gamma, CurveKind.ADIABATIC, sampling
    )


def generate_curves(
    model: "StateModel",
    handle_x: float,
    handle_y: float,
    sampling: CurveSampling = CurveSampling.AXIS_SPLIT
) -> Dict[CurveKind, ProcessCurve]:
    """Fresh isobaric, isochoric, isothermal and adiabatic curves."""
    return {
        CurveKind.ISOBARIC: isobaric_curve(model, handle_x, handle_y),
        CurveKind.ISOCHORIC: isochoric_curve(model, handle_x, handle_y),
        CurveKind.ISOTHERMAL: isothermal_curve(model, handle_x, handle_y, sampling),
        CurveKind.ADIABATIC: adiabatic_curve(model, handle_x, handle_y, sampling),
    }

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Process Curve Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
License:        MIT License
================================================================================
"""

import numpy as np
import pytest
from pv_canvas.config import PlotGeometry
from pv_canvas.curves import (
    CurveKind,
    CurveSampling,
    adiabatic_curve,
    generate_curves,
    isobaric_curve,
    isochoric_curve,
    isothermal_curve,
    unit_steps
)
from pv_canvas.thermodynamics import MolarGasLaw, StateModel


HANDLES = [(0.0, -190.0), (-300.0, -100.0), (250.0, -280.0), (-388.0, -81.0)]
SAMPLINGS = list(CurveSampling)


@pytest.fixture
def model():
    return StateModel(PlotGeometry(), 10.0, 10.0, MolarGasLaw())


def all_points(curve):
    return np.vstack(curve.branches)


def assert_inside_plot(points, plot):
    tol = 1e-9
    assert np.all(points[:, 0] >= plot.left - tol)
    assert np.all(points[:, 0] <= plot.right + tol)
    assert np.all(points[:, 1] >= plot.bottom - tol)
    assert np.all(points[:, 1] <= plot.top + tol)


class TestUnitSteps:
    """Tests for the unit-spaced sampler."""

    def test_ascending(self):
        assert np.allclose(unit_steps(0.0, 3.0), [0.0, 1.0, 2.0, 3.0])

    def test_fractional_end(self):
        """The stop value is always included."""
        assert np.allclose(unit_steps(0.0, 2.5), [0.0, 1.0, 2.0, 2.5])

    def test_descending(self):
        assert np.allclose(unit_steps(1.5, -1.0), [1.5, 0.5, -0.5, -1.0])

    def test_single_point(self):
        assert np.allclose(unit_steps(4.0, 4.0), [4.0])


class TestIsobaricIsochoric:
    """Tests for the straight-line processes."""

    def test_isobaric_spans_plot_width(self, model):
        curve = isobaric_curve(model, 0.0, -190.0)
        assert curve.kind is CurveKind.ISOBARIC
        left, right = curve.branches
        assert np.all(all_points(curve)[:, 1] == -190.0)
        assert left[-1, 0] == model.plot.left
        assert right[-1, 0] == model.plot.right

    def test_isochoric_spans_plot_height(self, model):
        curve = isochoric_curve(model, 10.0, -190.0)
        assert curve.kind is CurveKind.ISOCHORIC
        down, up = curve.branches
        assert np.all(all_points(curve)[:, 0] == 10.0)
        assert down[-1, 1] == model.plot.bottom
        assert up[-1, 1] == model.plot.top

    def test_unit_spacing(self, model):
        curve = isobaric_curve(model, 0.5, -190.0)
        for branch in curve.branches:
            assert np.all(np.abs(np.diff(branch[:, 0])) <= 1.0 + 1e-12)


class TestPolytropes:
    """Tests for isothermal and adiabatic curves."""

    @pytest.mark.parametrize("sampling", SAMPLINGS)
    @pytest.mark.parametrize("handle", HANDLES)
    def test_isothermal_invariant(self, model, handle, sampling):
        """P V is constant along the isotherm."""
        hx, hy = handle
        curve = isothermal_curve(model, hx, hy, sampling)
        points = all_points(curve)
        pv = model.pressure(points[:, 1]) * model.volume(points[:, 0])
        expected = model.pressure(hy) * model.volume(hx)
        assert np.allclose(pv, expected, rtol=1e-9)

    @pytest.mark.parametrize("sampling", SAMPLINGS)
    @pytest.mark.parametrize("handle", HANDLES)
    def test_adiabatic_invariant(self, model, handle, sampling):
        """P V^γ is constant along the adiabat."""
        hx, hy = handle
        gamma = model.gamma
        curve = adiabatic_curve(model, hx, hy, sampling)
        points = all_points(curve)
        pv_gamma = model.pressure(points[:, 1]) * model.volume(points[:, 0]) ** gamma
        expected = model.pressure(hy) * model.volume(hx) ** gamma
        assert np.allclose(pv_gamma, expected, rtol=1e-9)

    @pytest.mark.parametrize("sampling", SAMPLINGS)
    @pytest.mark.parametrize("handle", HANDLES)
    def test_curves_stay_inside_plot(self, model, handle, sampling):
        hx, hy = handle
        for curve in generate_curves(model, hx, hy, sampling).values():
            assert_inside_plot(all_points(curve), model.plot)

    @pytest.mark.parametrize("sampling", SAMPLINGS)
    def test_branches_start_at_handle(self, model, sampling):
        for curve in generate_curves(model, -120.0, -150.0, sampling).values():
            assert len(curve.branches) == 2
            for branch in curve.branches:
                assert tuple(branch[0]) == (-120.0, -150.0)

    def test_adiabat_steeper_than_isotherm(self, model):
        """At larger volume the adiabat lies below the isotherm."""
        iso = isothermal_curve(model, 0.0, -190.0).branches[1]
        adi = adiabatic_curve(model, 0.0, -190.0).branches[1]
        assert adi[-1, 0] == iso[-1, 0] == model.plot.right
        assert adi[-1, 1] < iso[-1, 1]

    def test_axis_split_branches(self, model):
        """One branch rises to the plot top, the other runs to the right edge."""
        upper, lower = isothermal_curve(model, 0.0, -190.0, CurveSampling.AXIS_SPLIT).branches
        assert upper[-1, 1] == model.plot.top
        assert np.all(np.diff(upper[:, 1]) > 0)
        assert lower[-1, 0] == model.plot.right
        assert np.all(np.diff(lower[:, 0]) > 0)

    def test_sweep_closes_on_boundary(self, model):
        """The left branch stops exactly where P reaches the plot top."""
        left, right = isothermal_curve(model, 0.0, -190.0, CurveSampling.X_SWEEP).branches
        # P V = 505 meets P = 25 at V = 20.2
        assert tuple(left[-1]) == pytest.approx((model.x_from_volume(20.2), model.plot.top))
        assert right[-1, 0] == model.plot.right
        assert np.all(np.diff(left[:, 0]) <= 0)


class TestGenerateCurves:
    """Tests for the combined curve set."""

    def test_all_kinds_present(self, model):
        curves = generate_curves(model, 0.0, -190.0)
        assert set(curves) == set(CurveKind)
        for kind, curve in curves.items():
            assert curve.kind is kind
            assert curve.n_points > 2

    def test_fresh_arrays(self, model):
        """Each call returns new arrays."""
        a = generate_curves(model, 0.0, -190.0)
        b = generate_curves(model, 0.0, -190.0)
        assert a[CurveKind.ISOBARIC].branches[0] is not b[CurveKind.ISOBARIC].branches[0]

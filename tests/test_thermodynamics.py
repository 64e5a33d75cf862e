#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Thermodynamics Module Tests
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
from pv_canvas.thermodynamics import (
    BoltzmannGasLaw,
    GasState,
    MolarGasLaw,
    Readout,
    StateModel,
    WorkAccumulator,
    round_half_away
)


@pytest.fixture
def model():
    """State model with the default plot and the molar gas law."""
    return StateModel(PlotGeometry(), 10.0, 10.0, MolarGasLaw())


class TestGasLaws:
    """Tests for the two ideal gas formulations."""

    def test_molar_heat_capacities(self):
        """Monatomic gas: Cv = 3R/2, Cp = 5R/2."""
        law = MolarGasLaw()
        assert law.heat_capacity_v == pytest.approx(1.5 * 8.314)
        assert law.heat_capacity_p == pytest.approx(2.5 * 8.314)

    def test_molar_gamma(self):
        """γ = Cp/Cv = 5/3 for f = 3."""
        assert MolarGasLaw().gamma == pytest.approx(5.0 / 3.0)

    def test_molar_temperature(self):
        """T = PV / (nR)."""
        law = MolarGasLaw(moles=2.0)
        assert law.temperature(4.0, 8.314) == pytest.approx(2.0)

    def test_molar_internal_energy(self):
        """U = n Cv T."""
        law = MolarGasLaw(moles=2.0)
        assert law.internal_energy(10.0) == pytest.approx(2.0 * 1.5 * 8.314 * 10.0)

    def test_boltzmann_gamma(self):
        """γ = (f + 2) / f."""
        assert BoltzmannGasLaw(particle_count=10).gamma == pytest.approx(5.0 / 3.0)
        assert BoltzmannGasLaw(particle_count=10, degrees_of_freedom=2).gamma == pytest.approx(2.0)

    def test_boltzmann_temperature(self):
        """T = PV / (Nk)."""
        law = BoltzmannGasLaw(particle_count=100, boltzmann_constant=0.05)
        assert law.temperature(10.0, 5.0) == pytest.approx(10.0)

    def test_internal_energy_is_three_halves_pv(self):
        """For f = 3 both laws give U = 3/2 PV."""
        pv = 40.4 * 12.5
        for law in (MolarGasLaw(), BoltzmannGasLaw(particle_count=153)):
            energy = law.internal_energy(law.temperature(40.4, 12.5))
            assert energy == pytest.approx(1.5 * pv)


class TestStateModel:
    """Tests for the handle <-> state mapping."""

    def test_state_at_plot_centre(self, model):
        """Plot centre of the default geometry."""
        assert model.volume(0.0) == pytest.approx(40.4)
        assert model.pressure(-190.0) == pytest.approx(12.5)
        assert model.temperature(0.0, -190.0) == pytest.approx(505.0 / 8.314)
        assert model.internal_energy(0.0, -190.0) == pytest.approx(757.5)

    def test_state_at_plot_corner(self, model):
        """V and P are zero at the plot's bottom-left corner."""
        assert model.volume(-404.0) == 0.0
        assert model.pressure(-315.0) == 0.0

    def test_round_trip_volume(self, model):
        """x_from_volume inverts volume."""
        xs = np.linspace(-388.0, 388.0, 50)
        assert np.allclose(model.x_from_volume(model.volume(xs)), xs)

    def test_round_trip_pressure(self, model):
        """y_from_pressure inverts pressure."""
        ys = np.linspace(-299.0, -81.0, 50)
        assert np.allclose(model.y_from_pressure(model.pressure(ys)), ys)

    def test_accepts_arrays(self, model):
        """Temperature is computed elementwise."""
        xs = np.array([-100.0, 0.0, 100.0])
        ys = np.full(3, -190.0)
        temps = model.temperature(xs, ys)
        assert temps.shape == (3,)
        assert np.all(np.diff(temps) > 0)

    def test_clamp_inside_unchanged(self, model):
        """Points in the handle region are not moved."""
        assert model.clamp(10.0, -200.0) == (10.0, -200.0)

    def test_clamp_to_handle_bounds(self, model):
        """Points near the plot edge are pulled in by the handle radius."""
        assert model.clamp(403.0, -66.0) == (388.0, -81.0)
        assert model.clamp(-403.0, -314.0) == (-388.0, -299.0)

    def test_clamp_idempotent(self, model):
        """Clamping twice equals clamping once."""
        rng = np.random.default_rng(7)
        for x, y in rng.uniform(-600.0, 600.0, size=(20, 2)):
            once = model.clamp(x, y)
            assert model.clamp(*once) == once

    def test_contains_is_strict(self, model):
        """The plot edge itself is outside."""
        assert model.contains(0.0, -190.0)
        assert not model.contains(-404.0, -190.0)
        assert not model.contains(0.0, -65.0)
        assert not model.contains(0.0, 100.0)

    def test_gas_state(self, model):
        """gas_state bundles V, P, T and U as floats."""
        state = model.gas_state(0.0, -190.0)
        assert isinstance(state, GasState)
        assert state.volume == pytest.approx(40.4)
        assert state.pressure == pytest.approx(12.5)
        assert state.internal_energy == pytest.approx(757.5)

    def test_gamma_from_gas_law(self, model):
        assert model.gamma == pytest.approx(5.0 / 3.0)


class TestWorkAccumulator:
    """Tests for the trapezoidal work account."""

    def test_starts_at_zero(self):
        assert WorkAccumulator().total == 0.0

    def test_compression_scenario(self):
        """V 5 -> 4 at P = 3 adds 3 J of work on the gas."""
        work = WorkAccumulator()
        delta = work.update(3.0, 3.0, 5.0, 4.0)
        assert delta == pytest.approx(3.0)
        assert work.total == pytest.approx(3.0)

    def test_expansion_is_negative(self):
        """The gas does work when it expands."""
        work = WorkAccumulator()
        work.update(3.0, 3.0, 4.0, 5.0)
        assert work.total == pytest.approx(-3.0)

    def test_isochoric_move_adds_nothing(self):
        """No volume change, no work."""
        work = WorkAccumulator()
        assert work.update(2.0, 6.0, 5.0, 5.0) == 0.0

    def test_no_move_is_noop(self):
        work = WorkAccumulator(total=7.0)
        assert work.update(3.0, 3.0, 5.0, 5.0) == 0.0
        assert work.total == 7.0

    def test_trapezoid(self):
        """Pressure changing along the move uses its mean."""
        work = WorkAccumulator()
        work.update(2.0, 4.0, 10.0, 8.0)
        assert work.total == pytest.approx(6.0)

    def test_reset(self):
        work = WorkAccumulator()
        work.update(3.0, 3.0, 5.0, 4.0)
        work.reset()
        assert work.total == 0.0


class TestReadout:
    """Tests for the T/W/Q readout."""

    def test_round_half_away(self):
        assert round_half_away(2.5) == 3.0
        assert round_half_away(-2.5) == -3.0
        assert round_half_away(2.4) == 2.0
        assert round_half_away(-0.4) == 0.0

    def test_heat_from_first_law(self):
        """Q = U + W."""
        readout = Readout.from_values(60.0, -20.0, 750.0)
        assert readout.heat == pytest.approx(730.0)

    def test_heat_follows_work_on_gas(self):
        """Compressing the gas raises W and so raises Q at the same U."""
        work = WorkAccumulator()
        work.update(3.0, 3.0, 5.0, 4.0)
        before = Readout.from_values(60.0, 0.0, 750.0)
        after = Readout.from_values(60.0, work.total, 750.0)
        assert after.heat - before.heat == pytest.approx(3.0)

    def test_text_format(self):
        readout = Readout.from_values(60.74, 0.0, 757.5)
        assert readout.text == "T = 61 K\nW = 0 J\nQ = 758 J"

    def test_no_negative_zero(self):
        """Small negative values print as 0, not -0."""
        readout = Readout(temperature=0.2, work=-0.3, heat=-0.1)
        assert readout.text == "T = 0 K\nW = 0 J\nQ = 0 J"

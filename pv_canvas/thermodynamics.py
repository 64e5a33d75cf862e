#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Ideal Gas Thermodynamics
================================================================================

Project:        Ideal Gas PV Canvas
Module:         thermodynamics.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

This module maps the handle on the PV plot to the state of the gas:

    V = (x - plot_left) / volume_scale
    P = (y - plot_bottom) / pressure_scale

Temperature and internal energy follow from the ideal gas law. Two
formulations are available, and a run uses exactly one of them:

    Molar:      P V = n R T        U = (f/2) n R T
    Boltzmann:  P V = N k T        U = (f/2) N k T

where f is the number of degrees of freedom (3 for a monatomic gas, which
gives the heat capacity ratio γ = Cp/Cv = 5/3).

It also holds the running work account and the T/W/Q readout.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Tuple, Union

import numpy as np

if TYPE_CHECKING:
    from .config import PlotGeometry


ArrayLike = Union[float, np.ndarray]


class GasLawKind(Enum):
    """Available temperature/energy formulations."""
    MOLAR = "molar"
    BOLTZMANN = "boltzmann"


@dataclass(frozen=True)
class MolarGasLaw:
    """Ideal gas of n moles: P V = n R T."""
    moles: float = 1.0
    gas_constant: float = 8.314
    degrees_of_freedom: int = 3

    @property
    def heat_capacity_v(self) -> float:
        """Molar heat capacity at constant volume, Cv = (f/2) R."""
        return self.degrees_of_freedom / 2.0 * self.gas_constant

    @property
    def heat_capacity_p(self) -> float:
        """Molar heat capacity at constant pressure, Cp = Cv + R."""
        return self.heat_capacity_v + self.gas_constant

    @property
    def gamma(self) -> float:
        return self.heat_capacity_p / self.heat_capacity_v

    def temperature(self, volume: ArrayLike, pressure: ArrayLike) -> ArrayLike:
        return volume * pressure / (self.moles * self.gas_constant)

    def internal_energy(self, temperature: ArrayLike) -> ArrayLike:
        return self.moles * self.heat_capacity_v * temperature


@dataclass(frozen=True)
class BoltzmannGasLaw:
    """Ideal gas of N particles: P V = N k T."""
    particle_count: int
    boltzmann_constant: float = 0.055
    degrees_of_freedom: int = 3

    @property
    def gamma(self) -> float:
        return (self.degrees_of_freedom + 2.0) / self.degrees_of_freedom

    def temperature(self, volume: ArrayLike, pressure: ArrayLike) -> ArrayLike:
        return volume * pressure / (self.particle_count * self.boltzmann_constant)

    def internal_energy(self, temperature: ArrayLike) -> ArrayLike:
        return (self.degrees_of_freedom / 2.0 * self.particle_count
                * self.boltzmann_constant * temperature)


GasLaw = Union[MolarGasLaw, BoltzmannGasLaw]


@dataclass(frozen=True)
class GasState:
    """Thermodynamic state implied by one handle position."""
    volume: float
    pressure: float
    temperature: float
    internal_energy: float


class StateModel:
    """
    Conversions between handle position and (P, V, T, U).

    Holds only constants. Every method is a pure function and accepts
    scalars or numpy arrays.
    """

    def __init__(
        self,
        plot: "PlotGeometry",
        volume_scale: float,
        pressure_scale: float,
        gas_law: GasLaw
    ):
        self.plot = plot
        self.volume_scale = volume_scale
        self.pressure_scale = pressure_scale
        self.gas_law = gas_law

    @property
    def gamma(self) -> float:
        return self.gas_law.gamma

    def volume(self, x: ArrayLike) -> ArrayLike:
        return (x - self.plot.left) / self.volume_scale

    def pressure(self, y: ArrayLike) -> ArrayLike:
        return (y - self.plot.bottom) / self.pressure_scale

    def temperature(self, x: ArrayLike, y: ArrayLike) -> ArrayLike:
        return self.gas_law.temperature(self.volume(x), self.pressure(y))

    def internal_energy(self, x: ArrayLike, y: ArrayLike) -> ArrayLike:
        return self.gas_law.internal_energy(self.temperature(x, y))

    def x_from_volume(self, volume: ArrayLike) -> ArrayLike:
        return volume * self.volume_scale + self.plot.left

    def y_from_pressure(self, pressure: ArrayLike) -> ArrayLike:
        return pressure * self.pressure_scale + self.plot.bottom

    def gas_state(self, x: float, y: float) -> GasState:
        return GasState(
            volume=float(self.volume(x)),
            pressure=float(self.pressure(y)),
            temperature=float(self.temperature(x, y)),
            internal_energy=float(self.internal_energy(x, y))
        )

    def contains(self, x: float, y: float) -> bool:
        """True when (x, y) lies strictly inside the plot rectangle."""
        plot = self.plot
        return plot.left < x < plot.right and plot.bottom < y < plot.top

    def clamp(self, x: float, y: float) -> Tuple[float, float]:
        """Clamp a point into the region reachable by the handle's centre."""
        x_min, x_max, y_min, y_max = self.plot.handle_bounds
        return (min(max(x, x_min), x_max), min(max(y, y_min), y_max))


class WorkAccumulator:
    """
    Running total of work done on the gas.

    Each handle move adds the trapezoidal estimate of -∫P dV over the move:

        W += (P_old + P_new) / 2 * (V_old - V_new)

    Compression (V decreasing) adds positive work; expansion, where the gas
    does the work, subtracts it.
    """

    def __init__(self, total: float = 0.0):
        self.total = total

    def update(
        self,
        old_pressure: float,
        new_pressure: float,
        old_volume: float,
        new_volume: float
    ) -> float:
        """
        Add the work of one handle move.

        Returns:
            The increment applied to the total (0.0 when nothing moved)
        """
        if old_pressure == new_pressure and old_volume == new_volume:
            return 0.0

        delta = (old_pressure + new_pressure) * (old_volume - new_volume) / 2.0
        self.total += delta
        return delta

    def reset(self) -> None:
        self.total = 0.0


def round_half_away(value: float) -> float:
    """Round to the nearest integer, ties away from zero."""
    # + 0.0 turns -0.0 into 0.0
    return math.copysign(math.floor(abs(value) + 0.5), value) + 0.0


@dataclass(frozen=True)
class Readout:
    """Temperature, accumulated work and inferred heat for display."""
    temperature: float
    work: float
    heat: float

    @classmethod
    def from_values(cls, temperature: float, work: float, internal_energy: float) -> "Readout":
        """
        Q = U + W, with U measured from 0 and W the work done on the gas.

        Because W counts work done on the gas, Q is a bookkeeping sum for
        the display rather than the heat absorbed along the path.
        """
        return cls(temperature=temperature, work=work, heat=internal_energy + work)

    @property
    def text(self) -> str:
        return (
            f"T = {round_half_away(self.temperature):.0f} K\n"
            f"W = {round_half_away(self.work):.0f} J\n"
            f"Q = {round_half_away(self.heat):.0f} J"
        )

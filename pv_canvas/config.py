#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Demonstration Configuration
================================================================================

Project:        Ideal Gas PV Canvas
Module:         config.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

Fixed-per-run constants for the PV demonstration. All geometry is expressed
in world units, the same coordinate frame used by the renderer and the
physics engine:

    - The gas box sits above the PV plot.
    - The box's right wall is the piston; its x coordinate follows the handle.
    - Volume and pressure are linear in the handle's x and y coordinates.

Configuration problems are detected once, at startup, by DemoConfig.validate().
"""

import math
from dataclasses import dataclass, field
from typing import Tuple, Union

from .curves import CurveSampling
from .thermodynamics import BoltzmannGasLaw, GasLawKind, MolarGasLaw


class ConfigurationError(ValueError):
    """Raised when a configuration cannot produce finite, positive state."""


@dataclass(frozen=True)
class PlotGeometry:
    """The PV plot rectangle and the draggable handle's radius."""
    position: Tuple[float, float] = (0.0, -190.0)
    width: float = 808.0
    height: float = 250.0
    handle_radius: float = 16.0

    @property
    def left(self) -> float:
        return self.position[0] - self.width / 2

    @property
    def right(self) -> float:
        return self.position[0] + self.width / 2

    @property
    def bottom(self) -> float:
        return self.position[1] - self.height / 2

    @property
    def top(self) -> float:
        return self.position[1] + self.height / 2

    @property
    def handle_bounds(self) -> Tuple[float, float, float, float]:
        """(x_min, x_max, y_min, y_max) reachable by the handle's centre."""
        r = self.handle_radius
        return (self.left + r, self.right - r, self.bottom + r, self.top - r)


@dataclass(frozen=True)
class BoxGeometry:
    """The gas box. Walls are `thickness` thick and lie inside the outline."""
    position: Tuple[float, float] = (0.0, 110.0)
    width: float = 1000.0
    height: float = 250.0
    thickness: float = 32.0

    @property
    def left(self) -> float:
        return self.position[0] - self.width / 2

    @property
    def right(self) -> float:
        return self.position[0] + self.width / 2

    @property
    def bottom(self) -> float:
        return self.position[1] - self.height / 2

    @property
    def top(self) -> float:
        return self.position[1] + self.height / 2


@dataclass(frozen=True)
class ParticleSettings:
    """
    Gas particles.

    Particles start on a (2*grid_half_width + 1) x (2*grid_half_height + 1)
    lattice centred in the box, with velocity components drawn uniformly
    from [-initial_speed, initial_speed].
    """
    radius: float = 4.0
    mass: float = 1e-3            # kg
    grid_half_width: int = 8
    grid_half_height: int = 4
    initial_speed: float = 200.0

    @property
    def count(self) -> int:
        return (2 * self.grid_half_width + 1) * (2 * self.grid_half_height + 1)


@dataclass
class DemoConfig:
    """Configuration for the PV demonstration."""
    plot: PlotGeometry = field(default_factory=PlotGeometry)
    box: BoxGeometry = field(default_factory=BoxGeometry)
    particles: ParticleSettings = field(default_factory=ParticleSettings)

    # Gas law ("molar" or "boltzmann"); constants of the other law are unused
    gas_law: str = "molar"
    moles: float = 1.0                 # mol
    gas_constant: float = 8.314        # J mol^-1 K^-1
    boltzmann_constant: float = 0.055  # scaled to simulation units
    degrees_of_freedom: int = 3        # monatomic

    # World units per m^3 and per Pa
    volume_scale: float = 10.0
    pressure_scale: float = 10.0

    curve_sampling: str = CurveSampling.AXIS_SPLIT.value

    # Time integration
    dt: float = 1.0 / 60.0
    physics_substeps: int = 4

    def build_gas_law(self) -> Union[MolarGasLaw, BoltzmannGasLaw]:
        """Instantiate the selected gas law."""
        kind = GasLawKind(self.gas_law)
        if kind is GasLawKind.MOLAR:
            return MolarGasLaw(
                moles=self.moles,
                gas_constant=self.gas_constant,
                degrees_of_freedom=self.degrees_of_freedom
            )
        return BoltzmannGasLaw(
            particle_count=self.particles.count,
            boltzmann_constant=self.boltzmann_constant,
            degrees_of_freedom=self.degrees_of_freedom
        )

    def validate(self) -> "DemoConfig":
        """
        Check that every reachable handle position yields finite state.

        Returns:
            self, so the call can be chained

        Raises:
            ConfigurationError: on the first problem found
        """
        try:
            GasLawKind(self.gas_law)
        except ValueError:
            raise ConfigurationError(f"Unknown gas law: {self.gas_law!r}") from None
        try:
            CurveSampling(self.curve_sampling)
        except ValueError:
            raise ConfigurationError(
                f"Unknown curve sampling: {self.curve_sampling!r}"
            ) from None

        positive = {
            "volume_scale": self.volume_scale,
            "pressure_scale": self.pressure_scale,
            "dt": self.dt,
            "plot.width": self.plot.width,
            "plot.height": self.plot.height,
            "box.width": self.box.width,
            "box.height": self.box.height,
            "box.thickness": self.box.thickness,
            "particles.radius": self.particles.radius,
            "particles.mass": self.particles.mass,
        }
        if self.gas_law == GasLawKind.MOLAR.value:
            positive["moles"] = self.moles
            positive["gas_constant"] = self.gas_constant
        else:
            positive["boltzmann_constant"] = self.boltzmann_constant
        for name, value in positive.items():
            if not (math.isfinite(value) and value > 0):
                raise ConfigurationError(f"{name} must be positive and finite, got {value}")

        if self.degrees_of_freedom < 1:
            raise ConfigurationError("degrees_of_freedom must be at least 1")
        if self.physics_substeps < 1:
            raise ConfigurationError("physics_substeps must be at least 1")
        if self.particles.grid_half_width < 0 or self.particles.grid_half_height < 0:
            raise ConfigurationError("particle grid dimensions must be non-negative")
        if self.gas_law == GasLawKind.BOLTZMANN.value and self.particles.count < 1:
            raise ConfigurationError("boltzmann gas law needs at least one particle")

        x_min, x_max, y_min, y_max = self.plot.handle_bounds
        if x_min >= x_max or y_min >= y_max:
            raise ConfigurationError("handle radius leaves no room inside the plot")

        # Narrowest box: handle at its leftmost position
        t = self.box.thickness
        r = self.particles.radius
        interior_left = self.box.left + t + r
        interior_right = x_min - t / 2 - r
        if interior_right <= interior_left:
            raise ConfigurationError(
                "box interior vanishes at the leftmost handle position"
            )
        if self.box.height <= 2 * (t + r):
            raise ConfigurationError("box is too short for its walls and particles")

        gas_law = self.build_gas_law()
        for x in (x_min, x_max):
            for y in (y_min, y_max):
                volume = (x - self.plot.left) / self.volume_scale
                pressure = (y - self.plot.bottom) / self.pressure_scale
                temperature = gas_law.temperature(volume, pressure)
                energy = gas_law.internal_energy(temperature)
                if not all(math.isfinite(v) for v in (volume, pressure, temperature, energy)):
                    raise ConfigurationError(
                        f"non-finite gas state at handle position ({x}, {y})"
                    )
        if not math.isfinite(gas_law.gamma):
            raise ConfigurationError("heat capacity ratio is not finite")

        return self

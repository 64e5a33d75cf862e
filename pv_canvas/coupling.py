#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
State Coupling: Piston, Relocation and Energy
================================================================================

Project:        Ideal Gas PV Canvas
Module:         coupling.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

Keeps the particle box consistent with the handle on the PV plot:

    - BoundaryController moves the piston to the handle's x coordinate and
      stretches the floor and ceiling to meet it.
    - ParticleRelocator puts particles that the piston overran back inside
      the box at uniformly random positions.
    - EnergyRescaler scales all velocities so that the total kinetic energy
      equals the internal energy of the commanded state.

Together these make the mechanical gas obey the ideal gas law.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .config import BoxGeometry
from .physics import WallCollider, calculate_kinetic_energy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoxExtent:
    """Box geometry for one handle position."""
    piston_x: float
    scale_x: float     # floor/ceiling horizontal scale
    center_x: float    # floor/ceiling horizontal centre
    interior: Tuple[float, float, float, float]  # (x_min, x_max, y_min, y_max)

    @property
    def interior_width(self) -> float:
        return self.interior[1] - self.interior[0]

    @property
    def interior_height(self) -> float:
        return self.interior[3] - self.interior[2]


class BoundaryController:
    """
    Derives the wall layout from the handle's x coordinate.

    The piston (right wall) is centred on the handle's x coordinate. The floor
    and ceiling span from the box's left edge to the piston's outer face:

        scale_x  = (x + t/2 - box_left) / box_width
        center_x = (x + t/2 + box_left) / 2
    """

    def __init__(self, box: BoxGeometry, particle_radius: float):
        self.box = box
        self.particle_radius = particle_radius

    def update(self, handle_x: float) -> BoxExtent:
        box = self.box
        t = box.thickness
        r = self.particle_radius

        scale_x = (handle_x + t / 2 - box.left) / box.width
        center_x = (handle_x + t / 2 + box.left) / 2

        interior = (
            box.left + t + r,
            handle_x - t / 2 - r,
            box.bottom + t + r,
            box.top - t - r
        )

        return BoxExtent(
            piston_x=handle_x,
            scale_x=scale_x,
            center_x=center_x,
            interior=interior
        )

    def colliders(self, extent: BoxExtent) -> List[WallCollider]:
        """Static colliders for floor, ceiling, left wall and piston."""
        box = self.box
        t = box.thickness
        half_floor = box.width * extent.scale_x / 2
        half_t = t / 2

        return [
            WallCollider("floor", (extent.center_x, box.bottom + half_t), (half_floor, half_t)),
            WallCollider("ceiling", (extent.center_x, box.top - half_t), (half_floor, half_t)),
            WallCollider("left", (box.left + half_t, box.position[1]), (half_t, box.height / 2)),
            WallCollider("piston", (extent.piston_x, box.position[1]), (half_t, box.height / 2)),
        ]


class ParticleRelocator:
    """
    Moves particles that lie outside the box interior.

    The new position is drawn uniformly from the interior rectangle; the
    velocity is kept, and the EnergyRescaler run afterwards restores the
    total energy.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def relocate(
        self,
        positions: np.ndarray,
        interior: Tuple[float, float, float, float]
    ) -> int:
        """
        Reseed out-of-bounds particles inside the interior.

        Generator.uniform samples [low, high), so a reseeded centre never
        lands on the piston side of the interior.

        Args:
            positions: Nx2 array of positions (modified in place)
            interior: (x_min, x_max, y_min, y_max) valid centre region

        Returns:
            Number of particles relocated
        """
        x_min, x_max, y_min, y_max = interior

        outside = (
            (positions[:, 0] < x_min)
            | (positions[:, 0] > x_max)
            | (positions[:, 1] < y_min)
            | (positions[:, 1] > y_max)
        )
        n_outside = int(np.count_nonzero(outside))

        if n_outside > 0:
            positions[outside, 0] = self.rng.uniform(x_min, x_max, size=n_outside)
            positions[outside, 1] = self.rng.uniform(y_min, y_max, size=n_outside)
            logger.debug("Relocated %d particles into the box", n_outside)

        return n_outside


class EnergyRescaler:
    """
    Scales velocities so the total kinetic energy matches a target.

    Each tick this enforces KE = U(T), which is what ties the particles'
    motion to the temperature of the commanded state.
    """

    def __init__(self, mass: float = 1.0):
        self.mass = mass

    def rescale(self, velocities: np.ndarray, target_energy: float) -> Optional[float]:
        """
        Rescale all velocities in place.

        Args:
            velocities: Nx2 array of velocities (modified in place)
            target_energy: Desired total kinetic energy

        Returns:
            The applied scale factor, or None if the velocities were left
            alone (all particles at rest, no particles at all, or a kinetic
            energy too small to give a finite factor)
        """
        current_energy = calculate_kinetic_energy(velocities, self.mass)

        if not (current_energy > 0.0 and np.isfinite(current_energy)):
            logger.debug("Skipping energy rescale: kinetic energy is %r", current_energy)
            return None

        scale = float(np.sqrt(target_energy / current_energy))
        if not np.isfinite(scale):
            logger.debug("Skipping energy rescale: scale factor is %r", scale)
            return None

        velocities *= scale
        return scale

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Hard-Disk Gas Physics Engine
================================================================================

Project:        Ideal Gas PV Canvas
Module:         physics.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

This module moves the gas particles between ticks. Particles are identical
hard disks: they fly ballistically and bounce elastically (restitution 1,
friction 0) off each other and off the box walls. There is no gravity and no
potential energy, so the total kinetic energy only changes when the coupling
layer rescales it.

Walls are static axis-aligned rectangles, republished every tick from the
piston position:

    walls[i] = (center_x, center_y, half_width, half_height)

A particle whose centre ends up inside a wall (the piston can jump several
particle diameters in one tick) is not pushed out here. The coupling layer
relocates such particles before the next physics step.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np
from numba import jit


@dataclass(frozen=True)
class WallCollider:
    """A static rectangular wall as seen by the physics engine."""
    name: str
    position: Tuple[float, float]
    half_extents: Tuple[float, float]

    def as_row(self) -> Tuple[float, float, float, float]:
        return (self.position[0], self.position[1],
                self.half_extents[0], self.half_extents[1])


@jit(nopython=True, cache=True)
def advance_positions(positions: np.ndarray, velocities: np.ndarray, dt: float) -> None:
    """Ballistic position update, x(t + dt) = x(t) + v dt."""
    for i in range(positions.shape[0]):
        positions[i, 0] += velocities[i, 0] * dt
        positions[i, 1] += velocities[i, 1] * dt


@jit(nopython=True, cache=True)
def collide_with_walls(
    positions: np.ndarray,
    velocities: np.ndarray,
    walls: np.ndarray,
    radius: float
) -> int:
    """
    Reflect particles off rectangular walls.

    For each particle-wall pair the closest point of the rectangle to the
    particle centre gives the contact normal. If the disk overlaps the wall
    and moves into it, the normal velocity component is reversed and the
    disk is placed in contact with the wall surface.

    Args:
        positions: Nx2 array of positions (modified in place)
        velocities: Nx2 array of velocities (modified in place)
        walls: Mx4 array of (cx, cy, half_width, half_height)
        radius: Particle radius

    Returns:
        Number of wall bounces
    """
    n_bounces = 0
    radius_sq = radius * radius

    for i in range(positions.shape[0]):
        for w in range(walls.shape[0]):
            cx = walls[w, 0]
            cy = walls[w, 1]
            hx = walls[w, 2]
            hy = walls[w, 3]

            # Closest point on the wall to the particle centre
            qx = min(max(positions[i, 0], cx - hx), cx + hx)
            qy = min(max(positions[i, 1], cy - hy), cy + hy)

            dx = positions[i, 0] - qx
            dy = positions[i, 1] - qy
            d_sq = dx * dx + dy * dy

            # Centre embedded in the wall: left for the relocator
            if d_sq >= radius_sq or d_sq < 1e-12:
                continue

            d = np.sqrt(d_sq)
            nx = dx / d
            ny = dy / d

            v_n = velocities[i, 0] * nx + velocities[i, 1] * ny
            if v_n < 0.0:
                velocities[i, 0] -= 2.0 * v_n * nx
                velocities[i, 1] -= 2.0 * v_n * ny
                n_bounces += 1

            positions[i, 0] = qx + nx * radius
            positions[i, 1] = qy + ny * radius

    return n_bounces


@jit(nopython=True, cache=True)
def collide_particles(positions: np.ndarray, velocities: np.ndarray, radius: float) -> int:
    """
    Resolve elastic collisions between equal-mass disks.

    Approaching overlapping pairs exchange their velocity components along
    the line of centres, which conserves both momentum and kinetic energy.
    Overlaps are removed by moving each disk half the penetration depth.

    Args:
        positions: Nx2 array of positions (modified in place)
        velocities: Nx2 array of velocities (modified in place)
        radius: Particle radius

    Returns:
        Number of collisions resolved
    """
    n_particles = positions.shape[0]
    contact = 2.0 * radius
    contact_sq = contact * contact
    n_collisions = 0

    for i in range(n_particles):
        for j in range(i + 1, n_particles):
            dx = positions[j, 0] - positions[i, 0]
            dy = positions[j, 1] - positions[i, 1]
            r_sq = dx * dx + dy * dy

            if r_sq >= contact_sq or r_sq < 1e-12:
                continue

            r = np.sqrt(r_sq)
            nx = dx / r
            ny = dy / r

            # Relative velocity along the line of centres
            v_rel = ((velocities[j, 0] - velocities[i, 0]) * nx
                     + (velocities[j, 1] - velocities[i, 1]) * ny)
            if v_rel < 0.0:
                velocities[i, 0] += v_rel * nx
                velocities[i, 1] += v_rel * ny
                velocities[j, 0] -= v_rel * nx
                velocities[j, 1] -= v_rel * ny
                n_collisions += 1

            overlap = 0.5 * (contact - r)
            positions[i, 0] -= overlap * nx
            positions[i, 1] -= overlap * ny
            positions[j, 0] += overlap * nx
            positions[j, 1] += overlap * ny

    return n_collisions


def calculate_kinetic_energy(velocities: np.ndarray, mass: float = 1.0) -> float:
    """
    Calculate total kinetic energy.

    KE = Σ (1/2) m v²

    Args:
        velocities: Nx2 array of velocities
        mass: Particle mass (all particles are identical)

    Returns:
        Total kinetic energy
    """
    v_sq = np.sum(velocities ** 2, axis=1)
    return float(0.5 * mass * np.sum(v_sq))


def walls_to_array(colliders: Sequence[WallCollider]) -> np.ndarray:
    """Pack colliders into the Mx4 layout used by the kernels."""
    if len(colliders) == 0:
        return np.zeros((0, 4))
    return np.array([wall.as_row() for wall in colliders], dtype=np.float64)


class GasBoxPhysics:
    """
    Integrates the particles inside the walls published by the coupling layer.

    Each step is split into substeps so that fast particles cannot tunnel
    through a wall between two collision checks.
    """

    def __init__(self, particle_radius: float, substeps: int = 4):
        self.particle_radius = particle_radius
        self.substeps = substeps
        self.walls = np.zeros((0, 4))

        self.wall_bounces = 0
        self.particle_collisions = 0

    def set_walls(self, colliders: Sequence[WallCollider]) -> None:
        self.walls = walls_to_array(colliders)

    def step(self, positions: np.ndarray, velocities: np.ndarray, dt: float) -> None:
        """
        Advance the particles by dt, modifying both arrays in place.

        Args:
            positions: Nx2 array of positions
            velocities: Nx2 array of velocities
            dt: Time step
        """
        if positions.shape[0] == 0:
            return

        h = dt / self.substeps
        for _ in range(self.substeps):
            advance_positions(positions, velocities, h)
            self.particle_collisions += collide_particles(
                positions, velocities, self.particle_radius
            )
            self.wall_bounces += collide_with_walls(
                positions, velocities, self.walls, self.particle_radius
            )

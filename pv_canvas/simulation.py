#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
PV Demonstration Simulation Engine
================================================================================

Project:        Ideal Gas PV Canvas
Module:         simulation.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

Runs one tick of the demonstration per rendered frame. The order of the
stages within a tick is fixed:

    1. Physics step (uses the walls published by the previous tick)
    2. Input mapping: clamp the cursor, move the handle, accumulate work
    3. BoundaryController: piston and floor/ceiling follow the handle
    4. ParticleRelocator: particles overrun by the piston go back inside
    5. EnergyRescaler: kinetic energy matches U(T) of the new state
    6. CurveGenerator and Readout: read-only views of the final state
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .config import DemoConfig
from .coupling import BoundaryController, BoxExtent, EnergyRescaler, ParticleRelocator
from .curves import CurveKind, CurveSampling, ProcessCurve, generate_curves
from .physics import GasBoxPhysics, WallCollider, calculate_kinetic_energy
from .thermodynamics import GasState, Readout, StateModel, WorkAccumulator

logger = logging.getLogger(__name__)

Cursor = Optional[Tuple[float, float]]


@dataclass
class SimulationState:
    """Current state of the simulation."""
    handle_x: float
    handle_y: float
    positions: np.ndarray
    velocities: np.ndarray
    work: WorkAccumulator = field(default_factory=WorkAccumulator)
    time: float = 0.0
    step: int = 0

    @property
    def n_particles(self) -> int:
        return self.positions.shape[0]


@dataclass(frozen=True)
class TickResult:
    """Everything the renderer needs from one tick."""
    gas: GasState
    extent: BoxExtent
    colliders: Tuple[WallCollider, ...]
    curves: Dict[CurveKind, ProcessCurve]
    readout: Readout
    relocated: int
    energy_scale: Optional[float]
    moved: bool


def lattice_positions(config: DemoConfig) -> np.ndarray:
    """
    Rectangular particle lattice centred in the box.

    The lattice spans the box interior with a margin of 1.5 particle radii
    inside the walls.
    """
    box = config.box
    particles = config.particles
    gw = particles.grid_half_width
    gh = particles.grid_half_height

    span_x = box.width - 2 * box.thickness - 3 * particles.radius
    span_y = box.height - 2 * box.thickness - 3 * particles.radius
    spacing_x = span_x / (2 * gw) if gw > 0 else 0.0
    spacing_y = span_y / (2 * gh) if gh > 0 else 0.0

    positions = np.zeros((particles.count, 2))
    idx = 0
    for i in range(-gw, gw + 1):
        for j in range(-gh, gh + 1):
            positions[idx, 0] = box.position[0] + i * spacing_x
            positions[idx, 1] = box.position[1] + j * spacing_y
            idx += 1

    return positions


class PVSimulation:
    """
    The PV demonstration.

    Owns the simulation state and the pipeline stages. Construct, call
    initialize(), then call tick() once per frame with the cursor position
    and whether the primary button is held.
    """

    def __init__(
        self,
        config: Optional[DemoConfig] = None,
        rng: Optional[np.random.Generator] = None
    ):
        self.config = (config or DemoConfig()).validate()
        self.rng = rng if rng is not None else np.random.default_rng()

        self.model = StateModel(
            self.config.plot,
            self.config.volume_scale,
            self.config.pressure_scale,
            self.config.build_gas_law()
        )
        self.sampling = CurveSampling(self.config.curve_sampling)

        self.boundary = BoundaryController(self.config.box, self.config.particles.radius)
        self.relocator = ParticleRelocator(self.rng)
        self.rescaler = EnergyRescaler(self.config.particles.mass)
        self.physics = GasBoxPhysics(
            self.config.particles.radius,
            substeps=self.config.physics_substeps
        )

        self.state: Optional[SimulationState] = None
        self.last_result: Optional[TickResult] = None

    def initialize(self) -> SimulationState:
        """
        Place the handle at the plot centre and the particles on a lattice.

        Velocity components are drawn uniformly from
        [-initial_speed, initial_speed]; the first tick rescales them to the
        energy of the initial state.

        Returns:
            Initial simulation state
        """
        speed = self.config.particles.initial_speed
        positions = lattice_positions(self.config)
        velocities = self.rng.uniform(-speed, speed, size=positions.shape)

        plot = self.config.plot
        self.state = SimulationState(
            handle_x=plot.position[0],
            handle_y=plot.position[1],
            positions=positions,
            velocities=velocities
        )

        extent = self.boundary.update(self.state.handle_x)
        self.physics.set_walls(self.boundary.colliders(extent))
        self.last_result = None

        logger.info(
            "Initialized %d particles, %s gas law, %s curve sampling",
            self.state.n_particles, self.config.gas_law, self.sampling.value
        )
        return self.state

    def apply_input(self, cursor: Cursor, pressed: bool) -> bool:
        """
        Move the handle towards the cursor while the button is held.

        Cursor positions outside the plot rectangle are ignored. Accepted
        positions are clamped to the handle region before any state is
        derived from them.

        Returns:
            True if the handle moved
        """
        if self.state is None:
            raise RuntimeError("Simulation not initialized")
        if not pressed or cursor is None:
            return False

        x, y = cursor
        if not self.model.contains(x, y):
            return False

        new_x, new_y = self.model.clamp(x, y)
        state = self.state
        if new_x == state.handle_x and new_y == state.handle_y:
            return False

        state.work.update(
            self.model.pressure(state.handle_y),
            self.model.pressure(new_y),
            self.model.volume(state.handle_x),
            self.model.volume(new_x)
        )
        state.handle_x = new_x
        state.handle_y = new_y
        return True

    def tick(self, cursor: Cursor = None, pressed: bool = False) -> TickResult:
        """
        Run one frame of the pipeline.

        Args:
            cursor: Cursor position in world coordinates, or None
            pressed: Whether the primary button is held

        Returns:
            TickResult describing the final state of this tick
        """
        if self.state is None:
            raise RuntimeError("Simulation not initialized")

        state = self.state
        dt = self.config.dt

        self.physics.step(state.positions, state.velocities, dt)

        moved = self.apply_input(cursor, pressed)

        extent = self.boundary.update(state.handle_x)
        colliders = tuple(self.boundary.colliders(extent))
        self.physics.set_walls(colliders)

        relocated = self.relocator.relocate(state.positions, extent.interior)

        gas = self.model.gas_state(state.handle_x, state.handle_y)
        energy_scale = self.rescaler.rescale(state.velocities, gas.internal_energy)

        curves = generate_curves(self.model, state.handle_x, state.handle_y, self.sampling)
        readout = Readout.from_values(gas.temperature, state.work.total, gas.internal_energy)

        state.time += dt
        state.step += 1

        self.last_result = TickResult(
            gas=gas,
            extent=extent,
            colliders=colliders,
            curves=curves,
            readout=readout,
            relocated=relocated,
            energy_scale=energy_scale,
            moved=moved
        )
        return self.last_result

    def run(
        self,
        n_ticks: int,
        cursor_path: Optional[Iterable[Cursor]] = None
    ) -> Optional[TickResult]:
        """
        Run n_ticks ticks, dragging along cursor_path if one is given.

        The button counts as held for every position on the path; ticks
        beyond the end of the path receive no input.
        """
        path = iter(cursor_path) if cursor_path is not None else iter(())
        result = self.last_result
        for _ in range(n_ticks):
            cursor = next(path, None)
            result = self.tick(cursor, pressed=cursor is not None)
        return result

    @property
    def kinetic_energy(self) -> float:
        if self.state is None:
            return 0.0
        return calculate_kinetic_energy(self.state.velocities, self.config.particles.mass)


def create_demo_simulation(
    gas_law: str = "molar",
    seed: Optional[int] = None,
    sampling: str = CurveSampling.AXIS_SPLIT.value
) -> PVSimulation:
    """
    Create an initialized simulation with the default geometry.

    Args:
        gas_law: "molar" or "boltzmann"
        seed: Seed for particle velocities and relocation
        sampling: Curve sampling strategy ("axis-split" or "x-sweep")

    Returns:
        Initialized PVSimulation
    """
    config = DemoConfig(gas_law=gas_law, curve_sampling=sampling)
    sim = PVSimulation(config, rng=np.random.default_rng(seed))
    sim.initialize()
    return sim


def drag_path(
    waypoints: Sequence[Tuple[float, float]],
    step: float = 4.0
) -> List[Tuple[float, float]]:
    """
    Cursor positions along straight segments between waypoints.

    Consecutive positions are at most `step` apart and every waypoint is
    hit exactly.
    """
    path = [tuple(waypoints[0])]
    for (x0, y0), (x1, y1) in zip(waypoints[:-1], waypoints[1:]):
        n = max(1, int(np.ceil(np.hypot(x1 - x0, y1 - y0) / step)))
        for k in range(1, n + 1):
            t = k / n
            path.append((x0 + (x1 - x0) * t, y0 + (y1 - y0) * t))
    return path


def rectangular_cycle(
    center: Tuple[float, float],
    half_width: float,
    half_height: float
) -> List[Tuple[float, float]]:
    """
    Waypoints of a clockwise rectangle on the PV plot, closed at its start.

    Starting bottom-left: isochoric heating, isobaric expansion, isochoric
    cooling, isobaric compression. The gas does net work equal to the
    enclosed area, so the work total falls by that much per lap.
    """
    cx, cy = center
    left, right = cx - half_width, cx + half_width
    bottom, top = cy - half_height, cy + half_height
    return [(left, bottom), (left, top), (right, top), (right, bottom), (left, bottom)]

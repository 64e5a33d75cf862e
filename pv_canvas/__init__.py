#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Ideal Gas PV Canvas
================================================================================

Project:        Ideal Gas PV Canvas
Description:    Interactive pressure-volume diagram coupled to a 2D box of
                hard-disk gas particles

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
Last Updated:   January 29, 2026

License:        MIT License
================================================================================

This package implements an interactive ideal gas demonstration featuring:
- A draggable state point on a PV diagram
- A particle box whose piston follows the volume and whose kinetic energy
  follows the temperature
- Isobaric, isochoric, isothermal and adiabatic curves through the state
- Running totals of work and heat

Modules:
    - config: Geometry and physical constants, validated at startup
    - thermodynamics: Gas laws, state model, work account and readout
    - coupling: Piston geometry, particle relocation and energy rescaling
    - curves: Process curve sampling
    - physics: Elastic hard-disk collisions
    - simulation: Per-tick pipeline
    - visualization: Real-time rendering of the box and PV plot
    - logging_config: Package logger setup
"""

__version__ = "1.0.0"
__author__ = "Ryan Kamp"

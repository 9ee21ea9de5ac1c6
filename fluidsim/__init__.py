"""Particle-based physics simulation: vectors, particle states, SPH fluid state, integrators and PPM frame output."""

__version__ = "0.1.0"
"""
CEOSim package

This package provides a modular architecture for the CEOSim business
simulation game.  It separates the simulation engine, domain objects,
parameter tables and scoring rules into distinct subpackages to
encourage maintainability and clarity.
"""

__all__ = ["core", "domain", "data", "rules"]

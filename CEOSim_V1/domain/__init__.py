"""
Domain objects for CEOSim.

The domain layer holds the core business objects that model the
company, its departments, the scenarios submitted to the player and
the market events.  These classes are plain Pydantic models with small
derived properties, to ease unit testing and avoid any side effects.

Submodules are imported explicitly (``from CEOSim_V1.domain.company
import Company``): the parameter tables in ``CEOSim_V1.data`` depend on
``domain.types`` and eager re-exports here would create an import cycle.
"""

__all__ = ["types", "department", "company", "scenario", "market", "summary"]

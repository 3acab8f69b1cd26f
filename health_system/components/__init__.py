"""health_system.components
=================================

Aggregate import surface for the health component and its revive policies,
e.g.::

    from health_system.components import HealthState, HealTo

``HealthState`` is a frozen dataclass; revive policies are plain data objects
interpreted by :meth:`HealthState.revive`.
"""

from .health import HealthState
from .revive import HealFull, HealPercentage, HealTo, Revive

__all__ = [
    "HealFull",
    "HealPercentage",
    "HealTo",
    "HealthState",
    "Revive",
]

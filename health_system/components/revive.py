"""Revive heal policies.

A revive brings a value back to a chosen amount of health. The policy is a
plain data object interpreted by :meth:`HealthState.revive`.
"""

from dataclasses import dataclass
from typing import Union

from health_system.types import HealthAmount


@dataclass(frozen=True)
class HealFull:
    """Revive at full health."""

    pass


@dataclass(frozen=True)
class HealTo:
    """Revive at ``value`` hit points (clamped to ``[0, max_health]``)."""

    value: HealthAmount


@dataclass(frozen=True)
class HealPercentage:
    """Revive at ``percent`` of max health, on a 0-100 scale."""

    percent: HealthAmount


Revive = Union[HealFull, HealTo, HealPercentage]

"""Common type aliases and enumerations.

``HealthStatus`` is always *derived* from the current hit points of a
:class:`health_system.components.HealthState`; it is never stored. ``HealthModifier``
is stored on the value and changes how damage applies.
"""

from enum import StrEnum, auto
from typing import Union

EntityID = int

HealthAmount = Union[int, float]


class HealthStatus(StrEnum):
    """Alive / dead status computed from current health."""

    ALIVE = auto()
    DEAD = auto()


class HealthModifier(StrEnum):
    """Modifiers that alter how damage is applied.

    Members:
        NONE: Default. Damage applies normally.
        INVINCIBLE: Damage and kills are ignored unless forced.
    """

    NONE = auto()
    INVINCIBLE = auto()

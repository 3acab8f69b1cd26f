"""Health component.

:class:`HealthState` is an immutable value: every operation returns a new
instance and leaves the receiver untouched, so owners express an update by
storing the returned value back into their component store::

    hp = HealthState.new(100)
    hp = hp.damage(30)       # 70, alive
    hp = hp.damage(100)      # 0, dead
    hp = hp.heal(40)         # 40, alive again

Over-damage and over-heal are clamped into ``[0, max_health]``. Negative or
NaN amounts passed to :meth:`HealthState.damage` / :meth:`HealthState.heal`
raise :class:`~health_system.errors.InvalidArgument`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from numbers import Real
from typing import Optional

from health_system.components.revive import HealFull, HealPercentage, HealTo, Revive
from health_system.errors import InvalidArgument, InvalidConfiguration
from health_system.types import HealthAmount, HealthModifier, HealthStatus

logger = logging.getLogger(__name__)


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _require_amount(name: str, amount: HealthAmount) -> None:
    # ``not amount >= 0`` also rejects NaN
    if not _is_number(amount) or not amount >= 0:
        raise InvalidArgument(f"{name} must be a non-negative number, got {amount!r}")


def _require_number(name: str, value: HealthAmount) -> None:
    # ints are never NaN and may be too large for ``math.isnan``
    if not _is_number(value) or (isinstance(value, float) and math.isnan(value)):
        raise InvalidArgument(f"{name} must be a number, got {value!r}")


def _coerce_modifier(modifier: object) -> HealthModifier:
    try:
        return HealthModifier(modifier)
    except ValueError as exc:
        raise InvalidArgument(f"Unknown health modifier: {modifier!r}") from exc


@dataclass(frozen=True)
class HealthState:
    """Tracks current and maximum hit points of an entity.

    Attributes:
        max_health:
            Upper bound for ``current_health``. Strictly positive and finite,
            fixed for the lifetime of the value.
        current_health:
            Current hit points, always within ``[0, max_health]``. Values
            outside that range are clamped on construction.
        modifier:
            Damage modifier; ``INVINCIBLE`` ignores non-forced damage.
    """

    max_health: HealthAmount
    current_health: HealthAmount
    modifier: HealthModifier = HealthModifier.NONE

    def __post_init__(self) -> None:
        max_health = self.max_health
        if (
            not _is_number(max_health)
            or (isinstance(max_health, float) and not math.isfinite(max_health))
            or not max_health > 0
        ):
            raise InvalidConfiguration(
                f"max_health must be a finite number > 0, got {max_health!r}"
            )
        _require_number("current_health", self.current_health)
        object.__setattr__(self, "modifier", _coerce_modifier(self.modifier))
        clamped = min(max_health, max(0, self.current_health))
        if clamped != self.current_health:
            object.__setattr__(self, "current_health", clamped)

    @classmethod
    def new(
        cls,
        max_health: HealthAmount,
        current_health: Optional[HealthAmount] = None,
        modifier: HealthModifier = HealthModifier.NONE,
    ) -> HealthState:
        """Create a value at full health (or at ``current_health`` if given)."""
        if current_health is None:
            current_health = max_health
        return cls(
            max_health=max_health, current_health=current_health, modifier=modifier
        )

    # Queries -----------------------------------------------------------------

    def is_alive(self) -> bool:
        return self.current_health > 0

    def is_dead(self) -> bool:
        return self.current_health == 0

    def is_invincible(self) -> bool:
        return self.modifier is HealthModifier.INVINCIBLE

    @property
    def status(self) -> HealthStatus:
        return HealthStatus.ALIVE if self.is_alive() else HealthStatus.DEAD

    def health_ratio(self) -> float:
        """Return ``current_health / max_health`` in ``[0.0, 1.0]``."""
        return self.current_health / self.max_health

    # Updates -----------------------------------------------------------------

    def damage(self, amount: HealthAmount, force: bool = False) -> HealthState:
        """Subtract ``amount`` hit points, never going below zero.

        Args:
            amount: Non-negative damage to apply.
            force: Apply the damage even if the value is ``INVINCIBLE``.
        """
        _require_amount("damage amount", amount)
        if self.is_invincible() and not force:
            logger.debug("Ignored %s damage on invincible health", amount)
            return self
        return self._with_current(max(0, self.current_health - amount))

    def heal(self, amount: HealthAmount) -> HealthState:
        """Add ``amount`` hit points, discarding anything above max."""
        _require_amount("heal amount", amount)
        return self._with_current(min(self.max_health, self.current_health + amount))

    def heal_full(self) -> HealthState:
        return self._with_current(self.max_health)

    def set_current(self, value: HealthAmount) -> HealthState:
        """Set current health, clamped into ``[0, max_health]``."""
        _require_number("current health", value)
        return self._with_current(min(self.max_health, max(0, value)))

    def kill(self, force: bool = False) -> HealthState:
        if self.is_invincible() and not force:
            logger.debug("Ignored kill on invincible health")
            return self
        return self._with_current(0)

    def revive(self, heal_type: Revive = HealFull()) -> HealthState:
        """Bring the value back using the given heal policy.

        ``HealTo`` values are clamped like :meth:`set_current`;
        ``HealPercentage`` is a percentage of ``max_health`` (0-100 scale).
        """
        if isinstance(heal_type, HealFull):
            return self.heal_full()
        if isinstance(heal_type, HealTo):
            return self.set_current(heal_type.value)
        if isinstance(heal_type, HealPercentage):
            _require_amount("revive percentage", heal_type.percent)
            return self.set_current(self.max_health * (heal_type.percent / 100))
        raise InvalidArgument(f"Unknown revive heal type: {heal_type!r}")

    def with_modifier(self, modifier: HealthModifier) -> HealthState:
        """Return a copy with ``modifier``; dead values keep their modifier."""
        modifier = _coerce_modifier(modifier)
        if self.is_dead():
            logger.debug("Refused modifier change to %s on dead health", modifier)
            return self
        return replace(self, modifier=modifier)

    def _with_current(self, current_health: HealthAmount) -> HealthState:
        if current_health == self.current_health:
            return self
        updated = replace(self, current_health=current_health)
        if updated.status is not self.status:
            logger.debug("Health status %s -> %s", self.status, updated.status)
        return updated

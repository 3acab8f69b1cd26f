"""Health and damage helpers.

Overflow helpers return ``(new_state, overflow)`` where ``overflow`` is the
part of the request discarded by clamping. Store helpers apply an operation
to one entry of a persistent ``EntityID -> HealthState`` map and return the
new map; entities without a health value are left untouched.
"""

from typing import Optional, Tuple
from pyrsistent import PMap, pset
from pyrsistent.typing import PSet

from health_system.components import HealFull, HealthState, HealTo, Revive
from health_system.types import EntityID, HealthAmount, HealthStatus


def heal_with_overflow(
    state: HealthState, amount: HealthAmount
) -> Tuple[HealthState, HealthAmount]:
    """Heal and report how much of ``amount`` went past max health."""
    healed = state.heal(amount)
    return healed, amount - (healed.current_health - state.current_health)


def set_current_with_overflow(
    state: HealthState, value: HealthAmount
) -> Tuple[HealthState, HealthAmount]:
    """Set current health and report how far ``value`` exceeded max health."""
    updated = state.set_current(value)
    return updated, max(0, value - state.max_health)


def revive_with_overflow(
    state: HealthState, heal_type: Revive = HealFull()
) -> Tuple[HealthState, HealthAmount]:
    """Revive; only ``HealTo`` can overflow, the other policies report 0."""
    if isinstance(heal_type, HealTo):
        return set_current_with_overflow(state, heal_type.value)
    return state.revive(heal_type), 0


def status_transition(
    before: HealthState, after: HealthState
) -> Optional[HealthStatus]:
    """Return the new status if ``before -> after`` crossed alive/dead."""
    if before.status is after.status:
        return None
    return after.status


def damage_entity(
    health_dict: PMap[EntityID, HealthState],
    eid: EntityID,
    amount: HealthAmount,
    force: bool = False,
) -> PMap[EntityID, HealthState]:
    if eid not in health_dict:
        return health_dict
    return health_dict.set(eid, health_dict[eid].damage(amount, force=force))


def heal_entity(
    health_dict: PMap[EntityID, HealthState],
    eid: EntityID,
    amount: HealthAmount,
) -> PMap[EntityID, HealthState]:
    if eid not in health_dict:
        return health_dict
    return health_dict.set(eid, health_dict[eid].heal(amount))


def kill_entity(
    health_dict: PMap[EntityID, HealthState],
    eid: EntityID,
    force: bool = False,
) -> PMap[EntityID, HealthState]:
    if eid not in health_dict:
        return health_dict
    return health_dict.set(eid, health_dict[eid].kill(force=force))


def revive_entity(
    health_dict: PMap[EntityID, HealthState],
    eid: EntityID,
    heal_type: Revive = HealFull(),
) -> PMap[EntityID, HealthState]:
    if eid not in health_dict:
        return health_dict
    return health_dict.set(eid, health_dict[eid].revive(heal_type))


def dead_entities(health_dict: PMap[EntityID, HealthState]) -> PSet[EntityID]:
    """Ids of entities whose health value is dead."""
    return pset(eid for eid, hp in health_dict.items() if hp.is_dead())

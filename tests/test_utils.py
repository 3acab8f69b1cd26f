from typing import Dict, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap

from health_system.components import HealthState
from health_system.types import EntityID, HealthAmount


def make_health_store(
    hp_by_entity: Dict[EntityID, Tuple[HealthAmount, HealthAmount]],
) -> PMap[EntityID, HealthState]:
    """
    Build a store from ``{eid: (current, max)}``.
    """
    return pmap(
        {
            eid: HealthState.new(max_hp, current_health=current)
            for eid, (current, max_hp) in hp_by_entity.items()
        }
    )

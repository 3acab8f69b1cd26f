"""Convenience factory for authoring health values from a config."""

from __future__ import annotations

from typing import Optional

from health_system.components import HealthState
from health_system.config import DEFAULT_CONFIG, HealthConfig
from health_system.types import HealthAmount


def create_health(
    max_health: Optional[HealthAmount] = None,
    *,
    config: HealthConfig = DEFAULT_CONFIG,
) -> HealthState:
    """Full-health value; falls back to ``config.default_max_health``."""
    if max_health is None:
        max_health = config.default_max_health
    return HealthState.new(max_health, modifier=config.default_modifier)

"""Defaults used when building health values.

``HealthConfig`` is a frozen dataclass so a single instance can be shared by
every factory call. It can be built from a plain mapping (a parsed settings
or level file) or from environment variables::

    HEALTH_SYSTEM_DEFAULT_MAX_HEALTH=250
    HEALTH_SYSTEM_DEFAULT_MODIFIER=invincible
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from health_system.errors import InvalidConfiguration
from health_system.types import HealthAmount, HealthModifier

logger = logging.getLogger(__name__)

ENV_PREFIX = "HEALTH_SYSTEM_"


def _parse_max_health(raw: Any) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidConfiguration(
            f"default_max_health must be a number, got {raw!r}"
        ) from exc
    if not math.isfinite(value) or value <= 0:
        raise InvalidConfiguration(
            f"default_max_health must be a finite number > 0, got {raw!r}"
        )
    return value


def _parse_modifier(raw: Any) -> HealthModifier:
    try:
        return HealthModifier(str(raw).strip().lower())
    except ValueError as exc:
        choices = ", ".join(m.value for m in HealthModifier)
        raise InvalidConfiguration(
            f"default_modifier must be one of {choices}, got {raw!r}"
        ) from exc


@dataclass(frozen=True)
class HealthConfig:
    """Defaults for :func:`health_system.factories.create_health`.

    Attributes:
        default_max_health: Max health used when none is given.
        default_modifier: Modifier new values start with.
    """

    default_max_health: HealthAmount = 100.0
    default_modifier: HealthModifier = HealthModifier.NONE

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "default_max_health", _parse_max_health(self.default_max_health)
        )
        object.__setattr__(
            self, "default_modifier", _parse_modifier(self.default_modifier)
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> HealthConfig:
        """Build a config from ``data``, ignoring unknown keys."""
        known = {
            key: data[key]
            for key in ("default_max_health", "default_modifier")
            if key in data
        }
        config = cls(**known)
        logger.debug("Loaded health config %s", config)
        return config

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        prefix: str = ENV_PREFIX,
    ) -> HealthConfig:
        """Build a config from ``<prefix>DEFAULT_MAX_HEALTH`` / ``<prefix>DEFAULT_MODIFIER``."""
        if environ is None:
            environ = os.environ
        data = {
            key[len(prefix) :].lower(): value
            for key, value in environ.items()
            if key.startswith(prefix)
        }
        return cls.from_mapping(data)


DEFAULT_CONFIG = HealthConfig()

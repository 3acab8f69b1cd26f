import pytest

from health_system.config import DEFAULT_CONFIG, HealthConfig
from health_system.errors import InvalidConfiguration
from health_system.factories import create_health
from health_system.types import HealthModifier


def test_default_config() -> None:
    assert DEFAULT_CONFIG.default_max_health == 100.0
    assert DEFAULT_CONFIG.default_modifier is HealthModifier.NONE


def test_from_mapping_ignores_unknown_keys() -> None:
    config = HealthConfig.from_mapping(
        {"default_max_health": "250", "default_modifier": "INVINCIBLE", "color": "red"}
    )
    assert config.default_max_health == 250.0
    assert config.default_modifier is HealthModifier.INVINCIBLE


@pytest.mark.parametrize(
    "data",
    [
        {"default_max_health": 0},
        {"default_max_health": -3},
        {"default_max_health": "lots"},
        {"default_max_health": "inf"},
        {"default_max_health": None},
        {"default_max_health": 10**400},
        {"default_modifier": "immortal"},
    ],
)
def test_from_mapping_rejects_bad_values(data: dict) -> None:
    with pytest.raises(InvalidConfiguration):
        HealthConfig.from_mapping(data)


def test_from_env() -> None:
    environ = {
        "HEALTH_SYSTEM_DEFAULT_MAX_HEALTH": "40",
        "HEALTH_SYSTEM_DEFAULT_MODIFIER": "invincible",
        "UNRELATED": "1",
    }
    config = HealthConfig.from_env(environ)
    assert config == HealthConfig(
        default_max_health=40, default_modifier=HealthModifier.INVINCIBLE
    )


def test_from_env_custom_prefix_and_empty() -> None:
    assert HealthConfig.from_env({}) == DEFAULT_CONFIG
    config = HealthConfig.from_env({"GAME_DEFAULT_MAX_HEALTH": "7"}, prefix="GAME_")
    assert config.default_max_health == 7.0


def test_create_health_uses_config() -> None:
    hp = create_health()
    assert hp.current_health == hp.max_health == 100.0

    config = HealthConfig(default_max_health=30, default_modifier=HealthModifier.INVINCIBLE)
    hp = create_health(config=config)
    assert hp.max_health == 30
    assert hp.is_invincible()

    hp = create_health(12, config=config)
    assert hp.max_health == 12
    assert hp.is_invincible()


def test_create_health_rejects_bad_max() -> None:
    with pytest.raises(InvalidConfiguration):
        create_health(0)

import pytest

from engine.config import (
    COMPARE_FRACTION,
    EngineConfig,
    MAX_SIZE,
    config_from_mapping,
    load_config,
)
from errors import InvalidInput


def test_defaults() -> None:
    config = EngineConfig()
    assert config.algorithm == "bubble"
    assert config.size == 10
    assert config.speed == "medium"
    assert config.swap_delay == pytest.approx(0.38)
    assert config.compare_delay == pytest.approx(0.38 * COMPARE_FRACTION)


def test_with_methods_validate() -> None:
    config = EngineConfig()
    assert config.with_speed("slow").swap_delay == pytest.approx(0.70)
    assert config.with_size(MAX_SIZE).size == 90
    assert config.with_algorithm("merge").algorithm == "merge"
    with pytest.raises(InvalidInput):
        config.with_speed("ludicrous")
    with pytest.raises(InvalidInput):
        config.with_size(MAX_SIZE + 1)
    with pytest.raises(InvalidInput):
        config.with_size(True)
    with pytest.raises(InvalidInput):
        config.with_algorithm("heap")
    assert config.speed == "medium"


def test_load_config_reads_environment() -> None:
    config = load_config({
        "SORTVIZ_ALGORITHM": " Quick ",
        "SORTVIZ_SIZE": "25",
        "SORTVIZ_SPEED": "FAST",
        "SORTVIZ_SEED": "42",
    })
    assert config == EngineConfig(algorithm="quick", size=25, speed="fast", seed=42)


def test_load_config_falls_back_on_bad_values() -> None:
    config = load_config({
        "SORTVIZ_ALGORITHM": "bogo",
        "SORTVIZ_SIZE": "lots",
        "SORTVIZ_SPEED": "",
    })
    assert config == EngineConfig()


def test_config_from_mapping_clamps_size() -> None:
    assert config_from_mapping({"size": 500}).size == MAX_SIZE
    assert config_from_mapping({"size": -3}).size == 1
    assert config_from_mapping({"seed": "7"}).seed is None

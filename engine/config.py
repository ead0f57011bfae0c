"""Engine configuration: algorithm, dataset size and animation speed."""

from dataclasses import dataclass, replace
import logging
import os
from typing import Any, Dict, Mapping, Optional

from algorithms import REGISTRY
from errors import InvalidInput
from sequence import MAX_LENGTH

logger = logging.getLogger(__name__)


# Seconds per adjacent swap animation (slider: 700 / 380 / 160 ms)
SPEED_PRESETS: Dict[str, float] = {
    "slow":   0.70,
    "medium": 0.38,
    "fast":   0.16,
}

# A comparison highlight lasts this fraction of a swap.
COMPARE_FRACTION = 0.4

MIN_SIZE     = 1
MAX_SIZE     = MAX_LENGTH
DEFAULT_SIZE = 10

ENV_PREFIX = "SORTVIZ_"


@dataclass(frozen=True)
class EngineConfig:
    """Immutable engine settings for one session."""

    algorithm: str = "bubble"
    size: int = DEFAULT_SIZE
    speed: str = "medium"
    seed: Optional[int] = None

    @property
    def swap_delay(self) -> float:
        return SPEED_PRESETS[self.speed]

    @property
    def compare_delay(self) -> float:
        return SPEED_PRESETS[self.speed] * COMPARE_FRACTION

    def with_speed(self, speed: str) -> "EngineConfig":
        return replace(self, speed=validate_speed(speed))

    def with_size(self, size: int) -> "EngineConfig":
        return replace(self, size=validate_size(size))

    def with_algorithm(self, algorithm: str) -> "EngineConfig":
        return replace(self, algorithm=validate_algorithm(algorithm))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "size": self.size,
            "speed": self.speed,
            "seed": self.seed,
        }


def validate_speed(speed: Any) -> str:
    if speed not in SPEED_PRESETS:
        raise InvalidInput(
            f"Unknown speed {speed!r}; expected one of {sorted(SPEED_PRESETS)}."
        )
    return speed


def validate_size(size: Any) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidInput(f"Size must be an integer, got {size!r}.")
    if not MIN_SIZE <= size <= MAX_SIZE:
        raise InvalidInput(f"Size must be between {MIN_SIZE} and {MAX_SIZE}, got {size}.")
    return size


def validate_seed(seed: Any) -> Optional[int]:
    if seed is None:
        return None
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise InvalidInput(f"Seed must be an integer, got {seed!r}.")
    return seed


def validate_algorithm(algorithm: Any) -> str:
    if algorithm not in REGISTRY:
        raise InvalidInput(
            f"Unknown algorithm {algorithm!r}; expected one of {list(REGISTRY)}."
        )
    return algorithm


def load_config(environ: Optional[Mapping[str, str]] = None) -> EngineConfig:
    """Build a config from SORTVIZ_* environment variables, falling back to defaults."""
    env = os.environ if environ is None else environ
    raw: Dict[str, Any] = {}
    for key in ("algorithm", "speed"):
        value = env.get(ENV_PREFIX + key.upper())
        if value is not None:
            raw[key] = value.strip().lower()
    for key in ("size", "seed"):
        value = env.get(ENV_PREFIX + key.upper())
        if value is None:
            continue
        try:
            raw[key] = int(value)
        except ValueError:
            logger.warning("Ignoring non-integer %s%s=%r", ENV_PREFIX, key.upper(), value)
    return config_from_mapping(raw)


def config_from_mapping(raw: Mapping[str, Any]) -> EngineConfig:
    """Normalize raw data into an EngineConfig."""
    algorithm = _get_str(raw, "algorithm", "bubble")
    if algorithm not in REGISTRY:
        algorithm = "bubble"
    speed = _get_str(raw, "speed", "medium")
    if speed not in SPEED_PRESETS:
        speed = "medium"
    size = _get_int(raw, "size", DEFAULT_SIZE, min_value=MIN_SIZE, max_value=MAX_SIZE)
    seed = raw.get("seed")
    if isinstance(seed, bool) or not isinstance(seed, int):
        seed = None
    return EngineConfig(algorithm=algorithm, size=size, speed=speed, seed=seed)


def _get_int(
    raw: Mapping[str, Any],
    key: str,
    default: int,
    *,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> int:
    """Fetch an integer value with optional clamping."""
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        value = default
    if min_value is not None:
        value = max(min_value, value)
    if max_value is not None:
        value = min(max_value, value)
    return value


def _get_str(raw: Mapping[str, Any], key: str, default: str) -> str:
    """Fetch a non-empty string value."""
    value = raw.get(key, default)
    if not isinstance(value, str) or not value:
        return default
    return value

# pheeno_ros/config/velocity_config.py

from dataclasses import dataclass, fields
from typing import Mapping, Optional

# Fallback used for every velocity magnitude that is not configured
DEFAULT_VELOCITY = 0.5

PARAMETER_DEFAULTS = {
    'default_linear_velocity': DEFAULT_VELOCITY,
    'default_angular_velocity': DEFAULT_VELOCITY,
    'obstacle_linear_velocity': DEFAULT_VELOCITY,
    'obstacle_angular_velocity': DEFAULT_VELOCITY,
}


@dataclass(frozen=True)
class VelocityConfig:
    """Initial velocity magnitudes. Signs are assigned by the avoidance policy."""
    default_linear_velocity: float = DEFAULT_VELOCITY
    default_angular_velocity: float = DEFAULT_VELOCITY
    obstacle_linear_velocity: float = DEFAULT_VELOCITY
    obstacle_angular_velocity: float = DEFAULT_VELOCITY

    @classmethod
    def from_parameters(cls, params: Optional[Mapping[str, float]] = None) -> "VelocityConfig":
        """
        Build a config from a parameter mapping keyed by parameter name.
        Missing or None values fall back to PARAMETER_DEFAULTS.
        """
        params = params or {}
        values = {}
        for field in fields(cls):
            value = params.get(field.name)
            if value is None:
                value = PARAMETER_DEFAULTS[field.name]
            values[field.name] = float(value)
        return cls(**values)


@dataclass(frozen=True)
class AvoidanceConfig:
    range_to_avoid: float = 20.0    # sensor units, smaller = closer
    avoidance_mode: str = 'move'    # 'move' or 'stop'
    control_rate_hz: float = 10.0   # <= 0 disables the internal control loop
    random_seed: int = -1           # -1 = seeded from OS entropy

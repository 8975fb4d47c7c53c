from dataclasses import dataclass
from enum import Enum
from typing import Callable, NamedTuple, Optional

from pheeno_ros.avoidance.proximity import (
    ObstacleRule,
    evaluate_proximity,
    ir_sensor_triggered,
)
from pheeno_ros.avoidance.random_turn import RandomTurn
from pheeno_ros.common.logging import LogEvent, log_info
from pheeno_ros.config.velocity_config import VelocityConfig
from pheeno_ros.sensors.sensor_state import SensorState


class AvoidanceMode(str, Enum):
    MOVE = 'move'   # keep driving at the obstacle speed while turning away
    STOP = 'stop'   # halt and turn in place


class AvoidanceResult(NamedTuple):
    linear: float
    angular: float
    triggered: bool
    rule: ObstacleRule = ObstacleRule.NONE


@dataclass
class VelocityProfile:
    """Runtime velocity magnitudes, each settable independently."""
    default_linear: float
    default_angular: float
    obstacle_linear: float
    obstacle_angular: float

    @classmethod
    def from_config(cls, config: VelocityConfig) -> "VelocityProfile":
        return cls(
            default_linear=config.default_linear_velocity,
            default_angular=config.default_angular_velocity,
            obstacle_linear=config.obstacle_linear_velocity,
            obstacle_angular=config.obstacle_angular_velocity,
        )


class ObstacleAvoidancePolicy:
    DETECTED_MSG = 'Obstacle detected'

    def __init__(
        self,
        sensor_state: SensorState,
        logger,
        config: Optional[VelocityConfig] = None,
        random_turn: Optional[Callable[[float], float]] = None,
    ):
        """
        Turns IR readings from sensor_state into velocity corrections.

        Args:
            sensor_state: live sensor readings, read fresh on every call
            logger: node logger (or anything with info/warning/error/debug)
            config: initial velocity magnitudes, 0.5 each when omitted
            random_turn: sign chooser for symmetric threats
        """
        self._sensor_state = sensor_state
        self._logger = logger
        self._profile = VelocityProfile.from_config(config or VelocityConfig())
        self._random_turn = random_turn or RandomTurn()
        self._last_log_event: Optional[LogEvent] = None

    #--------------------------------------------------------------------------------
    @property
    def profile(self) -> VelocityProfile:
        return self._profile

    def get_default_linear_velocity(self) -> float:
        return self._profile.default_linear

    def get_default_angular_velocity(self) -> float:
        return self._profile.default_angular

    def set_default_linear_velocity(self, new_linear_velocity: float):
        self._profile.default_linear = new_linear_velocity

    def set_default_angular_velocity(self, new_angular_velocity: float):
        self._profile.default_angular = new_angular_velocity

    def get_obstacle_linear_velocity(self) -> float:
        return self._profile.obstacle_linear

    def get_obstacle_angular_velocity(self) -> float:
        return self._profile.obstacle_angular

    def set_obstacle_linear_velocity(self, new_linear_velocity: float):
        self._profile.obstacle_linear = new_linear_velocity

    def set_obstacle_angular_velocity(self, new_angular_velocity: float):
        self._profile.obstacle_angular = new_angular_velocity

    #--------------------------------------------------------------------------------
    def ir_sensor_triggered(self, sensor_limit: float) -> bool:
        """Coarse check: more than one forward IR sensor below sensor_limit."""
        return ir_sensor_triggered(self._sensor_state.ir(), sensor_limit)

    #--------------------------------------------------------------------------------
    def avoid_obstacle_move(self, linear: float, angular: float, range_to_avoid: float) -> AvoidanceResult:
        """Avoidance while moving: on trigger, linear becomes the obstacle linear speed."""
        return self._avoid(
            linear, angular, range_to_avoid,
            lambda: self._profile.obstacle_linear,
            'avoid_obstacle_move()',
        )

    #--------------------------------------------------------------------------------
    def avoid_obstacle_stop(self, linear: float, angular: float, range_to_avoid: float) -> AvoidanceResult:
        """Avoidance by stopping: on trigger, linear becomes 0 and the robot turns in place."""
        return self._avoid(
            linear, angular, range_to_avoid,
            lambda: 0.0,
            'avoid_obstacle_stop()',
        )

    #--------------------------------------------------------------------------------
    def avoid(self, mode: AvoidanceMode, linear: float, angular: float, range_to_avoid: float) -> AvoidanceResult:
        if AvoidanceMode(mode) == AvoidanceMode.STOP:
            return self.avoid_obstacle_stop(linear, angular, range_to_avoid)
        return self.avoid_obstacle_move(linear, angular, range_to_avoid)

    #--------------------------------------------------------------------------------
    def control_step(self, mode: AvoidanceMode, range_to_avoid: float) -> AvoidanceResult:
        """One control tick: the default (linear, angular) pair, corrected if anything is in range."""
        return self.avoid(
            mode,
            self._profile.default_linear,
            self._profile.default_angular,
            range_to_avoid,
        )

    #--------------------------------------------------------------------------------
    def _avoid(self, linear, angular, range_to_avoid, triggered_linear, source) -> AvoidanceResult:
        evaluation = evaluate_proximity(
            self._sensor_state.ir(),
            range_to_avoid,
            self._profile.obstacle_linear,
            self._profile.obstacle_angular,
            self._random_turn,
        )
        if not evaluation.triggered:
            return AvoidanceResult(linear, angular, False)

        self._last_log_event = log_info(
            self._logger,
            self.DETECTED_MSG,
            source,
            self._last_log_event,
        )
        return AvoidanceResult(triggered_linear(), evaluation.angular, True, evaluation.rule)

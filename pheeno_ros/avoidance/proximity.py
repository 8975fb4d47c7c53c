"""
IR proximity classification.

evaluate_proximity() runs a strict priority cascade over the forward IR
sensors: the first rule that matches decides the turn. Negative angular is a
left turn, positive is a right turn. The back sensor is never consulted.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence

from pheeno_ros.sensors.channels import IRSensor, FORWARD_IR_SENSORS
from pheeno_ros.sensors.sensor_state import IRSnapshot

# Right/Left readings closer than this are treated as a symmetric frontal threat
SYMMETRY_TOLERANCE = 5.0


class ObstacleRule(int, Enum):
    CENTER = 1
    CRIGHT_AND_CLEFT = 2
    CRIGHT = 3
    CLEFT = 4
    RIGHT = 5
    LEFT = 6
    NONE = 7


@dataclass(frozen=True)
class ProximityEvaluation:
    rule: ObstacleRule
    angular: Optional[float] = None   # None when the cascade leaves angular alone
    # Only set by the symmetric center branch. Both policy variants replace
    # linear on trigger, so this is visible to direct callers of the evaluator only.
    linear: Optional[float] = None

    @property
    def triggered(self) -> bool:
        return self.rule != ObstacleRule.NONE


#--------------------------------------------------------------------------------
def evaluate_proximity(
    ir: IRSnapshot,
    range_to_avoid: float,
    obstacle_linear: float,
    obstacle_angular: float,
    random_turn: Callable[[float], float],
) -> ProximityEvaluation:
    """
    Classify the current IR readings against range_to_avoid.

    Args:
        ir: latest IR readings
        range_to_avoid: readings strictly below this are obstacles
        obstacle_linear: linear magnitude used while avoiding
        obstacle_angular: angular magnitude used while avoiding
        random_turn: sign chooser used when the threat is symmetric
    Returns:
        ProximityEvaluation with the matched rule and the velocities it assigns
    """
    center, right, left = ir[IRSensor.CENTER], ir[IRSensor.RIGHT], ir[IRSensor.LEFT]
    cright, cleft = ir[IRSensor.CRIGHT], ir[IRSensor.CLEFT]

    if center < range_to_avoid:
        linear = None
        angular = None
        if abs(right - left) < SYMMETRY_TOLERANCE or \
                (right > range_to_avoid and left > range_to_avoid):
            linear = obstacle_linear
            angular = random_turn(obstacle_angular)

        # Known quirk: this always overwrites the random turn chosen above.
        # The draw is still taken, in both variants, so the moving variant
        # consumes random draws the same way the original robot did.
        if right < left:
            angular = -1.0 * obstacle_angular   # Turn Left
        else:
            angular = obstacle_angular          # Turn Right
        return ProximityEvaluation(ObstacleRule.CENTER, angular=angular, linear=linear)

    if cright < range_to_avoid and cleft < range_to_avoid:
        return ProximityEvaluation(ObstacleRule.CRIGHT_AND_CLEFT, angular=random_turn(obstacle_angular))

    if cright < range_to_avoid:
        return ProximityEvaluation(ObstacleRule.CRIGHT, angular=-1.0 * obstacle_angular)

    if cleft < range_to_avoid:
        return ProximityEvaluation(ObstacleRule.CLEFT, angular=obstacle_angular)

    if right < range_to_avoid:
        return ProximityEvaluation(ObstacleRule.RIGHT, angular=-1.0 * obstacle_angular)

    if left < range_to_avoid:
        return ProximityEvaluation(ObstacleRule.LEFT, angular=obstacle_angular)

    return ProximityEvaluation(ObstacleRule.NONE)

#--------------------------------------------------------------------------------
def ir_sensor_triggered(
    ir: IRSnapshot,
    sensor_limit: float,
    sensors: Sequence[IRSensor] = FORWARD_IR_SENSORS,
) -> bool:
    """True when more than one forward IR sensor reads below sensor_limit."""
    count = sum(1 for sensor in sensors if ir[sensor] < sensor_limit)
    return count > 1

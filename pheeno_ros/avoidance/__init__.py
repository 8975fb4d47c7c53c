from pheeno_ros.avoidance.random_turn import RandomTurn
from pheeno_ros.avoidance.proximity import (
    ObstacleRule,
    ProximityEvaluation,
    evaluate_proximity,
    ir_sensor_triggered,
)
from pheeno_ros.avoidance.policy import (
    AvoidanceMode,
    AvoidanceResult,
    VelocityProfile,
    ObstacleAvoidancePolicy,
)

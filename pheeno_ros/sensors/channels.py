from enum import IntEnum


class IRSensor(IntEnum):
    """IR proximity sensor placements, also their index in the reading array."""
    CENTER = 0
    RIGHT = 1
    LEFT = 2
    CRIGHT = 3
    CLEFT = 4
    BACK = 5


class Encoder(IntEnum):
    """Wheel encoders, one per H-bridge channel."""
    LL = 0
    LR = 1
    RL = 2
    RR = 3


# The back sensor is collected but never used for avoidance
FORWARD_IR_SENSORS = (
    IRSensor.CENTER,
    IRSensor.RIGHT,
    IRSensor.LEFT,
    IRSensor.CRIGHT,
    IRSensor.CLEFT,
)

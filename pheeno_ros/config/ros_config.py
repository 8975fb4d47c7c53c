# Type defs for Ros Configurations:

from enum import Enum
from dataclasses import dataclass

from pheeno_ros.sensors.channels import IRSensor, Encoder

DEFAULT_PHEENO_NAME = 'pheeno_01'

# Enum for the per-robot topics (relative to the robot namespace):
class TopicKey(str, Enum):
    SCAN_CENTER = 'scan_center'
    SCAN_RIGHT = 'scan_right'
    SCAN_LEFT = 'scan_left'
    SCAN_CRIGHT = 'scan_cr'
    SCAN_CLEFT = 'scan_cl'
    SCAN_BACK = 'scan_back'
    ODOM = 'odom'
    ENCODER_LL = 'encoder_LL'
    ENCODER_LR = 'encoder_LR'
    ENCODER_RL = 'encoder_RL'
    ENCODER_RR = 'encoder_RR'
    MAGNETOMETER = 'magnetometer'
    GYROSCOPE = 'gyroscope'
    ACCELEROMETER = 'accelerometer'
    CMD_VEL = 'cmd_vel'


# Data class for ros configurations
@dataclass(frozen=True)
class RosConfig:
    max_messages: int = 10          # sensor subscription depth
    odom_messages: int = 1          # only the latest odometry sample matters
    cmd_vel_messages: int = 100
    # (channel, topic) pairs, so the binding never depends on tuple order
    ir_topics: tuple = (
        (IRSensor.CENTER, TopicKey.SCAN_CENTER),
        (IRSensor.RIGHT, TopicKey.SCAN_RIGHT),
        (IRSensor.LEFT, TopicKey.SCAN_LEFT),
        (IRSensor.CRIGHT, TopicKey.SCAN_CRIGHT),
        (IRSensor.CLEFT, TopicKey.SCAN_CLEFT),
        (IRSensor.BACK, TopicKey.SCAN_BACK),
    )
    encoder_topics: tuple = (
        (Encoder.LL, TopicKey.ENCODER_LL),
        (Encoder.LR, TopicKey.ENCODER_LR),
        (Encoder.RL, TopicKey.ENCODER_RL),
        (Encoder.RR, TopicKey.ENCODER_RR),
    )
    odom_topic: str = TopicKey.ODOM.value
    magnetometer_topic: str = TopicKey.MAGNETOMETER.value
    gyroscope_topic: str = TopicKey.GYROSCOPE.value
    accelerometer_topic: str = TopicKey.ACCELEROMETER.value
    velocity_topic: str = TopicKey.CMD_VEL.value

    def topic(self, pheeno_name: str, key) -> str:
        """Joins the robot namespace and a topic suffix."""
        suffix = key.value if isinstance(key, Enum) else str(key)
        return f"{pheeno_name.rstrip('/')}/{suffix}"

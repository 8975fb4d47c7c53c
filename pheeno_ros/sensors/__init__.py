from pheeno_ros.sensors.channels import IRSensor, Encoder, FORWARD_IR_SENSORS
from pheeno_ros.sensors.sensor_state import (
    SensorState,
    SensorSnapshot,
    IRSnapshot,
    OdomSnapshot,
    EncoderSnapshot,
    Vector3Snapshot,
)

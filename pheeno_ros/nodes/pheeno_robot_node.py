#!/usr/bin/env python3

from functools import partial

# ROS2 imports
import rclpy
from rclpy.node import Node
from std_msgs.msg import Float32, Int16
from geometry_msgs.msg import Twist, Vector3
from nav_msgs.msg import Odometry

# Configurations:
from pheeno_ros.config.ros_presets import STD_CFG
from pheeno_ros.config.ros_config import DEFAULT_PHEENO_NAME
from pheeno_ros.config.velocity_config import (
    AvoidanceConfig,
    PARAMETER_DEFAULTS,
    VelocityConfig,
)

from pheeno_ros.sensors.channels import IRSensor, Encoder
from pheeno_ros.sensors.sensor_state import SensorState
from pheeno_ros.avoidance.policy import AvoidanceMode, AvoidanceResult, ObstacleAvoidancePolicy
from pheeno_ros.avoidance.random_turn import RandomTurn
from pheeno_ros.common.logging import LogEvent, log_error, log_info


class PheenoRobotNode(Node):

    def __init__(self, pheeno_name: str = DEFAULT_PHEENO_NAME):
        super().__init__('pheeno_robot')
        self._last_log_event: LogEvent = None
        self._last_log_event = log_info(self.get_logger(), 'Creating Pheeno Robot.', self.__init__.__qualname__)

        self.declare_parameter('pheeno_name', pheeno_name)
        self._pheeno_name = str(self.get_parameter('pheeno_name').value)
        self._ros_config = STD_CFG
        self._sensor_state = SensorState()

        try:
            velocity_config, avoidance_config = self._load_parameters()
            self._avoidance_config = avoidance_config
            self._mode = AvoidanceMode(avoidance_config.avoidance_mode)

            seed = avoidance_config.random_seed if avoidance_config.random_seed >= 0 else None
            self._policy = ObstacleAvoidancePolicy(
                self._sensor_state,
                self.get_logger(),
                config=velocity_config,
                random_turn=RandomTurn(seed),
            )
            self._create_subscriptions()

            # cmd_vel Publisher
            velocity_topic = self._topic(self._ros_config.velocity_topic)
            self._pub_cmd_vel = self.create_publisher(
                Twist,
                velocity_topic,
                self._ros_config.cmd_vel_messages
            )
            self._last_log_event = log_info(self.get_logger(), f'Publishing velocity on: {velocity_topic}')

            self._control_timer = None
            if avoidance_config.control_rate_hz > 0:
                self._control_timer = self.create_timer(
                    1.0 / avoidance_config.control_rate_hz,
                    self._control_loop
                )
                self._last_log_event = log_info(
                    self.get_logger(),
                    f'Control loop at {avoidance_config.control_rate_hz} Hz, mode: {self._mode.value}'
                )
        except Exception as e:
            self._last_log_event = log_error(
                self.get_logger(),
                e,
                self.__init__.__qualname__,
                'Failed to initialize Pheeno Robot.',
                self._last_log_event
            )
            raise

    #----------------------------------------------------------------------------------
    def _topic(self, key) -> str:
        return self._ros_config.topic(self._pheeno_name, key)

    #----------------------------------------------------------------------------------
    def _load_parameters(self):
        """Declares node parameters; anything not provided falls back to its default."""
        for name, default in PARAMETER_DEFAULTS.items():
            self.declare_parameter(name, default)

        defaults = AvoidanceConfig()
        self.declare_parameter('range_to_avoid', defaults.range_to_avoid)
        self.declare_parameter('avoidance_mode', defaults.avoidance_mode)
        self.declare_parameter('control_rate_hz', defaults.control_rate_hz)
        self.declare_parameter('random_seed', defaults.random_seed)

        velocity_config = VelocityConfig.from_parameters(
            {name: self.get_parameter(name).value for name in PARAMETER_DEFAULTS}
        )
        avoidance_config = AvoidanceConfig(
            range_to_avoid=float(self.get_parameter('range_to_avoid').value),
            avoidance_mode=str(self.get_parameter('avoidance_mode').value),
            control_rate_hz=float(self.get_parameter('control_rate_hz').value),
            random_seed=int(self.get_parameter('random_seed').value),
        )
        return velocity_config, avoidance_config

    #----------------------------------------------------------------------------------
    def _create_subscriptions(self):
        # IR Sensor Subscribers
        self._ir_subs = []
        for sensor, key in self._ros_config.ir_topics:
            self._ir_subs.append(self._subscribe(
                Float32,
                key,
                partial(self._ir_sensor_callback, location=sensor),
                self._ros_config.max_messages
            ))

        # Odom Subscriber
        self._odom_sub = self._subscribe(
            Odometry,
            self._ros_config.odom_topic,
            self._odom_callback,
            self._ros_config.odom_messages
        )

        # Encoder Subscribers
        self._encoder_subs = []
        for encoder, key in self._ros_config.encoder_topics:
            self._encoder_subs.append(self._subscribe(
                Int16,
                key,
                partial(self._encoder_callback, location=encoder),
                self._ros_config.max_messages
            ))

        # Magnetometer, Gyroscope, Accelerometer Subscribers
        self._magnetometer_sub = self._subscribe(
            Vector3,
            self._ros_config.magnetometer_topic,
            self._magnetometer_callback,
            self._ros_config.max_messages
        )
        self._gyroscope_sub = self._subscribe(
            Vector3,
            self._ros_config.gyroscope_topic,
            self._gyroscope_callback,
            self._ros_config.max_messages
        )
        self._accelerometer_sub = self._subscribe(
            Vector3,
            self._ros_config.accelerometer_topic,
            self._accelerometer_callback,
            self._ros_config.max_messages
        )

    #----------------------------------------------------------------------------------
    def _subscribe(self, msg_type, key, callback, depth):
        topic = self._topic(key)
        sub = self.create_subscription(msg_type, topic, callback, depth)
        self._last_log_event = log_info(self.get_logger(), f'Subscribed to: {topic}')
        return sub

    #----------------------------------------------------------------------------------
    def _ir_sensor_callback(self, msg: Float32, location: IRSensor):
        self._sensor_state.update_ir(location, msg.data)

    #----------------------------------------------------------------------------------
    def _encoder_callback(self, msg: Int16, location: Encoder):
        self._sensor_state.update_encoder(location, msg.data)

    #----------------------------------------------------------------------------------
    def _odom_callback(self, msg: Odometry):
        """Only published if the libgazebo_ros_p3d plugin is in the robot description."""
        pose = msg.pose.pose
        twist = msg.twist.twist
        self._sensor_state.update_odometry(
            position=(pose.position.x, pose.position.y, pose.position.z),
            orientation=(pose.orientation.x, pose.orientation.y, pose.orientation.z, pose.orientation.w),
            linear=(twist.linear.x, twist.linear.y, twist.linear.z),
            angular=(twist.angular.x, twist.angular.y, twist.angular.z),
        )

    #----------------------------------------------------------------------------------
    def _magnetometer_callback(self, msg: Vector3):
        self._sensor_state.update_magnetometer(msg.x, msg.y, msg.z)

    #----------------------------------------------------------------------------------
    def _gyroscope_callback(self, msg: Vector3):
        self._sensor_state.update_gyroscope(msg.x, msg.y, msg.z)

    #----------------------------------------------------------------------------------
    def _accelerometer_callback(self, msg: Vector3):
        self._sensor_state.update_accelerometer(msg.x, msg.y, msg.z)

    #----------------------------------------------------------------------------------
    def publish_cmd_velocity(self, linear: float, angular: float):
        """Publishes a cmd_vel message with forward and turning speed."""
        cmd = Twist()
        cmd.linear.x = float(linear)
        cmd.angular.z = float(angular)
        self._pub_cmd_vel.publish(cmd)

    #----------------------------------------------------------------------------------
    def _control_loop(self):
        """Drive at the default velocities, steering away from anything in range."""
        result = self._policy.control_step(self._mode, self._avoidance_config.range_to_avoid)
        self.publish_cmd_velocity(result.linear, result.angular)

    #----------------------------------------------------------------------------------
    def avoid(self, linear: float, angular: float, range_to_avoid: float = None) -> AvoidanceResult:
        if range_to_avoid is None:
            range_to_avoid = self._avoidance_config.range_to_avoid
        return self._policy.avoid(self._mode, linear, angular, range_to_avoid)

    #----------------------------------------------------------------------------------
    def sensor_state(self) -> SensorState:
        return self._sensor_state

    def policy(self) -> ObstacleAvoidancePolicy:
        return self._policy

    def ir_sensor_triggered(self, sensor_limit: float) -> bool:
        return self._policy.ir_sensor_triggered(sensor_limit)


#******************************************************************************
def main(args=None):
    rclpy.init(args=args)
    pheeno_robot = PheenoRobotNode()

    try:
        rclpy.spin(pheeno_robot)
    except KeyboardInterrupt:
        print('Shutting down Pheeno Robot...')
    finally:
        pheeno_robot.destroy_node()
        rclpy.shutdown()

if __name__ == '__main__':
    main()

# Preset configurations for ROS2

from pheeno_ros.config.ros_config import RosConfig

# Real robot preset:
STD_CFG = RosConfig()

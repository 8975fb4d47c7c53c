import os

from ament_index_python.packages import get_package_share_directory
from launch import LaunchDescription
from launch_ros.actions import Node


def generate_launch_description():
    params = os.path.join(
        get_package_share_directory('pheeno_ros'),
        'config',
        'pheeno_params.yaml'
    )
    return LaunchDescription([
        Node(
            package='pheeno_ros',
            executable='pheeno_robot',
            name='pheeno_robot',
            parameters=[params],
        ),
    ])

import os
from glob import glob

from setuptools import find_packages, setup

package_name = 'pheeno_ros'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test', 'test.*']),
    data_files=[
        ('share/ament_index/resource_index/packages',
            ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
        (os.path.join('share', package_name, 'launch'), glob('launch/*.py')),
        (os.path.join('share', package_name, 'config'), glob('config/*.yaml')),
    ],
    install_requires=['setuptools', 'numpy'],
    zip_safe=True,
    maintainer='pheeno',
    maintainer_email='pheeno@todo.todo',
    description='Sensor state and IR obstacle avoidance for the Pheeno robot',
    license='Apache-2.0',
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'pheeno_robot = pheeno_ros.nodes.pheeno_robot_node:main',
        ],
    },
)

import os

from ament_index_python.packages import get_package_share_directory
from launch import LaunchDescription
from launch.actions import DeclareLaunchArgument
from launch.substitutions import LaunchConfiguration
from launch_ros.actions import Node


def generate_launch_description():
    params = os.path.join(
        get_package_share_directory('rovio_teleop'), 'config', 'rovio_teleop_params.yaml')

    joy_dev = DeclareLaunchArgument(
        'joy_dev',
        default_value='0',
        description='Joystick device id'
    )

    return LaunchDescription([
        joy_dev,
        # Joystick driver
        Node(
            package='joy',
            executable='joy_node',
            name='joy_node',
            parameters=[{
                'device_id': LaunchConfiguration('joy_dev'),
                'deadzone': 0.05,
                'autorepeat_rate': 30.0
            }]
        ),
        # Joy -> cmd_vel + head_position
        Node(
            package='rovio_teleop',
            executable='teleop',
            name='rovio_teleop',
            parameters=[params],
            output='screen'
        ),
    ])

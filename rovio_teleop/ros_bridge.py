"""
Glue between InputMapper and the ROS 2 node.

Message, service and descriptor types are passed in by teleop_node.py so
this module stays importable without a ROS install.
"""

from rovio_teleop.mapping import PARAMETER_DEFAULTS, HeadCallError, TeleopConfig


def fill_twist(twist, cmd):
    twist.linear.x = float(cmd.linear_x)
    twist.linear.y = float(cmd.linear_y)
    twist.linear.z = float(cmd.linear_z)
    twist.angular.x = float(cmd.angular_x)
    twist.angular.y = float(cmd.angular_y)
    twist.angular.z = float(cmd.angular_z)
    return twist


def load_config(node, descriptor=None):
    """Declare the teleop parameters on node and build a TeleopConfig.

    Pass a dynamically typed descriptor so an integer override of a scale
    reaches TeleopConfig.from_parameters instead of failing in rclpy.
    """
    for name, default in PARAMETER_DEFAULTS.items():
        if descriptor is None:
            node.declare_parameter(name, default)
        else:
            node.declare_parameter(name, default, descriptor)
    return TeleopConfig.from_parameters(
        {name: node.get_parameter(name).value for name in PARAMETER_DEFAULTS})


class HeadServiceClient:
    """Blocking wrapper around the head_position service."""

    def __init__(self, node, srv_type, service_name='head_position', callback_group=None):
        self.srv_type = srv_type
        self.service_name = service_name
        self.client = node.create_client(
            srv_type, service_name, callback_group=callback_group)

    def request_head_position(self, position):
        if not self.client.service_is_ready():
            raise HeadCallError(f'service {self.service_name} is not available')

        req = self.srv_type.Request()
        req.position = getattr(self.srv_type.Request, position.name)
        try:
            res = self.client.call(req)
        except Exception as e:
            raise HeadCallError(str(e)) from e
        if res is None:
            raise HeadCallError('no response')
        return res.status

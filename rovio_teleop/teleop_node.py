import rclpy
from rclpy.callback_groups import MutuallyExclusiveCallbackGroup, ReentrantCallbackGroup
from rclpy.executors import ExternalShutdownException, MultiThreadedExecutor
from rclpy.node import Node
from rcl_interfaces.msg import ParameterDescriptor
from sensor_msgs.msg import Joy
from geometry_msgs.msg import Twist
from rovio_common.srv import Head

from rovio_teleop.mapping import InputMapper
from rovio_teleop.ros_bridge import HeadServiceClient, fill_twist, load_config


class RovioTeleop(Node):
    def __init__(self):
        super().__init__('rovio_teleop')

        # Axes, scales and buttons, overridable from YAML.
        # Types are checked by TeleopConfig, not rclpy.
        self.config = load_config(self, ParameterDescriptor(dynamic_typing=True))

        self.pub = self.create_publisher(Twist, 'cmd_vel', 10)
        # Reentrant group so the call can finish while the joy callback waits
        self.head = HeadServiceClient(
            self, Head, 'head_position', callback_group=ReentrantCallbackGroup())
        self.mapper = InputMapper(
            self.config,
            publish=lambda cmd: self.pub.publish(fill_twist(Twist(), cmd)),
            request_head_position=self.head.request_head_position,
            logger=self.get_logger(),
        )
        self.sub = self.create_subscription(
            Joy, 'joy', self.on_joy, 10,
            callback_group=MutuallyExclusiveCallbackGroup())

        self.get_logger().info('Rovio teleop ready.')

    def on_joy(self, msg: Joy):
        self.mapper.on_input_event(msg.axes, msg.buttons)


def main(args=None):
    rclpy.init(args=args)
    node = RovioTeleop()
    executor = MultiThreadedExecutor()
    executor.add_node(node)

    try:
        executor.spin()
    except (KeyboardInterrupt, ExternalShutdownException):
        pass
    finally:
        executor.shutdown()
        node.destroy_node()
        rclpy.try_shutdown()


if __name__ == '__main__':
    main()

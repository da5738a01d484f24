"""
Joystick -> Rovio command mapping, independent of the ROS transport.

The node in teleop_node.py feeds every Joy message through InputMapper,
which publishes one velocity command per event and issues at most one
head position request.
"""

import enum
import numbers
from dataclasses import dataclass


class TeleopError(Exception):
    pass


class ConfigurationError(TeleopError):
    """A parameter is invalid or does not fit the incoming Joy message."""


class HeadCallError(TeleopError):
    """The head_position service could not be called."""


class HeadPosition(enum.IntEnum):
    # Rovio head commands
    UP = 11
    DOWN = 12
    MID = 13


# Parameter name -> default. Order is the order they get declared and logged.
AXIS_DEFAULTS = {
    'axis_linearx': 1,
    'axis_lineary': 0,
    'axis_angular': 2,
}
SCALE_DEFAULTS = {
    'scale_linearx': 1.0,
    'scale_lineary': -1.0,
    'scale_angular': -1.0,
}
BUTTON_DEFAULTS = {
    'button_head_down': 1,
    'button_head_mid': 2,
    'button_head_up': 3,
}
PARAMETER_DEFAULTS = {**AXIS_DEFAULTS, **SCALE_DEFAULTS, **BUTTON_DEFAULTS}


@dataclass(frozen=True)
class TeleopConfig:
    axis_linear_x: int = 1
    axis_linear_y: int = 0
    axis_angular: int = 2
    scale_linear_x: float = 1.0
    scale_linear_y: float = -1.0
    scale_angular: float = -1.0
    button_head_down: int = 1
    button_head_mid: int = 2
    button_head_up: int = 3

    @classmethod
    def from_parameters(cls, params):
        """Build a config from a {parameter name: value} mapping.

        Missing names fall back to PARAMETER_DEFAULTS. Indices must be
        non-negative integers, scales must be numbers.
        """
        values = dict(PARAMETER_DEFAULTS)
        values.update({k: v for k, v in params.items() if v is not None})

        for name in list(AXIS_DEFAULTS) + list(BUTTON_DEFAULTS):
            values[name] = _check_index(name, values[name])
        for name in SCALE_DEFAULTS:
            values[name] = _check_scale(name, values[name])

        return cls(
            axis_linear_x=values['axis_linearx'],
            axis_linear_y=values['axis_lineary'],
            axis_angular=values['axis_angular'],
            scale_linear_x=values['scale_linearx'],
            scale_linear_y=values['scale_lineary'],
            scale_angular=values['scale_angular'],
            button_head_down=values['button_head_down'],
            button_head_mid=values['button_head_mid'],
            button_head_up=values['button_head_up'],
        )

    def as_parameters(self):
        return {
            'axis_linearx': self.axis_linear_x,
            'axis_lineary': self.axis_linear_y,
            'axis_angular': self.axis_angular,
            'scale_linearx': self.scale_linear_x,
            'scale_lineary': self.scale_linear_y,
            'scale_angular': self.scale_angular,
            'button_head_down': self.button_head_down,
            'button_head_mid': self.button_head_mid,
            'button_head_up': self.button_head_up,
        }

    def head_bindings(self):
        # Checked in this order, first pressed button wins
        return [
            (self.button_head_down, HeadPosition.DOWN),
            (self.button_head_mid, HeadPosition.MID),
            (self.button_head_up, HeadPosition.UP),
        ]


def _check_index(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ConfigurationError(f'{name} must be an integer index, got {value!r}')
    if value < 0:
        raise ConfigurationError(f'{name} must be >= 0, got {value}')
    return int(value)


def _check_scale(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigurationError(f'{name} must be a number, got {value!r}')
    return float(value)


@dataclass(frozen=True)
class VelocityCommand:
    # Right hand co-ordinate system
    #   X+ is forward, Y+ is right, Z+ is down
    #   positive rotation around Z turns the robot right
    linear_x: float = 0.0
    linear_y: float = 0.0
    linear_z: float = 0.0
    angular_x: float = 0.0
    angular_y: float = 0.0
    angular_z: float = 0.0


def _read(values, index, name, kind):
    if index >= len(values):
        raise ConfigurationError(
            f'{name}={index} is out of range for a Joy message with '
            f'{len(values)} {kind}')
    return values[index]


def compute_command(config: TeleopConfig, axes) -> VelocityCommand:
    lx = _read(axes, config.axis_linear_x, 'axis_linearx', 'axes')
    ly = _read(axes, config.axis_linear_y, 'axis_lineary', 'axes')
    az = _read(axes, config.axis_angular, 'axis_angular', 'axes')
    return VelocityCommand(
        linear_x=lx * config.scale_linear_x,
        linear_y=ly * config.scale_linear_y,
        angular_z=az * config.scale_angular,
    )


_BUTTON_NAMES = {
    HeadPosition.DOWN: 'button_head_down',
    HeadPosition.MID: 'button_head_mid',
    HeadPosition.UP: 'button_head_up',
}


def select_head_position(config: TeleopConfig, buttons):
    """Return the HeadPosition for the first pressed head button, or None."""
    for index, position in config.head_bindings():
        state = _read(buttons, index, _BUTTON_NAMES[position], 'buttons')
        if state == 1:
            return position
    return None


class InputMapper:
    def __init__(self, config, publish, request_head_position, logger):
        self.config = config
        self.publish = publish
        self.request_head_position = request_head_position
        self.logger = logger

        for name, value in config.as_parameters().items():
            if name in SCALE_DEFAULTS:
                self.logger.debug(f'{name}: {value:0.2f}')
            else:
                self.logger.debug(f'{name}: {value}')

    def on_input_event(self, axes, buttons):
        """Publish a velocity command for one Joy event and maybe move the head.

        Never raises: bad indices and failed service calls are logged and the
        next event is processed as usual.
        """
        try:
            cmd = compute_command(self.config, axes)
        except ConfigurationError as e:
            self.logger.error(f'Cannot read axes: {e}')
            return None
        self.publish(cmd)

        # TODO: map an emergency stop button once the base exposes a stop service
        try:
            position = select_head_position(self.config, buttons)
        except ConfigurationError as e:
            self.logger.error(f'Cannot read buttons: {e}')
            return cmd

        if position is not None:
            self._move_head(position)
        return cmd

    def _move_head(self, position):
        try:
            status = self.request_head_position(position)
        except HeadCallError as e:
            self.logger.error(f'Failed to call service head_position: {e}')
            return
        # Status is reported only, nothing acts on it yet
        self.logger.info(f'Head Status: {int(status)}')

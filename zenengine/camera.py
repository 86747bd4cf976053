"""A free-look first-person camera driven by keyboard and mouse input."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Iterable, Optional, Tuple

from zenengine.vectors import Vector3, to_degree

STEP_SCALE = 1.0
EDGE_STEP = 0.5
MARGIN = 10

_VERTICAL_AXIS = Vector3(0.0, 1.0, 0.0)


class Renderable(ABC):
    """Something that takes part in the per-frame render pass."""

    @abstractmethod
    def render(self) -> None:
        """Do this object's work for the current frame."""


class Key(Enum):
    """Keys the camera reacts to."""

    W = auto()
    S = auto()
    A = auto()
    D = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()


def _asin_degrees(value: float) -> float:
    return to_degree(math.asin(max(-1.0, min(1.0, value))))


class Camera3D(Renderable):
    """A camera with a position and a view direction given by two angles.

    Input is fed in through :meth:`on_input`; :meth:`render` turns the
    camera while the mouse rests against a window edge.
    """

    def __init__(
        self,
        width: int,
        height: int,
        position: Optional[Vector3] = None,
        target: Optional[Vector3] = None,
        up: Optional[Vector3] = None,
    ) -> None:
        self.window_width = width
        self.window_height = height
        self._position = Vector3(0.0, 0.0, 0.0) if position is None else position
        self._target = (Vector3(0.0, 0.0, 1.0) if target is None else target).normalized()
        self._up = Vector3(0.0, 1.0, 0.0) if up is None else up.normalized()

        horizontal = Vector3(self._target.x, 0.0, self._target.z).normalized()
        if horizontal.z >= 0.0:
            if horizontal.x >= 0.0:
                self.angle_h = 360.0 - _asin_degrees(horizontal.z)
            else:
                self.angle_h = 180.0 + _asin_degrees(horizontal.z)
        elif horizontal.x >= 0.0:
            self.angle_h = _asin_degrees(-horizontal.z)
        else:
            self.angle_h = 180.0 - _asin_degrees(-horizontal.z)
        self.angle_v = -_asin_degrees(self._target.y)

        self._on_upper_edge = False
        self._on_lower_edge = False
        self._on_left_edge = False
        self._on_right_edge = False
        self._mouse: Tuple[int, int] = (int(width / 2), int(height / 2))

    @property
    def position(self) -> Vector3:
        """The camera's position in world space."""
        return self._position

    @property
    def target(self) -> Vector3:
        """The unit view direction."""
        return self._target

    @property
    def up(self) -> Vector3:
        """The unit up direction."""
        return self._up

    @property
    def mouse_position(self) -> Tuple[int, int]:
        """The last mouse position seen by :meth:`on_input`."""
        return self._mouse

    def on_input(self, pressed_keys: Iterable[Key], mouse_position) -> bool:
        """Apply one frame of input.

        ``pressed_keys`` holds the keys currently down and ``mouse_position``
        is an ``(x, y)`` pair in window coordinates. Returns True when one of
        the W, S, A or D keys moved the camera.
        """
        keys = set(pressed_keys)
        moved = False

        if Key.W in keys:
            self._position = self._position + self._target * STEP_SCALE
            moved = True
        if Key.S in keys:
            self._position = self._position - self._target * STEP_SCALE
            moved = True
        if Key.A in keys:
            left = self._target.cross(self._up).normalized() * STEP_SCALE
            self._position = self._position + left
            moved = True
        if Key.D in keys:
            right = self._up.cross(self._target).normalized() * STEP_SCALE
            self._position = self._position + right
            moved = True
        if Key.PAGE_UP in keys:
            p = self._position
            self._position = Vector3(p.x, p.y + STEP_SCALE, p.z)
        if Key.PAGE_DOWN in keys:
            p = self._position
            self._position = Vector3(p.x, p.y - STEP_SCALE, p.z)

        x, y = mouse_position
        x, y = int(x), int(y)
        delta_x = x - self._mouse[0]
        delta_y = y - self._mouse[1]
        self._mouse = (x, y)

        self.angle_h += delta_x / 20.0
        self.angle_v += delta_y / 20.0

        if delta_x == 0:
            if x <= MARGIN:
                self._on_left_edge = True
            elif x >= self.window_width - MARGIN:
                self._on_right_edge = True
        else:
            self._on_left_edge = False
            self._on_right_edge = False

        if delta_y == 0:
            if y <= MARGIN:
                self._on_upper_edge = True
            elif y >= self.window_height - MARGIN:
                self._on_lower_edge = True
        else:
            self._on_upper_edge = False
            self._on_lower_edge = False

        return moved

    def render(self) -> None:
        """Turn the camera while the mouse rests on a window edge."""
        should_update = False

        if self._on_left_edge:
            self.angle_h -= EDGE_STEP
            should_update = True
        elif self._on_right_edge:
            self.angle_h += EDGE_STEP
            should_update = True

        if self._on_upper_edge:
            if self.angle_v > -90.0:
                self.angle_v -= EDGE_STEP
                should_update = True
        elif self._on_lower_edge:
            if self.angle_v < 90.0:
                self.angle_v += EDGE_STEP
                should_update = True

        if should_update:
            self.update()

    def update(self) -> None:
        """Recompute the view and up directions from the two angles."""
        view = Vector3(1.0, 0.0, 0.0).rotated(self.angle_h, _VERTICAL_AXIS).normalized()
        horizontal_axis = _VERTICAL_AXIS.cross(view).normalized()
        view = view.rotated(self.angle_v, horizontal_axis)

        self._target = view.normalized()
        self._up = self._target.cross(horizontal_axis).normalized()
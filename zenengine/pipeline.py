"""Composition of world, view and projection transforms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from zenengine.camera import Camera3D
from zenengine.matrix import Matrix4
from zenengine.vectors import OrthoProjInfo, PersProjInfo, Vector3


@dataclass
class Orientation3D:
    """Scale, position and rotation of an object in the world."""

    scale: Vector3 = field(default_factory=lambda: Vector3.ONE)
    position: Vector3 = field(default_factory=lambda: Vector3.ZERO)
    rotation: Vector3 = field(default_factory=lambda: Vector3.ZERO)


class Pipeline3D:
    """Builds the transformation matrices for one object and one camera.

    The camera starts with zero position, target and up vectors; a camera
    must be set before any view-dependent transform can be built.
    """

    def __init__(self) -> None:
        self._scale = Vector3(1.0, 1.0, 1.0)
        self._world_position = Vector3(0.0, 0.0, 0.0)
        self._rotation = Vector3(0.0, 0.0, 0.0)
        self._perspective: Optional[PersProjInfo] = None
        self._orthographic: Optional[OrthoProjInfo] = None
        self._camera_position = Vector3(0.0, 0.0, 0.0)
        self._camera_target = Vector3(0.0, 0.0, 0.0)
        self._camera_up = Vector3(0.0, 0.0, 0.0)

    @property
    def scale(self) -> Vector3:
        return self._scale

    @property
    def world_position(self) -> Vector3:
        return self._world_position

    @property
    def rotation(self) -> Vector3:
        return self._rotation

    def set_scale(self, x: float, y: float, z: float) -> None:
        """Set the per-axis scale factors."""
        self._scale = Vector3(x, y, z)

    def set_uniform_scale(self, s: float) -> None:
        """Scale all three axes by the same factor."""
        self.set_scale(s, s, s)

    def set_world_position(self, x: float, y: float, z: float) -> None:
        """Set the object's position in the world."""
        self._world_position = Vector3(x, y, z)

    def set_rotation(self, x: float, y: float, z: float) -> None:
        """Set the rotation angles in degrees around each axis."""
        self._rotation = Vector3(x, y, z)

    def set_perspective_projection(self, info: PersProjInfo) -> None:
        self._perspective = info

    def set_orthographic_projection(self, info: OrthoProjInfo) -> None:
        self._orthographic = info

    def set_camera(self, position: Vector3, target: Vector3, up: Vector3) -> None:
        """Set the camera position and orientation."""
        self._camera_position = position
        self._camera_target = target
        self._camera_up = up

    def use_camera(self, camera: Camera3D) -> None:
        """Take position and orientation from a camera."""
        self.set_camera(camera.position, camera.target, camera.up)

    def orient(self, orientation: Orientation3D) -> None:
        """Take scale, position and rotation from an orientation."""
        self._scale = orientation.scale
        self._world_position = orientation.position
        self._rotation = orientation.rotation

    def _perspective_matrix(self) -> Matrix4:
        if self._perspective is None:
            raise ValueError("no perspective projection has been set")
        return Matrix4.perspective_projection(self._perspective)

    def world_transform(self) -> Matrix4:
        """Return translation * rotation * scale."""
        s, r, p = self._scale, self._rotation, self._world_position
        return (
            Matrix4.translation_transform(p.x, p.y, p.z)
            * Matrix4.rotate_transform(r.x, r.y, r.z)
            * Matrix4.scale_transform(s.x, s.y, s.z)
        )

    def view_transform(self) -> Matrix4:
        """Return the camera rotation applied after moving the camera to the origin."""
        p = self._camera_position
        translation = Matrix4.translation_transform(-p.x, -p.y, -p.z)
        rotation = Matrix4.camera_transform(self._camera_target, self._camera_up)
        return rotation * translation

    def projection_transform(self) -> Matrix4:
        """Return the perspective projection matrix."""
        return self._perspective_matrix()

    def view_projection_transform(self) -> Matrix4:
        return self.projection_transform() * self.view_transform()

    def world_view_projection_transform(self) -> Matrix4:
        world = self.world_transform()
        return self.view_projection_transform() * world

    def world_view_ortho_projection_transform(self) -> Matrix4:
        """Return orthographic projection * view * world."""
        world = self.world_transform()
        view = self.view_transform()
        if self._orthographic is None:
            raise ValueError("no orthographic projection has been set")
        return Matrix4.orthographic_projection(self._orthographic) * view * world

    def world_view_transform(self) -> Matrix4:
        world = self.world_transform()
        return self.view_transform() * world

    def world_projection_transform(self) -> Matrix4:
        world = self.world_transform()
        return self._perspective_matrix() * world
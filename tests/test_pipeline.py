import pytest

from zenengine.camera import Camera3D
from zenengine.matrix import Matrix4
from zenengine.pipeline import Orientation3D, Pipeline3D
from zenengine.vectors import OrthoProjInfo, PersProjInfo, Vector3, Vector4

PERSPECTIVE = PersProjInfo(fov=60.0, width=640.0, height=480.0, z_near=1.0, z_far=100.0)
ORTHO = OrthoProjInfo(right=10.0, left=-10.0, bottom=-5.0, top=5.0, near=1.0, far=50.0)

IDENTITY_FLAT = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def _pipeline():
    pipeline = Pipeline3D()
    pipeline.set_camera(Vector3(1.0, 2.0, -3.0), Vector3(0.3, -0.2, 1.0), Vector3(0.0, 1.0, 0.0))
    pipeline.set_scale(2.0, 3.0, 4.0)
    pipeline.set_rotation(10.0, 20.0, 30.0)
    pipeline.set_world_position(5.0, -6.0, 7.0)
    pipeline.set_perspective_projection(PERSPECTIVE)
    pipeline.set_orthographic_projection(ORTHO)
    return pipeline


def test_default_world_transform_is_identity():
    world = Pipeline3D().world_transform()
    assert world.flatten() == pytest.approx(IDENTITY_FLAT, abs=1e-9)


def test_scale_setters():
    pipeline = Pipeline3D()
    pipeline.set_scale(2.0, 3.0, 4.0)
    assert pipeline.world_transform().flatten() == pytest.approx(
        Matrix4.scale_transform(2.0, 3.0, 4.0).flatten(), abs=1e-9
    )
    pipeline.set_uniform_scale(5.0)
    assert pipeline.scale == Vector3(5.0, 5.0, 5.0)


def test_world_position_moves_origin():
    pipeline = Pipeline3D()
    pipeline.set_world_position(5.0, -6.0, 7.0)
    moved = pipeline.world_transform() * Vector4(0.0, 0.0, 0.0, 1.0)
    assert tuple(moved) == pytest.approx((5.0, -6.0, 7.0, 1.0))


def test_rotation_matches_rotate_transform():
    pipeline = Pipeline3D()
    pipeline.set_rotation(10.0, 20.0, 30.0)
    assert pipeline.rotation == Vector3(10.0, 20.0, 30.0)
    assert pipeline.world_transform().flatten() == pytest.approx(
        Matrix4.rotate_transform(10.0, 20.0, 30.0).flatten(), abs=1e-9
    )


def test_view_of_canonical_camera_is_identity():
    pipeline = Pipeline3D()
    pipeline.set_camera(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0), Vector3(0.0, 1.0, 0.0))
    view = pipeline.view_transform()
    assert view.flatten() == pytest.approx(IDENTITY_FLAT, abs=1e-9)


def test_view_moves_camera_position_to_origin():
    pipeline = _pipeline()
    origin = pipeline.view_transform() * Vector4(1.0, 2.0, -3.0, 1.0)
    assert tuple(origin) == pytest.approx((0.0, 0.0, 0.0, 1.0), abs=1e-9)


def test_use_camera_copies_orientation():
    pipeline = Pipeline3D()
    pipeline.use_camera(Camera3D(640, 480))
    view = pipeline.view_transform()
    assert view.flatten() == pytest.approx(IDENTITY_FLAT, abs=1e-9)


def test_unset_camera_cannot_build_view():
    with pytest.raises(ZeroDivisionError):
        Pipeline3D().view_transform()


def test_projection_matches_info():
    pipeline = _pipeline()
    projection = pipeline.projection_transform()
    assert projection[3] == (0.0, 0.0, 1.0, 0.0)
    assert projection.flatten() == pytest.approx(
        Matrix4.perspective_projection(PERSPECTIVE).flatten(), abs=1e-9
    )


def test_missing_projection_raises():
    pipeline = Pipeline3D()
    pipeline.set_camera(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0), Vector3(0.0, 1.0, 0.0))
    with pytest.raises(ValueError):
        pipeline.projection_transform()
    with pytest.raises(ValueError):
        pipeline.world_view_ortho_projection_transform()
    with pytest.raises(ValueError):
        pipeline.world_projection_transform()


def test_composed_transforms_agree():
    pipeline = _pipeline()
    world = pipeline.world_transform()
    view = pipeline.view_transform()
    projection = pipeline.projection_transform()
    assert pipeline.view_projection_transform().flatten() == pytest.approx(
        (projection * view).flatten(), abs=1e-9
    )
    assert pipeline.world_view_projection_transform().flatten() == pytest.approx(
        (projection * view * world).flatten(), abs=1e-9
    )
    assert pipeline.world_view_transform().flatten() == pytest.approx(
        (view * world).flatten(), abs=1e-9
    )
    assert pipeline.world_projection_transform().flatten() == pytest.approx(
        (projection * world).flatten(), abs=1e-9
    )


def test_ortho_composition():
    pipeline = _pipeline()
    expected = (
        Matrix4.orthographic_projection(ORTHO)
        * pipeline.view_transform()
        * pipeline.world_transform()
    )
    result = pipeline.world_view_ortho_projection_transform()
    assert result.flatten() == pytest.approx(expected.flatten(), abs=1e-9)


def test_orient_sets_all_parts():
    orientation = Orientation3D(
        scale=Vector3(2.0, 2.0, 2.0),
        position=Vector3(1.0, 0.0, -1.0),
        rotation=Vector3(0.0, 45.0, 0.0),
    )
    oriented = Pipeline3D()
    oriented.orient(orientation)
    manual = Pipeline3D()
    manual.set_uniform_scale(2.0)
    manual.set_world_position(1.0, 0.0, -1.0)
    manual.set_rotation(0.0, 45.0, 0.0)
    assert oriented.world_transform().flatten() == pytest.approx(
        manual.world_transform().flatten(), abs=1e-9
    )
    assert oriented.world_position == Vector3(1.0, 0.0, -1.0)


def test_default_orientation_is_neutral():
    orientation = Orientation3D()
    assert orientation.scale == Vector3.ONE
    pipeline = Pipeline3D()
    pipeline.orient(orientation)
    assert pipeline.world_transform().flatten() == pytest.approx(IDENTITY_FLAT, abs=1e-9)
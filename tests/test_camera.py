from matsgame.camera import (
    ZOOMED_OUT_SCALE,
    apply_camera_zoom,
    move_following_camera,
    spawn_camera,
)
from matsgame.geometry import Quat, Transform, Vec3


def test_spawned_camera_sits_at_origin():
    camera = spawn_camera()
    assert camera.transform == Transform()


def test_zoom_sets_zoomed_out_scale():
    camera = spawn_camera()
    apply_camera_zoom(camera)
    assert camera.scale == ZOOMED_OUT_SCALE
    assert camera.scale == 2.0


def test_zoom_is_idempotent_and_keeps_transform():
    camera = spawn_camera()
    apply_camera_zoom(camera)
    apply_camera_zoom(camera)
    assert camera.scale == ZOOMED_OUT_SCALE
    assert camera.transform == Transform()


def test_zoom_changes_default_scale():
    camera = spawn_camera()
    before = camera.scale
    apply_camera_zoom(camera)
    assert camera.scale > before


def test_follow_copies_translation():
    camera = spawn_camera()
    target = Transform(translation=Vec3(5.0, -3.0, 1.0), rotation=Quat.from_rotation_z(1.0))
    move_following_camera(camera, target)
    assert camera.transform.translation == target.translation


def test_follow_keeps_camera_rotation():
    camera = spawn_camera()
    target = Transform(translation=Vec3(5.0, -3.0, 0.0), rotation=Quat.from_rotation_z(1.0))
    move_following_camera(camera, target)
    assert camera.transform.rotation == Quat.IDENTITY


def test_cameras_are_independent():
    first = spawn_camera()
    second = spawn_camera()
    move_following_camera(first, Transform.from_translation(Vec3(7.0, 8.0, 0.0)))
    assert second.transform == Transform()
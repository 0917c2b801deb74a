"""A 2D camera that zooms out and follows a target."""

from __future__ import annotations

from dataclasses import dataclass, field

from .geometry import Transform

DEFAULT_SCALE = 1.0
ZOOMED_OUT_SCALE = 2.0


@dataclass
class Camera:
    """A 2D camera with an orthographic projection scale."""

    transform: Transform = field(default_factory=Transform)
    scale: float = DEFAULT_SCALE


def spawn_camera() -> Camera:
    """Create a camera at the origin with the default scale."""
    return Camera()


def apply_camera_zoom(camera: Camera) -> None:
    """Zoom the camera out."""
    camera.scale = ZOOMED_OUT_SCALE


def move_following_camera(camera: Camera, target: Transform) -> None:
    """Place the camera at the target's position."""
    camera.transform.translation = target.translation
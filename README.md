# matsgame

This package holds the game rules for a top-down 2D space shooter. The rules
cover movement, health and the camera. Each rule is a plain function or a
small value type, so you can step a simulation yourself, script it or check
it in a test. The package has no dependencies outside the standard library.

## Installation

```
pip install matsgame
```

To run the tests:

```
pip install "matsgame[test]"
pytest
```

## Modules

### `matsgame.geometry`

- `Vec2` and `Vec3` are immutable vectors. They support `+`, `-`, unary `-`,
  and `*` with a number or with a vector of the same kind, which multiplies
  component by component. Each has `ZERO` and `ONE` constants.
- `Vec2` also has:
  - `length()`
  - `normalize()`, which raises `ValueError` for a zero-length or non-finite
    vector
  - `extend(z)`
- `Vec3` also has `truncate()`.
- `Quat` is a rotation quaternion. It has:
  - `Quat.from_rotation_z(angle)`
  - quaternion multiplication with `*`
  - `mul_vec3(vector)`
  - the constant `Quat.IDENTITY`
- `Transform` is a mutable dataclass with `translation`, `rotation` and
  `scale`. `Transform.from_translation(translation)` builds one.

### `matsgame.quantities`

`ScalarQuantity` wraps a float and `VectorQuantity` wraps a `Vec2`. Each
subclass is a distinct type. Class keywords choose which operators a subclass
supports:

- `arithmetic`: `+`, `-` and `*` with plain numbers. Scalars only.
- `additive`: `+` between two values of the same type.
- `adds_to`: the types this one can be added onto. The result has the type of
  the left-hand operand.
- `scales`: the types this one can multiply. The result has the type of the
  left-hand operand. Scalars only.
- `default`: the value used when none is given. Scalars only.

The wrapped value is available as `.value`.

### `matsgame.destruction`

- `Damage` and `Healing` each add to values of their own type.
  `Damage.consume()` returns the raw amount.
- `MaxHealth` defaults to 100.
- `CurrentHealth` defaults to 100. Adding `Healing` raises it and adding
  `Damage` lowers it. `limit(max_health)` clamps it to a maximum.
- `Health(health=100.0)` holds `max_health` and `current_health`.
  - `Health.injured(max, current)` starts below full health.
  - `is_alive()` is true unless current health is exactly zero.
  - `health + Healing(...)` returns a new value, clamped to the maximum.
  - `health += Healing(...)` is not clamped.
  - Damage works the same way with both forms and is never clamped.

### `matsgame.velocity`

- `InstantVelocity` is used up when it is applied: `consume()` returns it and
  resets it to zero.
- `MaintainedVelocity` stays in place when it is applied.
- Both have `apply_to(transform)`.
- `transform + velocity` returns a moved copy of the transform. With an
  `InstantVelocity`, this still consumes the velocity.
- `InstantAngularVelocity` and `MaintainedAngularVelocity` are scalar angular
  velocities, each with `consume()`.
- The functions `apply_instant_velocity`, `apply_maintained_velocity` and
  `apply_instant_angular_velocity(transform, angular_velocity, delta_secs)`
  update a transform in place.

### `matsgame.acceleration`

- `InstantAcceleration` can be added onto a `MaintainedVelocity`.
  `InstantAngularAcceleration` can be added onto a
  `MaintainedAngularVelocity`.
- Both have `consume()`, `limit(limit)` and `clear()`.
- `apply_linear_acceleration(velocity, acceleration, delta_secs)` and
  `apply_angular_acceleration(velocity, acceleration, delta_secs)` scale the
  acceleration by the time step, add it to the velocity, and then clear the
  acceleration.

### `matsgame.boosters`

`InstantVelocityBooster` and `InstantAccelerationBooster` are factors. You
use them as `velocity * booster` and `acceleration * booster`.

### `matsgame.camera`

- `Camera` has a `transform` and an orthographic `scale`.
- `spawn_camera()` returns a camera at the origin.
- `apply_camera_zoom(camera)` sets the scale to 2.0, which zooms out.
- `move_following_camera(camera, target)` copies the target's translation to
  the camera.

### `matsgame.player`

The `Key` enum lists the controls:

- W and S move the ship forward and back.
- Q and E move it sideways.
- A and D rotate it.

If both keys of a pair are held, that axis gives zero.

- `linear_input(pressed)` and `rotary_input(pressed)` turn a set of pressed
  keys into a direction.
- `apply_velocity_from_keyboard` and `apply_acceleration_from_keyboard` add
  that movement to a velocity or an acceleration. The movement is rotated by
  the ship's heading and scaled by `delta_secs`.
- `apply_angular_velocity_from_keyboard` and
  `apply_angular_acceleration_from_keyboard` do the same for turning.
- `spawn_player(asset_path)` returns a `Player` and a `Dummy`. The dummy is
  placed at (50, 50, 0). Both record the sprite path and a 128×128 size.

## Example

```python
from matsgame.destruction import Damage, Health
from matsgame.geometry import Transform, Vec2, Vec3
from matsgame.velocity import InstantVelocity, apply_instant_velocity

hp = Health(100.0)
hp += Damage(1.0)
print(hp.is_alive())          # True

transform = Transform.from_translation(Vec3(0.0, 0.0, 0.0))
velocity = InstantVelocity(Vec2(1.0, 1.0))
apply_instant_velocity(transform, velocity)
# transform has moved to (1, 1, 0), and velocity is now zero
```

## What this package does not do

The package contains rules only. It does not:

- open a window
- draw sprites
- load image files
- read the real keyboard
- run a game loop or a fixed-rate tick

You pass in the set of pressed keys and the frame time, and you call the
functions in the order your loop needs. The sprite paths on `Player` and
`Dummy` are only recorded, never opened.
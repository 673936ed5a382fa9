# skelengine

A small, dependency-free toolkit of 3D math types and skeletal animation assets.

## What is in it

- `skelengine.scalar` — `to_radians`, `to_degrees`, `clamp`, `lerp`, `is_zero` and
  `is_close_enough` (a tolerance scaled by the size of the values, default `0.001`),
  plus the constants `PI`, `TWO_PI` and `PI_OVER_2`.
- `skelengine.vectors` — immutable `Vector2`, `Vector3` and `Vector4`. They support
  `+`, `-`, component-wise `*` with another vector, scaling with `*` and `/` by a number,
  iteration over their components, `length`, `length_sq`, `normalized`, `dot`, `lerp`
  and `is_close`; `Vector3` also has `cross`. Constants such as `Vector3.ZERO` and
  `Vector3.UNIT_Z` are provided.
- `skelengine.matrices` — immutable `Matrix3` and `Matrix4` in the row-vector
  convention. `Matrix3()` and `Matrix4()` are the identity (also `identity()`); rows are
  reachable through `rows`, indexing and iteration. Both offer `*`, `transposed` and
  `is_close`. `Matrix3` has `transform_vector2`, `transform_vector3`, `create_scale`,
  `create_rotation` and `create_translation`. `Matrix4` has `inverted`, `translation`,
  `x_axis`, `y_axis`, `z_axis`, `scale`, `transform_vector3` (`w=1` for points, `w=0`
  for directions), `transform_vector4`, and the builders `create_scale`,
  `create_rotation_x`, `create_rotation_y`, `create_rotation_z`,
  `create_yaw_pitch_roll`, `create_from_quaternion`, `create_translation`,
  `create_look_at`, `create_ortho` and `create_perspective_fov`.
- `skelengine.quaternion` — immutable `Quaternion` (the default is the identity) with
  `from_axis_angle`, `conjugated`, `length`, `normalized`, `dot`, `lerp`, `slerp`,
  `concatenate`, `rotate`, `to_matrix` and `is_close`.
- `skelengine.jsonutil` — typed lookups on parsed JSON objects: `get_float`, `get_int`,
  `get_uint`, `get_string`, `get_bool`, `get_vector3`, `get_quaternion` and
  `find_object`. A missing or wrongly typed property raises `AssetFormatError`, a
  subclass of `ValueError`.
- `skelengine.bonetransform` — `BoneTransform`, a rotation (`rot`) and translation
  (`pos`) with `to_matrix` and `interpolate` (lerp on position, slerp on rotation).
- `skelengine.skeleton` — `Bone` (`bind_pose`, `name`, `parent`) and `Skeleton`, read
  from `itpskel` version 1 documents. A skeleton supports `len()` and indexing and has
  the properties `bones` and `global_inv_bind_poses`.
- `skelengine.animation` — `Animation`, read from `itpanim` version 2 documents, with
  the properties `num_bones`, `num_frames`, `length` and `tracks`, and
  `global_pose_at_time`, which blends the two nearest keyframes of each bone and
  combines each bone with its parent's pose.

## Installation

```
pip install skelengine
```

## Example

```python
from skelengine.animation import Animation
from skelengine.skeleton import Skeleton

skeleton = Skeleton.load("assets/character.itpskel")
walk = Animation.load("assets/walk.itpanim")

poses = walk.global_pose_at_time(skeleton, 0.25)
skin = [inv * pose for inv, pose in zip(skeleton.global_inv_bind_poses, poses)]
```

`Skeleton.load` and `Animation.load` raise `OSError` when the file cannot be opened and
`AssetFormatError` when its contents are malformed; `load_or_empty` returns an empty
asset in either case. Documents already parsed into dictionaries can be passed to
`Skeleton.from_dict` and `Animation.from_dict`.

Matrices use the row-vector convention: `a * b` applies `a` first, then `b`, and
translations live in the last row.

## What it does not do

skelengine computes transforms and poses only. It does not draw anything, open a
window, talk to a graphics device, or load meshes, textures, materials or shaders; the
skinning matrices it produces are left for the caller to hand to a renderer. It has no
command-line interface.

## Running the tests

```
pip install -e ".[test]"
pytest
```
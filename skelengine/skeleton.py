"""Bone hierarchies loaded from skeleton asset documents."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from .bonetransform import BoneTransform
from .jsonutil import (
    AssetFormatError,
    find_object,
    get_int,
    get_quaternion,
    get_string,
    get_uint,
    get_vector3,
)
from .matrices import Matrix4

_SKELETON_TYPE = "itpskel"
_SKELETON_VERSION = 1

# Parent index of a bone at the root of the hierarchy.
NO_PARENT = -1


@dataclass(frozen=True, slots=True)
class Bone:
    """One bone: its bind pose relative to its parent, its name and its parent's index."""

    bind_pose: BoneTransform = field(default_factory=BoneTransform)
    name: str = ""
    parent: int = NO_PARENT


def _read_json(path: str | os.PathLike[str]) -> Any:
    with open(path, encoding="utf-8") as file:
        try:
            return json.load(file)
        except json.JSONDecodeError as exc:
            raise AssetFormatError(f"{os.fspath(path)!s} is not valid JSON: {exc}") from exc


def _check_metadata(doc: Any, kind: str, version: int) -> None:
    if not isinstance(doc, Mapping):
        raise AssetFormatError("asset document is not a JSON object")
    metadata = find_object(doc, "metadata")
    if metadata is None:
        raise AssetFormatError("asset document has no metadata object")
    found_kind = get_string(metadata, "type")
    found_version = get_int(metadata, "version")
    if found_kind != kind or found_version != version:
        raise AssetFormatError(
            f"expected {kind} version {version}, found {found_kind} version {found_version}"
        )


class Skeleton:
    """An ordered set of bones with the inverse of each bone's global bind pose."""

    __slots__ = ("_bones", "_inv_bind_poses")

    def __init__(self, bones: Iterable[Bone] = ()) -> None:
        self._bones: tuple[Bone, ...] = tuple(bones)
        self._inv_bind_poses: tuple[Matrix4, ...] = self._compute_inv_bind_poses(self._bones)

    @staticmethod
    def _compute_inv_bind_poses(bones: tuple[Bone, ...]) -> tuple[Matrix4, ...]:
        global_poses = [Matrix4.identity()] * len(bones)
        for index, bone in enumerate(bones):
            local = bone.bind_pose.to_matrix()
            if bone.parent == NO_PARENT:
                global_poses[index] = local
            else:
                if not 0 <= bone.parent < len(bones):
                    raise ValueError(
                        f"bone {bone.name!r} has parent index {bone.parent} out of range"
                    )
                global_poses[index] = local * global_poses[bone.parent]
        return tuple(pose.inverted() for pose in global_poses)

    def __len__(self) -> int:
        return len(self._bones)

    def __getitem__(self, index: int) -> Bone:
        return self._bones[index]

    def __repr__(self) -> str:
        return f"Skeleton({[bone.name for bone in self._bones]!r})"

    @property
    def bones(self) -> tuple[Bone, ...]:
        """All bones in file order."""
        return self._bones

    @property
    def global_inv_bind_poses(self) -> tuple[Matrix4, ...]:
        """Inverse global bind pose matrix of each bone, in bone order."""
        return self._inv_bind_poses

    @classmethod
    def from_dict(cls, doc: Mapping[str, Any]) -> Skeleton:
        """Build a skeleton from a parsed skeleton document; raises AssetFormatError."""
        _check_metadata(doc, _SKELETON_TYPE, _SKELETON_VERSION)
        count = get_uint(doc, "bonecount")
        entries = doc.get("bones")
        if not isinstance(entries, list):
            raise AssetFormatError("property 'bones' is not an array")
        if len(entries) != count:
            raise AssetFormatError(
                f"bonecount is {count} but {len(entries)} bones are listed"
            )
        bones = []
        for entry in entries:
            if not isinstance(entry, Mapping):
                raise AssetFormatError("bone entry is not a JSON object")
            name = get_string(entry, "name")
            parent = get_int(entry, "parent")
            if parent != NO_PARENT and not 0 <= parent < count:
                raise AssetFormatError(f"bone {name!r} has parent index {parent} out of range")
            bind_pose = find_object(entry, "bindpose")
            if bind_pose is None:
                raise AssetFormatError(f"bone {name!r} has no bindpose object")
            transform = BoneTransform(
                rot=get_quaternion(bind_pose, "rot"),
                pos=get_vector3(bind_pose, "trans"),
            )
            bones.append(Bone(bind_pose=transform, name=name, parent=parent))
        return cls(bones)

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> Skeleton:
        """Read a skeleton file; raises OSError or AssetFormatError."""
        return cls.from_dict(_read_json(path))

    @classmethod
    def load_or_empty(cls, path: str | os.PathLike[str]) -> Skeleton:
        """Read a skeleton file, or return an empty skeleton if it cannot be read."""
        try:
            return cls.load(path)
        except (OSError, AssetFormatError):
            return cls()
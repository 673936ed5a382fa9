"""Keyframed skeletal animations loaded from animation asset documents."""

from __future__ import annotations

import json
import os
from typing import Any, Iterable, Mapping, Sequence

from .bonetransform import BoneTransform
from .jsonutil import (
    AssetFormatError,
    find_object,
    get_float,
    get_int,
    get_quaternion,
    get_string,
    get_uint,
    get_vector3,
)
from .matrices import Matrix4
from .skeleton import NO_PARENT, Skeleton

_ANIMATION_TYPE = "itpanim"
_ANIMATION_VERSION = 2


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


class Animation:
    """Per-bone keyframe tracks spread evenly over the animation's length."""

    __slots__ = ("_bone_count", "_frames", "_length", "_tracks")

    def __init__(
        self,
        bone_count: int = 0,
        frames: int = 0,
        length: float = 0.0,
        tracks: Iterable[Sequence[BoneTransform]] | None = None,
    ) -> None:
        self._bone_count = bone_count
        self._frames = frames
        self._length = length
        if tracks is None:
            self._tracks: tuple[tuple[BoneTransform, ...], ...] = tuple(
                () for _ in range(bone_count)
            )
        else:
            self._tracks = tuple(tuple(track) for track in tracks)
            if len(self._tracks) != bone_count:
                raise ValueError(
                    f"{len(self._tracks)} tracks given for {bone_count} bones"
                )

    def __repr__(self) -> str:
        return (
            f"Animation(bone_count={self._bone_count}, frames={self._frames}, "
            f"length={self._length})"
        )

    @property
    def num_bones(self) -> int:
        """Number of bones the animation drives."""
        return self._bone_count

    @property
    def num_frames(self) -> int:
        """Number of keyframes."""
        return self._frames

    @property
    def length(self) -> float:
        """Duration in seconds."""
        return self._length

    @property
    def tracks(self) -> tuple[tuple[BoneTransform, ...], ...]:
        """Keyframes of each bone; an empty track means the bone is not animated."""
        return self._tracks

    @classmethod
    def from_dict(cls, doc: Mapping[str, Any]) -> Animation:
        """Build an animation from a parsed animation document; raises AssetFormatError."""
        _check_metadata(doc, _ANIMATION_TYPE, _ANIMATION_VERSION)
        sequence = find_object(doc, "sequence")
        if sequence is None:
            raise AssetFormatError("animation document has no sequence object")
        frames = get_uint(sequence, "frames")
        length = get_float(sequence, "length")
        bone_count = get_uint(sequence, "bonecount")
        entries = sequence.get("tracks")
        if not isinstance(entries, list):
            raise AssetFormatError("property 'tracks' is not an array")

        tracks: list[tuple[BoneTransform, ...]] = [() for _ in range(bone_count)]
        for entry in entries:
            if not isinstance(entry, Mapping):
                raise AssetFormatError("track entry is not a JSON object")
            bone = get_uint(entry, "bone")
            if bone >= bone_count:
                raise AssetFormatError(f"track bone index {bone} out of range")
            transforms = entry.get("transforms")
            if not isinstance(transforms, list):
                raise AssetFormatError("property 'transforms' is not an array")
            keys = []
            for transform in transforms:
                if not isinstance(transform, Mapping):
                    raise AssetFormatError("transform entry is not a JSON object")
                keys.append(
                    BoneTransform(
                        rot=get_quaternion(transform, "rot"),
                        pos=get_vector3(transform, "trans"),
                    )
                )
            tracks[bone] = tuple(keys)
        return cls(bone_count, frames, length, tracks)

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> Animation:
        """Read an animation file; raises OSError or AssetFormatError."""
        return cls.from_dict(_read_json(path))

    @classmethod
    def load_or_empty(cls, path: str | os.PathLike[str]) -> Animation:
        """Read an animation file, or return an empty animation if it cannot be read."""
        try:
            return cls.load(path)
        except (OSError, AssetFormatError):
            return cls()

    def global_pose_at_time(self, skeleton: Skeleton, time: float) -> list[Matrix4]:
        """Global matrix of every bone at ``time``, blending the two nearest keyframes."""
        last_frame = self._frames - 1
        if last_frame <= 0:
            keyframe = 0.0
        else:
            keyframe = time / (self._length / last_frame)

        frame1 = int(keyframe)
        frame2 = frame1 + 1
        upper = max(last_frame, 0)
        frame1 = max(0, min(frame1, upper))
        frame2 = max(0, min(frame2, upper))
        f = keyframe - frame1 if frame1 != frame2 else 0.0

        poses = [Matrix4.identity()] * len(self._tracks)
        for index, track in enumerate(self._tracks):
            if track:
                blended = BoneTransform.interpolate(track[frame1], track[frame2], f)
                pose = blended.to_matrix()
            else:
                pose = Matrix4.identity()
            parent = skeleton[index].parent
            if parent != NO_PARENT:
                pose = pose * poses[parent]
            poses[index] = pose
        return poses
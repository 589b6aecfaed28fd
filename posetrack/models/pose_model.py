from enum import IntEnum
from typing import List, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator


class InvalidPoseShape(ValueError):
    """
    Raised when a pose does not carry the 17 COCO keypoints
    in canonical order.
    """


class Part(IntEnum):
    """
    COCO-17 joints. The value is the keypoint's index in Pose.keypoints.
    """

    NOSE = 0
    LEFT_EYE = 1
    RIGHT_EYE = 2
    LEFT_EAR = 3
    RIGHT_EAR = 4
    LEFT_SHOULDER = 5
    RIGHT_SHOULDER = 6
    LEFT_ELBOW = 7
    RIGHT_ELBOW = 8
    LEFT_WRIST = 9
    RIGHT_WRIST = 10
    LEFT_HIP = 11
    RIGHT_HIP = 12
    LEFT_KNEE = 13
    RIGHT_KNEE = 14
    LEFT_ANKLE = 15
    RIGHT_ANKLE = 16

    @property
    def label(self) -> str:
        """camelCase wire name, e.g. "leftShoulder"."""
        head, *rest = self.name.lower().split("_")
        return head + "".join(w.capitalize() for w in rest)

    @classmethod
    def parse(cls, value) -> "Part":
        """
        Accepts an index, a member name ("LEFT_SHOULDER" / "left_shoulder")
        or the wire label ("leftShoulder").
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid part: {value!r}")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            key = value.strip()
            if key.upper() in cls.__members__:
                return cls[key.upper()]
            for member in cls:
                if member.label == key:
                    return member
        raise ValueError(f"Invalid part: {value!r}")


NUM_PARTS = len(Part)
SHOULDERS = (Part.LEFT_SHOULDER, Part.RIGHT_SHOULDER)


class Position(BaseModel):
    x: float = 0.0
    y: float = 0.0


class Keypoint(BaseModel):
    part: Part
    score: float = 0.0
    position: Position = Field(default_factory=Position)

    @field_validator("part", mode="before")
    @classmethod
    def _parse_part(cls, v):
        return Part.parse(v)

    @field_serializer("part")
    def _dump_part(self, part: Part) -> str:
        return part.label


class Pose(BaseModel):
    score: float = 0.0
    # None until the sanitizer has run
    center: Optional[Position] = None
    keypoints: List[Keypoint] = Field(default_factory=list)


def null_pose() -> Pose:
    """
    Padding entry for the tail of a fresh gesture history.
    """
    return Pose(
        score=0.0,
        center=Position(x=0.0, y=0.0),
        keypoints=[Keypoint(part=p) for p in Part],
    )


def validate_shape(pose: Pose) -> None:
    if len(pose.keypoints) != NUM_PARTS:
        raise InvalidPoseShape(
            f"Expected {NUM_PARTS} keypoints, got {len(pose.keypoints)}"
        )
    for idx, kp in enumerate(pose.keypoints):
        if kp.part != idx:
            raise InvalidPoseShape(
                f"Keypoint {idx} is {kp.part.label}, expected {Part(idx).label}"
            )

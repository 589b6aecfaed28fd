from pydantic import BaseModel, Field
from typing import List, Tuple

from posetrack.models.pose_model import Keypoint


class Segment(BaseModel):
    a: Keypoint
    b: Keypoint


class BoundingBox(BaseModel):
    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 0.0
    max_y: float = 0.0


class PoseOverlay(BaseModel):
    # 0 = head of the history
    age: int
    keypoints: List[Keypoint] = Field(default_factory=list)
    segments: List[Segment] = Field(default_factory=list)
    box: BoundingBox = Field(default_factory=BoundingBox)


class GestureOverlay(BaseModel):
    color: str
    # Same colour for OpenCV renderers
    bgr: Tuple[int, int, int] = (0, 0, 0)
    poses: List[PoseOverlay] = Field(default_factory=list)

from pydantic import BaseModel, Field
from typing import List

from posetrack.models.gesture_model import Gesture
from posetrack.models.overlay_model import GestureOverlay
from posetrack.models.pose_model import Pose


class FrameInput(BaseModel):
    # Raw poses from the inference side, in detection order
    poses: List[Pose] = Field(default_factory=list)


class FrameResult(BaseModel):
    frame_index: int
    gestures: List[Gesture] = Field(default_factory=list)
    overlays: List[GestureOverlay] = Field(default_factory=list)

    created: int = 0
    continued: int = 0
    removed: int = 0

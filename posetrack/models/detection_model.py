from pydantic import BaseModel, Field
from typing import List, Optional

from posetrack.models.pose_model import Pose


class DetectionFrame(BaseModel):
    frame_index: int
    # Raw poses as produced by the pose source (empty when nothing found)
    poses: List[Pose] = Field(default_factory=list)


class DetectionModel(BaseModel):
    backend: str = "mediapipe_pose"
    fps: Optional[float] = None
    total_frames: Optional[int] = None
    duration_sec: Optional[float] = None
    frames: List[DetectionFrame] = Field(default_factory=list)
    error: Optional[str] = None

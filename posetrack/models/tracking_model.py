from pydantic import BaseModel, Field
from typing import List, Optional

from posetrack.models.frame_model import FrameResult
from posetrack.models.pose_model import Pose


class TrackingModel(BaseModel):
    # Per-frame sanitized detections - internal only, never exposed in JSON
    poses: List[List[Pose]] = Field(default_factory=list, exclude=True)

    frames: List[FrameResult] = Field(default_factory=list)
    total_created: int = 0
    total_removed: int = 0
    max_active: int = 0
    error: Optional[str] = None

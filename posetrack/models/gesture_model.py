from pydantic import BaseModel, Field
from typing import List

from posetrack.models.pose_model import Pose


class Gesture(BaseModel):
    """
    One tracked person.

    - history: exactly gest_n poses, most recent first
    - depth: how many leading history entries are real detections;
      the rest is null-pose padding
    - color: CSS hsl() token, constant for the life of the track
    - hue: the hue behind the token, in degrees
    """

    color: str
    hue: float = 0.0
    depth: int = 1
    history: List[Pose] = Field(default_factory=list)

    @property
    def head(self) -> Pose:
        return self.history[0]

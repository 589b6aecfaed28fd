from pydantic import BaseModel, Field

from posetrack.models.config_model import TrackerConfig


class InputModel(BaseModel):
    file_path: str
    # Keep every Nth frame of the upload
    frame_stride: int = Field(default=1, ge=1)
    config: TrackerConfig = Field(default_factory=TrackerConfig)

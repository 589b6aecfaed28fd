from pydantic import BaseModel, Field
from typing import List, Optional, Any

class VideoModel(BaseModel):
    # Decoded BGR frames - internal only, never exposed in JSON
    frames: List[Any] = Field(default_factory=list, exclude=True)
    # Source frame number of each decoded frame (differs when stride > 1)
    source_indices: List[int] = Field(default_factory=list, exclude=True)

    source_frame_count: int = 0
    frame_count: int = 0
    stride: int = 1
    fps: float = 0.0
    duration_sec: float = 0.0
    width: int = 0
    height: int = 0
    error: Optional[str] = None

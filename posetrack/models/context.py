from pydantic import BaseModel, Field
from posetrack.models.input_model import InputModel
from posetrack.models.video_model import VideoModel
from posetrack.models.detection_model import DetectionModel
from posetrack.models.tracking_model import TrackingModel

class Context(BaseModel):
    input: InputModel
    video: VideoModel = Field(default_factory=VideoModel)
    detections: DetectionModel = Field(default_factory=DetectionModel)
    tracking: TrackingModel = Field(default_factory=TrackingModel)

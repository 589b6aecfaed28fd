# posetrack/pipeline/overlay_stage.py

from typing import List

from posetrack.models.gesture_model import Gesture
from posetrack.models.overlay_model import BoundingBox, GestureOverlay, PoseOverlay, Segment
from posetrack.utils.color import hsl_to_bgr
from posetrack.utils.skeleton import adjacent_keypoints, bounding_box


def pose_overlay(pose, age, min_confidence) -> PoseOverlay:
    min_x, min_y, max_x, max_y = bounding_box(pose.keypoints)
    return PoseOverlay(
        age=age,
        keypoints=[kp for kp in pose.keypoints if kp.score >= min_confidence],
        segments=[
            Segment(a=a, b=b)
            for a, b in adjacent_keypoints(pose.keypoints, min_confidence)
        ],
        box=BoundingBox(min_x=min_x, min_y=min_y, max_x=max_x, max_y=max_y),
    )


def build_overlays(
    gestures: List[Gesture],
    min_confidence: float,
    saturation: float = 100.0,
    lightness: float = 50.0,
) -> List[GestureOverlay]:
    """
    Renderer payload: skeleton segments, visible keypoints and box for
    the first `depth` entries of each history. Padding past the depth is
    skipped, whatever the poses in front of it score.
    """
    out = []
    for gest in gestures:
        poses = [
            pose_overlay(pose, age, min_confidence)
            for age, pose in enumerate(gest.history[: gest.depth])
        ]
        out.append(
            GestureOverlay(
                color=gest.color,
                bgr=hsl_to_bgr(gest.hue, saturation, lightness),
                poses=poses,
            )
        )
    return out

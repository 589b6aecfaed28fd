import pytest

from posetrack.models.config_model import TrackerConfig
from posetrack.models.pose_model import Keypoint, Part, Pose, Position
from posetrack.utils.color import ColorPicker, sequential_draws


def build_pose(scored=None, center=None, score=0.9):
    """
    17-keypoint pose; `scored` maps Part → (score, x, y), the rest score 0.
    """
    scored = scored or {}
    keypoints = []
    for part in Part:
        s, x, y = scored.get(part, (0.0, 0.0, 0.0))
        keypoints.append(Keypoint(part=part, score=s, position=Position(x=x, y=y)))
    pose = Pose(score=score, keypoints=keypoints)
    if center is not None:
        pose.center = Position(x=center[0], y=center[1])
    return pose


def centered(x, y):
    """Sanitized-looking pose whose center is (x, y)."""
    return build_pose(
        {
            Part.LEFT_SHOULDER: (0.9, x - 10, y),
            Part.RIGHT_SHOULDER: (0.9, x + 10, y),
        },
        center=(x, y),
    )


@pytest.fixture
def config():
    return TrackerConfig(min_confidence=0.5, dist_th=100, gest_n=5, color_mode="sequential")


@pytest.fixture
def colors():
    return ColorPicker(sequential_draws())

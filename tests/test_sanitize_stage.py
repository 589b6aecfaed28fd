import math

import pytest

from conftest import build_pose
from posetrack.models.pose_model import InvalidPoseShape, Keypoint, Part, Pose, Position
from posetrack.pipeline.sanitize_stage import PoseSanitizer, sanitize_pose


def test_center_is_shoulder_midpoint():
    pose = build_pose({
        Part.LEFT_SHOULDER: (0.9, 100.0, 40.0),
        Part.RIGHT_SHOULDER: (0.8, 140.0, 60.0),
        Part.NOSE: (0.9, 500.0, 500.0),
    })
    out = sanitize_pose(pose, min_confidence=0.5)
    assert (out.center.x, out.center.y) == (120.0, 50.0)


def test_center_falls_back_to_median_without_shoulders():
    pose = build_pose({
        Part.NOSE: (0.9, 0.0, 0.0),
        Part.LEFT_HIP: (0.9, 10.0, 0.0),
        Part.RIGHT_HIP: (0.9, 20.0, 0.0),
    })
    out = sanitize_pose(pose, min_confidence=0.5)
    assert (out.center.x, out.center.y) == (10.0, 0.0)


def test_one_shoulder_is_not_enough_for_midpoint():
    pose = build_pose({
        Part.LEFT_SHOULDER: (0.9, 0.0, 0.0),
        Part.LEFT_HIP: (0.9, 30.0, 30.0),
        Part.RIGHT_HIP: (0.9, 90.0, 60.0),
    })
    out = sanitize_pose(pose, min_confidence=0.5)
    assert (out.center.x, out.center.y) == (30.0, 30.0)


def test_even_count_median_averages_central_pair():
    pose = build_pose({
        Part.NOSE: (0.9, 0.0, 0.0),
        Part.LEFT_HIP: (0.9, 10.0, 4.0),
        Part.RIGHT_HIP: (0.9, 20.0, 6.0),
        Part.LEFT_KNEE: (0.9, 100.0, 8.0),
    })
    out = sanitize_pose(pose, min_confidence=0.5)
    assert (out.center.x, out.center.y) == (15.0, 5.0)


def test_no_scored_keypoints_centers_at_origin():
    out = sanitize_pose(build_pose(), min_confidence=0.5)
    assert (out.center.x, out.center.y) == (0.0, 0.0)
    assert not math.isnan(out.center.x)


def test_exclude_drops_score_but_keeps_position():
    pose = build_pose({Part.NOSE: (0.9, 12.0, 34.0)})
    out = sanitize_pose(pose, min_confidence=0.5, exclude=[Part.NOSE])
    nose = out.keypoints[Part.NOSE]
    assert nose.score == 0.0
    assert (nose.position.x, nose.position.y) == (12.0, 34.0)


def test_low_confidence_keeps_score_but_loses_position():
    pose = build_pose({Part.LEFT_WRIST: (0.2, 12.0, 34.0)})
    out = sanitize_pose(pose, min_confidence=0.5)
    wrist = out.keypoints[Part.LEFT_WRIST]
    assert wrist.score == 0.2
    assert (wrist.position.x, wrist.position.y) == (0.0, 0.0)


def test_low_confidence_points_still_vote_in_median():
    # Scored below threshold: position zeroed, but score > 0 keeps it in
    pose = build_pose({
        Part.NOSE: (0.1, 999.0, 999.0),
        Part.LEFT_HIP: (0.9, 10.0, 10.0),
        Part.RIGHT_HIP: (0.9, 20.0, 20.0),
    })
    out = sanitize_pose(pose, min_confidence=0.5)
    assert (out.center.x, out.center.y) == (10.0, 10.0)


def test_excluded_shoulder_forces_median_path():
    pose = build_pose({
        Part.LEFT_SHOULDER: (0.9, 0.0, 0.0),
        Part.RIGHT_SHOULDER: (0.9, 100.0, 0.0),
        Part.LEFT_HIP: (0.9, 40.0, 80.0),
    })
    out = sanitize_pose(pose, min_confidence=0.5, exclude=["right_shoulder"])
    # left shoulder and left hip remain scored
    assert (out.center.x, out.center.y) == (20.0, 40.0)


def test_input_pose_is_not_mutated():
    pose = build_pose({Part.NOSE: (0.9, 5.0, 5.0), Part.LEFT_EAR: (0.1, 7.0, 7.0)})
    before = pose.model_dump()
    sanitize_pose(pose, min_confidence=0.5, exclude=[Part.NOSE])
    assert pose.model_dump() == before
    assert pose.center is None


def test_sanitize_is_idempotent():
    sanitizer = PoseSanitizer(min_confidence=0.5, exclude=[Part.LEFT_EYE])
    pose = build_pose({
        Part.LEFT_EYE: (0.9, 3.0, 3.0),
        Part.NOSE: (0.3, 9.0, 9.0),
        Part.LEFT_HIP: (0.9, 40.0, 80.0),
        Part.RIGHT_KNEE: (0.7, 60.0, 120.0),
    })
    once = sanitizer(pose)
    twice = sanitizer(once)
    assert once == twice


def test_wrong_keypoint_count_fails_fast():
    pose = build_pose()
    pose.keypoints = pose.keypoints[:16]
    with pytest.raises(InvalidPoseShape):
        sanitize_pose(pose, min_confidence=0.5)


def test_wrong_keypoint_order_fails_fast():
    pose = build_pose()
    pose.keypoints[0], pose.keypoints[1] = pose.keypoints[1], pose.keypoints[0]
    with pytest.raises(InvalidPoseShape):
        sanitize_pose(pose, min_confidence=0.5)


def test_sanitizer_from_config(config):
    sanitizer = PoseSanitizer.from_config(config.model_copy(update={"exclude": [Part.NOSE]}))
    assert sanitizer.min_confidence == 0.5
    assert sanitizer.exclude == [Part.NOSE]
    out = sanitizer.sanitize_all([build_pose({Part.NOSE: (0.9, 1.0, 1.0)})])
    assert out[0].keypoints[Part.NOSE].score == 0.0


def test_keypoints_accept_wire_labels():
    pose = Pose(
        score=0.5,
        keypoints=[{"part": p.label, "score": 0.0, "position": {"x": 0, "y": 0}} for p in Part],
    )
    assert [kp.part for kp in pose.keypoints] == list(Part)
    assert pose.model_dump()["keypoints"][5]["part"] == "leftShoulder"
    assert Keypoint(part="right_ankle").part is Part.RIGHT_ANKLE
    assert Keypoint(part=0, position=Position(x=1, y=2)).part is Part.NOSE

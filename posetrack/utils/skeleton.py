# posetrack/utils/skeleton.py

import numpy as np

from posetrack.models.pose_model import Part


# Limb pairs drawn by the overlay (PoseNet skeleton, no face links)
CONNECTED_PARTS = [
    (Part.LEFT_HIP, Part.LEFT_SHOULDER),
    (Part.LEFT_ELBOW, Part.LEFT_SHOULDER),
    (Part.LEFT_ELBOW, Part.LEFT_WRIST),
    (Part.LEFT_HIP, Part.LEFT_KNEE),
    (Part.LEFT_KNEE, Part.LEFT_ANKLE),
    (Part.RIGHT_HIP, Part.RIGHT_SHOULDER),
    (Part.RIGHT_ELBOW, Part.RIGHT_SHOULDER),
    (Part.RIGHT_ELBOW, Part.RIGHT_WRIST),
    (Part.RIGHT_HIP, Part.RIGHT_KNEE),
    (Part.RIGHT_KNEE, Part.RIGHT_ANKLE),
    (Part.LEFT_SHOULDER, Part.RIGHT_SHOULDER),
    (Part.LEFT_HIP, Part.RIGHT_HIP),
]


def adjacent_keypoints(keypoints, min_confidence):
    """
    Keypoint pairs of CONNECTED_PARTS where both ends score
    at least min_confidence.
    """
    pairs = []
    for a, b in CONNECTED_PARTS:
        ka, kb = keypoints[a], keypoints[b]
        if ka.score < min_confidence or kb.score < min_confidence:
            continue
        pairs.append((ka, kb))
    return pairs


def bounding_box(keypoints):
    """
    (min_x, min_y, max_x, max_y) over every keypoint position,
    scored or not.
    """
    if not keypoints:
        return 0.0, 0.0, 0.0, 0.0

    xy = np.array([[kp.position.x, kp.position.y] for kp in keypoints], float)
    lo = xy.min(axis=0)
    hi = xy.max(axis=0)
    return float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1])

import cv2

from posetrack.models.pose_model import Keypoint, Part, Pose, Position

# MediaPipe Pose landmark index for each COCO joint
MP_INDEX = {
    Part.NOSE: 0,
    Part.LEFT_EYE: 2,
    Part.RIGHT_EYE: 5,
    Part.LEFT_EAR: 7,
    Part.RIGHT_EAR: 8,
    Part.LEFT_SHOULDER: 11,
    Part.RIGHT_SHOULDER: 12,
    Part.LEFT_ELBOW: 13,
    Part.RIGHT_ELBOW: 14,
    Part.LEFT_WRIST: 15,
    Part.RIGHT_WRIST: 16,
    Part.LEFT_HIP: 23,
    Part.RIGHT_HIP: 24,
    Part.LEFT_KNEE: 25,
    Part.RIGHT_KNEE: 26,
    Part.LEFT_ANKLE: 27,
    Part.RIGHT_ANKLE: 28,
}


def open_estimator(model_complexity=1):
    # Imported here so the live tracking API runs without the model stack
    try:
        import mediapipe as mp
    except ImportError as e:
        raise RuntimeError("MediaPipe is not installed; video analysis is unavailable") from e

    return mp.solutions.pose.Pose(
        static_image_mode=False,
        model_complexity=model_complexity,
        smooth_landmarks=True,
    )


def to_pose(landmarks, width, height) -> Pose:
    """
    33 normalized MediaPipe landmarks → COCO-17 Pose in pixels.
    Visibility is used as the keypoint score.
    """
    keypoints = []
    for part in Part:
        p = landmarks[MP_INDEX[part]]
        keypoints.append(
            Keypoint(
                part=part,
                score=float(p.visibility),
                position=Position(x=float(p.x) * width, y=float(p.y) * height),
            )
        )
    score = sum(kp.score for kp in keypoints) / len(keypoints)
    return Pose(score=score, keypoints=keypoints)


def extract(estimator, frame):
    """
    Returns the poses found in one BGR frame (MediaPipe finds at most one).
    """
    h, w = frame.shape[:2]
    # Convert BGR → RGB for mediapipe
    rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
    result = estimator.process(rgb)

    if not result.pose_landmarks:
        return []

    return [to_pose(result.pose_landmarks.landmark, w, h)]

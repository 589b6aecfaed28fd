# posetrack/pipeline/sanitize_stage.py
"""
Pose sanitizer.

Fixed pipeline, applied once per raw pose before tracking:
  1) exclude      → listed joints get score 0 (position untouched)
  2) zero         → joints scoring below min_confidence get position (0,0)
                    (score untouched)
  3) center       → shoulder midpoint when both shoulders score > 0,
                    else per-axis median over joints scoring > 0,
                    else (0,0)

The input pose is never modified; a new Pose is returned.
Running the sanitizer twice with the same parameters is a no-op.
"""

from posetrack.models.context import Context
from posetrack.models.pose_model import SHOULDERS, Part, Pose, Position, validate_shape
from posetrack.utils.logger import get_logger
from posetrack.utils.stats import median

logger = get_logger("sanitize")


def _center(pose: Pose, median_mode: str) -> Position:
    left, right = (pose.keypoints[p] for p in SHOULDERS)
    if left.score > 0 and right.score > 0:
        return Position(
            x=left.position.x + (right.position.x - left.position.x) / 2,
            y=left.position.y + (right.position.y - left.position.y) / 2,
        )

    scored = [kp.position for kp in pose.keypoints if kp.score > 0]
    if not scored:
        return Position(x=0.0, y=0.0)

    return Position(
        x=median([p.x for p in scored], median_mode),
        y=median([p.y for p in scored], median_mode),
    )


def sanitize_pose(pose: Pose, min_confidence: float, exclude=(), median_mode="standard") -> Pose:
    validate_shape(pose)
    out = pose.model_copy(deep=True)

    for part in exclude:
        out.keypoints[Part.parse(part)].score = 0.0

    for kp in out.keypoints:
        if kp.score < min_confidence:
            kp.position = Position(x=0.0, y=0.0)

    out.center = _center(out, median_mode)
    return out


class PoseSanitizer:
    """
    sanitize_pose() bound to one session's constants.
    """

    def __init__(self, min_confidence=0.5, exclude=(), median_mode="standard"):
        self.min_confidence = min_confidence
        self.exclude = [Part.parse(p) for p in exclude]
        self.median_mode = median_mode

    @classmethod
    def from_config(cls, config):
        return cls(config.min_confidence, config.exclude, config.median_mode)

    def __call__(self, pose: Pose) -> Pose:
        return sanitize_pose(pose, self.min_confidence, self.exclude, self.median_mode)

    def sanitize_all(self, poses):
        return [self(p) for p in poses]


def run(ctx: Context) -> Context:
    """
    Sanitize every detected pose of every frame into ctx.tracking.poses.
    """
    try:
        if ctx.detections.error:
            ctx.tracking.error = f"No detections: {ctx.detections.error}"
            return ctx

        sanitizer = PoseSanitizer.from_config(ctx.input.config)
        ctx.tracking.poses = [
            sanitizer.sanitize_all(frame.poses) for frame in ctx.detections.frames
        ]
        logger.info(
            "sanitized %d poses over %d frames",
            sum(len(p) for p in ctx.tracking.poses),
            len(ctx.tracking.poses),
        )

    except Exception as e:
        ctx.tracking.error = str(e)

    return ctx

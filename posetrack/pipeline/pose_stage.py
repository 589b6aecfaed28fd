from posetrack.models.context import Context
from posetrack.models.detection_model import DetectionFrame
from posetrack.utils import mediapipe_pose
from posetrack.utils.logger import get_logger

logger = get_logger("pose")


def run(ctx: Context) -> Context:
    """
    Pose source for uploaded videos:
    - One DetectionFrame per decoded frame, even when nothing is found.
    - Poses stay raw here; the sanitizer runs next.
    """
    try:
        frames = ctx.video.frames
        if not frames:
            ctx.detections.error = ctx.video.error or "No video frames provided"
            return ctx

        estimator = mediapipe_pose.open_estimator(model_complexity=1)

        results_list = []
        try:
            for src_idx, frame in zip(ctx.video.source_indices, frames):
                results_list.append(
                    DetectionFrame(
                        frame_index=src_idx,
                        poses=mediapipe_pose.extract(estimator, frame),
                    )
                )
        finally:
            estimator.close()

        ctx.detections.frames = results_list
        ctx.detections.total_frames = len(results_list)
        ctx.detections.fps = ctx.video.fps
        ctx.detections.duration_sec = ctx.video.duration_sec
        ctx.detections.error = None
        logger.info(
            "pose found in %d/%d frames",
            sum(1 for f in results_list if f.poses),
            len(results_list),
        )

    except Exception as e:
        ctx.detections.error = str(e)

    return ctx

import cv2
from posetrack.models.context import Context
from posetrack.utils.logger import get_logger

logger = get_logger("video")


def run(ctx: Context) -> Context:
    try:
        cap = cv2.VideoCapture(ctx.input.file_path)

        if not cap.isOpened():
            ctx.video.error = f"Unable to open file: {ctx.input.file_path}"
            return ctx

        fps = cap.get(cv2.CAP_PROP_FPS)
        width = int(cap.get(cv2.CAP_PROP_FRAME_WIDTH))
        height = int(cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
        stride = ctx.input.frame_stride

        frames = []
        indices = []
        idx = 0
        while True:
            ret, frame = cap.read()
            if not ret:
                break
            if idx % stride == 0:
                frames.append(frame)
                indices.append(idx)
            idx += 1

        cap.release()

        ctx.video.frames = frames
        ctx.video.source_indices = indices
        ctx.video.source_frame_count = idx
        ctx.video.frame_count = len(frames)
        ctx.video.stride = stride
        ctx.video.fps = fps
        ctx.video.width = width
        ctx.video.height = height
        ctx.video.duration_sec = idx / fps if fps > 0 else 0.0
        logger.info("decoded %d/%d frames (stride %d)", len(frames), idx, stride)

    except Exception as e:
        ctx.video.error = str(e)

    return ctx

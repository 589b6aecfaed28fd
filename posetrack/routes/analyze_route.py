import os
import uuid
from typing import Optional

from fastapi import APIRouter, File, HTTPException, UploadFile
from pydantic import ValidationError

from posetrack.models.config_model import load_config, with_overrides
from posetrack.models.context import Context

from posetrack.pipeline.video_stage import run as video_stage
from posetrack.pipeline.pose_stage import run as pose_stage
from posetrack.pipeline.sanitize_stage import run as sanitize_stage
from posetrack.pipeline.tracking_stage import run as tracking_stage

router = APIRouter()


@router.post("/analyze")
def analyze(
    file: UploadFile = File(...),
    frame_stride: int = 1,
    min_confidence: Optional[float] = None,
    dist_th: Optional[float] = None,
    gest_n: Optional[int] = None,
):
    """
    Offline replay: decode the upload, detect poses per frame and run
    them through a fresh tracker.
    Sync handler: runs in the threadpool, off the event loop.
    """
    overrides = {
        k: v
        for k, v in dict(min_confidence=min_confidence, dist_th=dist_th, gest_n=gest_n).items()
        if v is not None
    }
    try:
        config = with_overrides(load_config(), overrides)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))

    suffix = ".mp4" if (file.filename or "").lower().endswith(".mp4") else ""
    tmp_path = f"/tmp/posetrack_{uuid.uuid4()}{suffix}"

    with open(tmp_path, "wb") as out:
        out.write(file.file.read())

    ctx = Context(
        input=dict(
            file_path=tmp_path,
            frame_stride=max(1, frame_stride),
            config=config,
        )
    )

    try:
        ctx = video_stage(ctx)
        ctx = pose_stage(ctx)
        ctx = sanitize_stage(ctx)
        ctx = tracking_stage(ctx)
    finally:
        os.remove(tmp_path)

    return ctx.model_dump(
        exclude={
            "detections": {"frames": True},
        },
        exclude_none=True,
    )

from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from posetrack.models.config_model import load_config, with_overrides
from posetrack.models.frame_model import FrameInput, FrameResult
from posetrack.pipeline.session_store import store

router = APIRouter(prefix="/sessions")


def _tracker(session_id: str):
    try:
        return store.get(session_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")


# async handlers keep every tracker call on the event loop thread
@router.post("")
async def open_session(overrides: Optional[dict] = None):
    """
    Start a live session. Body (optional) overrides fields of the
    configured defaults, e.g. {"dist_th": 80}.
    """
    try:
        config = with_overrides(load_config(), overrides)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))

    session_id = store.create(config)
    return {"session_id": session_id, "config": config.model_dump()}


@router.post("/{session_id}/frames", response_model=FrameResult)
async def push_frame(session_id: str, frame: FrameInput):
    return _tracker(session_id).process(frame.poses)


@router.get("/{session_id}")
async def session_state(session_id: str):
    tracker = _tracker(session_id)
    return {
        "session_id": session_id,
        "frame_index": tracker.frame_index,
        "gestures": [g.model_dump() for g in tracker.gestures],
    }


@router.post("/{session_id}/reset")
async def reset_session(session_id: str):
    _tracker(session_id).reset()
    return {"session_id": session_id, "status": "reset"}


@router.delete("/{session_id}")
async def close_session(session_id: str):
    _tracker(session_id)
    store.drop(session_id)
    return {"session_id": session_id, "status": "closed"}

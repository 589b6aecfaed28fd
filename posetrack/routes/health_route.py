from fastapi import APIRouter

from posetrack.pipeline.session_store import store

router = APIRouter()

@router.get("/")
def health():
    return {"status": "ok", "service": "posetrack", "sessions": len(store)}

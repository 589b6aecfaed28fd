from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from posetrack.models.pose_model import InvalidPoseShape
from posetrack.routes.analyze_route import router as analyze_router
from posetrack.routes.health_route import router as health_router
from posetrack.routes.track_route import router as track_router
from posetrack.utils.logger import get_logger

logger = get_logger("api")

app = FastAPI(
    title="posetrack",
    version="1.0.0"
)


@app.exception_handler(InvalidPoseShape)
async def invalid_pose_shape(request: Request, exc: InvalidPoseShape):
    logger.warning("%s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


app.include_router(health_router, tags=["health"])
# Live per-frame tracking
app.include_router(track_router, tags=["tracking"])
# Offline replay over an uploaded video
app.include_router(analyze_router, tags=["analysis"])

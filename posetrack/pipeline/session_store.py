# posetrack/pipeline/session_store.py

import uuid
from typing import Dict

from posetrack.models.config_model import TrackerConfig
from posetrack.pipeline.tracking_stage import GestureTracker
from posetrack.utils.logger import get_logger

logger = get_logger("sessions")


class SessionStore:
    """
    In-process live tracking sessions, keyed by uuid4 hex.
    Nothing is persisted; a dropped session is gone.
    """

    def __init__(self):
        self._trackers: Dict[str, GestureTracker] = {}

    def __len__(self):
        return len(self._trackers)

    def __contains__(self, session_id):
        return session_id in self._trackers

    def create(self, config: TrackerConfig) -> str:
        session_id = uuid.uuid4().hex
        self._trackers[session_id] = GestureTracker(config)
        logger.info("session %s opened (%d active)", session_id, len(self._trackers))
        return session_id

    def get(self, session_id) -> GestureTracker:
        # KeyError for unknown ids
        return self._trackers[session_id]

    def drop(self, session_id) -> None:
        del self._trackers[session_id]
        logger.info("session %s closed (%d active)", session_id, len(self._trackers))

    def clear(self):
        self._trackers.clear()


store = SessionStore()

# posetrack/pipeline/tracking_stage.py
"""
Gesture tracking: frame-to-frame pose grouping.

Per frame:
  1) candidates : every (gesture, pose) pair whose head-center distance
                  is < dist_th, gestures outer / poses inner
  2) assignment : stable ascending sort by distance, walk once, accept a
                  pair when neither side is claimed yet
  3) continue   : matched gesture gets the pose at the head, oldest dropped
  4) remove     : unmatched gestures are left out of the new list
  5) create     : unmatched poses start a gesture padded with null poses

Claim sets live only inside one call. Inputs are never mutated; the
active list is replaced as a whole.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from posetrack.models.context import Context
from posetrack.models.frame_model import FrameResult
from posetrack.models.gesture_model import Gesture
from posetrack.models.pose_model import Pose, null_pose
from posetrack.pipeline.overlay_stage import build_overlays
from posetrack.pipeline.sanitize_stage import PoseSanitizer
from posetrack.utils.color import ColorPicker
from posetrack.utils.logger import get_logger

logger = get_logger("tracking")

# (distance, gesture index, pose index)
Candidate = Tuple[float, int, int]


@dataclass
class MatchOutcome:
    gestures: List[Gesture]
    pairs: List[Candidate] = field(default_factory=list)
    created: int = 0
    removed: int = 0

    @property
    def continued(self) -> int:
        return len(self.pairs)


# -----------------------------------------------------
# Candidates & assignment
# -----------------------------------------------------
def candidate_pairs(gestures, poses, dist_th) -> List[Candidate]:
    if not gestures or not poses:
        return []

    heads = np.array([[g.head.center.x, g.head.center.y] for g in gestures], float)
    centers = np.array([[p.center.x, p.center.y] for p in poses], float)

    # dist[g, p]
    dist = np.hypot(
        heads[:, None, 0] - centers[None, :, 0],
        heads[:, None, 1] - centers[None, :, 1],
    )

    out = []
    for g in range(len(gestures)):
        for p in range(len(poses)):
            d = float(dist[g, p])
            if d < dist_th:
                out.append((d, g, p))
    return out


def greedy_assign(candidates: List[Candidate]) -> List[Candidate]:
    """
    Closest-first greedy matching. sorted() is stable, so equal distances
    keep encounter order.
    """
    done_g = set()
    done_p = set()
    pairs = []

    for d, g, p in sorted(candidates, key=lambda c: c[0]):
        if g in done_g or p in done_p:
            continue
        pairs.append((d, g, p))
        done_g.add(g)
        done_p.add(p)

    return pairs


# -----------------------------------------------------
# Track update
# -----------------------------------------------------
def new_gesture(pose: Pose, gest_n: int, colors: ColorPicker) -> Gesture:
    color, hue = colors.pick()
    history = [pose] + [null_pose() for _ in range(gest_n - 1)]
    return Gesture(color=color, hue=hue, depth=1, history=history)


def match_poses(gestures, poses, dist_th, gest_n, colors: ColorPicker) -> MatchOutcome:
    """
    One frame of tracking over sanitized poses. Returns the new active
    list: surviving gestures in their previous order, then new ones in
    pose order.
    """
    missing = [p for p in poses if p.center is None]
    if missing:
        raise ValueError("Poses must be sanitized before tracking (center is None)")

    candidates = candidate_pairs(gestures, poses, dist_th)
    pairs = greedy_assign(candidates)
    logger.debug("%d candidates, %d pairs: %s", len(candidates), len(pairs), pairs)

    matched = {g: p for _, g, p in pairs}
    claimed_poses = set(matched.values())

    out: List[Gesture] = []
    for g, gest in enumerate(gestures):
        if g not in matched:
            continue
        history = [poses[matched[g]]] + list(gest.history[: gest_n - 1])
        depth = min(gest.depth + 1, gest_n)
        out.append(gest.model_copy(update={"history": history, "depth": depth}))

    created = 0
    for p, pose in enumerate(poses):
        if p in claimed_poses:
            continue
        out.append(new_gesture(pose, gest_n, colors))
        created += 1

    return MatchOutcome(
        gestures=out,
        pairs=pairs,
        created=created,
        removed=len(gestures) - len(matched),
    )


class GestureTracker:
    """
    Owns the active gesture list of one session.

    update(poses)      → tracking step over sanitized poses
    process(raw_poses) → sanitize, then update
    """

    def __init__(self, config, colors: ColorPicker = None):
        self.config = config
        self.colors = colors or ColorPicker.from_config(config)
        self.sanitizer = PoseSanitizer.from_config(config)
        self.frame_index = 0
        self._gestures: List[Gesture] = []

    @property
    def gestures(self) -> List[Gesture]:
        return list(self._gestures)

    def reset(self):
        self._gestures = []
        self.frame_index = 0

    def update(self, poses) -> MatchOutcome:
        outcome = match_poses(
            self._gestures,
            poses,
            self.config.dist_th,
            self.config.gest_n,
            self.colors,
        )
        self._gestures = outcome.gestures
        self.frame_index += 1

        if outcome.created or outcome.removed:
            logger.info(
                "frame %d: +%d gestures, -%d gestures, %d active",
                self.frame_index,
                outcome.created,
                outcome.removed,
                len(self._gestures),
            )
        return outcome

    def process(self, raw_poses) -> FrameResult:
        outcome = self.update(self.sanitizer.sanitize_all(raw_poses))
        return frame_result(self.frame_index - 1, outcome, self.config)


def frame_result(frame_index, outcome: MatchOutcome, config) -> FrameResult:
    return FrameResult(
        frame_index=frame_index,
        gestures=outcome.gestures,
        overlays=build_overlays(
            outcome.gestures,
            config.min_confidence,
            config.saturation,
            config.lightness,
        ),
        created=outcome.created,
        continued=outcome.continued,
        removed=outcome.removed,
    )


def run(ctx: Context) -> Context:
    """
    Replays the sanitized detections of ctx.tracking.poses through a
    fresh tracker, frame by frame.
    """
    try:
        if ctx.tracking.error:
            return ctx

        config = ctx.input.config
        tracker = GestureTracker(config)
        frames = []

        # Report source frame numbers, not tracker steps
        for det, poses in zip(ctx.detections.frames, ctx.tracking.poses):
            outcome = tracker.update(poses)
            frames.append(frame_result(det.frame_index, outcome, config))
            ctx.tracking.total_created += outcome.created
            ctx.tracking.total_removed += outcome.removed
            ctx.tracking.max_active = max(ctx.tracking.max_active, len(outcome.gestures))

        ctx.tracking.frames = frames
        ctx.tracking.error = None
        logger.info(
            "tracked %d frames: %d gestures created, peak %d active",
            len(frames),
            ctx.tracking.total_created,
            ctx.tracking.max_active,
        )

    except Exception as e:
        ctx.tracking.error = str(e)

    return ctx

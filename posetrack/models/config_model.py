import os
from pathlib import Path
from typing import List, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from posetrack.models.pose_model import Part

CONFIG_PATH = Path(__file__).resolve().parents[1] / "config" / "tracker.yaml"
CONFIG_ENV = "POSETRACK_CONFIG"


class TrackerConfig(BaseModel):
    """
    Constants for one tracking session.

    - min_confidence: keypoints below this lose their position
    - dist_th: max head-center distance for a track/pose match (exclusive)
    - gest_n: history depth of every gesture
    - exclude: joints whose score is forced to 0 before tracking
    - median_mode: "standard" or "legacy" fallback-center median
    - color_mode: "random" (seedable) or "sequential" golden-angle draws
    """

    # Unknown keys raise
    model_config = ConfigDict(extra="forbid")

    min_confidence: float = Field(default=0.5, ge=0.0, le=1.0)
    dist_th: float = Field(default=100.0, gt=0.0)
    gest_n: int = Field(default=5, ge=1)
    exclude: List[Part] = Field(default_factory=list)
    median_mode: Literal["standard", "legacy"] = "standard"
    color_mode: Literal["random", "sequential"] = "random"
    saturation: float = Field(default=100.0, ge=0.0, le=100.0)
    lightness: float = Field(default=50.0, ge=0.0, le=100.0)
    seed: Optional[int] = None

    @field_validator("exclude", mode="before")
    @classmethod
    def _parse_exclude(cls, v):
        if v is None:
            return []
        return [Part.parse(p) for p in v]


def load_config(path=None) -> TrackerConfig:
    """
    Explicit path > $POSETRACK_CONFIG > bundled tracker.yaml.
    A missing file gives defaults; bad values raise ValidationError.
    """
    p = Path(path or os.getenv(CONFIG_ENV) or CONFIG_PATH).expanduser()
    if not p.exists():
        return TrackerConfig()

    with open(p, "r") as f:
        raw = yaml.safe_load(f) or {}

    return TrackerConfig(**(raw.get("tracker", raw) or {}))


def with_overrides(config: TrackerConfig, overrides=None) -> TrackerConfig:
    """
    Re-validated copy of config with the given fields replaced.
    """
    return TrackerConfig(**{**config.model_dump(), **(overrides or {})})

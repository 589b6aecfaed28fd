# posetrack/utils/color.py

import colorsys
import itertools

import numpy as np

GOLDEN_ANGLE_DEG = 137.508


def sequential_draws(start=0):
    """
    Draw source yielding start, start+1, ... so successive tracks are
    one golden angle apart.
    """
    counter = itertools.count(start)
    return lambda: float(next(counter))


def random_draws(seed=None):
    rng = np.random.default_rng(seed)
    return lambda: float(rng.random())


def golden_hue(draw: float) -> float:
    return float((draw * GOLDEN_ANGLE_DEG) % 360.0)


def hsl_token(hue, saturation=100.0, lightness=50.0) -> str:
    return f"hsl({hue:.3f},{saturation:g}%,{lightness:g}%)"


def hsl_to_bgr(hue, saturation=100.0, lightness=50.0):
    """
    HSL (deg, %, %) → OpenCV BGR tuple of ints.
    """
    r, g, b = colorsys.hls_to_rgb(hue / 360.0, lightness / 100.0, saturation / 100.0)
    return int(round(b * 255)), int(round(g * 255)), int(round(r * 255))


class ColorPicker:
    """
    Hands out gesture colors.

    draw: zero-argument callable returning a float; defaults to a fresh
    numpy generator. Inject sequential_draws() or random_draws(seed)
    for reproducible hues.
    """

    def __init__(self, draw=None, saturation=100.0, lightness=50.0):
        self._draw = draw or random_draws()
        self.saturation = saturation
        self.lightness = lightness

    @classmethod
    def from_config(cls, config):
        if config.color_mode == "sequential":
            draw = sequential_draws()
        else:
            draw = random_draws(config.seed)
        return cls(draw, saturation=config.saturation, lightness=config.lightness)

    def pick(self):
        """Returns (token, hue)."""
        hue = golden_hue(self._draw())
        return hsl_token(hue, self.saturation, self.lightness), hue

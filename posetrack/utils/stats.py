# posetrack/utils/stats.py

import numpy as np


# -----------------------------------------------------------
# MEDIAN (FALLBACK POSE CENTER)
# -----------------------------------------------------------

def median(values, mode="standard"):
    """
    Median of a 1-D sequence.

    mode="standard": middle element for odd counts, mean of the two
    central elements for even counts.

    mode="legacy": browser-demo indexing on the ascending sort,
      odd  n → xs[(n+1)//2]
      even n → (xs[n//2] + xs[n//2 + 1]) / 2
    Reads past the end are clamped to the last element so the result
    stays finite.

    Empty input → 0.0.
    """
    xs = np.sort(np.asarray(values, dtype=float))
    n = len(xs)
    if n == 0:
        return 0.0

    if mode == "standard":
        return float(np.median(xs))
    if mode != "legacy":
        raise ValueError(f"Unknown median mode: {mode}")

    last = n - 1
    if n % 2 == 0:
        a = xs[min(n // 2, last)]
        b = xs[min(n // 2 + 1, last)]
        return float((a + b) / 2.0)
    return float(xs[min((n + 1) // 2, last)])

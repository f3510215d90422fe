# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-20
# Description: similarity.py
# -----------------------------------------------------------------------------
import math
from typing import Any

import numpy as np


def cosine_similarity(a: Any, b: Any) -> float:
    """
    Cosine similarity of two equal-length vectors.

    Returns 0.0 instead of raising when either side is missing, malformed,
    of a different length, or a zero vector.
    """
    if a is None or b is None:
        return 0.0

    try:
        va = np.asarray(a, dtype=np.float64)
        vb = np.asarray(b, dtype=np.float64)
    except (TypeError, ValueError):
        return 0.0

    if va.ndim != 1 or vb.ndim != 1 or va.shape != vb.shape:
        return 0.0

    norm_a = float(np.linalg.norm(va))
    norm_b = float(np.linalg.norm(vb))
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    score = float(np.dot(va, vb)) / (norm_a * norm_b)
    if not math.isfinite(score):
        return 0.0
    return score

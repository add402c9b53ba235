# stats.py — Derived views of replicated output: envelope and moving average.
import numpy as np


def extremes(all_data):
    """Per output and iteration, min and max across replications.

    all_data has shape (outputs, iters, reps); the result has shape
    (outputs, iters, 2) with minima in [..., 0] and maxima in [..., 1].
    """
    return np.stack([all_data.min(axis=2), all_data.max(axis=2)], axis=2)


def mavg(v, w):
    """Trailing moving average of a 1D series.

    Element i is the mean of v[i:i+w+1], so the result has len(v) - w
    elements and w == 0 returns the series unchanged.
    """
    v = np.asarray(v, dtype=float)
    if w < 0 or w >= v.size:
        raise ValueError(f"window {w} out of range for series of length {v.size}")
    c = np.cumsum(np.concatenate(([0.0], v)))
    return (c[w + 1:] - c[:-w - 1]) / (w + 1)


def replication_mavg(all_data, w):
    """Moving average of the cross-replication mean, shape (outputs, iters - w)."""
    means = all_data.mean(axis=2)
    return np.vstack([mavg(m, w) for m in means])

"""Shared fixtures: replication files on disk and a headless matplotlib."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest


def write_run(path, data, sep=" "):
    with open(path, "w") as f:
        for row in np.atleast_2d(data):
            f.write(sep.join(f"{v:.6g}" for v in row) + "\n")


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def runs(tmp_path):
    """Three replication files, 10 iterations x 2 outputs each.

    Returns (folder, raw) where raw has shape (3, 10, 2) in file order.
    """
    rng = np.random.default_rng(7)
    raw = np.round(rng.uniform(0, 100, size=(3, 10, 2)), 3)
    for k in range(3):
        write_run(tmp_path / f"run{k + 1}.txt", raw[k])
    (tmp_path / "notes.md").write_text("not a run\n")
    return tmp_path, raw

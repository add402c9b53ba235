# loading.py — Find replication files and read them into one (output, iteration, replication) array.
import glob, os
import numpy as np
import pandas as pd

from .errors import DiscoveryError, BoundsError, DataError

# Comma or semicolon (with optional padding), otherwise runs of whitespace/tabs.
_SEP = r"\s*[,;]\s*|\s+"


def discover_files(folder, pattern):
    """Return the sorted paths in `folder` matching the shell-style `pattern`."""
    paths = sorted(p for p in glob.glob(os.path.join(folder, pattern)) if os.path.isfile(p))
    if not paths:
        raise DiscoveryError(f"No files found matching '{pattern}' in '{folder}'.")
    return paths


def read_matrix(path):
    """Read a delimited numeric text file as a 2D float array (rows = iterations).

    Every cell must be numeric; short rows, long rows and text cells raise
    DataError naming the file.
    """
    name = os.path.basename(path)
    try:
        df = pd.read_csv(path, sep=_SEP, engine="python", header=None)
    except ValueError as e:
        raise DataError(f"{name}: {e}") from e
    data = df.apply(pd.to_numeric, errors="coerce").to_numpy(dtype=float)
    bad = np.isnan(data).any(axis=1)
    if bad.any():
        raise DataError(f"{name}: non-numeric or missing value in row {int(np.argmax(bad)) + 1}")
    return data


def load_runs(files, num_outputs, iters):
    """Stack every file into an array of shape (num_outputs, iters, len(files)).

    Each file must have at least `iters` rows and `num_outputs` columns;
    anything beyond that is ignored.
    """
    all_data = np.zeros((num_outputs, iters, len(files)))
    for i, path in enumerate(files):
        data = read_matrix(path)
        rows, cols = data.shape
        if rows < iters or cols < num_outputs:
            raise BoundsError(
                f"{os.path.basename(path)} has shape ({rows}, {cols}), "
                f"need at least ({iters}, {num_outputs})")
        all_data[:, :, i] = data[:iters, :num_outputs].T
    return all_data

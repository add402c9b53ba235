# output_plot.py — Plot time-series output from replicated simulation runs:
# superimposed traces, min/max envelope, or moving average of the mean.
#
# Usage:
#   from simout import output_plot
#   d, h = output_plot("runs", "stats*.txt", outputs=["S", "I", "R"], type="f", layout=[1, 2])
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from numbers import Integral, Real
from typing import NamedTuple

import numpy as np
import matplotlib.pyplot as plt

from .errors import ConfigError
from .loading import discover_files, read_matrix, load_runs
from .stats import extremes, replication_mavg

DEFAULT_COLORS = ("b", "r", "g", "c", "m", "y", "k")


@dataclass(frozen=True)
class Superimposed:
    pass


@dataclass(frozen=True)
class Filled:
    pass


@dataclass(frozen=True)
class MovingAverage:
    window: int


@dataclass(frozen=True)
class PlotConfig:
    outputs: tuple
    mode: object
    layout: tuple
    scale: np.ndarray
    iters: int
    colors: tuple

    @property
    def num_outputs(self):
        return len(self.outputs)

    def groups(self):
        """Yield (first, last + 1) output index ranges, one per figure."""
        i1 = 0
        for n in self.layout:
            yield i1, i1 + n
            i1 += n


class PlotResult(NamedTuple):
    data: np.ndarray
    figures: list


def parse_output_names(outputs):
    """Turn an output count or a sequence of names into a tuple of names."""
    if isinstance(outputs, Integral) and not isinstance(outputs, bool):
        if outputs <= 0:
            raise ConfigError(f"Number of outputs must be positive, got {outputs}")
        return tuple(f"o{i}" for i in range(1, outputs + 1))
    if isinstance(outputs, str):
        return (outputs,)
    if not isinstance(outputs, Iterable):
        raise ConfigError(f"outputs must be a positive integer or a list of names, got {outputs!r}")
    names = tuple(str(o) for o in outputs)
    if not names:
        raise ConfigError("Output name list is empty")
    return names


def parse_type(type):
    if type is None or type == "a":
        return Superimposed()
    if type == "f":
        return Filled()
    if isinstance(type, str) and type.strip().isdigit():
        return MovingAverage(int(type))
    if isinstance(type, Integral) and not isinstance(type, bool) and type >= 0:
        return MovingAverage(int(type))
    raise ConfigError(f"Unknown type: {type!r}")


def parse_layout(layout, num_outputs):
    if layout is None:
        return (num_outputs,)
    if isinstance(layout, Integral):
        layout = [layout]
    groups = tuple(layout)
    if not groups or any(isinstance(n, bool) or not isinstance(n, Integral) or n <= 0 for n in groups):
        raise ConfigError(f"Layout must be a list of positive integers, got {layout!r}")
    if sum(groups) != num_outputs:
        raise ConfigError(f"Layout {list(groups)} sums to {sum(groups)}, expected {num_outputs} outputs")
    return tuple(int(n) for n in groups)


def parse_scale(scale, num_outputs):
    if scale is None:
        return np.ones(num_outputs)
    s = np.atleast_1d(np.asarray(scale, dtype=float))
    if s.size == 1:
        return np.full(num_outputs, s[0])
    if s.size != num_outputs:
        raise ConfigError(f"Scale has {s.size} values, expected 1 or {num_outputs}")
    return s


def resolve_config(first, outputs=None, type=None, layout=None, scale=None, iters=0, colors=None):
    """Fill in defaults from the first run's matrix and validate every parameter."""
    names = parse_output_names(first.shape[1] if outputs is None else outputs)
    mode = parse_type(type)
    layout = parse_layout(layout, len(names))
    scale = parse_scale(scale, len(names))

    if iters is None or iters == 0:
        iters = first.shape[0]
    if isinstance(iters, bool) or not isinstance(iters, Real) or iters < 0 or not float(iters).is_integer():
        raise ConfigError(f"iters must be a non-negative integer, got {iters!r}")
    iters = int(iters)
    if isinstance(mode, MovingAverage) and mode.window >= iters:
        raise ConfigError(f"Moving average window {mode.window} must be smaller than iters ({iters})")

    colors = DEFAULT_COLORS if colors is None else tuple(colors)
    if not colors:
        raise ConfigError("Color list is empty")
    if max(layout) > len(colors):
        print(f"[WARN] {max(layout)} outputs in one figure but only {len(colors)} colors; "
              "colors will repeat.", file=sys.stderr)

    return PlotConfig(outputs=names, mode=mode, layout=layout, scale=scale, iters=iters, colors=colors)


def _finish_axes(ax, cfg):
    ax.set_xlim(0, cfg.iters)
    ax.legend()
    ax.set_xlabel("Iterations")
    ax.set_ylabel("Value")


def _color(cfg, i, i1):
    return cfg.colors[(i - i1) % len(cfg.colors)]


def plot_superimposed(axes, all_data, cfg):
    x = np.arange(1, cfg.iters + 1)
    for ax, (i1, i2) in zip(axes, cfg.groups()):
        for f in range(all_data.shape[2]):
            for i in range(i1, i2):
                # only the first replication is labelled so each output appears once in the legend
                ax.plot(x, all_data[i, :, f] * cfg.scale[i], color=_color(cfg, i, i1),
                        label=cfg.outputs[i] if f == 0 else None)
        _finish_axes(ax, cfg)
    return all_data


def plot_filled(axes, all_data, cfg):
    d = extremes(all_data)
    x = np.arange(1, cfg.iters + 1)
    for ax, (i1, i2) in zip(axes, cfg.groups()):
        for i in range(i1, i2):
            ax.fill_between(x, d[i, :, 0] * cfg.scale[i], d[i, :, 1] * cfg.scale[i],
                            facecolor=_color(cfg, i, i1), label=cfg.outputs[i])
        _finish_axes(ax, cfg)
    return d


def plot_moving_average(axes, all_data, cfg):
    w = cfg.mode.window
    d = replication_mavg(all_data, w)
    x = np.arange(w + 1, cfg.iters + 1)
    for ax, (i1, i2) in zip(axes, cfg.groups()):
        for i in range(i1, i2):
            ax.plot(x, d[i, :] * cfg.scale[i], color=_color(cfg, i, i1), label=cfg.outputs[i])
        _finish_axes(ax, cfg)
    return d


_RENDERERS = {
    Superimposed: plot_superimposed,
    Filled: plot_filled,
    MovingAverage: plot_moving_average,
}


def output_plot(folder, files, outputs=None, type=None, layout=None, scale=None, iters=0, colors=None):
    """Plot time-series simulation output from one or more replications.

    folder  - folder containing simulation output files.
    files   - file name pattern, shell wildcards allowed.
    outputs - number of outputs per file or a list of output names; with a
              count, names are 'o1', 'o2', ... (default: columns of the
              first file).
    type    - 'a' superimposed (default), 'f' filled min/max envelope, or a
              non-negative integer w for a moving average of the
              replication mean over w + 1 iterations.
    layout  - number of outputs drawn in each figure, one entry per figure
              (default: all outputs in one figure).
    scale   - multiplier per output, or one value for all (default 1).
    iters   - number of iterations to plot (default 0, i.e. all).
    colors  - colors for the outputs of each figure, by position
              (default b, r, g, c, m, y, k).

    Returns PlotResult(data, figures). data has outputs on the first axis
    and iterations on the second; the third axis is the replication for
    'a' and (min, max) for 'f'. A moving average returns a 2D array of
    shape (outputs, iters - w).
    """
    listing = discover_files(folder, files)

    # First file provides the defaults
    cfg = resolve_config(read_matrix(listing[0]), outputs=outputs, type=type, layout=layout,
                         scale=scale, iters=iters, colors=colors)

    all_data = load_runs(listing, cfg.num_outputs, cfg.iters)

    figures, axes = [], []
    for _ in cfg.layout:
        fig = plt.figure()
        ax = fig.add_subplot()
        ax.grid(True)
        figures.append(fig)
        axes.append(ax)

    d = _RENDERERS[cfg.mode.__class__](axes, all_data, cfg)
    return PlotResult(d, figures)

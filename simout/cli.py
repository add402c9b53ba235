# cli.py — Plot replicated simulation output files and save the figures as PNG.
# Outputs:
#   <outdir>/<prefix>_1.png, <prefix>_2.png, ...   — one figure per layout group
#   <outdir>/<prefix>_data.csv                       — plotted data (with --save-data)
#
# Usage:
#   simout-plot results "stats*.txt" --outputs prey predators grass --type f --layout 2 1 --outdir figs
#   python -m simout.cli results "stats*.txt" --type 10 --scale 0.001
import argparse, os, sys
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from .errors import SimoutError
from .output_plot import output_plot


def parse_outputs(values):
    if not values:
        return None
    if len(values) == 1 and values[0].isdigit():
        return int(values[0])
    return values


def data_frame(d, names, series=None, start=1):
    """Flatten plotted data to one row per curve, one column per iteration.

    3D data gets a (output, series) row index; series defaults to the
    replication number. Columns are named after the iteration they
    hold, counting from start.
    """
    if d.ndim == 2:
        df = pd.DataFrame(d, index=pd.Index(names, name="output"))
    else:
        labels = series or [str(k + 1) for k in range(d.shape[2])]
        rows = {(names[i], labels[k]): d[i, :, k] for i in range(d.shape[0]) for k in range(d.shape[2])}
        index = pd.MultiIndex.from_tuples(list(rows), names=["output", "series"])
        df = pd.DataFrame(np.array(list(rows.values())), index=index)
    df.columns = [f"it{c}" for c in range(start, start + df.shape[1])]
    return df


def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot time-series output from replicated simulation runs.")
    ap.add_argument("folder", help="Folder containing simulation output files.")
    ap.add_argument("files", help="File name pattern (quote wildcards).")
    ap.add_argument("--outputs", nargs="+", default=None, help="Number of outputs or output names.")
    ap.add_argument("--type", default="a", help="'a' superimposed, 'f' filled extremes, or moving average window w.")
    ap.add_argument("--layout", type=int, nargs="+", default=None, help="Outputs per figure.")
    ap.add_argument("--scale", type=float, nargs="+", default=None, help="One multiplier, or one per output.")
    ap.add_argument("--iters", type=int, default=0, help="Iterations to plot (0 = all).")
    ap.add_argument("--colors", nargs="+", default=None)
    ap.add_argument("--outdir", default="figs")
    ap.add_argument("--prefix", default="output")
    ap.add_argument("--save-data", action="store_true", help="Also write the plotted data as CSV.")
    args = ap.parse_args(argv)

    try:
        d, figs = output_plot(args.folder, args.files, outputs=parse_outputs(args.outputs),
                              type=args.type, layout=args.layout, scale=args.scale,
                              iters=args.iters, colors=args.colors)
    except SimoutError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    os.makedirs(args.outdir, exist_ok=True)
    for k, fig in enumerate(figs, start=1):
        out = os.path.join(args.outdir, f"{args.prefix}_{k}.png")
        fig.tight_layout()
        fig.savefig(out, dpi=200)
        plt.close(fig)
        print(f"[OK] wrote {out}")

    if args.save_data:
        names = parse_outputs(args.outputs)
        if names is None or isinstance(names, int):
            names = [f"o{i + 1}" for i in range(d.shape[0])]
        out = os.path.join(args.outdir, f"{args.prefix}_data.csv")
        series = ["min", "max"] if args.type == "f" else None
        start = int(args.type) + 1 if d.ndim == 2 else 1
        data_frame(d, names, series, start).to_csv(out)
        print(f"[OK] wrote {out} shape={np.shape(d)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

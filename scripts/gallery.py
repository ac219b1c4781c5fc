"""Render the z = 0 slice of every catalog shape on one page.

Each panel shows the distance field as a diverging colour map with the
zero level set drawn in black, which is enough to eyeball sign conventions
and blend radii without a 3-D viewer.

Usage::

    python scripts/gallery.py                      # saves gallery.png
    python scripts/gallery.py --out my_file.png
    python scripts/gallery.py --res 128 --time 1.5

Requirements: numpy, matplotlib
    pip install "sdfcat[plot]"
"""
from __future__ import annotations

import argparse
import os
import sys

# Ensure the repo root (parent of scripts/) is importable regardless of cwd
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import matplotlib.pyplot as plt
import numpy as np

import sdfcat


def _slice_points(n: int, lo: float = -1.0, hi: float = 1.0) -> np.ndarray:
    coords = np.linspace(lo, hi, n)
    Y, X = np.meshgrid(coords, coords, indexing="ij")
    return np.stack([X, Y, np.zeros_like(X)], axis=-1)


def render_gallery(out_path: str, ncols: int = 8, res: int = 96,
                   time: float = 0.0, seed: int = 12345) -> None:
    names = sdfcat.list_available()
    nrows = (len(names) + ncols - 1) // ncols
    fig, axes = plt.subplots(nrows, ncols, figsize=(ncols * 2.2, nrows * 2.2),
                             facecolor="#111111", squeeze=False)

    p = _slice_points(res)
    for ax, name in zip(axes.flat, names):
        phi = sdfcat.evaluate(name, p, time, seed)
        lim = max(np.nanmax(np.abs(phi)), 1e-6)
        ax.imshow(phi, origin="lower", extent=(-1, 1, -1, 1), cmap="RdBu",
                  vmin=-lim, vmax=lim)
        if np.nanmin(phi) < 0.0 < np.nanmax(phi):
            ax.contour(phi, levels=[0.0], colors="black", linewidths=0.8,
                       extent=(-1, 1, -1, 1))
        ax.set_title(name, color="white", fontsize=6.5, pad=1)
        ax.set_axis_off()

    for ax in list(axes.flat)[len(names):]:
        ax.set_visible(False)

    fig.suptitle(f"sdfcat: z = 0 slices (t = {time}, seed = {seed})",
                 color="white", fontsize=12)
    plt.tight_layout(pad=0.3)
    fig.savefig(out_path, dpi=160, bbox_inches="tight", facecolor=fig.get_facecolor())
    plt.close(fig)
    print(f"Saved: {out_path}")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Render a z = 0 slice of every catalog shape to a PNG."
    )
    parser.add_argument("--out", default="gallery.png", help="Output PNG path")
    parser.add_argument("--cols", type=int, default=8, help="Number of columns (default 8)")
    parser.add_argument("--res", type=int, default=96, help="Pixels per panel side (default 96)")
    parser.add_argument("--time", type=float, default=0.0, help="Animation time")
    parser.add_argument("--seed", type=int, default=12345, help="Procedural seed")
    args = parser.parse_args()

    render_gallery(args.out, ncols=args.cols, res=args.res, time=args.time, seed=args.seed)


if __name__ == "__main__":
    main()

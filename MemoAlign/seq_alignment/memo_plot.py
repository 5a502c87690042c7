"""
Memo table heatmap with the traceback path drawn on top
"""
from typing import Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .memo_table import MemoTable
from .scoring import Penalties
from .traceback import traceback_path


def plot_memo(
    table: MemoTable,
    s: str,
    t: str,
    penalties: Optional[Penalties] = None,
    path: Optional[str] = None,
    figsize: Tuple[int, int] = (8, 6),
    annotate: bool = True,
    cmap: str = "viridis",
    title: Optional[str] = None,
) -> plt.Figure:
    """
    Draw the memo table as a heatmap (rows = prefixes of s, columns =
    prefixes of t). Uncomputed cells stay blank.
    - With ``penalties`` and a scored corner cell, the traceback path is overlaid.
    - With ``path``, the figure is also saved there.
    """
    grid = np.ma.masked_invalid(table.to_array())
    rows, cols = table.shape

    fig, ax = plt.subplots(figsize=figsize)
    im = ax.imshow(grid, cmap=cmap, aspect="auto")
    fig.colorbar(im, ax=ax, label="score")

    ax.set_xticks(range(cols))
    ax.set_xticklabels([f"{t[c]}\n{c}" if c < len(t) else str(c) for c in range(cols)])
    ax.set_yticks(range(rows))
    ax.set_yticklabels([f"{s[r]} {r}" if r < len(s) else str(r) for r in range(rows)])
    ax.xaxis.tick_top()

    if annotate:
        for r in range(rows):
            for c in range(cols):
                value = table.peek(r, c)
                ax.text(c, r, "inf" if value is None else str(value),
                        ha="center", va="center", fontsize=8, color="w")

    if penalties is not None and table.is_set(len(s) - 1, len(t) - 1):
        cells = [(r, c) for r, c, _ in traceback_path(table, s, t, penalties)]
        cells.append((0, 0))
        ys, xs = zip(*cells)
        ax.plot(xs, ys, "r-o", lw=2, ms=4)

    if title:
        ax.set_title(title, fontweight="bold")

    plt.tight_layout()
    if path is not None:
        fig.savefig(path)
    return fig

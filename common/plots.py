# common/plots.py
from __future__ import annotations
from typing import Optional

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

DEFAULT_FIGSIZE = (6.6, 2.6)  # compact, fits next to the stats table
HOME_COLOR = "#16A34A"
AWAY_COLOR = "#2563EB"

def _new_ax(ax=None):
    """Return a compact figure/axes when ax is None; otherwise reuse the axes."""
    if ax is None:
        fig, ax = plt.subplots(figsize=DEFAULT_FIGSIZE, constrained_layout=True)
    else:
        fig = ax.figure
    return fig, ax

# --- color helpers for outlines on light colors ---
def _hex_to_rgb01(hexs: str):
    h = hexs.strip().lstrip("#")
    r = int(h[0:2], 16) / 255.0
    g = int(h[2:4], 16) / 255.0
    b = int(h[4:6], 16) / 255.0
    return r, g, b

def _is_light_color(hexs: str, thr: float = 0.90) -> bool:
    """Perceived luminance threshold (Y) to decide if we need an outline."""
    try:
        r, g, b = _hex_to_rgb01(hexs)
        Y = 0.2126*r + 0.7152*g + 0.0722*b
        return Y >= thr
    except ValueError:
        return False

def _edge_kw_for(hexs: str) -> dict:
    """Return edgecolor/linewidth kwargs for bars when color is very light."""
    return {"edgecolor": "black", "linewidth": 1.0} if _is_light_color(hexs) else {}


# --- Home vs away counters (mirror horizontal bars) ---
def plot_stat_comparison(comparison: pd.DataFrame,
                         home_color: str = HOME_COLOR,
                         away_color: str = AWAY_COLOR,
                         ax: Optional[plt.Axes] = None) -> plt.Axes:
    """
    Draw home counters to the left and away counters to the right of a zero
    line, one row per stat. Expects the frame built by
    `controllers.stats_controller.compute_event_stats`.
    """
    fig, ax = _new_ax(ax)
    if comparison.empty:
        ax.set_axis_off()
        return ax

    labels = comparison["Stat"].tolist()
    home = comparison["HomeValue"].to_numpy(dtype=float)
    away = comparison["AwayValue"].to_numpy(dtype=float)
    y = np.arange(len(labels), dtype=float)

    home_name = str(comparison["HomeName"].iloc[0]) if "HomeName" in comparison else "Local"
    away_name = str(comparison["AwayName"].iloc[0]) if "AwayName" in comparison else "Visitante"

    ax.barh(y, -home, color=home_color, label=home_name, **_edge_kw_for(home_color))
    ax.barh(y, away, color=away_color, label=away_name, **_edge_kw_for(away_color))
    ax.axvline(0, color="black", linewidth=1)

    span = float(max(1.0, np.nanmax(np.r_[home, away])))
    ax.set_xlim(-span * 1.25, span * 1.25)
    ax.set_yticks(y, labels)
    ax.invert_yaxis()
    ax.set_xticks([])
    ax.tick_params(axis="both", labelsize=6)

    for yi, h, a in zip(y, home, away):
        ax.text(-h - span * 0.03, yi, f"{h:.0f}", va="center", ha="right", fontsize=6)
        ax.text(a + span * 0.03, yi, f"{a:.0f}", va="center", ha="left", fontsize=6)

    ax.legend(loc="lower right", fontsize=6, frameon=False)
    return ax

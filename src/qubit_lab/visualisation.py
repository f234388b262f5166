"""Static matplotlib figures for Bloch points and Bell measurement statistics."""

####### Imports #######

from typing import Dict, Iterable, Tuple

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from .bell_states import OUTCOMES
from .qubit_state import BlochCoordinates


####### Bloch sphere #######

def plot_bloch_point(coords: BlochCoordinates, title: str = "Bloch sphere") -> Figure:
    fig = plt.figure(figsize=(5, 5))
    ax = fig.add_subplot(111, projection="3d")

    # Sphere
    u = np.linspace(0, 2*np.pi, 60)
    v = np.linspace(0, np.pi, 30)
    xs = np.outer(np.cos(u), np.sin(v))
    ys = np.outer(np.sin(u), np.sin(v))
    zs = np.outer(np.ones_like(u), np.cos(v))
    ax.plot_surface(xs, ys, zs, alpha=0.12, linewidth=0)

    # Axis
    ax.plot([-1,1],[0,0],[0,0]); ax.text(1.1,0,0,"X")
    ax.plot([0,0],[-1,1],[0,0]); ax.text(0,1.1,0,"Y")
    ax.plot([0,0],[0,0],[-1,1]); ax.text(0,0,1.1,"|0⟩"); ax.text(0,0,-1.2,"|1⟩")
    ax.set_xlim([-1,1]); ax.set_ylim([-1,1]); ax.set_zlim([-1,1])
    ax.set_box_aspect([1,1,1])
    ax.set_xlabel("X"); ax.set_ylabel("Y"); ax.set_zlabel("Z")

    # State vector
    ax.quiver(0, 0, 0, coords.x, coords.y, coords.z, color="red", linewidth=2, arrow_length_ratio=0.1)
    ax.scatter([coords.x], [coords.y], [coords.z], s=50, c="red")
    ax.set_title(f"{title}\nθ={coords.theta:.3f}, φ={coords.phi:.3f}")
    return fig


####### Measurement statistics #######

def plot_outcome_counts(counts: Dict[str, int], title: str = "Measurement outcomes") -> Figure:
    values = [int(counts.get(key, 0)) for key in OUTCOMES]
    fig, ax = plt.subplots(figsize=(6, 3.2))
    ax.bar([f"|{key}⟩" for key in OUTCOMES], values, color=["#00b4d8", "#0077b6", "#90e0ef", "#023e8a"])
    ax.set_xlabel("Outcome")
    ax.set_ylabel("Count")
    ax.set_title(title)
    ax.grid(True, axis="y", alpha=0.25)
    return fig


def plot_correlation_history(history: Iterable[Tuple[int, float]], title: str = "Correlation |r|(n)") -> Figure:
    """
    Plots |correlation| against the number of measurements.

    Args:
        history: list of (n, |r|) as returned by correlation_history.
    """
    pts = np.asarray(list(history), dtype=float)
    if pts.size == 0:
        raise ValueError("List 'history' is empty.")
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError("`history` must have shape (N, 2).")

    fig, ax = plt.subplots(figsize=(6, 3.2))
    ax.plot(pts[:, 0], pts[:, 1], linewidth=2)
    ax.set_xlabel("Measurements")
    ax.set_ylabel("|Correlation|")
    ax.set_title(title)
    ax.set_ylim(0, 1.05)
    ax.grid(True, alpha=0.25)
    return fig
